"""Shared fixtures for nativeboot tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from nativeboot.bootstrap.platform import PlatformDetector

LIBRARY_BYTES = bytes(range(256)) * 20  # 5120 bytes, several copy buffers


@pytest.fixture
def resources(tmp_path: Path) -> Path:
    """A resource root holding fake native libraries for several platforms."""
    root = tmp_path / "resources"
    for relative in (
        "lib/linux/x86_64/libxgboost4j.so",
        "lib/linux/aarch64/libxgboost4j.so",
        "lib/linux-musl/x86_64/libxgboost4j.so",
        "lib/macos/aarch64/libxgboost4j.dylib",
        "lib/windows/x86_64/xgboost4j.dll",
    ):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(LIBRARY_BYTES)
    return root


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Directory receiving extracted temp files."""
    path = tmp_path / "extracted"
    path.mkdir()
    return path


@pytest.fixture
def make_detector(tmp_path: Path) -> Callable[..., PlatformDetector]:
    """Factory for detectors reporting fixed OS/architecture strings."""

    def _make(os_name: str = "Linux", machine: str = "x86_64", map_files_dir: Path | None = None):
        return PlatformDetector(
            map_files_dir=map_files_dir or tmp_path / "no-map-files",
            os_name=lambda: os_name,
            machine=lambda: machine,
        )

    return _make


@pytest.fixture(autouse=True)
def reset_nativeboot_logging():
    """Drop handlers installed by configure_logging during a test."""
    logger = logging.getLogger("nativeboot")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
