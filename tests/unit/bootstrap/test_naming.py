"""Tests for nativeboot.bootstrap.naming."""

from __future__ import annotations

import pytest

from nativeboot.bootstrap.naming import map_library_name, resource_path_for
from nativeboot.bootstrap.platform import Architecture, OperatingSystem, PlatformInfo


class TestMapLibraryName:
    """Tests for map_library_name."""

    @pytest.mark.parametrize(
        "os, expected",
        [
            (OperatingSystem.WINDOWS, "xgboost4j.dll"),
            (OperatingSystem.MACOS, "libxgboost4j.dylib"),
            (OperatingSystem.LINUX, "libxgboost4j.so"),
            (OperatingSystem.LINUX_MUSL, "libxgboost4j.so"),
            (OperatingSystem.SOLARIS, "libxgboost4j.so"),
        ],
    )
    def test_per_os(self, os: OperatingSystem, expected: str) -> None:
        assert map_library_name("xgboost4j", os) == expected


class TestResourcePathFor:
    """Tests for resource_path_for."""

    def test_default_root(self) -> None:
        info = PlatformInfo(os=OperatingSystem.WINDOWS, arch=Architecture.X86_64)
        assert resource_path_for("xgboost4j", info) == "/lib/windows/x86_64/xgboost4j.dll"

    def test_custom_root_trailing_slash(self) -> None:
        info = PlatformInfo(os=OperatingSystem.LINUX_MUSL, arch=Architecture.AARCH64)
        path = resource_path_for("foo", info, resource_root="/native/")
        assert path == "/native/linux-musl/aarch64/libfoo.so"
