"""Tests for nativeboot.cli.commands."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

from nativeboot.cli.commands import ExtractCommand, LoadCommand, PlatformCommand, StatusCommand
from nativeboot.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_ISSUES_FOUND,
    EXIT_LOAD_FAILURE,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED_PLATFORM,
)
from nativeboot.config.models import NativeBootConfig
from nativeboot.loader import NativeLibLoader


class TestPlatformCommand:
    """Tests for PlatformCommand."""

    def test_name(self) -> None:
        assert PlatformCommand().name == "platform"

    def test_prints_platform(self, make_detector, capsys) -> None:
        cmd = PlatformCommand(detector=make_detector("Windows 10", "amd64"))

        result = cmd.execute(Namespace(), NativeBootConfig())

        assert result == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Platform:     windows/x86_64" in out
        assert "xgboost4j: /lib/windows/x86_64/xgboost4j.dll" in out

    def test_unsupported(self, make_detector, capsys) -> None:
        cmd = PlatformCommand(detector=make_detector("Linux", "ppc64le"))

        assert cmd.execute(Namespace(), NativeBootConfig()) == EXIT_UNSUPPORTED_PLATFORM
        assert "Unsupported platform" in capsys.readouterr().out


class TestStatusCommand:
    """Tests for StatusCommand."""

    def test_all_present(self, make_detector, resources, capsys) -> None:
        cmd = StatusCommand(detector=make_detector(), resources=resources)

        result = cmd.execute(Namespace(json=False), NativeBootConfig())

        assert result == EXIT_SUCCESS
        assert "[OK] xgboost4j: present" in capsys.readouterr().out

    def test_missing_reports_issues(self, make_detector, resources, capsys) -> None:
        cmd = StatusCommand(detector=make_detector(), resources=resources)
        config = NativeBootConfig(libraries=["xgboost4j", "other"])

        result = cmd.execute(Namespace(json=True), config)

        assert result == EXIT_ISSUES_FOUND
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "platform": "linux/x86_64",
            "libraries": {"xgboost4j": "present", "other": "missing"},
        }

    def test_unsupported(self, make_detector, resources) -> None:
        cmd = StatusCommand(detector=make_detector("AIX", "x86_64"), resources=resources)
        assert cmd.execute(Namespace(json=False), NativeBootConfig()) == EXIT_UNSUPPORTED_PLATFORM


class TestExtractCommand:
    """Tests for ExtractCommand."""

    def test_prints_temp_path(self, resources, temp_dir, capsys) -> None:
        cmd = ExtractCommand(resources=resources)
        config = NativeBootConfig(temp_dir=str(temp_dir))

        result = cmd.execute(Namespace(resource="/lib/linux/x86_64/libxgboost4j.so"), config)

        assert result == EXIT_SUCCESS
        printed = Path(capsys.readouterr().out.strip())
        assert printed.parent == temp_dir
        assert printed.name.startswith("libxgboost4j")

    def test_invalid_path(self, resources, temp_dir) -> None:
        cmd = ExtractCommand(resources=resources)
        config = NativeBootConfig(temp_dir=str(temp_dir))
        assert cmd.execute(Namespace(resource="/ab.so"), config) == EXIT_INVALID_USAGE

    def test_missing_resource(self, resources, temp_dir) -> None:
        cmd = ExtractCommand(resources=resources)
        config = NativeBootConfig(temp_dir=str(temp_dir))
        assert cmd.execute(Namespace(resource="/lib/none/libfoo.so"), config) == EXIT_LOAD_FAILURE


class TestLoadCommand:
    """Tests for LoadCommand."""

    def test_success(self, make_detector, resources, temp_dir, capsys) -> None:
        loader = NativeLibLoader(
            resources=resources,
            detector=make_detector("Linux", "aarch64"),
            load_library=MagicMock(return_value="handle"),
            temp_dir=temp_dir,
        )

        result = LoadCommand(loader=loader).execute(Namespace(), NativeBootConfig())

        assert result == EXIT_SUCCESS
        assert "Loaded xgboost4j for platform linux/aarch64" in capsys.readouterr().out

    def test_link_failure(self, make_detector, resources, temp_dir) -> None:
        loader = NativeLibLoader(
            resources=resources,
            detector=make_detector(),
            load_library=MagicMock(side_effect=OSError("libgomp.so.1: cannot open")),
            temp_dir=temp_dir,
        )
        assert LoadCommand(loader=loader).execute(Namespace(), NativeBootConfig()) == EXIT_LOAD_FAILURE

    def test_unsupported(self, make_detector) -> None:
        loader = NativeLibLoader(detector=make_detector("Haiku", "x86_64"))
        result = LoadCommand(loader=loader).execute(Namespace(), NativeBootConfig())
        assert result == EXIT_UNSUPPORTED_PLATFORM

    def test_builds_loader_from_config(self, make_detector, temp_dir) -> None:
        cmd = LoadCommand(detector=make_detector("FreeBSD", "amd64"))
        config = NativeBootConfig(temp_dir=str(temp_dir))
        assert cmd.execute(Namespace(), config) == EXIT_UNSUPPORTED_PLATFORM
