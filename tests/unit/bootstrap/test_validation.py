"""Tests for nativeboot.bootstrap.validation."""

from __future__ import annotations

from pathlib import Path

from nativeboot.bootstrap.platform import Architecture, OperatingSystem, PlatformInfo
from nativeboot.bootstrap.validation import (
    LibraryStatus,
    LibraryValidationResult,
    validate_libraries,
    validate_resource,
)

LINUX_X86 = PlatformInfo(os=OperatingSystem.LINUX, arch=Architecture.X86_64)


class TestValidateResource:
    """Tests for validate_resource."""

    def test_present(self, resources: Path) -> None:
        status = validate_resource(resources, "/lib/linux/x86_64/libxgboost4j.so")
        assert status == LibraryStatus.PRESENT

    def test_missing(self, resources: Path) -> None:
        status = validate_resource(resources, "/lib/solaris/sparc/libxgboost4j.so")
        assert status == LibraryStatus.MISSING

    def test_empty(self, tmp_path: Path) -> None:
        (tmp_path / "libempty.so").write_bytes(b"")
        assert validate_resource(tmp_path, "/libempty.so") == LibraryStatus.EMPTY


class TestValidateLibraries:
    """Tests for validate_libraries."""

    def test_all_present(self, resources: Path) -> None:
        result = validate_libraries(["xgboost4j"], LINUX_X86, resources)

        assert result.all_valid()
        assert result.paths["xgboost4j"] == "/lib/linux/x86_64/libxgboost4j.so"
        assert result.to_dict() == {"xgboost4j": "present"}

    def test_missing_library(self, resources: Path) -> None:
        result = validate_libraries(["xgboost4j", "extra"], LINUX_X86, resources)

        assert not result.all_valid()
        assert result.missing_libraries() == ["extra"]
        assert result.get_status("extra") == LibraryStatus.MISSING


class TestLibraryValidationResult:
    """Tests for LibraryValidationResult."""

    def test_empty_result_is_valid(self) -> None:
        assert LibraryValidationResult().all_valid()

    def test_unknown_library_reports_missing(self) -> None:
        assert LibraryValidationResult().get_status("nope") == LibraryStatus.MISSING
