"""Tests for nativeboot.config.validation."""

from __future__ import annotations

from nativeboot.config.validation import validate_config


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_config(self) -> None:
        data = {
            "package": "nativeboot",
            "resource_root": "/lib",
            "libraries": ["xgboost4j"],
            "map_files_dir": "/proc/self/map_files",
            "temp_dir": None,
        }
        assert validate_config(data, source="test.yml") == []

    def test_unknown_key_with_suggestion(self) -> None:
        warnings = validate_config({"librarys": ["x"]}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].key == "librarys"
        assert warnings[0].suggestion == "libraries"

    def test_wrong_type(self) -> None:
        warnings = validate_config({"libraries": "xgboost4j"}, source="test.yml")
        assert "must be a list" in warnings[0].message

    def test_bad_library_entry(self) -> None:
        warnings = validate_config({"libraries": ["ok", ""]}, source="test.yml")
        assert warnings[0].message == "'libraries[1]' must be a non-empty string"

    def test_relative_resource_root(self) -> None:
        warnings = validate_config({"resource_root": "lib"}, source="test.yml")
        assert warnings[0].key == "resource_root"

    def test_non_mapping(self) -> None:
        warnings = validate_config(["a"], source="test.yml")  # type: ignore[arg-type]
        assert "must be a mapping" in warnings[0].message

    def test_warnings_are_logged(self, caplog) -> None:
        caplog.set_level("WARNING", logger="nativeboot")
        validate_config({"pakage": "x"}, source="nativeboot.yml")
        assert "did you mean 'package'?" in caplog.text
