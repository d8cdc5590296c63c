"""Tests for nativeboot.core.logging."""

from __future__ import annotations

import io
import logging

import pytest

from nativeboot.core.logging import configure_logging, get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_name_kept(self) -> None:
        assert get_logger("nativeboot.loader").name == "nativeboot.loader"

    def test_foreign_name_prefixed(self) -> None:
        assert get_logger("myapp").name == "nativeboot.myapp"


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(
        "flags, level",
        [
            ({}, logging.WARNING),
            ({"verbose": True}, logging.INFO),
            ({"debug": True, "quiet": True}, logging.DEBUG),
            ({"quiet": True}, logging.ERROR),
        ],
    )
    def test_levels(self, flags, level) -> None:
        logger = configure_logging(stream=io.StringIO(), **flags)
        assert logger.level == level

    def test_replaces_previous_handler(self) -> None:
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(stream=first)
        configure_logging(stream=second)

        get_logger("nativeboot.test").warning("hello")

        assert first.getvalue() == ""
        assert "WARNING nativeboot.test: hello" in second.getvalue()
