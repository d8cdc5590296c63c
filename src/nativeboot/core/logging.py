"""Logging setup for nativeboot.

Library modules obtain loggers through :func:`get_logger` and never install
handlers themselves. The CLI calls :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "nativeboot"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_HANDLER_ATTR = "_nativeboot_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the nativeboot hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _resolve_level(debug: bool, verbose: bool, quiet: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the nativeboot root logger.

    Precedence: debug > verbose > quiet > default (warning).
    Calling this more than once replaces the previously installed handler.

    Args:
        debug: Enable debug output.
        verbose: Enable info output.
        quiet: Only show errors.
        stream: Stream for the handler (defaults to stderr).

    Returns:
        The configured root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = _resolve_level(debug, verbose, quiet)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
