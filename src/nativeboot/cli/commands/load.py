"""Load command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from nativeboot.config.models import NativeBootConfig

from nativeboot.cli.commands import Command
from nativeboot.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_LOAD_FAILURE,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED_PLATFORM,
)
from nativeboot.core.logging import get_logger
from nativeboot.errors import ConfigError, UnsupportedPlatformError
from nativeboot.loader import NativeLibLoader

LOGGER = get_logger(__name__)


class LoadCommand(Command):
    """Loads the configured libraries to check that they link."""

    def __init__(self, loader: Optional[NativeLibLoader] = None, **loader_kwargs: Any):
        self._loader = loader
        self._loader_kwargs = loader_kwargs

    @property
    def name(self) -> str:
        """Command identifier."""
        return "load"

    def execute(self, args: Namespace, config: "NativeBootConfig") -> int:
        """Execute the load command.

        Returns:
            EXIT_SUCCESS, EXIT_INVALID_USAGE, EXIT_UNSUPPORTED_PLATFORM, or
            EXIT_LOAD_FAILURE.
        """
        try:
            loader = self._loader or NativeLibLoader.from_config(config, **self._loader_kwargs)
            loader.ensure_loaded()
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE
        except UnsupportedPlatformError as e:
            print(f"Unsupported platform: {e}")
            return EXIT_UNSUPPORTED_PLATFORM
        except OSError as e:
            print(f"Load failed: {e}")
            return EXIT_LOAD_FAILURE

        print(f"Loaded {', '.join(loader.libraries)} for platform {loader.platform}")
        return EXIT_SUCCESS
