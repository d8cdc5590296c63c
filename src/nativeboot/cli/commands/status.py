"""Status command implementation."""

from __future__ import annotations

import json
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nativeboot.config.models import NativeBootConfig

from nativeboot.bootstrap.extract import ResourceRoot, resource_root_for
from nativeboot.bootstrap.platform import PlatformDetector
from nativeboot.bootstrap.validation import LibraryStatus, validate_libraries
from nativeboot.cli.commands import Command
from nativeboot.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_ISSUES_FOUND,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED_PLATFORM,
)
from nativeboot.core.logging import get_logger
from nativeboot.errors import ConfigError, UnsupportedPlatformError

LOGGER = get_logger(__name__)


class StatusCommand(Command):
    """Reports which libraries are bundled for the current platform."""

    def __init__(
        self,
        detector: PlatformDetector | None = None,
        resources: ResourceRoot | None = None,
    ):
        self._detector = detector
        self._resources = resources

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "NativeBootConfig") -> int:
        """Execute the status command.

        Returns:
            EXIT_SUCCESS if every library is bundled, EXIT_ISSUES_FOUND if
            any is missing, EXIT_UNSUPPORTED_PLATFORM if detection fails,
            EXIT_INVALID_USAGE if the resource package cannot be imported.
        """
        detector = self._detector or PlatformDetector(map_files_dir=config.map_files_dir)
        try:
            info = detector.detect()
        except UnsupportedPlatformError as e:
            print(f"Unsupported platform: {e}")
            return EXIT_UNSUPPORTED_PLATFORM

        try:
            resources = self._resources or resource_root_for(config.package)
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        result = validate_libraries(config.libraries, info, resources, config.resource_root)

        if getattr(args, "json", False):
            print(json.dumps({"platform": info.path_segment, "libraries": result.to_dict()}, indent=2))
        else:
            print(f"Platform: {info.path_segment}")
            print()
            for name in config.libraries:
                status = result.get_status(name)
                marker = "[OK]" if status == LibraryStatus.PRESENT else "[!!]"
                print(f"  {marker} {name}: {status.value} ({result.paths[name]})")

        return EXIT_SUCCESS if result.all_valid() else EXIT_ISSUES_FOUND
