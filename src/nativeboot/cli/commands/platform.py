"""Platform command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nativeboot.config.models import NativeBootConfig

from nativeboot.bootstrap.naming import resource_path_for
from nativeboot.bootstrap.platform import PlatformDetector
from nativeboot.cli.commands import Command
from nativeboot.cli.exit_codes import EXIT_SUCCESS, EXIT_UNSUPPORTED_PLATFORM
from nativeboot.errors import UnsupportedPlatformError


class PlatformCommand(Command):
    """Shows the detected platform and the resource path of each library."""

    def __init__(self, detector: PlatformDetector | None = None):
        self._detector = detector

    @property
    def name(self) -> str:
        """Command identifier."""
        return "platform"

    def execute(self, args: Namespace, config: "NativeBootConfig") -> int:
        """Execute the platform command.

        Returns:
            EXIT_SUCCESS, or EXIT_UNSUPPORTED_PLATFORM if detection fails.
        """
        detector = self._detector or PlatformDetector(map_files_dir=config.map_files_dir)
        try:
            info = detector.detect()
        except UnsupportedPlatformError as e:
            print(f"Unsupported platform: {e}")
            return EXIT_UNSUPPORTED_PLATFORM

        print(f"OS:           {info.os.value}")
        print(f"Architecture: {info.arch.value}")
        print(f"Platform:     {info.path_segment}")
        print()
        print("Libraries:")
        for name in config.libraries:
            print(f"  {name}: {resource_path_for(name, info, config.resource_root)}")
        return EXIT_SUCCESS
