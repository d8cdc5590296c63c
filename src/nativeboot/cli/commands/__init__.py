"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nativeboot.config.models import NativeBootConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier.

        Returns:
            String name of the command.
        """

    @abstractmethod
    def execute(self, args: Namespace, config: "NativeBootConfig") -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Loaded nativeboot configuration.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# Import command implementations for convenience
# ruff: noqa: E402
from nativeboot.cli.commands.platform import PlatformCommand
from nativeboot.cli.commands.status import StatusCommand
from nativeboot.cli.commands.extract import ExtractCommand
from nativeboot.cli.commands.load import LoadCommand

__all__ = [
    "Command",
    "PlatformCommand",
    "StatusCommand",
    "ExtractCommand",
    "LoadCommand",
]
