"""Extract command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nativeboot.config.models import NativeBootConfig

from nativeboot.bootstrap.extract import (
    ResourceRoot,
    create_temp_file_from_resource,
    resource_root_for,
)
from nativeboot.cli.commands import Command
from nativeboot.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_LOAD_FAILURE, EXIT_SUCCESS
from nativeboot.core.logging import get_logger
from nativeboot.errors import ConfigError, InvalidResourcePathError

LOGGER = get_logger(__name__)


class ExtractCommand(Command):
    """Copies a packaged resource to a temp file and prints its path."""

    def __init__(self, resources: ResourceRoot | None = None):
        self._resources = resources

    @property
    def name(self) -> str:
        """Command identifier."""
        return "extract"

    def execute(self, args: Namespace, config: "NativeBootConfig") -> int:
        """Execute the extract command.

        Note that the temp file is removed when this process exits.

        Returns:
            EXIT_SUCCESS, EXIT_INVALID_USAGE for a malformed path or an
            unimportable resource package, or EXIT_LOAD_FAILURE if the
            resource cannot be copied.
        """
        try:
            resources = self._resources or resource_root_for(config.package)
            temp_path = create_temp_file_from_resource(
                args.resource, resources, temp_dir=config.temp_dir
            )
        except (ConfigError, InvalidResourcePathError) as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE
        except OSError as e:
            LOGGER.error(f"Failed to extract {args.resource}: {e}")
            return EXIT_LOAD_FAILURE

        print(temp_path)
        return EXIT_SUCCESS
