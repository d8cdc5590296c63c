"""CLI runner for nativeboot."""

from __future__ import annotations

from argparse import Namespace
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Iterable, Optional

from nativeboot.cli.arguments import build_parser
from nativeboot.cli.commands import (
    Command,
    ExtractCommand,
    LoadCommand,
    PlatformCommand,
    StatusCommand,
)
from nativeboot.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from nativeboot.config.loader import load_config
from nativeboot.core.logging import configure_logging, get_logger
from nativeboot.errors import ConfigError

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Return the installed nativeboot version."""
    try:
        return version("nativeboot")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from nativeboot import __version__

        return __version__


def _cli_overrides(args: Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.package:
        overrides["package"] = args.package
    if args.libraries:
        overrides["libraries"] = list(args.libraries)
    return overrides


class CLIRunner:
    """Parses arguments, loads config and dispatches to a command."""

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {
            command.name: command
            for command in (PlatformCommand(), StatusCommand(), ExtractCommand(), LoadCommand())
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        parser = build_parser()
        args = parser.parse_args(list(argv) if argv is not None else None)

        # Configure logging as early as possible.
        configure_logging(debug=args.debug, verbose=args.verbose, quiet=args.quiet)

        if args.version:
            print(get_version())
            return EXIT_SUCCESS

        if not args.command:
            parser.print_help()
            return EXIT_INVALID_USAGE

        try:
            config = load_config(config_path=args.config, overrides=_cli_overrides(args))
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        LOGGER.debug(f"Running '{args.command}' with config from {config.sources or ['defaults']}")
        return self._commands[args.command].execute(args, config)
