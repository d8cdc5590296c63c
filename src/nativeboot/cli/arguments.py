"""Argument parser for the nativeboot CLI."""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="nativeboot",
        description="nativeboot - load bundled native libraries for the host platform.",
    )

    # Global options
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show nativeboot version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="Path to a nativeboot.yml config file.",
    )
    parser.add_argument(
        "--package",
        metavar="NAME",
        help="Package whose resources hold the native libraries.",
    )
    parser.add_argument(
        "--library",
        action="append",
        dest="libraries",
        metavar="NAME",
        help="Native library to load (can be specified multiple times).",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "platform",
        help="Show the detected platform and library resource paths.",
    )

    status_parser = subparsers.add_parser(
        "status",
        help="Check that the libraries are bundled for this platform.",
    )
    status_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON.",
    )

    extract_parser = subparsers.add_parser(
        "extract",
        help="Copy a packaged resource to a temp file and print its path.",
    )
    extract_parser.add_argument(
        "resource",
        help="Absolute resource path, e.g. /lib/linux/x86_64/libxgboost4j.so.",
    )

    subparsers.add_parser(
        "load",
        help="Load the configured libraries into this process.",
    )

    return parser
