"""Argument parser construction for the version-checker CLI.

This module builds the argument parser with subcommands:
- version-checker call             - Invoke any method by name
- version-checker platform-version - Shortcut for getPlatformVersion
- version-checker app-version      - Shortcut for getAppVersion
- version-checker status           - Show platform and provider status
- version-checker validate         - Validate a configuration file
- version-checker serve            - Run the MCP server
"""

from __future__ import annotations

import argparse
from pathlib import Path

from version_checker.bootstrap.platform import SUPPORTED_OS
from version_checker.config.validation import VALID_SOURCES


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version-checker version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_provider_options(parser: argparse.ArgumentParser) -> None:
    """Add options that select the provider and its metadata source."""
    group = parser.add_argument_group("provider")
    group.add_argument(
        "--config",
        type=Path,
        help="Path to a custom config file (default: .version-checker.yml in project root).",
    )
    group.add_argument(
        "--project-root",
        type=Path,
        default=Path("."),
        help="Directory holding config and relative metadata paths (default: current directory).",
    )
    group.add_argument(
        "--platform",
        choices=sorted(SUPPORTED_OS),
        help="Use this platform provider instead of the detected OS.",
    )
    group.add_argument(
        "--source",
        choices=sorted(VALID_SOURCES),
        help="Application metadata source.",
    )
    group.add_argument(
        "--distribution",
        help="Distribution name for the 'distribution' source.",
    )
    group.add_argument(
        "--bundle-path",
        type=Path,
        help="Info.plist path for the 'bundle' source.",
    )
    group.add_argument(
        "--manifest-path",
        type=Path,
        help="YAML manifest path for the 'manifest' source.",
    )


def _build_call_parser(subparsers: argparse._SubParsersAction) -> None:
    call_parser = subparsers.add_parser(
        "call",
        help="Invoke a method by name and print the JSON response.",
        description=(
            "Invoke a method by name. Known methods: getPlatformVersion, getAppVersion. "
            "Any other name yields a not-implemented response."
        ),
    )
    call_parser.add_argument("method", help="Method name to invoke.")
    _add_provider_options(call_parser)


def _build_shortcut_parsers(subparsers: argparse._SubParsersAction) -> None:
    platform_parser = subparsers.add_parser(
        "platform-version",
        help="Print the OS version string (getPlatformVersion).",
    )
    _add_provider_options(platform_parser)

    app_parser = subparsers.add_parser(
        "app-version",
        help="Print the application version and build number (getAppVersion).",
    )
    _add_provider_options(app_parser)


def _build_status_parser(subparsers: argparse._SubParsersAction) -> None:
    status_parser = subparsers.add_parser(
        "status",
        help="Show detected platform, selected provider and metadata source.",
    )
    _add_provider_options(status_parser)


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a version-checker configuration file.",
    )
    validate_parser.add_argument(
        "--config",
        type=Path,
        help="Path to the config file (default: find in current directory).",
    )


def _build_serve_parser(subparsers: argparse._SubParsersAction) -> None:
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the MCP server on stdio.",
        description="Expose getPlatformVersion and getAppVersion as MCP tools over stdio.",
    )
    _add_provider_options(serve_parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="version-checker",
        description="version-checker: query OS and application versions.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command")
    _build_call_parser(subparsers)
    _build_shortcut_parsers(subparsers)
    _build_status_parser(subparsers)
    _build_validate_parser(subparsers)
    _build_serve_parser(subparsers)

    return parser
