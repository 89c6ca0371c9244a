"""CLI runner orchestration.

This module handles command dispatch and execution for the version-checker CLI.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from version_checker.cli.arguments import build_parser
from version_checker.cli.commands.call import CallCommand
from version_checker.cli.commands.serve import ServeCommand
from version_checker.cli.commands.status import StatusCommand
from version_checker.cli.commands.validate import ValidateCommand
from version_checker.cli.config_bridge import ConfigBridge
from version_checker.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from version_checker.config import load_config
from version_checker.config.loader import ConfigError
from version_checker.config.models import VersionCheckerConfig
from version_checker.core.logging import configure_logging, get_logger
from version_checker.core.models import Operation

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get version-checker version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("version-checker")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from version_checker import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self._version = get_version()
        self.call_cmd = CallCommand()
        self.platform_version_cmd = CallCommand(Operation.GET_PLATFORM_VERSION.value)
        self.app_version_cmd = CallCommand(Operation.GET_APP_VERSION.value)
        self.status_cmd = StatusCommand(version=self._version)
        self.validate_cmd = ValidateCommand()
        self.serve_cmd = ServeCommand(version=self._version)

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None

        # Top-level --help returns 0 instead of raising SystemExit
        if argv_list is not None and argv_list[:1] in (["--help"], ["-h"]):
            self.parser.print_help()
            return EXIT_SUCCESS

        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            return EXIT_SUCCESS if e.code in (0, None) else EXIT_INVALID_USAGE

        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        if command == "validate":
            return self.validate_cmd.execute(args)

        handlers = {
            "call": self.call_cmd,
            "platform-version": self.platform_version_cmd,
            "app-version": self.app_version_cmd,
            "status": self.status_cmd,
            "serve": self.serve_cmd,
        }
        handler = handlers.get(command)
        if handler is None:
            # No command specified - show help
            self.parser.print_help()
            return EXIT_SUCCESS

        config = self._load_config(args)
        if config is None:
            return EXIT_INVALID_USAGE
        return handler.execute(args, config)

    def _load_config(self, args: Namespace) -> VersionCheckerConfig | None:
        """Load configuration for commands that query a provider.

        Returns:
            Loaded configuration, or None if loading failed (already logged).
        """
        project_root = Path(args.project_root).resolve()
        try:
            return load_config(
                project_root=project_root,
                cli_config_path=getattr(args, "config", None),
                cli_overrides=ConfigBridge.args_to_overrides(args),
            )
        except ConfigError as e:
            LOGGER.error(str(e))
            return None
