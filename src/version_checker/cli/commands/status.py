"""Status command implementation."""

from __future__ import annotations

import platform
from argparse import Namespace
from pathlib import Path

from version_checker.bootstrap.platform import detect_os
from version_checker.cli.commands import Command
from version_checker.cli.exit_codes import EXIT_SUCCESS
from version_checker.config.models import VersionCheckerConfig
from version_checker.metadata import create_metadata_source, default_source_for
from version_checker.providers import discover_providers, resolve_provider_name


class StatusCommand(Command):
    """Shows platform detection, provider selection and metadata source."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current version-checker version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: VersionCheckerConfig | None = None) -> int:
        """Execute the status command.

        Args:
            args: Parsed command-line arguments.
            config: Loaded configuration (defaults when None).

        Returns:
            Exit code (always 0 for status).
        """
        config = config or VersionCheckerConfig()
        project_root = Path(getattr(args, "project_root", ".")).resolve()

        print(f"version-checker version: {self._version}")
        print(f"System: {platform.system()} {platform.release()}")
        try:
            print(f"Detected platform: {detect_os()}")
        except ValueError as e:
            print(f"Detected platform: unsupported ({e})")

        try:
            provider_name = resolve_provider_name(config)
        except ValueError:
            provider_name = None

        if provider_name is not None:
            print(f"Selected provider: {provider_name}")
            source_name = config.app.source or default_source_for(provider_name)
            try:
                source = create_metadata_source(config.app, provider_name, project_root)
                print(f"Metadata source: {source.describe()}")
            except ValueError:
                print(f"Metadata source: {source_name} (unknown)")
        else:
            print("Selected provider: none")

        if config.sources:
            print(f"Config sources: {', '.join(config.sources)}")
        else:
            print("Config sources: defaults")
        print()

        providers = discover_providers()
        print("Platform providers:")
        if providers:
            for name, provider_class in sorted(providers.items()):
                print(f"  {name}: {provider_class.__name__}")
        else:
            print("  No providers discovered.")

        return EXIT_SUCCESS
