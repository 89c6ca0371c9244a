"""Validate command implementation.

Validates version-checker configuration files and reports issues.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from version_checker.cli.commands import Command
from version_checker.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_OPERATION_FAILED,
    EXIT_SUCCESS,
)
from version_checker.config.loader import PROJECT_CONFIG_NAMES, find_project_config
from version_checker.config.models import VersionCheckerConfig
from version_checker.config.validation import (
    ConfigValidationIssue,
    ValidationSeverity,
    validate_config_file,
)


class ValidateCommand(Command):
    """Validates version-checker configuration files."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "validate"

    def execute(self, args: Namespace, config: VersionCheckerConfig | None = None) -> int:
        """Execute the validate command.

        Args:
            args: Parsed command-line arguments.
            config: Unused.

        Returns:
            Exit code: 0 = valid, 1 = has errors, 3 = file not found.
        """
        config_path = getattr(args, "config", None)
        if config_path:
            config_path = Path(config_path)
        else:
            config_path = find_project_config(Path.cwd())

        if config_path is None:
            print("No configuration file found.")
            print(f"Looked for: {', '.join(PROJECT_CONFIG_NAMES)}")
            return EXIT_INVALID_USAGE

        if not config_path.exists():
            print(f"Configuration file not found: {config_path}")
            return EXIT_INVALID_USAGE

        is_valid, issues = validate_config_file(config_path)

        errors = [i for i in issues if i.severity == ValidationSeverity.ERROR]
        warnings = [i for i in issues if i.severity == ValidationSeverity.WARNING]

        if errors:
            print(f"Errors in {config_path}:")
            for issue in errors:
                print(f"  {self._format_issue(issue)}")
        if warnings:
            print(f"Warnings in {config_path}:")
            for issue in warnings:
                print(f"  {self._format_issue(issue)}")

        if is_valid:
            if not warnings:
                print(f"{config_path} is valid.")
            return EXIT_SUCCESS
        return EXIT_OPERATION_FAILED

    @staticmethod
    def _format_issue(issue: ConfigValidationIssue) -> str:
        if issue.key and issue.key not in issue.message:
            return f"[{issue.key}] {issue.message}"
        return issue.message
