"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from version_checker.config.models import VersionCheckerConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier."""

    @abstractmethod
    def execute(self, args: Namespace, config: "VersionCheckerConfig | None" = None) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Optional loaded configuration.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# ruff: noqa: E402
from version_checker.cli.commands.call import CallCommand
from version_checker.cli.commands.serve import ServeCommand
from version_checker.cli.commands.status import StatusCommand
from version_checker.cli.commands.validate import ValidateCommand

__all__ = [
    "Command",
    "CallCommand",
    "ServeCommand",
    "StatusCommand",
    "ValidateCommand",
]
