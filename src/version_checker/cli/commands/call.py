"""Call command implementation.

Invokes one method on the version query service and prints the JSON
response envelope.
"""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from typing import Optional

from version_checker.cli.commands import Command
from version_checker.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_OPERATION_FAILED,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED,
)
from version_checker.config.models import VersionCheckerConfig
from version_checker.core.logging import get_logger
from version_checker.core.models import Failure, MethodCall, Response, Unsupported
from version_checker.providers import ProviderNotFoundError
from version_checker.service import VersionQueryService

LOGGER = get_logger(__name__)


def exit_code_for(response: Response) -> int:
    """Map a response onto a process exit code."""
    if isinstance(response, Failure):
        return EXIT_OPERATION_FAILED
    if isinstance(response, Unsupported):
        return EXIT_UNSUPPORTED
    return EXIT_SUCCESS


class CallCommand(Command):
    """Invokes a method and prints the response.

    With a fixed method the command backs the platform-version and
    app-version shortcuts; otherwise the method comes from ``args.method``.
    """

    def __init__(self, method: Optional[str] = None):
        self._method = method

    @property
    def name(self) -> str:
        return "call"

    def execute(self, args: Namespace, config: VersionCheckerConfig | None = None) -> int:
        method = self._method if self._method is not None else args.method
        project_root = Path(getattr(args, "project_root", ".")).resolve()

        try:
            service = VersionQueryService.from_config(config or VersionCheckerConfig(), project_root)
        except (ProviderNotFoundError, ValueError) as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        response = service.handle(MethodCall(method))
        print(json.dumps(response.to_dict(), indent=2))
        return exit_code_for(response)
