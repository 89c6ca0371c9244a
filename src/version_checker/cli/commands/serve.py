"""Serve command implementation."""

from __future__ import annotations

import asyncio
from argparse import Namespace
from pathlib import Path

from version_checker.cli.commands import Command
from version_checker.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from version_checker.config.models import VersionCheckerConfig
from version_checker.core.logging import get_logger
from version_checker.providers import ProviderNotFoundError
from version_checker.service import VersionQueryService

LOGGER = get_logger(__name__)


class ServeCommand(Command):
    """Runs the MCP server over stdio."""

    def __init__(self, version: str):
        self._version = version

    @property
    def name(self) -> str:
        return "serve"

    def execute(self, args: Namespace, config: VersionCheckerConfig | None = None) -> int:
        project_root = Path(getattr(args, "project_root", ".")).resolve()

        try:
            service = VersionQueryService.from_config(config or VersionCheckerConfig(), project_root)
        except (ProviderNotFoundError, ValueError) as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        from version_checker.mcp.server import VersionCheckerMCPServer

        server = VersionCheckerMCPServer(service, version=self._version)
        try:
            asyncio.run(server.run())
        except KeyboardInterrupt:
            LOGGER.info("MCP server stopped")
        return EXIT_SUCCESS
