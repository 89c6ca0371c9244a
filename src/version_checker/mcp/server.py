"""MCP server implementation for version-checker.

Exposes the version query operations as Model Context Protocol tools.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from version_checker.core.logging import get_logger
from version_checker.core.models import MethodCall, Operation
from version_checker.service import VersionQueryService

LOGGER = get_logger(__name__)

SERVER_NAME = "version-checker"

_TOOL_DESCRIPTIONS = {
    Operation.GET_PLATFORM_VERSION: (
        "Get the operating system version, prefixed with the platform name "
        "(e.g. 'Linux 6.8.0')."
    ),
    Operation.GET_APP_VERSION: (
        "Get the application's version and build number as "
        "{version, buildNumber}. Fails with VERSION_ERROR if the "
        "application metadata cannot be read."
    ),
}


class VersionCheckerMCPServer:
    """MCP server exposing getPlatformVersion and getAppVersion."""

    def __init__(self, service: VersionQueryService, version: Optional[str] = None):
        """Initialize VersionCheckerMCPServer.

        Args:
            service: Service answering the tool calls.
            version: Server version reported during initialization.
        """
        self.service = service
        self.server = Server(SERVER_NAME, version=version)
        self._register_tools()

    def list_tools(self) -> List[Tool]:
        """Return one tool per supported operation."""
        return [
            Tool(
                name=operation.value,
                description=_TOOL_DESCRIPTIONS[operation],
                inputSchema={"type": "object", "properties": {}},
            )
            for operation in Operation
        ]

    def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> List[TextContent]:
        """Run a tool call through the service.

        Unknown tool names reach the service too and come back as a
        not-implemented envelope rather than a protocol error.
        """
        if arguments:
            LOGGER.debug(f"Ignoring arguments for tool {name}: {sorted(arguments)}")
        response = self.service.handle(MethodCall(name))
        return [TextContent(
            type="text",
            text=json.dumps(response.to_dict(), indent=2),
        )]

    def _register_tools(self) -> None:
        """Register MCP handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            return self.call(name, arguments)

    async def run(self) -> None:
        """Run the MCP server over stdio."""
        LOGGER.info(f"version-checker MCP server starting (provider: {self.service.provider.name})")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
