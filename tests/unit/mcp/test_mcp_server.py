"""Unit tests for MCP server."""

from __future__ import annotations

import json

import pytest
from mcp.server import Server
from mcp.types import TextContent

from version_checker.mcp.server import SERVER_NAME, VersionCheckerMCPServer
from version_checker.service import VersionQueryService


class TestVersionCheckerMCPServer:
    """Tests for VersionCheckerMCPServer."""

    @pytest.fixture
    def server(self, provider) -> VersionCheckerMCPServer:
        return VersionCheckerMCPServer(VersionQueryService(provider), version="0.1.0")

    def _payload(self, contents) -> dict:
        assert len(contents) == 1
        assert isinstance(contents[0], TextContent)
        return json.loads(contents[0].text)

    def test_server_initialization(self, server: VersionCheckerMCPServer) -> None:
        assert isinstance(server.server, Server)
        assert server.server.name == SERVER_NAME

    def test_lists_one_tool_per_operation(self, server: VersionCheckerMCPServer) -> None:
        names = [tool.name for tool in server.list_tools()]
        assert names == ["getPlatformVersion", "getAppVersion"]

    def test_tools_take_no_input(self, server: VersionCheckerMCPServer) -> None:
        for tool in server.list_tools():
            assert tool.inputSchema == {"type": "object", "properties": {}}

    def test_platform_version(self, server: VersionCheckerMCPServer) -> None:
        assert self._payload(server.call("getPlatformVersion")) == {
            "status": "success",
            "result": "TestOS 1.0",
        }

    def test_app_version(self, server: VersionCheckerMCPServer) -> None:
        assert self._payload(server.call("getAppVersion", {}))["result"] == {
            "version": "1.2.3",
            "buildNumber": "45",
        }

    def test_app_version_failure(self, failing_provider) -> None:
        server = VersionCheckerMCPServer(VersionQueryService(failing_provider))
        payload = self._payload(server.call("getAppVersion"))
        assert payload["code"] == "VERSION_ERROR"
        assert payload["message"] == "Could not get app version"

    def test_unknown_tool_is_not_implemented(self, server: VersionCheckerMCPServer) -> None:
        assert self._payload(server.call("foo")) == {"status": "not_implemented", "method": "foo"}

    def test_arguments_are_ignored(self, server: VersionCheckerMCPServer) -> None:
        with_args = server.call("getPlatformVersion", {"unused": True})
        without_args = server.call("getPlatformVersion")
        assert self._payload(with_args) == self._payload(without_args)
