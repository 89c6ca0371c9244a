"""MCP (Model Context Protocol) server for version-checker."""
