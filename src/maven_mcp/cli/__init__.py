"""CLI module for the Maven MCP server."""

from maven_mcp.cli.main import main

__all__ = ["main"]
