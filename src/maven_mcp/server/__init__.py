"""MCP server exposing Maven operations as tools."""

from maven_mcp.server.server import create_server
from maven_mcp.server.tools import MavenTools, register_build_tools

__all__ = ["create_server", "MavenTools", "register_build_tools"]
