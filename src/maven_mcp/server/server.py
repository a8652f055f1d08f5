"""Maven MCP server."""

from fastmcp import FastMCP

from maven_mcp import __version__
from maven_mcp.build.executor import BuildExecutor
from maven_mcp.build.project import ServerConfig
from maven_mcp.core.config.settings import Settings
from maven_mcp.server.tools import MavenTools, register_build_tools

SERVER_NAME = "maven-mcp"

INSTRUCTIONS = """
    Maven server for one project. Every tool returns a compact JSON outcome:
    status (SUCCESS, FAILURE or TIMEOUT), durationMs and, where applicable,
    diagnostics, testSummary, testFailures and rawOutput.

    Tools:
    - maven_compile: compile and report compiler errors and warnings
    - maven_test: run tests and report Surefire results
    - maven_clean: remove the target/ directory
"""


def create_server(config: ServerConfig, settings: Settings) -> FastMCP:
    """Create a FastMCP server with the Maven tools registered."""
    mcp = FastMCP(
        name=SERVER_NAME,
        version=__version__,
        instructions=INSTRUCTIONS,
    )
    tools = MavenTools(
        config,
        executor=BuildExecutor(timeout_ms=settings.maven.timeout_ms),
        settings=settings.maven,
    )
    register_build_tools(mcp, tools)
    return mcp
