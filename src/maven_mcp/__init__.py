"""maven-mcp: structured Maven build and test reporting for MCP clients."""

__version__ = "0.1.0"
