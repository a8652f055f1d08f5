"""Exception definitions module."""

from maven_mcp.core.exceptions.errors import (
    BuildExecutionError,
    ConfigurationError,
    MavenMcpError,
    MavenNotFoundError,
    ProjectValidationError,
)

__all__ = [
    "MavenMcpError",
    "BuildExecutionError",
    "MavenNotFoundError",
    "ProjectValidationError",
    "ConfigurationError",
]
