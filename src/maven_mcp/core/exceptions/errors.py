"""Custom exception definitions for maven-mcp."""

from typing import Any


class MavenMcpError(Exception):
    """Base exception for all maven-mcp errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class BuildExecutionError(MavenMcpError):
    """Raised when the Maven process cannot be started or is interrupted.

    Carries the time elapsed before the failure so callers can still
    report a duration.
    """

    def __init__(
        self,
        message: str,
        duration_ms: int = 0,
        command: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize build execution error.

        Args:
            message: Error message.
            duration_ms: Milliseconds elapsed before the failure.
            command: The command line that was being executed.
            details: Additional error details.
        """
        super().__init__(message, details)
        self.duration_ms = duration_ms
        self.command = command

    def __str__(self) -> str:
        return self.message


class MavenNotFoundError(MavenMcpError):
    """Raised when neither a Maven wrapper nor a system Maven is available."""


class ProjectValidationError(MavenMcpError):
    """Raised when the project directory fails startup validation."""

    def __init__(
        self,
        message: str,
        project_dir: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize project validation error.

        Args:
            message: Error message.
            project_dir: The project directory being validated.
            details: Additional error details.
        """
        details = details or {}
        if project_dir:
            details["project_dir"] = project_dir
        super().__init__(message, details)


class ConfigurationError(MavenMcpError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
