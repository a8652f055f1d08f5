"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maven_mcp.core.config.loader import ConfigLoader


class MavenSettings(BaseSettings):
    """Maven execution and report budgeting settings."""

    model_config = SettingsConfigDict(
        env_prefix="MAVEN_MCP_MAVEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout_ms: int = Field(
        default=120_000,
        ge=1,
        description="Maximum wall-clock time for one Maven invocation in milliseconds",
    )
    stack_trace_lines: int = Field(
        default=50,
        ge=0,
        description="Hard cap on lines per summarized stack trace (0 = no cap)",
    )
    include_test_logs: bool = Field(
        default=True,
        description="Attach captured stdout/stderr to failing tests",
    )
    test_output_limit: int = Field(
        default=2000,
        ge=0,
        description="Per-test character limit for captured output",
    )
    total_output_limit: int = Field(
        default=10_000,
        ge=0,
        description="Character budget for captured output across all failures",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="MAVEN_MCP_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MAVEN_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    maven: MavenSettings = Field(default_factory=MavenSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            maven=MavenSettings(**loader.get_section("maven")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from a YAML file when given, else from the environment.

        Priority: Environment variables > .env > defaults
        """
        if path is not None:
            return cls.from_yaml(path)
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.load()
