"""Configuration management for maven-mcp."""

from maven_mcp.core.config.loader import ConfigLoader
from maven_mcp.core.config.settings import (
    LoggingSettings,
    MavenSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "LoggingSettings",
    "MavenSettings",
    "Settings",
    "get_settings",
]
