"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from maven_mcp.core.config.loader import ConfigLoader
from maven_mcp.core.config.settings import LoggingSettings, MavenSettings, Settings
from maven_mcp.core.exceptions.errors import ConfigurationError


class TestMavenSettings:
    """Tests for MavenSettings defaults and validation."""

    def test_defaults(self):
        """Defaults match the documented values."""
        settings = MavenSettings()
        assert settings.timeout_ms == 120_000
        assert settings.stack_trace_lines == 50
        assert settings.include_test_logs is True
        assert settings.test_output_limit == 2000
        assert settings.total_output_limit == 10_000

    def test_environment_override(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("MAVEN_MCP_MAVEN_TIMEOUT_MS", "300000")
        assert MavenSettings().timeout_ms == 300_000

    def test_invalid_timeout(self):
        """A non-positive timeout is rejected."""
        with pytest.raises(ValidationError):
            MavenSettings(timeout_ms=0)


class TestLoggingSettings:
    """Tests for LoggingSettings validation."""

    def test_level_normalized(self):
        """Log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        """Unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_empty_file_means_none(self):
        """An empty file path disables file logging."""
        assert LoggingSettings(file="").file is None


class TestSettingsFromYaml:
    """Tests for YAML-backed settings."""

    def test_from_yaml(self, tmp_path: Path):
        """Sections map onto nested settings."""
        config = tmp_path / "config.yaml"
        config.write_text(
            "maven:\n  timeout_ms: 5000\n  stack_trace_lines: 20\nlogging:\n  level: warning\n",
            encoding="utf-8",
        )
        settings = Settings.load(config)

        assert settings.maven.timeout_ms == 5000
        assert settings.maven.stack_trace_lines == 20
        assert settings.maven.test_output_limit == 2000
        assert settings.logging.level == "WARNING"

    def test_load_without_path_uses_defaults(self):
        """Without a file the defaults apply."""
        assert Settings.load().maven.timeout_ms == 120_000

    def test_missing_file(self, tmp_path: Path):
        """A missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            Settings.load(tmp_path / "missing.yaml")


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_get_section(self, tmp_path: Path):
        """Sections are returned as mappings; missing ones are empty."""
        config = tmp_path / "config.yaml"
        config.write_text("maven:\n  timeout_ms: 1000\n", encoding="utf-8")
        loader = ConfigLoader(config)
        loader.load()

        assert loader.get_section("maven") == {"timeout_ms": 1000}
        assert loader.get_section("logging") == {}

    def test_empty_file(self, tmp_path: Path):
        """An empty file loads as an empty mapping."""
        config = tmp_path / "empty.yaml"
        config.write_text("", encoding="utf-8")
        assert ConfigLoader(config).load() == {}

    def test_invalid_yaml(self, tmp_path: Path):
        """Broken YAML raises ConfigurationError."""
        config = tmp_path / "bad.yaml"
        config.write_text("maven: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(config).load()

    def test_non_mapping(self, tmp_path: Path):
        """A top-level list is not a valid configuration."""
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader(config).load()

    def test_no_path(self):
        """Without any path nothing is loaded."""
        assert ConfigLoader().load() == {}
