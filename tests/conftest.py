"""Pytest configuration and shared fixtures."""

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SUREFIRE_FIXTURES = FIXTURES_DIR / "surefire-reports"

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.example</groupId>
  <artifactId>demo</artifactId>
  <version>1.0.0</version>
</project>
"""


@pytest.fixture
def maven_project(tmp_path: Path) -> Path:
    """Create a minimal Maven project directory with a pom.xml.

    Returns:
        Path to the project root.
    """
    project = tmp_path / "project"
    project.mkdir()
    (project / "pom.xml").write_text(POM_TEMPLATE, encoding="utf-8")
    return project


@pytest.fixture
def reports_dir(maven_project: Path) -> Path:
    """Create an empty target/surefire-reports directory in the project."""
    path = maven_project / "target" / "surefire-reports"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def copy_reports(reports_dir: Path) -> Callable[..., None]:
    """Return a helper that copies named fixture reports into the project."""

    def _copy(*names: str) -> None:
        for name in names:
            shutil.copy(SUREFIRE_FIXTURES / name, reports_dir / name)

    return _copy


@pytest.fixture
def write_report(reports_dir: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a report file with the given XML content."""

    def _write(name: str, content: str) -> Path:
        path = reports_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
