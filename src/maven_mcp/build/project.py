"""Project validation and server configuration."""

from dataclasses import dataclass
from pathlib import Path
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException

from maven_mcp.build.detector import MavenDetector
from maven_mcp.core.exceptions.errors import MavenNotFoundError, ProjectValidationError
from maven_mcp.core.logger.logger import get_logger
from maven_mcp.parsers.xml_utils import element_text, find_child, parse_xml_file

logger = get_logger(__name__)

POM_FILE = "pom.xml"


@dataclass(frozen=True)
class ServerConfig:
    """Validated project configuration.

    Attributes:
        project_dir: Absolute project directory containing pom.xml.
        maven_executable: Detected Maven executable (mvnw or mvn).
    """

    project_dir: Path
    maven_executable: Path


def validate_project(
    project_dir: Path,
    detector: MavenDetector | None = None,
) -> ServerConfig:
    """Validate a project directory and resolve its Maven executable.

    Raises:
        ProjectValidationError: If the directory or pom.xml is missing, or
            Maven cannot be found.
    """
    if not project_dir.is_dir():
        raise ProjectValidationError(
            f"Project directory does not exist: {project_dir}",
            project_dir=str(project_dir),
        )

    if not (project_dir / POM_FILE).is_file():
        raise ProjectValidationError(
            f"No pom.xml found in project directory: {project_dir}",
            project_dir=str(project_dir),
        )

    detector = detector or MavenDetector()
    try:
        maven_executable = detector.detect(project_dir)
    except MavenNotFoundError as e:
        raise ProjectValidationError(e.message, project_dir=str(project_dir)) from e

    return ServerConfig(
        project_dir=project_dir.absolute(),
        maven_executable=maven_executable,
    )


def derive_group_id(project_dir: Path) -> str | None:
    """Read the groupId from pom.xml for use as the application package prefix.

    The project's own groupId wins; an inherited one is taken from <parent>.
    Returns None when pom.xml is missing, unreadable or has no groupId.
    """
    pom_file = project_dir / POM_FILE
    if not pom_file.is_file():
        return None

    try:
        root = parse_xml_file(pom_file)
    except (ParseError, DefusedXmlException, OSError) as e:
        logger.debug(f"Failed to derive groupId from pom.xml: {e}")
        return None

    group_id = element_text(find_child(root, "groupId"))
    if group_id is None:
        parent = find_child(root, "parent")
        if parent is not None:
            group_id = element_text(find_child(parent, "groupId"))
    return group_id
