"""Maven executable detection.

Prefers the project's Maven Wrapper (``./mvnw``) and falls back to ``mvn``
on the PATH.
"""

import os
import shutil
from pathlib import Path

from maven_mcp.core.exceptions.errors import MavenNotFoundError
from maven_mcp.core.logger.logger import get_logger

logger = get_logger(__name__)

WRAPPER_NAME = "mvnw"
SYSTEM_MAVEN = "mvn"


class MavenDetector:
    """Detects the Maven executable to use for a project."""

    def __init__(self, system_binary: str = SYSTEM_MAVEN):
        """Initialize the detector.

        Args:
            system_binary: Name of the Maven binary to look up on PATH.
        """
        self.system_binary = system_binary

    def detect(self, project_dir: Path) -> Path:
        """Detect the Maven executable for a project directory.

        Args:
            project_dir: Project directory to check for a wrapper.

        Returns:
            Path to the Maven executable.

        Raises:
            MavenNotFoundError: If neither mvnw nor mvn is available.
        """
        wrapper = project_dir / WRAPPER_NAME
        if wrapper.is_file() and os.access(wrapper, os.X_OK):
            logger.debug(f"Found Maven Wrapper at {wrapper}")
            return wrapper

        system_maven = shutil.which(self.system_binary)
        if system_maven:
            logger.debug(f"Using system Maven at {system_maven}")
            return Path(system_maven)

        raise MavenNotFoundError(
            "Maven not found. Install Maven or add mvnw to your project."
        )
