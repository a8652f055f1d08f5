"""Command-line entry point for the Maven MCP server."""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.markup import escape

from maven_mcp import __version__
from maven_mcp.build.project import validate_project
from maven_mcp.core.config.settings import Settings
from maven_mcp.core.exceptions.errors import ConfigurationError, ProjectValidationError
from maven_mcp.core.logger.logger import get_console, get_logger, setup_logging
from maven_mcp.server.server import create_server

logger = get_logger(__name__)


def show_error(message: str) -> None:
    """Print an error message to stderr."""
    get_console().print(f"[bold red]Error:[/] {escape(message)}", highlight=False, soft_wrap=True)


@click.command()
@click.option(
    "--project",
    "-p",
    "project_dir",
    required=True,
    type=click.Path(path_type=Path),
    help="Path to the Maven project (directory containing pom.xml)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML configuration file",
)
@click.version_option(__version__, "--version", "-v", prog_name="maven-mcp")
def main(project_dir: Path, config_path: Path | None) -> None:
    """Serve Maven compile, test and clean tools over MCP (stdio)."""
    try:
        settings = Settings.load(config_path)
    except ConfigurationError as e:
        show_error(e.message)
        raise SystemExit(1) from e
    except ValidationError as e:
        show_error(f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    setup_logging(settings.logging)

    try:
        config = validate_project(project_dir)
    except ProjectValidationError as e:
        show_error(e.message)
        raise SystemExit(1) from e

    logger.info(f"Project directory: {config.project_dir}")
    logger.info(f"Maven executable: {config.maven_executable}")

    server = create_server(config, settings)
    logger.info("MCP server started, listening on stdio")
    server.run()


if __name__ == "__main__":
    main()
