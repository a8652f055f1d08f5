"""Compiler diagnostics extraction from Maven/javac console output.

Recognised formats (the same two apply to ``[WARNING]``)::

    [ERROR] /path/File.java:[line,col] message
    [ERROR] /path/File.java:[line] message
"""

import re
from pathlib import Path

from maven_mcp.models.build import CompilationDiagnostics, Diagnostic, DiagnosticSeverity

ERROR_WITH_COL = re.compile(r"\[ERROR\]\s+(.+\.java):\[(\d+),(\d+)\]\s+(.+)")
ERROR_NO_COL = re.compile(r"\[ERROR\]\s+(.+\.java):\[(\d+)\]\s+(.+)")
WARN_WITH_COL = re.compile(r"\[WARNING\]\s+(.+\.java):\[(\d+),(\d+)\]\s+(.+)")
WARN_NO_COL = re.compile(r"\[WARNING\]\s+(.+\.java):\[(\d+)\]\s+(.+)")


def parse_compilation_output(
    stdout: str | None,
    project_dir: Path,
) -> CompilationDiagnostics:
    """Parse Maven stdout for compilation errors and warnings.

    Args:
        stdout: Complete Maven stdout.
        project_dir: Project root used to relativize file paths.

    Returns:
        Errors and warnings, each in order of appearance.
    """
    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []

    if not stdout:
        return CompilationDiagnostics(errors=errors, warnings=warnings)

    for line in stdout.split("\n"):
        error = _try_match(line, ERROR_WITH_COL, True, DiagnosticSeverity.ERROR, project_dir)
        if error is None:
            error = _try_match(line, ERROR_NO_COL, False, DiagnosticSeverity.ERROR, project_dir)
        if error is not None:
            errors.append(error)
            continue

        warning = _try_match(line, WARN_WITH_COL, True, DiagnosticSeverity.WARNING, project_dir)
        if warning is None:
            warning = _try_match(line, WARN_NO_COL, False, DiagnosticSeverity.WARNING, project_dir)
        if warning is not None:
            warnings.append(warning)

    return CompilationDiagnostics(errors=errors, warnings=warnings)


def _try_match(
    line: str,
    pattern: re.Pattern[str],
    has_column: bool,
    severity: DiagnosticSeverity,
    project_dir: Path,
) -> Diagnostic | None:
    match = pattern.search(line)
    if match is None:
        return None

    if has_column:
        column: int | None = int(match.group(3))
        message = match.group(4)
    else:
        column = None
        message = match.group(3)

    return Diagnostic(
        file=relativize_path(match.group(1), project_dir),
        line=int(match.group(2)),
        column=column,
        message=message.rstrip("\r"),
        severity=severity,
    )


def relativize_path(file_path: str, project_dir: Path) -> str:
    """Make an absolute path relative to ``project_dir`` when it lies beneath it.

    Paths outside the project, relative paths and anything that cannot be
    interpreted as a path are returned unchanged.
    """
    try:
        path = Path(file_path)
        if path.is_absolute() and path.is_relative_to(project_dir):
            return path.relative_to(project_dir).as_posix()
    except (TypeError, ValueError):
        pass
    return file_path
