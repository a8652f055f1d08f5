"""Assembly of the final BuildOutcome from a raw execution result.

Compile-style operations report compiler diagnostics and unfiltered stdout on
failure. Test-style operations report Surefire results with summarized stack
traces and noise-filtered stdout on failure, falling back to the compile
shape when the build failed before any report was written.
"""

from pathlib import Path

from maven_mcp.build.executor import ExecutionResult
from maven_mcp.models.build import BuildOutcome, BuildStatus, TestFailure
from maven_mcp.parsers.diagnostics import parse_compilation_output
from maven_mcp.parsers.output_filter import filter_output
from maven_mcp.parsers.stack_trace import summarize_stack_trace
from maven_mcp.parsers.surefire import (
    DEFAULT_PER_TEST_OUTPUT_LIMIT,
    DEFAULT_TOTAL_OUTPUT_LIMIT,
    parse_surefire_reports,
)

DEFAULT_STACK_TRACE_LINES = 50


def resolve_status(result: ExecutionResult) -> BuildStatus:
    """Map an execution result to a build status."""
    if result.timed_out:
        return BuildStatus.TIMEOUT
    if result.success:
        return BuildStatus.SUCCESS
    return BuildStatus.FAILURE


def assemble_compile_outcome(result: ExecutionResult, project_dir: Path) -> BuildOutcome:
    """Build the outcome for a compile-style goal."""
    status = resolve_status(result)
    return BuildOutcome(
        status=status,
        duration_ms=result.duration_ms,
        diagnostics=parse_compilation_output(result.stdout, project_dir),
        raw_output=None if status is BuildStatus.SUCCESS else result.stdout,
    )


def assemble_clean_outcome(result: ExecutionResult) -> BuildOutcome:
    """Build the outcome for a goal that produces no diagnostics."""
    status = resolve_status(result)
    return BuildOutcome(
        status=status,
        duration_ms=result.duration_ms,
        raw_output=None if status is BuildStatus.SUCCESS else result.stdout,
    )


def assemble_test_outcome(
    result: ExecutionResult,
    project_dir: Path,
    app_package: str | None = None,
    stack_trace_lines: int = DEFAULT_STACK_TRACE_LINES,
    include_logs: bool = True,
    per_test_output_limit: int = DEFAULT_PER_TEST_OUTPUT_LIMIT,
    total_output_limit: int = DEFAULT_TOTAL_OUTPUT_LIMIT,
) -> BuildOutcome:
    """Build the outcome for a test-style goal.

    Args:
        result: Raw execution result.
        project_dir: Project root holding target/surefire-reports.
        app_package: Package prefix marking application stack frames.
        stack_trace_lines: Hard cap on lines per summarized stack trace.
        include_logs: Attach captured test output to failures.
        per_test_output_limit: Character limit per failure's captured output.
        total_output_limit: Character budget across all captured outputs.

    Returns:
        The assembled BuildOutcome.
    """
    status = resolve_status(result)
    raw_output = None if status is BuildStatus.SUCCESS else filter_output(result.stdout)

    report = parse_surefire_reports(
        project_dir,
        include_logs=include_logs,
        per_test_output_limit=per_test_output_limit,
        total_output_limit=total_output_limit,
    )

    if report is not None:
        return BuildOutcome(
            status=status,
            duration_ms=result.duration_ms,
            test_summary=report.summary,
            test_failures=summarize_failures(report.failures, app_package, stack_trace_lines),
            raw_output=raw_output,
        )

    if status is not BuildStatus.SUCCESS:
        # No reports and a failed build: most likely a compilation failure
        return BuildOutcome(
            status=status,
            duration_ms=result.duration_ms,
            diagnostics=parse_compilation_output(result.stdout, project_dir),
            raw_output=raw_output,
        )

    return BuildOutcome(status=status, duration_ms=result.duration_ms)


def summarize_failures(
    failures: list[TestFailure],
    app_package: str | None,
    stack_trace_lines: int,
) -> list[TestFailure]:
    """Return new failure records whose stack traces have been summarized."""
    return [
        TestFailure(
            test_class=failure.test_class,
            test_method=failure.test_method,
            message=failure.message,
            stack_trace=summarize_stack_trace(failure.stack_trace, app_package, stack_trace_lines),
            captured_output=failure.captured_output,
        )
        for failure in failures
    ]
