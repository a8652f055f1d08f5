"""Maven Surefire XML report parsing.

Reads ``target/surefire-reports/TEST-*.xml``, sums the suite counters and
turns every ``<failure>``/``<error>`` into a :class:`TestFailure`. Captured
test output is bounded twice: each record keeps at most the tail of its own
output, and all records together share a first-come-first-served budget.
"""

from dataclasses import dataclass, field
from pathlib import Path
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException

from maven_mcp.core.logger.logger import get_logger
from maven_mcp.models.build import TestFailure, TestSummary
from maven_mcp.parsers.xml_utils import element_text, find_child, local_name, parse_xml_file

logger = get_logger(__name__)

REPORTS_DIR = Path("target") / "surefire-reports"
REPORT_PREFIX = "TEST-"
REPORT_SUFFIX = ".xml"
STDERR_MARKER = "[STDERR]"

DEFAULT_PER_TEST_OUTPUT_LIMIT = 2000
DEFAULT_TOTAL_OUTPUT_LIMIT = 10_000


@dataclass
class SurefireResult:
    """Aggregated result of all parsed Surefire reports."""

    summary: TestSummary
    failures: list[TestFailure] = field(default_factory=list)


@dataclass
class _RawFailure:
    test_class: str
    test_method: str
    message: str
    stack_trace: str | None
    output: str | None


def parse_surefire_reports(
    project_dir: Path,
    include_logs: bool = True,
    per_test_output_limit: int = DEFAULT_PER_TEST_OUTPUT_LIMIT,
    total_output_limit: int = DEFAULT_TOTAL_OUTPUT_LIMIT,
) -> SurefireResult | None:
    """Parse Surefire XML reports for a project.

    Args:
        project_dir: Project root directory.
        include_logs: Attach captured stdout/stderr to each failure.
        per_test_output_limit: Character limit for one failure's captured output.
        total_output_limit: Character budget shared by all captured outputs.

    Returns:
        Parsed results, or None when no report files exist.
    """
    report_files = find_report_files(project_dir)
    if not report_files:
        return None

    run = failed = errored = skipped = 0
    raw_failures: list[_RawFailure] = []

    for report_file in report_files:
        try:
            root = parse_xml_file(report_file)
            counts = (
                _int_attr(root, "tests"),
                _int_attr(root, "failures"),
                _int_attr(root, "errors"),
                _int_attr(root, "skipped"),
            )
            file_failures = _extract_failures(root, include_logs, per_test_output_limit)
        except (ParseError, DefusedXmlException, OSError) as e:
            logger.warning(f"Failed to parse Surefire report {report_file.name}: {e}")
            continue

        run += counts[0]
        failed += counts[1]
        errored += counts[2]
        skipped += counts[3]
        raw_failures.extend(file_failures)

    outputs = apply_output_budget([raw.output for raw in raw_failures], total_output_limit)
    failures = [
        TestFailure(
            test_class=raw.test_class,
            test_method=raw.test_method,
            message=raw.message,
            stack_trace=raw.stack_trace,
            captured_output=output,
        )
        for raw, output in zip(raw_failures, outputs)
    ]

    summary = TestSummary(run=run, failed=failed, skipped=skipped, errored=errored)
    return SurefireResult(summary=summary, failures=failures)


def find_report_files(project_dir: Path) -> list[Path]:
    """List ``TEST-*.xml`` files in the reports directory, sorted by name."""
    reports_dir = project_dir / REPORTS_DIR
    if not reports_dir.is_dir():
        logger.debug(f"Surefire reports directory not found: {reports_dir}")
        return []

    files = sorted(
        path
        for path in reports_dir.iterdir()
        if path.name.startswith(REPORT_PREFIX)
        and path.name.endswith(REPORT_SUFFIX)
        and path.is_file()
    )
    if not files:
        logger.debug(f"No {REPORT_PREFIX}*{REPORT_SUFFIX} files found in {reports_dir}")
    return files


def truncate_test_output(output: str, limit: int) -> str:
    """Keep the last ``limit`` characters, prefixed with a truncation notice.

    A non-positive limit disables truncation.
    """
    if limit <= 0 or len(output) <= limit:
        return output
    dropped = len(output) - limit
    return f"... [{dropped} chars truncated] ...\n{output[-limit:]}"


def apply_output_budget(outputs: list[str | None], total_limit: int) -> list[str | None]:
    """Drop outputs once their running length total exceeds ``total_limit``.

    The output that crosses the limit and every output after it become None.
    """
    budgeted: list[str | None] = []
    total = 0
    exhausted = False
    for output in outputs:
        if output is None or exhausted:
            budgeted.append(None)
            continue
        total += len(output)
        if total > total_limit:
            exhausted = True
            budgeted.append(None)
        else:
            budgeted.append(output)
    return budgeted


def _extract_failures(
    root: Element,
    include_logs: bool,
    per_test_output_limit: int,
) -> list[_RawFailure]:
    testcases = [
        element
        for element in root.iter()
        if isinstance(element.tag, str) and local_name(element.tag) == "testcase"
    ]

    # All <failure> records of a suite precede its <error> records
    results: list[_RawFailure] = []
    for kind in ("failure", "error"):
        for testcase in testcases:
            node = find_child(testcase, kind)
            if node is None:
                continue
            results.append(
                _RawFailure(
                    test_class=testcase.get("classname", ""),
                    test_method=testcase.get("name", ""),
                    message=node.get("message", ""),
                    stack_trace=element_text(node),
                    output=_testcase_output(testcase, include_logs, per_test_output_limit),
                )
            )
    return results


def _testcase_output(testcase: Element, include_logs: bool, limit: int) -> str | None:
    if not include_logs:
        return None
    output = _captured_output(testcase)
    if output is None:
        return None
    return truncate_test_output(output, limit)


def _captured_output(testcase: Element) -> str | None:
    stdout = element_text(find_child(testcase, "system-out"))
    stderr = element_text(find_child(testcase, "system-err"))

    parts: list[str] = []
    if stdout:
        parts.append(stdout)
    if stderr:
        parts.append(f"{STDERR_MARKER}\n{stderr}")
    return "\n".join(parts) if parts else None


def _int_attr(element: Element, name: str) -> int:
    value = element.get(name)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0
