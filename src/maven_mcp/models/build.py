"""Build outcome data models.

Every model serializes with camelCase keys, and ``None`` fields are dropped
from the JSON entirely so that callers only receive the fields that apply.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _OutcomeModel(BaseModel):
    """Base for immutable, camelCase-serialized outcome records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dict with absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize to JSON with absent fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class BuildStatus(str, Enum):
    """Overall status of a Maven invocation."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    TIMEOUT = "TIMEOUT"


class DiagnosticSeverity(str, Enum):
    """Severity of a compiler diagnostic."""

    ERROR = "ERROR"
    WARNING = "WARNING"


class Diagnostic(_OutcomeModel):
    """A single compiler error or warning extracted from Maven output."""

    file: str = Field(description="Source file, relative to the project root when nested under it")
    line: int = Field(description="1-based line number")
    column: int | None = Field(default=None, description="1-based column, when reported")
    message: str = Field(description="Compiler message")
    severity: DiagnosticSeverity = Field(description="ERROR or WARNING")


class CompilationDiagnostics(_OutcomeModel):
    """Errors and warnings in order of appearance."""

    errors: list[Diagnostic] = Field(default_factory=list)
    warnings: list[Diagnostic] = Field(default_factory=list)


class TestSummary(_OutcomeModel):
    """Aggregated test counts across all parsed report files."""

    __test__ = False

    run: int = 0
    failed: int = 0
    skipped: int = 0
    errored: int = 0


class TestFailure(_OutcomeModel):
    """A single failing or erroring test case."""

    __test__ = False

    test_class: str = Field(description="Fully qualified test class name")
    test_method: str = Field(description="Test method name")
    message: str = Field(default="", description="Failure or error message")
    stack_trace: str | None = Field(default=None, description="Stack trace text")
    captured_output: str | None = Field(
        default=None,
        description="Captured stdout, then [STDERR] and stderr, after truncation",
    )


class BuildOutcome(_OutcomeModel):
    """Top-level payload returned for every Maven tool invocation."""

    status: BuildStatus
    duration_ms: int = Field(description="Wall-clock time of the Maven run in milliseconds")
    diagnostics: CompilationDiagnostics | None = None
    test_summary: TestSummary | None = None
    test_failures: list[TestFailure] | None = None
    raw_output: str | None = Field(
        default=None,
        description="Maven stdout, only on FAILURE or TIMEOUT",
    )
