"""Data models for build outcomes."""

from maven_mcp.models.build import (
    BuildOutcome,
    BuildStatus,
    CompilationDiagnostics,
    Diagnostic,
    DiagnosticSeverity,
    TestFailure,
    TestSummary,
)

__all__ = [
    "BuildOutcome",
    "BuildStatus",
    "CompilationDiagnostics",
    "Diagnostic",
    "DiagnosticSeverity",
    "TestFailure",
    "TestSummary",
]
