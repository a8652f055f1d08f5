"""Interpretation of Maven console output and Surefire reports.

This package provides:
- Console noise filtering
- Compiler diagnostic extraction
- Surefire XML report parsing with captured-output budgets
- Stack trace summarization
"""

from maven_mcp.parsers.diagnostics import parse_compilation_output
from maven_mcp.parsers.output_filter import filter_output
from maven_mcp.parsers.stack_trace import summarize_stack_trace
from maven_mcp.parsers.surefire import SurefireResult, parse_surefire_reports

__all__ = [
    "filter_output",
    "parse_compilation_output",
    "parse_surefire_reports",
    "summarize_stack_trace",
    "SurefireResult",
]
