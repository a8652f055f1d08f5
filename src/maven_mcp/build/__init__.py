"""Maven execution and outcome assembly.

This module provides:
- Maven executable detection and project validation
- Deadlock-free subprocess execution with timeouts
- Assembly of structured build outcomes
"""

from maven_mcp.build.detector import MavenDetector
from maven_mcp.build.executor import BuildExecutor, ExecutionResult
from maven_mcp.build.outcome import (
    assemble_clean_outcome,
    assemble_compile_outcome,
    assemble_test_outcome,
    resolve_status,
)
from maven_mcp.build.project import ServerConfig, derive_group_id, validate_project

__all__ = [
    "BuildExecutor",
    "ExecutionResult",
    "MavenDetector",
    "ServerConfig",
    "validate_project",
    "derive_group_id",
    "assemble_clean_outcome",
    "assemble_compile_outcome",
    "assemble_test_outcome",
    "resolve_status",
]
