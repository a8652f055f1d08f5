"""Maven tools exposed over MCP.

``MavenTools`` holds the per-server state (validated project, executor and
settings) and implements each operation as a coroutine returning a
``BuildOutcome``. ``register_build_tools`` binds those operations to a
FastMCP server and turns execution failures into error-flagged tool results.
"""

import asyncio
from collections.abc import Awaitable

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from maven_mcp.build.executor import BuildExecutor
from maven_mcp.build.outcome import (
    assemble_clean_outcome,
    assemble_compile_outcome,
    assemble_test_outcome,
)
from maven_mcp.build.project import ServerConfig, derive_group_id
from maven_mcp.core.config.settings import MavenSettings
from maven_mcp.core.exceptions.errors import BuildExecutionError
from maven_mcp.core.logger.logger import get_logger
from maven_mcp.models.build import BuildOutcome

logger = get_logger(__name__)


class MavenTools:
    """Maven operations for a single validated project."""

    def __init__(
        self,
        config: ServerConfig,
        executor: BuildExecutor | None = None,
        settings: MavenSettings | None = None,
    ):
        """Initialize the tool set.

        Args:
            config: Validated project configuration.
            executor: Executor used to run Maven.
            settings: Defaults for timeouts and report budgets.
        """
        self.config = config
        self.settings = settings or MavenSettings()
        self.executor = executor or BuildExecutor(timeout_ms=self.settings.timeout_ms)

    async def compile(self, args: list[str] | None = None) -> BuildOutcome:
        """Run ``mvn compile`` and report compiler diagnostics."""
        result = await self._run("compile", args)
        return assemble_compile_outcome(result, self.config.project_dir)

    async def test(
        self,
        test_filter: str | None = None,
        args: list[str] | None = None,
        stack_trace_lines: int | None = None,
        app_package: str | None = None,
        include_test_logs: bool | None = None,
        test_output_limit: int | None = None,
    ) -> BuildOutcome:
        """Run ``mvn test`` and report Surefire results."""
        result = await self._run("test", build_test_args(args, test_filter))

        # pom.xml and report parsing is file I/O; keep it off the event loop
        if app_package is None or not app_package.strip():
            app_package = await asyncio.to_thread(derive_group_id, self.config.project_dir)

        return await asyncio.to_thread(
            assemble_test_outcome,
            result,
            self.config.project_dir,
            app_package=app_package,
            stack_trace_lines=_default(stack_trace_lines, self.settings.stack_trace_lines),
            include_logs=_default(include_test_logs, self.settings.include_test_logs),
            per_test_output_limit=_default(test_output_limit, self.settings.test_output_limit),
            total_output_limit=self.settings.total_output_limit,
        )

    async def clean(self, args: list[str] | None = None) -> BuildOutcome:
        """Run ``mvn clean``."""
        result = await self._run("clean", args)
        return assemble_clean_outcome(result)

    async def _run(self, goal: str, args: list[str] | None):
        return await self.executor.execute(
            goal,
            list(args or []),
            self.config.maven_executable,
            self.config.project_dir,
        )


def build_test_args(args: list[str] | None, test_filter: str | None) -> list[str]:
    """Append Surefire test selection flags for a non-blank filter."""
    test_args = list(args or [])
    if test_filter and test_filter.strip():
        test_args.append(f"-Dtest={test_filter}")
        test_args.append("-DfailIfNoTests=false")
    return test_args


def _default(value, fallback):
    return fallback if value is None else value


async def run_tool(tool_name: str, operation: Awaitable[BuildOutcome]) -> str:
    """Await a tool operation and serialize its outcome.

    Raises:
        ToolError: For execution failures and unexpected errors, so the client
            receives an error-flagged result.
    """
    try:
        outcome = await operation
    except BuildExecutionError as e:
        logger.error(f"{tool_name} failed: {e.message}")
        raise ToolError(f"Error: {e.message}") from e
    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}")
        raise ToolError(f"Internal error: {e}") from e
    return outcome.to_json()


def register_build_tools(mcp: FastMCP, tools: MavenTools) -> None:
    """Register the Maven tools with an MCP server."""

    @mcp.tool
    async def maven_compile(args: list[str] | None = None) -> str:
        """Compile the Maven project.

        Returns structured compilation errors with file, line, column and message.
        `args` are additional Maven CLI arguments (e.g. ["-DskipFrontend", "-Pdev"]).
        """
        logger.info(f"maven_compile called with args: {args}")
        return await run_tool("maven_compile", tools.compile(args=args))

    @mcp.tool
    async def maven_test(
        test_filter: str | None = None,
        args: list[str] | None = None,
        stack_trace_lines: int | None = None,
        app_package: str | None = None,
        include_test_logs: bool | None = None,
        test_output_limit: int | None = None,
    ) -> str:
        """Run Maven tests.

        Returns a test summary and failures with messages, summarized stack
        traces and captured test output.
        `test_filter`: class (MyTest), method (MyTest#method) or list (MyTest,OtherTest).
        `stack_trace_lines`: max lines per stack trace (default 50, 0 disables the cap).
        `app_package`: package prefix kept in stack traces; defaults to the pom.xml groupId.
        `include_test_logs`: include stdout/stderr of failing tests (default true).
        `test_output_limit`: per-test character limit for captured output (default 2000).
        """
        logger.info(
            f"maven_test called with filter: {test_filter}, args: {args}, "
            f"stack_trace_lines: {stack_trace_lines}, app_package: {app_package}"
        )
        return await run_tool(
            "maven_test",
            tools.test(
                test_filter=test_filter,
                args=args,
                stack_trace_lines=stack_trace_lines,
                app_package=app_package,
                include_test_logs=include_test_logs,
                test_output_limit=test_output_limit,
            ),
        )

    @mcp.tool
    async def maven_clean(args: list[str] | None = None) -> str:
        """Clean the Maven project build directory (target/)."""
        logger.info(f"maven_clean called with args: {args}")
        return await run_tool("maven_clean", tools.clean(args=args))
