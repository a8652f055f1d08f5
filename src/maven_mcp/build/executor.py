"""Maven process executor.

Runs one Maven goal as a child process. Stdout and stderr are drained by two
concurrent reader tasks so that a child filling one pipe can never block
while the other is being read, and the wait for exit is bounded by a timeout
after which the child is killed.
"""

import asyncio
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from maven_mcp.core.exceptions.errors import BuildExecutionError
from maven_mcp.core.logger.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT_MS = 120_000
TIMEOUT_EXIT_CODE = -1
BATCH_MODE_FLAG = "-B"
READ_CHUNK_SIZE = 64 * 1024
REAP_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class ExecutionResult:
    """Raw result of one Maven process execution.

    Attributes:
        exit_code: Process exit code, or -1 when the process timed out.
        stdout: Captured standard output (partial when timed out).
        stderr: Captured standard error (partial when timed out).
        duration_ms: Wall-clock execution time in milliseconds.
        timed_out: Whether the process was killed on timeout.
    """

    exit_code: int
    stdout: str
    stderr: str
    duration_ms: int
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """True when Maven exited with code 0 before the timeout."""
        return self.exit_code == 0 and not self.timed_out

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "exit_code": self.exit_code,
            "duration_ms": self.duration_ms,
            "timed_out": self.timed_out,
            "stdout_chars": len(self.stdout),
            "stderr_chars": len(self.stderr),
        }


def build_command(
    maven_executable: Path | str,
    goal: str,
    extra_args: list[str] | None = None,
) -> list[str]:
    """Build the Maven command line; batch mode is always on."""
    command = [str(maven_executable), goal, BATCH_MODE_FLAG]
    if extra_args:
        command.extend(extra_args)
    return command


class BuildExecutor:
    """Executes Maven goals as child processes and captures their output."""

    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        """Initialize the build executor.

        Args:
            timeout_ms: Default maximum run time for each invocation.
        """
        self.timeout_ms = timeout_ms

    async def execute(
        self,
        goal: str,
        extra_args: list[str] | None,
        maven_executable: Path | str,
        project_dir: Path,
        timeout_ms: int | None = None,
    ) -> ExecutionResult:
        """Execute a Maven goal.

        Args:
            goal: Maven goal to run (e.g. "compile", "test").
            extra_args: Additional Maven CLI arguments.
            maven_executable: Path to mvnw or mvn.
            project_dir: Working directory for the process.
            timeout_ms: Per-invocation timeout; defaults to the executor's.

        Returns:
            ExecutionResult. A non-zero exit code is a normal result.

        Raises:
            BuildExecutionError: If the process cannot be started or the wait
                is interrupted.
        """
        timeout_ms = self.timeout_ms if timeout_ms is None else timeout_ms
        command = build_command(maven_executable, goal, extra_args)
        logger.info(f"Executing: {' '.join(command)}")

        start_time = time.monotonic()
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=project_dir,
            )
        except OSError as e:
            raise BuildExecutionError(
                f"Failed to start Maven process: {e}",
                duration_ms=_elapsed_ms(start_time),
                command=command,
            ) from e

        stdout_buffer = bytearray()
        stderr_buffer = bytearray()
        readers = [
            asyncio.create_task(_drain(process.stdout, stdout_buffer)),
            asyncio.create_task(_drain(process.stderr, stderr_buffer)),
        ]

        try:
            try:
                exit_code = await asyncio.wait_for(process.wait(), timeout=timeout_ms / 1000)
            except asyncio.TimeoutError:
                duration_ms = _elapsed_ms(start_time)
                logger.warning(f"Maven process timed out after {timeout_ms}ms, killing")
                _kill(process)
                # Snapshot whatever was drained so far; do not wait for the readers
                result = ExecutionResult(
                    exit_code=TIMEOUT_EXIT_CODE,
                    stdout=_decode(stdout_buffer),
                    stderr=_decode(stderr_buffer),
                    duration_ms=duration_ms,
                    timed_out=True,
                )
                logger.debug(f"Partial result: {result.to_dict()}")
                return result
            except asyncio.CancelledError as e:
                duration_ms = _elapsed_ms(start_time)
                _kill(process)
                raise BuildExecutionError(
                    "Maven process interrupted",
                    duration_ms=duration_ms,
                    command=command,
                ) from e

            duration_ms = _elapsed_ms(start_time)
            await asyncio.gather(*readers)
            result = ExecutionResult(
                exit_code=exit_code,
                stdout=_decode(stdout_buffer),
                stderr=_decode(stderr_buffer),
                duration_ms=duration_ms,
                timed_out=False,
            )
            logger.info(f"Maven finished: {result.to_dict()}")
            return result
        finally:
            await _release(process, readers)


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    if stream is None:
        return
    while chunk := await stream.read(READ_CHUNK_SIZE):
        buffer.extend(chunk)


def _kill(process: asyncio.subprocess.Process) -> None:
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass


async def _release(
    process: asyncio.subprocess.Process,
    readers: list[asyncio.Task],
) -> None:
    for reader in readers:
        if not reader.done():
            reader.cancel()
    await asyncio.gather(*readers, return_exceptions=True)

    if process.returncode is None:
        _kill(process)
    try:
        await asyncio.wait_for(process.wait(), timeout=REAP_TIMEOUT_SECONDS)
    except asyncio.TimeoutError:
        logger.warning(f"Maven process {process.pid} did not exit after kill")


def _decode(buffer: bytearray) -> str:
    text = buffer.decode("utf-8", errors="replace")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text[:-1] if text.endswith("\n") else text


def _elapsed_ms(start_time: float) -> int:
    return int((time.monotonic() - start_time) * 1000)
