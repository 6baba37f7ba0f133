"""
Local subprocess-based execution backend.

Commands run through /bin/sh with asyncio.subprocess. Each call drains both
output streams and waits for exit inside one task group, optionally bounded
by a timeout that kills the whole process group.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from collections.abc import Mapping
from typing import TYPE_CHECKING

from hostshell._types import CommandOutcome, ExecutionState
from hostshell.environment import build_env
from hostshell.errors import PathEscape
from hostshell.sandbox._base import Sandbox
from hostshell.security.confine import PathGuard

if TYPE_CHECKING:
    from pathlib import Path

    from hostshell._types import ServerConfig

logger = logging.getLogger(__name__)

_READ_CHUNK = 65536


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    """Append everything from `stream` to `buffer` until EOF."""
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            return
        buffer.extend(chunk)


class _ProcessHandle:
    """
    One spawned child and its captured output.

    Owned by a single execute() call and never shared.
    """

    def __init__(self, proc: asyncio.subprocess.Process) -> None:
        self.proc = proc
        self.stdout = bytearray()
        self.stderr = bytearray()

    async def wait(self) -> int:
        """Drain both streams and wait for exit; return the exit code."""
        async with asyncio.TaskGroup() as tg:
            tg.create_task(_drain(self.proc.stdout, self.stdout))
            tg.create_task(_drain(self.proc.stderr, self.stderr))
            exited = tg.create_task(self.proc.wait())
        return exited.result()

    async def kill(self) -> None:
        """Kill the child's process group and reap the child."""
        if hasattr(os, "killpg"):
            try:
                os.killpg(self.proc.pid, signal.SIGKILL)
            except ProcessLookupError:
                pass
            except PermissionError:
                if self.proc.returncode is None:
                    self.proc.kill()
        elif self.proc.returncode is None:
            self.proc.kill()
        await self.proc.wait()


class LocalSandbox(Sandbox):
    """
    Subprocess-based execution confined to a root directory.

    Features:
    - Working directory confinement via PathGuard
    - PATH repair for environments launched without one
    - Timeout enforcement with process-group kill
    - Optional output truncation (off by default)

    Example:
        >>> sandbox = LocalSandbox(ServerConfig.from_root("./my_project"))
        >>> outcome = await sandbox.execute("ls -la")
        >>> print(outcome.render())
    """

    def __init__(
        self,
        config: ServerConfig,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize a local sandbox.

        Args:
            config: Server configuration (root, default timeout, output cap).
            environ: Base environment for subprocesses. Defaults to
                os.environ, read at each call.
        """
        self._config = config
        self._guard = PathGuard(config.root)
        self._environ = environ
        self._closed = False

    @property
    def root(self) -> Path:
        """The directory commands are confined to."""
        return self._config.root

    async def execute(
        self,
        command: str,
        *,
        working_dir: str | None = None,
        timeout_ms: int | None = None,
    ) -> CommandOutcome:
        """
        Execute a shell command under the root directory.

        Args:
            command: The shell command to execute.
            working_dir: Directory to run in, relative to the root.
            timeout_ms: Milliseconds before the command is killed. None uses
                the configured default; 0 or negative disables it.

        Returns:
            CommandOutcome. Business failures never raise.

        Raises:
            RuntimeError: If the sandbox has been closed.
        """
        if self._closed:
            raise RuntimeError("Sandbox has been closed")

        if timeout_ms is None:
            timeout_ms = self._config.default_timeout_ms

        try:
            cwd = self._guard.resolve(working_dir or "")
        except PathEscape:
            logger.debug(f"Rejected working directory outside root: {working_dir}")
            return CommandOutcome(
                ExecutionState.SPAWNING,
                detail="Error: Working directory must be within the base directory",
            )

        if not cwd.exists():
            return CommandOutcome(
                ExecutionState.SPAWNING,
                detail=f"Error: Working directory '{working_dir}' does not exist",
            )
        if not cwd.is_dir():
            return CommandOutcome(
                ExecutionState.SPAWNING,
                detail=f"Error: Working directory '{working_dir}' is not a directory",
            )

        logger.debug(f"Running command: {command}")
        logger.debug(f"Working directory: {cwd}")

        env = build_env(self._environ)
        try:
            proc = await asyncio.create_subprocess_shell(
                command,
                cwd=cwd,
                env=env,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            # ValueError covers NUL bytes in the command or environment
            logger.debug(f"Spawn failed: {e}")
            return CommandOutcome(ExecutionState.SPAWN_FAILED, detail=str(e))

        handle = _ProcessHandle(proc)
        logger.debug(f"Spawned pid {proc.pid} ({ExecutionState.RUNNING.value})")

        delay = timeout_ms / 1000 if timeout_ms > 0 else None
        try:
            async with asyncio.timeout(delay):
                exit_code = await handle.wait()
        except TimeoutError:
            await handle.kill()
            logger.debug(f"Command timed out after {timeout_ms}ms (pid {proc.pid})")
            return CommandOutcome(ExecutionState.TIMED_OUT, timeout_ms=timeout_ms)
        finally:
            # Covers cancellation of the calling task as well
            if proc.returncode is None:
                await handle.kill()

        stdout, stdout_truncated = self._decode_and_truncate(handle.stdout)
        stderr, stderr_truncated = self._decode_and_truncate(handle.stderr)
        state = ExecutionState.SUCCEEDED if exit_code == 0 else ExecutionState.FAILED
        logger.debug(f"Command finished with exit code {exit_code} ({state.value})")

        return CommandOutcome(
            state,
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            truncated=stdout_truncated or stderr_truncated,
        )

    def _decode_and_truncate(self, data: bytes | bytearray) -> tuple[str, bool]:
        """Decode bytes and truncate if a cap is configured."""
        text = bytes(data).decode("utf-8", errors="replace")
        limit = self._config.max_output_chars
        if limit is not None and len(text) > limit:
            truncated_count = len(text) - limit
            text = text[:limit]
            text += f"\n\n[Truncated: {truncated_count} characters removed]"
            return text, True
        return text, False

    async def close(self) -> None:
        """
        Mark the sandbox closed.

        Safe to call multiple times.
        """
        self._closed = True
