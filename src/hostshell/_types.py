"""
Core type definitions for hostshell.

Uses dataclasses and enums for lightweight, typed abstractions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from hostshell.environment import build_env
from hostshell.errors import ConfigurationError

if TYPE_CHECKING:
    from hostshell.sandbox.files import LocalFiles
    from hostshell.sandbox.local import LocalSandbox

DEFAULT_TIMEOUT_MS = 30_000

NO_OUTPUT = "Command executed successfully (no output)"
NO_ERROR_OUTPUT = "No error output"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """
    Immutable configuration, built once at startup.

    Attributes:
        root: Absolute directory every tool is confined to.
        verbose: Whether diagnostic logging is enabled.
        default_timeout_ms: Timeout applied when a command gives none.
        max_output_chars: Per-stream cap on captured output. None keeps
            everything the command writes.
    """

    root: Path
    verbose: bool = False
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_output_chars: int | None = None

    @classmethod
    def from_root(
        cls,
        root: Path | str | None = None,
        *,
        verbose: bool = False,
        default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
        max_output_chars: int | None = None,
    ) -> ServerConfig:
        """
        Resolve and validate a root directory into a config.

        Raises:
            ConfigurationError: If the root is missing or not a directory,
                or the output cap is not positive.
        """
        root_path = Path(root).expanduser().resolve() if root else Path.cwd().resolve()
        if not root_path.exists():
            raise ConfigurationError(f"Base directory does not exist: {root_path}")
        if not root_path.is_dir():
            raise ConfigurationError(f"Base directory is not a directory: {root_path}")
        if max_output_chars is not None and max_output_chars <= 0:
            raise ConfigurationError("max_output_chars must be positive")

        return cls(
            root=root_path,
            verbose=verbose,
            default_timeout_ms=default_timeout_ms,
            max_output_chars=max_output_chars,
        )


@dataclass(frozen=True, slots=True)
class ExecutionRequest:
    """A single run_command invocation."""

    command: str
    working_dir: str | None = None
    timeout_ms: int | None = None


class ExecutionState(Enum):
    """
    Lifecycle of one command execution.

    RUNNING is transient: it is logged once the process is spawned but never
    appears on a returned outcome.
    """

    SPAWNING = "spawning"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    SPAWN_FAILED = "spawn_failed"

    @property
    def is_terminal(self) -> bool:
        return self not in (ExecutionState.SPAWNING, ExecutionState.RUNNING)


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """
    Tagged result of a command execution.

    A SPAWNING outcome means the request was rejected before anything was
    spawned; `detail` then holds the error text.
    """

    state: ExecutionState
    stdout: str = ""
    stderr: str = ""
    exit_code: int | None = None
    timeout_ms: int | None = None
    detail: str = ""
    truncated: bool = False

    @property
    def success(self) -> bool:
        """Return True if the command exited with code 0."""
        return self.state is ExecutionState.SUCCEEDED

    def render(self) -> str:
        """Convert the outcome to the text returned to the caller."""
        if self.state is ExecutionState.SUCCEEDED:
            return self.stdout or NO_OUTPUT
        if self.state is ExecutionState.FAILED:
            output = self.stderr or self.stdout or NO_ERROR_OUTPUT
            return f"Command failed with exit code {self.exit_code}:\n{output}"
        if self.state is ExecutionState.TIMED_OUT:
            return f"Command timed out after {self.timeout_ms}ms"
        if self.state is ExecutionState.SPAWN_FAILED:
            return f"Failed to execute command: {self.detail}"
        if self.state is ExecutionState.SPAWNING:
            return self.detail
        raise ValueError(f"Cannot render a {self.state.value} outcome")


@dataclass
class HostToolkit:
    """
    Toolkit returned by create_toolkit(), exposing the host tools as text.

    Every method returns a string, including on failure.

    Attributes:
        config: The configuration in effect.
        sandbox: Command execution backend.
        files: Confined filesystem tools.
        environ: Environment to inspect and pass on. None reads os.environ
            at call time.
    """

    config: ServerConfig
    sandbox: LocalSandbox
    files: LocalFiles
    environ: dict[str, str] | None = None

    async def run_command(
        self,
        command: str,
        working_dir: str | None = None,
        timeout: int | None = None,
    ) -> str:
        """Run a shell command. `timeout` is in milliseconds."""
        request = ExecutionRequest(command=command, working_dir=working_dir, timeout_ms=timeout)
        return await self.sandbox.run(request)

    async def get_env(self, name: str) -> str:
        """Return an environment variable as seen by spawned commands."""
        env = build_env(self.environ if self.environ is not None else os.environ)
        value = env.get(name)
        if value is None:
            return f"Environment variable '{name}' is not set"
        return value

    async def list_files(self, pattern: str, directory: str | None = None) -> str:
        return await self.files.list_files(pattern, directory or ".")

    async def read_file(self, path: str) -> str:
        return await self.files.read_file(path)

    async def write_file(self, path: str, content: str) -> str:
        return await self.files.write_file(path, content)

    async def edit_file(self, path: str, content: str) -> str:
        return await self.files.edit_file(path, content)

    async def delete_file(self, path: str) -> str:
        return await self.files.delete_file(path)

    async def close(self) -> None:
        """Release sandbox resources."""
        await self.sandbox.close()

    async def __aenter__(self) -> HostToolkit:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
