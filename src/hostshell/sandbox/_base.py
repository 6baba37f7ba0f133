"""
Abstract base class for command execution backends.

The toolkit only talks to this interface, so tests and alternative backends
can stand in for the local subprocess implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hostshell._types import CommandOutcome, ExecutionRequest


class Sandbox(ABC):
    """
    Abstract base for command execution backends.

    Provides a consistent interface for running a shell command confined
    to a root directory.
    """

    @abstractmethod
    async def execute(
        self,
        command: str,
        *,
        working_dir: str | None = None,
        timeout_ms: int | None = None,
    ) -> CommandOutcome:
        """
        Execute a shell command and return its outcome.

        Args:
            command: The shell command to execute.
            working_dir: Directory to run in, relative to the root.
            timeout_ms: Milliseconds before the command is killed.
                0 or negative disables the timeout.

        Returns:
            CommandOutcome in a terminal state, or SPAWNING if the request
            was rejected before anything was started.
        """
        ...

    async def run(self, request: ExecutionRequest) -> str:
        """Execute a request and render the outcome as text."""
        outcome = await self.execute(
            request.command,
            working_dir=request.working_dir,
            timeout_ms=request.timeout_ms,
        )
        return outcome.render()

    @abstractmethod
    async def close(self) -> None:
        """
        Clean up backend resources.

        Idempotent - safe to call multiple times.
        """
        ...

    async def __aenter__(self) -> Sandbox:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager, cleaning up resources."""
        await self.close()
