"""
PydanticAI integration for hostshell.

Provides helpers to create PydanticAI-compatible tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

try:
    from pydantic_ai import Tool
except ImportError:
    raise ImportError(
        "PydanticAI integration requires 'pydantic-ai'. "
        "Install with `pip install hostshell[pydantic-ai]`"
    )

if TYPE_CHECKING:
    from hostshell._types import HostToolkit


def create_pydantic_ai_tools(toolkit: HostToolkit) -> list[Tool]:
    """
    Create PydanticAI tools backed by a HostToolkit.

    Example:
        >>> from pydantic_ai import Agent
        >>> tools = create_pydantic_ai_tools(create_toolkit("./project"))
        >>> agent = Agent("openai:gpt-4o", tools=tools)
    """

    async def run_command(
        command: str, working_dir: str | None = None, timeout: int | None = None
    ) -> str:
        """
        Run a shell command in the base directory.

        Args:
            command: The shell command to run.
            working_dir: Directory to run in, relative to the base directory.
            timeout: Timeout in milliseconds. Default is 30000.
        """
        return await toolkit.run_command(command, working_dir=working_dir, timeout=timeout)

    async def get_env(name: str) -> str:
        """
        Get the value of an environment variable.

        Args:
            name: The name of the environment variable.
        """
        return await toolkit.get_env(name)

    async def list_files(pattern: str, directory: str | None = None) -> str:
        """
        List files matching a glob pattern.

        Args:
            pattern: Glob pattern, matched against paths relative to the base directory.
            directory: Optional subdirectory to search within.
        """
        return await toolkit.list_files(pattern, directory)

    async def read_file(path: str) -> str:
        """
        Read a file.

        Args:
            path: Path to the file to read.
        """
        return await toolkit.read_file(path)

    async def write_file(path: str, content: str) -> str:
        """
        Create or overwrite a file.

        Args:
            path: Path to the file to write.
            content: Content to write to the file.
        """
        return await toolkit.write_file(path, content)

    async def edit_file(path: str, content: str) -> str:
        """
        Replace an existing file's content and show the diff.

        Args:
            path: Path to the file to edit.
            content: New content for the file.
        """
        return await toolkit.edit_file(path, content)

    async def delete_file(path: str) -> str:
        """
        Delete a file.

        Args:
            path: Path to the file to delete.
        """
        return await toolkit.delete_file(path)

    return [
        Tool(fn, takes_ctx=False)
        for fn in (run_command, get_env, list_files, read_file, write_file, edit_file, delete_file)
    ]
