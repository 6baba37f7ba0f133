"""LangChain integration for hostshell."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hostshell._types import HostToolkit

HAS_LANGCHAIN = False
_StructuredTool: Any = None

try:
    import langchain_core.tools

    _StructuredTool = langchain_core.tools.StructuredTool
    HAS_LANGCHAIN = True
except ImportError:
    pass


def create_langchain_tools(toolkit: HostToolkit) -> dict[str, Any]:
    """
    Create LangChain tools from a HostToolkit.

    Args:
        toolkit: The host toolkit to wrap.

    Returns:
        Dictionary of LangChain StructuredTool instances, keyed by tool name.

    Raises:
        ImportError: If langchain-core is not installed.

    Example:
        >>> toolkit = create_toolkit(".")
        >>> tools = create_langchain_tools(toolkit)
        >>> agent = create_react_agent(llm, list(tools.values()))
    """
    if not HAS_LANGCHAIN:
        raise ImportError(
            "LangChain integration requires langchain-core. "
            "Install with: pip install hostshell[langchain]"
        )

    async def run_command(
        command: str, working_dir: str | None = None, timeout: int | None = None
    ) -> str:
        """Run a shell command in the base directory. Timeout is in milliseconds."""
        return await toolkit.run_command(command, working_dir=working_dir, timeout=timeout)

    async def get_env(name: str) -> str:
        """Get the value of an environment variable."""
        return await toolkit.get_env(name)

    async def list_files(pattern: str, directory: str | None = None) -> str:
        """List files matching a glob pattern."""
        return await toolkit.list_files(pattern, directory)

    async def read_file(path: str) -> str:
        """Read a file."""
        return await toolkit.read_file(path)

    async def write_file(path: str, content: str) -> str:
        """Write content to a file."""
        return await toolkit.write_file(path, content)

    async def edit_file(path: str, content: str) -> str:
        """Replace a file's content and show the diff."""
        return await toolkit.edit_file(path, content)

    async def delete_file(path: str) -> str:
        """Delete a file."""
        return await toolkit.delete_file(path)

    descriptions = {
        run_command: "Run a shell command and return its output.",
        get_env: "Get the value of an environment variable.",
        list_files: "List files under the base directory matching a glob pattern.",
        read_file: "Read a file from the base directory.",
        write_file: "Create or overwrite a file in the base directory.",
        edit_file: "Replace the content of an existing file and show the diff.",
        delete_file: "Delete a file from the base directory.",
    }

    return {
        fn.__name__: _StructuredTool.from_function(
            coroutine=fn,
            name=fn.__name__,
            description=description,
        )
        for fn, description in descriptions.items()
    }
