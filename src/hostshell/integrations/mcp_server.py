"""
Model Context Protocol server for hostshell.

Registers the seven host tools on a FastMCP server. Argument names match the
original tool schemas (`workingDir`, `timeout`, `directory`), so existing
clients keep working.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from hostshell._types import HostToolkit

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Runs shell commands and reads, writes, edits, lists and deletes files. "
    "All paths are relative to the server's base directory and cannot leave it."
)


def create_mcp_server(toolkit: HostToolkit, *, name: str = "hostshell") -> FastMCP:
    """
    Create a FastMCP server exposing a toolkit.

    Args:
        toolkit: The toolkit whose methods back the tools.
        name: Server name reported to clients.

    Returns:
        A FastMCP instance; call `.run()` to serve it over stdio.

    Example:
        >>> server = create_mcp_server(create_toolkit("."))
        >>> server.run()
    """
    server = FastMCP(name, instructions=INSTRUCTIONS)

    @server.tool(
        name="run_command",
        description=(
            "Runs a shell command and returns the output. Use this to execute shell "
            "commands for tasks like installing dependencies, running scripts, or "
            "checking system information."
        ),
    )
    async def run_command(
        command: Annotated[str, Field(description="The shell command to run")],
        workingDir: Annotated[  # noqa: N803
            str | None,
            Field(
                description="Optional working directory for the command. "
                "Default is the base directory."
            ),
        ] = None,
        timeout: Annotated[
            int | None,
            Field(description="Optional timeout in milliseconds. Default is 30000 (30 seconds)."),
        ] = None,
    ) -> str:
        return await toolkit.run_command(command, working_dir=workingDir, timeout=timeout)

    @server.tool(
        name="get_env",
        description=(
            "Gets the value of an environment variable. Use this to check environment "
            "variables that might affect command execution."
        ),
    )
    async def get_env(
        name: Annotated[str, Field(description="The name of the environment variable")],
    ) -> str:
        return await toolkit.get_env(name)

    @server.tool(
        name="list_files",
        description=(
            "Lists files matching the given glob pattern within the base directory. "
            "Use this to find source code files, configurations, or data files."
        ),
    )
    async def list_files(
        pattern: Annotated[
            str,
            Field(description="Glob pattern to match files (e.g., '*.py' for all Python files)"),
        ],
        directory: Annotated[
            str | None, Field(description="Optional subdirectory to search within")
        ] = None,
    ) -> str:
        return await toolkit.list_files(pattern, directory)

    @server.tool(
        name="read_file",
        description=(
            "Reads the content of a file. Use this to read the contents of files for "
            "analysis, understanding code, or retrieving data."
        ),
    )
    async def read_file(
        path: Annotated[str, Field(description="Path to the file to read")],
    ) -> str:
        return await toolkit.read_file(path)

    @server.tool(
        name="write_file",
        description=(
            "Writes content to a file. Use this to create new files or overwrite "
            "existing files."
        ),
    )
    async def write_file(
        path: Annotated[str, Field(description="Path to the file to write")],
        content: Annotated[str, Field(description="Content to write to the file")],
    ) -> str:
        return await toolkit.write_file(path, content)

    @server.tool(
        name="edit_file",
        description=(
            "Edits an existing file with the provided content and shows diff. Use this "
            "to modify existing files while seeing the changes."
        ),
    )
    async def edit_file(
        path: Annotated[str, Field(description="Path to the file to edit")],
        content: Annotated[str, Field(description="New content for the file")],
    ) -> str:
        return await toolkit.edit_file(path, content)

    @server.tool(
        name="delete_file",
        description="Deletes a file. Use this to remove files that are no longer needed.",
    )
    async def delete_file(
        path: Annotated[str, Field(description="Path to the file to delete")],
    ) -> str:
        return await toolkit.delete_file(path)

    logger.debug(f"MCP server '{name}' ready for {toolkit.config.root}")
    return server
