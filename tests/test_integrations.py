"""Tests for transport and framework integrations."""

from __future__ import annotations

from pathlib import Path

import pytest

from hostshell import HostToolkit
from hostshell.integrations import create_mcp_server

TOOL_NAMES = {
    "run_command",
    "get_env",
    "list_files",
    "read_file",
    "write_file",
    "edit_file",
    "delete_file",
}


async def _call(server, name: str, arguments: dict) -> str:
    result = await server.call_tool(name, arguments)
    # Newer mcp releases return (content, structured_content)
    content = result[0] if isinstance(result, tuple) else result
    return content[0].text


# --- MCP Tests ---


class TestMcpServer:
    """Tests for the FastMCP server."""

    async def test_registers_all_tools(self, toolkit: HostToolkit) -> None:
        """All seven tools should be listed."""
        server = create_mcp_server(toolkit)
        tools = await server.list_tools()
        assert {tool.name for tool in tools} == TOOL_NAMES

    async def test_run_command_schema(self, toolkit: HostToolkit) -> None:
        """run_command should keep the original argument names."""
        server = create_mcp_server(toolkit)
        tools = {tool.name: tool for tool in await server.list_tools()}
        schema = tools["run_command"].inputSchema
        assert set(schema["properties"]) == {"command", "workingDir", "timeout"}
        assert schema["required"] == ["command"]

    async def test_list_files_schema(self, toolkit: HostToolkit) -> None:
        """list_files should take a pattern and an optional directory."""
        server = create_mcp_server(toolkit)
        tools = {tool.name: tool for tool in await server.list_tools()}
        schema = tools["list_files"].inputSchema
        assert set(schema["properties"]) == {"pattern", "directory"}
        assert schema["required"] == ["pattern"]

    async def test_call_run_command(self, toolkit: HostToolkit, temp_dir: Path) -> None:
        """Calling run_command should return the command output."""
        (temp_dir / "sub").mkdir()
        server = create_mcp_server(toolkit)
        text = await _call(server, "run_command", {"command": "pwd", "workingDir": "sub"})
        assert text.strip() == str(temp_dir / "sub")

    async def test_call_timeout(self, toolkit: HostToolkit) -> None:
        """The timeout argument is in milliseconds."""
        server = create_mcp_server(toolkit)
        text = await _call(server, "run_command", {"command": "sleep 2", "timeout": 100})
        assert text == "Command timed out after 100ms"

    async def test_business_errors_are_text(self, toolkit: HostToolkit) -> None:
        """Tool failures come back as normal text results."""
        server = create_mcp_server(toolkit)
        text = await _call(server, "read_file", {"path": "../../etc/passwd"})
        assert text.startswith("Error: Access denied:")

    async def test_file_tools(self, toolkit: HostToolkit) -> None:
        """File tools should be reachable through the server."""
        server = create_mcp_server(toolkit)
        await _call(server, "write_file", {"path": "m.txt", "content": "via mcp"})
        assert await _call(server, "read_file", {"path": "m.txt"}) == "via mcp"
        assert await _call(server, "list_files", {"pattern": "m*"}) == "m.txt"


# --- LangChain Tests ---


class TestLangChain:
    """Tests for the LangChain integration."""

    async def test_langchain_tools(self, toolkit: HostToolkit) -> None:
        """Should wrap every tool as a StructuredTool."""
        pytest.importorskip("langchain_core")
        from hostshell.integrations.langchain import create_langchain_tools

        tools = create_langchain_tools(toolkit)
        assert set(tools) == TOOL_NAMES

        result = await tools["run_command"].ainvoke({"command": "echo hello"})
        assert result.strip() == "hello"

        result = await tools["run_command"].ainvoke({"command": "exit 1"})
        assert "exit code 1" in result

    def test_langchain_missing_dependency(self, toolkit: HostToolkit, monkeypatch) -> None:
        """Should explain how to install langchain-core when it is absent."""
        from hostshell.integrations import langchain

        monkeypatch.setattr(langchain, "HAS_LANGCHAIN", False)
        with pytest.raises(ImportError, match="langchain-core"):
            langchain.create_langchain_tools(toolkit)


# --- PydanticAI Tests ---


class TestPydanticAI:
    """Tests for the PydanticAI integration."""

    async def test_pydantic_ai_tools(self, toolkit: HostToolkit) -> None:
        """Should create one Tool per toolkit method."""
        pytest.importorskip("pydantic_ai")
        from hostshell.integrations.pydantic_ai import create_pydantic_ai_tools

        tools = create_pydantic_ai_tools(toolkit)
        assert {tool.name for tool in tools} == TOOL_NAMES

        by_name = {tool.name: tool for tool in tools}
        result = await by_name["read_file"].function("test.txt")
        assert result == "hello world"
