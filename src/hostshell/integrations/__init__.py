"""Transport and framework integrations for hostshell."""

from hostshell.integrations.langchain import create_langchain_tools
from hostshell.integrations.mcp_server import create_mcp_server

__all__ = ["create_langchain_tools", "create_mcp_server"]
