"""
Top-level facade for hostshell.
"""

from hostshell._types import (
    CommandOutcome,
    ExecutionRequest,
    ExecutionState,
    HostToolkit,
    ServerConfig,
)
from hostshell.api import create_toolkit
from hostshell.environment import build_env
from hostshell.errors import (
    ConfigurationError,
    HostShellError,
    NotADirectory,
    NotAFile,
    NotFound,
    PathEscape,
)
from hostshell.sandbox import LocalFiles, LocalSandbox, Sandbox
from hostshell.security import PathGuard, confine

__all__ = [
    "create_toolkit",
    "HostToolkit",
    "ServerConfig",
    "ExecutionRequest",
    "ExecutionState",
    "CommandOutcome",
    "Sandbox",
    "LocalSandbox",
    "LocalFiles",
    "PathGuard",
    "confine",
    "build_env",
    "HostShellError",
    "ConfigurationError",
    "PathEscape",
    "NotFound",
    "NotAFile",
    "NotADirectory",
]
