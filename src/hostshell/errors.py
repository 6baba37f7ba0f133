"""
Exception hierarchy for hostshell.

These never reach a tool caller: the toolkit turns them into text at the
public boundary.
"""

from __future__ import annotations


class HostShellError(Exception):
    """Base class for all hostshell errors."""

    pass


class ConfigurationError(HostShellError):
    """Raised when the server configuration is unusable."""

    pass


class PathEscape(HostShellError):
    """
    Raised when a candidate path resolves outside the confined root.

    Attributes:
        candidate: The path as supplied by the caller.
        root: The root directory it was resolved against.
    """

    def __init__(self, candidate: str, root: str) -> None:
        self.candidate = candidate
        self.root = root
        super().__init__(f"Access denied: '{candidate}' is outside the base directory")


class NotFound(HostShellError):
    """Raised when a required file or directory does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File '{path}' does not exist")


class NotAFile(HostShellError):
    """Raised when a path exists but is not a regular file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"'{path}' is not a file")


class NotADirectory(HostShellError):
    """Raised when a directory argument is missing or is not a directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' does not exist or is not a directory")
