"""Path confinement for hostshell."""

from hostshell.errors import PathEscape
from hostshell.security.confine import PathGuard, confine

__all__ = ["PathEscape", "PathGuard", "confine"]
