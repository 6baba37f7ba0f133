"""
Path confinement.

Every path a caller supplies is checked here before any filesystem or process
call. The check is purely lexical: `..` and `.` segments are collapsed, but
symlinks are not followed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from hostshell.errors import PathEscape


def confine(root: Path | str, candidate: str) -> Path:
    """
    Resolve a caller-supplied path inside a root directory.

    Args:
        root: Absolute root directory.
        candidate: Relative or absolute path. Empty means the root itself.

    Returns:
        The normalized absolute path, equal to or below `root`.

    Raises:
        PathEscape: If the normalized path lies outside `root`.
    """
    root_str = os.path.normpath(os.fspath(root))
    if not os.path.isabs(root_str):
        raise ValueError(f"Root must be an absolute path: {root_str}")

    resolved = os.path.normpath(os.path.join(root_str, candidate))

    # The filesystem root already ends with a separator
    prefix = root_str if root_str.endswith(os.sep) else root_str + os.sep
    if resolved != root_str and not resolved.startswith(prefix):
        raise PathEscape(candidate, root_str)

    return Path(resolved)


@dataclass(frozen=True)
class PathGuard:
    """
    Confinement bound to one root.

    Example:
        >>> guard = PathGuard(Path("/srv/work"))
        >>> guard.resolve("src/../README.md")
        PosixPath('/srv/work/README.md')
        >>> guard.relative(Path("/srv/work/src/app.py"))
        'src/app.py'
    """

    root: Path

    def resolve(self, candidate: str) -> Path:
        """Confine `candidate` to this guard's root."""
        return confine(self.root, candidate)

    def relative(self, path: Path) -> str:
        """Express a confined path relative to the root, POSIX-style."""
        return path.relative_to(self.root).as_posix()
