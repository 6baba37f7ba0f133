"""
Filesystem tools confined to the root directory.

Each operation resolves its path through the PathGuard first and reports
every failure as text. Nothing is written or removed unless all of the
operation's preconditions hold.
"""

from __future__ import annotations

import difflib
import fnmatch
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from hostshell.errors import HostShellError, NotADirectory, NotAFile, NotFound
from hostshell.security.confine import PathGuard

if TYPE_CHECKING:
    from hostshell._types import ServerConfig

logger = logging.getLogger(__name__)

_DIFF_RULE = "=" * 67
_NO_NEWLINE = "\\ No newline at end of file"


def _split_lines(text: str) -> list[str]:
    """Split on "\\n" only, keeping terminators; a CR stays part of its line."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def unified_diff(name: str, old: str, new: str) -> str:
    """
    Render a patch between two versions of a file.

    The header carries an `Index:` line and `Old`/`New` labels on the file
    lines, followed by standard unified-diff hunks. A final line without a
    newline is followed by a `\\ No newline at end of file` marker.
    """
    lines = [f"Index: {name}", _DIFF_RULE]
    diff = list(
        difflib.unified_diff(
            _split_lines(old),
            _split_lines(new),
            fromfile=name,
            tofile=name,
            fromfiledate="Old",
            tofiledate="New",
            lineterm="",
        )
    )
    if not diff:
        lines.append(f"--- {name}\tOld")
        lines.append(f"+++ {name}\tNew")
    lines.extend(diff[:2])
    for line in diff[2:]:
        if line.startswith("@@"):
            lines.append(line)
        elif line.endswith("\n"):
            lines.append(line[:-1])
        else:
            lines.append(line)
            lines.append(_NO_NEWLINE)
    return "\n".join(lines) + "\n"


def _matches(relative: str, pattern: str) -> bool:
    if fnmatch.fnmatchcase(relative, pattern):
        return True
    # "**/x" also covers files directly under the root
    return pattern.startswith("**/") and fnmatch.fnmatchcase(relative, pattern[3:])


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    # Encode before opening so unencodable content leaves the file untouched
    data = content.encode("utf-8")
    with path.open("wb") as f:
        f.write(data)


class LocalFiles:
    """
    List, read, write, edit and delete files under a root directory.

    Example:
        >>> files = LocalFiles(ServerConfig.from_root("./my_project"))
        >>> await files.write_file("notes/todo.txt", "ship it")
        "File 'notes/todo.txt' has been written successfully"
        >>> await files.list_files("*.txt")
        'notes/todo.txt'
    """

    def __init__(self, config: ServerConfig) -> None:
        self._guard = PathGuard(config.root)

    @property
    def root(self) -> Path:
        return self._guard.root

    async def list_files(self, pattern: str, directory: str = ".") -> str:
        """
        List files under `directory` whose root-relative path matches `pattern`.

        Args:
            pattern: fnmatch-style glob, matched against paths relative to
                the root (e.g. "*.py", "src/*.ts").
            directory: Subdirectory to search, relative to the root.

        Returns:
            Sorted, newline-separated relative paths, or an explanation.
        """
        try:
            search_dir = self._guard.resolve(directory)
            if not search_dir.is_dir():
                raise NotADirectory(directory)

            matching = sorted(
                relative
                for relative in self._walk(search_dir)
                if _matches(relative, pattern)
            )
        except HostShellError as e:
            return f"Error: {e}"
        except (OSError, ValueError) as e:
            return f"Error listing files: {e}"

        logger.debug(f"list_files {pattern!r} in {search_dir}: {len(matching)} match(es)")
        if not matching:
            return f"No files matching pattern '{pattern}' found in '{directory}'"
        return "\n".join(matching)

    def _walk(self, directory: Path):
        """Yield every non-directory entry below `directory`, root-relative."""
        for entry in directory.rglob("*"):
            if not entry.is_dir():
                yield self._guard.relative(entry)

    async def read_file(self, path: str) -> str:
        """
        Return the full text of a file.

        Args:
            path: File path relative to the root.
        """
        try:
            file_path = self._existing_file(path)
            return _read_text(file_path)
        except HostShellError as e:
            return f"Error: {e}"
        except (OSError, ValueError) as e:
            return f"Error reading file: {e}"

    async def write_file(self, path: str, content: str) -> str:
        """
        Create or overwrite a file, creating parent directories as needed.

        Args:
            path: File path relative to the root.
            content: Full new content.
        """
        try:
            file_path = self._guard.resolve(path)
            if file_path.is_dir():
                raise NotAFile(path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            _write_text(file_path, content)
        except HostShellError as e:
            return f"Error: {e}"
        except (OSError, ValueError) as e:
            return f"Error writing file: {e}"

        logger.debug(f"Wrote {len(content)} characters to {file_path}")
        return f"File '{path}' has been written successfully"

    async def edit_file(self, path: str, content: str) -> str:
        """
        Replace the content of an existing file and show the diff.

        Args:
            path: File path relative to the root. Must already exist.
            content: Full new content.

        Returns:
            A success message followed by a unified diff of the change.
        """
        try:
            file_path = self._existing_file(path)
            old_content = _read_text(file_path)
            diff = unified_diff(path, old_content, content)
            _write_text(file_path, content)
        except HostShellError as e:
            return f"Error: {e}"
        except (OSError, ValueError) as e:
            return f"Error editing file: {e}"

        logger.debug(f"Edited {file_path}")
        return f"File '{path}' has been edited successfully.\n\nChanges:\n{diff}"

    async def delete_file(self, path: str) -> str:
        """
        Delete a regular file.

        Args:
            path: File path relative to the root.
        """
        try:
            file_path = self._existing_file(path)
            file_path.unlink()
        except HostShellError as e:
            return f"Error: {e}"
        except (OSError, ValueError) as e:
            return f"Error deleting file: {e}"

        logger.debug(f"Deleted {file_path}")
        return f"File '{path}' has been deleted successfully"

    def _existing_file(self, path: str) -> Path:
        """
        Confine `path` and require it to be an existing regular file.

        Raises:
            PathEscape: If the path leaves the root.
            NotFound: If nothing exists at the path.
            NotAFile: If the path is a directory or other non-file.
        """
        file_path = self._guard.resolve(path)
        if not file_path.exists():
            raise NotFound(path)
        if not file_path.is_file():
            raise NotAFile(path)
        return file_path
