"""Tests for path confinement."""

from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from hostshell.errors import PathEscape
from hostshell.security.confine import PathGuard, confine

ROOT = Path("/srv/work")


def _inside(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


class TestConfine:
    """Tests for the confine() function."""

    def test_empty_candidate_is_root(self) -> None:
        """An empty candidate should map to the root itself."""
        assert confine(ROOT, "") == ROOT

    def test_dot_is_root(self) -> None:
        """'.' should map to the root itself."""
        assert confine(ROOT, ".") == ROOT

    def test_relative_path(self) -> None:
        """Relative paths should resolve under the root."""
        assert confine(ROOT, "src/app.py") == ROOT / "src" / "app.py"

    def test_collapses_dot_segments(self) -> None:
        """'.' and '..' segments that stay inside should be collapsed."""
        assert confine(ROOT, "./src/../docs/./index.md") == ROOT / "docs" / "index.md"

    def test_absolute_path_inside_root(self) -> None:
        """Absolute paths under the root should be accepted."""
        assert confine(ROOT, "/srv/work/a/b") == ROOT / "a" / "b"

    def test_absolute_path_outside_root(self) -> None:
        """Absolute paths outside the root should be rejected."""
        with pytest.raises(PathEscape):
            confine(ROOT, "/etc/passwd")

    @pytest.mark.parametrize("candidate", ["..", "../..", "../../..", "../../../etc/passwd"])
    def test_rejects_pure_traversal(self, candidate: str) -> None:
        """Traversal-only candidates should be rejected."""
        with pytest.raises(PathEscape):
            confine(ROOT, candidate)

    def test_rejects_sibling_with_common_prefix(self) -> None:
        """A sibling sharing the root's name as a prefix is outside."""
        with pytest.raises(PathEscape):
            confine(ROOT, "../work-other/file")

    def test_rejects_escape_then_return(self) -> None:
        """Paths that leave and re-enter through a different name are outside."""
        with pytest.raises(PathEscape):
            confine(ROOT, "a/../../elsewhere")

    def test_accepts_leave_and_return_to_root(self) -> None:
        """Leaving and coming back through the root's own name stays inside."""
        assert confine(ROOT, "../work/file") == ROOT / "file"

    def test_does_not_touch_filesystem(self) -> None:
        """Confinement should work for roots that don't exist."""
        root = Path("/definitely/not/a/real/dir")
        assert confine(root, "x/y") == root / "x" / "y"

    def test_filesystem_root(self) -> None:
        """With '/' as root every absolute path is inside."""
        assert confine(Path("/"), "etc/hosts") == Path("/etc/hosts")
        assert confine(Path("/"), "../..") == Path("/")

    def test_relative_root_rejected(self) -> None:
        """The root itself must be absolute."""
        with pytest.raises(ValueError, match="absolute"):
            confine("relative/root", "x")

    def test_error_names_candidate(self) -> None:
        """The error should mention the offending path."""
        with pytest.raises(PathEscape) as exc_info:
            confine(ROOT, "../secret")
        assert exc_info.value.candidate == "../secret"
        assert "outside the base directory" in str(exc_info.value)

    def test_never_returns_path_outside_root(self) -> None:
        """Any mix of names and '..' either stays inside or is rejected."""
        segments = ["..", "a", ".", "work", "b"]
        for length in range(1, 5):
            for combo in itertools.product(segments, repeat=length):
                candidate = "/".join(combo)
                try:
                    result = confine(ROOT, candidate)
                except PathEscape:
                    continue
                assert _inside(result, ROOT), candidate


class TestPathGuard:
    """Tests for the PathGuard wrapper."""

    def test_resolve(self) -> None:
        """Should confine against its root."""
        guard = PathGuard(ROOT)
        assert guard.resolve("a/b.txt") == ROOT / "a" / "b.txt"

    def test_resolve_rejects_escape(self) -> None:
        """Should raise PathEscape for escapes."""
        guard = PathGuard(ROOT)
        with pytest.raises(PathEscape):
            guard.resolve("../../x")

    def test_relative_uses_forward_slashes(self) -> None:
        """Relative paths should be POSIX-style."""
        guard = PathGuard(ROOT)
        assert guard.relative(ROOT / "b" / "c.txt") == "b/c.txt"
