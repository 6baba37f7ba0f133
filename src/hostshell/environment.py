"""
Environment assembly for spawned commands.

Commands run with the same environment as the server. A server launched by a
desktop client often has no PATH at all, so a missing one is rebuilt from the
usual system and per-user tool locations.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

SYSTEM_PATH_DIRS: tuple[str, ...] = (
    "/usr/local/bin",
    "/usr/bin",
    "/bin",
    "/usr/sbin",
    "/sbin",
)

# Relative to the user's home directory
USER_PATH_DIRS: tuple[str, ...] = (
    ".local/bin",
    "bin",
    # nvm, bun, deno, cargo
    ".nvm/current/bin",
    ".bun/bin",
    ".deno/bin",
    ".cargo/bin",
)


def fallback_path(home: Path | str | None = None) -> str:
    """Build the PATH used when the environment has none."""
    home_dir = Path(home) if home is not None else Path.home()
    dirs = list(SYSTEM_PATH_DIRS)
    dirs.extend(str(home_dir / rel) for rel in USER_PATH_DIRS)
    return os.pathsep.join(dirs)


def build_env(
    environ: Mapping[str, str] | None = None,
    *,
    home: Path | str | None = None,
) -> dict[str, str]:
    """
    Copy an environment for a subprocess, repairing a missing PATH.

    Args:
        environ: Source environment. Defaults to os.environ.
        home: Home directory for the per-user PATH entries. Defaults to
            HOME from the environment, then the current user's home.

    Returns:
        A new dict. An existing PATH, even an empty one, is kept as is.
    """
    env = dict(os.environ if environ is None else environ)
    if "PATH" not in env:
        env["PATH"] = fallback_path(home if home is not None else env.get("HOME"))
    return env
