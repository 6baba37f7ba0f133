"""
Main entry point: create_toolkit factory function.

This is the primary API for building the host tools that the MCP server and
the framework integrations expose.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from hostshell._types import DEFAULT_TIMEOUT_MS, HostToolkit, ServerConfig
from hostshell.sandbox.files import LocalFiles
from hostshell.sandbox.local import LocalSandbox

logger = logging.getLogger(__name__)


def create_toolkit(
    root: Path | str | None = None,
    *,
    config: ServerConfig | None = None,
    verbose: bool = False,
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
    max_output_chars: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> HostToolkit:
    """
    Create the host toolkit for a root directory.

    It bundles run_command, get_env and the five file tools, all confined
    to `root` and all returning plain text.

    Args:
        root: Directory every tool is confined to.
              Defaults to current working directory.
        config: A prebuilt configuration. Overrides the other settings.
        verbose: Recorded in the config; logging itself is set up by the CLI.
        default_timeout_ms: Timeout for commands that don't give one.
        max_output_chars: Per-stream cap on captured command output.
                          None (the default) keeps all output.
        environ: Environment for subprocesses and get_env.
                 Defaults to os.environ, read at each call.

    Returns:
        HostToolkit with the seven tool methods.

    Raises:
        ConfigurationError: If the root is not an existing directory.

    Example:
        >>> toolkit = create_toolkit("./my_project")
        >>> print(await toolkit.run_command("ls -la"))
        >>> print(await toolkit.read_file("README.md"))
    """
    if config is None:
        config = ServerConfig.from_root(
            root,
            verbose=verbose,
            default_timeout_ms=default_timeout_ms,
            max_output_chars=max_output_chars,
        )

    env = dict(environ) if environ is not None else None
    logger.debug(f"Base directory: {config.root}")

    return HostToolkit(
        config=config,
        sandbox=LocalSandbox(config, environ=env),
        files=LocalFiles(config),
        environ=env,
    )
