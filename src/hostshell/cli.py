"""
Command-line entry point.

    hostshell [ROOT] [-v/--verbose] [--timeout MS] [--max-output N]

Serves the host tools over MCP on stdio. Stdout carries the protocol, so all
logging goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from hostshell._types import DEFAULT_TIMEOUT_MS
from hostshell.api import create_toolkit
from hostshell.errors import ConfigurationError
from hostshell.integrations.mcp_server import create_mcp_server

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.argument(
    "root",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.option(
    "--timeout",
    "default_timeout_ms",
    type=int,
    default=DEFAULT_TIMEOUT_MS,
    show_default=True,
    help="Default command timeout in milliseconds (0 disables it).",
)
@click.option(
    "--max-output",
    "max_output_chars",
    type=click.IntRange(min=1),
    default=None,
    help="Truncate each captured output stream to this many characters.",
)
def main(
    root: Path | None,
    verbose: bool,
    default_timeout_ms: int,
    max_output_chars: int | None,
) -> None:
    """Serve shell and file tools confined to ROOT (default: current directory)."""
    configure_logging(verbose)

    try:
        toolkit = create_toolkit(
            root,
            verbose=verbose,
            default_timeout_ms=default_timeout_ms,
            max_output_chars=max_output_chars,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    logger.info(f"Base directory for shell commands: {toolkit.config.root}")
    server = create_mcp_server(toolkit)
    server.run()
