"""Pytest configuration and fixtures for hostshell tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from hostshell import HostToolkit, LocalFiles, LocalSandbox, ServerConfig, create_toolkit


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory(prefix="hostshell_test_") as tmp:
        yield Path(tmp).resolve()


@pytest.fixture
def config(temp_dir: Path) -> ServerConfig:
    """Create a config rooted at the temporary directory."""
    return ServerConfig.from_root(temp_dir)


@pytest_asyncio.fixture
async def sandbox(config: ServerConfig) -> AsyncGenerator[LocalSandbox, None]:
    """Create a LocalSandbox for testing."""
    sandbox = LocalSandbox(config)
    try:
        yield sandbox
    finally:
        await sandbox.close()


@pytest.fixture
def files(config: ServerConfig) -> LocalFiles:
    """Create LocalFiles with a few test files."""
    (config.root / "test.txt").write_text("hello world")
    (config.root / "data.json").write_text('{"key": "value"}')
    return LocalFiles(config)


@pytest_asyncio.fixture
async def toolkit(temp_dir: Path) -> AsyncGenerator[HostToolkit, None]:
    """Create a HostToolkit for testing."""
    (temp_dir / "test.txt").write_text("hello world")

    toolkit = create_toolkit(temp_dir)
    try:
        yield toolkit
    finally:
        await toolkit.close()
