"""Shared test fixtures for fastfuzzy tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import structlog

from fastfuzzy.cli.context import CLIContext
from fastfuzzy.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fastfuzzy_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point FASTFUZZY_HOME at a temporary directory.

    Returns the storage base directory (not created yet).
    """
    home = temp_dir / ".fastfuzzy"
    monkeypatch.setenv("FASTFUZZY_HOME", str(home))
    return home


@pytest.fixture
def resolver(temp_dir: Path) -> PathResolver:
    """Path resolver rooted in a temporary directory."""
    return PathResolver(base=temp_dir / ".fastfuzzy")


@pytest.fixture(autouse=True)
def _clean_global_state() -> Generator[None]:
    """Reset CLI context and logging configuration around each test."""
    CLIContext.reset()
    yield
    CLIContext.reset()
    structlog.reset_defaults()
