"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_cof.models import StateChange
from chuk_mcp_cof.selection import SelectionStore


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store() -> SelectionStore:
    """A store with the default selection."""
    return SelectionStore()


@pytest.fixture
def received() -> list[StateChange]:
    """List that a recording observer appends to."""
    return []
