"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path as StdPath

import pytest

from filepath import Path


@pytest.fixture
def sandbox(tmp_path: StdPath) -> Path:
    """Return an existing, empty directory as a filepath.Path."""
    directory = Path(str(tmp_path)).child("sandbox")
    assert directory.mkdir().is_success
    return directory
