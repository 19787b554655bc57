"""Shared pytest fixtures for graphcalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes graphcalc.toml into a temporary directory."""

    def _write(content: str) -> Path:
        path = tmp_path / "graphcalc.toml"
        path.write_text(content)
        return path

    return _write
