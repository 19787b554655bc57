"""Package version: pyproject.toml in a source checkout, else installed metadata."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "graphcalc"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str | None:
    if not _PYPROJECT.is_file():
        return None
    with open(_PYPROJECT, "rb") as f:
        project = tomllib.load(f).get("project", {})
    # Only trust the file when it describes this distribution.
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    """Version of graphcalc, or "0.0.0" when it is neither checked out nor installed."""
    checkout = _checkout_version()
    if checkout:
        return checkout
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
