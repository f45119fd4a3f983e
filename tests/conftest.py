"""Shared pytest fixtures and configuration for the city-pop test suite.

Guidelines
----------
* No internet access in any test.
* Files are written under ``tmp_path`` only; stdin is patched in-process.
* Core tests must be pure — rows are built in memory.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

HEADER = "Country,City,AccentCity,Region,Population,Latitude,Longitude"

SPRINGFIELD_CSV = "\n".join(
    (
        HEADER,
        "us,springfield,Springfield,IL,1000,,",
        "us,springfield,Springfield,MO,2000,,",
        "us,boston,Boston,MA,,,",
        "",
    )
)
"""Three-row dataset: two populated Springfields and an unpopulated Boston."""


@pytest.fixture()
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes CSV text to a temporary file."""

    def _write(text: str, name: str = "cities.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def springfield_csv(write_csv: Callable[..., Path]) -> Path:
    """Path to a file holding :data:`SPRINGFIELD_CSV`."""
    return write_csv(SPRINGFIELD_CSV)
