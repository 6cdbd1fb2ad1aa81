"""Shared fixtures for wastecal tests."""

import csv
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any, Callable

import pytest

from wastecal.core.logging_setup import SUPPRESSED_LOGGERS, WASTECAL_MODULES

SheetRows = list[list[str]]


def pytest_configure(config: Any) -> None:
    """Register markers used across the suite."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests that read and write files")
    config.addinivalue_line("markers", "fast: Tests that run in well under a second")


@pytest.fixture
def sample_rows() -> SheetRows:
    """A small but complete sheet for 2024.

    Three named categories (mixed, metal, paper), three entry rows, a gap row
    before the override marker and two overrides.
    """
    return [
        ["Rok", "2024"],
        ["Rodzaj", "Zmieszane", "", "", "Metale", "", "", "Papier"],
        ["3", "15", "", "", "pon", "", "", "", "", ""],
        ["4", "2", "16", "", "", "", "", "śro", "", ""],
        ["12", "24", "", "", "", "", "", "", "", ""],
        ["", "", ""],
        ["Uwagi", "odbiór od 6:00"],
        ["dzień", "za"],
        ["24/12", "23/12"],
        ["1/5", "2/5"],
        ["", ""],
        ["ignored", "after the override table"],
    ]


@pytest.fixture
def write_sheet(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing rows to a CSV sheet under tmp_path."""

    def _write(rows: SheetRows, name: str = "harmonogram.csv", delimiter: str = ",") -> Path:
        path = tmp_path / name
        with path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, delimiter=delimiter)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_wastecal_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, Any, None]:
    """Keep WASTECAL_* variables from leaking between tests."""
    for var in ("WASTECAL_DEBUG", "WASTECAL_LOG_LEVEL", "WASTECAL_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_logging_levels() -> Generator[None, Any, None]:
    """Restore logger levels changed by logging configuration tests."""
    names = [""] + WASTECAL_MODULES + list(SUPPRESSED_LOGGERS)
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
