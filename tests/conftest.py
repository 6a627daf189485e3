"""Shared pytest fixtures for the East Asian Width test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from east_asian_width.config import get_settings
from east_asian_width.domain.lookup import WidthLookupEngine
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.io.loader import get_default_engine
from east_asian_width.io.readers.ucd_reader import UcdFormatParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"
UCD_FIXTURE = FIXTURES_DIR / "ucd" / "EastAsianWidth.txt"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point settings at the fixture file and reset cached singletons."""
    monkeypatch.setenv("EAW_UCD_SOURCE_PATH", str(UCD_FIXTURE))
    monkeypatch.delenv("EAW_TABLE_SNAPSHOT_PATH", raising=False)
    get_settings.cache_clear()
    get_default_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_engine.cache_clear()


@pytest.fixture(scope="session")
def ucd_fixture_path() -> Path:
    return UCD_FIXTURE


@pytest.fixture(scope="session")
def range_table() -> RangeTable:
    """Table parsed once from the EastAsianWidth.txt excerpt."""
    return UcdFormatParser().parse_file(UCD_FIXTURE)


@pytest.fixture(scope="session")
def engine(range_table: RangeTable) -> WidthLookupEngine:
    return WidthLookupEngine(range_table)
