"""
Process-wide default table and lookup engine.

The table is built once, on first use, from the configured snapshot when one
exists and from the UCD source file otherwise. Load errors propagate to the
caller; there is no fallback table.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from east_asian_width.config import Settings, get_settings, validate_source_file
from east_asian_width.domain.lookup import WidthLookupEngine
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.io.readers.ucd_reader import UcdFormatParser
from east_asian_width.io.table_store import load_table
from east_asian_width.utils.logging import get_logger

logger = get_logger(__name__)


def load_default_table(settings: Optional[Settings] = None) -> RangeTable:
    """
    Build the RangeTable described by ``settings``.

    Args:
        settings: Settings to use (defaults to get_settings())

    Returns:
        The loaded table

    Raises:
        FileNotFoundError: If the table has to be parsed and the configured
            source is missing or is not a regular file
    """
    settings = settings or get_settings()

    if settings.table_snapshot_path:
        snapshot_path = Path(settings.table_snapshot_path)
        if snapshot_path.exists():
            return load_table(snapshot_path)
        logger.warning(
            "loader.snapshot_missing",
            path=str(snapshot_path),
            fallback=settings.ucd_source_path,
        )

    if not validate_source_file(settings):
        raise FileNotFoundError(
            f"UCD source file not found: {settings.ucd_source_path} "
            "(set EAW_UCD_SOURCE_PATH)"
        )
    return UcdFormatParser().parse_file(settings.ucd_source_path)


@lru_cache(maxsize=1)
def get_default_engine() -> WidthLookupEngine:
    """Return the shared engine over the default table, loading it on first call."""
    return WidthLookupEngine(load_default_table())


__all__ = ["load_default_table", "get_default_engine"]
