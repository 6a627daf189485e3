"""Domain model and lookups for the East Asian Width table."""

from east_asian_width.domain.exceptions import (
    EastAsianWidthError,
    MalformedRecordError,
    TableInvariantError,
    TableSnapshotError,
    UnknownCategoryCodeError,
    UnknownWidthCodeError,
)
from east_asian_width.domain.lookup import WidthLookupEngine
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.domain.types import (
    CASED_LETTER_MARKER,
    CategoryResolution,
    EastAsianWidth,
    Entry,
    GeneralCategory,
)

__all__ = [
    "CASED_LETTER_MARKER",
    "CategoryResolution",
    "EastAsianWidth",
    "Entry",
    "GeneralCategory",
    "RangeTable",
    "WidthLookupEngine",
    "EastAsianWidthError",
    "MalformedRecordError",
    "TableInvariantError",
    "TableSnapshotError",
    "UnknownCategoryCodeError",
    "UnknownWidthCodeError",
]
