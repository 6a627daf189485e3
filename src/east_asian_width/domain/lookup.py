"""
Point and category queries against a RangeTable.

Lookups are point-in-range queries over a sorted, disjoint, immutable table,
answered with a binary search over the range starts. The engine holds no
mutable state, so a single instance can serve concurrent callers.

Usage:
    >>> engine = WidthLookupEngine(table)
    >>> engine.width_of(0xFF5E)
    <EastAsianWidth.FULL_WIDTH: 'F'>
    >>> engine.general_category_of(0x0378)
    <GeneralCategory.OTHER_NOT_ASSIGNED: 'Cn'>
"""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from east_asian_width.domain.exceptions import UnknownCategoryCodeError
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.domain.types import (
    CASED_LETTER_CATEGORIES,
    CategoryResolution,
    EastAsianWidth,
    Entry,
    GeneralCategory,
)
from east_asian_width.infrastructure.unicode_oracle import (
    CategoryOracle,
    unicodedata_category,
)
from east_asian_width.utils.logging import get_logger

logger = get_logger(__name__)

WIDE_WIDTHS = frozenset({EastAsianWidth.WIDE, EastAsianWidth.FULL_WIDTH})


class WidthLookupEngine:
    """
    Query facade over an immutable RangeTable.

    Args:
        table: Parsed and validated range table
        oracle: Classifier used to resolve "L&" entries to an exact letter case
            (defaults to Python's unicodedata)
    """

    def __init__(self, table: RangeTable, oracle: Optional[CategoryOracle] = None):
        self._table = table
        self._starts = table.starts
        self._oracle = oracle or unicodedata_category

        grouped: Dict[EastAsianWidth, List[Entry]] = defaultdict(list)
        for entry in table:
            grouped[entry.width].append(entry)
        self._by_width: Dict[EastAsianWidth, Tuple[Entry, ...]] = {
            width: tuple(entries) for width, entries in grouped.items()
        }

    @property
    def table(self) -> RangeTable:
        return self._table

    def range_of(self, code_point: int) -> Optional[Entry]:
        """
        Return the entry whose range contains ``code_point``.

        Returns:
            The containing Entry, or None when the code point is not listed
            (including values outside [0, 0x10FFFF])
        """
        index = bisect_right(self._starts, code_point) - 1
        if index < 0:
            return None
        entry = self._table[index]
        if code_point > entry.end:
            return None
        return entry

    def width_of(self, code_point: int) -> EastAsianWidth:
        """Return the width of ``code_point``; unlisted code points are Neutral."""
        entry = self.range_of(code_point)
        if entry is None:
            return EastAsianWidth.NEUTRAL
        return entry.width

    def entries_with_width(self, width: Any) -> List[Entry]:
        """
        Return all entries of exactly ``width``, in table order.

        ``width`` may be an EastAsianWidth member or its abbreviation. Anything
        else yields an empty list rather than an error.
        """
        try:
            key = EastAsianWidth(width)
        except (ValueError, TypeError):
            return []
        return list(self._by_width.get(key, ()))

    def resolve_general_category(self, code_point: int) -> CategoryResolution:
        """
        Resolve the general category of ``code_point`` without raising.

        A corrupt category code in the table comes back as a resolution with
        ``error_code`` set, so bulk callers can keep going and report it.
        """
        entry = self.range_of(code_point)
        if entry is None:
            return CategoryResolution(
                code_point, category=GeneralCategory.OTHER_NOT_ASSIGNED
            )
        if entry.is_cased_letter:
            category = self._oracle(code_point)
            if category not in CASED_LETTER_CATEGORIES:
                logger.warning(
                    "lookup.cased_letter_outside_set",
                    code_point=code_point,
                    category=category.value,
                )
            return CategoryResolution(code_point, category=category)
        try:
            category = GeneralCategory(entry.general_category)
        except ValueError:
            return CategoryResolution(code_point, error_code=entry.general_category)
        return CategoryResolution(code_point, category=category)

    def general_category_of(self, code_point: int) -> GeneralCategory:
        """
        Return the general category of ``code_point``.

        Unlisted code points are OtherNotAssigned; "L&" entries are resolved
        per code point through the oracle.

        Raises:
            UnknownCategoryCodeError: If the containing entry carries a code
                outside the 30 known categories
        """
        resolution = self.resolve_general_category(code_point)
        if resolution.category is None:
            raise UnknownCategoryCodeError(resolution.error_code or "", code_point)
        return resolution.category

    def string_width(self, text: str, ambiguous_is_wide: bool = False) -> int:
        """
        Count terminal columns for ``text`` using East Asian Width only.

        Wide and FullWidth characters take two columns, Ambiguous ones take
        two when ``ambiguous_is_wide`` is set, everything else takes one.

        Example:
            >>> engine.string_width("あいa")
            5
        """
        columns = 0
        for char in text:
            width = self.width_of(ord(char))
            if width in WIDE_WIDTHS or (
                ambiguous_is_wide and width is EastAsianWidth.AMBIGUOUS
            ):
                columns += 2
            else:
                columns += 1
        return columns


__all__ = ["WidthLookupEngine"]
