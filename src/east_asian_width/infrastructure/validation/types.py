"""Audit result types for the category cross-validation.

This module defines:
- CategoryMismatch: one code point where table and oracle disagree
- CorruptCategory: one code point whose table entry carries an unknown code
- CategoryAuditReport: aggregated outcome of an audit run
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from east_asian_width.domain.types import GeneralCategory


@dataclass(frozen=True)
class CategoryMismatch:
    """A code point where the table-derived category differs from the oracle.

    Attributes:
        code_point: The audited code point
        expected_category: Category derived from the East Asian Width table
        actual_category: Category reported by the platform oracle

    Example:
        >>> CategoryMismatch(0x0378, GeneralCategory.OTHER_NOT_ASSIGNED,
        ...                  GeneralCategory.OTHER_LETTER).label
        'U+0378'
    """

    code_point: int
    expected_category: GeneralCategory
    actual_category: GeneralCategory

    @property
    def label(self) -> str:
        return f"U+{self.code_point:04X}"


@dataclass(frozen=True)
class CorruptCategory:
    """A code point whose containing entry has an unrecognized category code."""

    code_point: int
    category_code: str
    actual_category: GeneralCategory


@dataclass
class CategoryAuditReport:
    """Outcome of auditing the code points in ``[start, stop)``.

    Mismatches are data, not failures; both lists are ordered by code point.

    Attributes:
        start: First audited code point
        stop: One past the last audited code point
        mismatches: Disagreements between table and oracle
        corrupt: Code points whose entry could not be resolved at all
        oracle_version: Unicode version of the oracle, when known
        duration_seconds: Wall-clock duration of the audit
    """

    start: int
    stop: int
    mismatches: List[CategoryMismatch] = field(default_factory=list)
    corrupt: List[CorruptCategory] = field(default_factory=list)
    oracle_version: str = ""
    duration_seconds: float = 0.0

    @property
    def scanned(self) -> int:
        return self.stop - self.start

    @property
    def total_mismatches(self) -> int:
        return len(self.mismatches)

    @property
    def mismatch_rate(self) -> float:
        if self.scanned == 0:
            return 0.0
        return self.total_mismatches / self.scanned

    @property
    def corrupt_code_points(self) -> List[int]:
        return [item.code_point for item in self.corrupt]

    def by_category_pair(self) -> Dict[Tuple[GeneralCategory, GeneralCategory], int]:
        """Count mismatches per (expected, actual) category pair."""
        return dict(
            Counter(
                (item.expected_category, item.actual_category)
                for item in self.mismatches
            )
        )


__all__ = [
    "CategoryMismatch",
    "CorruptCategory",
    "CategoryAuditReport",
]
