"""Core types for the East Asian Width table.

This module defines:
- EastAsianWidth: the six width classes, valued by their UCD abbreviation
- GeneralCategory: the closed set of 30 Unicode general categories
- Entry: one annotated, inclusive code point range
- CategoryResolution: tagged result of a category lookup
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_CODE_POINT = 0x10FFFF
CODE_POINT_SPACE = MAX_CODE_POINT + 1

# Source marker meaning "any cased letter, resolve per code point"
CASED_LETTER_MARKER = "L&"


class EastAsianWidth(str, Enum):
    """East Asian Width classes as abbreviated in EastAsianWidth.txt.

    Values:
        NEUTRAL: Not East Asian (N); also the fallback for unlisted code points
        NARROW: Narrow counterpart of a wide character (Na)
        WIDE: Always wide in East Asian typography (W)
        AMBIGUOUS: Wide or narrow depending on context (A)
        HALF_WIDTH: Explicit halfwidth compatibility form (H)
        FULL_WIDTH: Explicit fullwidth compatibility form (F)
    """

    NEUTRAL = "N"
    NARROW = "Na"
    WIDE = "W"
    AMBIGUOUS = "A"
    HALF_WIDTH = "H"
    FULL_WIDTH = "F"


class GeneralCategory(str, Enum):
    """Unicode general categories, valued by their two-letter code."""

    UPPERCASE_LETTER = "Lu"
    LOWERCASE_LETTER = "Ll"
    TITLECASE_LETTER = "Lt"
    MODIFIER_LETTER = "Lm"
    OTHER_LETTER = "Lo"
    NON_SPACING_MARK = "Mn"
    SPACING_COMBINING_MARK = "Mc"
    ENCLOSING_MARK = "Me"
    DECIMAL_DIGIT_NUMBER = "Nd"
    LETTER_NUMBER = "Nl"
    OTHER_NUMBER = "No"
    CONNECTOR_PUNCTUATION = "Pc"
    DASH_PUNCTUATION = "Pd"
    OPEN_PUNCTUATION = "Ps"
    CLOSE_PUNCTUATION = "Pe"
    INITIAL_QUOTE_PUNCTUATION = "Pi"
    FINAL_QUOTE_PUNCTUATION = "Pf"
    OTHER_PUNCTUATION = "Po"
    MATH_SYMBOL = "Sm"
    CURRENCY_SYMBOL = "Sc"
    MODIFIER_SYMBOL = "Sk"
    OTHER_SYMBOL = "So"
    SPACE_SEPARATOR = "Zs"
    LINE_SEPARATOR = "Zl"
    PARAGRAPH_SEPARATOR = "Zp"
    CONTROL = "Cc"
    FORMAT = "Cf"
    SURROGATE = "Cs"
    PRIVATE_USE = "Co"
    OTHER_NOT_ASSIGNED = "Cn"


CASED_LETTER_CATEGORIES = frozenset(
    {
        GeneralCategory.UPPERCASE_LETTER,
        GeneralCategory.LOWERCASE_LETTER,
        GeneralCategory.TITLECASE_LETTER,
    }
)


@dataclass(frozen=True)
class Entry:
    """One annotated range of EastAsianWidth.txt.

    Attributes:
        start: First code point of the range (inclusive)
        end: Last code point of the range (inclusive)
        width: East Asian Width class of every code point in the range
        general_category: Two-letter category code, or "L&" for mixed case letters
        range_length: Count claimed by the source annotation; documentation only,
            ``size`` is authoritative
        start_name: Character name of ``start``
        end_name: Character name of ``end`` (equals start_name for single points)

    Example:
        >>> Entry(0x0C92, 0x0CA8, EastAsianWidth.NEUTRAL, "Lo", 23,
        ...       "KANNADA LETTER O", "KANNADA LETTER NA").size
        23
    """

    start: int
    end: int
    width: EastAsianWidth
    general_category: str
    range_length: int
    start_name: str
    end_name: str

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= MAX_CODE_POINT:
            raise ValueError(
                f"invalid code point range U+{self.start:04X}..U+{self.end:04X}"
            )

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    @property
    def is_cased_letter(self) -> bool:
        return self.general_category == CASED_LETTER_MARKER

    def contains(self, code_point: int) -> bool:
        return self.start <= code_point <= self.end


@dataclass(frozen=True)
class CategoryResolution:
    """Tagged result of resolving a code point's general category.

    Exactly one of ``category`` / ``error_code`` is set. ``error_code`` holds
    the raw, unrecognized category code of a corrupt table entry.
    """

    code_point: int
    category: Optional[GeneralCategory] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.category is not None


__all__ = [
    "MAX_CODE_POINT",
    "CODE_POINT_SPACE",
    "CASED_LETTER_MARKER",
    "CASED_LETTER_CATEGORIES",
    "EastAsianWidth",
    "GeneralCategory",
    "Entry",
    "CategoryResolution",
]
