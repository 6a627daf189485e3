"""
Platform Unicode classifier used as ground truth for general categories.

EastAsianWidth.txt only says "L&" for runs of mixed-case letters, so the exact
letter case has to come from an independently maintained source. Python's
``unicodedata`` module (compiled against its own UCD revision) plays that role.
"""

from __future__ import annotations

import unicodedata
from typing import Callable

from east_asian_width.domain.types import GeneralCategory

CategoryOracle = Callable[[int], GeneralCategory]


def unicodedata_category(code_point: int) -> GeneralCategory:
    """Return the general category of ``code_point`` according to unicodedata.

    Example:
        >>> unicodedata_category(0x0041)
        <GeneralCategory.UPPERCASE_LETTER: 'Lu'>
        >>> unicodedata_category(0x0378)
        <GeneralCategory.OTHER_NOT_ASSIGNED: 'Cn'>
    """
    return GeneralCategory(unicodedata.category(chr(code_point)))


def oracle_unicode_version() -> str:
    """Unicode revision the default oracle was built against."""
    return unicodedata.unidata_version


__all__ = [
    "CategoryOracle",
    "unicodedata_category",
    "oracle_unicode_version",
]
