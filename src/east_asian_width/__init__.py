"""East Asian Width classification of Unicode code points.

Parses the Unicode Character Database EastAsianWidth.txt into an immutable
range table and answers width and general category queries against it.

Usage:
    >>> from east_asian_width import UcdFormatParser, WidthLookupEngine
    >>> engine = WidthLookupEngine(UcdFormatParser().parse_file("EastAsianWidth.txt"))
    >>> engine.width_of(0x3000)
    <EastAsianWidth.FULL_WIDTH: 'F'>
"""

from east_asian_width.domain import (
    EastAsianWidth,
    Entry,
    GeneralCategory,
    RangeTable,
    WidthLookupEngine,
)
from east_asian_width.io.readers.ucd_reader import UcdFormatParser

__version__ = "0.1.0"

__all__ = [
    "EastAsianWidth",
    "Entry",
    "GeneralCategory",
    "RangeTable",
    "UcdFormatParser",
    "WidthLookupEngine",
    "__version__",
]
