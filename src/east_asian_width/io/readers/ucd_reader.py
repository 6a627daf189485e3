"""
Reader for the Unicode Character Database EastAsianWidth.txt format.

Each data line has one of two shapes (fields split on ``;``, ``#``, ``[``, ``]``)::

    3000           ; F  # Zs         IDEOGRAPHIC SPACE
    0C92..0CA8     ; N  # Lo    [23] KANNADA LETTER O..KANNADA LETTER NA

The compact three-field shape carries the category and the name in one field;
the five-field shape adds a bracketed decimal range length. Comment lines
(including ``# @missing`` defaults) and blank lines are skipped.

Parsing is all-or-nothing: the first bad line aborts the load.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from east_asian_width.domain.exceptions import (
    MalformedRecordError,
    TableInvariantError,
    UnknownWidthCodeError,
)
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.domain.types import MAX_CODE_POINT, EastAsianWidth, Entry
from east_asian_width.utils.logging import get_logger

logger = get_logger(__name__)

FIELD_DELIMITERS = re.compile(r"[;#\[\]]")
RANGE_SEPARATOR = ".."
COMMENT_MARKER = "#"
COMPACT_FIELD_COUNT = 3
ANNOTATED_FIELD_COUNT = 5
CATEGORY_CODE = re.compile(r"^(?:[A-Z][a-z]|L&)$")


@dataclass(frozen=True)
class ParseStats:
    """Counters collected during one parse."""

    lines_read: int
    lines_skipped: int
    entries: int


class UcdFormatParser:
    """
    Parser turning EastAsianWidth.txt lines into Entry records.

    Example:
        >>> parser = UcdFormatParser()
        >>> entry = parser.parse_line("3000 ; F # Zs IDEOGRAPHIC SPACE")
        >>> entry.width
        <EastAsianWidth.FULL_WIDTH: 'F'>
        >>> table = parser.parse_file("EastAsianWidth.txt")
    """

    def __init__(self) -> None:
        self.last_stats = ParseStats(lines_read=0, lines_skipped=0, entries=0)

    @staticmethod
    def is_record_line(line: str) -> bool:
        """True unless the line is blank or a comment."""
        stripped = line.strip()
        return bool(stripped) and not stripped.startswith(COMMENT_MARKER)

    def parse_line(
        self, line: str, line_number: Optional[int] = None
    ) -> Optional[Entry]:
        """
        Parse one source line.

        Args:
            line: Raw source line (trailing newline allowed)
            line_number: 1-based line number used in error messages

        Returns:
            The parsed Entry, or None for blank and comment lines

        Raises:
            MalformedRecordError: If the line does not split into 3 or 5 fields
                or a sub-field cannot be parsed
            UnknownWidthCodeError: If the width abbreviation is unknown
        """
        if not self.is_record_line(line):
            return None

        fields = FIELD_DELIMITERS.split(line.rstrip("\r\n"))

        if len(fields) == COMPACT_FIELD_COUNT:
            category, name_range = self._split_compact_field(
                fields[2], line_number, line
            )
            range_length = 1
        elif len(fields) == ANNOTATED_FIELD_COUNT:
            category = fields[2].strip()
            range_length = self._parse_range_length(fields[3], line_number, line)
            name_range = fields[-1].strip()
        else:
            raise MalformedRecordError(
                f"Expected {COMPACT_FIELD_COUNT} or {ANNOTATED_FIELD_COUNT} fields, "
                f"got {len(fields)}",
                line_number,
                line,
            )

        if not CATEGORY_CODE.match(category):
            raise MalformedRecordError(
                f"Invalid general category token {category!r}", line_number, line
            )

        start, end = self._parse_code_point_range(fields[0], line_number, line)
        width = self._parse_width(fields[1], line_number)
        start_name, end_name = _split_pair(name_range)

        return Entry(
            start=start,
            end=end,
            width=width,
            general_category=category,
            range_length=range_length,
            start_name=start_name,
            end_name=end_name,
        )

    def iter_entries(self, lines: Iterable[str]) -> Iterator[Entry]:
        """Yield entries for ``lines`` in source order."""
        lines_read = 0
        skipped = 0
        produced = 0
        for line_number, line in enumerate(lines, start=1):
            lines_read += 1
            entry = self.parse_line(line, line_number)
            if entry is None:
                skipped += 1
                continue
            produced += 1
            yield entry
        self.last_stats = ParseStats(
            lines_read=lines_read, lines_skipped=skipped, entries=produced
        )

    def parse_lines(self, lines: Iterable[str]) -> RangeTable:
        """
        Parse a full sequence of lines into a validated RangeTable.

        Raises:
            MalformedRecordError, UnknownWidthCodeError: On the first bad line
            TableInvariantError: If the records are out of order or overlap
        """
        entries: List[Entry] = list(self.iter_entries(lines))
        table = RangeTable(entries)
        logger.info(
            "ucd.parse_completed",
            entries=len(table),
            lines_read=self.last_stats.lines_read,
            lines_skipped=self.last_stats.lines_skipped,
            covered_code_points=table.covered_code_points,
        )
        return table

    def parse_file(self, file_path: Union[str, Path]) -> RangeTable:
        """
        Parse an EastAsianWidth.txt file into a RangeTable.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedRecordError, UnknownWidthCodeError, TableInvariantError:
                See parse_lines
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"UCD source file not found: {path}")

        logger.info("ucd.parse_started", source=str(path))
        try:
            with open(path, "r", encoding="utf-8") as f:
                return self.parse_lines(f)
        except (
            MalformedRecordError,
            UnknownWidthCodeError,
            TableInvariantError,
        ) as e:
            logger.error("ucd.parse_failed", source=str(path), error=str(e))
            raise

    @staticmethod
    def _split_compact_field(
        field: str, line_number: Optional[int], line: str
    ) -> Tuple[str, str]:
        # "Zs         IDEOGRAPHIC SPACE" -> ("Zs", "IDEOGRAPHIC SPACE")
        parts = field.strip().split(None, 1)
        if len(parts) != 2:
            raise MalformedRecordError(
                "Compact record lacks a category or a name", line_number, line
            )
        return parts[0], parts[1].strip()

    @staticmethod
    def _parse_range_length(
        field: str, line_number: Optional[int], line: str
    ) -> int:
        try:
            return int(field.strip(), 10)
        except ValueError:
            raise MalformedRecordError(
                f"Invalid range length {field.strip()!r}", line_number, line
            ) from None

    @staticmethod
    def _parse_code_point_range(
        field: str, line_number: Optional[int], line: str
    ) -> Tuple[int, int]:
        first, last = _split_pair(field)
        try:
            start = _parse_hex(first)
            end = _parse_hex(last)
        except ValueError:
            raise MalformedRecordError(
                f"Invalid code point range {field.strip()!r}", line_number, line
            ) from None
        if not 0 <= start <= end <= MAX_CODE_POINT:
            raise MalformedRecordError(
                f"Code point range {field.strip()!r} is inverted or out of range",
                line_number,
                line,
            )
        return start, end

    @staticmethod
    def _parse_width(field: str, line_number: Optional[int]) -> EastAsianWidth:
        code = field.strip()
        try:
            return EastAsianWidth(code)
        except ValueError:
            raise UnknownWidthCodeError(code, line_number) from None


def _split_pair(value: str) -> Tuple[str, str]:
    first, separator, last = value.partition(RANGE_SEPARATOR)
    first = first.strip()
    if not separator:
        return first, first
    return first, last.strip()


def _parse_hex(value: str) -> int:
    # int(x, 16) also accepts "0x", "_" and signs; the format allows none of them
    if not value or not all(c in "0123456789abcdefABCDEF" for c in value):
        raise ValueError(value)
    return int(value, 16)


def parse_file(file_path: Union[str, Path]) -> RangeTable:
    """Convenience wrapper around UcdFormatParser().parse_file()."""
    return UcdFormatParser().parse_file(file_path)


__all__ = [
    "UcdFormatParser",
    "ParseStats",
    "parse_file",
]
