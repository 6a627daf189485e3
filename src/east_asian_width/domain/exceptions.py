"""
Exception hierarchy for East Asian Width table loading and lookup.

Parse-time errors abort the whole load: a partially built table would give
silently wrong answers for every caller, so nothing here is ever downgraded
to a default value.
"""

from typing import Optional


class EastAsianWidthError(Exception):
    """Base exception for all East Asian Width table errors."""

    pass


class MalformedRecordError(EastAsianWidthError):
    """
    Raised when a UCD source line cannot be decomposed into a record.

    Covers wrong field counts, unparseable hex code points or decimal range
    lengths, inverted or out-of-range code points and bad category tokens.

    Args:
        message: Error description
        line_number: 1-based line number in the source (optional)
        line: Raw source line (optional)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.line_number = line_number
        self.line = line

        context_parts = []
        if line_number is not None:
            context_parts.append(f"line={line_number}")
        if line is not None:
            context_parts.append(f"text={line.strip()!r}")

        if context_parts:
            full_message = f"{message} ({', '.join(context_parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class UnknownWidthCodeError(EastAsianWidthError):
    """
    Raised when a width abbreviation is outside {A, F, H, N, Na, W}.

    Args:
        code: The offending abbreviation
        line_number: 1-based line number in the source (optional)
    """

    def __init__(self, code: str, line_number: Optional[int] = None):
        self.code = code
        self.line_number = line_number

        message = f"Unknown East Asian Width abbreviation {code!r}"
        if line_number is not None:
            message = f"{message} (line={line_number})"

        super().__init__(message)


class UnknownCategoryCodeError(EastAsianWidthError):
    """
    Raised when a table entry carries a general category code outside the
    30 known values.

    This signals a corrupt table rather than a caller mistake.

    Args:
        code: The offending category code
        code_point: Code point whose resolution hit the bad code (optional)
    """

    def __init__(self, code: str, code_point: Optional[int] = None):
        self.code = code
        self.code_point = code_point

        message = f"Unknown general category code {code!r}"
        if code_point is not None:
            message = f"{message} (code_point=U+{code_point:04X})"

        super().__init__(message)


class TableInvariantError(EastAsianWidthError):
    """Raised when entries are not sorted ascending or overlap."""

    pass


class TableSnapshotError(EastAsianWidthError):
    """
    Raised when a persisted table snapshot cannot be read or fails schema
    validation.

    Args:
        message: Error description
        path: Snapshot path (optional)
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        full_message = f"{message} (path='{path}')" if path else message
        super().__init__(full_message)


__all__ = [
    "EastAsianWidthError",
    "MalformedRecordError",
    "UnknownWidthCodeError",
    "UnknownCategoryCodeError",
    "TableInvariantError",
    "TableSnapshotError",
]
