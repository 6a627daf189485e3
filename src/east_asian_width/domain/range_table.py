"""
Immutable, ordered table of East Asian Width ranges.

The table is validated once at construction (ascending, disjoint) and never
mutated afterwards, so it can be shared by any number of readers without
locking. Gaps between entries are expected; they stand for unassigned code
points and are resolved by lookup fallbacks, not by explicit entries.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, overload

from east_asian_width.domain.exceptions import TableInvariantError
from east_asian_width.domain.types import MAX_CODE_POINT, Entry


class RangeTable(Sequence[Entry]):
    """
    Ordered sequence of disjoint Entry ranges.

    Args:
        entries: Entries in ascending order of ``start``. The order is checked,
            not imposed; out-of-order or overlapping input raises
            TableInvariantError.

    Example:
        >>> table = RangeTable(entries)
        >>> table[0].start
        0
        >>> len(table.gaps()) > 0
        True
    """

    __slots__ = ("_entries", "_starts")

    def __init__(self, entries: Iterable[Entry]):
        items = tuple(entries)
        _check_invariants(items)
        self._entries: Tuple[Entry, ...] = items
        self._starts: Tuple[int, ...] = tuple(entry.start for entry in items)

    @overload
    def __getitem__(self, index: int) -> Entry: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Entry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RangeTable):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"RangeTable(entries={len(self._entries)})"

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    @property
    def starts(self) -> Tuple[int, ...]:
        """Range starts in table order, suitable for bisect."""
        return self._starts

    @property
    def covered_code_points(self) -> int:
        return sum(entry.size for entry in self._entries)

    def gaps(self) -> List[Tuple[int, int]]:
        """
        Return the inclusive code point ranges not covered by any entry.

        Returns:
            List of (first, last) pairs in ascending order spanning the whole
            [0, 0x10FFFF] space together with the table entries
        """
        gaps: List[Tuple[int, int]] = []
        cursor = 0
        for entry in self._entries:
            if entry.start > cursor:
                gaps.append((cursor, entry.start - 1))
            cursor = entry.end + 1
        if cursor <= MAX_CODE_POINT:
            gaps.append((cursor, MAX_CODE_POINT))
        return gaps


def _check_invariants(entries: Sequence[Entry]) -> None:
    previous = None
    for index, entry in enumerate(entries):
        if previous is not None:
            if entry.start < previous.start:
                raise TableInvariantError(
                    f"Entry {index} (U+{entry.start:04X}) starts before "
                    f"entry {index - 1} (U+{previous.start:04X}); table is not sorted"
                )
            if entry.start <= previous.end:
                raise TableInvariantError(
                    f"Entry {index} (U+{entry.start:04X}..U+{entry.end:04X}) overlaps "
                    f"entry {index - 1} (U+{previous.start:04X}..U+{previous.end:04X})"
                )
        previous = entry


__all__ = ["RangeTable"]
