"""
JSON snapshots of a parsed RangeTable.

A snapshot is the persisted form of the table: generated once from
EastAsianWidth.txt and loaded at process start without re-parsing the UCD
text. Field order follows Entry; widths are stored as their UCD abbreviation.

Usage:
    >>> from east_asian_width.io.table_store import dump_table, load_table
    >>> dump_table(table, "data/east_asian_width.json", source="EastAsianWidth.txt")
    >>> table = load_table("data/east_asian_width.json")
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from east_asian_width.domain.exceptions import TableSnapshotError
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.domain.types import MAX_CODE_POINT, EastAsianWidth, Entry
from east_asian_width.utils.logging import get_logger

logger = get_logger(__name__)

SNAPSHOT_SCHEMA_VERSION = 1


class EntryRecord(BaseModel):
    """Serialized form of one Entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: int = Field(ge=0, le=MAX_CODE_POINT)
    end: int = Field(ge=0, le=MAX_CODE_POINT)
    width: EastAsianWidth
    general_category: str = Field(min_length=2, max_length=2)
    range_length: int = Field(ge=0)
    start_name: str
    end_name: str

    @model_validator(mode="after")
    def _check_bounds(self) -> "EntryRecord":
        if self.start > self.end:
            raise ValueError(f"start {self.start:#x} is after end {self.end:#x}")
        return self

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryRecord":
        return cls(
            start=entry.start,
            end=entry.end,
            width=entry.width,
            general_category=entry.general_category,
            range_length=entry.range_length,
            start_name=entry.start_name,
            end_name=entry.end_name,
        )

    def to_entry(self) -> Entry:
        return Entry(
            start=self.start,
            end=self.end,
            width=self.width,
            general_category=self.general_category,
            range_length=self.range_length,
            start_name=self.start_name,
            end_name=self.end_name,
        )


class TableSnapshot(BaseModel):
    """
    Top-level snapshot document.

    Attributes:
        schema_version: Snapshot layout version
        source: Where the entries were parsed from (file name or URL)
        generated_at: ISO-8601 UTC timestamp of generation
        entry_count: Number of entries, checked on load
        entries: Entries in table order
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: int = SNAPSHOT_SCHEMA_VERSION
    source: Optional[str] = None
    generated_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    entry_count: int = Field(ge=0)
    entries: List[EntryRecord]

    @model_validator(mode="after")
    def _check_count(self) -> "TableSnapshot":
        if self.schema_version != SNAPSHOT_SCHEMA_VERSION:
            raise ValueError(
                f"unsupported schema_version {self.schema_version}, "
                f"expected {SNAPSHOT_SCHEMA_VERSION}"
            )
        if self.entry_count != len(self.entries):
            raise ValueError(
                f"entry_count {self.entry_count} does not match "
                f"{len(self.entries)} entries"
            )
        return self


def table_to_snapshot(
    table: RangeTable, source: Optional[str] = None
) -> TableSnapshot:
    records = [EntryRecord.from_entry(entry) for entry in table]
    return TableSnapshot(source=source, entry_count=len(records), entries=records)


def dump_table(
    table: RangeTable,
    path: Union[str, Path],
    source: Optional[str] = None,
) -> Path:
    """
    Write ``table`` as a JSON snapshot.

    Args:
        table: Table to persist
        path: Output file; parent directories are created
        source: Free-form provenance recorded in the snapshot

    Returns:
        Path of the written snapshot
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    snapshot = table_to_snapshot(table, source=source)
    output.write_text(snapshot.model_dump_json(indent=1), encoding="utf-8")
    logger.info(
        "snapshot.written",
        path=str(output),
        entries=snapshot.entry_count,
        source=source,
    )
    return output


def load_table(path: Union[str, Path]) -> RangeTable:
    """
    Load a RangeTable from a JSON snapshot.

    Raises:
        FileNotFoundError: If the snapshot does not exist
        TableSnapshotError: If the document is not a valid snapshot
        TableInvariantError: If the entries are unsorted or overlap
    """
    snapshot_path = Path(path)
    if not snapshot_path.exists():
        raise FileNotFoundError(f"Table snapshot not found: {snapshot_path}")

    try:
        raw = snapshot_path.read_text(encoding="utf-8")
        snapshot = TableSnapshot.model_validate_json(raw)
    except ValidationError as e:
        logger.error("snapshot.invalid", path=str(snapshot_path), error=str(e))
        raise TableSnapshotError(
            f"Snapshot failed validation: {e.error_count()} error(s)",
            str(snapshot_path),
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TableSnapshotError(
            f"Snapshot could not be read: {e}", str(snapshot_path)
        ) from e

    table = RangeTable(record.to_entry() for record in snapshot.entries)
    logger.info(
        "snapshot.loaded",
        path=str(snapshot_path),
        entries=len(table),
        source=snapshot.source,
    )
    return table


__all__ = [
    "SNAPSHOT_SCHEMA_VERSION",
    "EntryRecord",
    "TableSnapshot",
    "table_to_snapshot",
    "dump_table",
    "load_table",
]
