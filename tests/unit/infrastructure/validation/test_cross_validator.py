"""Tests for infrastructure.validation.cross_validator module."""

from __future__ import annotations

import json
import logging
from typing import Dict

import pytest

from east_asian_width.domain.lookup import WidthLookupEngine
from east_asian_width.domain.range_table import RangeTable
from east_asian_width.domain.types import EastAsianWidth, Entry, GeneralCategory
from east_asian_width.infrastructure.validation import (
    CategoryCrossValidator,
    CategoryMismatch,
)


def _fixed_oracle(overrides: Dict[int, GeneralCategory]):
    def oracle(code_point: int) -> GeneralCategory:
        return overrides.get(code_point, GeneralCategory.OTHER_NOT_ASSIGNED)

    return oracle


@pytest.fixture
def small_table() -> RangeTable:
    return RangeTable(
        [
            Entry(0x41, 0x43, EastAsianWidth.NARROW, "Lu", 3, "A", "C"),
            Entry(0x50, 0x50, EastAsianWidth.NARROW, "Xx", 1, "P", "P"),
            Entry(0x60, 0x61, EastAsianWidth.NARROW, "L&", 2, "X", "Y"),
        ]
    )


@pytest.mark.unit
class TestAudit:
    def test_reports_mismatches_in_code_point_order(
        self, small_table: RangeTable
    ) -> None:
        oracle = _fixed_oracle(
            {
                0x41: GeneralCategory.UPPERCASE_LETTER,
                0x42: GeneralCategory.UPPERCASE_LETTER,
                0x43: GeneralCategory.LOWERCASE_LETTER,
                0x45: GeneralCategory.OTHER_LETTER,
                0x60: GeneralCategory.UPPERCASE_LETTER,
                0x61: GeneralCategory.LOWERCASE_LETTER,
            }
        )
        engine = WidthLookupEngine(small_table, oracle=oracle)
        validator = CategoryCrossValidator(
            engine, oracle=oracle, max_workers=1, chunk_size=16
        )

        report = validator.audit(0x40, 0x70)

        assert report.scanned == 0x30
        assert report.mismatches == [
            CategoryMismatch(
                0x43, GeneralCategory.UPPERCASE_LETTER, GeneralCategory.LOWERCASE_LETTER
            ),
            CategoryMismatch(
                0x45, GeneralCategory.OTHER_NOT_ASSIGNED, GeneralCategory.OTHER_LETTER
            ),
        ]
        assert report.total_mismatches == 2

    def test_corrupt_codes_are_collected_not_raised(
        self, small_table: RangeTable
    ) -> None:
        oracle = _fixed_oracle({})
        engine = WidthLookupEngine(small_table, oracle=oracle)
        validator = CategoryCrossValidator(engine, oracle=oracle, max_workers=1)

        report = validator.audit(0x40, 0x70)

        assert report.corrupt_code_points == [0x50]
        assert report.corrupt[0].category_code == "Xx"

    def test_parallel_matches_sequential(self, engine: WidthLookupEngine) -> None:
        sequential = CategoryCrossValidator(engine, max_workers=1, chunk_size=0x100)
        parallel = CategoryCrossValidator(engine, max_workers=4, chunk_size=0x100)

        first = sequential.audit(0, 0x4000)
        second = parallel.audit(0, 0x4000)

        assert first.mismatches == second.mismatches
        codes = [item.code_point for item in second.mismatches]
        assert codes == sorted(codes)

    def test_ascii_and_greek_agree_with_platform(
        self, engine: WidthLookupEngine
    ) -> None:
        validator = CategoryCrossValidator(engine, max_workers=2, chunk_size=0x40)

        assert validator.audit(0x0000, 0x00A4).total_mismatches == 0
        assert validator.audit(0x0370, 0x0380).total_mismatches == 0

    def test_unlisted_assigned_characters_are_reported(
        self, engine: WidthLookupEngine
    ) -> None:
        validator = CategoryCrossValidator(engine, max_workers=1)

        # U+00A4 CURRENCY SIGN is assigned but absent from the excerpt
        report = validator.audit(0x00A4, 0x00A5)

        assert report.mismatches == [
            CategoryMismatch(
                0x00A4,
                GeneralCategory.OTHER_NOT_ASSIGNED,
                GeneralCategory.CURRENCY_SYMBOL,
            )
        ]

    def test_empty_window(self, engine: WidthLookupEngine) -> None:
        report = CategoryCrossValidator(engine, max_workers=1).audit(0x10, 0x10)

        assert report.scanned == 0
        assert report.mismatches == []
        assert report.mismatch_rate == 0.0

    @pytest.mark.parametrize(
        ("start", "stop"), [(-1, 10), (10, 5), (0, 0x110001)]
    )
    def test_invalid_window(
        self, engine: WidthLookupEngine, start: int, stop: int
    ) -> None:
        with pytest.raises(ValueError):
            CategoryCrossValidator(engine, max_workers=1).audit(start, stop)

    def test_default_oracle_records_unicode_version(
        self, engine: WidthLookupEngine
    ) -> None:
        report = CategoryCrossValidator(engine, max_workers=1).audit(0, 0x20)

        assert report.oracle_version

    def test_audit_events_are_logged_under_validator_module(
        self, engine: WidthLookupEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)

        CategoryCrossValidator(engine, max_workers=1).audit(0, 0x20)

        events = {
            json.loads(record.message)["event"]: record
            for record in caplog.records
            if record.message.startswith("{")
        }
        module = "east_asian_width.infrastructure.validation.cross_validator"
        assert events["audit.started"].name == module
        assert events["audit.completed"].name == module
        assert json.loads(events["audit.started"].message)["logger"] == module


@pytest.mark.unit
class TestConfiguration:
    def test_defaults_come_from_settings(
        self, engine: WidthLookupEngine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from east_asian_width.config import get_settings

        monkeypatch.setenv("EAW_MAX_WORKERS", "3")
        monkeypatch.setenv("EAW_AUDIT_CHUNK_SIZE", "1024")
        get_settings.cache_clear()

        validator = CategoryCrossValidator(engine)

        assert validator.max_workers == 3
        assert validator.chunk_size == 1024

    def test_rejects_non_positive_workers(self, engine: WidthLookupEngine) -> None:
        with pytest.raises(ValueError):
            CategoryCrossValidator(engine, max_workers=-1, chunk_size=10)


@pytest.mark.unit
def test_by_category_pair(small_table: RangeTable) -> None:
    oracle = _fixed_oracle({0x44: GeneralCategory.OTHER_LETTER})
    engine = WidthLookupEngine(small_table, oracle=oracle)

    report = CategoryCrossValidator(engine, oracle=oracle, max_workers=1).audit(
        0x41, 0x45
    )

    assert report.by_category_pair() == {
        (GeneralCategory.UPPERCASE_LETTER, GeneralCategory.OTHER_NOT_ASSIGNED): 3,
        (GeneralCategory.OTHER_NOT_ASSIGNED, GeneralCategory.OTHER_LETTER): 1,
    }
