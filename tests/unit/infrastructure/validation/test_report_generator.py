"""Tests for infrastructure.validation.report_generator module."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from east_asian_width.domain.types import GeneralCategory
from east_asian_width.infrastructure.validation import (
    CategoryAuditReport,
    CategoryMismatch,
    CorruptCategory,
    export_discrepancies_csv,
)


@pytest.fixture
def audit_report() -> CategoryAuditReport:
    return CategoryAuditReport(
        start=0,
        stop=0x110000,
        mismatches=[
            CategoryMismatch(
                0x00A4,
                GeneralCategory.OTHER_NOT_ASSIGNED,
                GeneralCategory.CURRENCY_SYMBOL,
            ),
            CategoryMismatch(
                0x1F600,
                GeneralCategory.OTHER_NOT_ASSIGNED,
                GeneralCategory.OTHER_SYMBOL,
            ),
        ],
        corrupt=[CorruptCategory(0x50, "Xx", GeneralCategory.UPPERCASE_LETTER)],
        oracle_version="15.1.0",
    )


@pytest.mark.unit
class TestExportDiscrepanciesCsv:
    def test_creates_timestamped_file(
        self, audit_report: CategoryAuditReport, tmp_path: Path
    ) -> None:
        csv_path = export_discrepancies_csv(
            audit_report, output_dir=tmp_path, filename_prefix="drift"
        )

        assert csv_path.exists()
        assert csv_path.suffix == ".csv"
        assert csv_path.name.startswith("drift_")

    def test_contains_metadata_header(
        self, audit_report: CategoryAuditReport, tmp_path: Path
    ) -> None:
        content = export_discrepancies_csv(audit_report, output_dir=tmp_path).read_text(
            encoding="utf-8"
        )

        assert "# Category Discrepancy Report" in content
        assert "# Date:" in content
        assert "# Range: U+0000..U+10FFFF" in content
        assert "# Oracle Unicode Version: 15.1.0" in content
        assert "# Corrupt Category Codes: 1" in content

    def test_rows_and_trailer(
        self, audit_report: CategoryAuditReport, tmp_path: Path
    ) -> None:
        lines = (
            export_discrepancies_csv(audit_report, output_dir=tmp_path)
            .read_text(encoding="utf-8")
            .splitlines()
        )
        body = [line for line in lines if not line.startswith("#")]

        rows = list(csv.reader(body[:-1]))
        assert rows == [
            ["code_point", "expected_category", "actual_category"],
            ["U+00A4", "Cn", "Sc"],
            ["U+1F600", "Cn", "So"],
        ]
        assert body[-1] == "Total mismatches: 2"

    def test_empty_report(self, tmp_path: Path) -> None:
        report = CategoryAuditReport(start=0x41, stop=0x41)

        content = export_discrepancies_csv(report, output_dir=tmp_path).read_text(
            encoding="utf-8"
        )

        assert "# Range: (empty)" in content
        assert "Oracle Unicode Version" not in content
        assert content.rstrip().endswith("Total mismatches: 0")

    def test_creates_output_directory(
        self, audit_report: CategoryAuditReport, tmp_path: Path
    ) -> None:
        output_dir = tmp_path / "reports" / "audit"

        csv_path = export_discrepancies_csv(audit_report, output_dir=output_dir)

        assert csv_path.parent == output_dir
