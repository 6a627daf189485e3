"""Category discrepancy report export.

Writes the outcome of a CategoryCrossValidator audit to a timestamped CSV
file with a metadata header, for drift analysis between the static table and
newer Unicode revisions.

Usage:
    >>> from east_asian_width.infrastructure.validation import (
    ...     export_discrepancies_csv,
    ... )
    >>> csv_path = export_discrepancies_csv(report, output_dir=Path("logs"))
"""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path
from typing import Optional

from east_asian_width.infrastructure.validation.types import CategoryAuditReport

FIELDNAMES = ["code_point", "expected_category", "actual_category"]


def export_discrepancies_csv(
    report: CategoryAuditReport,
    output_dir: Optional[Path] = None,
    filename_prefix: str = "category_discrepancies",
) -> Path:
    """Export audit mismatches to CSV in the standard log directory.

    Args:
        report: Audit report to export
        output_dir: Output directory (defaults to logs/)
        filename_prefix: Prefix for output filename (timestamp appended)

    Returns:
        Path to generated CSV file

    CSV Format:
        # Category Discrepancy Report
        # Date: 2026-10-19T10:30:00
        # Range: U+0000..U+10FFFF
        # Oracle Unicode Version: 15.1.0
        # Corrupt Category Codes: 0
        code_point,expected_category,actual_category
        U+0378,Cn,Lo
        ...
        Total mismatches: 1
    """
    if output_dir is None:
        output_dir = Path("logs")

    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = output_dir / f"{filename_prefix}_{timestamp}.csv"

    with open(filepath, "w", newline="", encoding="utf-8") as f:
        f.write("# Category Discrepancy Report\n")
        f.write(f"# Date: {datetime.now().isoformat()}\n")
        f.write(f"# Range: {_window_label(report)}\n")
        if report.oracle_version:
            f.write(f"# Oracle Unicode Version: {report.oracle_version}\n")
        f.write(f"# Corrupt Category Codes: {len(report.corrupt)}\n")

        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(FIELDNAMES)
        for mismatch in report.mismatches:
            writer.writerow(
                [
                    mismatch.label,
                    mismatch.expected_category.value,
                    mismatch.actual_category.value,
                ]
            )

        f.write(f"Total mismatches: {report.total_mismatches}\n")

    return filepath


def _window_label(report: CategoryAuditReport) -> str:
    if report.scanned == 0:
        return "(empty)"
    return f"U+{report.start:04X}..U+{report.stop - 1:04X}"


__all__ = ["export_discrepancies_csv"]
