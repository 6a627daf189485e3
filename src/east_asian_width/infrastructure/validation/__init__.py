"""Category auditing: cross-validation against the platform and report export.

Key exports:
- CategoryCrossValidator: full-range table vs oracle comparison
- CategoryAuditReport, CategoryMismatch, CorruptCategory: result types
- export_discrepancies_csv: CSV report writer
"""

from east_asian_width.infrastructure.validation.cross_validator import (
    CategoryCrossValidator,
)
from east_asian_width.infrastructure.validation.report_generator import (
    export_discrepancies_csv,
)
from east_asian_width.infrastructure.validation.types import (
    CategoryAuditReport,
    CategoryMismatch,
    CorruptCategory,
)

__all__ = [
    "CategoryCrossValidator",
    "CategoryAuditReport",
    "CategoryMismatch",
    "CorruptCategory",
    "export_discrepancies_csv",
]
