"""
Cross-validation of table-derived general categories against the platform.

Every audited code point is resolved twice: through WidthLookupEngine
(EastAsianWidth.txt annotations) and through an independent oracle
(``unicodedata`` by default). Disagreements reveal drift between the static
table and the oracle's Unicode revision. The audit never raises on a
mismatch; corrupt category codes are collected the same way.

Usage:
    >>> validator = CategoryCrossValidator(engine)
    >>> report = validator.audit()
    >>> report.total_mismatches
    0
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from east_asian_width.config import get_settings
from east_asian_width.domain.lookup import WidthLookupEngine
from east_asian_width.domain.types import CODE_POINT_SPACE
from east_asian_width.infrastructure.unicode_oracle import (
    CategoryOracle,
    oracle_unicode_version,
    unicodedata_category,
)
from east_asian_width.infrastructure.validation.types import (
    CategoryAuditReport,
    CategoryMismatch,
    CorruptCategory,
)
from east_asian_width.utils.logging import bind_context


@dataclass
class _ChunkResult:
    mismatches: List[CategoryMismatch] = field(default_factory=list)
    corrupt: List[CorruptCategory] = field(default_factory=list)


class CategoryCrossValidator:
    """
    Audit WidthLookupEngine.general_category_of against an oracle.

    Args:
        engine: Engine whose table is audited
        oracle: Ground-truth classifier (defaults to unicodedata)
        max_workers: Worker threads (defaults to settings.max_workers)
        chunk_size: Code points per work unit (defaults to settings.audit_chunk_size)
    """

    def __init__(
        self,
        engine: WidthLookupEngine,
        oracle: Optional[CategoryOracle] = None,
        max_workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
    ):
        if max_workers is None or chunk_size is None:
            settings = get_settings()
            if max_workers is None:
                max_workers = settings.max_workers
            if chunk_size is None:
                chunk_size = settings.audit_chunk_size
        if max_workers < 1 or chunk_size < 1:
            raise ValueError("max_workers and chunk_size must be >= 1")

        self.engine = engine
        self.oracle = oracle or unicodedata_category
        self.max_workers = max_workers
        self.chunk_size = chunk_size

    def audit(
        self, start: int = 0, stop: int = CODE_POINT_SPACE
    ) -> CategoryAuditReport:
        """
        Compare categories for every code point in ``[start, stop)``.

        Args:
            start: First code point to audit
            stop: One past the last code point (default: the whole code space)

        Returns:
            CategoryAuditReport ordered by code point

        Raises:
            ValueError: If the window is outside [0, 0x110000] or inverted
        """
        if not 0 <= start <= stop <= CODE_POINT_SPACE:
            raise ValueError(
                f"Invalid audit window [{start:#x}, {stop:#x}); "
                f"must lie within [0, {CODE_POINT_SPACE:#x}]"
            )

        log = bind_context(
            __name__,
            audit_start_code_point=start,
            audit_stop_code_point=stop,
            workers=self.max_workers,
        )
        log.info("audit.started")
        began = time.perf_counter()

        chunks = list(self._chunks(start, stop))
        if self.max_workers == 1 or len(chunks) <= 1:
            results = [self._scan(lo, hi) for lo, hi in chunks]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() keeps chunk order, so concatenation stays sorted
                results = list(
                    executor.map(lambda bounds: self._scan(*bounds), chunks)
                )

        report = CategoryAuditReport(start=start, stop=stop)
        for result in results:
            report.mismatches.extend(result.mismatches)
            report.corrupt.extend(result.corrupt)
        report.duration_seconds = time.perf_counter() - began
        if self.oracle is unicodedata_category:
            report.oracle_version = oracle_unicode_version()

        log.info(
            "audit.completed",
            scanned=report.scanned,
            mismatches=report.total_mismatches,
            corrupt=len(report.corrupt),
            duration_seconds=round(report.duration_seconds, 3),
        )
        if report.corrupt:
            log.warning(
                "audit.corrupt_categories",
                codes=sorted({item.category_code for item in report.corrupt}),
                first_code_point=report.corrupt[0].code_point,
            )
        return report

    def _chunks(self, start: int, stop: int) -> Iterator[Tuple[int, int]]:
        for lo in range(start, stop, self.chunk_size):
            yield lo, min(lo + self.chunk_size, stop)

    def _scan(self, lo: int, hi: int) -> _ChunkResult:
        result = _ChunkResult()
        resolve = self.engine.resolve_general_category
        oracle = self.oracle
        for code_point in range(lo, hi):
            resolution = resolve(code_point)
            actual = oracle(code_point)
            if resolution.category is None:
                result.corrupt.append(
                    CorruptCategory(code_point, resolution.error_code or "", actual)
                )
            elif resolution.category != actual:
                result.mismatches.append(
                    CategoryMismatch(code_point, resolution.category, actual)
                )
        return result


__all__ = ["CategoryCrossValidator"]
