"""
Unified CLI entry point for the East Asian Width tables.

Usage:
    python -m east_asian_width.cli <command> [options]

Available commands:
    build   - Parse EastAsianWidth.txt and write a JSON table snapshot
    lookup  - Show width, category and range for code points
    audit   - Cross-validate table categories against unicodedata

Examples:
    python -m east_asian_width.cli build --source data/EastAsianWidth.txt \\
        --output data/east_asian_width.json
    python -m east_asian_width.cli lookup 3000 FF5E 0C92
    python -m east_asian_width.cli audit --start 0 --stop 10000 --output-dir logs
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from east_asian_width.config import get_settings
from east_asian_width.domain.exceptions import EastAsianWidthError
from east_asian_width.domain.lookup import WidthLookupEngine
from east_asian_width.domain.types import CODE_POINT_SPACE, MAX_CODE_POINT
from east_asian_width.infrastructure.validation import (
    CategoryCrossValidator,
    export_discrepancies_csv,
)
from east_asian_width.io.loader import load_default_table
from east_asian_width.io.readers.ucd_reader import UcdFormatParser
from east_asian_width.io.table_store import dump_table
from east_asian_width.utils.logging import get_logger

logger = get_logger(__name__)


def _code_point(value: str) -> int:
    """argparse type for hex code points, with or without a U+ / 0x prefix."""
    text = value.strip().upper()
    for prefix in ("U+", "0X"):
        if text.startswith(prefix):
            text = text[len(prefix):]
    try:
        code_point = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex code point: {value!r}") from None
    if not 0 <= code_point <= CODE_POINT_SPACE:
        raise argparse.ArgumentTypeError(f"out of range: {value!r}")
    return code_point


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="east_asian_width.cli",
        description="East Asian Width table tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Parse EastAsianWidth.txt into a JSON snapshot",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    build_parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="EastAsianWidth.txt path (defaults to EAW_UCD_SOURCE_PATH)",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Snapshot file to write",
    )

    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Show width, category and range for hex code points",
    )
    lookup_parser.add_argument("code_points", nargs="+", type=_code_point)

    audit_parser = subparsers.add_parser(
        "audit",
        help="Cross-validate table categories against unicodedata",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    audit_parser.add_argument("--start", type=_code_point, default=0)
    audit_parser.add_argument(
        "--stop",
        type=_code_point,
        default=CODE_POINT_SPACE,
        help="One past the last audited code point",
    )
    audit_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Report directory (defaults to EAW_AUDIT_OUTPUT_DIR)",
    )
    audit_parser.add_argument("--workers", type=int, default=None)

    return parser


def _run_build(args: argparse.Namespace) -> int:
    source = args.source or Path(get_settings().ucd_source_path)
    table = UcdFormatParser().parse_file(source)
    output = dump_table(table, args.output, source=source.name)
    print(f"Parsed {len(table)} entries from {source}")
    print(f"Snapshot written to {output}")
    return 0


def _run_lookup(args: argparse.Namespace) -> int:
    engine = WidthLookupEngine(load_default_table())
    for code_point in args.code_points:
        label = f"U+{code_point:04X}"
        if code_point > MAX_CODE_POINT:
            print(f"{label}\tout of range")
            continue
        entry = engine.range_of(code_point)
        width = engine.width_of(code_point)
        category = engine.general_category_of(code_point)
        if entry is None:
            print(f"{label}\t{width.name}\t{category.value}\t(unlisted)")
        else:
            print(
                f"{label}\t{width.name}\t{category.value}\t"
                f"U+{entry.start:04X}..U+{entry.end:04X}\t"
                f"{entry.start_name}..{entry.end_name}"
            )
    return 0


def _run_audit(args: argparse.Namespace) -> int:
    settings = get_settings()
    engine = WidthLookupEngine(load_default_table(settings))
    validator = CategoryCrossValidator(engine, max_workers=args.workers)
    report = validator.audit(args.start, args.stop)
    output_dir = args.output_dir or Path(settings.audit_output_dir)
    csv_path = export_discrepancies_csv(report, output_dir=output_dir)
    print(f"Scanned {report.scanned} code points")
    print(f"Total mismatches: {report.total_mismatches}")
    if report.corrupt:
        print(f"Corrupt category codes at {len(report.corrupt)} code points")
    print(f"Report written to {csv_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "build": _run_build,
        "lookup": _run_lookup,
        "audit": _run_audit,
    }

    try:
        return handlers[args.command](args)
    except (EastAsianWidthError, FileNotFoundError, ValueError) as e:
        logger.error("cli.command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
