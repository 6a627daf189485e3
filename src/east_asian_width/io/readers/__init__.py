"""Readers for Unicode Character Database source files."""

from east_asian_width.io.readers.ucd_reader import ParseStats, UcdFormatParser, parse_file

__all__ = ["UcdFormatParser", "ParseStats", "parse_file"]
