"""Configuration management for east_asian_width.

Usage:
    >>> from east_asian_width.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.ucd_source_path)
"""

from east_asian_width.config.settings import (
    Settings,
    get_settings,
    validate_source_file,
)

__all__ = [
    "Settings",
    "get_settings",
    "validate_source_file",
]
