"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Code point fields rendered as U+XXXX
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from east_asian_width.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from east_asian_width.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("ucd.parse_started", source="EastAsianWidth.txt")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping, Optional

import structlog
from structlog.types import EventDict, Processor

from east_asian_width.config import get_settings

CODE_POINT_SUFFIX = "code_point"


def format_code_point(value: Any) -> Any:
    """Render an integer code point in the conventional U+XXXX notation.

    Non-integer values (already formatted strings, None) pass through untouched.

    Example:
        >>> format_code_point(0x3000)
        'U+3000'
        >>> format_code_point(0x1F600)
        'U+1F600'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return f"U+{value:04X}"
    return value


def code_point_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that formats code point fields in event_dict.

    Any key ending in ``code_point`` (``code_point``, ``start_code_point``,
    ``last_code_point``...) is rendered as U+XXXX so log lines read the same
    way the UCD files do.
    """
    formatted: MutableMapping[str, Any] = {}
    for key, value in event_dict.items():
        if key.endswith(CODE_POINT_SUFFIX):
            formatted[key] = format_code_point(value)
        else:
            formatted[key] = value
    return formatted


def _get_log_level() -> int:
    """Get log level from settings.

    Returns:
        Logging level constant (e.g., logging.INFO, logging.DEBUG)
    """
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # Invalid EAW_* values must not prevent logging from starting
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    """Check if file logging is enabled via environment."""
    log_to_file = os.getenv("LOG_TO_FILE", "").lower()
    return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: east-asian-width-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"east-asian-width-{date_str}.log"


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - Code point formatting
    - JSON renderer
    - Dual output (stdout + optional file)
    """
    level = _get_log_level()

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[],
    )

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        code_point_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("lookup.range_found", code_point=0x0C92)
    """
    return structlog.get_logger(name)


def bind_context(name: Optional[str] = None, **kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Args:
        name: Logger name (typically __name__ of the calling module)
        **kwargs: Context fields to bind (e.g., source="EastAsianWidth.txt")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(__name__, audit_id="audit_20261019")
        >>> logger.info("audit.chunk_completed", mismatches=12)
    """
    logger = structlog.get_logger(name) if name else structlog.get_logger()
    return logger.bind(**kwargs)
