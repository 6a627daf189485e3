"""
Configuration management for the East Asian Width tables.

This module provides environment-based configuration using Pydantic BaseSettings,
so the location of the UCD source file, the optional table snapshot and the
audit tuning knobs can be overridden per deployment without code changes.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("EAW_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are automatically loaded with the EAW_ prefix.
    For example, EAW_UCD_SOURCE_PATH will override the ucd_source_path setting.

    Fields without prefix:
    - LOG_LEVEL: Logging level (uppercase)
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    # Source data
    ucd_source_path: str = Field(
        default="data/EastAsianWidth.txt",
        description="Path to the Unicode EastAsianWidth.txt source file",
    )
    table_snapshot_path: Optional[str] = Field(
        default=None,
        description="Path to a JSON snapshot of the parsed table (preferred when present)",
    )

    # Audit settings
    max_workers: int = Field(
        default=4, description="Maximum number of concurrent audit workers"
    )
    audit_chunk_size: int = Field(
        default=0x10000,
        description="Number of code points handed to one audit worker at a time",
    )
    audit_output_dir: str = Field(
        default="logs", description="Directory for category discrepancy reports"
    )

    @field_validator("max_workers", "audit_chunk_size")
    @classmethod
    def _require_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value

    model_config = SettingsConfigDict(
        env_prefix="EAW_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused across the process lifetime, which
    matches the single-initialization lifecycle of the range table itself.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()


def validate_source_file(settings: Settings) -> bool:
    """
    Validate that the configured UCD source file exists and is readable.

    Args:
        settings: Settings instance to validate

    Returns:
        True if the source file is present, False otherwise
    """
    try:
        source_path = Path(settings.ucd_source_path)
        return source_path.exists() and source_path.is_file()
    except OSError:
        return False
