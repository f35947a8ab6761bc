"""Centralised converter configuration using pydantic-settings.

All environment variables, defaults, and validation live here.
Usage:
    from reprjson.config import get_settings
    print(get_settings().indent)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConverterConfig(BaseSettings):
    """Single source of truth for every tuneable parameter."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # silently ignore unknown env vars
        case_sensitive=False,
    )

    # ── Canonical output ────────────────────────────────────────────────
    indent: int = Field(default=2, ge=0, le=8, description="Spaces per level in the canonical form")
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters as \\uXXXX in the canonical form",
    )

    # ── Logging ─────────────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_file: str = Field(default="", description="Rotating log file; empty logs to stderr")
    log_max_bytes: int = Field(default=5 * 1024 * 1024, ge=1024)  # 5 MB
    log_backup_count: int = Field(default=3, ge=0)

    # ── Validators ──────────────────────────────────────────────────────
    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.strip().upper()
        if v not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}, got '{v}'")
        return v

    @field_validator("log_file")
    @classmethod
    def _strip_log_file(cls, v: str) -> str:
        return v.strip()


@lru_cache(maxsize=1)
def get_settings() -> ConverterConfig:
    """Return the cached singleton settings instance."""
    return ConverterConfig()
