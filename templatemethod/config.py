"""
Package Configuration — ambient settings for logging, tracing and the CLI.

Settings never change what a step prints; they only control how the
package reports what it does and which variant the CLI runs by default.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TemplateSettings(BaseSettings):
    """Package-wide settings, read from TEMPLATEMETHOD_* env vars and .env."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATEMETHOD_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool = False

    # ── Tracing ──────────────────────────────────────────────────────
    tracing_enabled: bool = False

    # ── CLI ──────────────────────────────────────────────────────────
    default_variant: str = "hello_world"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level '{value}'")
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> TemplateSettings:
    """Singleton accessor — parsed once, cached forever."""
    return TemplateSettings()
