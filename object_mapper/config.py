"""
Library settings loaded from environment variables.

Uses pydantic-settings to validate and type-cast env vars. Every variable
is prefixed with ``OBJECT_MAPPER_`` (e.g. ``OBJECT_MAPPER_LOG_LEVEL``).
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised mapper configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OBJECT_MAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    # ── Mapping ───────────────────────────────────────────────────────
    # When true, a falsy default (0, "", False, []) counts as "no default".
    skip_falsy_defaults: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Cached singleton — settings are read once and reused.
    """
    return Settings()
