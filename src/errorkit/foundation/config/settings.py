"""Environment-based configuration using pydantic-settings.

Example:
    >>> from errorkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.trace.max_frames
    64
    >>> settings.logging.format
    'full'

    # Or with environment variables:
    # ERRORKIT_TRACE_ENABLED=false
    # ERRORKIT_LOG_FORMAT=short
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("errorkit.config")


class TraceSettings(BaseSettings):
    """Diagnostic context capture."""

    model_config = SettingsConfigDict(
        env_prefix="ERRORKIT_TRACE_",
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Capture a stack snapshot for every error")
    max_frames: PositiveInt = Field(default=64, description="Max frames kept per snapshot")


class LoggingSettings(BaseSettings):
    """Defaults for log_error."""

    model_config = SettingsConfigDict(
        env_prefix="ERRORKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "ERROR"
    format: Literal["full", "short"] = "full"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class ErrorkitSettings(BaseSettings):
    """Root settings for errorkit.

    Loads configuration from environment variables with ERRORKIT_ prefix.

    Example environment variables:
        ERRORKIT_TRACE_MAX_FRAMES=16
        ERRORKIT_LOG_LEVEL=WARNING
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRORKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    # Nested settings (loaded with ERRORKIT_TRACE_, ERRORKIT_LOG_)
    trace: TraceSettings = Field(default_factory=TraceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ErrorkitSettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().trace.enabled
        True
    """
    return ErrorkitSettings()


@lru_cache(maxsize=1)
def get_trace_settings() -> TraceSettings:
    """Trace section only, read independently of the other sections (cached).

    Stack capture must keep working whatever else is misconfigured, so an
    invalid ERRORKIT_TRACE_* value is reported once and replaced by defaults.
    """
    try:
        return TraceSettings()
    except ValidationError as exc:
        logger.warning("invalid trace settings, using defaults: %s", exc)
        return TraceSettings.model_construct()


def clear_settings_cache() -> None:
    """Clear the settings caches so the next lookup rereads the environment."""
    get_settings.cache_clear()
    get_trace_settings.cache_clear()
