"""Configuration management using pydantic-settings."""

from .settings import (
    ErrorkitSettings,
    LoggingSettings,
    TraceSettings,
    clear_settings_cache,
    get_settings,
    get_trace_settings,
)

__all__ = [
    "ErrorkitSettings",
    "LoggingSettings",
    "TraceSettings",
    "clear_settings_cache",
    "get_settings",
    "get_trace_settings",
]
