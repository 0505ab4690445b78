"""Foundation layer: configuration shared by the rest of errorkit."""

from .config import (
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
