"""Observability helpers: structured error logging via stdlib ``logging``."""

from .logging import error_fields, log_error

__all__ = ["error_fields", "log_error"]
