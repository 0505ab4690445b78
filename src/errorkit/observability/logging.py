"""Emit errors through the standard logging module.

The rendered report goes in the message; kind, code and metadata ride along as
record attributes so handlers and formatters can pick them up.

Example:
    >>> import logging
    >>> log = logging.getLogger("billing")
    >>> log_error(Error.database("Connection failed"), logger=log)
    Error(kind=DATABASE, message='Connection failed')
"""

from __future__ import annotations

import logging

from errorkit.errors import Error, render, render_short
from errorkit.foundation.config import get_settings

_logger = logging.getLogger("errorkit")


def error_fields(error: Error) -> dict[str, object]:
    """Record attributes describing ``error``, for ``extra=``."""
    return {
        "error_kind": error.kind.value,
        "error_code": error.code,
        "error_metadata": [list(pair) for pair in error.metadata],
    }


def log_error(
    exc: BaseException,
    *,
    logger: logging.Logger | None = None,
    level: int | None = None,
    short: bool | None = None,
) -> Error:
    """Log ``exc`` as a structured error and return the Error that was logged.

    Foreign exceptions are converted with ``Error.from_exception`` first.

    Args:
        exc: Any exception
        logger: Target logger (defaults to ``errorkit``)
        level: Log level (defaults to ``ERRORKIT_LOG_LEVEL``)
        short: One-line output instead of the full report (defaults to
            ``ERRORKIT_LOG_FORMAT == "short"``)
    """
    settings = get_settings().logging
    error = Error.from_exception(exc)
    if level is None:
        level = logging.getLevelNamesMapping()[settings.level]
    if short is None:
        short = settings.format == "short"
    text = render_short(error) if short else render(error)
    (logger or _logger).log(level, text, extra=error_fields(error))
    return error