"""errorkit - one structured error type for service code.

Every failure becomes an ``Error``: a classified exception carrying an optional
code, ordered metadata, a stack snapshot taken where it was built, and a cause
chain that accepts any foreign exception.

Quick Start:
    >>> from errorkit import Error
    >>>
    >>> err = Error.auth("Unauthorized").with_code("AUTH_001").with_metadata("user_id", "12345")
    >>> err.kind
    <ErrorKind.AUTH: 'AUTH'>
    >>> print(err.render())  # doctest: +ELLIPSIS
    Unauthorized
    Code: AUTH_001
    Kind: AUTH
    Metadata:
      user_id: 12345
    Trace:
    ...

Wrapping Foreign Exceptions:
    >>> try:
    ...     open("/etc/app/config.toml")
    ... except OSError as exc:
    ...     err = Error.config("Config loading failed").with_source(exc)

Propagating:
    >>> from errorkit import catching, converts, ErrorKind
    >>>
    >>> @converts(ErrorKind.DATABASE, "Query failed")
    ... def load_user(user_id: str) -> dict: ...

Logging:
    >>> from errorkit import log_error
    >>> log_error(err)  # full report at ERROR on the "errorkit" logger

Configuration (environment):
    ERRORKIT_TRACE_ENABLED=false    # skip stack snapshots
    ERRORKIT_TRACE_MAX_FRAMES=16
    ERRORKIT_LOG_FORMAT=short       # one-line log_error output
"""

from .errors import (
    DiagnosticContext,
    Error,
    ErrorKind,
    Frame,
    Metadata,
    capture,
    catching,
    converts,
    from_exception,
    iter_chain,
    next_cause,
    render,
    render_short,
    wrap,
)
from .foundation import (
    ErrorkitSettings,
    LoggingSettings,
    TraceSettings,
    clear_settings_cache,
    get_settings,
)
from .observability import error_fields, log_error

__version__ = "0.1.0"

__all__ = [
    # Core
    "Error", "ErrorKind", "Metadata",
    # Diagnostic context
    "DiagnosticContext", "Frame", "capture",
    # Chain & conversion
    "iter_chain", "next_cause", "from_exception", "wrap", "catching", "converts",
    # Rendering
    "render", "render_short",
    # Logging
    "log_error", "error_fields",
    # Settings
    "ErrorkitSettings", "LoggingSettings", "TraceSettings", "get_settings", "clear_settings_cache",
]
