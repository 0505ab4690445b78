"""Structured text rendering.

Section order is fixed: message, code, kind, metadata, trace, then one
"Caused by:" block per link of the cause chain, each nested two spaces deeper.
Optional sections appear exactly when their field is set.

Example output:
    Account deletion failed
    Code: ACCOUNT_DEL_001
    Kind: BUSINESS
    Metadata:
      user_id: 12345
      action: delete_account
    Trace:
      File "app/accounts.py", line 42, in delete_account
        raise Error.business("Account deletion failed").with_code("ACCOUNT_DEL_001")
    Caused by:
      Insufficient permissions
      Kind: AUTH
      Trace:
        File "app/auth.py", line 17, in check
          raise Error.auth("Insufficient permissions")
"""

from __future__ import annotations

from .chain import iter_chain
from .error import Error, _exc_text

_INDENT = "  "


def _type_name(exc: BaseException) -> str:
    cls = type(exc)
    return cls.__qualname__ if cls.__module__ == "builtins" else f"{cls.__module__}.{cls.__qualname__}"


def _field(text: str, indent: str) -> list[str]:
    """First line as is, continuation lines pushed under it by ``indent``."""
    first, *rest = text.splitlines() or [""]
    return [first, *(f"{indent}{line}" for line in rest)]


def _error_sections(err: Error) -> list[str]:
    lines = _field(err.message, _INDENT)
    if err.code is not None:
        lines.extend(_field(f"Code: {err.code}", _INDENT))
    lines.append(f"Kind: {err.kind}")
    if err.metadata:
        lines.append("Metadata:")
        for key, value in err.metadata:
            lines.extend(_field(f"{_INDENT}{key}: {value}", _INDENT * 2))
    lines.append("Trace:")
    lines.extend(err.context.format(_INDENT).splitlines())
    return lines


def _foreign_sections(exc: BaseException) -> list[str]:
    lines = _field(_exc_text(exc) or type(exc).__name__, _INDENT)
    lines.append(f"Type: {_type_name(exc)}")
    return lines


def render(error: Error) -> str:
    """Full multi-line rendering of ``error`` and its cause chain."""
    lines: list[str] = []
    for depth, exc in enumerate(iter_chain(error)):
        if depth:
            lines.append(f"{_INDENT * (depth - 1)}Caused by:")
        prefix = _INDENT * depth
        sections = _error_sections(exc) if isinstance(exc, Error) else _foreign_sections(exc)
        lines.extend(f"{prefix}{line}" for line in sections)
    return "\n".join(lines)


def render_short(error: Error) -> str:
    """One-line form for places where the full report is too verbose."""
    if error.code is not None:
        return f"{error.message} ({error.kind}, code={error.code})"
    return f"{error.message} ({error.kind})"
