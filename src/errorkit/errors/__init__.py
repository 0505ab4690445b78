"""Unified error handling for errorkit.

- ErrorKind: Closed classification of error origins
- Error: Structured, chainable exception with code, metadata and stack snapshot
- DiagnosticContext/Frame/capture: Eager stack snapshots
- iter_chain/next_cause: Cause chain traversal over any exception
- from_exception/wrap/catching/converts: Conversion of foreign exceptions
- render/render_short: Deterministic text output
"""

from .chain import iter_chain, next_cause
from .context import DiagnosticContext, Frame, capture
from .convert import catching, converts, from_exception, wrap
from .error import Error, Metadata
from .kinds import ErrorKind
from .render import render, render_short

__all__ = [
    # Core
    "Error", "ErrorKind", "Metadata",
    # Diagnostic context
    "DiagnosticContext", "Frame", "capture",
    # Chain & conversion
    "iter_chain", "next_cause", "from_exception", "wrap", "catching", "converts",
    # Rendering
    "render", "render_short",
]
