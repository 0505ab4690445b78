"""Error classification.

ErrorKind is a closed set: every error belongs to exactly one kind, chosen at
construction and never changed afterwards.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Origin/domain of an error.

    Values double as the rendered form, e.g. ``Kind: DATABASE``.
    """
    DATABASE = "DATABASE"
    IO = "IO"
    NETWORK = "NETWORK"
    AUTH = "AUTH"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    BUSINESS = "BUSINESS"
    EXTERNAL = "EXTERNAL"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"
