"""Conversion of foreign exceptions into errorkit errors.

``catching`` and ``converts`` are the propagate-on-failure helpers: whatever
escapes the guarded code leaves it as an Error, chained to the original.

Example:
    >>> with catching(ErrorKind.CONFIG, "Config loading failed"):
    ...     open("/etc/app/missing.toml")
    Traceback (most recent call last):
    ...
    errorkit.errors.error.Error: Config loading failed
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import wraps
from types import TracebackType
from typing import ParamSpec, TypeVar

from .error import Error
from .kinds import ErrorKind

P = ParamSpec("P")
T = TypeVar("T")


def from_exception(exc: BaseException) -> Error:
    """UNKNOWN-kind Error carrying ``exc`` as its source. Errors pass through."""
    return Error.from_exception(exc)


def wrap(exc: BaseException, kind: ErrorKind, message: str) -> Error:
    """New Error of ``kind`` caused by ``exc``."""
    return Error.new(kind, message).with_source(exc)


def _check_pair(kind: ErrorKind | None, message: str | None) -> None:
    if (kind is None) != (message is None):
        raise ValueError("kind and message must be given together")


class catching:
    """Context manager re-raising escaping exceptions as an Error.

    Without arguments, foreign exceptions are converted with ``from_exception``
    and Errors propagate untouched. With ``kind`` and ``message``, every
    escaping exception, Errors included, is wrapped as the cause of a new Error.
    Only ``Exception`` subclasses are converted; KeyboardInterrupt and friends
    pass through.
    """

    __slots__ = ("kind", "message")

    def __init__(self, kind: ErrorKind | None = None, message: str | None = None) -> None:
        _check_pair(kind, message)
        self.kind = kind
        self.message = message

    def __enter__(self) -> catching:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False
        if self.kind is not None and self.message is not None:
            err = wrap(exc, self.kind, self.message)
        else:
            err = from_exception(exc)
        if err is exc:
            return False
        raise err from exc


def converts(
    kind: ErrorKind | None = None,
    message: str | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator form of ``catching`` for sync and async callables."""
    _check_pair(kind, message)

    def decorator(fn: Callable[P, T]) -> Callable[P, T]:
        if inspect.iscoroutinefunction(fn):
            @wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
                with catching(kind, message):
                    return await fn(*args, **kwargs)  # type: ignore[misc]
            return async_wrapper  # type: ignore[return-value]

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with catching(kind, message):
                return fn(*args, **kwargs)
        return wrapper

    return decorator
