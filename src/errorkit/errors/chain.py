"""Cause chain traversal over errorkit and foreign exceptions."""

from __future__ import annotations

from collections.abc import Iterator

from .error import Error


def next_cause(exc: BaseException) -> BaseException | None:
    """Next link in the chain.

    An errorkit Error answers with its attached source. Foreign exceptions
    answer with their explicit ``__cause__`` (``raise ... from ...``); the
    implicit ``__context__`` of an exception raised while handling another is
    not causation and is not followed.
    """
    if isinstance(exc, Error):
        return exc.source
    return exc.__cause__


def iter_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` and every cause after it, stopping at the first repeat."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = next_cause(current)
