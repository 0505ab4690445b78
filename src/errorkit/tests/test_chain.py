"""Tests for cause chain traversal."""

from __future__ import annotations

from errorkit import Error, ErrorKind, iter_chain, next_cause


def test_chain_without_cause() -> None:
    err = Error.database("Connection failed")

    assert err.error_chain() == [err]
    assert err.root_cause() is err
    assert next_cause(err) is None


def test_chain_length_matches_wraps() -> None:
    root = ConnectionResetError("peer reset")
    err: Error = Error.network("HTTP 500").with_source(root)
    for depth in range(5):
        err = err.wrap_as(ErrorKind.EXTERNAL, f"level {depth}")

    chain = err.error_chain()
    assert len(chain) == 7
    assert chain[-1] is root
    assert err.root_cause() is root


def test_error_ignores_implicit_context() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise Error.validation("bad input")
    except Error as err:
        assert err.__context__ is not None
        assert err.error_chain() == [err]


def test_foreign_implicit_context_is_not_a_cause() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise ValueError("v")
    except ValueError as exc:
        err = Error.from_exception(exc)

    assert exc.__context__ is not None
    assert [type(e) for e in err.error_chain()] == [Error, ValueError]


def test_wrapped_foreign_counts_one_link() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise ValueError("v")
    except ValueError as exc:
        err = Error.config("load failed").with_source(exc)

    assert len(err.error_chain()) == 2


def test_foreign_suppressed_context_stops() -> None:
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise ValueError("v") from None
    except ValueError as exc:
        err = Error.from_exception(exc)

    assert len(err.error_chain()) == 2


def test_foreign_explicit_cause_is_followed() -> None:
    low = OSError("disk")
    high = RuntimeError("save failed")
    high.__cause__ = low

    assert list(iter_chain(high)) == [high, low]


def test_foreign_cycle_terminates() -> None:
    a, b = ValueError("a"), ValueError("b")
    a.__cause__ = b
    b.__cause__ = a

    assert list(iter_chain(a)) == [a, b]
