"""Tests for structured rendering."""

from __future__ import annotations

from errorkit import Error, render, render_short


def _section_heads(text: str) -> list[str]:
    """Unindented lines, i.e. the top-level sections."""
    return [line for line in text.splitlines() if not line.startswith(" ")]


def test_auth_scenario_section_order() -> None:
    err = Error.auth("Unauthorized").with_code("AUTH_001").with_metadata("user_id", "12345")

    lines = render(err).splitlines()

    assert lines[:6] == [
        "Unauthorized",
        "Code: AUTH_001",
        "Kind: AUTH",
        "Metadata:",
        "  user_id: 12345",
        "Trace:",
    ]
    assert lines[6].startswith('  File "')
    assert "Caused by:" not in lines


def test_optional_sections_omitted() -> None:
    err = Error.database("Connection failed")

    assert _section_heads(render(err)) == ["Connection failed", "Kind: DATABASE", "Trace:"]


def test_metadata_in_insertion_order() -> None:
    err = Error.validation("bad").with_metadata("zeta", "1").with_metadata("alpha", "2").with_metadata("zeta", "3")

    text = render(err)
    block = text.split("Metadata:\n", 1)[1].split("\nTrace:", 1)[0]
    assert block.splitlines() == ["  zeta: 1", "  alpha: 2", "  zeta: 3"]


def test_empty_trace_section(monkeypatch) -> None:
    monkeypatch.setenv("ERRORKIT_TRACE_ENABLED", "false")

    err = Error.io("File not found")

    assert render(err) == "File not found\nKind: IO\nTrace:\n  <no frames captured>"


def test_foreign_cause_rendered_last(monkeypatch) -> None:
    monkeypatch.setenv("ERRORKIT_TRACE_ENABLED", "false")

    err = Error.config("Config loading failed").with_source(FileNotFoundError("Config file not found"))

    assert render(err) == (
        "Config loading failed\n"
        "Kind: CONFIG\n"
        "Trace:\n"
        "  <no frames captured>\n"
        "Caused by:\n"
        "  Config file not found\n"
        "  Type: FileNotFoundError"
    )


def test_nested_causes_indent(monkeypatch) -> None:
    monkeypatch.setenv("ERRORKIT_TRACE_ENABLED", "false")

    class QuotaExceeded(Exception):
        pass

    inner = Error.auth("Insufficient permissions").with_source(QuotaExceeded())
    outer = Error.business("Account deletion failed").with_code("ACCOUNT_DEL_001").with_source(inner)

    assert render(outer).splitlines() == [
        "Account deletion failed",
        "Code: ACCOUNT_DEL_001",
        "Kind: BUSINESS",
        "Trace:",
        "  <no frames captured>",
        "Caused by:",
        "  Insufficient permissions",
        "  Kind: AUTH",
        "  Trace:",
        "    <no frames captured>",
        "  Caused by:",
        "    QuotaExceeded",
        f"    Type: {__name__}.test_nested_causes_indent.<locals>.QuotaExceeded",
    ]


def test_converted_error_surfaces_original_text() -> None:
    exc = PermissionError("access denied to /srv/data")
    err = Error.from_exception(exc)

    text = render(err)
    assert text.splitlines()[0] == "access denied to /srv/data"
    assert "Kind: UNKNOWN" in text
    assert text.rstrip().endswith("Type: PermissionError")
    assert text.count("access denied to /srv/data") == 2


def test_render_is_deterministic() -> None:
    err = Error.external("Payment gateway down").with_metadata("gateway", "stripe").with_source(TimeoutError("t"))

    assert render(err) == render(err) == err.render()


def test_render_short() -> None:
    assert render_short(Error.auth("Unauthorized")) == "Unauthorized (AUTH)"
    assert Error.business("Invalid operation").with_code("USER_001").render_short() == (
        "Invalid operation (BUSINESS, code=USER_001)"
    )


def test_multiline_fields_stay_indented_in_nested_cause(monkeypatch) -> None:
    monkeypatch.setenv("ERRORKIT_TRACE_ENABLED", "false")

    inner = Error.database("q failed").with_code("DB_1\nKind: AUTH").with_metadata("sql", "SELECT 1\nKind: AUTH")
    outer = Error.internal("outer").with_source(inner)

    lines = render(outer).splitlines()
    assert "Kind: AUTH" not in lines
    assert [line for line in lines if line.strip() == "Kind: AUTH"] == ["    Kind: AUTH", "      Kind: AUTH"]
    assert lines[5:11] == [
        "  q failed",
        "  Code: DB_1",
        "    Kind: AUTH",
        "  Kind: DATABASE",
        "  Metadata:",
        "    sql: SELECT 1",
    ]
    assert lines[11] == "      Kind: AUTH"


def test_multiline_message_continuation_indented(monkeypatch) -> None:
    monkeypatch.setenv("ERRORKIT_TRACE_ENABLED", "false")

    err = Error.validation("bad input\nKind: AUTH")

    assert _section_heads(render(err)) == ["bad input", "Kind: VALIDATION", "Trace:"]


def test_unprintable_foreign_cause() -> None:
    class Unprintable(Exception):
        def __str__(self) -> str:
            raise RuntimeError("no text")

    exc = Unprintable()
    err = Error.from_exception(exc)

    assert err.message == "<exception str() failed>"
    assert err.source is exc
    assert "  <exception str() failed>" in render(err).splitlines()
