"""The structured error value.

Error is an ordinary exception enriched with a kind, an optional code, ordered
metadata, an eagerly captured diagnostic context and a type-erased cause.

Builders never mutate the receiver: each returns a new Error that shares the
original context, so the snapshot still points at the first construction site.

Example:
    >>> err = (Error.validation("Input validation failed")
    ...        .with_metadata("field", "email")
    ...        .with_metadata("value", "invalid@email.com"))
    >>> err.metadata
    (('field', 'email'), ('value', 'invalid@email.com'))
    >>> print(err.render_short())
    Input validation failed (VALIDATION)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Self

from .context import DiagnosticContext, capture
from .kinds import ErrorKind

Metadata = tuple[tuple[str, str], ...]

_EMPTY_METADATA: Metadata = ()


def _exc_text(exc: BaseException) -> str:
    """``str(exc)``, or a placeholder when the exception cannot describe itself."""
    try:
        return str(exc)
    except Exception:
        return "<exception str() failed>"


class Error(Exception):
    """Classified, enriched, chainable error.

    Attributes:
        kind: Classification, fixed at construction
        message: Human-readable message, fixed at construction
        code: Optional short identifier (e.g. ``USER_001``)
        metadata: Ordered (key, value) pairs; repeated keys are kept
        context: Stack snapshot taken when the error was first built
        source: Direct cause, any exception
    """

    __slots__ = ("_kind", "_message", "_code", "_metadata", "_context", "_source")

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        code: str | None = None,
        metadata: Iterable[tuple[str, str]] = _EMPTY_METADATA,
        source: BaseException | None = None,
        context: DiagnosticContext | None = None,
    ) -> None:
        message = str(message)
        super().__init__(message)
        self._kind = ErrorKind(kind)
        self._message = message
        self._code = code
        self._metadata: Metadata = tuple(metadata)
        self._context = context if context is not None else capture()
        self._source = source
        if source is not None:
            self.__cause__ = source

    # ─────────────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def new(cls, kind: ErrorKind, message: str) -> Self:
        """Create an error of any kind. The kind-named constructors delegate here."""
        return cls(kind, message)

    @classmethod
    def database(cls, message: str) -> Self:
        return cls.new(ErrorKind.DATABASE, message)

    @classmethod
    def io(cls, message: str) -> Self:
        return cls.new(ErrorKind.IO, message)

    @classmethod
    def network(cls, message: str) -> Self:
        return cls.new(ErrorKind.NETWORK, message)

    @classmethod
    def auth(cls, message: str) -> Self:
        return cls.new(ErrorKind.AUTH, message)

    @classmethod
    def validation(cls, message: str) -> Self:
        return cls.new(ErrorKind.VALIDATION, message)

    @classmethod
    def config(cls, message: str) -> Self:
        return cls.new(ErrorKind.CONFIG, message)

    @classmethod
    def business(cls, message: str) -> Self:
        """Business rule violation. Usually paired with ``with_code``."""
        return cls.new(ErrorKind.BUSINESS, message)

    @classmethod
    def external(cls, message: str) -> Self:
        return cls.new(ErrorKind.EXTERNAL, message)

    @classmethod
    def internal(cls, message: str) -> Self:
        return cls.new(ErrorKind.INTERNAL, message)

    @classmethod
    def unknown(cls, message: str) -> Self:
        return cls.new(ErrorKind.UNKNOWN, message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> Error:
        """Convert any exception into an Error.

        An Error is returned as is. Anything else becomes an UNKNOWN error whose
        message is the exception's text (its type name when the text is empty)
        and whose source is the original exception object.
        """
        if isinstance(exc, Error):
            return exc
        return cls(ErrorKind.UNKNOWN, _exc_text(exc) or type(exc).__name__, source=exc)

    # ─────────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> str | None:
        return self._code

    @property
    def metadata(self) -> Metadata:
        return self._metadata

    @property
    def context(self) -> DiagnosticContext:
        return self._context

    @property
    def source(self) -> BaseException | None:
        return self._source

    def get_metadata(self, key: str, default: str | None = None) -> str | None:
        """Most recently appended value for ``key``."""
        for k, v in reversed(self._metadata):
            if k == key:
                return v
        return default

    # ─────────────────────────────────────────────────────────────────────────
    # Builders
    # ─────────────────────────────────────────────────────────────────────────

    def _rebuild(self, **changes: object) -> Self:
        fields: dict[str, object] = {
            "code": self._code,
            "metadata": self._metadata,
            "source": self._source,
            "context": self._context,
        }
        fields.update(changes)
        return type(self)(self._kind, self._message, **fields)  # type: ignore[arg-type]

    def with_code(self, code: str) -> Self:
        """Return a copy with ``code`` set, replacing any previous code."""
        return self._rebuild(code=str(code))

    def with_metadata(self, key: str, value: object) -> Self:
        """Return a copy with one more (key, value) entry appended."""
        return self._rebuild(metadata=(*self._metadata, (str(key), str(value))))

    def with_metadata_map(self, metadata: Mapping[str, object]) -> Self:
        """Append every mapping item, in the mapping's iteration order."""
        extra = tuple((str(k), str(v)) for k, v in metadata.items())
        return self._rebuild(metadata=(*self._metadata, *extra))

    def with_source(self, source: BaseException) -> Self:
        """Return a copy caused by ``source``, replacing any previous cause."""
        if not isinstance(source, BaseException):
            raise TypeError(f"source must be an exception, got {type(source).__name__}")
        return self._rebuild(source=source)

    def wrap_as(self, kind: ErrorKind, message: str) -> Error:
        """New error of ``kind`` whose cause is this error."""
        return Error(kind, message, source=self)

    # ─────────────────────────────────────────────────────────────────────────
    # Kind checks
    # ─────────────────────────────────────────────────────────────────────────

    def is_kind(self, kind: ErrorKind) -> bool:
        return self._kind is ErrorKind(kind)

    def is_database(self) -> bool: return self._kind is ErrorKind.DATABASE
    def is_io(self) -> bool: return self._kind is ErrorKind.IO
    def is_network(self) -> bool: return self._kind is ErrorKind.NETWORK
    def is_auth(self) -> bool: return self._kind is ErrorKind.AUTH
    def is_validation(self) -> bool: return self._kind is ErrorKind.VALIDATION
    def is_config(self) -> bool: return self._kind is ErrorKind.CONFIG
    def is_business(self) -> bool: return self._kind is ErrorKind.BUSINESS
    def is_external(self) -> bool: return self._kind is ErrorKind.EXTERNAL
    def is_internal(self) -> bool: return self._kind is ErrorKind.INTERNAL
    def is_unknown(self) -> bool: return self._kind is ErrorKind.UNKNOWN

    # ─────────────────────────────────────────────────────────────────────────
    # Chain
    # ─────────────────────────────────────────────────────────────────────────

    def chain(self) -> Iterator[BaseException]:
        """This error followed by every cause in order."""
        from .chain import iter_chain
        return iter_chain(self)

    def error_chain(self) -> list[BaseException]:
        return list(self.chain())

    def root_cause(self) -> BaseException:
        """Last link of the chain (this error when there is no cause)."""
        *_, last = self.chain()
        return last

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render(self) -> str:
        """Full multi-line report: message, code, kind, metadata, trace, causes."""
        from .render import render
        return render(self)

    def render_short(self) -> str:
        """Single line: message and kind (plus code when set)."""
        from .render import render_short
        return render_short(self)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        code = f", code={self._code!r}" if self._code is not None else ""
        return f"{type(self).__name__}(kind={self._kind.value}, message={self._message!r}{code})"

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore, (type(self), self._kind, self._message, self._code, self._metadata, self._source, self._context))


def _restore(
    cls: type[Error],
    kind: ErrorKind,
    message: str,
    code: str | None,
    metadata: Metadata,
    source: BaseException | None,
    context: DiagnosticContext,
) -> Error:
    """Unpickle helper; keeps the original context instead of recapturing."""
    return cls(kind, message, code=code, metadata=metadata, source=source, context=context)
