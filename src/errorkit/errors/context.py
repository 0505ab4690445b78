"""Diagnostic context: an eager snapshot of where an error was built.

Captured once, when the error is constructed, so the snapshot keeps pointing at
the original failure site however far the error travels afterwards. Builders
carry the same context over instead of recapturing.
"""

from __future__ import annotations

import linecache
import logging
import os
import sys
import threading
from types import FrameType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from errorkit.foundation.config import get_trace_settings

logger = logging.getLogger("errorkit.context")

# Frames from the errorkit package itself, tests excepted, are not application frames
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_TESTS_DIR = os.path.join(_PACKAGE_DIR, "tests")


def _is_internal(filename: str) -> bool:
    path = os.path.abspath(filename)
    return path.startswith(_PACKAGE_DIR + os.sep) and not path.startswith(_TESTS_DIR + os.sep)


class Frame(BaseModel):
    """One captured stack frame."""

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    filename: str
    lineno: Annotated[int, Field(ge=0)]
    name: str
    line: str = ""

    def __str__(self) -> str:
        return f'File "{self.filename}", line {self.lineno}, in {self.name}'


_EMPTY_FRAMES: tuple[Frame, ...] = ()


class DiagnosticContext(BaseModel):
    """Stack snapshot, innermost (construction site) first. May be empty."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", revalidate_instances="never",
        json_schema_extra={"title": "Diagnostic Context"},
    )

    frames: tuple[Frame, ...] = _EMPTY_FRAMES
    thread: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.frames

    @property
    def origin(self) -> Frame | None:
        """Frame that constructed the error, if any was captured."""
        return self.frames[0] if self.frames else None

    def __len__(self) -> int:
        return len(self.frames)

    def format(self, indent: str = "  ") -> str:
        """Render frames as traceback-style lines, each prefixed with ``indent``."""
        if not self.frames:
            return f"{indent}<no frames captured>"
        lines: list[str] = []
        for frame in self.frames:
            lines.append(f"{indent}{frame}")
            if frame.line:
                lines.append(f"{indent}  {frame.line}")
        return "\n".join(lines)

    __str__ = format


def _snapshot(start: FrameType | None, limit: int) -> tuple[Frame, ...]:
    frames: list[Frame] = []
    leading = True
    f = start
    while f is not None and len(frames) < limit:
        code = f.f_code
        filename = code.co_filename
        # Drop errorkit's own frames at the top of the stack only
        if leading and _is_internal(filename):
            f = f.f_back
            continue
        leading = False
        lineno = f.f_lineno or 0
        frames.append(Frame.model_construct(
            filename=filename,
            lineno=lineno,
            name=code.co_name,
            line=linecache.getline(filename, lineno).strip(),
        ))
        f = f.f_back
    return tuple(frames)


def capture(skip: int = 0) -> DiagnosticContext:
    """Snapshot the caller's stack.

    Args:
        skip: Extra frames to drop above the caller.

    Never raises. Returns an empty context when capture is disabled through
    ``ERRORKIT_TRACE_ENABLED=false`` or when the interpreter gives no access to
    its frames.
    """
    thread = threading.current_thread().name
    try:
        trace = get_trace_settings()
        frames = _snapshot(sys._getframe(1 + skip), trace.max_frames) if trace.enabled else _EMPTY_FRAMES
    except Exception:
        logger.debug("stack capture failed, using empty context", exc_info=True)
        frames = _EMPTY_FRAMES
    return DiagnosticContext.model_construct(frames=frames, thread=thread)
