"""Call-stack capture for annotated errors.

The stack is rendered as line-structured text, one block per thread:

    thread 140245 [MainThread]:
    app.service.load(...)
    \t/srv/app/service.py:42
    app.main(...)
    \t/srv/app/main.py:7

A header line, then two lines per frame (innermost first). The capturer keeps
the header, drops the requested number of leading frames and splits the rest
into the calling thread's frames ("current") and whatever trails the first
blank line ("context").
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import TYPE_CHECKING

from errchain.config import get_settings

if TYPE_CHECKING:
    from types import FrameType

logger = logging.getLogger("errchain.stack")

# capture_stack + stack_trace + the public constructor
_CONSTRUCTOR_DEPTH = 3


def _format_frames(frame: FrameType | None) -> list[str]:
    lines: list[str] = []
    while frame is not None:
        code = frame.f_code
        module = frame.f_globals.get("__name__", "?")
        lines.append(f"{module}.{code.co_qualname}(...)")
        lines.append(f"\t{code.co_filename}:{frame.f_lineno}")
        frame = frame.f_back
    return lines


def _format_thread(ident: int, name: str, frame: FrameType | None) -> str:
    return "\n".join([f"thread {ident} [{name}]:", *_format_frames(frame)]) + "\n"


def _render(frame: FrameType) -> str:
    """Full stack text, calling thread first, starting at frame."""
    ident = threading.get_ident()
    text = _format_thread(ident, threading.current_thread().name, frame)
    if get_settings().stack.include_all_threads:
        names = {t.ident: t.name for t in threading.enumerate()}
        others = [
            _format_thread(tid, names.get(tid, "unknown"), f)
            for tid, f in sys._current_frames().items()
            if tid != ident
        ]
        if others:
            text += "\n" + "\n".join(others)
    return text


def _index_newline(text: str, start: int) -> int:
    """Index of the next newline at or after start, len(text) if none."""
    if start >= len(text):
        return len(text)
    idx = text.find("\n", start)
    return len(text) if idx == -1 else idx


def capture_stack(skip: int) -> tuple[str, str]:
    """Capture the calling thread's stack, skipping `skip` frames after the header.

    The first frame rendered is capture_stack itself, so skip=1 starts the
    current segment at the direct caller.

    Returns:
        (current, context): the header plus remaining frames of the calling
        thread, and the text from the first blank line onward.
    """
    buf = _render(sys._getframe())

    index = _index_newline(buf, 0)
    header = buf[:index]

    for _ in range(skip):
        index = _index_newline(buf, index + 1)
        index = _index_newline(buf, index + 1)
    if index >= len(buf):
        logger.debug("stack skip %d exceeds captured frames", skip)

    start = last = index
    while True:
        index = _index_newline(buf, index + 1)
        if index - last <= 1:
            break
        last = index
    return header + buf[start:index], buf[index:]


def stack_trace() -> tuple[str, str]:
    """Current stack as (current, context), starting at the caller of the calling function.

    Meant to be called directly from an error factory so the captured frames
    begin at whoever invoked that factory.
    """
    return capture_stack(_CONSTRUCTOR_DEPTH)
