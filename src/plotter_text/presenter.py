"""Presenter — flattens a canvas into newline-terminated rows of text."""

from __future__ import annotations

import logging
import sys
import threading
from typing import TextIO

from plotter_text.canvas import Canvas
from plotter_text.cell import to_char
from plotter_text.errors import DrawingError

log = logging.getLogger(__name__)

# Serializes writes so rows from concurrent presenters never interleave.
_OUTPUT_LOCK = threading.Lock()


def render_lines(canvas: Canvas) -> list[str]:
    return ["".join(to_char(state) for state in row) for row in canvas.rows()]


def render(canvas: Canvas) -> str:
    """Return every row of ``canvas`` followed by a newline."""
    return "".join(line + "\n" for line in render_lines(canvas))


def present(canvas: Canvas, sink: TextIO | None = None) -> None:
    """Write the rendered canvas to ``sink`` (standard error by default).

    Raises:
        DrawingError: If the sink rejects the write or the flush.
    """
    out = render(canvas)
    target = sys.stderr if sink is None else sink
    log.debug("presenting %dx%d canvas", canvas.width, canvas.height)
    with _OUTPUT_LOCK:
        try:
            target.write(out)
            target.flush()
        except (OSError, ValueError) as e:
            raise DrawingError(e) from e
