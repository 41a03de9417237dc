"""Line rasterization: axis-aligned fast paths plus a generic fallback."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

from plotter_text.canvas import Canvas
from plotter_text.cell import HLINE, VLINE, PixelState
from plotter_text.types import Pos, ShapeStyle

if TYPE_CHECKING:
    from plotter_text.backend import TextDrawingBackend

log = logging.getLogger(__name__)


def _merge_stroke(canvas: Canvas, stride: int, x: int, y: int, state: PixelState) -> None:
    if stride == canvas.width:
        canvas.merge_at(x, y, state)
    elif x >= 0 and y >= 0:
        canvas.merge_index(y * stride + x, state)


def vline(canvas: Canvas, stride: int, x: int, y1: int, y2: int) -> None:
    """Merge a vertical stroke over rows ``[min(y1, y2), max(y1, y2))``."""
    lo, hi = (y1, y2) if y1 <= y2 else (y2, y1)
    for y in range(lo, hi):
        _merge_stroke(canvas, stride, x, y, VLINE)


def hline(canvas: Canvas, stride: int, y: int, x1: int, x2: int) -> None:
    """Merge a horizontal stroke over columns ``[min(x1, x2), max(x1, x2))``."""
    lo, hi = (x1, x2) if x1 <= x2 else (x2, x1)
    for x in range(lo, hi):
        _merge_stroke(canvas, stride, x, y, HLINE)


def _visible_span(
    x0: int, y0: int, x1: int, grad: float, major_size: int, minor_size: int
) -> tuple[int, int]:
    """Major-axis range whose samples can land inside a ``major_size`` x ``minor_size`` grid."""
    lo, hi = max(x0, 0), min(x1, major_size - 1)
    if grad == 0.0:
        if not -1 <= y0 < minor_size:
            return 0, -1
        return lo, hi
    # Samples sit at floor(y) and floor(y) + 1, so y must stay within [-1, minor_size).
    a = x0 + (-1 - y0) / grad
    b = x0 + (minor_size - y0) / grad
    if a > b:
        a, b = b, a
    return max(lo, math.floor(a) - 1), min(hi, math.ceil(b) + 1)


def rasterize_line(start: Pos, end: Pos, size: tuple[int, int] | None = None) -> Iterator[tuple[Pos, float]]:
    """Yield ``(position, coverage)`` samples along a line segment.

    The major axis is walked one cell at a time, endpoints included. Each
    step yields the two cells straddling the ideal minor coordinate, weighted
    by how close the line passes to each of them. With ``size`` given as
    ``(width, height)`` the walk is limited to the part of the segment that
    can reach that grid.
    """
    (x0, y0), (x1, y1) = start, end
    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0, x1, y1 = y0, x0, y1, x1
    if x0 > x1:
        x0, y0, x1, y1 = x1, y1, x0, y0

    grad = 0.0 if x1 == x0 else (y1 - y0) / (x1 - x0)
    lo, hi = x0, x1
    if size is not None:
        major_size, minor_size = (size[1], size[0]) if steep else size
        lo, hi = _visible_span(x0, y0, x1, grad, major_size, minor_size)
    for x in range(lo, hi + 1):
        y = y0 + grad * (x - x0)
        base = math.floor(y)
        frac = y - base
        for (px, py), coverage in (((x, base), 1.0 - frac), ((x, base + 1), frac)):
            yield ((py, px) if steep else (px, py)), coverage


def draw_line(backend: TextDrawingBackend, start: Pos, end: Pos, style: ShapeStyle) -> None:
    """Draw a line segment onto the backend's canvas.

    Vertical and horizontal segments become ``|`` / ``-`` strokes that stop
    one cell short of the far endpoint. Any other segment is sampled by
    :func:`rasterize_line` and plotted through ``backend.draw_pixel``.
    """
    canvas = backend.canvas
    stride = backend.row_stride
    if start[0] == end[0]:
        vline(canvas, stride, start[0], start[1], end[1])
        return
    if start[1] == end[1]:
        hline(canvas, stride, start[1], start[0], end[0])
        return

    if style.color.alpha == 0.0 or style.stroke_width == 0:
        return
    log.debug("rasterizing diagonal line %s -> %s", start, end)
    for pos, coverage in rasterize_line(start, end, backend.get_size()):
        backend.draw_pixel(pos, style.color.mix(coverage))
