"""Minimal chart front end: caption, axes, tick labels and one line series."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from plotter_text.backend import DrawingBackend
from plotter_text.types import RED, Anchor, HPos, Pos, ShapeStyle, TextStyle, VPos

log = logging.getLogger(__name__)

MARGIN = 1
TICK_COUNT = 5
CAPTION_STYLE = TextStyle(anchor=Anchor(HPos.Center, VPos.Top))
Y_LABEL_STYLE = TextStyle(anchor=Anchor(HPos.Right, VPos.Center))
X_LABEL_STYLE = TextStyle(anchor=Anchor(HPos.Center, VPos.Top))
AXIS_STYLE = ShapeStyle()
SERIES_STYLE = ShapeStyle(color=RED)


def _format_tick(value: float) -> str:
    return f"{value:.3g}"


def _ticks(lo: float, hi: float, count: int = TICK_COUNT) -> list[float]:
    step = (hi - lo) / (count - 1)
    return [lo + i * step for i in range(count)]


def _check_range(name: str, rng: tuple[float, float]) -> None:
    if not (math.isfinite(rng[0]) and math.isfinite(rng[1])):
        raise ValueError(f"{name} range must be finite, got {rng[0]}..{rng[1]}")
    if not rng[0] < rng[1]:
        raise ValueError(f"{name} range must be increasing, got {rng[0]}..{rng[1]}")


class PlotArea:
    """Maps data coordinates into the cell rectangle reserved for the series."""

    def __init__(
        self,
        left: int,
        top: int,
        right: int,
        bottom: int,
        x_range: tuple[float, float],
        y_range: tuple[float, float],
    ) -> None:
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom
        self.x_range = x_range
        self.y_range = y_range

    def map(self, x: float, y: float) -> Pos:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"cannot plot non-finite point ({x}, {y})")
        (x0, x1), (y0, y1) = self.x_range, self.y_range
        px = self.left + round((x - x0) / (x1 - x0) * (self.right - self.left))
        py = self.bottom - round((y - y0) / (y1 - y0) * (self.bottom - self.top))
        return px, py


def layout(
    size: tuple[int, int],
    x_range: tuple[float, float],
    y_range: tuple[float, float],
    caption: str,
) -> PlotArea:
    """Reserve the caption row and label areas and return the plot area."""
    width, height = size
    y_labels = [_format_tick(v) for v in _ticks(*y_range)]
    label_width = max(width * 5 // 100, max(len(s) for s in y_labels) + 1)
    caption_height = max(1, height * 10 // 100) if caption else 0
    bottom_height = max(2, height * 10 // 100)

    left = MARGIN + label_width
    top = MARGIN + caption_height
    right = width - MARGIN - 1
    bottom = height - MARGIN - bottom_height - 1
    if right <= left or bottom <= top:
        raise ValueError(f"Canvas {width}x{height} is too small for a chart")
    return PlotArea(left, top, right, bottom, x_range, y_range)


def draw_chart(
    backend: DrawingBackend,
    x_range: tuple[float, float],
    y_range: tuple[float, float],
    series: Iterable[tuple[float, float]],
    caption: str,
    present: bool = True,
) -> PlotArea:
    """Draw ``series`` as a line chart on ``backend`` and present it.

    Raises:
        ValueError: If a range is empty or the canvas cannot fit the chart.
        DrawingError: If presenting the result fails.
    """
    _check_range("x", x_range)
    _check_range("y", y_range)
    backend.ensure_prepared()
    width, _height = backend.get_size()
    area = layout(backend.get_size(), x_range, y_range, caption)
    log.debug("plot area %d,%d .. %d,%d", area.left, area.top, area.right, area.bottom)

    if caption:
        backend.draw_text(caption, CAPTION_STYLE, (width // 2, MARGIN))

    backend.draw_line((area.left, area.top), (area.left, area.bottom + 1), AXIS_STYLE)
    backend.draw_line((area.left, area.bottom), (area.right + 1, area.bottom), AXIS_STYLE)

    for value in _ticks(*y_range):
        _, py = area.map(x_range[0], value)
        backend.draw_text(_format_tick(value), Y_LABEL_STYLE, (area.left, py))
    for value in _ticks(*x_range):
        px, _ = area.map(value, y_range[0])
        backend.draw_text(_format_tick(value), X_LABEL_STYLE, (px, area.bottom + 1))

    backend.draw_path([area.map(x, y) for x, y in series], SERIES_STYLE)

    if present:
        backend.present()
    return area
