"""Text drawing backend — the surface a plotting front end draws onto."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, TextIO

from plotter_text import presenter, rasterizer
from plotter_text import text as placer
from plotter_text.canvas import Canvas
from plotter_text.cell import PIXEL, Circle, PixelState
from plotter_text.config import BackendConfig
from plotter_text.types import Color, Pos, ShapeStyle, TextStyle


class DrawingBackend(Protocol):
    """Capabilities a plotting front end relies on."""

    def get_size(self) -> tuple[int, int]: ...

    def ensure_prepared(self) -> None: ...

    def present(self) -> None: ...

    def draw_pixel(self, pos: Pos, color: Color) -> None: ...

    def draw_line(self, start: Pos, end: Pos, style: ShapeStyle) -> None: ...

    def estimate_text_size(self, text: str, style: TextStyle) -> tuple[int, int]: ...

    def draw_text(self, text: str, style: TextStyle, pos: Pos) -> None: ...

    def draw_path(self, points: Iterable[Pos], style: ShapeStyle) -> None: ...


class TextDrawingBackend:
    """Renders draw calls onto a character grid and prints it on present().

    Args:
        width: Canvas width in cells; defaults to ``config.width``.
        height: Canvas height in cells; defaults to ``config.height``.
        config: Backend settings; a default :class:`BackendConfig` if omitted.
        sink: Stream ``present()`` writes to; standard error if omitted.
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        config: BackendConfig | None = None,
        sink: TextIO | None = None,
    ) -> None:
        self.config = config or BackendConfig()
        self.canvas = Canvas(
            self.config.width if width is None else width,
            self.config.height if height is None else height,
        )
        self.sink = sink

    @property
    def size_x(self) -> int:
        return self.canvas.width

    @property
    def size_y(self) -> int:
        return self.canvas.height

    @property
    def pixels(self) -> list[PixelState]:
        return self.canvas.pixels

    @property
    def row_stride(self) -> int:
        return self.config.stride_for(self.canvas.width)

    def __iter__(self) -> Iterator[PixelState]:
        return iter(self.canvas)

    def set_state(self, x: int, y: int, state: PixelState) -> None:
        self.canvas.set(x, y, state)

    def update_state(self, x: int, y: int, state: PixelState) -> None:
        self.canvas.merge_at(x, y, state)

    # ─── DrawingBackend ──────────────────────────────────────────────────

    def get_size(self) -> tuple[int, int]:
        return self.canvas.width, self.canvas.height

    def ensure_prepared(self) -> None:
        pass

    def present(self, sink: TextIO | None = None) -> None:
        presenter.present(self.canvas, sink if sink is not None else self.sink)

    def draw_pixel(self, pos: Pos, color: Color) -> None:
        if color.alpha > self.config.alpha_threshold:
            self.canvas.merge_at(pos[0], pos[1], PIXEL)

    def draw_line(self, start: Pos, end: Pos, style: ShapeStyle) -> None:
        rasterizer.draw_line(self, start, end, style)

    def estimate_text_size(self, text: str, style: TextStyle) -> tuple[int, int]:
        return placer.estimate_text_size(text)

    def draw_text(self, text: str, style: TextStyle, pos: Pos) -> None:
        placer.place_text(self.canvas, text, style.anchor, pos, self.row_stride)

    # ─── Composite primitives ────────────────────────────────────────────

    def draw_path(self, points: Iterable[Pos], style: ShapeStyle) -> None:
        """Connect consecutive points with line segments."""
        prev: Pos | None = None
        for point in points:
            if prev is not None:
                self.draw_line(prev, point, style)
            prev = point

    def draw_rect(self, upper_left: Pos, bottom_right: Pos, style: ShapeStyle, fill: bool = False) -> None:
        (x0, y0), (x1, y1) = upper_left, bottom_right
        if fill:
            for y in range(min(y0, y1), max(y0, y1) + 1):
                for x in range(min(x0, x1), max(x0, x1) + 1):
                    self.draw_pixel((x, y), style.color)
            return
        self.draw_line((x0, y0), (x1, y0), style)
        self.draw_line((x1, y0), (x1, y1), style)
        self.draw_line((x0, y1), (x1, y1), style)
        self.draw_line((x0, y0), (x0, y1), style)

    def draw_circle(self, center: Pos, radius: int, style: ShapeStyle, fill: bool = False) -> None:
        """Mark ``center`` with a circle glyph; the radius is below cell resolution."""
        if style.color.alpha > self.config.alpha_threshold:
            self.canvas.merge_at(center[0], center[1], Circle(fill))
