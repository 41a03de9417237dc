"""plotter-backend-text: a character-grid drawing backend for plotting front ends."""

from plotter_text.backend import DrawingBackend, TextDrawingBackend
from plotter_text.canvas import Canvas
from plotter_text.cell import (
    CROSS,
    EMPTY,
    HLINE,
    PIXEL,
    VLINE,
    Circle,
    Cross,
    Empty,
    HLine,
    Pixel,
    PixelState,
    Text,
    VLine,
    merge,
    to_char,
)
from plotter_text.chart import draw_chart
from plotter_text.config import LEGACY_ROW_STRIDE, BackendConfig
from plotter_text.errors import DrawingError
from plotter_text.presenter import render
from plotter_text.types import BLACK, BLUE, RED, TRANSPARENT, Anchor, Color, HPos, ShapeStyle, TextStyle, VPos

__all__ = [
    "BLACK",
    "BLUE",
    "CROSS",
    "EMPTY",
    "HLINE",
    "LEGACY_ROW_STRIDE",
    "PIXEL",
    "RED",
    "TRANSPARENT",
    "VLINE",
    "Anchor",
    "BackendConfig",
    "Canvas",
    "Circle",
    "Color",
    "Cross",
    "DrawingBackend",
    "DrawingError",
    "Empty",
    "HLine",
    "HPos",
    "Pixel",
    "PixelState",
    "ShapeStyle",
    "Text",
    "TextDrawingBackend",
    "TextStyle",
    "VLine",
    "VPos",
    "draw_chart",
    "merge",
    "render",
    "to_char",
]
