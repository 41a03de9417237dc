"""Text placement: anchor offsets and character-by-character merging."""

from __future__ import annotations

from plotter_text.canvas import Canvas
from plotter_text.cell import Text
from plotter_text.types import Anchor, HPos, Pos, VPos


def estimate_text_size(text: str) -> tuple[int, int]:
    """Labels are a single row, one cell per character."""
    return len(text), 1


def anchor_offset(width: int, height: int, anchor: Anchor) -> tuple[int, int]:
    """Offset from the anchor point to the top-left corner of a text box."""
    match anchor.h_pos:
        case HPos.Left:
            dx = 0
        case HPos.Center:
            dx = -(width // 2)
        case HPos.Right:
            dx = -width
    match anchor.v_pos:
        case VPos.Top:
            dy = 0
        case VPos.Center:
            dy = -(height // 2)
        case VPos.Bottom:
            dy = -height
    return dx, dy


def text_origin(pos: Pos, extent: tuple[int, int], anchor: Anchor) -> Pos:
    dx, dy = anchor_offset(extent[0], extent[1], anchor)
    return max(0, pos[0] + dx), max(0, pos[1] + dy)


def place_text(canvas: Canvas, text: str, anchor: Anchor, pos: Pos, stride: int) -> None:
    """Merge ``text`` into consecutive cells starting at its anchored origin.

    The walk follows the linear index only, so a label running past the end
    of a row continues at the start of the next one.
    """
    x, y = text_origin(pos, estimate_text_size(text), anchor)
    offset = y * stride + x
    for idx, ch in enumerate(text, start=offset):
        canvas.merge_index(idx, Text(ch))
