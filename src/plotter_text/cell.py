"""Cell state — the tagged value stored per grid cell and its merge rule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class HLine:
    pass


@dataclass(frozen=True)
class VLine:
    pass


@dataclass(frozen=True)
class Cross:
    pass


@dataclass(frozen=True)
class Pixel:
    pass


@dataclass(frozen=True)
class Text:
    """A single character of a text label."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Text cell holds exactly one character, got {self.char!r}")


@dataclass(frozen=True)
class Circle:
    """A circle marker, drawn `@` when filled and `O` otherwise."""

    filled: bool = False


PixelState = Empty | HLine | VLine | Cross | Pixel | Text | Circle

EMPTY = Empty()
HLINE = HLine()
VLINE = VLine()
CROSS = Cross()
PIXEL = Pixel()


def to_char(state: PixelState) -> str:
    """Return the glyph displayed for a cell state."""
    match state:
        case Empty():
            return " "
        case HLine():
            return "-"
        case VLine():
            return "|"
        case Cross():
            return "+"
        case Pixel():
            return "."
        case Text(char=c):
            return c
        case Circle(filled=True):
            return "@"
        case Circle(filled=False):
            return "O"
    raise TypeError(f"not a cell state: {state!r}")


def merge(current: PixelState, incoming: PixelState) -> PixelState:
    """Superpose ``incoming`` onto ``current`` and return the visible state.

    Horizontal and vertical strokes combine into a cross. Circles and pixels
    outrank strokes and text; among the rest the latest write wins.
    """
    match (current, incoming):
        case (HLine(), VLine()) | (VLine(), HLine()):
            return CROSS
        case (_, Circle()):
            return incoming
        case (Circle(), _):
            return current
        case (_, Pixel()):
            return PIXEL
        case (Pixel(), _):
            return PIXEL
        case _:
            return incoming
