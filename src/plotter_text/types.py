"""Style tokens exchanged with the plotting front end.

The backend reads only alpha, stroke width and text anchor from these; the
remaining fields are carried through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto

Pos = tuple[int, int]


class HPos(Enum):
    Left = auto()
    Center = auto()
    Right = auto()


class VPos(Enum):
    Top = auto()
    Center = auto()
    Bottom = auto()


@dataclass(frozen=True)
class Anchor:
    """Reference point of a text label relative to its drawing position."""

    h_pos: HPos = HPos.Left
    v_pos: VPos = VPos.Top


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def mix(self, value: float) -> Color:
        """Scale the alpha channel by ``value``."""
        return replace(self, alpha=self.alpha * value)


BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
TRANSPARENT = Color(0, 0, 0, 0.0)


@dataclass(frozen=True)
class ShapeStyle:
    color: Color = BLACK
    filled: bool = False
    stroke_width: int = 1


@dataclass(frozen=True)
class TextStyle:
    font: str = "sans-serif"
    size: float = 1.0
    color: Color = BLACK
    anchor: Anchor = field(default_factory=Anchor)
