"""Canvas — flat row-major grid of cell states."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from plotter_text.cell import EMPTY, PixelState, merge


class Canvas:
    """A fixed-size character grid addressed by ``y * width + x``.

    Writes outside the grid are silently dropped; the front end may draw
    slightly past the visible area and that is not an error.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[PixelState] = [EMPTY] * (width * height)

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[PixelState]:
        return iter(self.pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (self.width, self.height, self.pixels) == (other.width, other.height, other.pixels)

    def __repr__(self) -> str:
        return f"Canvas({self.width}, {self.height})"

    def index_of(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def get(self, x: int, y: int) -> PixelState:
        idx = self.index_of(x, y)
        if idx is None:
            return EMPTY
        return self.pixels[idx]

    def set(self, x: int, y: int, state: PixelState) -> None:
        idx = self.index_of(x, y)
        if idx is not None:
            self.pixels[idx] = state

    def merge_at(self, x: int, y: int, state: PixelState) -> None:
        idx = self.index_of(x, y)
        if idx is not None:
            self.pixels[idx] = merge(self.pixels[idx], state)

    def merge_index(self, index: int, state: PixelState) -> None:
        if 0 <= index < len(self.pixels):
            self.pixels[index] = merge(self.pixels[index], state)

    def rows(self) -> Iterator[list[PixelState]]:
        for row in range(self.height):
            start = row * self.width
            yield self.pixels[start : start + self.width]

    def apply(self, fn: Callable[[PixelState], PixelState]) -> None:
        """Replace every cell, in row-major order, with ``fn(cell)``."""
        for i, state in enumerate(self.pixels):
            self.pixels[i] = fn(state)

    def clear(self) -> None:
        self.apply(lambda _: EMPTY)
