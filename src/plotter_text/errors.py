"""Errors raised by the text drawing backend."""

from __future__ import annotations


class DrawingError(Exception):
    """Writing the rendered canvas to its output sink failed."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"drawing error: {cause}")
        self.cause = cause
