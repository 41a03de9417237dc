"""Centralized configuration for plotter-backend-text."""

from __future__ import annotations

from dataclasses import dataclass

# Row stride hard-wired into the line and text index math of the first
# release of this backend, independent of the canvas width.
LEGACY_ROW_STRIDE = 100


@dataclass
class BackendConfig:
    """Configuration for a text drawing backend."""

    width: int = 100
    height: int = 30
    alpha_threshold: float = 0.3
    row_stride: int | None = None

    @classmethod
    def legacy(cls, width: int = 100, height: int = 30) -> BackendConfig:
        """Config reproducing the fixed 100-column stride for lines and text."""
        return cls(width=width, height=height, row_stride=LEGACY_ROW_STRIDE)

    def stride_for(self, width: int) -> int:
        return width if self.row_stride is None else self.row_stride
