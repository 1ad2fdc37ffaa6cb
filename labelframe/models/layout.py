# layout.py
from __future__ import annotations

from dataclasses import dataclass

from labelframe.config import EPSILON


@dataclass(frozen=True)
class Layout:
    """
    A regular grid of label positions on a sheet.

    All lengths are in points:
      - nx, ny: number of labels across / down
      - x0, y0: offset of the first label from the sheet's top-left corner
      - dx, dy: pitch between neighbouring labels
    """
    nx: int
    ny: int
    x0: float = 0.0
    y0: float = 0.0
    dx: float = 0.0
    dy: float = 0.0

    def __post_init__(self):
        if self.nx < 1 or self.ny < 1:
            raise ValueError(f"Layout needs at least one label per row and column, got {self.nx} x {self.ny}")

    def n_labels(self) -> int:
        return self.nx * self.ny

    def is_similar_to(self, other: "Layout") -> bool:
        if not isinstance(other, Layout):
            return False
        return (
            self.nx == other.nx
            and self.ny == other.ny
            and abs(self.x0 - other.x0) <= EPSILON
            and abs(self.y0 - other.y0) <= EPSILON
            and abs(self.dx - other.dx) <= EPSILON
            and abs(self.dy - other.dy) <= EPSILON
        )
