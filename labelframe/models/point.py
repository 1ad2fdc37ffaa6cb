# point.py
from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from PySide6.QtCore import QPointF


def compare_less(a: "Point", b: "Point") -> bool:
    """Canonical point order: by y, then by x."""
    if a.y < b.y:
        return True
    if a.y == b.y:
        return a.x < b.x
    return False


@total_ordering
@dataclass(frozen=True)
class Point:
    """An immutable 2D coordinate in points, sortable for deterministic point-set processing."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_qpointf(cls, p: QPointF) -> "Point":
        return cls(p.x(), p.y())

    def to_qpointf(self) -> QPointF:
        return QPointF(self.x, self.y)

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return compare_less(self, other)
