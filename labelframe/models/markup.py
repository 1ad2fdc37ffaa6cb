# markup.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PySide6.QtGui import QPen
from PySide6.QtWidgets import QGraphicsItem, QGraphicsEllipseItem

if TYPE_CHECKING:
    from labelframe.models.frame import Frame


class Markup(ABC):
    """A non-printing guide drawn over a frame in the editor."""

    @abstractmethod
    def create_graphics_item(self, frame: "Frame", pen: QPen) -> QGraphicsItem: ...


@dataclass(frozen=True)
class MarkupMargin(Markup):
    """Safety margin guide, ``size`` points inside the frame outline."""
    size: float

    def create_graphics_item(self, frame: "Frame", pen: QPen) -> QGraphicsItem:
        return frame.build_margin_guide(self.size, pen)


@dataclass(frozen=True)
class MarkupCircle(Markup):
    """Guide circle of radius ``r`` centred at (x0, y0) in frame coordinates."""
    x0: float
    y0: float
    r: float

    def create_graphics_item(self, frame: "Frame", pen: QPen) -> QGraphicsItem:
        item = QGraphicsEllipseItem(self.x0 - self.r, self.y0 - self.r, 2 * self.r, 2 * self.r)
        item.setPen(pen)
        return item
