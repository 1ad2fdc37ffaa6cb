from __future__ import annotations

"""Frame: the die-cut shape of a label.

A frame describes one physical cutting outline (its geometry, in points) plus
the sheet layouts the shape is arranged in and the guide markups drawn over
it in the editor. Concrete shape variants subclass **Frame** and supply the
outline construction; everything else here is shared bookkeeping.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from PySide6.QtGui import QPainterPath, QPen
from PySide6.QtWidgets import QGraphicsItem

from labelframe.models.layout import Layout
from labelframe.models.markup import Markup


class InvalidShapeParameters(ValueError):
    """Raised when a frame's geometric parameters cannot describe a real shape."""


class Frame(ABC):
    """Common interface for all frame shape variants."""

    def __init__(self, id: str = "0"):
        self._id = id
        self._layouts: List[Layout] = []
        self._markups: List[Markup] = []

    @property
    def id(self) -> str:
        return self._id

    # ---------------------------------------------------------------------
    # Layouts & markups
    # ---------------------------------------------------------------------
    @property
    def layouts(self) -> Tuple[Layout, ...]:
        return tuple(self._layouts)

    @property
    def markups(self) -> Tuple[Markup, ...]:
        return tuple(self._markups)

    def add_layout(self, layout: Layout) -> None:
        self._layouts.append(layout)

    def add_markup(self, markup: Markup) -> None:
        self._markups.append(markup)

    def n_labels(self) -> int:
        return sum(layout.n_labels() for layout in self._layouts)

    def layout_description(self) -> str:
        if not self._layouts:
            return ""
        n = self.n_labels()
        if len(self._layouts) == 1:
            layout = self._layouts[0]
            return f"{layout.nx} x {layout.ny} ({n} per sheet)"
        return f"{n} per sheet"

    def _copy_children_to(self, other: "Frame") -> None:
        # Layouts and markups are frozen values; sharing them is safe.
        other._layouts = list(self._layouts)
        other._markups = list(self._markups)

    # ---------------------------------------------------------------------
    # Shape contract
    # ---------------------------------------------------------------------
    @abstractmethod
    def clone(self) -> "Frame": ...

    @abstractmethod
    def effective_width(self) -> float: ...

    @abstractmethod
    def effective_height(self) -> float: ...

    @abstractmethod
    def size_description(self, units) -> str: ...

    @abstractmethod
    def is_similar_to(self, other: "Frame") -> bool: ...

    @abstractmethod
    def outline(self, rotated: bool = False) -> QPainterPath: ...

    @abstractmethod
    def build_margin_guide(self, size: float, pen: QPen) -> QGraphicsItem: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, {self.effective_width():g}x{self.effective_height():g}pt)"
