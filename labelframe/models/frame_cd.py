# frame_cd.py
from __future__ import annotations

import copy
import logging
import math
from typing import Union

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QPainterPath, QPen
from PySide6.QtWidgets import QGraphicsPathItem

from labelframe.config import EPSILON
from labelframe.models.frame import Frame, InvalidShapeParameters
from labelframe.utils.str_util import format_fraction
from labelframe.utils.units import Units

logger = logging.getLogger(__name__)


def _check_cd_params(r1: float, r2: float, w: float, h: float) -> None:
    """Reject parameters for which the clip angles are undefined."""
    if not (math.isfinite(r1) and r1 > 0):
        raise InvalidShapeParameters(f"CD outer radius must be > 0, got {r1}")
    if not (0 <= r2 <= r1):
        raise InvalidShapeParameters(f"CD hole radius must be within [0, {r1}], got {r2}")
    if not (0 < w <= 2 * r1):
        raise InvalidShapeParameters(f"CD clip width must be within (0, {2 * r1}], got {w}")
    if not (0 < h <= 2 * r1):
        raise InvalidShapeParameters(f"CD clip height must be within (0, {2 * r1}], got {h}")


def _cd_path(r1: float, r2: float, w: float, h: float, dx: float, dy: float) -> QPainterPath:
    """
    Build a (possibly clipped) disc outline with a centre hole.

    The disc of radius r1 is drawn in a 2*r1 square at the origin and cut down
    to a w x h footprint centred on it; the hole of radius r2 is added as a
    second subpath so an odd-even fill leaves it open. The result is then
    translated by (dx, dy).
    """
    path = QPainterPath()
    d = 2 * r1

    # Angles where the footprint's vertical and horizontal edges meet the circle
    theta1 = math.degrees(math.acos(w / d))
    theta2 = math.degrees(math.asin(h / d))

    if theta2 >= theta1:
        # Four arcs joined by straight cuts along the footprint edges.
        # With w == h == 2*r1 the cuts have zero length and this is the full circle.
        sweep = theta2 - theta1
        path.arcMoveTo(0, 0, d, d, theta1)
        for start in (theta1, 180 - theta2, 180 + theta1, 360 - theta2):
            path.arcTo(0, 0, d, d, start, sweep)
        path.closeSubpath()
    else:
        # Footprint corners fall inside the disc: nothing of the circle survives.
        path.addRect(r1 - w / 2, r1 - h / 2, w, h)

    if r2 > 0:
        path.addEllipse(r1 - r2, r1 - r2, 2 * r2, 2 * r2)

    path.translate(dx, dy)
    return path


class FrameCd(Frame):
    """
    CD/DVD disc label, optionally clipped to a rectangular footprint
    (e.g. business card CDs).

    All lengths are in points:
      - r1: outer radius
      - r2: radius of the centre hole (0 for none)
      - w, h: clip footprint; 0 means unclipped in that direction
      - waste: bleed allowance around the outline
    """

    def __init__(self, r1: float, r2: float, w: float = 0.0, h: float = 0.0, waste: float = 0.0, id: str = "0"):
        super().__init__(id)
        self._r1 = float(r1)
        self._r2 = float(r2)
        self._w = float(w)
        self._h = float(h)
        self._waste = float(waste)

        if self._w < 0 or self._h < 0 or not self._waste >= 0:
            logger.warning("Rejecting CD frame %r: w=%s h=%s waste=%s", id, w, h, waste)
            raise InvalidShapeParameters(
                f"CD footprint and waste must be >= 0, got w={w}, h={h}, waste={waste}"
            )

        ew, eh = self.effective_width(), self.effective_height()
        try:
            _check_cd_params(self._r1, self._r2, ew, eh)
        except InvalidShapeParameters as exc:
            logger.warning("Rejecting CD frame %r: %s", id, exc)
            raise

        self._path = _cd_path(self._r1, self._r2, ew, eh, ew / 2 - self._r1, eh / 2 - self._r1)
        self._rotated_path = _cd_path(self._r1, self._r2, eh, ew, eh / 2 - self._r1, ew / 2 - self._r1)

        logger.debug("Built CD frame %r: r1=%g r2=%g footprint=%gx%g", id, self._r1, self._r2, ew, eh)

    # --------- properties
    @property
    def r1(self) -> float:
        return self._r1

    @property
    def r2(self) -> float:
        return self._r2

    @property
    def w(self) -> float:
        return self._w

    @property
    def h(self) -> float:
        return self._h

    @property
    def waste(self) -> float:
        return self._waste

    # --------- Frame contract
    def clone(self) -> "FrameCd":
        other = copy.copy(self)
        other._path = QPainterPath(self._path)
        other._rotated_path = QPainterPath(self._rotated_path)
        self._copy_children_to(other)
        return other

    def effective_width(self) -> float:
        return 2 * self._r1 if self._w == 0 else self._w

    def effective_height(self) -> float:
        return 2 * self._r1 if self._h == 0 else self._h

    def size_description(self, units: Union[Units, str]) -> str:
        if isinstance(units, str):
            units = Units.from_id(units)

        diameter = 2 * self._r1 * units.units_per_point()
        if units.id() == "in":
            d_str = format_fraction(diameter)
        else:
            d_str = f"{diameter:.5g}"

        return f"{d_str} {units.name()} {QCoreApplication.translate('FrameCd', 'diameter')}"

    def is_similar_to(self, other: Frame) -> bool:
        if not isinstance(other, FrameCd):
            return False
        return (
            abs(self._w - other._w) <= EPSILON
            and abs(self._h - other._h) <= EPSILON
            and abs(self._r1 - other._r1) <= EPSILON
            and abs(self._r2 - other._r2) <= EPSILON
        )

    def outline(self, rotated: bool = False) -> QPainterPath:
        # Copy-on-write; callers can't disturb the cached outline.
        return QPainterPath(self._rotated_path if rotated else self._path)

    def build_margin_guide(self, size: float, pen: QPen) -> QGraphicsPathItem:
        """
        Return a new path item tracing the outline ``size`` points inside the
        frame (negative ``size`` traces outside it), stroked with ``pen``.
        """
        w, h = self.effective_width(), self.effective_height()
        r1 = self._r1 - size
        r2 = max(self._r2 + size, 0.0)

        _check_cd_params(r1, r2, w - 2 * size, h - 2 * size)

        # Offset is relative to the frame already drawn, so it uses the full footprint.
        path = _cd_path(r1, r2, w - 2 * size, h - 2 * size, w / 2 - r1, h / 2 - r1)

        item = QGraphicsPathItem(path)
        item.setPen(pen)
        return item
