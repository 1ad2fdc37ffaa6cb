# units.py
from __future__ import annotations

from dataclasses import dataclass

from labelframe.config import UNITS, DEFAULT_UNITS


def _normalize_unit_token(u: str | None) -> str | None:
    if not u:
        return None
    u = u.lower().strip().replace('"', "in")
    if u in ("inch", "inches"):
        return "in"
    if u in ("point", "points"):
        return "pt"
    if u in ("pica", "picas"):
        return "pc"
    return u


@dataclass(frozen=True)
class Units:
    """
    A measurement unit for presenting page lengths.

    Frame geometry is always stored in points; a Units instance only knows how
    to express a point length in its own scale and what to call itself.
    """
    _id: str
    _name: str
    _points_per_unit: float

    @classmethod
    def from_id(cls, unit_id: str | None) -> "Units":
        key = _normalize_unit_token(unit_id) or DEFAULT_UNITS
        if key not in UNITS:
            raise ValueError(
                f"Unsupported unit: '{unit_id}'. "
                f"Supported units are: {', '.join(UNITS)}"
            )
        name, ppu = UNITS[key]
        return cls(key, name, ppu)

    # --------- convenience constructors
    @classmethod
    def pt(cls) -> "Units":
        return cls.from_id("pt")

    @classmethod
    def inch(cls) -> "Units":
        return cls.from_id("in")

    @classmethod
    def mm(cls) -> "Units":
        return cls.from_id("mm")

    @classmethod
    def cm(cls) -> "Units":
        return cls.from_id("cm")

    @classmethod
    def pc(cls) -> "Units":
        return cls.from_id("pc")

    # --------- accessors
    def id(self) -> str:
        return self._id

    def name(self) -> str:
        return self._name

    def points_per_unit(self) -> float:
        return self._points_per_unit

    def units_per_point(self) -> float:
        return 1.0 / self._points_per_unit

    def from_points(self, pts: float) -> float:
        return pts * self.units_per_point()

    def to_points(self, value: float) -> float:
        return value * self._points_per_unit

    def __str__(self) -> str:
        return self._id
