"""A plane in 3D space, described by a normal and an offset."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Plane:
    """The set of points p with ``normal . p + d == 0``."""

    normal: tuple[float, float, float]
    d: float

    def __post_init__(self) -> None:
        normal = tuple(float(c) for c in self.normal)
        if len(normal) != 3:
            raise ValueError("a plane normal needs exactly three components")
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "d", float(self.d))

    def normalize(self) -> Plane:
        """Return the same plane with a unit-length normal."""
        length = math.hypot(*self.normal)
        if length == 0.0:
            raise ValueError("cannot normalize a plane with a zero-length normal")
        return Plane(tuple(c / length for c in self.normal), self.d / length)

    def distance(self, p: Sequence[float]) -> float:
        """Signed distance of a point from the plane (scaled by the normal's length)."""
        nx, ny, nz = self.normal
        px, py, pz = p
        return nx * px + ny * py + nz * pz + self.d