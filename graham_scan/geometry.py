"""
Points and the orientation predicate.

Every geometric decision in the hull construction (the angular sort and the
turn test of the scan) goes through ``orientation``. There is no other
predicate, no trigonometry and no square root.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum


class Orientation(Enum):
    CLOCKWISE = -1          # right turn from u to v
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1   # left turn from u to v


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    id: int = -1

    def __post_init__(self):
        # every difference and product downstream stays in Python ints
        object.__setattr__(self, "x", _widen(self.x))
        object.__setattr__(self, "y", _widen(self.y))

    def __sub__(self, other: "Point") -> "Point":
        """Vector from ``other`` to ``self``; keeps this point's id."""
        return Point(self.x - other.x, self.y - other.y, self.id)

    @property
    def is_origin(self) -> bool:
        return self.x == 0 and self.y == 0

    def __repr__(self):
        return f"P{self.id}({self.x}, {self.y})"


def _widen(value):
    # numpy integer scalars overflow silently; Python ints do not
    if isinstance(value, numbers.Integral):
        return int(value)
    return value


def cross_product(u: Point, v: Point):
    """Signed cross product ``u.x * v.y - u.y * v.x`` of two vectors."""
    return u.x * v.y - u.y * v.x


def orientation(u: Point, v: Point) -> Orientation:
    """Classify the turn from vector u to vector v (common origin).

    The zero test is exact, also for floats.
    """
    cross = cross_product(u, v)
    if cross > 0:
        return Orientation.COUNTER_CLOCKWISE
    if cross == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE


def squared_norm(u: Point):
    return u.x * u.x + u.y * u.y
