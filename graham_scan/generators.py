"""
Deterministic point set families for tests and benchmarks.

Integer families (square, grid, collinear) are exact, so their hulls are
known in closed form. Float families are seeded from ``seed + n``.
"""

from __future__ import annotations

import math
from typing import List

import numpy as np

from .geometry import Point
from .io import points_from_xy


def rotate_points(points: List[Point], angle_rad: float) -> List[Point]:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [Point(ca * p.x - sa * p.y, sa * p.x + ca * p.y, p.id) for p in points]


def random_points(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Uniform points in the square [-radius, radius]^2."""
    rng = np.random.default_rng(seed + n)
    return points_from_xy(rng.uniform(-radius, radius, size=(n, 2)))


def circle_points(n: int, radius: float = 100.0) -> List[Point]:
    """Regular n-gon; every point is a hull vertex."""
    return points_from_xy(
        [(radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n)) for i in range(n)]
    )


def square_with_interior(n: int, side: int = 100, seed: int = 42) -> List[Point]:
    """Four integer corners (ids 0-3) plus n - 4 integer points strictly inside."""
    if n < 4:
        raise ValueError(f"square_with_interior needs n >= 4, got {n}")
    rng = np.random.default_rng(seed + n)
    corners = np.array([[0, 0], [side, 0], [side, side], [0, side]])
    inner = rng.integers(1, side, size=(n - 4, 2))
    return points_from_xy(np.vstack([corners, inner]))


def grid_points(k: int) -> List[Point]:
    """k x k integer lattice; the hull is its four corners."""
    return points_from_xy([(x, y) for y in range(k) for x in range(k)])


def collinear_points(n: int, dx: int = 1, dy: int = 2) -> List[Point]:
    """n integer points on one line; no hull exists."""
    return points_from_xy([(i * dx, i * dy) for i in range(n)])


FAMILIES = {
    "random": random_points,
    "circle": circle_points,
    "square": square_with_interior,
}
