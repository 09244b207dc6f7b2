"""
Stack-based Graham scan over a pivot-centered, angle-sorted point sequence.

The stack holds candidate hull vertices in counter-clockwise order starting
at the pivot. Each new point pops every vertex that does not make a strict
left turn, then is pushed. Every point is pushed at most twice and popped at
most once in between, so the pass does at most 2N stack operations.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import HullDegenerateError, InsufficientPointsError
from .geometry import Orientation, Point, orientation
from .prepare import MIN_POINTS, prepare_and_sort

logger = logging.getLogger(__name__)


def _seed(prepared_points: Sequence[Point], pivot: Point) -> tuple[List[Point], int]:
    """Build the initial stack (pivot, end of the first ray, next point).

    Copies of the pivot are skipped. Points on the first ray from the pivot
    collapse to the farthest one: the nearer ones lie inside the first hull
    edge. Returns the stack and the index of the first unprocessed point.
    """
    n = len(prepared_points)
    i = 0
    while i < n and prepared_points[i].x == pivot.x and prepared_points[i].y == pivot.y:
        i += 1
    if i == n:
        raise HullDegenerateError("All points coincide with the pivot")

    first = prepared_points[i]
    ray = first - pivot
    i += 1
    while i < n and orientation(ray, prepared_points[i] - pivot) is Orientation.COLLINEAR:
        first = prepared_points[i]
        i += 1
    if i == n:
        raise HullDegenerateError("All points are collinear with the pivot")

    return [pivot, first, prepared_points[i]], i + 1


def scan_hull(prepared_points: Sequence[Point], pivot: Point) -> List[int]:
    """Run the scan and return hull ids counter-clockwise, pivot first.

    ``prepared_points`` must be sorted by angle around ``pivot`` (see
    ``prepare.sort_by_angle``) and must not contain the pivot itself.
    """
    if len(prepared_points) < MIN_POINTS - 1:
        raise InsufficientPointsError(len(prepared_points) + 1, MIN_POINTS)

    stack, start = _seed(prepared_points, pivot)
    for current in prepared_points[start:]:
        top1 = stack.pop()
        while True:
            if not stack:
                raise HullDegenerateError(
                    f"Stack underflow while placing point {current.id}; input not sorted by angle?"
                )
            top2 = stack[-1]
            if orientation(top1 - top2, current - top2) is Orientation.COUNTER_CLOCKWISE:
                break
            top1 = stack.pop()
        stack.append(top1)
        stack.append(current)

    hull = [p.id for p in stack]
    if len(hull) < 3:
        raise HullDegenerateError(f"Hull has only {len(hull)} vertices")
    if len(set(hull)) != len(hull):
        raise HullDegenerateError(f"Duplicate point ids on hull: {hull}")
    logger.debug("hull of %d vertices from %d points", len(hull), len(prepared_points) + 1)
    return hull


def convex_hull(points: Sequence[Point]) -> List[int]:
    """Convex hull ids of ``points``, counter-clockwise from the pivot."""
    pivot, prepared = prepare_and_sort(points)
    return scan_hull(prepared, pivot)
