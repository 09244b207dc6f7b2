"""
Point set preparation for the Graham scan.

1. Select the pivot (lowest y, then lowest x). It is always a hull vertex.
2. Translate every point so the pivot sits at the origin.
3. Sort the remaining points by polar angle around the origin using only the
   orientation predicate. Points at equal angle are ordered by increasing
   distance from the pivot.

All other points lie in the half-plane y > 0 or on the positive x-axis once
centered, so angles fall in [0, pi) and the cross-product comparator is a
total order.
"""

from __future__ import annotations

import functools
import logging
from typing import List, NamedTuple, Optional, Sequence

from .errors import EmptyInputError, InsufficientPointsError
from .geometry import Orientation, Point, orientation, squared_norm

logger = logging.getLogger(__name__)

# pivot plus two points seed the stack; one more is needed for a decision
MIN_POINTS = 4


class PreparedPoints(NamedTuple):
    pivot: Point
    points: List[Point]


def select_pivot(points: Sequence[Point]) -> Point:
    """Return the point with minimum y, ties broken by minimum x."""
    if not points:
        raise EmptyInputError("Cannot select a pivot from an empty point set")
    pivot = points[0]
    for p in points[1:]:
        if p.y < pivot.y or (p.y == pivot.y and p.x < pivot.x):
            pivot = p
    return pivot


def center_on_pivot(points: Sequence[Point], pivot: Point) -> List[Point]:
    """Translate every point (pivot included) so the pivot becomes (0, 0)."""
    return [p - pivot for p in points]


def _compare_by_angle(a: Point, b: Point) -> int:
    turn = orientation(a, b)
    if turn is Orientation.COUNTER_CLOCKWISE:
        return -1
    if turn is Orientation.CLOCKWISE:
        return 1
    # Same ray: nearer first. Duplicates compare equal and keep input order.
    da, db = squared_norm(a), squared_norm(b)
    return (da > db) - (da < db)


def sort_by_angle(centered: Sequence[Point], pivot_id: Optional[int] = None) -> List[Point]:
    """Sort centered points by polar angle about the origin, pivot excluded.

    The pivot is the first point at the origin (with id ``pivot_id`` when
    given). Other points coincident with the pivot
    are kept; they sort first (zero distance).
    """
    rest = list(centered)
    for i, p in enumerate(rest):
        if p.is_origin and (pivot_id is None or p.id == pivot_id):
            del rest[i]
            break
    rest.sort(key=functools.cmp_to_key(_compare_by_angle))
    return rest


def prepare_and_sort(points: Sequence[Point]) -> PreparedPoints:
    """Select the pivot, center on it and sort the rest by angle.

    Returns the centered pivot (at the origin, original id) and the sorted
    sequence without it. The input sequence is not modified.
    """
    if not points:
        raise EmptyInputError("No points supplied")
    if len(points) < MIN_POINTS:
        raise InsufficientPointsError(len(points), MIN_POINTS)

    pivot = select_pivot(points)
    logger.debug("pivot %r selected from %d points", pivot, len(points))
    centered = center_on_pivot(points, pivot)
    origin = pivot - pivot
    return PreparedPoints(origin, sort_by_angle(centered, pivot_id=pivot.id))
