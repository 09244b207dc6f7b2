"""
Hull verification.

Checks:
1. Size: 3 <= |hull| <= N
2. Closure: every id belongs to the input, no id repeats
3. Pivot inclusion: the lowest (then leftmost) point is on the hull
4. Strict convexity: every consecutive triple turns counter-clockwise
5. Coverage: no input point lies strictly outside any hull edge
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .geometry import Orientation, Point, orientation
from .prepare import select_pivot


def same_hull(soln1: Sequence[int], soln2: Sequence[int]) -> bool:
    """True if both hulls list the same ids in the same order."""
    if len(soln1) != len(soln2):
        return False
    return all(a == b for a, b in zip(soln1, soln2))


def hull_area(points: Sequence[Point], hull: Sequence[int]) -> float:
    """Shoelace area of the hull polygon."""
    by_id = {p.id: p for p in points}
    verts = [by_id[i] for i in hull]
    n = len(verts)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += verts[i].x * verts[j].y - verts[j].x * verts[i].y
    return abs(area) / 2


def check_hull(points: Sequence[Point], hull: Sequence[int]) -> Tuple[bool, str]:
    """Verify that ``hull`` is the strictly convex CCW hull of ``points``."""
    n = len(points)
    if not 3 <= len(hull) <= n:
        return False, f"Wrong size: {len(hull)} not in [3, {n}]"

    by_id: Dict[int, Point] = {p.id: p for p in points}
    for i in hull:
        if i not in by_id:
            return False, f"Unknown point id: {i}"
    if len(set(hull)) != len(hull):
        return False, "Duplicate point id on hull"

    pivot = select_pivot(points)
    if pivot.id not in hull:
        return False, f"Pivot {pivot.id} missing from hull"

    verts: List[Point] = [by_id[i] for i in hull]
    m = len(verts)
    for k in range(m):
        a, b, c = verts[k], verts[(k + 1) % m], verts[(k + 2) % m]
        if orientation(b - a, c - a) is not Orientation.COUNTER_CLOCKWISE:
            return False, f"Non-convex turn at {b.id}: {a.id} -> {b.id} -> {c.id}"

    for k in range(m):
        a, b = verts[k], verts[(k + 1) % m]
        for p in points:
            if orientation(b - a, p - a) is Orientation.CLOCKWISE:
                return False, f"Point {p.id} outside edge {a.id} -> {b.id}"

    return True, "OK"
