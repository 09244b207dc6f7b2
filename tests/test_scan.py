"""
Hull construction tests.

Properties checked on every family:
1. Closure: ids belong to the input, none repeated
2. Convexity: every consecutive triple turns counter-clockwise
3. Pivot inclusion: the pivot id comes first
4. Minimality: interior and edge-midpoint ids are excluded
5. Size: 3 <= |hull| <= N
6. Determinism: repeated calls agree
"""

import random

import numpy as np
import pytest

from graham_scan import HullDegenerateError, InsufficientPointsError, Point, convex_hull, scan_hull
from graham_scan.generators import (
    circle_points,
    collinear_points,
    grid_points,
    random_points,
    square_with_interior,
)
from graham_scan.io import points_from_xy
from graham_scan.prepare import prepare_and_sort, select_pivot
from graham_scan.validate import check_hull


def monotone_chain(pts):
    """Independent reference hull (strict, CCW) as a set of coordinates."""
    P = sorted(set((p.x, p.y) for p in pts))

    def orient(a, b, c):
        return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])

    lower = []
    for p in P:
        while len(lower) >= 2 and orient(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper = []
    for p in reversed(P):
        while len(upper) >= 2 and orient(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return set(lower[:-1] + upper[:-1])


def test_square():
    pts = points_from_xy([(0, 0), (0, 2), (2, 2), (2, 0)])
    assert convex_hull(pts) == [0, 3, 2, 1]


def test_square_with_centre():
    pts = points_from_xy([(0, 0), (0, 2), (2, 2), (2, 0), (1, 1)])
    assert convex_hull(pts) == [0, 3, 2, 1]


def test_triangle_with_collinear_edge_point():
    pts = points_from_xy([(0, 0), (4, 0), (2, 0), (2, 4)])
    assert convex_hull(pts) == [0, 1, 3]


def test_three_points_rejected():
    pts = points_from_xy([(0, 0), (1, 0), (0, 1)])
    with pytest.raises(InsufficientPointsError):
        convex_hull(pts)


def test_all_identical_is_degenerate():
    pts = points_from_xy([(3, 3)] * 5)
    with pytest.raises(HullDegenerateError):
        convex_hull(pts)


@pytest.mark.parametrize("n", [4, 5, 20])
def test_all_collinear_is_degenerate(n):
    with pytest.raises(HullDegenerateError):
        convex_hull(collinear_points(n))


def test_collinear_with_pivot_copies_is_degenerate():
    pts = points_from_xy([(0, 0), (0, 0), (1, 1), (2, 2)])
    with pytest.raises(HullDegenerateError):
        convex_hull(pts)


def test_first_ray_with_several_collinear_points():
    # bottom edge carries three extra points
    pts = points_from_xy([(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (2, 3)])
    assert convex_hull(pts) == [0, 4, 5]


def test_last_ray_with_several_collinear_points():
    # left edge (last ray from the pivot) carries extra points
    pts = points_from_xy([(0, 0), (4, 0), (0, 1), (0, 2), (0, 3), (0, 4)])
    assert convex_hull(pts) == [0, 1, 5]


def test_middle_ray_collinear_points():
    pts = points_from_xy([(0, 0), (4, 0), (1, 1), (2, 2), (4, 4), (0, 4)])
    assert convex_hull(pts) == [0, 1, 4, 5]


def test_duplicate_points_appear_once():
    pts = points_from_xy([(0, 0), (4, 0), (4, 4), (4, 4), (0, 4), (0, 0), (4, 0)])
    hull = convex_hull(pts)
    assert len(hull) == 4
    assert hull[0] == 0
    ok, msg = check_hull(pts, hull)
    assert ok, msg


def test_grid_hull_is_four_corners():
    pts = grid_points(6)
    assert convex_hull(pts) == [0, 5, 35, 30]


def test_circle_keeps_every_point():
    pts = circle_points(50)
    hull = convex_hull(pts)
    assert sorted(hull) == list(range(50))


def test_square_family_keeps_only_corners():
    pts = square_with_interior(200)
    assert convex_hull(pts) == [0, 1, 2, 3]


@pytest.mark.parametrize("n", [4, 10, 100, 1000])
def test_random_matches_reference(n):
    pts = random_points(n)
    hull = convex_hull(pts)
    ok, msg = check_hull(pts, hull)
    assert ok, msg
    by_id = {p.id: (p.x, p.y) for p in pts}
    assert set(by_id[i] for i in hull) == monotone_chain(pts)
    assert hull[0] == select_pivot(pts).id
    assert 3 <= len(hull) <= n


@pytest.mark.parametrize("seed", range(10))
def test_small_integer_sets_with_many_ties(seed):
    rng = random.Random(seed)
    coords = [(rng.randint(0, 4), rng.randint(0, 4)) for _ in range(30)]
    coords += [(0, 0), (4, 0), (4, 4), (0, 4)]
    pts = points_from_xy(coords)
    hull = convex_hull(pts)
    ok, msg = check_hull(pts, hull)
    assert ok, msg
    by_id = {p.id: (p.x, p.y) for p in pts}
    assert set(by_id[i] for i in hull) == monotone_chain(pts)


def test_deterministic():
    pts = random_points(500, seed=7)
    assert convex_hull(pts) == convex_hull(list(pts))


def test_does_not_mutate_input():
    pts = random_points(50)
    before = list(pts)
    convex_hull(pts)
    assert pts == before


def test_scan_hull_on_prepared_points():
    pts = points_from_xy([(1, 1), (3, 1), (3, 3), (1, 3), (2, 2)])
    pivot, prepared = prepare_and_sort(pts)
    assert scan_hull(prepared, pivot) == [0, 1, 2, 3]


def test_scan_hull_too_short():
    with pytest.raises(InsufficientPointsError):
        scan_hull([Point(1, 0, 1), Point(0, 1, 2)], Point(0, 0, 0))


def test_scan_hull_unsorted_input_underflows():
    # clockwise order; the pivot itself ends up popped
    pivot = Point(0, 0, 0)
    unsorted = [Point(0, 2, 1), Point(1, 1, 2), Point(2, 1, 3), Point(2, 0, 4)]
    with pytest.raises(HullDegenerateError):
        scan_hull(unsorted, pivot)


def test_large_int32_coordinates():
    c = np.int32(1_500_000_000)
    coords = [(-c, -c), (c, -c), (c, c), (-c, c), (np.int32(0), np.int32(0))]
    pts = [Point(x, y, i) for i, (x, y) in enumerate(coords)]
    assert convex_hull(pts) == [0, 1, 2, 3]
