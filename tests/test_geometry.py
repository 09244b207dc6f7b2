import numpy as np

from graham_scan.geometry import Orientation, Point, cross_product, orientation, squared_norm


def test_cross_product_sign_convention():
    assert cross_product(Point(1, 0), Point(0, 1)) == 1
    assert cross_product(Point(0, 1), Point(1, 0)) == -1


def test_orientation_classes():
    assert orientation(Point(1, 0), Point(0, 1)) is Orientation.COUNTER_CLOCKWISE
    assert orientation(Point(0, 1), Point(1, 0)) is Orientation.CLOCKWISE
    assert orientation(Point(2, 4), Point(1, 2)) is Orientation.COLLINEAR
    assert orientation(Point(2, 4), Point(-1, -2)) is Orientation.COLLINEAR


def test_orientation_zero_vector_is_collinear():
    assert orientation(Point(0, 0), Point(3, 7)) is Orientation.COLLINEAR


def test_float_zero_test_is_exact():
    # off by one ulp is not collinear
    assert orientation(Point(1.0, 1.0), Point(1.0, 1.0 + 2 ** -52)) is Orientation.COUNTER_CLOCKWISE
    assert orientation(Point(0.5, 0.25), Point(2.0, 1.0)) is Orientation.COLLINEAR


def test_numpy_integers_do_not_overflow():
    big = np.int32(2 ** 30)
    u = Point(big, np.int32(1))
    v = Point(np.int32(-1), big)
    assert cross_product(u, v) == 2 ** 60 + 1
    assert orientation(u, v) is Orientation.COUNTER_CLOCKWISE


def test_subtraction_keeps_left_id():
    d = Point(5, 7, 3) - Point(2, 3, 9)
    assert (d.x, d.y, d.id) == (3, 4, 3)


def test_is_origin_and_norm():
    p = Point(3, 0, 4)
    assert squared_norm(Point(3, 4)) == 25
    assert Point(0, 0, 1).is_origin
    assert not p.is_origin


def test_numpy_integer_coordinates_become_python_ints():
    p = Point(np.int32(7), np.int64(-3), 0)
    assert type(p.x) is int and type(p.y) is int
    assert Point(np.float64(0.5), 1.0).x == 0.5


def test_numpy_int32_subtraction_does_not_wrap():
    a = Point(np.int32(2 ** 31 - 1), np.int32(0))
    b = Point(np.int32(-(2 ** 31)), np.int32(0))
    assert (a - b).x == 2 ** 32 - 1
