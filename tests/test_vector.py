import math

import numpy as np
import pytest
from softshape.vector import Vector2


def test_arithmetic_operators_match_named_methods():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -4.0)
    assert a + b == a.add(b) == Vector2(4.0, -2.0)
    assert a - b == a.sub(b) == Vector2(-2.0, 6.0)
    assert a * 2 == 2 * a == a.mul(2) == Vector2(2.0, 4.0)
    assert b / 2 == b.div(2) == Vector2(1.5, -2.0)
    assert -a == Vector2(-1.0, -2.0)
    # Value semantics: operands are untouched
    assert a == Vector2(1.0, 2.0)


def test_len_and_unit():
    v = Vector2(3.0, 4.0)
    assert v.len() == pytest.approx(5.0)
    u = v.unit()
    assert u.len() == pytest.approx(1.0)
    assert (u.x, u.y) == pytest.approx((0.6, 0.8))


def test_unit_of_tiny_vector_falls_back_to_x_axis():
    assert Vector2(0.0, 0.0).unit() == Vector2(1.0, 0.0)
    assert Vector2(1e-7, -3e-7).unit() == Vector2(1.0, 0.0)
    # Just above the threshold is normalized as usual
    u = Vector2(0.0, -2e-6).unit()
    assert (u.x, u.y) == pytest.approx((0.0, -1.0))


def test_rot_quarter_turn():
    v = Vector2(1.0, 0.0).rot(math.pi / 2)
    assert (v.x, v.y) == pytest.approx((0.0, 1.0), abs=1e-12)


@pytest.mark.parametrize("r", range(-9, 10))
def test_rot90_matches_rot(r):
    v = Vector2(2.5, -1.25)
    exact = v.rot90(r)
    approx = v.rot(r * math.pi / 2)
    assert (exact.x, exact.y) == pytest.approx((approx.x, approx.y), abs=1e-9)


def test_rot90_is_periodic_and_wraps_negatives():
    v = Vector2(3.0, 7.0)
    assert v.rot90(1) == Vector2(-7.0, 3.0)
    assert v.rot90(2) == Vector2(-3.0, -7.0)
    assert v.rot90(3) == Vector2(7.0, -3.0)
    assert v.rot90(-1) == v.rot90(3)
    assert v.rot90(5) == v.rot90(1)
    assert v.rot90(-4) == v.rot90(0) == v


def test_get_rot():
    assert Vector2(0.0, 1.0).get_rot() == pytest.approx(math.pi / 2)
    assert Vector2(-1.0, 0.0).get_rot() == pytest.approx(math.pi)
    assert Vector2(0.0, 0.0).get_rot() == 0.0


def test_intersection_of_crossing_lines():
    # y = 0 line meets the vertical line x = 2 at s = 2
    s = Vector2.intersection(Vector2(0, 0), Vector2(1, 0), Vector2(2, -1), Vector2(0, 1))
    assert s == pytest.approx(2.0)


def test_intersection_of_parallel_lines_is_not_finite():
    s = Vector2.intersection(Vector2(0, 0), Vector2(1, 0), Vector2(0, 1), Vector2(2, 0))
    assert math.isinf(s)
    # Collinear lines: 0/0
    s = Vector2.intersection(Vector2(0, 0), Vector2(1, 0), Vector2(3, 0), Vector2(2, 0))
    assert math.isnan(s)


def test_nearest_projects_and_clamps():
    lp, lv = Vector2(0, 0), Vector2(10, 0)
    assert Vector2.nearest(lp, lv, Vector2(3, 5)) == pytest.approx(0.3)
    assert Vector2.nearest(lp, lv, Vector2(-5, 1)) == 0.0
    assert Vector2.nearest(lp, lv, Vector2(20, -1)) == 1.0


def test_nearest_on_degenerate_segment_is_zero():
    assert Vector2.nearest(Vector2(1, 1), Vector2(0, 0), Vector2(4, 5)) == 0.0


def test_array_round_trip():
    v = Vector2.of(np.array([1.5, -2.0]))
    assert v == Vector2(1.5, -2.0)
    assert np.allclose(v.to_array(), [1.5, -2.0])
