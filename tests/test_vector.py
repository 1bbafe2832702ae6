import math

import pytest

from gameworld.vector import Vector


def test_defaults_to_origin():
    assert Vector() == Vector(0.0, 0.0, 0.0)
    assert Vector().length() == 0.0


def test_length_is_non_negative_and_symmetric():
    v = Vector(1.5, -2.0, 0.25)
    assert v.length() > 0
    assert (-v).length() == pytest.approx(v.length())


def test_normalized_has_unit_length_and_same_direction():
    v = Vector(2.0, -7.0, 3.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert (n * v.length()).x == pytest.approx(v.x)
    assert (n * v.length()).z == pytest.approx(v.z)


def test_normalized_zero_stays_zero():
    assert Vector().normalized() == Vector()


def test_normalized_does_not_modify_original():
    v = Vector(5.0, 0.0, 0.0)
    v.normalized()
    assert v == Vector(5.0, 0.0, 0.0)


def test_add_sub_round_trip():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 8.0)
    assert (a + b) - b == a


def test_scaling_scales_length():
    v = Vector(1.0, 2.0, 2.0)
    assert (v * 4.0).length() == pytest.approx(4.0 * v.length())
    assert 4.0 * v == v * 4.0


def test_distance_symmetric_and_matches_difference():
    a = Vector(1.0, 1.0, 1.0)
    b = Vector(-2.0, 5.0, 0.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())
    assert a.distance(a) == 0.0


def test_iteration_and_unpacking():
    x, y, z = Vector(1.0, 2.0, 3.0)
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_copy_is_independent():
    v = Vector(1.0, 2.0, 3.0)
    c = v.copy()
    c.x = 10.0
    assert v.x == 1.0


def test_mul_rejects_vector():
    with pytest.raises(TypeError):
        Vector(1.0, 0.0, 0.0) * Vector(1.0, 0.0, 0.0)


def test_axis_unit_length():
    assert math.isclose(Vector(0.0, 0.0, -3.0).normalized().z, -1.0)