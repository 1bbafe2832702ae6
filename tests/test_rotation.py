import math

import pytest

from gameworld.rotation import angle_xz, inverse_rotate_point, rotate_point
from gameworld.vector import Vector


def _approx(v: Vector, x: float, y: float, z: float) -> None:
    assert v.x == pytest.approx(x, abs=1e-9)
    assert v.y == pytest.approx(y, abs=1e-9)
    assert v.z == pytest.approx(z, abs=1e-9)


def test_zero_angles_leave_point_unchanged():
    p = Vector(1.5, -2.0, 3.25)
    _approx(rotate_point(p, 0, 0, 0), 1.5, -2.0, 3.25)
    _approx(inverse_rotate_point(p, 0, 0, 0), 1.5, -2.0, 3.25)


def test_y_rotation_turns_x_axis_towards_negative_z():
    _approx(rotate_point(Vector(1, 0, 0), 0, 90, 0), 0, 0, -1)


def test_z_rotation_turns_x_axis_towards_y():
    _approx(rotate_point(Vector(1, 0, 0), 0, 0, 90), 0, 1, 0)


def test_x_rotation_turns_y_axis_towards_z():
    _approx(rotate_point(Vector(0, 1, 0), 90, 0, 0), 0, 0, 1)


def test_rotation_order_is_x_then_z_then_y():
    p = Vector(0.3, -1.2, 2.0)
    combined = rotate_point(p, 25, 40, 70)
    stepwise = rotate_point(rotate_point(rotate_point(p, 25, 0, 0), 0, 0, 70), 0, 40, 0)
    _approx(combined, stepwise.x, stepwise.y, stepwise.z)


@pytest.mark.parametrize("angles", [(0, 0, 0), (30, 0, 0), (0, 47, 0), (0, 0, -120)])
def test_inverse_undoes_single_axis_rotation(angles):
    p = Vector(2.0, -1.0, 0.5)
    back = inverse_rotate_point(rotate_point(p, *angles), *angles)
    _approx(back, p.x, p.y, p.z)


@pytest.mark.parametrize("angles", [(10, 20, 30), (-45, 180, 5), (90, 90, 90)])
def test_rotation_preserves_length(angles):
    p = Vector(1.0, 2.0, -3.0)
    assert rotate_point(p, *angles).length() == pytest.approx(p.length())
    assert inverse_rotate_point(p, *angles).length() == pytest.approx(p.length())


def test_rotate_returns_new_vector():
    p = Vector(1, 0, 0)
    rotate_point(p, 0, 90, 0)
    assert (p.x, p.y, p.z) == (1, 0, 0)


def test_angle_xz_along_positive_x_is_zero():
    assert angle_xz(1.0, 0.0) == pytest.approx(0.0)


def test_angle_xz_matches_y_rotation_of_x_axis():
    for heading in (-135.0, -30.0, 45.0, 90.0, 170.0):
        d = rotate_point(Vector(1, 0, 0), 0, heading, 0)
        assert angle_xz(d.x, d.z) == pytest.approx(heading)


def test_angle_xz_negative_z_is_quarter_turn():
    assert angle_xz(0.0, -1.0) == pytest.approx(90.0)