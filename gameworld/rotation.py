"""Rotation helpers for model orientation, in degrees.

A model's orientation is three angles ``(rx, ry, rz)``. They are applied
to a point in model space about x first, then z, then y. This matches
the order in which models are drawn.
"""

from __future__ import annotations

import math

from .vector import Vector


def _rot_x(p: Vector, angle: float) -> Vector:
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    return Vector(p.x, p.y * c - p.z * s, p.y * s + p.z * c)


def _rot_y(p: Vector, angle: float) -> Vector:
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    return Vector(p.x * c + p.z * s, p.y, -p.x * s + p.z * c)


def _rot_z(p: Vector, angle: float) -> Vector:
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    return Vector(p.x * c - p.y * s, p.x * s + p.y * c, p.z)


def rotate_point(point: Vector, rx: float, ry: float, rz: float) -> Vector:
    """Rotate ``point`` about the origin by the model angles.

    The x rotation is applied first, then z, then y.
    """
    return _rot_y(_rot_z(_rot_x(point, rx), rz), ry)


def inverse_rotate_point(point: Vector, rx: float, ry: float, rz: float) -> Vector:
    """Rotate ``point`` back into model space for bounding-box tests.

    The negated angles are applied x first, then y, then z. This undoes
    :func:`rotate_point` exactly when at most one of ``ry`` and ``rz`` is
    non-zero and ``rx`` is zero, which covers the usual case of models
    that only turn about a single axis.
    """
    return _rot_z(_rot_y(_rot_x(point, -rx), -ry), -rz)


def angle_xz(dx: float, dz: float) -> float:
    """Heading in degrees of the direction ``(dx, dz)`` in the XZ plane.

    Zero points along +x, and 90 points along -z.
    """
    return math.degrees(math.atan2(-dz, dx))