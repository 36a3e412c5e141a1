"""
Closed-form 4x4 transform primitives and the camera view transform.

Angles are in radians. Compose primitives by multiplying them, rightmost
first: `translation(...) * scaling(...)` scales, then translates.
"""

from __future__ import annotations
import math

from .matrix import Matrix
from .tuples import Point, Vector, cross, normalize


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix((
        (1.0, 0.0, 0.0, x),
        (0.0, 1.0, 0.0, y),
        (0.0, 0.0, 1.0, z),
        (0.0, 0.0, 0.0, 1.0),
    ))


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix((
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix((
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, -s, 0.0),
        (0.0, s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix((
        (c, 0.0, s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix((
        (c, -s, 0.0, 0.0),
        (s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each coordinate in proportion to the other two.

    `xy` moves x in proportion to y, `xz` moves x in proportion to z, and so on.
    """
    return Matrix((
        (1.0, xy, xz, 0.0),
        (yx, 1.0, yz, 0.0),
        (zx, zy, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))


def view_transform(from_point: Point, to: Point, up: Vector) -> Matrix:
    """World-to-camera transform for an eye at `from_point` looking at `to`.

    Args:
        from_point: Eye position in world space
        to: Point the eye looks at
        up: Approximate up direction (need not be orthogonal to the view)

    Returns:
        Orientation matrix combined with a translation of the eye to the origin
    """
    forward = normalize(to - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)

    orientation = Matrix((
        (left.x, left.y, left.z, 0.0),
        (true_up.x, true_up.y, true_up.z, 0.0),
        (-forward.x, -forward.y, -forward.z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
