"""
Homogeneous points and vectors.

Both are 4-component values (x, y, z, w):
- Points have w = 1 and mark a location in space
- Vectors have w = 0 and mark a direction and length

Keeping them as distinct types lets the arithmetic enforce the usual
rules: subtracting two points gives a vector, adding a vector to a point
moves the point, and adding two points is meaningless.
"""

from __future__ import annotations
import math
from typing import Union
import numpy as np


EPSILON = 1e-5


class Tuple4:
    """Shared storage and accessors for Point and Vector.

    Uses a numpy array internally; instances are treated as immutable.
    """

    __slots__ = ('_data',)

    W = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z, self.W], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray):
        """Wrap a 4-element array without re-deriving w."""
        t = cls.__new__(cls)
        t._data = np.asarray(arr, dtype=np.float64)
        return t

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x:.5f}, {self.y:.5f}, {self.z:.5f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple4) or type(self) is not type(other):
            return NotImplemented
        return bool(np.allclose(self._data, other._data, atol=EPSILON))

    __hash__ = None

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return iter(float(c) for c in self._data)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


class Point(Tuple4):
    """A location in space (w = 1)."""

    __slots__ = ()

    W = 1.0

    def __add__(self, other: Vector) -> Point:
        if isinstance(other, Vector):
            return Point.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: Union[Point, Vector]) -> Union[Point, Vector]:
        if isinstance(other, Point):
            return Vector.from_array(self._data - other._data)
        if isinstance(other, Vector):
            return Point.from_array(self._data - other._data)
        return NotImplemented


class Vector(Tuple4):
    """A direction with magnitude (w = 0)."""

    __slots__ = ()

    W = 0.0

    def __neg__(self) -> Vector:
        return Vector.from_array(-self._data)

    def __add__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        if isinstance(other, Vector):
            return Vector.from_array(self._data + other._data)
        if isinstance(other, Point):
            return Point.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector.from_array(self._data - other._data)
        return NotImplemented

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, Tuple4):
            return NotImplemented
        return Vector.from_array(self._data * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, Tuple4):
            return NotImplemented
        return Vector.from_array(self._data / scalar)

    def magnitude(self) -> float:
        return magnitude(self)

    def normalize(self) -> Vector:
        return normalize(self)

    def dot(self, other: Vector) -> float:
        return dot(self, other)

    def cross(self, other: Vector) -> Vector:
        return cross(self, other)

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector around the given normal."""
        return reflect(self, normal)


def magnitude(v: Vector) -> float:
    """Length of the spatial part of a vector."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Vector) -> Vector:
    """Return a unit vector in the same direction.

    The zero vector has no direction; callers must not pass one.
    """
    return Vector.from_array(v._data / magnitude(v))


def dot(a: Vector, b: Vector) -> float:
    return float(np.dot(a._data, b._data))


def cross(a: Vector, b: Vector) -> Vector:
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def reflect(v: Vector, normal: Vector) -> Vector:
    """Mirror v around normal: v - normal * 2 * dot(v, normal)."""
    return v - normal * 2 * dot(v, normal)


ORIGIN = Point(0, 0, 0)
