"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
position(t) = origin + t * direction
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .tuples import Point, Vector

if TYPE_CHECKING:
    from .matrix import Matrix


class Ray:
    """A ray with origin and direction.

    Negative t values lie behind the origin; they are still reported by
    intersection tests and filtered out when choosing a hit.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point, direction: Vector):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (left unnormalized by transforms)
        """
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point:
        """Get the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction multiplied by matrix."""
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
