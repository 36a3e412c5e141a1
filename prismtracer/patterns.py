"""
Procedural surface patterns.

Implements:
- Stripes alternating along x
- Linear gradient along x
- Concentric rings in the xz plane
- 3D checkers

Each pattern picks between two colors as a function of a point in pattern
space. Patterns carry their own transform, applied after the owning shape's.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING
import math

from .color import Color
from .matrix import IDENTITY, Matrix
from .tuples import Point

if TYPE_CHECKING:
    from .shapes import Shape


class PatternKind(Enum):
    STRIPE = "stripe"
    GRADIENT = "gradient"
    RING = "ring"
    CHECKERS = "checkers"


class Pattern:
    """A two-color procedural pattern."""

    def __init__(self, kind: PatternKind, a: Color, b: Color, transform: Matrix = IDENTITY):
        """Create a pattern.

        Args:
            kind: Which pattern function to evaluate
            a: Color of the even buckets (start color for gradients)
            b: Color of the odd buckets (end color for gradients)
            transform: Object-to-pattern space transform
        """
        self.kind = kind
        self.a = a
        self.b = b
        self.transform = transform

    @classmethod
    def stripe(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.STRIPE, a, b)

    @classmethod
    def gradient(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.GRADIENT, a, b)

    @classmethod
    def ring(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.RING, a, b)

    @classmethod
    def checkers(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.CHECKERS, a, b)

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._inverse = matrix.inverse_or_raise()
        self._transform = matrix

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def pattern_at(self, point: Point) -> Color:
        """Evaluate the pattern at a point already in pattern space."""
        if self.kind is PatternKind.STRIPE:
            return self.a if math.floor(point.x) % 2 == 0 else self.b

        if self.kind is PatternKind.GRADIENT:
            fraction = point.x - math.floor(point.x)
            return self.a + (self.b - self.a) * fraction

        if self.kind is PatternKind.RING:
            distance = math.sqrt(point.x * point.x + point.z * point.z)
            return self.a if math.floor(distance) % 2 == 0 else self.b

        if self.kind is PatternKind.CHECKERS:
            total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
            return self.a if total % 2 == 0 else self.b

        raise ValueError(f"Unknown pattern kind: {self.kind}")

    def pattern_at_shape(self, shape: Shape, world_point: Point) -> Color:
        """Evaluate the pattern for a world-space point on a shape."""
        object_point = shape.inverse * world_point
        pattern_point = self._inverse * object_point
        return self.pattern_at(pattern_point)

    def __repr__(self) -> str:
        return f"Pattern({self.kind.value}, a={self.a}, b={self.b})"


def pattern_at_object(shape: Shape, world_point: Point) -> Color:
    """Color of the shape's material pattern at a world-space point.

    Raises:
        ValueError: If the shape's material has no pattern
    """
    pattern = shape.material.pattern
    if pattern is None:
        raise ValueError("Shape material has no pattern")
    return pattern.pattern_at_shape(shape, world_point)
