"""
Geometric shapes for the ray tracer.

Every shape lives in its own object space and is placed in the world by a
transform. Rays are moved into object space with the inverse transform, so
the kind-specific code only ever deals with the canonical primitive:
- Sphere: unit sphere centered at the origin
- Plane: the infinite xz plane (y = 0)
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
import math

from .intersections import Intersection
from .materials import Material, GLASS
from .matrix import IDENTITY, Matrix
from .ray import Ray
from .tuples import EPSILON, ORIGIN, Point, Vector, dot, normalize


class ShapeKind(Enum):
    SPHERE = "sphere"
    PLANE = "plane"


class Shape:
    """A transformed primitive with a material.

    Shapes compare by identity: two spheres with equal fields are still
    different objects in a scene.
    """

    def __init__(self, kind: ShapeKind, transform: Matrix = IDENTITY, material: Optional[Material] = None):
        """Create a shape.

        Args:
            kind: Which primitive this shape is
            transform: Object-to-world transform (must be invertible)
            material: Surface material (a default material if None)

        Raises:
            NonInvertibleMatrixError: If transform is singular
        """
        self.kind = kind
        self.transform = transform
        self.material = material if material is not None else Material()

    @classmethod
    def sphere(cls, transform: Matrix = IDENTITY, material: Optional[Material] = None) -> Shape:
        return cls(ShapeKind.SPHERE, transform, material)

    @classmethod
    def plane(cls, transform: Matrix = IDENTITY, material: Optional[Material] = None) -> Shape:
        return cls(ShapeKind.PLANE, transform, material)

    @classmethod
    def glass_sphere(cls, transform: Matrix = IDENTITY) -> Shape:
        """A fully transparent sphere with the refractive index of glass."""
        return cls(ShapeKind.SPHERE, transform, Material(transparency=1.0, refractive_index=GLASS))

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        # Intersection and normal computation both need the inverse, so a
        # singular transform is rejected here rather than at render time.
        inverse = matrix.inverse_or_raise()
        self._transform = matrix
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            Intersections in no particular order; empty on a miss
        """
        local_ray = ray.transform(self._inverse)
        return self.local_intersect(local_ray)

    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        if self.kind is ShapeKind.SPHERE:
            return self._sphere_intersect(local_ray)
        if self.kind is ShapeKind.PLANE:
            return self._plane_intersect(local_ray)
        raise ValueError(f"Unknown shape kind: {self.kind}")

    def _sphere_intersect(self, ray: Ray) -> list[Intersection]:
        """Solve |O + tD|^2 = 1 for t.

        Expands to t^2(D.D) + 2t(D.(O-C)) + (O-C).(O-C) - 1 = 0.
        """
        sphere_to_ray = ray.origin - ORIGIN
        a = dot(ray.direction, ray.direction)
        b = 2.0 * dot(ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []

        sqrtd = math.sqrt(discriminant)
        t1 = (-b - sqrtd) / (2.0 * a)
        t2 = (-b + sqrtd) / (2.0 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def _plane_intersect(self, ray: Ray) -> list[Intersection]:
        # Parallel or coplanar rays never cross the plane at a single point
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def normal_at(self, world_point: Point) -> Vector:
        """Unit surface normal at a world-space point on the shape."""
        object_point = self._inverse * world_point
        object_normal = self.local_normal_at(object_point)
        world_normal = self._inverse_transpose * object_normal
        # Dropping w discards the translation that leaks in through the
        # full 4x4 transpose.
        return normalize(Vector(world_normal.x, world_normal.y, world_normal.z))

    def local_normal_at(self, object_point: Point) -> Vector:
        if self.kind is ShapeKind.SPHERE:
            return object_point - ORIGIN
        if self.kind is ShapeKind.PLANE:
            return Vector(0, 1, 0)
        raise ValueError(f"Unknown shape kind: {self.kind}")

    def __repr__(self) -> str:
        return f"Shape({self.kind.value}, transform={self._transform})"
