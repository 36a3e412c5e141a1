"""
Ray/shape intersections and the per-hit geometry used for shading.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TYPE_CHECKING

from .ray import Ray
from .tuples import EPSILON, Point, Vector, dot, reflect

if TYPE_CHECKING:
    from .shapes import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray parameter t at which a ray meets a shape."""
    t: float
    shape: Shape


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by t."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """The visible intersection: the one with the lowest non-negative t.

    Returns:
        None if every intersection lies behind the ray origin
    """
    visible = [i for i in xs if i.t >= 0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.t)


@dataclass
class Computation:
    """Precomputed geometry at a hit, shared by every shading term.

    Attributes:
        t: Ray parameter of the hit
        shape: The shape that was hit
        point: World-space hit point
        eyev: Unit vector back toward the ray origin
        normalv: Surface normal, flipped to face the eye when inside
        inside: True if the ray started inside the shape
        reflectv: Ray direction mirrored about the normal
        over_point: point nudged along +normal; origin for shadow and reflection rays
        under_point: point nudged along -normal; origin for refraction rays
        n1: Refractive index of the medium the ray leaves
        n2: Refractive index of the medium the ray enters
    """
    t: float
    shape: Shape
    point: Point
    eyev: Vector
    normalv: Vector
    inside: bool
    reflectv: Vector
    over_point: Point
    under_point: Point
    n1: float = 1.0
    n2: float = 1.0


def refractive_indices(target: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    """Find n1/n2 for target by walking the sorted intersections.

    A containment list tracks which shapes the ray is inside; entering a
    shape pushes it, hitting it again pops it.
    """
    containers: list[Shape] = []
    n1 = n2 = 1.0

    for i in xs:
        is_target = i == target
        if is_target:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if i.shape in containers:
            containers.remove(i.shape)
        else:
            containers.append(i.shape)

        if is_target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(
    intersection: Intersection,
    ray: Ray,
    xs: Optional[Sequence[Intersection]] = None
) -> Computation:
    """Derive the shading geometry for a hit.

    Args:
        intersection: The hit being shaded
        ray: The ray that produced it
        xs: All intersections of the ray, sorted by t (for n1/n2)

    Returns:
        Computation for the hit
    """
    if xs is None:
        xs = [intersection]

    shape = intersection.shape
    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = shape.normal_at(point)

    inside = dot(normalv, eyev) < 0
    if inside:
        normalv = -normalv

    n1, n2 = refractive_indices(intersection, xs)

    return Computation(
        t=intersection.t,
        shape=shape,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        n1=n1,
        n2=n2,
    )
