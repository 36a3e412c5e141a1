"""
The scene: at most one point light and an ordered collection of shapes.

World implements the recursive color resolution at the heart of the tracer:
direct Phong lighting with hard shadows, plus mirror reflection and
refraction traced recursively. Every recursive descent spends one unit of
the `remaining` budget, and a budget of zero contributes black, so the
recursion terminates for any scene (including facing mirrors).
"""

from __future__ import annotations
import math
from typing import Iterable, Optional

from .color import Color
from .intersections import Computation, Intersection, hit, prepare_computations
from .lights import PointLight, lighting
from .materials import Material
from .ray import Ray
from .shapes import Shape
from .transformations import scaling
from .tuples import Point, dot, magnitude, normalize


MAX_RECURSION_DEPTH = 5


class World:
    """A light and the shapes it illuminates."""

    def __init__(self, light: Optional[PointLight] = None, shapes: Optional[Iterable[Shape]] = None):
        self.light = light
        self.shapes: list[Shape] = list(shapes) if shapes is not None else []

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of ray with every shape, sorted by t."""
        xs: list[Intersection] = []
        for shape in self.shapes:
            xs.extend(shape.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

    def shade_hit(self, comps: Computation, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Color at a prepared hit: direct light plus reflection and refraction."""
        if self.light is not None:
            shadowed = self.is_shadowed(comps.over_point)
            surface = lighting(
                comps.shape.material,
                comps.shape,
                self.light,
                comps.point,
                comps.eyev,
                comps.normalv,
                shadowed,
            )
        else:
            surface = Color.black()

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Trace a ray into the world and return the color it sees."""
        xs = self.intersect(ray)
        the_hit = hit(xs)
        if the_hit is None:
            return Color.black()

        comps = prepare_computations(the_hit, ray, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computation, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0:
            return Color.black()

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computation, remaining: int = MAX_RECURSION_DEPTH) -> Color:
        """Light arriving through a transparent surface, bent by Snell's law."""
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0:
            return Color.black()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)

        # Total internal reflection
        if sin2_t > 1.0:
            return Color.black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio

        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def is_shadowed(self, point: Point) -> bool:
        """True if something lies between point and the light.

        A world without a light leaves every point in shadow.
        """
        if self.light is None:
            return True

        v = self.light.position - point
        distance = magnitude(v)
        shadow_ray = Ray(point, normalize(v))

        the_hit = hit(self.intersect(shadow_ray))
        return the_hit is not None and the_hit.t < distance


class WorldBuilder:
    """Incrementally assemble a World."""

    def __init__(self):
        self._world = World()

    def add_shape(self, shape: Shape) -> WorldBuilder:
        self._world.shapes.append(shape)
        return self

    def add_light_source(self, light: PointLight) -> WorldBuilder:
        """Set the world's light.

        Raises:
            ValueError: If a light was already added (one light per world)
        """
        if self._world.light is not None:
            raise ValueError("World already has a light source; only one point light is supported")
        self._world.light = light
        return self

    @property
    def world(self) -> World:
        return self._world

    def build(self) -> World:
        return self._world


def default_world() -> World:
    """The reference scene: two concentric spheres lit from the upper left."""
    light = PointLight(Point(-10, 10, -10), Color(1, 1, 1))

    outer = Shape.sphere(material=Material(
        color=Color(0.8, 1.0, 0.6),
        diffuse=0.7,
        specular=0.2,
    ))
    inner = Shape.sphere(transform=scaling(0.5, 0.5, 0.5))

    return World(light, [outer, inner])
