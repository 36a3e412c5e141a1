"""
Point light and the Phong illumination model.

The Phong model approximates direct lighting as the sum of three terms:
- Ambient: constant background light, present even in shadow
- Diffuse: matte reflection, proportional to the cosine between the light
  direction and the surface normal
- Specular: highlight, strongest when the light reflects straight into the eye
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .color import Color
from .materials import Material
from .tuples import Point, Vector, dot, normalize, reflect

if TYPE_CHECKING:
    from .shapes import Shape


@dataclass
class PointLight:
    """A light source with no size, emitting equally in all directions.

    Attributes:
        position: Position of the light
        intensity: Color and brightness of the light
    """
    position: Point
    intensity: Color = field(default_factory=Color.white)


def lighting(
    material: Material,
    shape: Shape,
    light: PointLight,
    point: Point,
    eyev: Vector,
    normalv: Vector,
    in_shadow: bool = False
) -> Color:
    """Shade a point with the Phong model.

    Args:
        material: Material at the point
        shape: Shape being shaded (places the material's pattern)
        light: The light source
        point: World-space point being shaded
        eyev: Unit vector from the point toward the eye
        normalv: Unit surface normal at the point
        in_shadow: If True only the ambient term contributes

    Returns:
        Unclamped sum of the ambient, diffuse and specular terms
    """
    if material.pattern is not None:
        surface = material.pattern.pattern_at_shape(shape, point)
    else:
        surface = material.color

    effective_color = surface * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = normalize(light.position - point)

    # Cosine of the angle between light and normal; negative means the
    # light is on the other side of the surface.
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal < 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0:
        specular = Color.black()
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
