"""
Phong surface materials.

A material bundles the Phong coefficients with the optional pattern and the
parameters that drive recursive reflection and refraction.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .color import Color
from .patterns import Pattern


# Common refractive indices
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass
class Material:
    """Surface appearance of a shape.

    Attributes:
        color: Base surface color (ignored when a pattern is set)
        ambient: Fraction of light reflected regardless of geometry
        diffuse: Matte reflection weight
        specular: Highlight weight
        shininess: Highlight tightness (higher = smaller, sharper)
        pattern: Optional procedural pattern overriding `color`
        reflective: Mirror reflection weight in [0, 1]
        transparency: Refracted light weight in [0, 1]
        refractive_index: Index of refraction of the medium inside the shape
    """
    color: Color = field(default_factory=Color.white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Optional[Pattern] = None
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM

    def __post_init__(self):
        for name in ('ambient', 'diffuse', 'specular'):
            if getattr(self, name) < 0:
                raise ValueError(f"Material {name} must be >= 0, got {getattr(self, name)}")
        if self.shininess <= 0:
            raise ValueError(f"Material shininess must be > 0, got {self.shininess}")
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"Material reflective must be in [0, 1], got {self.reflective}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"Material transparency must be in [0, 1], got {self.transparency}")
        if self.refractive_index <= 0:
            raise ValueError(f"Material refractive_index must be > 0, got {self.refractive_index}")
