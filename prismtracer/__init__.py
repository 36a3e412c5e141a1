"""
prismtracer - A Python Whitted-style Ray Tracer

A CPU ray tracer with support for:
- Spheres and planes placed by affine transforms
- Phong illumination from a point light with hard shadows
- Recursive mirror reflection and refraction (nested transparent volumes)
- Procedural stripe, gradient, ring and checker patterns
- Multi-threaded tile rendering
- PPM and PNG output
"""

__version__ = "0.1.0"
__author__ = "prismtracer Team"

from .tuples import Point, Vector, EPSILON, dot, cross, magnitude, normalize, reflect
from .color import Color
from .matrix import Matrix, IDENTITY, NonInvertibleMatrixError
from .transformations import translation, scaling, rotation_x, rotation_y, rotation_z, shearing, view_transform
from .ray import Ray
from .patterns import Pattern, PatternKind, pattern_at_object
from .materials import Material
from .intersections import Intersection, Computation, intersections, hit, prepare_computations
from .shapes import Shape, ShapeKind
from .lights import PointLight, lighting
from .world import World, WorldBuilder, default_world, MAX_RECURSION_DEPTH
from .camera import Camera
from .canvas import Canvas
from .renderer import Renderer, RenderSettings, get_platform_info
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
