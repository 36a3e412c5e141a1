"""
Scene description parser.

Supports YAML or JSON scene files with:
- Camera configuration
- A single point light
- Materials library (with optional patterns)
- Objects (spheres and planes with transforms and materials)
- Render settings

Example scene file:
```yaml
camera:
  width: 200
  height: 100
  field_of_view: 60        # degrees
  from: [0, 1.5, -5]
  to: [0, 1, 0]
  up: [0, 1, 0]

light:
  position: [-10, 10, -10]
  intensity: [1, 1, 1]

materials:
  floor:
    color: [1, 0.9, 0.9]
    specular: 0
    reflective: 0.3
    pattern:
      type: checkers
      colors: [[0.5, 0.5, 0.5], [0.7, 0.7, 0.7]]
      transform:
        - [scale, 0.5, 0.5, 0.5]

objects:
  - type: plane
    material: floor
  - type: sphere
    transform:
      - [scale, 0.5, 0.5, 0.5]
      - [translate, 1.5, 0.5, -0.5]
    material:
      color: [0.1, 1, 0.5]
      diffuse: 0.7
      specular: 0.3

render:
  max_depth: 5
  threads: 4
```

Transform steps are applied in the order listed. Angles are in degrees.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import copy
import json
import logging
import math

import yaml

from .camera import Camera
from .color import Color
from .lights import PointLight
from .materials import Material
from .matrix import IDENTITY, Matrix, NonInvertibleMatrixError
from .patterns import Pattern, PatternKind
from .renderer import RenderSettings
from .shapes import Shape
from .transformations import view_transform
from .tuples import Point, Vector
from .world import World

logger = logging.getLogger(__name__)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


_MATERIAL_FLOATS = (
    'ambient', 'diffuse', 'specular', 'shininess',
    'reflective', 'transparency', 'refractive_index',
)


def _require_mapping(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise SceneParseError(f"{what} must be a mapping, got: {data}")


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.materials: Dict[str, Material] = {}
        self.world = World()
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: str) -> Tuple[World, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (world, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        try:
            content = path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON, so this covers both
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file {filepath} must contain a mapping at the top level")

        logger.debug("Loaded scene file %s", filepath)
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[World, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (world, camera, settings)
        """
        # Parse materials first (objects reference them)
        if 'materials' in data:
            self._parse_materials(data['materials'])

        if 'objects' in data:
            self._parse_objects(data['objects'])

        if 'light' in data:
            self._parse_light(data['light'])
        else:
            logger.warning("Scene has no light; every surface will render black")

        if 'camera' in data:
            self._parse_camera(data['camera'])
        else:
            logger.warning("Scene has no camera; using a 100x100 default looking down -z")
            self.camera = Camera(100, 100, math.pi / 3)

        if 'render' in data:
            self._parse_settings(data['render'])
        else:
            self.settings = RenderSettings()

        logger.debug(
            "Parsed scene: %d materials, %d shapes, light=%s",
            len(self.materials), len(self.world), self.world.light is not None,
        )
        return self.world, self.camera, self.settings

    def _parse_triple(self, data: Any, what: str) -> Tuple[float, float, float]:
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"{what} must have 3 components, got {len(data)}")
            try:
                return float(data[0]), float(data[1]), float(data[2])
            except (TypeError, ValueError) as e:
                raise SceneParseError(f"Cannot parse {what} from: {data}") from e
        raise SceneParseError(f"Cannot parse {what} from: {data}")

    def _parse_point(self, data: Any) -> Point:
        return Point(*self._parse_triple(data, "Point"))

    def _parse_vector(self, data: Any) -> Vector:
        return Vector(*self._parse_triple(data, "Vector"))

    def _parse_color(self, data: Any) -> Color:
        """Parse a Color from a list or a '#rrggbb' string."""
        if isinstance(data, str):
            if data.startswith('#') and len(data) == 7:
                r = int(data[1:3], 16) / 255.0
                g = int(data[3:5], 16) / 255.0
                b = int(data[5:7], 16) / 255.0
                return Color(r, g, b)
            raise SceneParseError(f"Cannot parse color from string: {data}")
        return Color(*self._parse_triple(data, "Color"))

    def _parse_transform(self, steps: Any) -> Matrix:
        """Build a matrix from a list of [op, args...] steps, applied in order."""
        if not isinstance(steps, list):
            raise SceneParseError(f"Transform must be a list of steps, got: {steps}")

        matrix = IDENTITY
        for step in steps:
            if not isinstance(step, (list, tuple)) or not step:
                raise SceneParseError(f"Invalid transform step: {step}")
            op = str(step[0]).lower()
            try:
                args = [float(a) for a in step[1:]]
            except (TypeError, ValueError) as e:
                raise SceneParseError(f"Invalid arguments in transform step: {step}") from e

            if op in ('translate', 'translation') and len(args) == 3:
                matrix = matrix.translation(*args)
            elif op in ('scale', 'scaling') and len(args) == 3:
                matrix = matrix.scaling(*args)
            elif op == 'rotate_x' and len(args) == 1:
                matrix = matrix.rotation_x(math.radians(args[0]))
            elif op == 'rotate_y' and len(args) == 1:
                matrix = matrix.rotation_y(math.radians(args[0]))
            elif op == 'rotate_z' and len(args) == 1:
                matrix = matrix.rotation_z(math.radians(args[0]))
            elif op in ('shear', 'shearing') and len(args) == 6:
                matrix = matrix.shearing(*args)
            else:
                raise SceneParseError(f"Unknown transform step: {step}")

        return matrix

    def _parse_pattern(self, pattern_data: Dict[str, Any]) -> Pattern:
        _require_mapping(pattern_data, "Pattern")
        type_name = str(pattern_data.get('type', 'stripe')).lower()
        try:
            kind = PatternKind(type_name)
        except ValueError as e:
            raise SceneParseError(f"Unknown pattern type: {type_name}") from e

        colors = pattern_data.get('colors', [[1, 1, 1], [0, 0, 0]])
        if not isinstance(colors, list) or len(colors) != 2:
            raise SceneParseError(f"Pattern needs exactly two colors, got: {colors}")

        pattern = Pattern(kind, self._parse_color(colors[0]), self._parse_color(colors[1]))
        if 'transform' in pattern_data:
            try:
                pattern.transform = self._parse_transform(pattern_data['transform'])
            except NonInvertibleMatrixError as e:
                raise SceneParseError(f"Pattern transform is not invertible: {e}") from e
        return pattern

    def _build_material(self, mat_data: Dict[str, Any]) -> Material:
        if not isinstance(mat_data, dict):
            raise SceneParseError(f"Material must be a mapping, got: {mat_data}")

        kwargs: Dict[str, Any] = {}
        if 'color' in mat_data:
            kwargs['color'] = self._parse_color(mat_data['color'])
        for name in _MATERIAL_FLOATS:
            if name in mat_data:
                try:
                    kwargs[name] = float(mat_data[name])
                except (TypeError, ValueError) as e:
                    raise SceneParseError(f"Material {name} must be a number, got: {mat_data[name]}") from e
        if 'pattern' in mat_data:
            kwargs['pattern'] = self._parse_pattern(mat_data['pattern'])

        try:
            return Material(**kwargs)
        except ValueError as e:
            raise SceneParseError(f"Invalid material: {e}") from e

    def _parse_materials(self, materials_data: Dict[str, Any]) -> None:
        """Parse materials section."""
        _require_mapping(materials_data, "materials section")
        for name, mat_data in materials_data.items():
            self.materials[name] = self._build_material(mat_data)

    def _get_material(self, mat_ref: Any) -> Optional[Material]:
        """Get a material by name or inline definition."""
        if mat_ref is None:
            return None
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"Unknown material: {mat_ref}")
            return copy.deepcopy(self.materials[mat_ref])
        if isinstance(mat_ref, dict):
            return self._build_material(mat_ref)
        raise SceneParseError(f"Invalid material reference: {mat_ref}")

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        if not isinstance(objects_data, list):
            raise SceneParseError(f"objects section must be a list, got: {objects_data}")
        for obj_data in objects_data:
            _require_mapping(obj_data, "Object")
            obj_type = str(obj_data.get('type', 'sphere')).lower()

            if obj_type == 'sphere':
                shape = Shape.sphere()
            elif obj_type == 'plane':
                shape = Shape.plane()
            elif obj_type == 'glass_sphere':
                shape = Shape.glass_sphere()
            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

            if 'transform' in obj_data:
                try:
                    shape.transform = self._parse_transform(obj_data['transform'])
                except NonInvertibleMatrixError as e:
                    raise SceneParseError(f"Object transform is not invertible: {e}") from e

            material = self._get_material(obj_data.get('material'))
            if material is not None:
                shape.material = material

            self.world.shapes.append(shape)

    def _parse_light(self, light_data: Dict[str, Any]) -> None:
        if isinstance(light_data, list):
            raise SceneParseError("Only a single point light is supported")
        _require_mapping(light_data, "light section")
        position = self._parse_point(light_data.get('position', [-10, 10, -10]))
        intensity = self._parse_color(light_data.get('intensity', [1, 1, 1]))
        self.world.light = PointLight(position, intensity)

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        _require_mapping(camera_data, "camera section")
        try:
            width = int(camera_data.get('width', 100))
            height = int(camera_data.get('height', 100))
            fov = math.radians(float(camera_data.get('field_of_view', 60)))
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid camera: {e}") from e

        from_point = self._parse_point(camera_data.get('from', [0, 0, -5]))
        to = self._parse_point(camera_data.get('to', [0, 0, 0]))
        up = self._parse_vector(camera_data.get('up', [0, 1, 0]))

        try:
            self.camera = Camera(width, height, fov, view_transform(from_point, to, up))
        except ValueError as e:
            raise SceneParseError(f"Invalid camera: {e}") from e

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        _require_mapping(settings_data, "render section")
        try:
            self.settings = RenderSettings(
                max_depth=int(settings_data.get('max_depth', 5)),
                num_threads=int(settings_data.get('threads', 1)),
                tile_size=int(settings_data.get('tile_size', 16)),
            )
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid render settings: {e}") from e


def load_scene(filepath: str) -> Tuple[World, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (world, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[World, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary."""
    parser = SceneParser()
    return parser.parse_dict(data)
