"""Tests for the point light and Phong shading."""

import pytest
import math

from prismtracer.color import Color
from prismtracer.lights import PointLight, lighting
from prismtracer.materials import Material
from prismtracer.patterns import Pattern
from prismtracer.shapes import Shape
from prismtracer.tuples import Point, Vector

R2 = math.sqrt(2) / 2


@pytest.fixture
def material():
    return Material()


@pytest.fixture
def shape():
    return Shape.sphere()


@pytest.fixture
def position():
    return Point(0, 0, 0)


class TestPointLight:
    """Test PointLight construction."""

    def test_position_and_intensity(self):
        light = PointLight(Point(0, 0, 0), Color(1, 1, 1))
        assert light.position == Point(0, 0, 0)
        assert light.intensity == Color(1, 1, 1)

    def test_default_intensity_is_white(self):
        assert PointLight(Point(1, 2, 3)).intensity == Color(1, 1, 1)


class TestLighting:
    """Test the Phong lighting function."""

    def test_eye_between_light_and_surface(self, material, shape, position):
        eyev = Vector(0, 0, -1)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 0, -10), Color(1, 1, 1))
        result = lighting(material, shape, light, position, eyev, normalv)
        assert result == Color(1.9, 1.9, 1.9)

    def test_eye_offset_45_degrees(self, material, shape, position):
        eyev = Vector(0, R2, -R2)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 0, -10), Color(1, 1, 1))
        result = lighting(material, shape, light, position, eyev, normalv)
        assert result == Color(1.0, 1.0, 1.0)

    def test_light_offset_45_degrees(self, material, shape, position):
        eyev = Vector(0, 0, -1)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 10, -10), Color(1, 1, 1))
        result = lighting(material, shape, light, position, eyev, normalv)
        assert result == Color(0.7364, 0.7364, 0.7364)

    def test_eye_in_reflection_path(self, material, shape, position):
        eyev = Vector(0, -R2, -R2)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 10, -10), Color(1, 1, 1))
        result = lighting(material, shape, light, position, eyev, normalv)
        assert result == Color(1.6364, 1.6364, 1.6364)

    def test_light_behind_surface(self, material, shape, position):
        eyev = Vector(0, 0, -1)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 0, 10), Color(1, 1, 1))
        result = lighting(material, shape, light, position, eyev, normalv)
        assert result == Color(0.1, 0.1, 0.1)

    def test_surface_in_shadow(self, material, shape, position):
        eyev = Vector(0, 0, -1)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 0, -10), Color(1, 1, 1))
        result = lighting(material, shape, light, position, eyev, normalv, in_shadow=True)
        assert result == Color(0.1, 0.1, 0.1)

    def test_colored_light(self, shape, position):
        m = Material(color=Color(1, 0.5, 0.25), ambient=1, diffuse=0, specular=0)
        light = PointLight(Point(0, 0, -10), Color(0.5, 1, 1))
        result = lighting(m, shape, light, position, Vector(0, 0, -1), Vector(0, 0, -1))
        assert result == Color(0.5, 0.5, 0.25)

    def test_pattern_overrides_color(self, shape):
        m = Material(
            pattern=Pattern.stripe(Color(1, 1, 1), Color(0, 0, 0)),
            ambient=1, diffuse=0, specular=0,
        )
        eyev = Vector(0, 0, -1)
        normalv = Vector(0, 0, -1)
        light = PointLight(Point(0, 0, -10), Color(1, 1, 1))

        c1 = lighting(m, shape, light, Point(0.9, 0, 0), eyev, normalv)
        c2 = lighting(m, shape, light, Point(1.1, 0, 0), eyev, normalv)
        assert c1 == Color(1, 1, 1)
        assert c2 == Color(0, 0, 0)
