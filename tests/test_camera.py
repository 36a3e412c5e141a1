"""Tests for Camera class."""

import pytest
import math

from prismtracer.camera import Camera
from prismtracer.color import Color
from prismtracer.matrix import IDENTITY, NonInvertibleMatrixError
from prismtracer.transformations import rotation_y, scaling, translation, view_transform
from prismtracer.tuples import Point, Vector
from prismtracer.world import default_world

R2 = math.sqrt(2) / 2


class TestCameraCreation:
    """Test Camera construction."""

    def test_fields(self):
        c = Camera(160, 120, math.pi / 2)
        assert c.hsize == 160
        assert c.vsize == 120
        assert c.field_of_view == math.pi / 2
        assert c.transform == IDENTITY

    def test_pixel_size_horizontal_canvas(self):
        c = Camera(200, 125, math.pi / 2)
        assert c.pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        c = Camera(125, 200, math.pi / 2)
        assert c.pixel_size == pytest.approx(0.01)

    @pytest.mark.parametrize("hsize, vsize", [(0, 10), (10, 0), (-1, 5)])
    def test_invalid_size(self, hsize, vsize):
        with pytest.raises(ValueError):
            Camera(hsize, vsize, math.pi / 2)

    def test_singular_transform(self):
        with pytest.raises(NonInvertibleMatrixError):
            Camera(10, 10, math.pi / 2, scaling(0, 0, 0))


class TestRayForPixel:
    """Test Camera.ray_for_pixel()."""

    def test_through_center(self):
        c = Camera(201, 101, math.pi / 2)
        r = c.ray_for_pixel(100, 50)
        assert r.origin == Point(0, 0, 0)
        assert r.direction == Vector(0, 0, -1)

    def test_through_corner(self):
        c = Camera(201, 101, math.pi / 2)
        r = c.ray_for_pixel(0, 0)
        assert r.origin == Point(0, 0, 0)
        assert r.direction == Vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        c = Camera(201, 101, math.pi / 2, rotation_y(math.pi / 4) * translation(0, -2, 5))
        r = c.ray_for_pixel(100, 50)
        assert r.origin == Point(0, 2, -5)
        assert r.direction == Vector(R2, 0, -R2)


class TestCameraRender:
    """Test Camera.render()."""

    def test_render_default_world(self):
        world = default_world()
        c = Camera(11, 11, math.pi / 2)
        c.transform = view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0))
        image = c.render(world)

        assert image.width == 11
        assert image.height == 11
        pixel = image.pixel_at(5, 5)
        assert abs(pixel.r - 0.38066) < 1e-3
        assert abs(pixel.g - 0.47583) < 1e-3
        assert abs(pixel.b - 0.2855) < 1e-3

    def test_render_empty_world_is_black(self):
        from prismtracer.world import World
        image = Camera(4, 3, math.pi / 3).render(World())
        for y in range(3):
            for x in range(4):
                assert image.pixel_at(x, y) == Color(0, 0, 0)

    def test_repr(self):
        assert "10x5" in repr(Camera(10, 5, 1.0))
