"""Tests for Ray class."""

import pytest

from prismtracer.ray import Ray
from prismtracer.transformations import scaling, translation
from prismtracer.tuples import Point, Vector


class TestRayCreation:
    """Test Ray construction."""

    def test_stores_origin_and_direction(self):
        origin = Point(1, 2, 3)
        direction = Vector(4, 5, 6)
        ray = Ray(origin, direction)
        assert ray.origin == origin
        assert ray.direction == direction


class TestRayPosition:
    """Test Ray.position()."""

    @pytest.mark.parametrize("t, expected", [
        (0, Point(2, 3, 4)),
        (1, Point(3, 3, 4)),
        (-1, Point(1, 3, 4)),
        (2.5, Point(4.5, 3, 4)),
    ])
    def test_position(self, t, expected):
        ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
        assert ray.position(t) == expected


class TestRayTransform:
    """Test Ray.transform()."""

    def test_translating(self):
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        r2 = ray.transform(translation(3, 4, 5))
        assert r2.origin == Point(4, 6, 8)
        assert r2.direction == Vector(0, 1, 0)

    def test_scaling(self):
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        r2 = ray.transform(scaling(2, 3, 4))
        assert r2.origin == Point(2, 6, 12)
        assert r2.direction == Vector(0, 3, 0)

    def test_original_unchanged(self):
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        ray.transform(translation(3, 4, 5))
        assert ray.origin == Point(1, 2, 3)


class TestRayRepr:
    """Test Ray string representation."""

    def test_repr(self):
        s = repr(Ray(Point(1, 2, 3), Vector(0, 1, 0)))
        assert "Ray" in s
        assert "origin" in s
        assert "direction" in s
