"""Tests for procedural patterns."""

import pytest

from prismtracer.color import Color
from prismtracer.materials import Material
from prismtracer.matrix import IDENTITY
from prismtracer.patterns import Pattern, PatternKind, pattern_at_object
from prismtracer.shapes import Shape
from prismtracer.transformations import scaling, translation
from prismtracer.tuples import Point

WHITE = Color(1, 1, 1)
BLACK = Color(0, 0, 0)


class TestStripe:
    """Test the stripe pattern."""

    def test_creation(self):
        p = Pattern.stripe(WHITE, BLACK)
        assert p.kind is PatternKind.STRIPE
        assert p.a == WHITE
        assert p.b == BLACK
        assert p.transform == IDENTITY

    @pytest.mark.parametrize("point", [Point(0, 0, 0), Point(0, 1, 0), Point(0, 2, 0)])
    def test_constant_in_y(self, point):
        assert Pattern.stripe(WHITE, BLACK).pattern_at(point) == WHITE

    @pytest.mark.parametrize("point", [Point(0, 0, 0), Point(0, 0, 1), Point(0, 0, 2)])
    def test_constant_in_z(self, point):
        assert Pattern.stripe(WHITE, BLACK).pattern_at(point) == WHITE

    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0), WHITE),
        (Point(0.9, 0, 0), WHITE),
        (Point(1, 0, 0), BLACK),
        (Point(-0.1, 0, 0), BLACK),
        (Point(-1, 0, 0), BLACK),
        (Point(-1.1, 0, 0), WHITE),
    ])
    def test_alternates_in_x(self, point, expected):
        assert Pattern.stripe(WHITE, BLACK).pattern_at(point) == expected


class TestGradient:
    """Test the gradient pattern."""

    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0), WHITE),
        (Point(0.25, 0, 0), Color(0.75, 0.75, 0.75)),
        (Point(0.5, 0, 0), Color(0.5, 0.5, 0.5)),
        (Point(0.75, 0, 0), Color(0.25, 0.25, 0.25)),
    ])
    def test_linear_interpolation(self, point, expected):
        assert Pattern.gradient(WHITE, BLACK).pattern_at(point) == expected


class TestRing:
    """Test the ring pattern."""

    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0), WHITE),
        (Point(1, 0, 0), BLACK),
        (Point(0, 0, 1), BLACK),
        (Point(0.708, 0, 0.708), BLACK),
    ])
    def test_extends_in_x_and_z(self, point, expected):
        assert Pattern.ring(WHITE, BLACK).pattern_at(point) == expected


class TestCheckers:
    """Test the 3D checkers pattern."""

    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0), WHITE),
        (Point(0.99, 0, 0), WHITE),
        (Point(1.01, 0, 0), BLACK),
    ])
    def test_repeats_in_x(self, point, expected):
        assert Pattern.checkers(WHITE, BLACK).pattern_at(point) == expected

    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0.99, 0), WHITE),
        (Point(0, 1.01, 0), BLACK),
    ])
    def test_repeats_in_y(self, point, expected):
        assert Pattern.checkers(WHITE, BLACK).pattern_at(point) == expected

    @pytest.mark.parametrize("point, expected", [
        (Point(0, 0, 0.99), WHITE),
        (Point(0, 0, 1.01), BLACK),
    ])
    def test_repeats_in_z(self, point, expected):
        assert Pattern.checkers(WHITE, BLACK).pattern_at(point) == expected


class TestPatternTransforms:
    """Test object and pattern transforms."""

    def test_object_transform(self):
        shape = Shape.sphere(transform=scaling(2, 2, 2))
        p = Pattern.stripe(WHITE, BLACK)
        assert p.pattern_at_shape(shape, Point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        shape = Shape.sphere()
        p = Pattern.stripe(WHITE, BLACK)
        p.transform = scaling(2, 2, 2)
        assert p.pattern_at_shape(shape, Point(1.5, 0, 0)) == WHITE

    def test_both_transforms(self):
        shape = Shape.sphere(transform=scaling(2, 2, 2))
        p = Pattern.stripe(WHITE, BLACK)
        p.transform = translation(0.5, 0, 0)
        assert p.pattern_at_shape(shape, Point(2.5, 0, 0)) == WHITE

    def test_inverse_is_cached(self):
        p = Pattern.stripe(WHITE, BLACK)
        p.transform = translation(1, 2, 3)
        assert p.inverse == translation(-1, -2, -3)

    def test_pattern_at_object(self):
        p = Pattern.stripe(WHITE, BLACK)
        shape = Shape.sphere(transform=scaling(2, 2, 2), material=Material(pattern=p))
        assert pattern_at_object(shape, Point(2.5, 0, 0)) == BLACK

    def test_pattern_at_object_without_pattern(self):
        with pytest.raises(ValueError):
            pattern_at_object(Shape.sphere(), Point(0, 0, 0))
