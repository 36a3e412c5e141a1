"""Tests for materials."""

import pytest

from prismtracer.color import Color
from prismtracer.materials import Material, VACUUM, AIR, WATER, GLASS, DIAMOND
from prismtracer.patterns import Pattern


class TestMaterialDefaults:
    """Test the default material."""

    def test_defaults(self):
        m = Material()
        assert m.color == Color(1, 1, 1)
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.pattern is None

    def test_recursion_defaults(self):
        m = Material()
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0

    def test_independent_colors(self):
        a = Material()
        b = Material()
        assert a.color is not b.color

    def test_with_pattern(self):
        p = Pattern.stripe(Color(1, 1, 1), Color(0, 0, 0))
        assert Material(pattern=p).pattern is p


class TestMaterialValidation:
    """Test range checks on material parameters."""

    @pytest.mark.parametrize("kwargs", [
        {'ambient': -0.1},
        {'diffuse': -1},
        {'specular': -0.5},
        {'shininess': 0},
        {'reflective': 1.5},
        {'reflective': -0.1},
        {'transparency': 2},
        {'refractive_index': 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Material(**kwargs)

    def test_boundaries_accepted(self):
        m = Material(ambient=0, diffuse=0, specular=0, reflective=1, transparency=1)
        assert m.reflective == 1
        assert m.transparency == 1


class TestRefractiveIndices:
    """Test the refractive index constants."""

    def test_values(self):
        assert VACUUM == 1.0
        assert AIR == pytest.approx(1.00029)
        assert WATER == pytest.approx(1.333)
        assert GLASS == pytest.approx(1.5)
        assert DIAMOND == pytest.approx(2.417)
