"""Unit tests for materials, point lights and Phong lighting.

Tests cover:
- Material defaults, validation and the glass factory
- Point light construction and equality
- The lighting function for various eye/light/normal configurations
- Shadowed points receiving only ambient light
- Patterns replacing the base color
"""

import math

import pytest


def _sphere_shape():
    from src.whitted.geometry.sphere import Sphere
    from src.whitted.scene.shape import Shape

    return Shape(Sphere())


class TestMaterialDefaults:
    """Tests for Material construction."""

    def test_default_material(self):
        """Test the default coefficients."""
        from src.whitted.core.tuples import approx_equal, color
        from src.whitted.materials.material import Material

        m = Material()
        assert approx_equal(m.color, color(1, 1, 1))
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0
        assert m.pattern is None

    def test_default_color_is_not_shared(self):
        """Test that each material gets its own color array."""
        from src.whitted.materials.material import Material

        a = Material()
        b = Material()
        a.color[0] = 0.0
        assert b.color[0] == 1.0

    def test_color_accepts_sequences(self):
        """Test that a tuple color is converted to an array."""
        from src.whitted.materials.material import Material

        m = Material(color=(0.2, 0.4, 0.6))
        assert m.color.shape == (3,)

    def test_glass_factory(self):
        """Test the glass material factory."""
        from src.whitted.materials.material import Material

        glass = Material.glass()
        assert glass.transparency == 1.0
        assert glass.refractive_index == 1.5
        assert Material.glass(2.0).refractive_index == 2.0

    def test_equality(self):
        """Test value equality of materials."""
        from src.whitted.materials.material import Material

        assert Material() == Material()
        assert Material() != Material(ambient=0.2)


class TestMaterialValidation:
    """Tests for rejected material parameters."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"ambient": -0.1},
            {"diffuse": -1.0},
            {"specular": -0.5},
            {"shininess": 0.0},
            {"reflective": 1.5},
            {"reflective": -0.1},
            {"transparency": 2.0},
            {"refractive_index": 0.5},
        ],
    )
    def test_invalid_parameters_raise(self, kwargs):
        """Test that out-of-range coefficients raise ValueError."""
        from src.whitted.materials.material import Material

        with pytest.raises(ValueError):
            Material(**kwargs)


class TestPointLight:
    """Tests for PointLight."""

    def test_has_position_and_intensity(self):
        """Test that a point light stores its position and intensity."""
        from src.whitted.core.tuples import approx_equal, color, point
        from src.whitted.materials.light import PointLight

        light = PointLight(point(0, 0, 0), color(1, 1, 1))
        assert approx_equal(light.position, point(0, 0, 0))
        assert approx_equal(light.intensity, color(1, 1, 1))

    def test_equality(self):
        """Test that lights compare by value."""
        from src.whitted.core.tuples import color, point
        from src.whitted.materials.light import PointLight

        assert PointLight(point(1, 2, 3), color(1, 1, 1)) == PointLight(point(1, 2, 3), color(1, 1, 1))
        assert PointLight(point(1, 2, 3), color(1, 1, 1)) != PointLight(point(0, 2, 3), color(1, 1, 1))


class TestLighting:
    """Tests for the Phong lighting function."""

    @pytest.mark.parametrize(
        "eyev, light_pos, expected",
        [
            ((0, 0, -1), (0, 0, -10), 1.9),
            ((0, math.sqrt(2) / 2, -math.sqrt(2) / 2), (0, 0, -10), 1.0),
            ((0, 0, -1), (0, 10, -10), 0.7364),
            ((0, -math.sqrt(2) / 2, -math.sqrt(2) / 2), (0, 10, -10), 1.6364),
            ((0, 0, -1), (0, 0, 10), 0.1),
        ],
        ids=[
            "eye-between-light-and-surface",
            "eye-offset-45",
            "light-offset-45",
            "eye-in-reflection-path",
            "light-behind-surface",
        ],
    )
    def test_lighting(self, eyev, light_pos, expected):
        """Test the lighting function for standard configurations."""
        from src.whitted.core.tuples import approx_equal, color, point, vector
        from src.whitted.materials.light import PointLight
        from src.whitted.materials.material import lighting

        light = PointLight(point(*light_pos), color(1, 1, 1))
        result = lighting(_sphere_shape(), light, point(0, 0, 0), vector(*eyev), vector(0, 0, -1))
        assert approx_equal(result, color(expected, expected, expected), eps=1e-4)

    def test_in_shadow_returns_ambient(self):
        """Test that a shadowed point receives only ambient light."""
        from src.whitted.core.tuples import approx_equal, color, point, vector
        from src.whitted.materials.light import PointLight
        from src.whitted.materials.material import lighting

        light = PointLight(point(0, 0, -10), color(1, 1, 1))
        result = lighting(
            _sphere_shape(), light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1), in_shadow=True
        )
        assert approx_equal(result, color(0.1, 0.1, 0.1))

    def test_result_is_not_clamped(self):
        """Test that bright lights may produce channels above 1."""
        from src.whitted.core.tuples import color, point, vector
        from src.whitted.materials.light import PointLight
        from src.whitted.materials.material import lighting

        light = PointLight(point(0, 0, -10), color(1, 1, 1))
        result = lighting(_sphere_shape(), light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
        assert result.max() > 1.0

    def test_pattern_replaces_color(self):
        """Test that a pattern supplies the base color."""
        from src.whitted.core.tuples import BLACK, WHITE, approx_equal, point, vector
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.materials.light import PointLight
        from src.whitted.materials.material import Material, lighting
        from src.whitted.materials.patterns import StripePattern
        from src.whitted.scene.shape import Shape

        material = Material(
            ambient=1.0, diffuse=0.0, specular=0.0, pattern=StripePattern(WHITE, BLACK)
        )
        shape = Shape(Sphere(), material=material)
        light = PointLight(point(0, 0, -10), WHITE.copy())
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)

        assert approx_equal(lighting(shape, light, point(0.9, 0, 0), eyev, normalv), WHITE)
        assert approx_equal(lighting(shape, light, point(1.1, 0, 0), eyev, normalv), BLACK)
