"""Unit tests for procedural color patterns."""

import pytest


@pytest.fixture
def colors():
    from src.whitted.core.tuples import BLACK, WHITE

    return WHITE, BLACK


class TestStripePattern:
    """Tests for StripePattern."""

    def test_constant_in_y_and_z(self, colors):
        """Test that stripes only vary along x."""
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.materials.patterns import StripePattern

        white, _ = colors
        pattern = StripePattern(*colors)
        for pt in (point(0, 0, 0), point(0, 1, 0), point(0, 2, 0), point(0, 0, 1), point(0, 0, 2)):
            assert approx_equal(pattern.pattern_at(pt), white)

    def test_alternates_in_x(self, colors):
        """Test that stripes alternate every unit of x."""
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.materials.patterns import StripePattern

        white, black = colors
        pattern = StripePattern(*colors)
        assert approx_equal(pattern.pattern_at(point(0.9, 0, 0)), white)
        assert approx_equal(pattern.pattern_at(point(1, 0, 0)), black)
        assert approx_equal(pattern.pattern_at(point(-0.1, 0, 0)), black)
        assert approx_equal(pattern.pattern_at(point(-1, 0, 0)), black)
        assert approx_equal(pattern.pattern_at(point(-1.1, 0, 0)), white)

    @pytest.mark.parametrize("kind", ["StripePattern", "RingPattern", "CheckerPattern"])
    def test_returned_color_is_a_copy(self, kind):
        """Test that editing a looked-up color does not change the pattern."""
        from src.whitted.core.tuples import approx_equal, color, point
        from src.whitted.materials import patterns

        a = color(1, 0, 0)
        pattern = getattr(patterns, kind)(a, color(0, 0, 1))
        looked_up = pattern.pattern_at(point(0, 0, 0))
        looked_up *= 0.0

        assert approx_equal(pattern.pattern_at(point(0, 0, 0)), color(1, 0, 0))
        assert approx_equal(a, color(1, 0, 0))


class TestOtherPatterns:
    """Tests for gradient, ring and checker patterns."""

    def test_gradient_interpolates(self, colors):
        """Test linear interpolation along x."""
        from src.whitted.core.tuples import approx_equal, color, point
        from src.whitted.materials.patterns import GradientPattern

        pattern = GradientPattern(*colors)
        assert approx_equal(pattern.pattern_at(point(0, 0, 0)), color(1, 1, 1))
        assert approx_equal(pattern.pattern_at(point(0.25, 0, 0)), color(0.75, 0.75, 0.75))
        assert approx_equal(pattern.pattern_at(point(0.5, 0, 0)), color(0.5, 0.5, 0.5))
        assert approx_equal(pattern.pattern_at(point(0.75, 0, 0)), color(0.25, 0.25, 0.25))

    def test_ring_extends_in_x_and_z(self, colors):
        """Test that rings alternate with distance from the y axis."""
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.materials.patterns import RingPattern

        white, black = colors
        pattern = RingPattern(*colors)
        assert approx_equal(pattern.pattern_at(point(0, 0, 0)), white)
        assert approx_equal(pattern.pattern_at(point(1, 0, 0)), black)
        assert approx_equal(pattern.pattern_at(point(0, 0, 1)), black)
        assert approx_equal(pattern.pattern_at(point(0.708, 0, 0.708)), black)

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_checker_repeats_along_each_axis(self, colors, axis):
        """Test that checkers alternate along x, y and z."""
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.materials.patterns import CheckerPattern

        white, black = colors
        pattern = CheckerPattern(*colors)

        def at(value):
            coords = [0.0, 0.0, 0.0]
            coords[axis] = value
            return pattern.pattern_at(point(*coords))

        assert approx_equal(at(0.0), white)
        assert approx_equal(at(0.99), white)
        assert approx_equal(at(1.01), black)

    def test_base_pattern_is_abstract(self, colors):
        """Test that the base class has no pattern_at."""
        from src.whitted.core.tuples import point
        from src.whitted.materials.patterns import Pattern

        with pytest.raises(NotImplementedError):
            Pattern(*colors).pattern_at(point(0, 0, 0))


class TestPatternTransforms:
    """Tests for pattern lookups through object and pattern transforms."""

    def test_object_transformation(self, colors):
        """Test a pattern on a scaled object."""
        from src.whitted.core.transformations import scaling
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.materials.patterns import StripePattern
        from src.whitted.scene.shape import Shape

        shape = Shape(Sphere(), scaling(2, 2, 2))
        pattern = StripePattern(*colors)
        assert approx_equal(pattern.pattern_at_shape(shape, point(1.5, 0, 0)), colors[0])

    def test_pattern_transformation(self, colors):
        """Test a scaled pattern on an untransformed object."""
        from src.whitted.core.transformations import scaling
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.materials.patterns import StripePattern
        from src.whitted.scene.shape import Shape

        shape = Shape(Sphere())
        pattern = StripePattern(*colors, transform=scaling(2, 2, 2))
        assert approx_equal(pattern.pattern_at_shape(shape, point(1.5, 0, 0)), colors[0])

    def test_object_and_pattern_transformation(self, colors):
        """Test both transforms applied together."""
        from src.whitted.core.transformations import scaling, translation
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.materials.patterns import StripePattern
        from src.whitted.scene.shape import Shape

        shape = Shape(Sphere(), scaling(2, 2, 2))
        pattern = StripePattern(*colors, transform=translation(0.5, 0, 0))
        assert approx_equal(pattern.pattern_at_shape(shape, point(2.5, 0, 0)), colors[0])

    def test_pattern_through_scene_graph(self, colors):
        """Test that group transforms are applied before the pattern lookup."""
        from src.whitted.core.transformations import translation
        from src.whitted.core.tuples import approx_equal, point
        from src.whitted.geometry.sphere import Sphere
        from src.whitted.materials.patterns import StripePattern
        from src.whitted.scene.group import Group
        from src.whitted.scene.shape import Shape

        group = Group()
        parent = group.add_matrix(translation(1, 0, 0))
        shape = Shape(Sphere())
        group.add_node(shape, parent)
        pattern = StripePattern(*colors)

        # World x = 1.5 is object x = 0.5, inside the first stripe
        assert approx_equal(pattern.pattern_at_shape(shape, point(1.5, 0, 0), group), colors[0])
        with pytest.raises(ValueError):
            pattern.pattern_at_shape(shape, point(1.5, 0, 0))

    def test_singular_pattern_transform_raises(self, colors):
        """Test that a singular pattern transform fails at construction."""
        from src.whitted.core.transformations import NonInvertibleTransformError, scaling
        from src.whitted.materials.patterns import StripePattern

        with pytest.raises(NonInvertibleTransformError):
            StripePattern(*colors, transform=scaling(0, 1, 1))
