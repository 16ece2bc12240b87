"""Unit tests for the cylinder primitive.

Tests cover:
- Infinite open cylinders (misses, hits, tangents)
- Truncation with exclusive bounds
- Closed caps, including hits exactly on the cap rim
- Side and cap normals
"""

import math

import pytest


def _ray(origin, direction, normalized=True):
    from src.whitted.core.ray import Ray
    from src.whitted.core.tuples import normalize, point, vector

    d = vector(*direction)
    return Ray(point(*origin), normalize(d) if normalized else d)


class TestCylinderConstruction:
    """Tests for Cylinder defaults and validation."""

    def test_defaults_are_infinite_and_open(self):
        """Test that a default cylinder is unbounded and uncapped."""
        from src.whitted.geometry.cylinder import Cylinder

        cyl = Cylinder()
        assert cyl.minimum == -math.inf
        assert cyl.maximum == math.inf
        assert cyl.closed is False

    def test_inverted_bounds_raise(self):
        """Test that minimum > maximum is rejected."""
        from src.whitted.geometry.cylinder import Cylinder

        with pytest.raises(ValueError):
            Cylinder(minimum=2.0, maximum=1.0)


class TestCylinderIntersection:
    """Tests for Cylinder.intersect."""

    @pytest.mark.parametrize(
        "origin, direction",
        [
            ((1, 0, 0), (0, 1, 0)),
            ((0, 0, 0), (0, 1, 0)),
            ((0, 0, -5), (1, 1, 1)),
        ],
    )
    def test_ray_misses(self, origin, direction):
        """Test rays that miss the side wall."""
        from src.whitted.geometry.cylinder import Cylinder

        assert Cylinder().intersect(_ray(origin, direction)) == []

    @pytest.mark.parametrize(
        "origin, direction, t0, t1",
        [
            ((1, 0, -5), (0, 0, 1), 5, 5),
            ((0, 0, -5), (0, 0, 1), 4, 6),
            ((0.5, 0, -5), (0.1, 1, 1), 6.80798, 7.08872),
        ],
    )
    def test_ray_hits(self, origin, direction, t0, t1):
        """Test tangent, centered and oblique hits."""
        from src.whitted.geometry.cylinder import Cylinder

        xs = Cylinder().intersect(_ray(origin, direction))
        assert len(xs) == 2
        assert xs[0] == pytest.approx(t0, abs=1e-5)
        assert xs[1] == pytest.approx(t1, abs=1e-5)

    @pytest.mark.parametrize(
        "origin, direction, count",
        [
            ((0, 1.5, 0), (0.1, 1, 0), 0),
            ((0, 3, -5), (0, 0, 1), 0),
            ((0, 0, -5), (0, 0, 1), 0),
            ((0, 2, -5), (0, 0, 1), 0),
            ((0, 1, -5), (0, 0, 1), 0),
            ((0, 1.5, -2), (0, 0, 1), 2),
        ],
    )
    def test_truncated_bounds_are_exclusive(self, origin, direction, count):
        """Test that hits on or beyond the bounds are dropped."""
        from src.whitted.geometry.cylinder import Cylinder

        cyl = Cylinder(minimum=1.0, maximum=2.0)
        assert len(cyl.intersect(_ray(origin, direction))) == count

    @pytest.mark.parametrize(
        "origin, direction, count",
        [
            ((0, 3, 0), (0, -1, 0), 2),
            ((0, 3, -2), (0, -1, 2), 2),
            ((0, 4, -2), (0, -1, 1), 2),
            ((0, 0, -2), (0, 1, 2), 2),
            ((0, -1, -2), (0, 1, 1), 2),
        ],
    )
    def test_closed_caps(self, origin, direction, count):
        """Test rays entering or leaving through the caps."""
        from src.whitted.geometry.cylinder import Cylinder

        cyl = Cylinder(minimum=1.0, maximum=2.0, closed=True)
        assert len(cyl.intersect(_ray(origin, direction, normalized=False))) == count

    def test_open_cylinder_ignores_caps(self):
        """Test that an uncapped cylinder is hollow along its axis."""
        from src.whitted.geometry.cylinder import Cylinder

        cyl = Cylinder(minimum=1.0, maximum=2.0)
        assert cyl.intersect(_ray((0, 3, 0), (0, -1, 0))) == []


class TestCylinderNormal:
    """Tests for Cylinder.normal_at."""

    @pytest.mark.parametrize(
        "pt, normal",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 5, -1), (0, 0, -1)),
            ((0, -2, 1), (0, 0, 1)),
            ((-1, 1, 0), (-1, 0, 0)),
        ],
    )
    def test_side_normals(self, pt, normal):
        """Test normals on the side wall have no y component."""
        from src.whitted.core.tuples import approx_equal, point, vector
        from src.whitted.geometry.cylinder import Cylinder

        assert approx_equal(Cylinder().normal_at(point(*pt)), vector(*normal))

    @pytest.mark.parametrize(
        "pt, normal",
        [
            ((0, 1, 0), (0, -1, 0)),
            ((0.5, 1, 0), (0, -1, 0)),
            ((0, 1, 0.5), (0, -1, 0)),
            ((0, 2, 0), (0, 1, 0)),
            ((0.5, 2, 0), (0, 1, 0)),
            ((0, 2, 0.5), (0, 1, 0)),
        ],
    )
    def test_cap_normals(self, pt, normal):
        """Test that points on the caps get axis-aligned normals."""
        from src.whitted.core.tuples import approx_equal, point, vector
        from src.whitted.geometry.cylinder import Cylinder

        cyl = Cylinder(minimum=1.0, maximum=2.0, closed=True)
        assert approx_equal(cyl.normal_at(point(*pt)), vector(*normal))
