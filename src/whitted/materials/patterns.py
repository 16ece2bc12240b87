"""Procedural color patterns.

A pattern maps a point in its own pattern space to a color. Patterns have
their own transform, applied after the owning shape's transform, so a
stripe can be scaled or rotated independently of the object it decorates:

    world point -> object space (shape and scene-graph transforms)
                -> pattern space (inverse of the pattern transform)

Supported patterns:
    StripePattern: alternates between two colors on integer steps of x
    GradientPattern: linear blend from color_a to color_b over each unit of x
    RingPattern: concentric rings in the xz plane
    CheckerPattern: alternating 3D cubes

Example:
    >>> from src.whitted.core.tuples import BLACK, WHITE, point
    >>> from src.whitted.materials.patterns import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK)
    >>> stripes.pattern_at(point(1.5, 0.0, 0.0))
    array([0., 0., 0.])
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from src.whitted.core.transformations import Matrix, identity, invert
from src.whitted.core.tuples import Color, Tuple4

if TYPE_CHECKING:
    from src.whitted.scene.group import Group
    from src.whitted.scene.shape import Shape


class Pattern:
    """Base class for two-color patterns with their own transform.

    Subclasses implement ``pattern_at`` for points already in pattern space.
    """

    def __init__(self, color_a: Color, color_b: Color, transform: Matrix | None = None) -> None:
        self.color_a = np.array(color_a, dtype=np.float64)
        self.color_b = np.array(color_b, dtype=np.float64)
        self.transform = identity() if transform is None else transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        # Invert eagerly so a singular pattern transform fails at scene build time
        self._inverse = invert(m)
        self._transform = m

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def pattern_at(self, point: Tuple4) -> Color:
        raise NotImplementedError("pattern_at() must be implemented by subclasses.")

    def pattern_at_shape(self, shape: Shape, world_point: Tuple4, group: Group | None = None) -> Color:
        """Look up the pattern color for a world-space point on a shape.

        Args:
            shape: The shape the pattern decorates.
            world_point: The point on the shape's surface in world space.
            group: The scene graph holding the shape, if it lives in one.

        Returns:
            The pattern color at that point.
        """
        object_point = shape.world_to_object(world_point, group)
        pattern_point = self._inverse @ object_point
        return self.pattern_at(pattern_point)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color_a={self.color_a.tolist()}, color_b={self.color_b.tolist()})"


class StripePattern(Pattern):
    def pattern_at(self, point: Tuple4) -> Color:
        if math.floor(point[0]) % 2 == 0:
            return self.color_a.copy()
        return self.color_b.copy()


class GradientPattern(Pattern):
    def pattern_at(self, point: Tuple4) -> Color:
        distance = self.color_b - self.color_a
        fraction = point[0] - math.floor(point[0])
        return self.color_a + distance * fraction


class RingPattern(Pattern):
    def pattern_at(self, point: Tuple4) -> Color:
        if math.floor(math.sqrt(point[0] ** 2 + point[2] ** 2)) % 2 == 0:
            return self.color_a.copy()
        return self.color_b.copy()


class CheckerPattern(Pattern):
    def pattern_at(self, point: Tuple4) -> Color:
        # Cells are unit cubes; a tiny offset keeps faces lying on integer
        # boundaries from flickering between the two colors
        total = sum(math.floor(c + 1e-9) for c in point[:3])
        if total % 2 == 0:
            return self.color_a.copy()
        return self.color_b.copy()
