"""Infinite xz-plane primitive.

The plane passes through the local origin with normal +y. Rays whose
direction has no meaningful y component are parallel to (or lie in) the
plane and miss it.
"""

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple4, vector
from src.whitted.geometry.polygon import Polygon


class Plane(Polygon):
    """The xz-plane, y = 0."""

    def intersect(self, ray: Ray) -> list[float]:
        if abs(ray.direction[1]) < EPSILON:
            return []
        return [-ray.origin[1] / ray.direction[1]]

    def normal_at(self, point: Tuple4) -> Tuple4:
        return vector(0.0, 1.0, 0.0)
