"""Unit sphere primitive.

The sphere is centred at the local origin with radius 1. Scaling and
translating it is the job of the owning ``Shape``'s transform.

The ray-sphere intersection solves

    |origin + t * direction - center|^2 = 1

which expands to a*t^2 + b*t + c = 0 with

    a = direction . direction
    b = 2 * (direction . oc)
    c = oc . oc - 1
    oc = origin - center

A tangent ray has a zero discriminant and reports the repeated root twice,
so callers always receive either zero or two distances.
"""

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple4, dot, point
from src.whitted.geometry.polygon import Polygon


class Sphere(Polygon):
    """Unit sphere at the origin."""

    def __init__(self) -> None:
        self.center = point(0.0, 0.0, 0.0)

    def intersect(self, ray: Ray) -> list[float]:
        oc = ray.origin - self.center

        a = dot(ray.direction, ray.direction)
        if a == 0.0:
            return []
        b = 2.0 * dot(ray.direction, oc)
        c = dot(oc, oc) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [t0, t1]

    def normal_at(self, point: Tuple4) -> Tuple4:
        # Outward normal: from center to the surface point
        return point - self.center
