"""Cylinder primitive of radius 1 around the local y axis.

By default the cylinder is infinite and open. Setting ``minimum`` and
``maximum`` truncates it (both bounds are exclusive for the side wall), and
``closed`` adds end caps at the truncation planes.

The side wall solves the sphere-like quadratic in x and z only:

    a = dx^2 + dz^2
    b = 2 * (ox * dx + oz * dz)
    c = ox^2 + oz^2 - 1

When ``a`` is ~0 the ray is parallel to the axis and can only hit the caps.
"""

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple4, vector
from src.whitted.geometry.polygon import Polygon

# Threshold for treating a quadratic coefficient or direction component as 0
PARALLEL_THRESHOLD = 1e-12


def check_cap(ray: Ray, t: float) -> bool:
    """Check whether the ray at t lies within the unit radius of the y axis."""
    x = ray.origin[0] + t * ray.direction[0]
    z = ray.origin[2] + t * ray.direction[2]
    return x * x + z * z <= 1.0 + EPSILON


class Cylinder(Polygon):
    """Optionally truncated and capped unit cylinder.

    Attributes:
        minimum: Lower y bound (exclusive), -inf for an unbounded cylinder.
        maximum: Upper y bound (exclusive), +inf for an unbounded cylinder.
        closed: Whether the truncated ends are capped.
    """

    def __init__(
        self,
        minimum: float = -math.inf,
        maximum: float = math.inf,
        closed: bool = False,
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"Cylinder minimum ({minimum}) exceeds maximum ({maximum})")
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def _intersect_caps(self, ray: Ray) -> list[float]:
        if not self.closed or abs(ray.direction[1]) < PARALLEL_THRESHOLD:
            return []

        xs = []
        for bound in (self.minimum, self.maximum):
            # Infinite bounds have no cap to hit
            if math.isinf(bound):
                continue
            t = (bound - ray.origin[1]) / ray.direction[1]
            if check_cap(ray, t):
                xs.append(t)
        return xs

    def intersect(self, ray: Ray) -> list[float]:
        dx, dy, dz = ray.direction[0], ray.direction[1], ray.direction[2]
        ox, oy, oz = ray.origin[0], ray.origin[1], ray.origin[2]

        xs = []
        a = dx * dx + dz * dz
        if abs(a) > PARALLEL_THRESHOLD:
            b = 2.0 * ox * dx + 2.0 * oz * dz
            c = ox * ox + oz * oz - 1.0

            discriminant = b * b - 4.0 * a * c
            if discriminant < 0.0:
                return []

            sqrt_d = math.sqrt(discriminant)
            t0 = (-b - sqrt_d) / (2.0 * a)
            t1 = (-b + sqrt_d) / (2.0 * a)
            if t0 > t1:
                t0, t1 = t1, t0

            for t in (t0, t1):
                y = oy + t * dy
                if self.minimum < y < self.maximum:
                    xs.append(t)

        xs.extend(self._intersect_caps(ray))
        return xs

    def normal_at(self, point: Tuple4) -> Tuple4:
        dist = point[0] * point[0] + point[2] * point[2]

        # Points on a cap get the cap's axis-aligned normal
        if self.closed and dist < 1.0:
            if point[1] >= self.maximum - EPSILON:
                return vector(0.0, 1.0, 0.0)
            if point[1] <= self.minimum + EPSILON:
                return vector(0.0, -1.0, 0.0)

        return vector(point[0], 0.0, point[2])

    def __repr__(self) -> str:
        return f"Cylinder(minimum={self.minimum}, maximum={self.maximum}, closed={self.closed})"
