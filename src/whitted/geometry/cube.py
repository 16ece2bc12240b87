"""Axis-aligned unit cube primitive spanning [-1, 1] on every axis.

Intersection uses the slab method: each axis contributes the interval of t
where the ray lies between that axis' two faces, and the ray hits the cube
where all three intervals overlap.
"""

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple4, vector
from src.whitted.geometry.polygon import Polygon

# Direction components below this are treated as parallel to a slab
PARALLEL_THRESHOLD = 1e-7

# Stand-in for division by ~0: keeps the sign of the numerator
LARGE_SCALE = 1e15


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Compute the (tmin, tmax) interval for one pair of slab faces.

    Args:
        origin: The ray origin's component on this axis.
        direction: The ray direction's component on this axis.

    Returns:
        The entry and exit distances, ordered so that tmin <= tmax.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) > PARALLEL_THRESHOLD:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = tmin_numerator * LARGE_SCALE
        tmax = tmax_numerator * LARGE_SCALE

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Polygon):
    """Unit cube centred at the origin."""

    def intersect(self, ray: Ray) -> list[float]:
        if all(abs(d) <= PARALLEL_THRESHOLD for d in ray.direction[:3]):
            return []

        xtmin, xtmax = check_axis(ray.origin[0], ray.direction[0])
        ytmin, ytmax = check_axis(ray.origin[1], ray.direction[1])
        ztmin, ztmax = check_axis(ray.origin[2], ray.direction[2])

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [tmin, tmax]

    def normal_at(self, point: Tuple4) -> Tuple4:
        # The face normal is the axis with the largest absolute component
        x, y, z = abs(point[0]), abs(point[1]), abs(point[2])
        maxc = max(x, y, z)

        if abs(maxc - x) < EPSILON:
            return vector(point[0], 0.0, 0.0)
        if abs(maxc - y) < EPSILON:
            return vector(0.0, point[1], 0.0)
        return vector(0.0, 0.0, point[2])
