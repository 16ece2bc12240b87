"""Flat triangle primitive using Moller-Trumbore intersection.

The edge vectors and face normal are computed once at construction. The
normal is the same at every point of the face.
"""

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple4, cross, dot, normalize
from src.whitted.geometry.polygon import Polygon


class Triangle(Polygon):
    """Triangle defined by three points in local space.

    Attributes:
        p1, p2, p3: The corner points.
        e1: Edge from p1 to p2.
        e2: Edge from p1 to p3.
        normal: The face normal, ``normalize(e2 x e1)``.
    """

    def __init__(self, p1: Tuple4, p2: Tuple4, p3: Tuple4) -> None:
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = p2 - p1
        self.e2 = p3 - p1
        # Zero for degenerate triangles, which then never intersect
        self.normal = normalize(cross(self.e2, self.e1))

    def intersect(self, ray: Ray) -> list[float]:
        dir_cross_e2 = cross(ray.direction, self.e2)
        det = dot(self.e1, dir_cross_e2)

        # Ray is parallel to the triangle's plane
        if abs(det) < EPSILON:
            return []

        f = 1.0 / det
        p1_to_origin = ray.origin - self.p1
        u = f * dot(p1_to_origin, dir_cross_e2)
        if u < 0.0 or u > 1.0:
            return []

        origin_cross_e1 = cross(p1_to_origin, self.e1)
        v = f * dot(ray.direction, origin_cross_e1)
        if v < 0.0 or u + v > 1.0:
            return []

        return [f * dot(self.e2, origin_cross_e1)]

    def normal_at(self, point: Tuple4) -> Tuple4:
        return self.normal.copy()

    def __repr__(self) -> str:
        return (
            f"Triangle(p1={self.p1[:3].tolist()}, p2={self.p2[:3].tolist()}, "
            f"p3={self.p3[:3].tolist()})"
        )
