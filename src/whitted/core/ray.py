"""Ray data structure for CPU ray tracing.

A ray is an origin point and a direction vector, both homogeneous NumPy
tuples. Rays are immutable: ``transform`` returns a new ray, which is how
world-space rays are moved into the local space of shapes and scene-graph
nodes.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> ray = Ray(origin=point(0.0, 0.0, -5.0), direction=vector(0.0, 0.0, 1.0))
    >>> ray.position(5.0)  # Point 5 units along the ray
    array([0., 0., 0., 1.])
"""

from dataclasses import dataclass

from src.whitted.core.transformations import Matrix
from src.whitted.core.tuples import Tuple4


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            normalized; transformed rays usually are not, and intersection
            distances stay valid in world space because of that.
    """

    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        """Return this ray multiplied by a transformation matrix."""
        return Ray(origin=m @ self.origin, direction=m @ self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin[:3].tolist()}, direction={self.direction[:3].tolist()})"
