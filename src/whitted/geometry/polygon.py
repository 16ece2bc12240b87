"""The local-space contract every primitive shape implements.

A polygon knows nothing about transforms, materials or the scene graph. It
answers two questions in its own unit coordinate frame:

    intersect(local_ray) -> list of parametric distances t
    normal_at(local_point) -> outward surface normal (a vector)

A ray that misses returns an empty list. Degenerate input (a zero direction,
a ray parallel to a face) is reported the same way and never raises.
``Shape`` in ``src.whitted.scene.shape`` adds the world-space wrapping.
"""

from abc import ABC, abstractmethod

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Tuple4


class Polygon(ABC):
    """Abstract primitive with local-space intersection and normals."""

    @abstractmethod
    def intersect(self, ray: Ray) -> list[float]:
        """Return the distances along a local-space ray where it hits."""

    @abstractmethod
    def normal_at(self, point: Tuple4) -> Tuple4:
        """Return the local-space normal at a point on the surface."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
