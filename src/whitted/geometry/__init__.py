"""Geometry module for local-space primitives.

Components:
    polygon: The Polygon interface (intersect + normal_at)
    sphere: Unit sphere at the origin
    plane: The xz plane
    cube: Axis-aligned cube spanning [-1, 1]
    cylinder: Unit-radius cylinder around y, optionally truncated and capped
    triangle: Flat triangle (Moller-Trumbore)

Every primitive works in its own object space; the Shape wrapper moves
rays in and normals out:
    ts = polygon.intersect(local_ray)
    n = polygon.normal_at(local_point)
"""

from .cube import Cube
from .cylinder import Cylinder
from .plane import Plane
from .polygon import Polygon
from .sphere import Sphere
from .triangle import Triangle

__all__ = [
    "Polygon",
    "Sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Triangle",
]
