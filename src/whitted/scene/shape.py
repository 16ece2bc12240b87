"""World-space wrapper around a local-space primitive.

A ``Shape`` pairs one ``Polygon`` with a transform and a material. It moves
incoming rays into the primitive's local space and moves the primitive's
local normals back out to world space.

When the shape lives inside a scene graph (``Group``), its transform is
relative to its parent node, and the ancestors' transforms are applied on
top of it. The graph is passed in explicitly as ``group``; a shape only
remembers its own ``node_id`` and ``parent_id``.

Two shapes compare equal when they wrap the same primitive instance. The
refraction bookkeeping relies on this to recognise the object a ray is
leaving.

Example:
    >>> from src.whitted.core.transformations import scaling
    >>> from src.whitted.geometry.sphere import Sphere
    >>> from src.whitted.scene.shape import Shape
    >>> shape = Shape(Sphere(), transform=scaling(2.0, 2.0, 2.0))
    >>> # xs = shape.intersect(ray)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.transformations import Matrix, identity, invert
from src.whitted.core.tuples import Tuple4, normalize
from src.whitted.geometry.polygon import Polygon
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersection

if TYPE_CHECKING:
    from src.whitted.scene.group import Group


class Shape:
    """A primitive placed in the world with a transform and material.

    Attributes:
        polygon: The local-space primitive.
        material: The surface material.
        node_id: Id of this shape's node in a scene graph, if any.
        parent_id: Id of the parent transform node in a scene graph, if any.
    """

    def __init__(
        self,
        polygon: Polygon,
        transform: Matrix | None = None,
        material: Material | None = None,
    ) -> None:
        self.polygon = polygon
        self.material = Material() if material is None else material
        self.transform = identity() if transform is None else transform
        self.node_id: int | None = None
        self.parent_id: int | None = None

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        # Cached once here; rendering never inverts
        inverse = invert(m)
        self._transform = m
        self._inverse = inverse
        self._inverse_transpose = inverse.T

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray given in this shape's parent space.

        Args:
            ray: The ray, in world space for a flat shape or in the parent
                node's space for a shape inside a scene graph.

        Returns:
            One Intersection per local hit distance, unsorted.
        """
        local_ray = ray.transform(self._inverse)
        return [Intersection(t, self) for t in self.polygon.intersect(local_ray)]

    def world_to_object(self, point: Tuple4, group: Group | None = None) -> Tuple4:
        """Convert a world-space point into this shape's local space.

        Raises:
            ValueError: If the shape sits in a scene graph and no group is given.
        """
        if self.parent_id is not None:
            point = self._scene_graph(group).world_to_node(self.parent_id, point)
        return self._inverse @ point

    def normal_to_world(self, normal: Tuple4, group: Group | None = None) -> Tuple4:
        """Convert a local-space normal into a world-space unit normal.

        Raises:
            ValueError: If the shape sits in a scene graph and no group is given.
        """
        world_normal = self._inverse_transpose @ normal
        world_normal[3] = 0.0
        world_normal = normalize(world_normal)
        if self.parent_id is not None:
            world_normal = self._scene_graph(group).normal_from_node(self.parent_id, world_normal)
        return world_normal

    def _scene_graph(self, group: Group | None) -> Group:
        if group is None:
            raise ValueError(f"{self!r} has parent node {self.parent_id}; pass the group that holds it")
        return group

    def normal_at(self, world_point: Tuple4, group: Group | None = None) -> Tuple4:
        """Compute the world-space surface normal at a world-space point.

        Args:
            world_point: A point on the surface in world space.
            group: The scene graph containing this shape, or None for a
                shape that sits directly in the world.

        Returns:
            The unit normal vector in world space.
        """
        local_point = self.world_to_object(world_point, group)
        local_normal = self.polygon.normal_at(local_point)
        return self.normal_to_world(local_normal, group)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.polygon is other.polygon

    def __hash__(self) -> int:
        return id(self.polygon)

    def __repr__(self) -> str:
        return f"Shape({self.polygon!r}, node_id={self.node_id}, parent_id={self.parent_id})"
