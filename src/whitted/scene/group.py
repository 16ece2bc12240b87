"""Scene graph of nested transforms stored in an id-indexed arena.

A ``Group`` is a tree whose nodes are either a transform matrix or a
``Shape``. Nodes live in a flat list and refer to each other by integer id,
so the graph holds no parent/child object references and stays read-only
while it is shared by render workers.

Node 0 is the root and is always an identity transform. New nodes are only
ever appended; ids are stable for the lifetime of the group.

Transforms compose from the root down: a shape's world placement is

    root @ ... @ parent @ shape.transform

so a ray is moved into a child's space with the inverse of that child's
matrix before descending.

Example:
    >>> import math
    >>> from src.whitted.core.transformations import rotation_y, translation
    >>> from src.whitted.geometry.sphere import Sphere
    >>> from src.whitted.scene.group import Group
    >>> from src.whitted.scene.shape import Shape
    >>> group = Group()
    >>> arm = group.add_matrix(rotation_y(math.pi / 2))
    >>> group.add_node(Shape(Sphere(), translation(5.0, 0.0, 0.0)), parent_id=arm)
    2
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from src.whitted.core.ray import Ray
from src.whitted.core.transformations import Matrix, identity, invert
from src.whitted.core.tuples import Tuple4, normalize
from src.whitted.scene.intersection import Intersection
from src.whitted.scene.shape import Shape

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TransformNode:
    """A node that transforms everything below it.

    Attributes:
        matrix: The node's transform relative to its parent.
        inverse: Cached inverse of ``matrix``.
    """

    matrix: Matrix
    inverse: Matrix


@dataclass(eq=False)
class Node:
    """An arena slot.

    Attributes:
        id: The node's index in the arena.
        payload: Either a TransformNode or a Shape.
        parent_id: The parent node id, None only for the root.
        children: Ids of child nodes in insertion order.
    """

    id: int
    payload: TransformNode | Shape
    parent_id: int | None
    children: list[int] = field(default_factory=list)


class Group:
    """Arena-backed scene graph of transforms and shapes."""

    ROOT_ID = 0

    def __init__(self) -> None:
        root = TransformNode(matrix=identity(), inverse=identity())
        self._nodes: list[Node] = [Node(id=self.ROOT_ID, payload=root, parent_id=None)]

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, node_id: int) -> Node:
        """Look up a node by id.

        Raises:
            KeyError: If no node has this id.
        """
        if not 0 <= node_id < len(self._nodes):
            raise KeyError(f"Unknown scene graph node: {node_id}")
        return self._nodes[node_id]

    def children(self, node_id: int) -> list[int]:
        return list(self.node(node_id).children)

    def _append(self, payload: TransformNode | Shape, parent_id: int) -> int:
        parent = self.node(parent_id)
        if not isinstance(parent.payload, TransformNode):
            raise ValueError(f"Node {parent_id} is a shape and cannot have children")

        node_id = len(self._nodes)
        self._nodes.append(Node(id=node_id, payload=payload, parent_id=parent_id))
        parent.children.append(node_id)
        return node_id

    def add_matrix(self, matrix: Matrix, parent_id: int = ROOT_ID) -> int:
        """Add a transform node.

        Args:
            matrix: Transform relative to the parent node.
            parent_id: Id of an existing transform node.

        Returns:
            The id of the new node.

        Raises:
            KeyError: If the parent does not exist.
            ValueError: If the parent is a shape.
            NonInvertibleTransformError: If the matrix is singular.
        """
        node_id = self._append(TransformNode(matrix=matrix, inverse=invert(matrix)), parent_id)
        logger.debug("Added transform node %d under %d", node_id, parent_id)
        return node_id

    def add_node(self, shape: Shape, parent_id: int = ROOT_ID) -> int:
        """Add a shape node and record its position on the shape.

        Args:
            shape: The shape to insert. Its transform is relative to the
                parent node.
            parent_id: Id of an existing transform node.

        Returns:
            The id of the new node.

        Raises:
            KeyError: If the parent does not exist.
            ValueError: If the parent is a shape.
        """
        node_id = self._append(shape, parent_id)
        shape.node_id = node_id
        shape.parent_id = parent_id
        logger.debug("Added %r as node %d under %d", shape.polygon, node_id, parent_id)
        return node_id

    def shapes(self) -> Iterator[Shape]:
        """Iterate over every shape in the graph in insertion order."""
        for node in self._nodes:
            if isinstance(node.payload, Shape):
                yield node.payload

    def intersect(self, ray: Ray, node_id: int = ROOT_ID) -> list[Intersection]:
        """Intersect a ray with everything below a node.

        Args:
            ray: The ray, expressed in the space of ``node_id``.
            node_id: The node whose children are tested.

        Returns:
            The concatenated, unsorted intersections of all descendants.
        """
        xs: list[Intersection] = []
        for child_id in self._nodes[node_id].children:
            payload = self._nodes[child_id].payload
            if isinstance(payload, TransformNode):
                xs.extend(self.intersect(ray.transform(payload.inverse), child_id))
            else:
                xs.extend(payload.intersect(ray))
        return xs

    def _transform_chain(self, node_id: int) -> list[TransformNode]:
        """Transform nodes from ``node_id`` up to and including the root."""
        chain = []
        current: int | None = node_id
        while current is not None:
            node = self.node(current)
            if isinstance(node.payload, TransformNode):
                chain.append(node.payload)
            current = node.parent_id
        return chain

    def world_to_node(self, node_id: int, point: Tuple4) -> Tuple4:
        """Convert a world-space point into the space of a transform node."""
        for transform in reversed(self._transform_chain(node_id)):
            point = transform.inverse @ point
        return point

    def normal_from_node(self, node_id: int, normal: Tuple4) -> Tuple4:
        """Convert a normal in a transform node's space out to world space.

        The normal is re-normalized after every ancestor so it stays a unit
        direction under non-uniform scaling.
        """
        for transform in self._transform_chain(node_id):
            normal = transform.inverse.T @ normal
            normal[3] = 0.0
            normal = normalize(normal)
        return normal

    def __repr__(self) -> str:
        return f"Group(nodes={len(self._nodes)})"
