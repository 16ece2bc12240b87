"""Intersection records and the per-hit shading computations.

An ``Intersection`` is a distance along a ray plus the shape that was hit.
``hit`` selects the visible one. ``prepare_computations`` then derives
everything the shading code needs from that hit:

    point        the hit position in world space
    eyev         unit vector back toward the ray origin
    normalv      surface normal, flipped to face the eye when the ray is
                 inside the shape (``inside`` is set in that case)
    reflectv     the ray direction mirrored about the normal
    over_point   point nudged along +normal, origin for shadow and
                 reflection rays so they do not re-hit the same surface
    under_point  point nudged along -normal, origin for refraction rays
    n1, n2       refractive indices on the incoming and outgoing side

n1 and n2 come from a containment list: walking the sorted intersections,
a shape is appended when the ray enters it and removed when it leaves. The
last entry is the medium the ray is currently in (vacuum, 1.0, if empty).

Example:
    >>> xs = world.intersect(ray)
    >>> h = hit(xs)
    >>> if h is not None:
    ...     comps = prepare_computations(h, ray, xs)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Tuple4, dot, reflect

if TYPE_CHECKING:
    from src.whitted.scene.group import Group
    from src.whitted.scene.shape import Shape

# Refractive index of the space between objects
VACUUM_INDEX = 1.0


@dataclass(frozen=True)
class Intersection:
    """A ray-shape intersection.

    Attributes:
        t: Distance along the ray.
        shape: The shape that was hit.
    """

    t: float
    shape: Shape


def sort_intersections(xs: Iterable[Intersection]) -> list[Intersection]:
    """Sort intersections by ascending t (stable for equal distances)."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    The input does not need to be sorted. Only intersections strictly in
    front of the ray origin (t > 0) count; among equal distances the first
    one encountered wins.

    Returns:
        The intersection with the lowest positive t, or None.
    """
    best: Intersection | None = None
    for i in xs:
        if i.t > 0.0 and (best is None or i.t < best.t):
            best = i
    return best


@dataclass(frozen=True, eq=False)
class Computations:
    """Precomputed shading inputs for one intersection.

    See the module docstring for the meaning of each field.
    """

    t: float
    shape: Shape
    point: Tuple4
    eyev: Tuple4
    normalv: Tuple4
    inside: bool
    reflectv: Tuple4
    over_point: Tuple4
    under_point: Tuple4
    n1: float
    n2: float


def refractive_indices(target: Intersection, xs: Sequence[Intersection]) -> tuple[float, float]:
    """Find the refractive indices on either side of a hit.

    Args:
        target: The intersection being shaded.
        xs: All intersections along the ray, sorted by t.

    Returns:
        (n1, n2): the index of the medium being left and of the medium
        being entered.
    """
    n1 = n2 = VACUUM_INDEX
    containers: list[Shape] = []

    for i in xs:
        if i == target:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        if i.shape in containers:
            containers.remove(i.shape)
        else:
            containers.append(i.shape)

        if i == target:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break

    return n1, n2


def prepare_computations(
    intersection: Intersection,
    ray: Ray,
    xs: Sequence[Intersection] | None = None,
    group: Group | None = None,
) -> Computations:
    """Derive the shading inputs for an intersection.

    Args:
        intersection: The hit to shade.
        ray: The world-space ray that produced it.
        xs: Every intersection along the ray, sorted by t. Defaults to just
            the hit itself, which is enough for opaque scenes.
        group: The scene graph that holds the hit shape, if any.

    Returns:
        A Computations record for ``World.shade_hit``.
    """
    if xs is None:
        xs = [intersection]

    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = intersection.shape.normal_at(point, group)

    inside = dot(normalv, eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = refractive_indices(intersection, xs)

    return Computations(
        t=intersection.t,
        shape=intersection.shape,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        n1=n1,
        n2=n2,
    )
