"""World container and Whitted-style recursive shading.

The world owns a single point light, a flat list of shapes and a scene
graph. ``color_at`` is the entry point for a camera ray:

    color_at(ray, remaining)
      -> hit? no  -> background (black)
      -> yes      -> prepare_computations -> shade_hit(comps, remaining)

    shade_hit = lighting(over_point shadow test)
              + reflected_color(comps, remaining)
              + refracted_color(comps, remaining)

Reflection and refraction call back into ``color_at`` with
``remaining - 1``. Once ``remaining`` reaches 0 they return black, which is
what stops two facing mirrors from recursing forever. When a surface is
both reflective and transparent the two contributions are weighted by the
Schlick approximation of the Fresnel reflectance instead of being summed.

The world is read-only during a render; every method here is safe to call
from several threads or render processes at once.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.scene.world import default_world
    >>> world = default_world()
    >>> world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    array([0.38066119, 0.47582649, 0.2854959 ])
"""

import math
from typing import Iterator

from src.whitted.core.ray import Ray
from src.whitted.core.transformations import scaling
from src.whitted.core.tuples import BLACK, Color, Tuple4, color, dot, magnitude, normalize, point
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.light import PointLight
from src.whitted.materials.material import Material, lighting
from src.whitted.scene.group import Group
from src.whitted.scene.intersection import (
    Computations,
    Intersection,
    hit,
    prepare_computations,
    sort_intersections,
)
from src.whitted.scene.shape import Shape

# Recursion budget for reflection/refraction when the caller gives none
MAX_DEPTH = 5

# Coefficients below this contribute nothing worth tracing
MIN_CONTRIBUTION = 1e-6

# Color returned by rays that hit nothing
BACKGROUND_COLOR = BLACK


def schlick(comps: Computations) -> float:
    """Approximate the Fresnel reflectance at a hit.

    Args:
        comps: The shading computations; uses eyev, normalv, n1 and n2.

    Returns:
        The fraction of light reflected, in [0, 1]. Returns 1.0 under total
        internal reflection.
    """
    cos = dot(comps.eyev, comps.normalv)

    # Total internal reflection can only occur if n1 > n2
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        # When n1 > n2, use cos(theta_t) instead
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5


class World:
    """A light, a flat list of shapes and a scene graph.

    Attributes:
        light: The single point light, or None for an unlit world.
        objects: Shapes placed directly in world space.
        group: The scene graph; its root is an identity transform.
    """

    def __init__(self, light: PointLight | None = None) -> None:
        self.light = light
        self.objects: list[Shape] = []
        self.group = Group()

    def add_shape(self, *shapes: Shape) -> None:
        """Add shapes directly to world space (outside the scene graph)."""
        self.objects.extend(shapes)

    def shapes(self) -> Iterator[Shape]:
        """Iterate over every shape, flat ones first."""
        yield from self.objects
        yield from self.group.shapes()

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with everything in the world.

        Returns:
            All intersections, sorted by ascending t.
        """
        xs: list[Intersection] = []
        for shape in self.objects:
            xs.extend(shape.intersect(ray))
        xs.extend(self.group.intersect(ray, Group.ROOT_ID))
        return sort_intersections(xs)

    def is_shadowed(self, world_point: Tuple4) -> bool:
        """Check whether anything lies between a point and the light.

        A world without a light has nothing to be lit by, so every point
        counts as shadowed.
        """
        if self.light is None:
            return True

        to_light = self.light.position - world_point
        distance = magnitude(to_light)
        ray = Ray(origin=world_point, direction=normalize(to_light))

        h = hit(self.intersect(ray))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        """Compute the color at a prepared hit.

        Args:
            comps: The shading computations.
            remaining: Recursion budget left for secondary rays.

        Returns:
            Local lighting plus reflected and refracted contributions.
        """
        if self.light is None:
            surface = BLACK.copy()
        else:
            surface = lighting(
                comps.shape,
                self.light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                self.is_shadowed(comps.over_point),
                self._group_of(comps.shape),
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        material = comps.shape.material
        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)

        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = MAX_DEPTH) -> Color:
        """Trace a ray and return the color it sees."""
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BACKGROUND_COLOR.copy()

        comps = prepare_computations(h, ray, xs, self._group_of(h.shape))
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        """Color arriving along the reflection vector, scaled by reflectivity."""
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective < MIN_CONTRIBUTION:
            return BLACK.copy()

        reflect_ray = Ray(origin=comps.over_point, direction=comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        """Color arriving through the surface, scaled by transparency.

        Uses Snell's law with n1/n2 to bend the eye vector. Total internal
        reflection yields black.
        """
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency < MIN_CONTRIBUTION:
            return BLACK.copy()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK.copy()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(origin=comps.under_point, direction=direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def _group_of(self, shape: Shape) -> Group | None:
        return self.group if shape.parent_id is not None else None

    def __repr__(self) -> str:
        return f"World(light={self.light!r}, objects={len(self.objects)}, group={self.group!r})"


def default_world() -> World:
    """Build the reference two-sphere world.

    An outer unit sphere (color (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2)
    surrounds an inner sphere scaled by 0.5, lit by a white light at
    (-10, 10, -10).
    """
    light = PointLight(position=point(-10.0, 10.0, -10.0), intensity=color(1.0, 1.0, 1.0))
    world = World(light)

    outer = Shape(
        Sphere(),
        material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = Shape(Sphere(), transform=scaling(0.5, 0.5, 0.5))
    world.add_shape(outer, inner)
    return world
