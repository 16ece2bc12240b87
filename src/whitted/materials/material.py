"""Phong surface material and local illumination.

This module implements the Phong reflection model used for direct lighting.
It is deliberately non-recursive: reflection and refraction are handled by
``World``, which combines this local term with the colors of secondary rays.

Key terms:
    - Ambient: constant light scattered by the environment
    - Diffuse: light reflected from a matte surface, proportional to the
      cosine of the angle between the light and the normal
    - Specular: the highlight, proportional to the cosine between the
      reflected light and the eye raised to the shininess power

A point in shadow receives only the ambient term. Results are not clamped;
displaying colors above 1.0 is the canvas' concern.

Example:
    >>> from src.whitted.materials.material import Material, lighting
    >>> glass = Material.glass()
    >>> # color = lighting(shape, light, point, eyev, normalv, in_shadow=False)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from src.whitted.core.tuples import (
    BLACK,
    WHITE,
    Color,
    Tuple4,
    approx_equal,
    dot,
    normalize,
    reflect,
)
from src.whitted.materials.light import PointLight
from src.whitted.materials.patterns import Pattern

if TYPE_CHECKING:
    from src.whitted.scene.group import Group
    from src.whitted.scene.shape import Shape


@dataclass(eq=False)
class Material:
    """Surface appearance of a shape.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Ambient reflection coefficient (>= 0).
        diffuse: Diffuse reflection coefficient (>= 0).
        specular: Specular reflection coefficient (>= 0).
        shininess: Size of the specular highlight; larger is smaller and
            tighter (> 0).
        reflective: Fraction of light mirrored, in [0, 1].
        transparency: Fraction of light transmitted, in [0, 1].
        refractive_index: Index of refraction (>= 1). Common values:
            - Vacuum: 1.0
            - Water: 1.333
            - Glass: 1.5
            - Diamond: 2.417
        pattern: Optional pattern replacing ``color``.
    """

    color: Color = field(default_factory=lambda: WHITE.copy())
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        self.color = np.asarray(self.color, dtype=np.float64)
        for name in ("ambient", "diffuse", "specular"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.shininess <= 0.0:
            raise ValueError(f"shininess must be positive, got {self.shininess}")
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"reflective must be in [0, 1], got {self.reflective}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {self.transparency}")
        if self.refractive_index < 1.0:
            raise ValueError(f"refractive_index must be >= 1.0, got {self.refractive_index}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        scalars = (
            "ambient",
            "diffuse",
            "specular",
            "shininess",
            "reflective",
            "transparency",
            "refractive_index",
        )
        return (
            approx_equal(self.color, other.color)
            and all(getattr(self, s) == getattr(other, s) for s in scalars)
            and self.pattern is other.pattern
        )

    @classmethod
    def glass(cls, refractive_index: float = 1.5) -> Material:
        """Create a fully transparent material with glass-like refraction."""
        return cls(transparency=1.0, refractive_index=refractive_index)


def lighting(
    shape: Shape,
    light: PointLight,
    point: Tuple4,
    eyev: Tuple4,
    normalv: Tuple4,
    in_shadow: bool = False,
    group: Group | None = None,
) -> Color:
    """Compute the Phong color of a surface point lit by a point light.

    Args:
        shape: The shape being shaded; supplies the material and, for
            patterns, the transform into object space.
        light: The point light.
        point: The surface point in world space.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.
        in_shadow: Whether the light is occluded from this point.
        group: The scene graph holding the shape, if any.

    Returns:
        ambient + diffuse + specular, or only ambient when in shadow.
    """
    material = shape.material

    if material.pattern is not None:
        base_color = material.pattern.pattern_at_shape(shape, point, group)
    else:
        base_color = material.color

    # Combine surface color with the light's color/intensity
    effective_color = base_color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = normalize(light.position - point)

    # Cosine of the angle between light and normal; negative means the
    # light is on the other side of the surface
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal <= 0.0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK.copy()
    else:
        factor = math.pow(reflect_dot_eye, material.shininess)
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
