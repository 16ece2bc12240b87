"""Core math for the ray tracer.

Components:
    tuples: Points, vectors and colors as NumPy arrays, plus vector ops
    transformations: 4x4 transform builders and cached inversion
    ray: Ray data structure
"""

from .ray import Ray
from .transformations import (
    NonInvertibleTransformError,
    chain,
    identity,
    invert,
    is_invertible,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import (
    BLACK,
    EPSILON,
    WHITE,
    approx_equal,
    color,
    cross,
    dot,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)

__all__ = [
    # Ray module
    "Ray",
    # Transformations module
    "NonInvertibleTransformError",
    "chain",
    "identity",
    "invert",
    "is_invertible",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scaling",
    "shearing",
    "translation",
    "view_transform",
    # Tuples module
    "BLACK",
    "EPSILON",
    "WHITE",
    "approx_equal",
    "color",
    "cross",
    "dot",
    "magnitude",
    "normalize",
    "point",
    "reflect",
    "vector",
]
