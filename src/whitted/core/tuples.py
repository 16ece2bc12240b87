"""Points, vectors and colors as NumPy arrays.

Points and vectors are homogeneous 4-component float64 arrays (w=1 for
points, w=0 for vectors) so they can be multiplied directly by the 4x4
transformation matrices in ``transformations``. Colors are plain RGB
3-component arrays; the Hadamard product is NumPy's ``*``.

Example:
    >>> from src.whitted.core.tuples import point, vector, reflect
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(1.0, -1.0, 0.0)
    >>> reflect(v, vector(0.0, 1.0, 0.0))
    array([1., 1., 0., 0.])
"""

import numpy as np
import numpy.typing as npt

Tuple4 = npt.NDArray[np.float64]
Color = npt.NDArray[np.float64]

# Comparison tolerance and surface offset for secondary rays
EPSILON = 1e-5


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return np.array([x, y, z, 1.0], dtype=np.float64)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return np.array([x, y, z, 0.0], dtype=np.float64)


def color(r: float, g: float, b: float) -> Color:
    """Create an RGB color."""
    return np.array([r, g, b], dtype=np.float64)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
BLACK.flags.writeable = False
WHITE.flags.writeable = False


def is_point(t: Tuple4) -> bool:
    return bool(t[3] == 1.0)


def is_vector(t: Tuple4) -> bool:
    return bool(t[3] == 0.0)


def magnitude(v: Tuple4) -> float:
    """Compute the Euclidean length of a vector."""
    return float(np.sqrt(np.dot(v, v)))


def normalize(v: Tuple4) -> Tuple4:
    """Scale a vector to unit length.

    A zero-length vector is returned unchanged instead of producing NaNs.
    """
    length = magnitude(v)
    if length == 0.0:
        return v.copy()
    return v / length


def dot(a: Tuple4, b: Tuple4) -> float:
    return float(np.dot(a, b))


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    """Cross product of the xyz parts of two vectors (result has w = 0)."""
    x, y, z = np.cross(a[:3], b[:3])
    return vector(x, y, z)


def reflect(incident: Tuple4, normal: Tuple4) -> Tuple4:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector.
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction ``incident - 2 * (incident . normal) * normal``.
    """
    return incident - normal * 2.0 * dot(incident, normal)


def approx_equal(a: npt.ArrayLike, b: npt.ArrayLike, eps: float = EPSILON) -> bool:
    """Component-wise comparison within an absolute tolerance."""
    return bool(np.allclose(a, b, rtol=0.0, atol=eps))
