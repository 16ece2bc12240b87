"""4x4 transformation matrices for placing shapes, patterns and cameras.

All builders return float64 NumPy arrays that act on the homogeneous
tuples from ``tuples``. Rotations take radians and follow the left-handed
convention used throughout the renderer.

Matrices are composed right to left (``A @ B`` applies ``B`` first). The
``chain`` helper takes them in the order they should be applied, which
reads more naturally when building scenes:

    >>> m = chain(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))

Inversion of a singular matrix raises ``NonInvertibleTransformError``.
Callers invert once when a transform is assigned, so a bad scene fails
while it is being built rather than in the middle of a render.
"""

import math

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import Tuple4, cross, normalize

Matrix = npt.NDArray[np.float64]

# Determinants smaller than this are treated as singular
SINGULAR_DETERMINANT = 1e-12


class NonInvertibleTransformError(ValueError):
    """Raised when a transformation matrix has no inverse."""


def identity() -> Matrix:
    return np.identity(4, dtype=np.float64)


def translation(x: float, y: float, z: float) -> Matrix:
    m = identity()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix:
    return np.diag([x, y, z, 1.0]).astype(np.float64)


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c
    return m


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c
    return m


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Build a shearing matrix.

    Each argument moves one component in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    m = identity()
    m[0, 1] = xy
    m[0, 2] = xz
    m[1, 0] = yx
    m[1, 2] = yz
    m[2, 0] = zx
    m[2, 1] = zy
    return m


def view_transform(from_point: Tuple4, to_point: Tuple4, up: Tuple4) -> Matrix:
    """Build the world-to-camera matrix for an eye looking at a target.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction; it need not be perpendicular to the
            view direction.

    Returns:
        The orientation matrix multiplied by a translation moving the eye
        to the origin.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.array(
        [
            [left[0], left[1], left[2], 0.0],
            [true_up[0], true_up[1], true_up[2], 0.0],
            [-forward[0], -forward[1], -forward[2], 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])


def chain(*matrices: Matrix) -> Matrix:
    """Compose matrices so that the first argument is applied first."""
    result = identity()
    for m in matrices:
        result = m @ result
    return result


def is_invertible(m: Matrix) -> bool:
    return abs(float(np.linalg.det(m))) >= SINGULAR_DETERMINANT


def invert(m: Matrix) -> Matrix:
    """Invert a transformation matrix.

    Raises:
        NonInvertibleTransformError: If the matrix is singular.
    """
    if not is_invertible(m):
        raise NonInvertibleTransformError(f"Matrix is not invertible:\n{m}")
    return np.linalg.inv(m)
