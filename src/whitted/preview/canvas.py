"""Pixel buffer for rendered images, stored in a Taichi field.

The canvas is indexed ``[x, y]`` with (0, 0) at the top-left corner, the
same orientation the camera uses for ``ray_for_pixel``. Colors are linear
RGB and may exceed 1.0; they are only clamped when the canvas is
quantized for export.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.whitted.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, (1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    array([1., 0., 0.])
"""

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt
import taichi as ti

# =============================================================================
# Kernels
# =============================================================================


@ti.kernel
def _quantize(pixels: ti.template(), out: ti.types.ndarray()):
    """Clamp every channel to [0, 1] and scale to 0..255.

    Writes into ``out`` with shape (height, width, 3).
    """
    for x, y in pixels:
        for c in ti.static(range(3)):
            v = ti.min(ti.max(pixels[x, y][c], 0.0), 1.0)
            out[y, x, c] = ti.cast(v * 255.0 + 0.5, ti.i32)


# =============================================================================
# Canvas
# =============================================================================


class Canvas:
    """A width x height grid of RGB colors, initially black.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black canvas.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._pixels.fill(0.0)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, rgb: Sequence[float]) -> None:
        """Set one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = [float(rgb[0]), float(rgb[1]), float(rgb[2])]

    def pixel_at(self, x: int, y: int) -> npt.NDArray[np.float64]:
        """Read one pixel as a length-3 float64 array.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        return np.asarray(self._pixels[x, y].to_numpy(), dtype=np.float64)

    def write_image(self, image: npt.NDArray[np.floating]) -> None:
        """Replace every pixel from an array of shape (height, width, 3).

        Raises:
            ValueError: If the array shape does not match the canvas.
        """
        image = np.asarray(image)
        if image.shape != (self.height, self.width, 3):
            raise ValueError(
                f"Image shape {image.shape} does not match canvas "
                f"({self.height}, {self.width}, 3)"
            )
        # Taichi field is (width, height); images are (height, width)
        self._pixels.from_numpy(np.ascontiguousarray(np.transpose(image, (1, 0, 2)), dtype=np.float32))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Linear colors as an array of shape (height, width, 3)."""
        return np.ascontiguousarray(np.transpose(self._pixels.to_numpy(), (1, 0, 2)))

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Colors clamped to [0, 1] and scaled to 8 bits, shape (height, width, 3)."""
        out = np.zeros((self.height, self.width, 3), dtype=np.int32)
        _quantize(self._pixels, out)
        return out.astype(np.uint8)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
