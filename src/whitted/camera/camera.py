"""Pinhole camera that turns a world into a canvas.

The camera sits at the origin of its own space looking down -z, with a
virtual canvas one unit in front of it. ``transform`` is the view
transform (world -> camera); its inverse is cached on assignment and used
to move each pixel's ray into world space.

Rendering splits rows across a process pool. Workers return finished rows
as NumPy arrays; the parent writes them into one buffer, which is then
copied into the Taichi canvas in one bulk write.

Example:
    >>> import math
    >>> from src.whitted.camera.camera import Camera
    >>> from src.whitted.core.transformations import view_transform
    >>> from src.whitted.core.tuples import point, vector
    >>> camera = Camera(
    ...     160, 120, math.pi / 2,
    ...     view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
    ... )
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
import multiprocessing
import time
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from src.whitted.config import RenderConfig
from src.whitted.core.ray import Ray
from src.whitted.core.transformations import Matrix, identity, invert
from src.whitted.core.tuples import normalize, point
from src.whitted.preview.canvas import Canvas

if TYPE_CHECKING:
    from src.whitted.scene.world import World

logger = logging.getLogger(__name__)


class Camera:
    """Maps canvas pixels to world-space rays.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle in radians spanned by the longer canvas side.
        half_width: Half the canvas width, one unit in front of the camera.
        half_height: Half the canvas height, one unit in front of the camera.
        pixel_size: Side length of one pixel on that canvas.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        """Create a camera.

        Raises:
            ValueError: If a size is not positive or the field of view is
                outside (0, pi).
            NonInvertibleTransformError: If the transform is singular.
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = identity() if transform is None else transform

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width, self.half_height = half_view, half_view / aspect
        else:
            self.half_width, self.half_height = half_view * aspect, half_view
        self.pixel_size = self.half_width * 2.0 / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        inverse = invert(m)
        self._transform = m
        self._inverse = inverse
        self._origin = inverse @ point(0.0, 0.0, 0.0)

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """Build the world-space ray through the center of a pixel."""
        # Offset from the canvas edge to the pixel's center
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        return Ray(origin=self._origin.copy(), direction=normalize(pixel - self._origin))

    def _render_row(self, world: World, y: int, max_depth: int) -> npt.NDArray[np.float64]:
        row = np.zeros((self.hsize, 3), dtype=np.float64)
        for x in range(self.hsize):
            row[x] = world.color_at(self.ray_for_pixel(x, y), max_depth)
        return row

    def render(
        self,
        world: World,
        max_depth: int | None = None,
        workers: int | None = None,
    ) -> Canvas:
        """Render the world into a new canvas.

        With more than one worker, rows are traced in a pool of spawned
        processes. Each process receives the camera and a pickled copy of
        the world once, through the pool initializer, and sends back
        finished rows.

        Args:
            world: The scene to render. Every shape, material and pattern in
                it must be picklable when ``workers`` is above 1.
            max_depth: Recursion budget for reflection and refraction.
                Defaults to ``RenderConfig.max_depth``.
            workers: Number of processes tracing rows. Defaults to
                ``RenderConfig.workers``; 1 renders in the calling process.

        Returns:
            A Canvas of size hsize x vsize.
        """
        if max_depth is None or workers is None:
            config = RenderConfig.from_env()
            max_depth = config.max_depth if max_depth is None else max_depth
            workers = config.workers if workers is None else workers

        logger.info(
            "Rendering %dx%d with max_depth=%d on %d worker(s)",
            self.hsize,
            self.vsize,
            max_depth,
            workers,
        )
        start = time.perf_counter()

        image = np.zeros((self.vsize, self.hsize, 3), dtype=np.float64)
        if workers <= 1:
            for y in range(self.vsize):
                image[y] = self._render_row(world, y, max_depth)
        else:
            # Spawned, not forked, so workers never inherit the Taichi runtime
            context = multiprocessing.get_context("spawn")
            init_args = (self, world, max_depth)
            with context.Pool(processes=workers, initializer=_init_worker, initargs=init_args) as pool:
                for y, row in pool.imap_unordered(_render_row_in_worker, range(self.vsize)):
                    image[y] = row

        canvas = Canvas(self.hsize, self.vsize)
        canvas.write_image(image)

        logger.info("Rendered %d pixels in %.2fs", self.hsize * self.vsize, time.perf_counter() - start)
        return canvas

    def __repr__(self) -> str:
        return f"Camera(hsize={self.hsize}, vsize={self.vsize}, field_of_view={self.field_of_view:.4f})"


# Per-process render state, filled once by the pool initializer
_worker_state: dict = {}


def _init_worker(camera: Camera, world: World, max_depth: int) -> None:
    _worker_state["camera"] = camera
    _worker_state["world"] = world
    _worker_state["max_depth"] = max_depth


def _render_row_in_worker(y: int) -> tuple[int, npt.NDArray[np.float64]]:
    camera = _worker_state["camera"]
    return y, camera._render_row(_worker_state["world"], y, _worker_state["max_depth"])
