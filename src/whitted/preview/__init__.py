"""Preview module for render output.

Components:
    canvas: Taichi-backed pixel buffer
    export: PNG (Pillow) and plain PPM writers

Example:
    >>> from src.whitted.preview import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from .canvas import Canvas
from .export import canvas_to_ppm, save_png, save_ppm

__all__ = [
    "Canvas",
    "canvas_to_ppm",
    "save_png",
    "save_ppm",
]
