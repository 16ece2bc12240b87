"""Camera module.

Components:
    camera: Pinhole camera with per-pixel ray generation and parallel render
"""

from .camera import Camera

__all__ = ["Camera"]
