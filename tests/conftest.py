"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Only the canvas uses Taichi fields, but ti.init() must run before any
    field is allocated and must not run twice.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture(autouse=True)
def clear_render_env(monkeypatch):
    """Remove WHITTED_* variables so config defaults are deterministic."""
    for name in ("WHITTED_MAX_DEPTH", "WHITTED_WORKERS", "WHITTED_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_world():
    """The reference two-sphere world."""
    from src.whitted.scene.world import default_world as build

    return build()


@pytest.fixture
def glass_sphere():
    """Factory for glass spheres with an optional transform and index."""
    from src.whitted.geometry.sphere import Sphere
    from src.whitted.materials.material import Material
    from src.whitted.scene.shape import Shape

    def _make(transform=None, refractive_index=1.5):
        return Shape(Sphere(), transform, Material.glass(refractive_index))

    return _make
