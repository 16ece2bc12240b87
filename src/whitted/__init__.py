"""Whitted-style recursive ray tracer.

Renders scenes of analytic primitives with Phong lighting, hard shadows,
mirror reflection and refraction through transparent media:
- Primitives (sphere, plane, cube, cylinder, triangle) in local space
- Shapes placing primitives in the world, optionally via a scene graph
- Procedural patterns and Phong materials
- Parallel per-row rendering into a Taichi pixel buffer

Subpackages:
    core: Points/vectors/colors, 4x4 transforms and rays
    geometry: Local-space primitives and their intersection algorithms
    materials: Materials, the Phong lighting model, patterns and lights
    scene: Shapes, the scene graph, intersections, the world and scenarios
    camera: Pinhole camera and the render loop
    preview: Canvas and PNG/PPM export
"""

__version__ = "0.1.0"
