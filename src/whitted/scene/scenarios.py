"""Ready-made demonstration scenes.

Each scenario bundles a lit ``World`` with the view it was composed for:

- "Three Spheres": a checkered floor with three spheres in the scene graph
- "Hexagon": six rotated arms, each a sphere corner joined by a truncated
  cylinder edge, exercising nested scene-graph transforms
- "Transparent Cube": a glass-like cube floating over a ring-patterned floor

Example:
    >>> from src.whitted.scene.scenarios import get_scenario, list_scenarios
    >>> list_scenarios()
    ['Hexagon', 'Three Spheres', 'Transparent Cube']
    >>> scenario = get_scenario("Hexagon")
    >>> camera = scenario.camera(400, 200, math.pi / 2)
    >>> # canvas = camera.render(scenario.world)
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from src.whitted.camera.camera import Camera
from src.whitted.core.transformations import (
    chain,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from src.whitted.core.tuples import BLACK, WHITE, color, point, vector
from src.whitted.geometry.cube import Cube
from src.whitted.geometry.cylinder import Cylinder
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.light import PointLight
from src.whitted.materials.material import Material
from src.whitted.materials.patterns import CheckerPattern, RingPattern
from src.whitted.scene.group import Group
from src.whitted.scene.shape import Shape
from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]


@dataclass
class Scenario:
    """A named world plus the camera placement it was designed for.

    Attributes:
        name: Display name, also the registry key.
        world: The lit world.
        view_from: Eye position.
        view_to: Point the eye looks at.
        view_up: Up direction.
    """

    name: str
    world: World
    view_from: Vec3 = (0.0, 1.5, -5.0)
    view_to: Vec3 = (0.0, 1.0, 0.0)
    view_up: Vec3 = (0.0, 1.0, 0.0)

    def camera(self, hsize: int, vsize: int, field_of_view: float = math.pi / 3) -> Camera:
        """Create a camera of the given size looking at the scene."""
        transform = view_transform(point(*self.view_from), point(*self.view_to), vector(*self.view_up))
        return Camera(hsize, vsize, field_of_view, transform)


def _floor(pattern_kind: type) -> Shape:
    pattern = pattern_kind(WHITE, BLACK)
    material = Material(color=color(1.0, 0.9, 0.9), specular=0.0, pattern=pattern)
    return Shape(Plane(), material=material)


def _matte(r: float, g: float, b: float) -> Material:
    return Material(color=color(r, g, b), diffuse=0.7, specular=0.3)


def create_three_spheres_scene() -> Scenario:
    """Three differently sized spheres standing on a checkered floor."""
    world = World(PointLight(position=point(-10.0, 10.0, -10.0), intensity=WHITE.copy()))
    world.add_shape(_floor(CheckerPattern))

    middle = Shape(Sphere(), translation(-0.5, 1.0, 0.5), _matte(0.1, 1.0, 0.5))
    right = Shape(
        Sphere(),
        chain(scaling(0.5, 0.5, 0.5), translation(1.5, 0.5, -0.5)),
        _matte(0.5, 1.0, 0.1),
    )
    left = Shape(
        Sphere(),
        chain(scaling(0.33, 0.33, 0.33), translation(-1.5, 0.33, -0.75)),
        _matte(1.0, 0.8, 0.1),
    )
    for shape in (left, middle, right):
        world.group.add_node(shape)

    return Scenario(name="Three Spheres", world=world)


def _hexagon_corner() -> Shape:
    return Shape(Sphere(), chain(scaling(0.25, 0.25, 0.25), translation(0.0, 0.0, -1.0)))


def _hexagon_edge() -> Shape:
    edge = Cylinder(minimum=0.0, maximum=1.0)
    transform = chain(
        scaling(0.25, 1.0, 0.25),
        rotation_z(-math.pi / 2),
        rotation_y(-math.pi / 6),
        translation(0.0, 0.0, -1.0),
    )
    return Shape(edge, transform)


def _hexagon_side(group: Group, parent_id: int, n: int) -> None:
    side_id = group.add_matrix(rotation_y(n * math.pi / 3), parent_id)
    group.add_node(_hexagon_corner(), side_id)
    group.add_node(_hexagon_edge(), side_id)


def create_hexagon_scene() -> Scenario:
    """A hexagon of spheres and cylinders built from nested transforms."""
    world = World(PointLight(position=point(-5.0, 10.0, -10.0), intensity=WHITE.copy()))

    hexagon_id = world.group.add_matrix(chain(rotation_y(math.pi / 6), translation(0.0, 1.0, 0.0)))
    for n in range(6):
        _hexagon_side(world.group, hexagon_id, n)

    return Scenario(name="Hexagon", world=world)


def create_transparent_cube_scene() -> Scenario:
    """A see-through cube hovering above a ring-patterned floor."""
    world = World(PointLight(position=point(-10.0, 10.0, -10.0), intensity=WHITE.copy()))
    world.add_shape(_floor(RingPattern))

    material = Material(
        color=color(0.1, 1.0, 0.5),
        diffuse=0.7,
        specular=0.3,
        reflective=0.1,
        transparency=0.6,
        refractive_index=1.5,
    )
    cube = Shape(Cube(), chain(scaling(0.75, 0.75, 0.75), translation(-0.5, 1.0, 0.5)), material)
    world.group.add_node(cube)

    return Scenario(name="Transparent Cube", world=world)


SCENARIOS: dict[str, Callable[[], Scenario]] = {
    "Hexagon": create_hexagon_scene,
    "Three Spheres": create_three_spheres_scene,
    "Transparent Cube": create_transparent_cube_scene,
}


def list_scenarios() -> list[str]:
    """Names of all registered scenarios, sorted."""
    return sorted(SCENARIOS)


def get_scenario(name: str) -> Scenario:
    """Build a scenario by name.

    Raises:
        KeyError: If no scenario has this name.
    """
    try:
        builder = SCENARIOS[name]
    except KeyError:
        raise KeyError(f"Unknown scenario {name!r}; choose from {list_scenarios()}") from None

    scenario = builder()
    logger.info("Built scenario %r with %d shapes", name, sum(1 for _ in scenario.world.shapes()))
    return scenario
