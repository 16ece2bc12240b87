"""Scene module for shapes, the scene graph and shading.

Components:
    intersection: Intersection records, hit selection and Computations
    shape: Shape (primitive + transform + material)
    group: Arena-backed scene graph of transforms and shapes
    world: World container and recursive Whitted shading
    scenarios: Named demonstration scenes
"""

from .intersection import Computations, Intersection, hit, prepare_computations, sort_intersections
from .shape import Shape
from .group import Group, Node, TransformNode
from .world import World, default_world, schlick
from .scenarios import SCENARIOS, Scenario, get_scenario, list_scenarios

__all__ = [
    # Intersection module
    "Intersection",
    "Computations",
    "hit",
    "prepare_computations",
    "sort_intersections",
    # Shape and group modules
    "Shape",
    "Group",
    "Node",
    "TransformNode",
    # World module
    "World",
    "default_world",
    "schlick",
    # Scenarios module
    "Scenario",
    "SCENARIOS",
    "get_scenario",
    "list_scenarios",
]
