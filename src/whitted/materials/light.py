"""Point light source."""

from dataclasses import dataclass

from src.whitted.core.tuples import Color, Tuple4, approx_equal


@dataclass(eq=False)
class PointLight:
    """A light with no size, emitting equally in every direction.

    Attributes:
        position: Location of the light in world space (a point).
        intensity: Color and brightness of the light.
    """

    position: Tuple4
    intensity: Color

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return approx_equal(self.position, other.position) and approx_equal(
            self.intensity, other.intensity
        )

    def __repr__(self) -> str:
        return (
            f"PointLight(position={self.position[:3].tolist()}, "
            f"intensity={self.intensity.tolist()})"
        )
