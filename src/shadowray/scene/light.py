"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from src.shadowray.core.vector import Vector3


@dataclass(eq=False)
class Light:
    """A point light with a scalar intensity.

    Lights are mutable: callers may move a light or change its intensity
    between renders, and the next render picks the new values up. Two lights
    are only equal if they are the same object.

    Attributes:
        position: Position of the light in world space.
        intensity: Scalar brightness multiplier, typically in [0, 3].
    """

    position: Vector3
    intensity: float

    def copy(self) -> Light:
        """Return an independent copy of this light."""
        return Light(
            position=Vector3(self.position.x, self.position.y, self.position.z),
            intensity=self.intensity,
        )
