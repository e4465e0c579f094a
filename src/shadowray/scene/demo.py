"""Demo scene and live light settings.

This module provides a factory for the standard demo scene and a small
settings object for driving its light between renders.

The demo scene consists of:
- A red sphere of radius 2 at the origin
- A green sphere to the right, a blue sphere to the left
- A small yellow sphere up and behind
- A grey floor plane at y = -2 and a blue-grey back wall at z = -10
- One point light at (2, 5, 2) with intensity 1.5

Example:
    >>> from src.shadowray.core.renderer import Renderer
    >>> from src.shadowray.scene.demo import LightSettings, create_demo_scene
    >>>
    >>> scene, light = create_demo_scene()
    >>> renderer = Renderer(scene)
    >>> settings = LightSettings(x=-3.0, intensity=2.0)
    >>> settings.apply(light)
    >>> buffer = renderer.render(64, 48)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.shadowray.core.vector import Vector3
from src.shadowray.geometry.plane import Plane
from src.shadowray.geometry.sphere import Sphere
from src.shadowray.scene.light import Light
from src.shadowray.scene.scene import Scene

# =============================================================================
# Light Defaults
# =============================================================================

DEFAULT_LIGHT_POSITION = (2.0, 5.0, 2.0)
DEFAULT_LIGHT_INTENSITY = 1.5


@dataclass
class LightSettings:
    """Position and intensity values to write into a live light.

    Holds the values a user adjusts between renders. Nothing changes in the
    scene until ``apply`` is called; the renderer reads the light at the
    start of the next render.

    Attributes:
        x: Light x position.
        y: Light y position.
        z: Light z position.
        intensity: Light intensity, typically in [0, 3].

    Example:
        >>> settings = LightSettings()
        >>> (settings.x, settings.y, settings.z, settings.intensity)
        (2.0, 5.0, 2.0, 1.5)
    """

    x: float = DEFAULT_LIGHT_POSITION[0]
    y: float = DEFAULT_LIGHT_POSITION[1]
    z: float = DEFAULT_LIGHT_POSITION[2]
    intensity: float = DEFAULT_LIGHT_INTENSITY

    def apply(self, light: Light) -> None:
        """Write these settings into ``light`` in place."""
        light.position = Vector3(self.x, self.y, self.z)
        light.intensity = self.intensity

    def reset(self) -> None:
        """Restore the default light position and intensity."""
        self.x, self.y, self.z = DEFAULT_LIGHT_POSITION
        self.intensity = DEFAULT_LIGHT_INTENSITY

    @classmethod
    def from_light(cls, light: Light) -> LightSettings:
        """Read the current state of a light."""
        return cls(
            x=light.position.x,
            y=light.position.y,
            z=light.position.z,
            intensity=light.intensity,
        )


def format_light_position(light: Light) -> str:
    """Format a light position for display, e.g. ``(2.0, 5.0, 2.0)``."""
    p = light.position
    return f"({p.x:.1f}, {p.y:.1f}, {p.z:.1f})"


# =============================================================================
# Scene Factory
# =============================================================================


def create_demo_scene() -> tuple[Scene, Light]:
    """Create the demo scene.

    Returns:
        A tuple of (scene, light) where light is the scene's only light,
        returned separately so callers can adjust it between renders.
    """
    scene = Scene()

    # Spheres
    scene.add_object(Sphere(Vector3(0, 0, 0), 2, Vector3(0.8, 0.2, 0.2)))  # Red
    scene.add_object(Sphere(Vector3(4, 1, -1), 1.5, Vector3(0.2, 0.8, 0.2)))  # Green
    scene.add_object(Sphere(Vector3(-4, 1, 0), 1.5, Vector3(0.2, 0.2, 0.8)))  # Blue
    scene.add_object(Sphere(Vector3(0, 5, -5), 1, Vector3(0.8, 0.8, 0.2)))  # Yellow

    # Floor and back wall
    scene.add_object(Plane(Vector3(0, -2, 0), Vector3(0, 1, 0), Vector3(0.7, 0.7, 0.7)))
    scene.add_object(Plane(Vector3(0, 0, -10), Vector3(0, 0, 1), Vector3(0.5, 0.5, 0.8)))

    light = Light(Vector3(*DEFAULT_LIGHT_POSITION), DEFAULT_LIGHT_INTENSITY)
    scene.add_light(light)

    return scene, light
