"""Plain-data scene configuration.

SceneConfig describes a scene with lists and dictionaries only, so it can be
stored as JSON or built by hand. Object dictionaries carry a ``type`` key:

    {"type": "sphere", "position": [0, 0, 0], "radius": 2.0, "color": [0.8, 0.2, 0.2]}
    {"type": "plane", "position": [0, -2, 0], "normal": [0, 1, 0], "color": [0.7, 0.7, 0.7]}

Light dictionaries carry ``position`` and ``intensity``.

Example:
    >>> from src.shadowray.scene.scene import Scene
    >>> scene = Scene()
    >>> scene.from_dict({
    ...     "objects": [{"type": "sphere", "position": [0, 0, 0], "radius": 1.0,
    ...                  "color": [1, 0, 0]}],
    ...     "lights": [{"position": [2, 5, 2], "intensity": 1.5}],
    ... })
    >>> scene.object_count
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from src.shadowray.core.vector import Vector3
from src.shadowray.geometry.plane import Plane
from src.shadowray.geometry.primitive import Primitive
from src.shadowray.geometry.sphere import Sphere
from src.shadowray.scene.light import Light

if TYPE_CHECKING:
    from src.shadowray.scene.scene import Scene


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        objects: List of object configurations, in evaluation order.
        lights: List of light configurations.
        background_color: Background color as [r, g, b].
    """

    objects: list[dict[str, Any]] = field(default_factory=list)
    lights: list[dict[str, Any]] = field(default_factory=list)
    background_color: list[float] = field(default_factory=lambda: [0.1, 0.1, 0.2])

    @classmethod
    def from_scene(cls, scene: Scene) -> SceneConfig:
        """Capture the current contents of a scene.

        Raises:
            ValueError: If the scene holds a primitive that is neither a
                Sphere nor a Plane.
        """
        config = cls(background_color=list(scene.background_color.to_tuple()))

        for obj in scene.objects:
            config.objects.append(_object_to_dict(obj))

        for light in scene.lights:
            config.lights.append(
                {
                    "position": list(light.position.to_tuple()),
                    "intensity": light.intensity,
                }
            )

        return config

    def build(self) -> tuple[list[Primitive], list[Light], Vector3]:
        """Construct fresh primitives, lights and background color.

        Returns:
            Tuple of (objects, lights, background_color).

        Raises:
            ValueError: If an object has an unknown type or a vector does not
                have three components.
        """
        objects = [_object_from_dict(obj_config) for obj_config in self.objects]

        lights = []
        for light_config in self.lights:
            position = Vector3.from_sequence(light_config.get("position", [0, 0, 0]))
            intensity = float(light_config.get("intensity", 1.0))
            lights.append(Light(position, intensity))

        background = Vector3.from_sequence(self.background_color)
        return objects, lights, background


def _object_to_dict(obj: Primitive) -> dict[str, Any]:
    if isinstance(obj, Sphere):
        return {
            "type": "sphere",
            "position": list(obj.position.to_tuple()),
            "radius": obj.radius,
            "color": list(obj.color.to_tuple()),
        }
    if isinstance(obj, Plane):
        return {
            "type": "plane",
            "position": list(obj.position.to_tuple()),
            "normal": list(obj.normal.to_tuple()),
            "color": list(obj.color.to_tuple()),
        }
    raise ValueError(f"Cannot serialize object of type {type(obj).__name__}")


def _object_from_dict(obj_config: dict[str, Any]) -> Primitive:
    obj_type = str(obj_config.get("type", "")).lower()
    position = Vector3.from_sequence(obj_config.get("position", [0, 0, 0]))
    color = Vector3.from_sequence(obj_config.get("color", [0.5, 0.5, 0.5]))

    if obj_type == "sphere":
        radius = float(obj_config.get("radius", 1.0))
        return Sphere(position, radius, color)
    if obj_type == "plane":
        normal = Vector3.from_sequence(obj_config.get("normal", [0, 1, 0]))
        return Plane(position, normal, color)
    raise ValueError(f"Unknown object type: {obj_type}")


def config_to_dict(config: SceneConfig) -> dict[str, Any]:
    """Convert a SceneConfig to a dictionary."""
    return {
        "objects": config.objects,
        "lights": config.lights,
        "background_color": config.background_color,
    }


def config_from_dict(data: dict[str, Any]) -> SceneConfig:
    """Build a SceneConfig from a dictionary with 'objects', 'lights' and
    optionally 'background_color' keys."""
    return SceneConfig(
        objects=data.get("objects", []),
        lights=data.get("lights", []),
        background_color=data.get("background_color", [0.1, 0.1, 0.2]),
    )
