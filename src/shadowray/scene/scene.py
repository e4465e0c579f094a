"""Scene container and the trace algorithm.

The Scene owns an ordered list of primitives, an ordered list of point
lights and a background color. ``trace`` resolves the nearest hit along a
ray and shades it with one diffuse term per visible light plus an ambient
term per light, then clamps the result to [0, 1].

Shading for a hit at point P with normal N, for every light L:

    light_dir = normalize(L.position - P)
    shadow    = any object hit by Ray(P + N * eps, light_dir)
                closer than |L.position - P|
    color    += albedo * (max(0, N . light_dir) * L.intensity)   if not shadow
    color    += albedo * AMBIENT_FACTOR                           always

Because the ambient term sits inside the per-light loop, total ambient
brightness grows with the number of lights.

Example:
    >>> from src.shadowray.core.ray import Ray
    >>> from src.shadowray.core.vector import Vector3
    >>> from src.shadowray.geometry import Sphere
    >>> from src.shadowray.scene.light import Light
    >>> from src.shadowray.scene.scene import Scene
    >>> scene = Scene()
    >>> scene.add_object(Sphere(Vector3(0, 0, 0), 2, Vector3(0.8, 0.2, 0.2)))
    >>> scene.add_light(Light(Vector3(2, 5, 2), 1.5))
    >>> color = scene.trace(Ray(Vector3(0, 2, 10), Vector3(0, 0, -1)))
"""

from __future__ import annotations

from typing import Any

from src.shadowray.core.ray import RAY_EPSILON, Ray
from src.shadowray.core.vector import Vector3
from src.shadowray.geometry.primitive import Primitive
from src.shadowray.scene.config import SceneConfig, config_from_dict, config_to_dict
from src.shadowray.scene.light import Light

# Flat ambient contribution, added once per light
AMBIENT_FACTOR = 0.2

# Default recursion limit for trace(); trace never recurses at present
MAX_DEPTH = 3

DEFAULT_BACKGROUND_COLOR = (0.1, 0.1, 0.2)


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


class Scene:
    """A static scene of primitives lit by point lights.

    Attributes:
        objects: Primitives in evaluation order. On exactly equal hit
            distances the earlier object wins.
        lights: Point lights in evaluation order.
        background_color: Color returned for rays that hit nothing.
    """

    def __init__(self, background_color: Vector3 | None = None) -> None:
        """Initialize an empty scene.

        Args:
            background_color: Color for rays that miss every object.
                Defaults to (0.1, 0.1, 0.2).
        """
        self.objects: list[Primitive] = []
        self.lights: list[Light] = []
        if background_color is None:
            background_color = Vector3(*DEFAULT_BACKGROUND_COLOR)
        self.background_color = background_color

    # =========================================================================
    # Scene Building
    # =========================================================================

    def add_object(self, obj: Primitive) -> None:
        """Append a primitive to the scene."""
        self.objects.append(obj)

    def add_light(self, light: Light) -> None:
        """Append a light to the scene."""
        self.lights.append(light)

    def clear(self) -> None:
        """Remove all objects and lights. The background color is kept."""
        self.objects.clear()
        self.lights.clear()

    @property
    def object_count(self) -> int:
        """Number of primitives in the scene."""
        return len(self.objects)

    @property
    def light_count(self) -> int:
        """Number of lights in the scene."""
        return len(self.lights)

    def snapshot(self) -> Scene:
        """Return a copy of the scene with lights frozen at their current state.

        Primitives are immutable and shared with the copy. Lights are copied,
        so later mutation of the original lights does not affect the snapshot.
        """
        frozen = Scene(
            background_color=Vector3(
                self.background_color.x,
                self.background_color.y,
                self.background_color.z,
            )
        )
        frozen.objects = list(self.objects)
        frozen.lights = [light.copy() for light in self.lights]
        return frozen

    # =========================================================================
    # Ray Tracing
    # =========================================================================

    def closest_hit(self, ray: Ray) -> tuple[float, Primitive] | None:
        """Find the nearest primitive along a ray.

        Args:
            ray: The ray to test against every object.

        Returns:
            A (distance, primitive) tuple, or None if nothing is hit.
        """
        closest_t: float | None = None
        closest_object: Primitive | None = None

        for obj in self.objects:
            t = obj.intersect(ray)
            if t is not None and (closest_t is None or t < closest_t):
                closest_t = t
                closest_object = obj

        if closest_t is None or closest_object is None:
            return None
        return closest_t, closest_object

    def is_shadowed(self, point: Vector3, normal: Vector3, light: Light) -> bool:
        """Check whether any object blocks the path from ``point`` to ``light``.

        The shadow ray starts slightly above the surface (offset along the
        normal by RAY_EPSILON). Every object is tested, including the one the
        point lies on.
        """
        light_direction = light.position.subtract(point).normalize()
        shadow_ray = Ray(point.add(normal.multiply(RAY_EPSILON)), light_direction)
        light_distance = light.position.distance_to(point)

        for obj in self.objects:
            shadow_t = obj.intersect(shadow_ray)
            if shadow_t is not None and shadow_t < light_distance:
                return True
        return False

    def trace(self, ray: Ray, depth: int = 0, max_depth: int = MAX_DEPTH) -> Vector3:
        """Compute the color seen along a ray.

        Args:
            ray: The ray to trace.
            depth: Current bounce depth. Only 0 is used by the renderer.
            max_depth: Depth at which tracing stops and the background is
                returned.

        Returns:
            The shaded color with each channel clamped to [0, 1], or the
            background color on a miss or when depth >= max_depth.
        """
        if depth >= max_depth:
            return self.background_color

        hit = self.closest_hit(ray)
        if hit is None:
            return self.background_color

        distance, hit_object = hit
        point = ray.point_at(distance)
        normal = hit_object.normal_at(point)

        color = Vector3(0.0, 0.0, 0.0)

        for light in self.lights:
            light_direction = light.position.subtract(point).normalize()

            if not self.is_shadowed(point, normal, light):
                diffuse = max(0.0, normal.dot(light_direction))
                color = color.add(hit_object.color.multiply(diffuse * light.intensity))

            color = color.add(hit_object.color.multiply(AMBIENT_FACTOR))

        return Vector3(_clamp01(color.x), _clamp01(color.y), _clamp01(color.z))

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object."""
        return SceneConfig.from_scene(self)

    def from_config(self, config: SceneConfig) -> None:
        """Replace the scene contents with those described by ``config``.

        Raises:
            ValueError: If the configuration contains an unknown object type.
        """
        objects, lights, background = config.build()
        self.clear()
        self.background_color = background
        for obj in objects:
            self.add_object(obj)
        for light in lights:
            self.add_light(light)

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        return config_to_dict(self.to_config())

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load the scene from a dictionary produced by ``to_dict``."""
        self.from_config(config_from_dict(data))

    def __repr__(self) -> str:
        return (
            f"Scene(objects={self.object_count}, lights={self.light_count}, "
            f"background_color={self.background_color!r})"
        )
