"""Infinite plane primitive.

A plane is given by any point on it and a normal, which is normalized at
construction. Planes are two-sided for intersection purposes; shading relies
on the raw sign of dot(normal, light_direction), with no back-face culling.

Example:
    >>> from src.shadowray.core.ray import Ray
    >>> from src.shadowray.core.vector import Vector3
    >>> from src.shadowray.geometry.plane import Plane
    >>> floor = Plane(Vector3(0, -2, 0), Vector3(0, 5, 0), Vector3(0.7, 0.7, 0.7))
    >>> floor.normal
    Vector3(x=0.0, y=1.0, z=0.0)
    >>> floor.intersect(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)))
    2.0
"""

from __future__ import annotations

from dataclasses import dataclass

from src.shadowray.core.ray import RAY_EPSILON, Ray
from src.shadowray.core.vector import Vector3


@dataclass(frozen=True)
class Plane:
    """An infinite plane.

    Attributes:
        position: Any point lying on the plane.
        normal: Unit normal of the plane (normalized in __post_init__).
        color: RGB surface color.
    """

    position: Vector3
    normal: Vector3
    color: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", self.normal.normalize())

    def intersect(self, ray: Ray) -> float | None:
        """Test for ray-plane intersection.

        Args:
            ray: The ray to test.

        Returns:
            The hit distance if it is at least RAY_EPSILON, otherwise None.
            Rays within RAY_EPSILON of parallel (in the cosine sense) miss.
        """
        denom = self.normal.dot(ray.direction)
        if abs(denom) > RAY_EPSILON:
            t = self.position.subtract(ray.origin).dot(self.normal) / denom
            if t >= RAY_EPSILON:
                return t
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        """The plane's fixed normal, regardless of ``point``."""
        return self.normal
