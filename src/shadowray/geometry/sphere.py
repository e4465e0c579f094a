"""Sphere primitive with ray-sphere intersection.

The intersection solves the textbook quadratic

    a*t^2 + b*t + c = 0

where:
    a = dot(direction, direction)
    b = 2 * dot(origin - center, direction)
    c = dot(origin - center, origin - center) - radius^2

Root selection is ordered: the near root wins if it lies beyond RAY_EPSILON,
otherwise the far root is used if it does, otherwise the ray misses. The far
root fallback is what lets a ray that starts inside the sphere find the
surface it exits through.

Example:
    >>> from src.shadowray.core.ray import Ray
    >>> from src.shadowray.core.vector import Vector3
    >>> from src.shadowray.geometry.sphere import Sphere
    >>> sphere = Sphere(Vector3(0, 0, 0), 1.0, Vector3(0.8, 0.2, 0.2))
    >>> sphere.intersect(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)))
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.shadowray.core.ray import RAY_EPSILON, Ray
from src.shadowray.core.vector import Vector3


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        position: The center point of the sphere.
        radius: The radius of the sphere (assumed positive, not validated).
        color: RGB surface color.
    """

    position: Vector3
    radius: float
    color: Vector3

    def intersect(self, ray: Ray) -> float | None:
        """Test for ray-sphere intersection.

        Args:
            ray: The ray to test. Its direction is expected to be unit length
                or zero.

        Returns:
            The smallest root greater than RAY_EPSILON, or None if the ray
            misses, grazes only behind its origin, or has a zero direction.
        """
        oc = ray.origin.subtract(self.position)
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return None

        # Zero-length direction: both roots are undefined
        if a == 0:
            return None

        t = (-b - math.sqrt(discriminant)) / (2.0 * a)
        if t > RAY_EPSILON:
            return t

        t2 = (-b + math.sqrt(discriminant)) / (2.0 * a)
        if t2 > RAY_EPSILON:
            return t2

        return None

    def normal_at(self, point: Vector3) -> Vector3:
        """Outward unit normal: the normalized vector from center to point.

        A point exactly at the center yields the zero vector.
        """
        return point.subtract(self.position).normalize()
