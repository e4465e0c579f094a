"""Common capability shared by every geometric primitive.

A primitive is anything that can report where a ray first meets it and what
the surface normal is at a point on it. Sphere and Plane satisfy this
protocol structurally; there is no shared base class or mutable base state.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from src.shadowray.core.ray import Ray
from src.shadowray.core.vector import Vector3


@runtime_checkable
class Primitive(Protocol):
    """Interface for scene objects.

    Attributes:
        position: A point that anchors the primitive (center or plane point).
        color: RGB surface color, nominally in [0, 1].
    """

    position: Vector3
    color: Vector3

    def intersect(self, ray: Ray) -> float | None:
        """Return the hit distance along ``ray`` or None on a miss."""
        ...

    def normal_at(self, point: Vector3) -> Vector3:
        """Return the unit surface normal at ``point``."""
        ...
