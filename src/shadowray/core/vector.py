"""Three-component vector algebra used throughout the ray tracer.

Vector3 is a plain value type: every operation returns a new instance and
leaves its operands untouched. All arithmetic is done in double precision in
a fixed operation order so that rendered frames are reproducible bit for bit.

Example:
    >>> from src.shadowray.core.vector import Vector3
    >>> a = Vector3(1.0, 0.0, 0.0)
    >>> b = Vector3(0.0, 1.0, 0.0)
    >>> a.cross(b)
    Vector3(x=0.0, y=0.0, z=1.0)
    >>> Vector3(0.0, 0.0, 0.0).normalize()
    Vector3(x=0.0, y=0.0, z=0.0)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Vector3:
    """A 3-D vector, point or RGB color.

    Attributes:
        x: First component (red when used as a color).
        y: Second component (green when used as a color).
        z: Third component (blue when used as a color).
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Vector3:
        """Build a vector from a 3-element sequence such as a tuple or list.

        Raises:
            ValueError: If the sequence does not have exactly three items.
        """
        if len(values) != 3:
            raise ValueError(f"Expected 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the components as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    # =========================================================================
    # Vector Algebra
    # =========================================================================

    def add(self, v: Vector3) -> Vector3:
        """Component-wise sum."""
        return Vector3(self.x + v.x, self.y + v.y, self.z + v.z)

    def subtract(self, v: Vector3) -> Vector3:
        """Component-wise difference ``self - v``."""
        return Vector3(self.x - v.x, self.y - v.y, self.z - v.z)

    def multiply(self, scalar: float) -> Vector3:
        """Uniform scale by a scalar."""
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, v: Vector3) -> float:
        """Dot product."""
        return self.x * v.x + self.y * v.y + self.z * v.z

    def cross(self, v: Vector3) -> Vector3:
        """Right-handed cross product ``self x v``."""
        return Vector3(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
        )

    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        A zero-length vector normalizes to the zero vector instead of raising
        or producing NaN. Ray construction relies on this.
        """
        length = self.length()
        if length == 0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def distance_to(self, v: Vector3) -> float:
        """Euclidean distance between two points."""
        dx = self.x - v.x
        dy = self.y - v.y
        dz = self.z - v.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def isclose(self, v: Vector3, tol: float = 1e-9) -> bool:
        """Check whether every component differs from ``v`` by at most ``tol``."""
        return (
            abs(self.x - v.x) <= tol
            and abs(self.y - v.y) <= tol
            and abs(self.z - v.z) <= tol
        )

    # =========================================================================
    # Operator Sugar
    # =========================================================================

    def __add__(self, v: Vector3) -> Vector3:
        return self.add(v)

    def __sub__(self, v: Vector3) -> Vector3:
        return self.subtract(v)

    def __mul__(self, scalar: float) -> Vector3:
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)
