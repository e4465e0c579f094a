"""Ray data structure for the ray tracer.

A ray is an origin point plus a unit direction. The constructor normalizes
the direction it is given, so callers never need to. A zero-length direction
becomes the zero vector (see Vector3.normalize) rather than an error.

Example:
    >>> from src.shadowray.core.ray import Ray
    >>> from src.shadowray.core.vector import Vector3
    >>> ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -2.0))
    >>> ray.direction
    Vector3(x=0.0, y=0.0, z=-1.0)
    >>> ray.point_at(5.0)  # Point 5 units along the ray
    Vector3(x=0.0, y=0.0, z=-5.0)
"""

from src.shadowray.core.vector import Vector3

# Minimum accepted hit distance and the offset applied to shadow ray origins.
# Keeps rays from re-hitting the surface they start on (shadow acne).
RAY_EPSILON = 0.001


class Ray:
    """A half-line with an origin point and a unit direction.

    Attributes:
        origin: The starting point of the ray.
        direction: The normalized direction of the ray.
    """

    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3) -> None:
        self.origin = origin
        self.direction = direction.normalize()

    def point_at(self, t: float) -> Vector3:
        """Compute the point ``origin + direction * t``.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point along the ray at parameter t.
        """
        return self.origin.add(self.direction.multiply(t))

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
