"""Pinhole camera model for primary ray generation.

The camera sits at a fixed position and looks down the -z axis through a
virtual image plane at unit distance. Pixel (x, y) maps to normalized
device coordinates

    px = (x / width) * 2 - 1
    py = -(y / height) * 2 + 1

so row 0 is the top of the image and column 0 the left edge. The ray
direction is (px, py, -1), normalized. There is no aspect-ratio correction
and no sub-pixel jitter: one ray per pixel, through the pixel's corner.

Example:
    >>> from src.shadowray.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera()
    >>> camera.position
    (0.0, 2.0, 10.0)
    >>> ray = camera.get_ray(32, 24, 64, 48)  # Ray through the image center
"""

from __future__ import annotations

from dataclasses import dataclass

from src.shadowray.core.ray import Ray
from src.shadowray.core.vector import Vector3

DEFAULT_CAMERA_POSITION = (0.0, 2.0, 10.0)


@dataclass
class PinholeCamera:
    """Configuration for a fixed pinhole camera.

    Attributes:
        position: Camera position in world space (x, y, z).
    """

    position: tuple[float, float, float] = DEFAULT_CAMERA_POSITION

    @property
    def origin(self) -> Vector3:
        """Camera position as a Vector3."""
        return Vector3.from_sequence(self.position)

    def pixel_direction(self, x: int, y: int, width: int, height: int) -> Vector3:
        """Compute the unit view direction through pixel (x, y).

        Args:
            x: Pixel column (0 = left).
            y: Pixel row (0 = top).
            width: Image width in pixels.
            height: Image height in pixels.

        Returns:
            The normalized direction (px, py, -1).
        """
        px = (x / width) * 2 - 1
        py = -(y / height) * 2 + 1
        return Vector3(px, py, -1.0).normalize()

    def get_ray(self, x: int, y: int, width: int, height: int) -> Ray:
        """Generate the primary ray through pixel (x, y)."""
        return Ray(self.origin, self.pixel_direction(x, y, width, height))
