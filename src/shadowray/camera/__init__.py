"""Camera module for primary ray generation.

Components:
    pinhole: Fixed-position pinhole camera looking down -z

The camera maps integer pixel coordinates to normalized device coordinates
in [-1, 1] and builds one primary ray per pixel.
"""

from .pinhole import DEFAULT_CAMERA_POSITION, PinholeCamera

__all__ = [
    "PinholeCamera",
    "DEFAULT_CAMERA_POSITION",
]
