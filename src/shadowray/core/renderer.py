"""Sequential reference renderer.

The Renderer walks every pixel row by row, traces one primary ray per pixel
through the scene, and writes the result into an RGBA byte buffer:

- Row-major, top row first, 4 bytes per pixel
- Each color channel converted as floor(channel * 255), saturated to [0, 255]
- Alpha always 255

Light state is read once at the start of each render (the scene is
snapshotted), so a light moved by another caller mid-render only shows up in
the next frame. Rendering the same scene twice without changes yields
identical buffers.

Example:
    >>> from src.shadowray.core.renderer import Renderer
    >>> from src.shadowray.scene.demo import create_demo_scene
    >>>
    >>> scene, light = create_demo_scene()
    >>> renderer = Renderer(scene)
    >>> buffer = renderer.render(64, 48)
    >>> len(buffer)
    12288
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from src.shadowray.camera.pinhole import PinholeCamera
from src.shadowray.scene.scene import Scene

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

CHANNELS = 4


def check_dimensions(width: int, height: int) -> None:
    """Validate image dimensions.

    Raises:
        ValueError: If width or height is not a positive integer.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Image {name} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"Image {name} must be positive, got {value}")


def channel_to_byte(value: float) -> int:
    """Convert a color channel to an 8-bit value via floor(value * 255).

    Shaded colors are already in [0, 1], but the background color is returned
    as configured, so the result is saturated to [0, 255].
    """
    return min(255, max(0, math.floor(value * 255)))


class Renderer:
    """Renders a scene into RGBA byte buffers, one ray per pixel.

    Attributes:
        scene: The scene to render. Its lights may be changed between renders.
        camera: The camera generating primary rays.
    """

    def __init__(self, scene: Scene, camera: PinholeCamera | None = None) -> None:
        """Initialize the renderer.

        Args:
            scene: The scene to render.
            camera: Camera configuration. Defaults to a camera at (0, 2, 10).
        """
        self.scene = scene
        self.camera = camera if camera is not None else PinholeCamera()

    def render_array(
        self,
        width: int,
        height: int,
        callback: ProgressCallback | None = None,
    ) -> npt.NDArray[np.uint8]:
        """Render the scene into a NumPy array.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            callback: Optional callback called after each row with
                (rows_completed, total_rows).

        Returns:
            Array of shape (height, width, 4) with dtype uint8.

        Raises:
            ValueError: If width or height is not a positive integer.
        """
        check_dimensions(width, height)

        # Read light state once for the whole frame
        frame_scene = self.scene.snapshot()

        pixels = np.empty((height, width, CHANNELS), dtype=np.uint8)

        for y in range(height):
            for x in range(width):
                ray = self.camera.get_ray(x, y, width, height)
                color = frame_scene.trace(ray)

                pixels[y, x, 0] = channel_to_byte(color.x)
                pixels[y, x, 1] = channel_to_byte(color.y)
                pixels[y, x, 2] = channel_to_byte(color.z)
                pixels[y, x, 3] = 255

            if callback is not None:
                callback(y + 1, height)

        return pixels

    def render(
        self,
        width: int,
        height: int,
        callback: ProgressCallback | None = None,
    ) -> bytes:
        """Render the scene into a row-major RGBA byte buffer.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            callback: Optional per-row progress callback.

        Returns:
            A bytes object of length width * height * 4.
        """
        return self.render_array(width, height, callback=callback).tobytes()

    def __repr__(self) -> str:
        return f"Renderer(scene={self.scene!r}, camera={self.camera!r})"
