"""Image export utilities for rendered buffers.

The renderers produce raw RGBA bytes; this module turns them into NumPy
arrays and PNG files. It is the boundary where the caller takes over the
buffer, and nothing in the renderer depends on it.

Supported formats:
    - PNG (8-bit RGBA or RGB via Pillow)

Example:
    >>> from src.shadowray.core.renderer import Renderer
    >>> from src.shadowray.preview.export import save_png
    >>> from src.shadowray.scene.demo import create_demo_scene
    >>>
    >>> scene, _ = create_demo_scene()
    >>> buffer = Renderer(scene).render(64, 48)
    >>> save_png(buffer, 64, 48, "output.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

CHANNELS = 4


def buffer_to_array(buffer: bytes, width: int, height: int) -> npt.NDArray[np.uint8]:
    """View an RGBA byte buffer as an array of shape (height, width, 4).

    Args:
        buffer: Row-major RGBA bytes as returned by ``render``.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        A uint8 array of shape (height, width, 4).

    Raises:
        ValueError: If the buffer length does not equal width * height * 4.
    """
    expected = width * height * CHANNELS
    if len(buffer) != expected:
        raise ValueError(
            f"Buffer size {len(buffer)} does not match {width}x{height} RGBA "
            f"({expected} bytes)"
        )
    return np.frombuffer(buffer, dtype=np.uint8).reshape(height, width, CHANNELS)


def save_png(
    buffer: bytes,
    width: int,
    height: int,
    filepath: str | Path,
    *,
    keep_alpha: bool = True,
) -> Path:
    """Save an RGBA byte buffer as a PNG file.

    Args:
        buffer: Row-major RGBA bytes as returned by ``render``.
        width: Image width in pixels.
        height: Image height in pixels.
        filepath: Output file path (should end in .png).
        keep_alpha: If False, drop the alpha channel and write RGB.

    Returns:
        The path written to.

    Raises:
        ValueError: If the buffer length does not match the dimensions.
    """
    image = buffer_to_array(buffer, width, height)

    if keep_alpha:
        pil_image = PILImage.fromarray(image)
    else:
        pil_image = PILImage.fromarray(np.ascontiguousarray(image[:, :, :3]))

    path = Path(filepath)
    pil_image.save(path)
    return path
