"""Preview module for output of rendered buffers.

Components:
    export: RGBA buffer to NumPy array conversion and PNG export (Pillow)

Example:
    >>> from src.shadowray.preview import save_png
    >>> save_png(buffer, width, height, "output.png")
"""

from src.shadowray.preview.export import buffer_to_array, save_png

__all__ = [
    "buffer_to_array",
    "save_png",
]
