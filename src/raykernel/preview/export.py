"""Image export utilities for canvases.

This module converts linear float colors to 8-bit channels and writes them
to disk.

Supported formats:
    - PPM (plain-text P3, via Canvas.to_ppm)
    - PNG (8-bit RGB via Pillow)

Colors coming out of the lighting core are unclamped, so conversion clamps
every channel to [0, 1] before quantizing.

Example:
    >>> from raykernel.preview.export import save_png
    >>> save_png(canvas, "sphere.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from raykernel.preview.canvas import Canvas


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to 8-bit channels.

    Args:
        image: Array of shape (H, W, 3) with channels nominally in [0, 1].

    Returns:
        Array of the same shape with dtype uint8, each channel clamped to
        [0, 1] and scaled to 0..255 with halves rounded up.
    """
    clamped = np.clip(image, 0.0, 1.0)
    return np.floor(clamped * 255.0 + 0.5).astype(np.uint8)


def save_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Write the canvas as a plain-text PPM file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.write_text(canvas.to_ppm(), encoding="ascii")
    return path


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Write the canvas as an 8-bit RGB PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path written.
    """
    path = Path(filepath)
    image_uint8 = image_to_uint8(canvas.to_numpy())
    PILImage.fromarray(image_uint8).save(path)
    return path
