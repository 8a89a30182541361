"""Preview module for collecting and saving rendered colors.

Components:
    canvas: Taichi-backed pixel buffer with PPM serialization
    export: 8-bit conversion and PPM/PNG file output

The geometric and lighting core never imports this module; it only
produces Color values that callers write into a Canvas.
"""

from .canvas import Canvas
from .export import image_to_uint8, save_png, save_ppm

__all__ = [
    "Canvas",
    "image_to_uint8",
    "save_png",
    "save_ppm",
]
