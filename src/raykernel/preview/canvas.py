"""Pixel buffer for collecting shaded colors.

The Canvas is the sink for the lighting core: callers write one Color per
(x, y) sample and read back or serialize the result. Pixels live in a
Taichi vector field of float64 so the buffer can be handed to Taichi
kernels and exported with a single ``to_numpy()`` copy.

Taichi must be initialized before a Canvas is created:

    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raykernel.core.color import BLACK, RED
    >>> from raykernel.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20, BLACK)
    >>> canvas.write_pixel(2, 3, RED)
    >>> canvas.pixel_at(2, 3)
    Color(red=1.0, green=0.0, blue=0.0)

Coordinates are (x, y) with x growing right and y growing down, matching
image row order.
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from raykernel.core.color import BLACK, Color
from raykernel.preview.export import image_to_uint8

# Plain PPM readers expect no line longer than this
PPM_MAX_LINE_LENGTH = 70


@ti.kernel
def _fill(pixels: ti.template(), red: ti.f64, green: ti.f64, blue: ti.f64):
    """Set every pixel of a canvas field to one color."""
    for y, x in pixels:
        pixels[y, x] = ti.Vector([red, green, blue], dt=ti.f64)


class Canvas:
    """A width x height grid of colors backed by a Taichi field.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int, background: Color = BLACK) -> None:
        """Allocate the pixel field and fill it with the background color.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            background: Initial color of every pixel.

        Raises:
            ValueError: If width or height is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f64, shape=(height, width))
        self.fill(background)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self):
        """The underlying Taichi field, indexed [y, x]."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def fill(self, color: Color) -> None:
        """Overwrite every pixel with color."""
        _fill(self._pixels, color.red, color.green, color.blue)

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store a color at (x, y).

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = [color.red, color.green, color.blue]

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color stored at (x, y).

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        value = self._pixels[y, x]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Copy the pixels out as a (height, width, 3) float64 array."""
        return self._pixels.to_numpy()

    def to_ppm(self) -> str:
        """Serialize to plain-text PPM (P3).

        Channels are scaled to 0..255 (rounded, clamped). Each image row
        starts on a new line and long rows are wrapped so that no line
        exceeds 70 characters.

        Returns:
            The PPM document, ending with a newline.
        """
        lines = ["P3", f"{self._width} {self._height}", "255"]
        image = image_to_uint8(self.to_numpy())
        for row in image:
            line = ""
            for channel in row.ravel():
                text = str(int(channel))
                if not line:
                    line = text
                elif len(line) + len(text) + 1 > PPM_MAX_LINE_LENGTH:
                    lines.append(line)
                    line = text
                else:
                    line = f"{line} {text}"
            lines.append(line)
        return "\n".join(lines) + "\n"
