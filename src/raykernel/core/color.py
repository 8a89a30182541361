"""RGB color values.

Colors are unclamped: channels may exceed 1.0 or go negative while light
contributions are summed. Clamping belongs to whoever turns colors into
pixels (see raykernel.preview.export).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from raykernel.core.tuple import EPSILON


@dataclass(frozen=True)
class Color:
    """An RGB color with float channels.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    def __iter__(self) -> Iterator[float]:
        yield self.red
        yield self.green
        yield self.blue

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: float | Color) -> Color:
        """Scale by a scalar, or blend (Hadamard product) with another color."""
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Color:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def approx_eq(self, other: Color, epsilon: float = EPSILON) -> bool:
        """Compare channel-wise by absolute difference."""
        return all(abs(a - b) <= epsilon for a, b in zip(self, other))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
