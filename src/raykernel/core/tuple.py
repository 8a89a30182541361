"""Homogeneous-coordinate tuples for points and vectors.

A single Tuple type carries both points (w=1) and vectors (w=0). Arithmetic
is defined uniformly over all four components, so the w component keeps
track of the point/vector distinction on its own: subtracting two points
yields a vector, adding a vector to a point yields a point, and a
translation matrix moves points but leaves vectors untouched.

Example:
    >>> from raykernel.core.tuple import point, vector
    >>> p = point(3.0, 2.0, 1.0)
    >>> v = point(5.0, 6.0, 7.0) - p
    >>> v.is_vector()
    True
    >>> v.normalized().magnitude()
    1.0
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from raykernel.core.errors import ZeroMagnitudeError

# Default tolerance for approximate comparison of raw tuples
EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class Tuple:
    """A 4-component homogeneous coordinate.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: The homogeneous component: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    def is_point(self) -> bool:
        """Return True if this tuple is a point (w == 1)."""
        return self.w == 1.0

    def is_vector(self) -> bool:
        """Return True if this tuple is a vector (w == 0)."""
        return self.w == 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: float | Tuple) -> Tuple:
        """Scale by a scalar, or multiply component-wise by another tuple."""
        if isinstance(other, Tuple):
            return Tuple(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        if isinstance(other, (int, float)):
            return Tuple(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Tuple:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: float) -> Tuple:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Tuple(self.x / other, self.y / other, self.z / other, self.w / other)

    def dot(self, other: Tuple) -> float:
        """Compute the 4-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Compute the 3-component cross product of two vectors.

        The w components are ignored and the result is always a vector.

        Args:
            other: The right-hand vector operand.

        Returns:
            The vector self x other.

        Raises:
            ValueError: If either operand is not a vector.
        """
        if not (self.is_vector() and other.is_vector()):
            raise ValueError(f"Cross product is only defined for vectors, got {self} and {other}")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Compute the Euclidean length over all four components."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalized(self) -> Tuple:
        """Scale the tuple to unit magnitude.

        Returns:
            A tuple pointing the same way with magnitude 1.

        Raises:
            ZeroMagnitudeError: If the tuple has zero magnitude.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ZeroMagnitudeError(f"Cannot normalize zero-magnitude tuple {self}")
        return self / mag

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be unit length).

        Returns:
            self - normal * 2 * dot(self, normal).
        """
        return self - normal * 2.0 * self.dot(normal)

    def approx_eq(self, other: Tuple, epsilon: float = EPSILON) -> bool:
        """Compare component-wise by absolute difference."""
        return all(abs(a - b) <= epsilon for a, b in zip(self, other))


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w=1)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w=0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
