"""Ray data structure.

A ray is an origin point plus a direction vector. The direction is not
required to be unit length: intersection parameters are expressed in
multiples of the direction, so a scaled ray keeps meaningful ``t`` values
after being transformed into a shape's object space.

Example:
    >>> from raykernel.core.ray import Ray
    >>> from raykernel.core.transform import translation
    >>> from raykernel.core.tuple import point, vector
    >>> ray = Ray(origin=point(1, 2, 3), direction=vector(0, 1, 0))
    >>> ray.position(2.5)  # point(1, 4.5, 3)
    >>> ray.transform(translation(3, 4, 5))  # origin moves, direction does not
"""

from __future__ import annotations

from dataclasses import dataclass

from raykernel.core.matrix import Matrix
from raykernel.core.tuple import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w=1).
        direction: The direction vector of the ray (w=0). Must be non-zero
            for intersection queries.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply a 4x4 transform to both origin and direction.

        Because the direction has w=0, translation terms only move the
        origin; the direction is rotated, scaled and sheared.
        """
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)
