"""Light sources."""

from dataclasses import dataclass

from raykernel.core.color import Color
from raykernel.core.tuple import Tuple


@dataclass(frozen=True)
class PointLight:
    """A light source with no size, radiating equally in all directions.

    Attributes:
        position: Where the light sits in world space (a point).
        intensity: The color and brightness of the light.
    """

    position: Tuple
    intensity: Color
