"""Scene module for intersection records and lights.

Components:
    intersection: Intersection records and the sorted Intersections collection
    light: Point light source
"""

from .intersection import Intersection, Intersections
from .light import PointLight

__all__ = [
    "Intersection",
    "Intersections",
    "PointLight",
]
