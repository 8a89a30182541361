"""Geometry module for shape primitives.

Components:
    sphere: Transformable sphere with ray intersection and surface normals
    shape: The closed Shape union and kind-dispatching query functions

Every shape lives in its own object space and carries a transform into
world space. Queries transform rays and points by the inverse transform,
solve against the canonical primitive, and map normals back with the
inverse transpose.
"""

from .shape import Shape, intersect, intersect_all, material_of, normal_at
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "intersect",
    "intersect_all",
    "normal_at",
    "material_of",
]
