"""Closed set of intersectable shapes and the functions that dispatch on them.

``Shape`` names every concrete shape kind the kernel understands. Callers
that hold "some shape" go through ``intersect``, ``normal_at`` and
``material_of``, which match on the concrete class. Adding a kind means
extending the ``Shape`` union and adding one case to each function;
anything outside the union is rejected with TypeError rather than being
duck-typed.

Example:
    >>> from raykernel.geometry.shape import intersect, normal_at
    >>> xs = intersect(shape, ray)
    >>> hit = xs.hit()
    >>> if hit is not None:
    ...     n = normal_at(hit.shape, ray.position(hit.t))
"""

from typing import TypeAlias

from raykernel.core.ray import Ray
from raykernel.core.tuple import Tuple
from raykernel.geometry.sphere import Sphere
from raykernel.materials.phong import Material
from raykernel.scene.intersection import Intersections

# Extend as a union (Sphere | Plane | ...) when new kinds are added
Shape: TypeAlias = Sphere


def _unknown_shape(shape: object) -> TypeError:
    return TypeError(f"Unsupported shape kind: {type(shape).__name__}")


def intersect(shape: Shape, ray: Ray) -> Intersections:
    """Intersect a world-space ray with any supported shape."""
    match shape:
        case Sphere():
            return shape.intersect(ray)
        case _:
            raise _unknown_shape(shape)


def normal_at(shape: Shape, world_point: Tuple) -> Tuple:
    """Compute the world-space unit normal of any supported shape."""
    match shape:
        case Sphere():
            return shape.normal_at(world_point)
        case _:
            raise _unknown_shape(shape)


def material_of(shape: Shape) -> Material:
    """Return the material of any supported shape."""
    match shape:
        case Sphere():
            return shape.material
        case _:
            raise _unknown_shape(shape)


def intersect_all(shapes: list[Shape], ray: Ray) -> Intersections:
    """Intersect a ray with several shapes and merge the results in t order."""
    return Intersections.merge(*(intersect(shape, ray) for shape in shapes))
