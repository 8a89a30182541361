"""Core math module.

This module contains the value types everything else is built on:

Components:
    tuple: Homogeneous points and vectors
    color: Unclamped RGB colors
    matrix: Square matrices with determinant, inverse, and fluent transforms
    transform: Named 4x4 affine transform constructors
    ray: Ray data structure
    errors: Exceptions for non-invertible, degenerate, and zero-length input

All types are immutable and every operation returns a new value.
"""

from .color import BLACK, RED, WHITE, Color
from .errors import (
    DegenerateDirectionError,
    NotInvertibleError,
    RayKernelError,
    ZeroMagnitudeError,
)
from .matrix import MATRIX_EPSILON, Matrix
from .ray import Ray
from .transform import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from .tuple import EPSILON, ORIGIN, Tuple, point, vector

__all__ = [
    # Tuples
    "Tuple",
    "point",
    "vector",
    "ORIGIN",
    "EPSILON",
    # Colors
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    # Matrices and transforms
    "Matrix",
    "MATRIX_EPSILON",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    # Rays
    "Ray",
    # Errors
    "RayKernelError",
    "NotInvertibleError",
    "DegenerateDirectionError",
    "ZeroMagnitudeError",
]
