"""Named constructors for 4x4 affine transforms.

Each constructor starts from the identity and overwrites the cells that
define the transform. Compose them with ``@`` (rightmost acts first) or
with the fluent methods on Matrix (last call acts first).

Example:
    >>> import math
    >>> from raykernel.core.transform import rotation_x, scaling, translation
    >>> from raykernel.core.tuple import point
    >>> m = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
    >>> m @ point(1, 0, 1)  # rotate, then scale, then translate
"""

import math

import numpy as np

from raykernel.core.matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Identity with column 3 set to (x, y, z).

    Points move by (x, y, z); vectors are unaffected because their w is 0.
    """
    cells = np.identity(4)
    cells[0, 3] = x
    cells[1, 3] = y
    cells[2, 3] = z
    return Matrix(cells)


def scaling(x: float, y: float, z: float) -> Matrix:
    """Identity with diagonal (x, y, z, 1)."""
    cells = np.identity(4)
    cells[0, 0] = x
    cells[1, 1] = y
    cells[2, 2] = z
    return Matrix(cells)


def rotation_x(angle: float) -> Matrix:
    """Rotation about the x axis by angle radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos_a, -sin_a, 0.0],
            [0.0, sin_a, cos_a, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(angle: float) -> Matrix:
    """Rotation about the y axis by angle radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Matrix(
        [
            [cos_a, 0.0, sin_a, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin_a, 0.0, cos_a, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(angle: float) -> Matrix:
    """Rotation about the z axis by angle radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Matrix(
        [
            [cos_a, -sin_a, 0.0, 0.0],
            [sin_a, cos_a, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each axis in proportion to the other two.

    Args:
        xy: Moves x in proportion to y.
        xz: Moves x in proportion to z.
        yx: Moves y in proportion to x.
        yz: Moves y in proportion to z.
        zx: Moves z in proportion to x.
        zy: Moves z in proportion to y.

    Returns:
        The 4x4 shear matrix.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
