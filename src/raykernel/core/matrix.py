"""Square matrices with cofactor-expansion determinant and inverse.

Matrices are immutable N x N arrays of float64 stored row-major in a NumPy
array. Dimensions are fixed at construction. The determinant is computed by
cofactor expansion along the first row, which is factorial in N but cheap
for the 2x2, 3x3 and 4x4 matrices used by affine transforms. Do not reuse
it for large matrices.

The inverse is built in one pass as ``cofactor(col, row) / det``: swapping
the cofactor indices is the adjugate transpose, so no separate transpose
step is needed.

4x4 matrices also expose fluent transform methods. Each fluent call
left-multiplies the new transform onto the existing matrix, so the last
call in a chain is the first to act on a point:

    >>> import math
    >>> from raykernel.core.matrix import Matrix
    >>> a = math.pi / 2
    >>> m = Matrix.identity(4).rotate_x(a).scale(5, 5, 5).translate(10, 5, 7)
    >>> # equivalent to translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(a)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
import numpy.typing as npt

from raykernel.core.errors import NotInvertibleError
from raykernel.core.tuple import Tuple

# Looser tolerance for quantities derived from determinants and inverses
MATRIX_EPSILON = 1e-14


class Matrix:
    """An immutable square matrix of float64.

    Attributes:
        size: The dimension N of the N x N matrix.
    """

    __slots__ = ("_data", "_inverse")

    def __init__(self, rows: Iterable[Sequence[float]] | npt.ArrayLike) -> None:
        """Create a matrix from a sequence of rows.

        Args:
            rows: N rows of N numbers each.

        Raises:
            ValueError: If the rows do not form a non-empty square array.
        """
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] == 0:
            raise ValueError(f"Matrix must be square and non-empty, got shape {data.shape}")
        data.flags.writeable = False
        self._data = data
        self._inverse: Matrix | None = None

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Create the size x size identity matrix."""
        return cls(np.identity(size, dtype=np.float64))

    @classmethod
    def zeros(cls, size: int) -> Matrix:
        """Create a size x size matrix of zeros."""
        return cls(np.zeros((size, size), dtype=np.float64))

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def rows(self) -> list[list[float]]:
        """Return the cells as a list of row lists."""
        return self._data.tolist()

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.ravel().tolist()))

    def __repr__(self) -> str:
        return f"Matrix({self.rows()!r})"

    def __str__(self) -> str:
        return "\n".join("| " + " ".join(f"{v:g}" for v in row) + " |" for row in self.rows())

    def approx_eq(self, other: Matrix, epsilon: float = MATRIX_EPSILON) -> bool:
        """Compare cell-wise by absolute difference."""
        if self.size != other.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) <= epsilon))

    # =========================================================================
    # Products
    # =========================================================================

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        """Multiply by another matrix or by a tuple.

        A tuple is lifted to a 4x1 column, multiplied, and read back.

        Raises:
            ValueError: If the dimensions do not match.
        """
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(
                    f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size} matrix"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} matrix by a 4-tuple")
            column = np.array([[other.x], [other.y], [other.z], [other.w]], dtype=np.float64)
            result = self._data @ column
            return Tuple(*(float(v) for v in result[:, 0]))
        return NotImplemented

    # =========================================================================
    # Determinant and Inverse
    # =========================================================================

    def transposed(self) -> Matrix:
        """Swap (row, col) with (col, row)."""
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column.

        Raises:
            ValueError: If the matrix is 1x1.
        """
        if self.size < 2:
            raise ValueError("Cannot take a submatrix of a 1x1 matrix")
        return Matrix(np.delete(np.delete(self._data, row, axis=0), col, axis=1))

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along row 0."""
        data = self._data
        if self.size == 1:
            return float(data[0, 0])
        if self.size == 2:
            return float(data[0, 0] * data[1, 1] - data[0, 1] * data[1, 0])
        return sum(float(data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix with row and col removed."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Signed minor: minor(row, col) * (-1)^(row + col)."""
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Compute the inverse via the adjugate.

        The result is cached, since matrices are immutable and shapes invert
        their transform on every intersection and normal query.

        Returns:
            The matrix M^-1 such that M @ M^-1 is the identity.

        Raises:
            NotInvertibleError: If the determinant is zero.
        """
        if self._inverse is None:
            det = self.determinant()
            if det == 0.0:
                raise NotInvertibleError(f"Matrix is not invertible (determinant is 0):\n{self}")
            size = self.size
            if size == 1:
                # No cofactors: the adjugate of a 1x1 matrix is [[1]]
                self._inverse = Matrix([[1.0 / det]])
                return self._inverse
            self._inverse = Matrix(
                [[self.cofactor(col, row) / det for col in range(size)] for row in range(size)]
            )
        return self._inverse

    # =========================================================================
    # Fluent Transforms (4x4 only)
    # =========================================================================

    def translate(self, x: float, y: float, z: float) -> Matrix:
        """Apply a translation after this transform."""
        from raykernel.core.transform import translation

        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        """Apply a scaling after this transform."""
        from raykernel.core.transform import scaling

        return scaling(x, y, z) @ self

    def rotate_x(self, angle: float) -> Matrix:
        """Apply a rotation about the x axis (radians) after this transform."""
        from raykernel.core.transform import rotation_x

        return rotation_x(angle) @ self

    def rotate_y(self, angle: float) -> Matrix:
        """Apply a rotation about the y axis (radians) after this transform."""
        from raykernel.core.transform import rotation_y

        return rotation_y(angle) @ self

    def rotate_z(self, angle: float) -> Matrix:
        """Apply a rotation about the z axis (radians) after this transform."""
        from raykernel.core.transform import rotation_z

        return rotation_z(angle) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        """Apply a shear after this transform."""
        from raykernel.core.transform import shearing

        return shearing(xy, xz, yx, yz, zx, zy) @ self
