"""Unit tests for the matrix module.

Tests cover:
- Construction, indexing, and equality
- Matrix-matrix and matrix-tuple products
- Transpose, submatrix, minor, cofactor, and determinant
- Invertibility and inverse, including algebraic identities
- Dimension and singularity errors
"""

import numpy as np
import pytest

from raykernel.core.errors import NotInvertibleError
from raykernel.core.matrix import MATRIX_EPSILON, Matrix
from raykernel.core.tuple import Tuple

A = Matrix(
    [
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 8, 7, 6],
        [5, 4, 3, 2],
    ]
)
B = Matrix(
    [
        [-2, 1, 2, 3],
        [3, 2, 1, -1],
        [4, 3, 6, 5],
        [1, 2, 7, 8],
    ]
)
INVERTIBLE = [
    Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]]),
    Matrix([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]]),
    Matrix([[9, 3, 0, 9], [-5, -2, -6, -3], [-4, 9, 6, 4], [-7, 6, 6, 2]]),
    Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]]),
    Matrix([[1, 5], [-3, 2]]),
    Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]]),
]


class TestMatrixConstruction:
    """Tests for creating and inspecting matrices."""

    def test_4x4(self):
        """Test constructing and indexing a 4x4 matrix."""
        m = Matrix(
            [
                [1, 2, 3, 4],
                [5.5, 6.5, 7.5, 8.5],
                [9, 10, 11, 12],
                [13.5, 14.5, 15.5, 16.5],
            ]
        )
        assert m.size == 4
        assert m[0, 0] == 1
        assert m[0, 3] == 4
        assert m[1, 0] == 5.5
        assert m[1, 2] == 7.5
        assert m[2, 2] == 11
        assert m[3, 0] == 13.5
        assert m[3, 2] == 15.5

    def test_2x2(self):
        """Test constructing a 2x2 matrix."""
        m = Matrix([[-3, 5], [1, -2]])
        assert m.size == 2
        assert (m[0, 0], m[0, 1], m[1, 0], m[1, 1]) == (-3, 5, 1, -2)

    def test_3x3(self):
        """Test constructing a 3x3 matrix."""
        m = Matrix([[-3, 5, 0], [1, -2, -7], [0, 1, 1]])
        assert (m[0, 0], m[1, 1], m[2, 2]) == (-3, -2, 1)

    def test_non_square_rejected(self):
        """Test non-square input raises ValueError."""
        with pytest.raises(ValueError, match="square"):
            Matrix([[1, 2, 3], [4, 5, 6]])

    def test_empty_rejected(self):
        """Test empty input raises ValueError."""
        with pytest.raises(ValueError):
            Matrix([])

    def test_cells_are_read_only(self):
        """Test the backing array cannot be modified in place."""
        m = Matrix.identity(2)
        copy = m.to_numpy()
        copy[0, 0] = 9.0
        assert m[0, 0] == 1.0

    def test_identity(self):
        """Test identity has ones on the diagonal only."""
        assert Matrix.identity(3).rows() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

    def test_zeros(self):
        """Test the zero matrix."""
        assert Matrix.zeros(2).rows() == [[0, 0], [0, 0]]


class TestMatrixEquality:
    """Tests for exact and approximate equality."""

    def test_identical_matrices_equal(self):
        """Test matrices with the same cells are equal and hash equally."""
        same = Matrix(A.rows())
        assert A == same
        assert hash(A) == hash(same)

    def test_different_matrices_not_equal(self):
        """Test matrices with different cells are not equal."""
        other = Matrix([[0, 2, 3, 4], [5, 0, 7, 8], [9, 8, 0, 6], [5, 4, 3, 0]])
        assert A != other

    def test_different_sizes_not_equal(self):
        """Test matrices of different size are never equal."""
        assert Matrix.identity(3) != Matrix.identity(4)
        assert not Matrix.identity(3).approx_eq(Matrix.identity(4))

    def test_approx_eq_tolerance(self):
        """Test approx_eq accepts differences below the matrix epsilon."""
        nudged = Matrix(A.to_numpy() + MATRIX_EPSILON / 2)
        assert A.approx_eq(nudged)
        assert not A.approx_eq(Matrix(A.to_numpy() + 1e-6))


class TestMatrixProducts:
    """Tests for matrix multiplication."""

    def test_multiply_matrices(self):
        """Test the product of two 4x4 matrices."""
        expected = Matrix(
            [
                [20, 22, 50, 48],
                [44, 54, 114, 108],
                [40, 58, 110, 102],
                [16, 26, 46, 42],
            ]
        )
        assert A @ B == expected

    def test_multiplication_is_not_commutative(self):
        """Test A @ B differs from B @ A."""
        assert A @ B != B @ A

    def test_multiply_by_tuple(self):
        """Test a matrix times a tuple."""
        m = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert m @ Tuple(1, 2, 3, 1) == Tuple(18, 24, 33, 1)

    @pytest.mark.parametrize("size", [2, 3, 4])
    def test_identity_is_neutral(self, size):
        """Test identity @ M == M and M @ identity == M."""
        m = Matrix(np.arange(size * size, dtype=float).reshape(size, size) * 1.5 - 2.0)
        assert Matrix.identity(size) @ m == m
        assert m @ Matrix.identity(size) == m

    def test_identity_times_tuple(self):
        """Test identity leaves a tuple unchanged."""
        t = Tuple(1, 2, 3, 4)
        assert Matrix.identity(4) @ t == t

    def test_size_mismatch_raises(self):
        """Test multiplying matrices of different sizes raises ValueError."""
        with pytest.raises(ValueError, match="Cannot multiply"):
            Matrix.identity(3) @ Matrix.identity(4)

    def test_tuple_needs_4x4(self):
        """Test a tuple can only be multiplied by a 4x4 matrix."""
        with pytest.raises(ValueError, match="4-tuple"):
            Matrix.identity(3) @ Tuple(1, 2, 3, 1)


class TestTranspose:
    """Tests for transposition."""

    def test_transpose(self):
        """Test transposing swaps rows and columns."""
        m = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert m.transposed() == expected

    def test_transpose_identity(self):
        """Test the identity is its own transpose."""
        assert Matrix.identity(4).transposed() == Matrix.identity(4)


class TestDeterminant:
    """Tests for submatrix, minor, cofactor, and determinant."""

    def test_determinant_2x2(self):
        """Test the 2x2 base case ad - bc."""
        assert Matrix([[1, 5], [-3, 2]]).determinant() == 17

    def test_submatrix_of_3x3(self):
        """Test removing a row and column from a 3x3 matrix."""
        m = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        assert m.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_submatrix_of_4x4(self):
        """Test removing a row and column from a 4x4 matrix."""
        m = Matrix([[-6, 1, 1, 6], [-8, 5, 8, 6], [-1, 0, 8, 2], [-7, 1, -1, 1]])
        assert m.submatrix(2, 1) == Matrix([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])

    def test_submatrix_of_1x1_raises(self):
        """Test a 1x1 matrix has no submatrix."""
        with pytest.raises(ValueError, match="1x1"):
            Matrix([[3]]).submatrix(0, 0)

    def test_minor(self):
        """Test the minor of a 3x3 matrix."""
        m = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert m.submatrix(1, 0).determinant() == 25
        assert m.minor(1, 0) == 25

    def test_cofactor(self):
        """Test cofactor negates the minor when row + col is odd."""
        m = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert m.minor(0, 0) == -12
        assert m.cofactor(0, 0) == -12
        assert m.minor(1, 0) == 25
        assert m.cofactor(1, 0) == -25

    def test_determinant_3x3(self):
        """Test the determinant of a 3x3 matrix."""
        m = Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])
        assert m.cofactor(0, 0) == 56
        assert m.cofactor(0, 1) == 12
        assert m.cofactor(0, 2) == -46
        assert m.determinant() == -196

    def test_determinant_4x4(self):
        """Test the determinant of a 4x4 matrix."""
        m = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert m.cofactor(0, 0) == 690
        assert m.cofactor(0, 1) == 447
        assert m.cofactor(0, 2) == 210
        assert m.cofactor(0, 3) == 51
        assert m.determinant() == -4071

    def test_determinant_1x1(self):
        """Test a 1x1 determinant is its only cell."""
        assert Matrix([[7.5]]).determinant() == 7.5


class TestInverse:
    """Tests for invertibility and the inverse."""

    def test_invertible(self):
        """Test a matrix with non-zero determinant is invertible."""
        m = Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
        assert m.determinant() == -2120
        assert m.is_invertible()

    def test_not_invertible(self):
        """Test a matrix with zero determinant is not invertible."""
        m = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert m.determinant() == 0
        assert not m.is_invertible()

    def test_inverse_of_singular_matrix_raises(self):
        """Test inverting a singular matrix is an explicit error."""
        m = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        with pytest.raises(NotInvertibleError, match="not invertible"):
            m.inverse()

    def test_not_invertible_error_is_value_error(self):
        """Test callers can catch the error as ValueError."""
        with pytest.raises(ValueError):
            Matrix.zeros(4).inverse()

    def test_inverse_values(self):
        """Test the inverse is the adjugate divided by the determinant."""
        m = INVERTIBLE[0]
        inverse = m.inverse()
        assert m.determinant() == 532
        assert m.cofactor(2, 3) == -160
        assert abs(inverse[3, 2] - (-160 / 532)) < MATRIX_EPSILON
        assert m.cofactor(3, 2) == 105
        assert abs(inverse[2, 3] - 105 / 532) < MATRIX_EPSILON
        expected = Matrix(
            [
                [116 / 532, 240 / 532, 128 / 532, -24 / 532],
                [-430 / 532, -775 / 532, -236 / 532, 277 / 532],
                [-42 / 532, -119 / 532, -28 / 532, 105 / 532],
                [-278 / 532, -433 / 532, -160 / 532, 163 / 532],
            ]
        )
        assert inverse.approx_eq(expected)

    def test_inverse_of_second_matrix(self):
        """Test another known inverse."""
        expected = Matrix(
            [
                [-0.15385, -0.15385, -0.28205, -0.53846],
                [-0.07692, 0.12308, 0.02564, 0.03077],
                [0.35897, 0.35897, 0.43590, 0.92308],
                [-0.69231, -0.69231, -0.76923, -1.92308],
            ]
        )
        assert INVERTIBLE[1].inverse().approx_eq(expected, epsilon=1e-5)

    def test_inverse_is_cached(self):
        """Test repeated inverse() calls return the same object."""
        m = INVERTIBLE[2]
        assert m.inverse() is m.inverse()

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_inverse_of_inverse(self, m):
        """Test inverse(inverse(M)) is approximately M."""
        assert m.inverse().inverse().approx_eq(m, epsilon=1e-10)

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_matrix_times_inverse_is_identity(self, m):
        """Test M @ inverse(M) is approximately the identity."""
        assert (m @ m.inverse()).approx_eq(Matrix.identity(m.size), epsilon=1e-10)

    def test_product_times_inverse_restores(self):
        """Test (A @ B) @ inverse(B) is approximately A."""
        a = INVERTIBLE[3]
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        assert ((a @ b) @ b.inverse()).approx_eq(a, epsilon=1e-10)

    def test_inverse_of_product(self):
        """Test inverse(A @ B) is approximately inverse(B) @ inverse(A)."""
        a = INVERTIBLE[0]
        b = INVERTIBLE[1]
        assert (a @ b).inverse().approx_eq(b.inverse() @ a.inverse(), epsilon=1e-10)

    def test_inverse_of_transpose(self):
        """Test inverse and transpose commute."""
        m = INVERTIBLE[2]
        assert m.transposed().inverse().approx_eq(m.inverse().transposed(), epsilon=1e-10)


class TestSmallInverse:
    """Tests for inverting a 1x1 matrix."""

    def test_inverse_1x1(self):
        """Test a 1x1 matrix inverts to its reciprocal."""
        assert Matrix([[2.0]]).inverse() == Matrix([[0.5]])

    def test_inverse_1x1_round_trip(self):
        """Test M @ inverse(M) is the 1x1 identity."""
        m = Matrix([[-4.0]])
        assert m @ m.inverse() == Matrix.identity(1)

    def test_inverse_1x1_zero_raises(self):
        """Test a zero 1x1 matrix is singular."""
        with pytest.raises(NotInvertibleError, match="not invertible"):
            Matrix([[0.0]]).inverse()
