"""
Invariant checks over raw vectors and matrices.

Every public vector/matrix operation runs the relevant subset of these
validators before it reads any data. A validator returns ``None`` when the
invariant holds and raises the matching :mod:`vecmat.core.errors` exception
otherwise; none of them have any other side effect.

Raw matrices are column-major: ``matrix[col][row]``.
"""

from __future__ import annotations

from typing import Final, Sequence

from vecmat.core.errors import (
    BelowMinimumDimensionError,
    DimensionMismatchError,
    IncompatibleShapeError,
    IndexOutOfBoundsError,
    NonUniformShapeError,
    NotSquareError,
    SingularMatrixError,
)

RawVector = Sequence[float]
RawMatrix = Sequence[Sequence[float]]

# Smallest length a vector, and smallest row/column count a matrix, may have
MIN_DIMENSION: Final[int] = 2


# =============================================================================
# PREDICATES
# =============================================================================


def is_uniform(matrix: RawMatrix) -> bool:
    """True if every column has the length of the first column."""
    if len(matrix) == 0:
        return True
    expected = len(matrix[0])
    return all(len(column) == expected for column in matrix)


def is_square(matrix: RawMatrix) -> bool:
    """True if the matrix is uniform and has as many rows as columns."""
    if not is_uniform(matrix):
        return False
    return len(matrix) == 0 or len(matrix) == len(matrix[0])


# =============================================================================
# SHAPE
# =============================================================================


def verify_uniform(matrix: RawMatrix) -> None:
    """
    Verify that all columns of the matrix have the same length.

    The expected length is that of the first column; a matrix without columns
    passes.

    Raises:
        NonUniformShapeError: If any column differs in length
    """
    if not is_uniform(matrix):
        raise NonUniformShapeError(matrix)


def verify_square(matrix: RawMatrix) -> None:
    """
    Verify that the matrix is uniform and square.

    Raises:
        NonUniformShapeError: If the columns differ in length
        NotSquareError: If the column count differs from the row count
    """
    verify_uniform(matrix)
    if len(matrix) == 0:
        return
    if len(matrix) != len(matrix[0]):
        raise NotSquareError(matrix)


def verify_min_length(vector: RawVector, min_length: int) -> None:
    """
    Raises:
        BelowMinimumDimensionError: If the vector is shorter than ``min_length``
    """
    if len(vector) < min_length:
        raise BelowMinimumDimensionError(vector, (min_length,))


def verify_min_dimensions(matrix: RawMatrix, min_rows: int, min_cols: int) -> None:
    """
    Verify that a uniform matrix is at least ``min_rows`` x ``min_cols``.

    Raises:
        NonUniformShapeError: If the columns differ in length
        BelowMinimumDimensionError: If either dimension is too small
    """
    verify_uniform(matrix)
    rows = len(matrix[0]) if len(matrix) > 0 else 0
    if len(matrix) < min_cols or rows < min_rows:
        raise BelowMinimumDimensionError(matrix, (min_rows, min_cols))


def verify_exact_length(vector: RawVector, length: int) -> None:
    """
    Raises:
        DimensionMismatchError: If the vector does not have exactly ``length`` components
    """
    if len(vector) != length:
        raise DimensionMismatchError.expected_vector(vector, length)


def verify_exact_dimensions(matrix: RawMatrix, rows: int, cols: int) -> None:
    """
    Verify that the matrix is uniform with exactly ``rows`` x ``cols`` entries.

    A non-uniform matrix is reported as a dimension mismatch as well, since
    it cannot have the requested shape.

    Raises:
        DimensionMismatchError: If the matrix does not have the requested shape
    """
    if not is_uniform(matrix) or len(matrix) != cols or len(matrix[0]) != rows:
        raise DimensionMismatchError.expected_matrix(matrix, rows, cols)


def verify_equal_lengths(first: RawVector, second: RawVector) -> None:
    """
    Raises:
        DimensionMismatchError: If the two vectors differ in length
    """
    if len(first) != len(second):
        raise DimensionMismatchError.between(first, second)


def verify_equal_dimensions(first: RawMatrix, second: RawMatrix) -> None:
    """
    Verify that two matrices are uniform and share a shape.

    Raises:
        NonUniformShapeError: If either matrix is not uniform
        DimensionMismatchError: If the shapes differ
    """
    verify_uniform(first)
    verify_uniform(second)
    if len(first) != len(second) or (len(first) > 0 and len(first[0]) != len(second[0])):
        raise DimensionMismatchError.between(first, second)


def verify_operable(matrix: RawMatrix, vector: RawVector) -> None:
    """
    Verify that ``matrix * vector`` is defined (columns == vector length).

    Raises:
        NonUniformShapeError: If the matrix is not uniform
        IncompatibleShapeError: If the inner dimensions differ
    """
    verify_uniform(matrix)
    if len(matrix) != len(vector):
        raise IncompatibleShapeError(matrix, vector)


def verify_operable_matrices(first: RawMatrix, second: RawMatrix) -> None:
    """
    Verify that ``first * second`` is defined (columns of first == rows of second).

    Raises:
        NonUniformShapeError: If either matrix is not uniform
        IncompatibleShapeError: If the inner dimensions differ
    """
    verify_uniform(first)
    verify_uniform(second)
    second_rows = len(second[0]) if len(second) > 0 else 0
    if len(first) != second_rows:
        raise IncompatibleShapeError(first, second)


# =============================================================================
# COORDINATES
# =============================================================================


def _in_range(index: int, size: int) -> bool:
    return 0 <= index < size


def verify_valid_index(vector: RawVector, index: int) -> None:
    """
    Raises:
        IndexOutOfBoundsError: If ``index`` is negative or >= the vector length
    """
    if not _in_range(index, len(vector)):
        raise IndexOutOfBoundsError.vector_component(vector, index)


def verify_valid_coordinate(matrix: RawMatrix, row: int, col: int) -> None:
    """
    Raises:
        IndexOutOfBoundsError: If ``(row, col)`` lies outside the matrix
    """
    if not _in_range(col, len(matrix)) or not _in_range(row, len(matrix[col])):
        raise IndexOutOfBoundsError.matrix_coordinate(matrix, row, col)


def verify_valid_row(matrix: RawMatrix, row: int) -> None:
    """
    Raises:
        IndexOutOfBoundsError: If the matrix has no row ``row``
    """
    if len(matrix) == 0 or not _in_range(row, len(matrix[0])):
        raise IndexOutOfBoundsError.matrix_row(matrix, row)


def verify_valid_column(matrix: RawMatrix, col: int) -> None:
    """
    Raises:
        IndexOutOfBoundsError: If the matrix has no column ``col``
    """
    if not _in_range(col, len(matrix)):
        raise IndexOutOfBoundsError.matrix_column(matrix, col)


# =============================================================================
# INVERTIBILITY
# =============================================================================


def verify_invertible(matrix: RawMatrix) -> float:
    """
    Verify that the determinant of the matrix is not exactly zero.

    No epsilon is applied: near-singular matrices are inverted and only an
    exact zero determinant is rejected.

    Returns:
        The determinant of the matrix

    Raises:
        NonUniformShapeError: If the matrix is not uniform
        NotSquareError: If the matrix is not square
        SingularMatrixError: If the determinant is 0.0
    """
    from .operations import determinant

    det = determinant(matrix)
    if det == 0.0:
        raise SingularMatrixError(matrix)
    return det
