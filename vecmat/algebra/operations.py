"""
Raw-array kernels for vector and matrix arithmetic.

These functions implement the algebra on plain sequences so that the value
types in :mod:`vecmat.algebra.vector` and :mod:`vecmat.algebra.matrix` stay
thin. Every kernel validates its operands first and returns freshly
allocated lists; inputs are never modified.

Matrices are column-major: ``matrix[col][row]``.

Determinant and inverse use exact Laplace cofactor expansion and the
adjugate. This is O(n!) and intended for the small sizes (2 to 4) used by
geometry code; it is not a replacement for pivoted elimination on large or
ill-conditioned systems.
"""

from __future__ import annotations

import math

import numpy as np

from vecmat.core.logging import get_logger

from .checks import (
    RawMatrix,
    RawVector,
    verify_equal_dimensions,
    verify_equal_lengths,
    verify_invertible,
    verify_min_length,
    verify_operable,
    verify_operable_matrices,
    verify_square,
    verify_uniform,
    verify_valid_coordinate,
)

logger = get_logger(__name__)


# =============================================================================
# VECTORS
# =============================================================================


def magnitude(vector: RawVector) -> float:
    """Euclidean norm ``sqrt(sum(v_i ** 2))``."""
    return math.sqrt(sum(component * component for component in vector))


def normalize(vector: RawVector) -> list[float]:
    """
    Divide every component by the magnitude of the vector.

    A zero vector is not guarded: its components come back as NaN.
    """
    length = magnitude(vector)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (np.asarray(vector, dtype=float) / length).tolist()


def negate_vector(vector: RawVector) -> list[float]:
    return [-component for component in vector]


def scale_vector(vector: RawVector, scalar: float) -> list[float]:
    return [scalar * component for component in vector]


def add_vectors(first: RawVector, second: RawVector) -> list[float]:
    verify_equal_lengths(first, second)
    return [a + b for a, b in zip(first, second)]


def subtract_vectors(first: RawVector, second: RawVector) -> list[float]:
    verify_equal_lengths(first, second)
    return [a - b for a, b in zip(first, second)]


def dot(first: RawVector, second: RawVector) -> float:
    """Sum of the component-wise products."""
    verify_equal_lengths(first, second)
    return sum(a * b for a, b in zip(first, second))


def cross(first: RawVector, second: RawVector) -> list[float]:
    """
    3D cross product of the first three components of each operand.

    Both operands need at least three components; anything beyond the third
    is ignored and the result always has exactly three.
    """
    verify_min_length(first, 3)
    verify_min_length(second, 3)

    return [
        first[1] * second[2] - first[2] * second[1],
        first[2] * second[0] - first[0] * second[2],
        first[0] * second[1] - first[1] * second[0],
    ]


# =============================================================================
# MATRICES
# =============================================================================


def negate_matrix(matrix: RawMatrix) -> list[list[float]]:
    return [[-value for value in column] for column in matrix]


def add_matrices(first: RawMatrix, second: RawMatrix) -> list[list[float]]:
    verify_equal_dimensions(first, second)
    return [[a + b for a, b in zip(col_a, col_b)] for col_a, col_b in zip(first, second)]


def subtract_matrices(first: RawMatrix, second: RawMatrix) -> list[list[float]]:
    verify_equal_dimensions(first, second)
    return add_matrices(first, negate_matrix(second))


def scale_matrix(matrix: RawMatrix, scalar: float) -> list[list[float]]:
    verify_uniform(matrix)
    return [[scalar * value for value in column] for column in matrix]


def transpose(matrix: RawMatrix) -> list[list[float]]:
    """Swap rows and columns."""
    verify_uniform(matrix)
    if len(matrix) == 0:
        return []
    return [[column[row] for column in matrix] for row in range(len(matrix[0]))]


def multiply_matrix_vector(matrix: RawMatrix, vector: RawVector) -> list[float]:
    """
    Product ``matrix * vector``.

    ``result[r] = sum(matrix[c][r] * vector[c] for c in columns)``; the
    result has one component per matrix row.
    """
    verify_operable(matrix, vector)
    rows = len(matrix[0]) if len(matrix) > 0 else 0

    result = [0.0] * rows
    for col, column in enumerate(matrix):
        weight = vector[col]
        for row in range(rows):
            result[row] += column[row] * weight
    return result


def multiply_matrices(first: RawMatrix, second: RawMatrix) -> list[list[float]]:
    """
    Product ``first * second``.

    ``result[c][r] = sum(first[i][r] * second[c][i] for i in inner)``; the
    result has the rows of ``first`` and the columns of ``second``.
    """
    verify_operable_matrices(first, second)
    return [multiply_matrix_vector(first, column) for column in second]


def identity(dimension: int) -> list[list[float]]:
    """The ``dimension`` x ``dimension`` identity matrix."""
    return [[1.0 if row == col else 0.0 for row in range(dimension)] for col in range(dimension)]


def trace(matrix: RawMatrix) -> float:
    """Sum of the diagonal entries of a square matrix."""
    verify_square(matrix)
    return sum(matrix[i][i] for i in range(len(matrix)))


# =============================================================================
# COFACTOR EXPANSION
# =============================================================================


def submatrix(matrix: RawMatrix, row: int, col: int) -> list[list[float]]:
    """The matrix left after deleting row ``row`` and column ``col``."""
    verify_uniform(matrix)
    verify_valid_coordinate(matrix, row, col)

    return [
        [value for r, value in enumerate(column) if r != row]
        for c, column in enumerate(matrix)
        if c != col
    ]


def minor(matrix: RawMatrix, row: int, col: int) -> float:
    """Determinant of :func:`submatrix` at ``(row, col)``."""
    verify_square(matrix)
    verify_valid_coordinate(matrix, row, col)

    return determinant(submatrix(matrix, row, col))


def cofactor(matrix: RawMatrix, row: int, col: int) -> float:
    """Signed minor: ``(-1) ** (row + col) * minor(row, col)``."""
    verify_square(matrix)
    verify_valid_coordinate(matrix, row, col)

    sign = -1.0 if (row + col) % 2 else 1.0
    return sign * minor(matrix, row, col)


def determinant(matrix: RawMatrix) -> float:
    """
    Determinant by recursive Laplace expansion along the first stored column.

    Closed forms are used for 1x1 and 2x2 matrices; larger matrices expand as
    ``sum(matrix[0][r] * cofactor(matrix, r, 0))``.

    Raises:
        NonUniformShapeError: If the matrix is not uniform
        NotSquareError: If the matrix is not square
    """
    verify_square(matrix)
    dimension = len(matrix)

    if dimension == 1:
        return matrix[0][0]
    if dimension == 2:
        return matrix[0][0] * matrix[1][1] - matrix[1][0] * matrix[0][1]

    return sum(matrix[0][row] * cofactor(matrix, row, 0) for row in range(dimension))


def inverse(matrix: RawMatrix) -> list[list[float]]:
    """
    Inverse via the adjugate: ``adj(matrix) / det(matrix)``.

    The adjugate is the transposed matrix of cofactors, so the entry stored
    at ``[col][row]`` is ``cofactor(matrix, col, row)``.

    Raises:
        NonUniformShapeError: If the matrix is not uniform
        NotSquareError: If the matrix is not square
        SingularMatrixError: If the determinant is exactly zero
    """
    verify_square(matrix)
    det = verify_invertible(matrix)

    dimension = len(matrix)
    adjugate = [
        [cofactor(matrix, col, row) for row in range(dimension)]
        for col in range(dimension)
    ]
    logger.debug("Inverting %dx%d matrix with determinant %r", dimension, dimension, det)
    return scale_matrix(adjugate, 1.0 / det)
