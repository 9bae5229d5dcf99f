"""
Matrix value types: Matrix, SquareMatrix, Matrix2, Matrix3, Matrix4.

Matrices are stored column-major: ``columns[col][row]``. Constructors take
columns, not rows; use :meth:`Matrix.from_rows` or :meth:`Matrix.from_numpy`
for row-major input.

Squareness is a type-level property: ``determinant`` and ``inverse`` exist
only on :class:`SquareMatrix`, which can only be obtained through a
successful squareness check (its constructor or :meth:`Matrix.as_square`).
"""

from __future__ import annotations

from functools import reduce
from collections.abc import Iterable
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator

from vecmat.core.config import get_settings
from vecmat.core.logging import get_context_logger

from . import operations as ops
from .checks import (
    MIN_DIMENSION,
    verify_exact_dimensions,
    verify_min_dimensions,
    verify_square,
    verify_valid_column,
    verify_valid_coordinate,
    verify_valid_row,
)
from .formatting import stringify_matrix, tex_matrix
from .value import AlgebraValue, ToleranceMode, default_tolerance, is_scalar, within_tolerance
from .vector import Vector, Vector2, Vector3, Vector4


def _as_column(column: Any) -> list[Any]:
    if isinstance(column, Vector):
        return list(column.components)
    if isinstance(column, np.ndarray):
        return column.tolist()
    return list(column)


class Matrix(BaseModel, AlgebraValue):
    """
    Matrix of M rows and N columns (M, N >= 2).

    Construction accepts a column-major 2-D array, column vectors given
    positionally or as an iterable, or another matrix::

        Matrix([[1, 2], [3, 4]])          # columns (1, 2) and (3, 4)
        Matrix(Vector(1, 2), Vector(3, 4))
        Matrix(other)
    """

    model_config = ConfigDict(frozen=True)

    columns: tuple[tuple[float, ...], ...]

    # Vector type returned by matrix-vector products, row and column access
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector

    def __init__(self, *args: Any, columns: Iterable[Any] | None = None) -> None:
        """Initialize a Matrix from columns."""
        if columns is not None and args:
            raise TypeError("Matrix accepts either columns or positional arguments, not both")

        if columns is None:
            if len(args) == 1 and not isinstance(args[0], Vector):
                columns = args[0]
            else:
                columns = args

        raw = self._parse_columns(columns)
        self._verify_shape(raw)
        super().__init__(columns=tuple(tuple(column) for column in raw))

    @staticmethod
    def _parse_columns(columns: Any) -> list[list[Any]]:
        if isinstance(columns, Matrix):
            return [list(column) for column in columns.columns]
        if isinstance(columns, np.ndarray):
            return columns.tolist()
        return [_as_column(column) for column in columns]

    @classmethod
    def _verify_shape(cls, raw: Any) -> None:
        verify_min_dimensions(raw, MIN_DIMENSION, MIN_DIMENSION)

    @field_validator("columns")
    @classmethod
    def _validate_columns(cls, value: tuple[tuple[float, ...], ...]) -> tuple[tuple[float, ...], ...]:
        cls._verify_shape(value)
        return value

    # Alternate constructors

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """
        Build a matrix from row-major input.

        Example:
            >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).shape
            (2, 3)
        """
        return cls(ops.transpose([_as_column(row) for row in rows]))

    @classmethod
    def from_numpy(cls, array: Any) -> Matrix:
        """
        Build a matrix from a 2-D array in numpy's row-major convention.

        Raises:
            ValueError: If the array is not two-dimensional
        """
        values = np.asarray(array, dtype=float)
        if values.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got {values.ndim} dimension(s)")
        return cls(values.T.tolist())

    @classmethod
    def chain(cls, first: Matrix, *rest: Matrix) -> Matrix:
        """
        Multiply matrices left to right: ``chain(A, B, C) == A * B * C``.

        Applied to a vector, the rightmost matrix acts first.
        """
        product = reduce(lambda left, right: left.multiply(right), rest, first)
        return product if isinstance(product, cls) else cls(product)

    def _like(self, columns: list[list[float]]) -> Matrix:
        """Same type when the shape is preserved, plain Matrix otherwise."""
        rows = len(columns[0]) if columns else 0
        if (rows, len(columns)) == self.shape:
            return type(self)(columns)
        return Matrix(columns)

    # Accessors

    @property
    def rows(self) -> int:
        return len(self.columns[0])

    @property
    def cols(self) -> int:
        return len(self.columns)

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)"""
        return (self.rows, self.cols)

    def get(self, row: int, col: int) -> float:
        """
        Element at ``(row, col)``.

        Raises:
            IndexOutOfBoundsError: If the coordinate lies outside the matrix
        """
        verify_valid_coordinate(self.columns, row, col)
        return self.columns[col][row]

    def __getitem__(self, key: tuple[int, int]) -> float:
        """Element access: m[row, col]"""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        row, col = key
        return self.get(row, col)

    def get_row(self, row: int) -> Vector:
        verify_valid_row(self.columns, row)
        return self.VECTOR_TYPE([column[row] for column in self.columns])

    def get_col(self, col: int) -> Vector:
        verify_valid_column(self.columns, col)
        return self.VECTOR_TYPE(self.columns[col])

    # Matrix operations

    def invert(self) -> Matrix:
        """Negate every element."""
        return self._like(ops.negate_matrix(self.columns))

    def add(self, other: Matrix) -> Matrix:
        """
        Raises:
            DimensionMismatchError: If the shapes differ
        """
        return self._like(ops.add_matrices(self.columns, other.columns))

    def subtract(self, other: Matrix) -> Matrix:
        """
        Raises:
            DimensionMismatchError: If the shapes differ
        """
        return self._like(ops.subtract_matrices(self.columns, other.columns))

    def scale(self, scalar: float) -> Matrix:
        return self._like(ops.scale_matrix(self.columns, scalar))

    def multiply(self, other: Vector | Matrix) -> Any:
        """
        Matrix-vector or matrix-matrix product.

        Args:
            other: Vector with ``cols`` components, or a matrix with ``cols`` rows

        Returns:
            Vector with ``rows`` components, or a ``rows`` x ``other.cols`` matrix

        Raises:
            IncompatibleShapeError: If the inner dimensions differ
        """
        if isinstance(other, Vector):
            return self.VECTOR_TYPE(ops.multiply_matrix_vector(self.columns, other.components))
        if isinstance(other, Matrix):
            return self._like(ops.multiply_matrices(self.columns, other.columns))
        raise TypeError(f"Cannot multiply a matrix by {type(other).__name__}")

    def transpose(self) -> Matrix:
        """Swap rows and columns."""
        return self._like(ops.transpose(self.columns))

    def as_square(self) -> SquareMatrix:
        """
        View this matrix as a SquareMatrix.

        Raises:
            NotSquareError: If rows != cols
        """
        if isinstance(self, SquareMatrix):
            return self
        return SquareMatrix(self.columns)

    # Comparison

    def compare(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str = ToleranceMode.ABSOLUTE,
    ) -> bool:
        """Compare matrices element-wise within a tolerance; shapes must match."""
        if not isinstance(other, Matrix):
            return False

        if self.shape != other.shape:
            return False

        tol = default_tolerance() if tolerance is None else tolerance
        return all(
            within_tolerance(a, b, tol, mode)
            for col_a, col_b in zip(self.columns, other.columns)
            for a, b in zip(col_a, col_b)
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.columns == other.columns

    def __hash__(self) -> int:
        return hash((Matrix, self.columns))

    # Conversions

    def to_array(self) -> list[list[float]]:
        """Column-major copy: ``to_array()[col][row]``."""
        return [list(column) for column in self.columns]

    def to_numpy(self) -> np.ndarray:
        """Convert to a row-major NumPy array of shape (rows, cols)."""
        return np.array(self.columns, dtype=float).T.copy()

    def to_string(self, decimals: int | None = None) -> str:
        return stringify_matrix(self.columns, decimals)

    def to_tex(self, decimals: int | None = None) -> str:
        return tex_matrix(self.columns, decimals)

    def __str__(self) -> str:
        return self.to_string()

    # Arithmetic operators

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        """Scalar, matrix-vector or matrix-matrix multiplication."""
        if is_scalar(other):
            return self.scale(other)
        if isinstance(other, (Vector, Matrix)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, (Vector, Matrix)):
            return self.multiply(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self.invert()


class SquareMatrix(Matrix):
    """
    Matrix with as many rows as columns.

    Adds the operations only defined for square matrices: determinant,
    inverse, trace, minors and cofactors.
    """

    # Exact size enforced by the fixed-size subclasses
    FIXED_DIMENSION: ClassVar[int | None] = None

    @classmethod
    def _verify_shape(cls, raw: Any) -> None:
        super()._verify_shape(raw)
        verify_square(raw)
        if cls.FIXED_DIMENSION is not None:
            verify_exact_dimensions(raw, cls.FIXED_DIMENSION, cls.FIXED_DIMENSION)

    @classmethod
    def identity(cls, dimension: int | None = None) -> SquareMatrix:
        """
        Identity matrix.

        Args:
            dimension: Size of the matrix; fixed-size subclasses supply their own
        """
        if dimension is None:
            if cls.FIXED_DIMENSION is None:
                raise TypeError("identity() requires a dimension for SquareMatrix")
            dimension = cls.FIXED_DIMENSION
        return cls(ops.identity(dimension))

    @property
    def dimension(self) -> int:
        return self.cols

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix without ``row`` and ``col``."""
        return ops.minor(self.columns, row, col)

    def cofactor(self, row: int, col: int) -> float:
        """Signed minor: ``(-1) ** (row + col) * minor(row, col)``."""
        return ops.cofactor(self.columns, row, col)

    def determinant(self) -> float:
        """
        Determinant by recursive Laplace cofactor expansion.

        The expansion is O(n!); a warning is logged for matrices larger than
        ``settings.COFACTOR_WARN_DIMENSION``.
        """
        limit = get_settings().COFACTOR_WARN_DIMENSION
        if self.dimension > limit:
            logger = get_context_logger(__name__, dimension=self.dimension, limit=limit)
            logger.warning(
                "Cofactor expansion of a %dx%d matrix; cost grows factorially",
                self.dimension,
                self.dimension,
            )
        return ops.determinant(self.columns)

    def inverse(self) -> SquareMatrix:
        """
        Inverse via the adjugate.

        Raises:
            SingularMatrixError: If the determinant is exactly zero
        """
        return type(self)(ops.inverse(self.columns))

    def trace(self) -> float:
        return ops.trace(self.columns)


class Matrix2(SquareMatrix):
    """2x2 matrix; products with a Vector2 return a Vector2."""

    FIXED_DIMENSION: ClassVar[int | None] = 2
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector2


class Matrix3(SquareMatrix):
    """3x3 matrix; products with a Vector3 return a Vector3."""

    FIXED_DIMENSION: ClassVar[int | None] = 3
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector3


class Matrix4(SquareMatrix):
    """4x4 matrix; products with a Vector4 return a Vector4."""

    FIXED_DIMENSION: ClassVar[int | None] = 4
    VECTOR_TYPE: ClassVar[type[Vector]] = Vector4
