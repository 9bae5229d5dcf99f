"""
Library exceptions.

Every invariant violation raised by vecmat derives from :class:`AlgebraError`,
so callers may branch on the whole family with a single ``except`` clause or
on a specific shape problem.
"""

from typing import Any, Dict, Optional, Sequence


def _render(operand: Sequence) -> str:
    """Render a raw operand for inclusion in an error message."""
    # Imported lazily: the formatting module lives in the algebra package,
    # which itself imports this module.
    from vecmat.algebra.formatting import stringify
    from .config import get_settings

    return stringify(operand, get_settings().ERROR_DECIMALS)


def _shape(operand: Sequence) -> tuple[int, ...]:
    if len(operand) > 0 and isinstance(operand[0], Sequence):
        return (len(operand[0]), len(operand))
    return (len(operand),)


class AlgebraError(ValueError):
    """Base exception for vector and matrix invariant violations"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BelowMinimumDimensionError(AlgebraError):
    """Raised when a vector or matrix is smaller than the required size"""

    def __init__(self, operand: Sequence, minimum: Sequence[int]):
        if len(minimum) == 1:
            shape: tuple[int, ...] = (len(operand),)
            message = (
                f"Expected vector\n{_render(operand)}\nof dimension {shape[0]} "
                f"to have a dimension of at least {minimum[0]}"
            )
        else:
            shape = (len(operand[0]) if len(operand) > 0 else 0, len(operand))
            message = (
                f"Expected matrix\n{_render(operand)}\nof dimensions {shape[0]}x{shape[1]} "
                f"to have dimensions of at least {minimum[0]}x{minimum[1]}"
            )
        super().__init__(message, details={"shape": shape, "minimum": tuple(minimum)})


class NonUniformShapeError(AlgebraError):
    """Raised when the columns of a matrix differ in length"""

    def __init__(self, matrix: Sequence[Sequence[float]]):
        lengths = [len(column) for column in matrix]
        super().__init__(
            f"Expected a matrix with columns of equal length but received:\n{_render(matrix)}",
            details={"column_lengths": lengths},
        )


class NotSquareError(AlgebraError):
    """Raised when a square-only operation receives a non-square matrix"""

    def __init__(self, matrix: Sequence[Sequence[float]]):
        super().__init__(
            f"Expected a square matrix but received matrix:\n{_render(matrix)}",
            details={"shape": _shape(matrix)},
        )


class DimensionMismatchError(AlgebraError):
    """Raised when operands expected to share a shape do not"""

    @classmethod
    def between(cls, first: Sequence, second: Sequence) -> "DimensionMismatchError":
        kind = "matrices" if len(_shape(first)) == 2 else "vectors"
        return cls(
            f"Expected {kind} with identical dimensions but received:\n"
            f"{_render(first)}\nand:\n{_render(second)}",
            details={"shapes": (_shape(first), _shape(second))},
        )

    @classmethod
    def expected_vector(cls, vector: Sequence[float], length: int) -> "DimensionMismatchError":
        return cls(
            f"Expected a vector with {length} rows, but received:\n{_render(vector)}",
            details={"shape": _shape(vector), "expected": (length,)},
        )

    @classmethod
    def expected_matrix(
        cls, matrix: Sequence[Sequence[float]], rows: int, cols: int
    ) -> "DimensionMismatchError":
        return cls(
            f"Expected a uniform matrix with {rows} rows and {cols} cols, "
            f"but received:\n{_render(matrix)}",
            details={"columns": len(matrix), "expected": (rows, cols)},
        )


class IncompatibleShapeError(AlgebraError):
    """Raised when operand shapes cannot be multiplied"""

    def __init__(self, matrix: Sequence[Sequence[float]], other: Sequence):
        if len(_shape(other)) == 1:
            message = (
                "Expected the number of columns in a matrix to equal the number of rows "
                f"in the vector but received:\n{_render(matrix)}\nand:\n{_render(other)}"
            )
        else:
            message = (
                "Expected matrices with dimensions compatible for multiplication "
                f"but received:\n{_render(matrix)}\nand:\n{_render(other)}"
            )
        super().__init__(message, details={"shapes": (_shape(matrix), _shape(other))})


class IndexOutOfBoundsError(AlgebraError, IndexError):
    """Raised when a row, column or component index is outside the valid range"""

    @classmethod
    def vector_component(cls, vector: Sequence[float], index: int) -> "IndexOutOfBoundsError":
        return cls(
            f"Position at row={index} is out of bounds of the vector:\n{_render(vector)}",
            details={"index": index, "shape": _shape(vector)},
        )

    @classmethod
    def matrix_coordinate(
        cls, matrix: Sequence[Sequence[float]], row: int, col: int
    ) -> "IndexOutOfBoundsError":
        return cls(
            f"Position at row={row}, col={col} is out of bounds of the matrix:\n{_render(matrix)}",
            details={"row": row, "col": col, "shape": _shape(matrix)},
        )

    @classmethod
    def matrix_row(cls, matrix: Sequence[Sequence[float]], row: int) -> "IndexOutOfBoundsError":
        return cls(
            f"Row at position {row} does not exist in the matrix:\n{_render(matrix)}",
            details={"row": row, "shape": _shape(matrix)},
        )

    @classmethod
    def matrix_column(cls, matrix: Sequence[Sequence[float]], col: int) -> "IndexOutOfBoundsError":
        return cls(
            f"Column at position {col} does not exist in the matrix:\n{_render(matrix)}",
            details={"col": col, "shape": _shape(matrix)},
        )


class SingularMatrixError(AlgebraError):
    """Raised when an inverse is requested for a matrix with a zero determinant"""

    def __init__(self, matrix: Sequence[Sequence[float]]):
        super().__init__(
            f"Expected an invertible matrix but received:\n{_render(matrix)}",
            details={"shape": _shape(matrix)},
        )
