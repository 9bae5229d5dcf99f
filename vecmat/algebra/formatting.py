"""
Text and TeX rendering of raw vectors and matrices.

Vectors render one bracketed component per line; matrices render one line
per row, every column right-justified to its widest entry::

    [ 1.00][-2.50]
    [10.00][ 0.00]

The functions accept raw column-major arrays and tolerate ragged input, since
error messages render operands that failed a uniformity check.
"""

from __future__ import annotations

import numbers
from typing import Sequence

from vecmat.core.config import get_settings


def _resolve_decimals(decimals: int | None) -> int:
    if decimals is None:
        decimals = get_settings().DEFAULT_DECIMALS
    return max(decimals, 0)


def format_component(value: float, decimals: int | None = None) -> str:
    """Format a single scalar with a fixed number of decimals."""
    if not isinstance(value, numbers.Real):
        return str(value)
    return f"{value:.{_resolve_decimals(decimals)}f}"


def stringify_vector(vector: Sequence[float], decimals: int | None = None) -> str:
    """
    Render a vector as a column of bracketed, right-justified components.

    Args:
        vector: Raw vector components
        decimals: Decimal places per component (default: settings.DEFAULT_DECIMALS)

    Returns:
        Multi-line string, ``"[]"`` for an empty vector
    """
    if len(vector) == 0:
        return "[]"

    decimals = _resolve_decimals(decimals)
    texts = [format_component(component, decimals) for component in vector]
    width = max(len(text) for text in texts)
    return "\n".join(f"[{text:>{width}}]" for text in texts)


def stringify_matrix(matrix: Sequence[Sequence[float]], decimals: int | None = None) -> str:
    """
    Render a column-major matrix row by row.

    Each column is justified to the width of its longest entry. Columns that
    are shorter than the longest one (ragged input) render blank cells.

    Args:
        matrix: Raw column-major matrix
        decimals: Decimal places per entry (default: settings.DEFAULT_DECIMALS)

    Returns:
        Multi-line string, ``"[]"`` for a matrix without columns
    """
    if len(matrix) == 0:
        return "[]"

    decimals = _resolve_decimals(decimals)
    text_columns = [[format_component(value, decimals) for value in column] for column in matrix]
    widths = [max((len(text) for text in column), default=0) for column in text_columns]
    row_count = max(len(column) for column in text_columns)

    lines = []
    for row in range(row_count):
        cells = []
        for column, width in zip(text_columns, widths):
            text = column[row] if row < len(column) else ""
            cells.append(f"[{text:>{width}}]")
        lines.append("".join(cells))
    return "\n".join(lines)


def stringify(operand: Sequence, decimals: int | None = None) -> str:
    """Render either a raw vector or a raw matrix."""
    if len(operand) > 0 and isinstance(operand[0], Sequence):
        return stringify_matrix(operand, decimals)
    return stringify_vector(operand, decimals)


def tex_vector(vector: Sequence[float], decimals: int | None = None) -> str:
    """Render a vector as an angle-bracketed LaTeX tuple."""
    comps = ", ".join(format_component(c, decimals) for c in vector)
    return f"\\left\\langle {comps} \\right\\rangle"


def tex_matrix(matrix: Sequence[Sequence[float]], decimals: int | None = None) -> str:
    """Render a column-major matrix as a LaTeX pmatrix."""
    row_count = len(matrix[0]) if matrix else 0
    rows_tex = " \\\\ ".join(
        " & ".join(format_component(column[row], decimals) for column in matrix)
        for row in range(row_count)
    )
    return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"
