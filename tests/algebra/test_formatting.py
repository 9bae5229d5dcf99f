"""Tests for text and TeX rendering."""

from vecmat.algebra import Matrix, Vector
from vecmat.algebra.formatting import format_component, stringify, stringify_matrix, stringify_vector


class TestTextRendering:
    """Test bracketed, column-aligned output."""

    def test_format_component(self):
        assert format_component(1.23456, 2) == "1.23"
        assert format_component(-0.5, 0) == "-0"

    def test_vector_components_right_justified(self):
        assert stringify_vector([1, -22.5], 1) == "[  1.0]\n[-22.5]"

    def test_empty_vector(self):
        assert stringify_vector([]) == "[]"

    def test_matrix_rows_with_per_column_width(self):
        # columns (1, 10) and (-2.5, 0)
        text = stringify_matrix([[1, 10], [-2.5, 0]], 2)
        assert text == "[ 1.00][-2.50]\n[10.00][ 0.00]"

    def test_ragged_matrix_renders_blank_cells(self):
        text = stringify_matrix([[1, 2], [3]], 0)
        assert text == "[1][3]\n[2][ ]"

    def test_stringify_dispatch(self):
        assert stringify([1, 2], 0) == "[1]\n[2]"
        assert stringify([[1, 2], [3, 4]], 0) == "[1][3]\n[2][4]"

    def test_str_uses_default_decimals(self):
        assert str(Vector(1, 2)) == "[1.000000]\n[2.000000]"

    def test_to_string_with_decimals(self):
        matrix = Matrix.from_rows([[1, 2], [3, 4]])
        assert matrix.to_string(1) == "[1.0][2.0]\n[3.0][4.0]"

    def test_default_decimals_from_settings(self, fresh_settings):
        fresh_settings(VECMAT_DEFAULT_DECIMALS="1")
        assert str(Vector(1, 2)) == "[1.0]\n[2.0]"


class TestTexRendering:
    """Test LaTeX output."""

    def test_vector_tex(self):
        assert Vector(1, 2).to_tex(1) == "\\left\\langle 1.0, 2.0 \\right\\rangle"

    def test_matrix_tex_is_row_wise(self):
        matrix = Matrix.from_rows([[1, 2], [3, 4]])
        assert matrix.to_tex(0) == "\\begin{pmatrix} 1 & 2 \\\\ 3 & 4 \\end{pmatrix}"
