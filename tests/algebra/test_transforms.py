"""Tests for the affine transform builders."""

import logging
import math

import pytest

from vecmat.algebra import (
    Matrix2,
    Matrix3,
    Matrix4,
    TransformBuilder2,
    TransformBuilder3,
    TransformBuilder4,
    Vector2,
    Vector3,
    Vector4,
)


class TestTransformBuilder2:
    """Test 2x2 linear transforms."""

    def test_empty_builder_is_identity(self):
        assert TransformBuilder2().build() == Matrix2.identity()

    def test_scale(self):
        matrix = TransformBuilder2().scale(2, 3).build()
        assert matrix * Vector2(1, 1) == Vector2(2, 3)

    def test_rotate_quarter_turn(self, assert_vectors_close):
        matrix = TransformBuilder2().rotate(math.pi / 2).build()
        assert_vectors_close(matrix * Vector2(1, 0), Vector2(0, 1))

    def test_rotation_storage(self):
        matrix = TransformBuilder2().rotate(0.3).build()
        assert matrix.to_array() == [
            [math.cos(0.3), math.sin(0.3)],
            [-math.sin(0.3), math.cos(0.3)],
        ]

    def test_shear(self):
        assert TransformBuilder2().shear_x(2).build() * Vector2(1, 1) == Vector2(3, 1)
        assert TransformBuilder2().shear_y(2).build() * Vector2(1, 1) == Vector2(1, 3)

    def test_returns_builder_for_chaining(self):
        builder = TransformBuilder2()
        assert builder.scale(1, 1) is builder

    def test_build_returns_matrix2(self):
        assert isinstance(TransformBuilder2().rotate(1).build(), Matrix2)


class TestTransformBuilder3:
    """Test 2D affine transforms in homogeneous coordinates."""

    def test_translate_moves_points(self):
        matrix = TransformBuilder3().translate(5, -2).build()
        assert isinstance(matrix, Matrix3)
        assert matrix * Vector3(1, 1, 1) == Vector3(6, -1, 1)

    def test_translate_ignores_directions(self):
        matrix = TransformBuilder3().translate(5, -2).build()
        assert matrix * Vector3(1, 1, 0) == Vector3(1, 1, 0)

    def test_translate_storage(self):
        matrix = TransformBuilder3().translate(5, -2).build()
        assert matrix.get(0, 2) == 5.0
        assert matrix.get(1, 2) == -2.0

    def test_inherits_linear_operations(self):
        matrix = TransformBuilder3().scale(2, 2).translate(1, 0).build()
        assert matrix * Vector3(1, 1, 1) == Vector3(3, 2, 1)


class TestTransformBuilder4:
    """Test 3D affine transforms in homogeneous coordinates."""

    def test_composition_order(self):
        """Operations apply in call order: translate first, then scale."""
        matrix = TransformBuilder4().translate(10, -5, 50).scale(10, 1, 1).build()
        result = matrix * Vector4(5, 0, 0, 1)
        assert result.xyz() == Vector3(150, -5, 50)

    def test_reverse_order_differs(self):
        matrix = TransformBuilder4().scale(10, 1, 1).translate(10, -5, 50).build()
        result = matrix * Vector4(5, 0, 0, 1)
        assert result.xyz() == Vector3(60, -5, 50)

    def test_rotate_then_scale_matches_product(self, assert_vectors_close):
        built = TransformBuilder4().rotate_z(0.6).scale(3, 3, 3).build()
        rotate = TransformBuilder4().rotate_z(0.6).build()
        scale = TransformBuilder4().scale(3, 3, 3).build()
        point = Vector4(2, -1, 4, 1)
        assert_vectors_close(built * point, scale * (rotate * point))

    def test_operation_followed_by_its_opposite_is_identity(self, assert_matrices_close):
        cases = [
            TransformBuilder4().rotate_x(1.1).rotate_x(-1.1),
            TransformBuilder4().translate(1, 2, 3).translate(-1, -2, -3),
            TransformBuilder4().scale(2, 4, 8).scale(0.5, 0.25, 0.125),
            TransformBuilder4().shear_z(2, 3).shear_z(-2, -3),
        ]
        for builder in cases:
            assert_matrices_close(builder.build(), Matrix4.identity(), 1e-3)

    def test_translate_vector(self):
        by_vector = TransformBuilder4().translate(Vector3(1, 2, 3)).build()
        by_offsets = TransformBuilder4().translate(1, 2, 3).build()
        assert by_vector == by_offsets

    def test_translate_requires_all_offsets(self):
        with pytest.raises(TypeError):
            TransformBuilder4().translate(1, 2)
        with pytest.raises(TypeError):
            TransformBuilder4().translate(Vector3(1, 2, 3), 4, 5)

    def test_axis_shortcuts(self):
        point = Vector4(1, 1, 1, 1)
        assert TransformBuilder4().scale_y(4).build() * point == Vector4(1, 4, 1, 1)
        assert TransformBuilder4().translate_z(-1).build() * point == Vector4(1, 1, 0, 1)
        assert TransformBuilder4().scale_x(2).scale_z(3).build() * point == Vector4(2, 1, 3, 1)
        assert TransformBuilder4().translate_x(1).translate_y(2).build() * point == Vector4(2, 3, 1, 1)

    @pytest.mark.parametrize(
        "method,start,expected",
        [
            ("rotate_x", (0, 1, 0, 0), (0, 0, 1, 0)),
            ("rotate_y", (0, 0, 1, 0), (1, 0, 0, 0)),
            ("rotate_z", (1, 0, 0, 0), (0, 1, 0, 0)),
        ],
    )
    def test_rotations_are_counter_clockwise(self, assert_vectors_close, method, start, expected):
        builder = getattr(TransformBuilder4(), method)(math.pi / 2)
        assert_vectors_close(builder.build() * Vector4(*start), Vector4(*expected))

    def test_quarter_turns_about_z(self, assert_vectors_close):
        quarter = TransformBuilder4().rotate_z(math.pi / 2).build()
        vector = Vector4(1, 0, 0, 0)
        expected = [(0, 1, 0, 0), (-1, 0, 0, 0), (0, -1, 0, 0), (1, 0, 0, 0)]
        for components in expected:
            vector = quarter * vector
            assert_vectors_close(vector, Vector4(*components))

    def test_shears(self):
        point = Vector4(1, 1, 1, 1)
        assert TransformBuilder4().shear_x(2, 3).build() * point == Vector4(6, 1, 1, 1)
        assert TransformBuilder4().shear_y(2, 3).build() * point == Vector4(1, 6, 1, 1)
        assert TransformBuilder4().shear_z(2, 3).build() * point == Vector4(1, 1, 6, 1)

    def test_build_returns_independent_matrix4(self):
        builder = TransformBuilder4().scale_x(2)
        first = builder.build()
        builder.scale_x(2)
        assert isinstance(first, Matrix4)
        assert first.get(0, 0) == 2.0
        assert builder.build().get(0, 0) == 4.0

    def test_operations_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="vecmat"):
            TransformBuilder4().rotate_x(1.0).shear_z(1, 1)
        messages = [record.getMessage() for record in caplog.records]
        assert "Applying rotate_x to 4x4 transform" in messages
        assert "Applying shear_z to 4x4 transform" in messages
