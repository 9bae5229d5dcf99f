"""
Fluent builders composing affine transforms into a single matrix.

Each builder holds one square matrix, initially the identity. Every call
builds an elementary matrix and left-multiplies it onto the held matrix, so
operations apply to a vector in the order they were called::

    transform = (
        TransformBuilder4()
        .translate(10, -5, 50)
        .scale_x(10)
        .build()
    )
    transform * Vector4(5, 0, 0, 1)   # translated first, then scaled

Builders are mutable and meant for a single owner; :meth:`build` returns an
immutable matrix.
"""

from __future__ import annotations

import math
from typing import ClassVar

from vecmat.core.logging import get_logger

from . import operations as ops
from .matrix import Matrix2, Matrix3, Matrix4, SquareMatrix
from .vector import Vector3

logger = get_logger(__name__)


class _TransformBuilder:
    """Shared accumulation logic for the fixed-size builders."""

    MATRIX_TYPE: ClassVar[type[SquareMatrix]]

    def __init__(self) -> None:
        self._matrix = self.MATRIX_TYPE.identity()

    @property
    def dimension(self) -> int:
        return self.MATRIX_TYPE.FIXED_DIMENSION

    def _elementary(self) -> list[list[float]]:
        """Fresh column-major identity to overwrite entries of."""
        return ops.identity(self.dimension)

    def _apply(self, name: str, operation: list[list[float]]) -> None:
        logger.debug("Applying %s to %dx%d transform", name, self.dimension, self.dimension)
        self._matrix = self.MATRIX_TYPE(operation).multiply(self._matrix)

    def _rotation(self, name: str, radians: float, first: int, second: int) -> None:
        """Rotate in the plane spanned by axes ``first`` and ``second``."""
        cos = math.cos(radians)
        sin = math.sin(radians)
        operation = self._elementary()
        operation[first][first] = cos
        operation[second][first] = -sin
        operation[first][second] = sin
        operation[second][second] = cos
        self._apply(name, operation)

    def build(self) -> SquareMatrix:
        """Return the composed transform."""
        return self.MATRIX_TYPE(self._matrix)


class TransformBuilder2(_TransformBuilder):
    """Linear transforms of the plane as a 2x2 matrix."""

    MATRIX_TYPE: ClassVar[type[SquareMatrix]] = Matrix2

    def scale(self, x: float, y: float) -> TransformBuilder2:
        operation = self._elementary()
        operation[0][0] = x
        operation[1][1] = y
        self._apply("scale", operation)
        return self

    def rotate(self, radians: float) -> TransformBuilder2:
        """Counter-clockwise rotation about the origin."""
        self._rotation("rotate", radians, 0, 1)
        return self

    def shear_x(self, y: float) -> TransformBuilder2:
        """Shift x by ``y`` times the y coordinate."""
        operation = self._elementary()
        operation[1][0] = y
        self._apply("shear_x", operation)
        return self

    def shear_y(self, x: float) -> TransformBuilder2:
        """Shift y by ``x`` times the x coordinate."""
        operation = self._elementary()
        operation[0][1] = x
        self._apply("shear_y", operation)
        return self


class TransformBuilder3(TransformBuilder2):
    """
    Affine transforms of the plane in homogeneous coordinates (3x3).

    Points are ``Vector3(x, y, 1)``; directions use a zero third component
    and are unaffected by translation.
    """

    MATRIX_TYPE: ClassVar[type[SquareMatrix]] = Matrix3

    def translate(self, x: float, y: float) -> TransformBuilder3:
        operation = self._elementary()
        operation[2][0] = x
        operation[2][1] = y
        self._apply("translate", operation)
        return self


class TransformBuilder4(_TransformBuilder):
    """
    Affine transforms of space in homogeneous coordinates (4x4).

    Points are ``Vector4(x, y, z, 1)``; directions use ``w = 0``.
    """

    MATRIX_TYPE: ClassVar[type[SquareMatrix]] = Matrix4

    # Scaling

    def scale(self, x: float, y: float, z: float) -> TransformBuilder4:
        operation = self._elementary()
        operation[0][0] = x
        operation[1][1] = y
        operation[2][2] = z
        self._apply("scale", operation)
        return self

    def scale_x(self, factor: float) -> TransformBuilder4:
        return self.scale(factor, 1.0, 1.0)

    def scale_y(self, factor: float) -> TransformBuilder4:
        return self.scale(1.0, factor, 1.0)

    def scale_z(self, factor: float) -> TransformBuilder4:
        return self.scale(1.0, 1.0, factor)

    # Translation

    def translate(self, x: float | Vector3, y: float | None = None, z: float | None = None) -> TransformBuilder4:
        """
        Translate by ``(x, y, z)``.

        Accepts either three offsets or a single Vector3.
        """
        if isinstance(x, Vector3):
            if y is not None or z is not None:
                raise TypeError("translate() takes a Vector3 or three offsets, not both")
            x, y, z = x.x, x.y, x.z
        elif y is None or z is None:
            raise TypeError("translate() requires x, y and z offsets")

        operation = self._elementary()
        operation[3][0] = x
        operation[3][1] = y
        operation[3][2] = z
        self._apply("translate", operation)
        return self

    def translate_x(self, offset: float) -> TransformBuilder4:
        return self.translate(offset, 0.0, 0.0)

    def translate_y(self, offset: float) -> TransformBuilder4:
        return self.translate(0.0, offset, 0.0)

    def translate_z(self, offset: float) -> TransformBuilder4:
        return self.translate(0.0, 0.0, offset)

    # Rotation (right-handed, counter-clockwise looking down the axis)

    def rotate_x(self, radians: float) -> TransformBuilder4:
        self._rotation("rotate_x", radians, 1, 2)
        return self

    def rotate_y(self, radians: float) -> TransformBuilder4:
        self._rotation("rotate_y", radians, 2, 0)
        return self

    def rotate_z(self, radians: float) -> TransformBuilder4:
        self._rotation("rotate_z", radians, 0, 1)
        return self

    # Shearing

    def shear_x(self, y: float, z: float) -> TransformBuilder4:
        """Shift x by ``y`` times the y coordinate plus ``z`` times the z coordinate."""
        operation = self._elementary()
        operation[1][0] = y
        operation[2][0] = z
        self._apply("shear_x", operation)
        return self

    def shear_y(self, x: float, z: float) -> TransformBuilder4:
        operation = self._elementary()
        operation[0][1] = x
        operation[2][1] = z
        self._apply("shear_y", operation)
        return self

    def shear_z(self, x: float, y: float) -> TransformBuilder4:
        operation = self._elementary()
        operation[0][2] = x
        operation[1][2] = y
        self._apply("shear_z", operation)
        return self
