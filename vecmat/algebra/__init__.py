"""
vecmat.algebra - vector and matrix value types

Immutable, dimension-checked values with:
- Operator overloading
- Exact and tolerance-based comparison
- Multiple output formats (text, TeX, arrays, numpy)
- Affine transform builders
"""

from .checks import MIN_DIMENSION
from .matrix import Matrix, Matrix2, Matrix3, Matrix4, SquareMatrix
from .transform import TransformBuilder2, TransformBuilder3, TransformBuilder4
from .value import AlgebraValue, ToleranceMode
from .vector import Vector, Vector2, Vector3, Vector4

__all__ = [
    "AlgebraValue",
    "ToleranceMode",
    "MIN_DIMENSION",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Matrix",
    "SquareMatrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "TransformBuilder2",
    "TransformBuilder3",
    "TransformBuilder4",
]
