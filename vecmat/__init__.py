"""vecmat - generalized vectors, matrices and affine transforms.

Subpackages:
- vecmat.algebra: Vector and matrix value types, transform builders
- vecmat.core: Settings, logging and the error taxonomy
"""

import logging

from .algebra import (
    AlgebraValue,
    Matrix,
    Matrix2,
    Matrix3,
    Matrix4,
    SquareMatrix,
    ToleranceMode,
    TransformBuilder2,
    TransformBuilder3,
    TransformBuilder4,
    Vector,
    Vector2,
    Vector3,
    Vector4,
)
from .core.errors import (
    AlgebraError,
    BelowMinimumDimensionError,
    DimensionMismatchError,
    IncompatibleShapeError,
    IndexOutOfBoundsError,
    NonUniformShapeError,
    NotSquareError,
    SingularMatrixError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlgebraValue",
    "ToleranceMode",
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
    "AlgebraError",
    "BelowMinimumDimensionError",
    "DimensionMismatchError",
    "IncompatibleShapeError",
    "IndexOutOfBoundsError",
    "NonUniformShapeError",
    "NotSquareError",
    "SingularMatrixError",
]
