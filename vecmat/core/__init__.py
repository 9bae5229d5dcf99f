"""Core utilities package"""

from .config import settings, get_settings, Settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    AlgebraError,
    BelowMinimumDimensionError,
    DimensionMismatchError,
    IncompatibleShapeError,
    IndexOutOfBoundsError,
    NonUniformShapeError,
    NotSquareError,
    SingularMatrixError,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "AlgebraError",
    "BelowMinimumDimensionError",
    "DimensionMismatchError",
    "IncompatibleShapeError",
    "IndexOutOfBoundsError",
    "NonUniformShapeError",
    "NotSquareError",
    "SingularMatrixError",
]
