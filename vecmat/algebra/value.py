"""
Base AlgebraValue class for vector and matrix value objects.

This module provides the foundation shared by every value type:
- Immutable, value-based equality (exact and tolerance-based)
- Operator overloading on top of named operations
- Multiple output formats (text, TeX, raw arrays, numpy)
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from vecmat.core.config import get_settings


class ToleranceMode:
    """Modes for tolerance-based comparison."""

    ABSOLUTE = "absolute"  # |a - b| <= tol
    RELATIVE = "relative"  # |a - b| <= tol * max(|a|, |b|)


def within_tolerance(a: float, b: float, tolerance: float, mode: str = ToleranceMode.ABSOLUTE) -> bool:
    """
    Compare two scalars within a tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Allowed error (must be non-negative)
        mode: ToleranceMode.ABSOLUTE or ToleranceMode.RELATIVE

    Returns:
        True if the values are equal within tolerance

    Raises:
        ValueError: If tolerance is negative or the mode is unknown
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance
    if mode == ToleranceMode.RELATIVE:
        return math.isclose(a, b, rel_tol=tolerance, abs_tol=0.0)
    raise ValueError(f"Unknown tolerance mode: {mode!r}")


def default_tolerance() -> float:
    return get_settings().DEFAULT_TOLERANCE


def is_scalar(value: Any) -> bool:
    """True for real numbers (including numpy scalars) but not for bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class AlgebraValue(ABC):
    """
    Base class for vector and matrix value objects.

    Provides:
    - Exact equality (``==``) and tolerance-based comparison (``compare``)
    - String conversion through ``to_string``
    - numpy export through ``to_numpy``

    Subclasses must implement all abstract methods.

    Note: Concrete subclasses inherit from both BaseModel and AlgebraValue,
    e.g. ``class Vector(BaseModel, AlgebraValue)``. AlgebraValue itself does
    not inherit from BaseModel to avoid MRO conflicts.
    """

    # numpy defers binary operators to our reflected methods instead of
    # treating values as sequences (``np.float64(2) * v`` stays a Vector)
    __array_ufunc__ = None

    @abstractmethod
    def compare(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str = ToleranceMode.ABSOLUTE,
    ) -> bool:
        """
        Component-wise comparison within a tolerance.

        Args:
            other: Value to compare against
            tolerance: Allowed error per component (default: settings.DEFAULT_TOLERANCE)
            mode: Tolerance mode (absolute or relative)

        Returns:
            True if both values have the same shape and every component is
            equal within tolerance
        """

    @abstractmethod
    def to_array(self) -> list:
        """Return a fresh copy of the raw (column-major) numbers."""

    @abstractmethod
    def to_numpy(self) -> np.ndarray:
        """Convert to a NumPy array."""

    @abstractmethod
    def to_string(self, decimals: int | None = None) -> str:
        """Convert to a human-readable, column-aligned string."""

    @abstractmethod
    def to_tex(self, decimals: int | None = None) -> str:
        """Convert to LaTeX representation."""

    # Operator overloading (Python magic methods)

    @abstractmethod
    def __add__(self, other: Any) -> AlgebraValue:
        """Addition: self + other"""

    @abstractmethod
    def __sub__(self, other: Any) -> AlgebraValue:
        """Subtraction: self - other"""

    @abstractmethod
    def __mul__(self, other: Any) -> Any:
        """Multiplication: self * other"""

    @abstractmethod
    def __rmul__(self, other: Any) -> AlgebraValue:
        """Right multiplication: other * self"""

    @abstractmethod
    def __neg__(self) -> AlgebraValue:
        """Unary negation: -self"""

    def __pos__(self) -> AlgebraValue:
        """Unary positive: +self (values are immutable, so self is returned)"""
        return self

    def __truediv__(self, other: Any) -> AlgebraValue:
        """Scalar division: self / scalar"""
        if not is_scalar(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError(f"{type(self).__name__} division by zero")
        return self * (1.0 / other)

    def __rtruediv__(self, other: Any) -> AlgebraValue:
        """Right division not supported."""
        raise TypeError(f"Cannot divide by a {type(self).__name__}")
