"""
Vector value types: Vector, Vector2, Vector3, Vector4.

A vector is an immutable ordered sequence of at least two real numbers.
Every operation returns a new vector; shape-preserving operations return
the caller's own type, so ``Vector3 + Vector3`` is a ``Vector3``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator

from . import operations as ops
from .checks import MIN_DIMENSION, verify_exact_length, verify_min_length, verify_valid_index
from .formatting import stringify_vector, tex_vector
from .value import AlgebraValue, ToleranceMode, default_tolerance, is_scalar, within_tolerance


class Vector(BaseModel, AlgebraValue):
    """
    Vector in n-dimensional space (n >= 2).

    Supports vector operations: dot product, cross product, magnitude,
    normalization, and component-wise arithmetic.

    Construction accepts positional components, a single iterable of numbers
    (list, tuple, 1-D numpy array) or another vector::

        Vector(1, 2, 3)
        Vector([1, 2, 3])
        Vector(other)
    """

    model_config = ConfigDict(frozen=True)

    components: tuple[float, ...]

    # Exact length enforced by the fixed-size subclasses
    FIXED_LENGTH: ClassVar[int | None] = None

    def __init__(self, *args: Any, components: Iterable[Any] | None = None) -> None:
        """Initialize a Vector supporting positional and iterable construction."""
        if components is not None and args:
            raise TypeError("Vector accepts either components or positional arguments, not both")

        raw = list(components) if components is not None else self._parse_arguments(args)
        self._verify_length(raw)
        super().__init__(components=tuple(raw))

    @staticmethod
    def _parse_arguments(args: tuple[Any, ...]) -> list[Any]:
        """Parse positional constructor arguments into raw components."""
        if len(args) == 1:
            single = args[0]
            if isinstance(single, Vector):
                return list(single.components)
            if isinstance(single, np.ndarray):
                return single.tolist()
            if isinstance(single, Iterable) and not isinstance(single, (str, bytes)):
                return list(single)
        return list(args)

    @classmethod
    def _verify_length(cls, raw: list[Any] | tuple[Any, ...]) -> None:
        verify_min_length(raw, MIN_DIMENSION)
        if cls.FIXED_LENGTH is not None:
            verify_exact_length(raw, cls.FIXED_LENGTH)

    @field_validator("components")
    @classmethod
    def _validate_components(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        cls._verify_length(value)
        return value

    def _like(self, components: Iterable[float]) -> Vector:
        """Build a vector of the same type from shape-preserving results."""
        return type(self)(components)

    # Accessors

    @property
    def size(self) -> int:
        """Number of components."""
        return len(self.components)

    def get(self, index: int) -> float:
        """
        Component at ``index``.

        Raises:
            IndexOutOfBoundsError: If index is negative or >= size
        """
        verify_valid_index(self.components, index)
        return self.components[index]

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.components)

    # Vector operations

    def magnitude(self) -> float:
        """Euclidean norm ||v||."""
        return ops.magnitude(self.components)

    def normalize(self) -> Vector:
        """
        Unit vector in the same direction.

        A zero vector is returned with NaN components rather than raising.
        """
        return self._like(ops.normalize(self.components))

    def invert(self) -> Vector:
        """Negate every component."""
        return self._like(ops.negate_vector(self.components))

    def scale(self, scalar: float) -> Vector:
        return self._like(ops.scale_vector(self.components, scalar))

    def add(self, other: Vector) -> Vector:
        """
        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        return self._like(ops.add_vectors(self.components, other.components))

    def subtract(self, other: Vector) -> Vector:
        """
        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        return self._like(ops.subtract_vectors(self.components, other.components))

    def dot(self, other: Vector) -> float:
        """
        Dot product with another vector.

        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        return ops.dot(self.components, other.components)

    def cross(self, other: Vector) -> Vector3:
        """
        Cross product of the first three components of both vectors.

        Returns:
            Vector3 perpendicular to both operands

        Raises:
            BelowMinimumDimensionError: If either vector has fewer than 3 components
        """
        return Vector3(ops.cross(self.components, other.components))

    # Comparison

    def compare(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str = ToleranceMode.ABSOLUTE,
    ) -> bool:
        """Compare vectors component-wise within a tolerance."""
        if not isinstance(other, Vector):
            return False

        if len(self.components) != len(other.components):
            return False

        tol = default_tolerance() if tolerance is None else tolerance
        return all(
            within_tolerance(a, b, tol, mode) for a, b in zip(self.components, other.components)
        )

    def __eq__(self, other: Any) -> bool:
        """Exact component-wise equality."""
        if not isinstance(other, Vector):
            return NotImplemented
        return self.components == other.components

    def __hash__(self) -> int:
        return hash((Vector, self.components))

    # Conversions

    def to_array(self) -> list[float]:
        """Copy of the components as a Python list."""
        return list(self.components)

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.components, dtype=float)

    def to_string(self, decimals: int | None = None) -> str:
        return stringify_vector(self.components, decimals)

    def to_tex(self, decimals: int | None = None) -> str:
        return tex_vector(self.components, decimals)

    def __str__(self) -> str:
        return self.to_string()

    # Arithmetic operators

    def __add__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        """Scalar multiplication or dot product."""
        if is_scalar(other):
            return self.scale(other)
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return self.invert()

    def __abs__(self) -> float:
        """Magnitude (norm)."""
        return self.magnitude()


class Vector2(Vector):
    """Vector with exactly two components."""

    FIXED_LENGTH: ClassVar[int | None] = 2

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]


class Vector3(Vector):
    """Vector with exactly three components."""

    FIXED_LENGTH: ClassVar[int | None] = 3

    @classmethod
    def from_vector2(cls, xy: Vector2, z: float) -> Vector3:
        """Extend a Vector2 with a z component."""
        return cls(xy.x, xy.y, z)

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]

    @property
    def z(self) -> float:
        return self.components[2]

    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)


class Vector4(Vector):
    """Vector with exactly four components, typically homogeneous coordinates."""

    FIXED_LENGTH: ClassVar[int | None] = 4

    @classmethod
    def from_vector3(cls, xyz: Vector3, w: float) -> Vector4:
        """Extend a Vector3 with a w component (1.0 for points, 0.0 for directions)."""
        return cls(xyz.x, xyz.y, xyz.z, w)

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]

    @property
    def z(self) -> float:
        return self.components[2]

    @property
    def w(self) -> float:
        return self.components[3]

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)
