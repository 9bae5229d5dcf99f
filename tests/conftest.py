"""
Shared pytest fixtures and utilities for testing the vecmat value types.

This module provides:
- Fixtures for comparing vectors and matrices within a tolerance
- Utilities for testing Pydantic validation
- A settings fixture that isolates environment overrides
"""

import logging

import numpy as np
import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from vecmat.algebra import Matrix, Vector
from vecmat.core.config import get_settings


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised for bad component input."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: Any,
        expected_type: str | None = None,
    ) -> ValidationError:
        """
        Assert that constructing a value raises ValidationError.

        Args:
            model_class: Vector or Matrix class
            data: Invalid data passed positionally to the constructor
            expected_type: Expected error type substring (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(data)

        error = exc_info.value
        if expected_type:
            assert any(
                expected_type in str(e['type']).lower() for e in error.errors()
            ), f"Expected error type containing '{expected_type}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_vectors_close():
    """Helper asserting component-wise closeness of two vectors."""
    def _assert_close(actual: Vector, expected: Any, tolerance: float = 1e-9) -> None:
        expected_vector = expected if isinstance(expected, Vector) else Vector(expected)
        assert actual.compare(expected_vector, tolerance), (
            f"Vectors not close:\n{actual}\n!=\n{expected_vector}"
        )

    return _assert_close


@pytest.fixture
def assert_matrices_close():
    """Helper asserting element-wise closeness of two matrices."""
    def _assert_close(actual: Matrix, expected: Any, tolerance: float = 1e-9) -> None:
        expected_matrix = expected if isinstance(expected, Matrix) else Matrix(expected)
        assert actual.compare(expected_matrix, tolerance), (
            f"Matrices not close:\n{actual}\n!=\n{expected_matrix}"
        )

    return _assert_close


@pytest.fixture
def rng():
    """Seeded random generator for numpy oracle tests."""
    return np.random.default_rng(20240611)


@pytest.fixture
def fresh_settings(monkeypatch):
    """
    Clear the cached settings so environment overrides take effect.

    Usage:
        def test_x(fresh_settings):
            settings = fresh_settings(VECMAT_DEFAULT_DECIMALS="2")
    """
    def _settings(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    yield _settings
    get_settings.cache_clear()


@pytest.fixture
def restore_package_logger():
    """Restore handlers and level of the ``vecmat`` logger after a test."""
    logger = logging.getLogger("vecmat")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
