"""
Input validation utilities for PyDistributions.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float() on real scalars)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from typing import Any

from pydistributions.core.exceptions import ValidationError, OutOfRangeError


def check_scalar(value: Any, name: str) -> float:
    """
    Validate and convert input to a Python float.

    Accepts Python and numpy real scalars (including 0-d arrays). Rejects
    booleans, strings, complex numbers and arrays with more than one element.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        float

    Raises:
        ValidationError: If input is not a real scalar
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected a real number, got bool {value!r}")

    if isinstance(value, np.ndarray):
        if value.ndim != 0:
            raise ValidationError(
                f"{name}: expected a scalar, got array with shape {value.shape}"
            )
        value = value.item()

    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )

    return float(value)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify input is a finite real scalar.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a float

    Raises:
        ValidationError: If value is NaN or infinite
    """
    result = check_scalar(value, name)
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_positive(value: Any, name: str) -> float:
    """
    Verify input is a finite, strictly positive real scalar.

    Raises:
        ValidationError: If value <= 0
    """
    result = check_finite_scalar(value, name)
    if result <= 0.0:
        raise ValidationError(f"{name}: must be strictly positive, got {result}")
    return result


def check_nonzero(value: Any, name: str) -> float:
    """
    Verify input is a finite, non-zero real scalar.

    Raises:
        ValidationError: If value == 0
    """
    result = check_finite_scalar(value, name)
    if result == 0.0:
        raise ValidationError(f"{name}: must be non-zero, got {result}")
    return result


def check_at_least(value: Any, minimum: float, name: str) -> float:
    """
    Verify input is a finite real scalar no smaller than minimum.

    Args:
        value: Value to check
        minimum: Smallest admissible value (inclusive)
        name: Parameter name for error messages

    Raises:
        ValidationError: If value < minimum
    """
    result = check_finite_scalar(value, name)
    if result < minimum:
        raise ValidationError(
            f"{name}: must be at least {minimum}, got {result}"
        )
    return result


def check_probability(value: Any, name: str = "p") -> float:
    """
    Verify input is a probability in the closed interval [0, 1].

    NaN is rejected along with values below 0 or above 1.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a float

    Raises:
        OutOfRangeError: If value is outside [0, 1]
    """
    result = check_scalar(value, name)
    if not (0.0 <= result <= 1.0):
        raise OutOfRangeError(
            f"{name}: {result} out of range [0, 1]",
            value=result,
            lower=0.0,
            upper=1.0,
        )
    return result
