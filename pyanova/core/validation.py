"""
Input validation utilities for PyAnova.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from collections.abc import Sequence
from numbers import Real

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyanova.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, booleans, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    # Always float64 so every group is summed at the same precision
    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_sequence(obj: Any, name: str) -> Sequence:
    """
    Verify input is an ordered, indexable collection (list, tuple, ndarray).

    Strings and bytes are rejected: they are sequences of characters,
    never a collection of groups. Sets and dicts are rejected because
    their iteration order carries no group index.

    Raises:
        ValidationError: If obj is not a suitable sequence
    """
    if isinstance(obj, (str, bytes)):
        raise ValidationError(f"{name}: expected a sequence, got {type(obj).__name__}")
    if isinstance(obj, np.ndarray):
        if obj.ndim == 0:
            raise ValidationError(f"{name}: expected a sequence, got a 0D array")
        return list(obj)
    if not isinstance(obj, Sequence):
        raise ValidationError(f"{name}: expected a sequence, got {type(obj).__name__}")
    return obj


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real, finite scalar and return it as a float.

    Booleans are rejected even though Python treats them as integers.

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is strictly positive.

    Raises:
        ValidationError: If value <= 0
    """
    if not value > 0:
        raise ValidationError(f"{name}: must be > 0, got {value}")


def check_nonnegative(value: float, name: str) -> None:
    """
    Verify a scalar is zero or positive.

    Raises:
        ValidationError: If value < 0
    """
    if not value >= 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")


def check_open_unit_interval(value: float, name: str) -> None:
    """
    Verify a scalar lies strictly between 0 and 1.

    Used for significance and confidence levels, where both endpoints
    make the quantile infinite or zero.

    Raises:
        ValidationError: If value is not in (0, 1)
    """
    if not 0.0 < value < 1.0:
        raise ValidationError(f"{name}: must be in (0, 1), got {value}")
