"""
Input validation utilities for PermStat.

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

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from permstat.core.exceptions import (
    DimensionError,
    InvalidSampleSizeError,
    InvalidTrialCountError,
    NonFiniteValueError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

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

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    # bool is excluded too: a 0/1 sample is almost always a caller mistake
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Casting complex to float64 would drop the imaginary part
    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InvalidSampleSizeError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InvalidSampleSizeError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            name=name,
            size=n,
            min_size=min_samples,
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        NonFiniteValueError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise NonFiniteValueError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            name=name,
            n_nan=n_nan,
            n_inf=n_inf,
        )


def check_trials(trials: Any, name: str = "trials") -> int:
    """
    Validate a permutation trial count.

    Args:
        trials: Requested number of trials
        name: Parameter name for error messages

    Returns:
        The trial count as a Python int

    Raises:
        InvalidTrialCountError: If trials is not an integer or is < 1
    """
    if isinstance(trials, bool) or not isinstance(trials, numbers.Integral):
        raise InvalidTrialCountError(
            f"{name} must be an integer, got {type(trials).__name__}",
            trials=trials,
        )
    if trials < 1:
        raise InvalidTrialCountError(
            f"{name} must be >= 1, got {trials}",
            trials=trials,
        )
    return int(trials)


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a strictly positive integer option (workers, batch size).

    Raises:
        ValidationError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
