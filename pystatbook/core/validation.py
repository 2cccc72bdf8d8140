"""
Input validation utilities for pystatbook.

These validators follow the "fail fast, fail loud" principle for invalid
configuration. Degenerate-but-well-formed input (a constant sample, a group
of one) passes validation; the solvers report it through NaN statistics
and Result.warnings instead.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatbook.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

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

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=True)


def check_sample(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to a finite 1D float64 array (may be empty)."""
    result = check_array(array, name)
    if result.ndim == 0:
        result = result.reshape(1)
    check_1d(result, name)
    check_finite(result, name)
    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

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

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_groups(
    groups: Sequence[ArrayLike],
    name: str,
    min_groups: int = 1,
) -> list[NDArray[np.floating[Any]]]:
    """
    Validate a group set: a sequence of 1D samples.

    Returns:
        List of float64 arrays, one per group

    Raises:
        ValidationError: If there are fewer than min_groups groups or any
            group is empty
    """
    if isinstance(groups, np.ndarray) and groups.ndim == 2:
        groups = list(groups)
    try:
        converted = [check_sample(g, f"{name}[{i}]") for i, g in enumerate(groups)]
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of samples: {e}") from e

    if len(converted) < min_groups:
        raise ValidationError(
            f"{name}: requires at least {min_groups} groups, got {len(converted)}"
        )
    empty = [i for i, g in enumerate(converted) if g.shape[0] == 0]
    if empty:
        raise ValidationError(f"{name}: groups {empty} are empty")
    return converted


def check_probability(value: float, name: str, *, open_interval: bool = True) -> float:
    """
    Verify a probability (alpha, power, confidence level) lies in (0, 1).

    Raises:
        ValidationError: If value is outside the interval
    """
    value = float(value)
    if open_interval:
        ok = 0.0 < value < 1.0
    else:
        ok = 0.0 <= value <= 1.0
    if not ok:
        bounds = "(0, 1)" if open_interval else "[0, 1]"
        raise ValidationError(f"{name}: must be in {bounds}, got {value}")
    return value


def check_positive_int(value: int, name: str, minimum: int = 1) -> int:
    """
    Verify an integer count (replicates, stages, sample size).

    Raises:
        ValidationError: If value is not an integer >= minimum
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return int(value)


def check_seed(seed: int, name: str = "seed") -> int:
    """
    Verify a PRNG seed is a plain integer.

    Raises:
        ValidationError: If seed is not an integer
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer seed, got {type(seed).__name__}"
        )
    return int(seed)
