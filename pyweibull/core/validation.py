"""
Input checks shared by the design constructors.

Each check tests one property and raises ValidationError (or
DimensionError for shapes) naming the argument and the offending value.
Nothing is silently repaired: a negative time or a conf of 1.0 is an
error, not something to clip.
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyweibull.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert a sequence of times (or flags) to a float64 array.

    Empty input gives ``np.zeros(0)``. Booleans are accepted so censoring
    flags can pass through the same check.

    Raises:
        ValidationError: Unconvertible, object-dtype or non-numeric input
    """
    try:
        values = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if values.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if values.size == 0:
        return np.zeros(0, dtype=np.float64)
    if values.dtype != np.bool_ and not np.issubdtype(values.dtype, np.number):
        raise ValidationError(f"{name}: non-numeric dtype {values.dtype}")

    return values.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Reject NaN and Inf, reporting how many of each."""
    bad = ~np.isfinite(array)
    if bad.any():
        n_nan = int(np.isnan(array).sum())
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {int(bad.sum()) - n_nan} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """Times are ages; anything below zero is a data error."""
    if array.size and array.min() < 0:
        raise ValidationError(
            f"{name}: must be non-negative, got minimum {float(array.min())}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Parallel arrays (e.g. time and censored) must share their first dimension.

    Raises:
        ValueError: names and arrays differ in number (programming error)
        DimensionError: lengths differ
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    lengths = {name: arr.shape[0] for name, arr in zip(names, arrays)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{k}={v}" for k, v in lengths.items())
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_positive(value: float, name: str) -> None:
    """Finite and > 0: tolerances, shape and scale, horizons."""
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be a positive finite number, got {value}")


def check_non_negative_scalar(value: float, name: str) -> None:
    """Finite and >= 0: unit costs."""
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be a non-negative finite number, got {value}")


def check_positive_int(value: int, name: str) -> None:
    """Counts such as nboot, max_iter or n_points. bool is not a count."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")


def check_open_unit_interval(value: float, name: str) -> None:
    """Confidence levels and probabilities strictly between 0 and 1."""
    if not (0.0 < value < 1.0):
        raise ValidationError(f"{name}: must be in (0, 1), got {value}")
