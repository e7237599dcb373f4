"""Input validation helpers used throughout numlabs."""

from __future__ import annotations

import numpy as np


def check_1d_array(x, name: str = "input") -> np.ndarray:
    """Validate and cast input to 1D float64 array.

    Args:
        x: Input array-like object.
        name: Argument name used in error messages.

    Returns:
        1D float64 numpy array.

    Raises:
        ValueError: If input is not 1D, contains NaN, or contains Inf.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"{name}: expected 1D array, got {arr.ndim}D array")
    if np.any(np.isnan(arr)):
        raise ValueError(f"{name} contains NaN values")
    if np.any(np.isinf(arr)):
        raise ValueError(f"{name} contains Inf values")
    return arr


def check_positive_int(value: int, name: str, minimum: int = 1) -> int:
    """Return ``value`` as int, raising ValueError when it is below ``minimum``."""
    ivalue = int(value)
    if ivalue != value or ivalue < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")
    return ivalue


__all__ = ["check_1d_array", "check_positive_int"]
