"""Partial sums of classroom series.

* geometric: 1 + 1/2 + 1/4 + ... -> 2
* alternating harmonic: 1 - 1/2 + 1/3 - ... -> ln 2
* a rearrangement of the alternating harmonic series that converges to
  ln(2)/2, showing that conditionally convergent series are not commutative.
"""

from __future__ import annotations

import numpy as np

from ..core.utils import check_1d_array, check_positive_int
from .taylor import SeriesResult


def geometric_series(n: int, ratio: float = 0.5) -> SeriesResult:
    """Partial sums of ``1 + r + r^2 + ... + r^n``."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    terms = ratio ** np.arange(n + 1, dtype=float)
    sums = np.cumsum(terms)
    return SeriesResult(value=float(sums[-1]), partial_sums=sums, terms=n + 1)


def alternating_sequence(n: int) -> np.ndarray:
    """Return ``x_k = (-1)^(k+1) / k`` for ``k = 1..n``."""
    n = check_positive_int(n, "n")
    k = np.arange(1, n + 1, dtype=float)
    return np.where(k % 2 == 1, 1.0, -1.0) / k


def alternating_harmonic(n: int) -> SeriesResult:
    """Partial sums of ``1 - 1/2 + 1/3 - 1/4 + ...`` (limit ln 2)."""
    sums = np.cumsum(alternating_sequence(n))
    return SeriesResult(value=float(sums[-1]), partial_sums=sums, terms=n)


def rearranged_harmonic(n: int) -> SeriesResult:
    """Partial sums of the rearrangement ``1/2 - 1/4 + 1/6 - 1/8 + ...``.

    Grouping ``(1 - 1/2) - 1/4 + (1/3 - 1/6) - 1/8 + ...`` of the alternating
    harmonic series gives this series, whose limit is ln(2)/2 rather than
    ln 2.
    """
    sums = np.cumsum(alternating_sequence(n) / 2.0)
    return SeriesResult(value=float(sums[-1]), partial_sums=sums, terms=n)


def mean(values) -> float:
    """Arithmetic mean of a non-empty 1D array."""
    arr = check_1d_array(values, "values")
    if arr.size == 0:
        raise ValueError("mean of an empty array is undefined")
    return float(np.sum(arr) / arr.size)


__all__ = [
    "geometric_series",
    "alternating_sequence",
    "alternating_harmonic",
    "rearranged_harmonic",
    "mean",
]
