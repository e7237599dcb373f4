"""Truncated Taylor series for exp(x) and sin(x).

Both expansions are evaluated term by term so that the partial sums can be
inspected; comparing them against :mod:`math` shows how fast each series
converges and where truncation (or a far-away working point) breaks it.

Example
-------
>>> from numlabs.series import taylor_exp, taylor_sin
>>> round(taylor_exp(1.0, 9).value, 6)
2.718282
>>> round(taylor_sin(1.6708, terms=4).value, 3)
0.995
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..logging import get_logger
from .power import factorial, raise_power

logger = get_logger(__name__)


@dataclass
class SeriesResult:
    """Value of a truncated series together with its partial sums.

    Attributes:
        value: Final partial sum.
        partial_sums: Array of partial sums; entry 0 is the zeroth-order term.
        terms: Number of terms that were added.
    """

    value: float
    partial_sums: np.ndarray
    terms: int


def taylor_exp(x: float, n: int) -> SeriesResult:
    """Evaluate ``1 + x + x^2/2! + ... + x^n/n!``."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    total = 1.0
    sums = [total]
    for i in range(1, n + 1):
        total += raise_power(x, i) / factorial(i)
        sums.append(total)
    return SeriesResult(value=total, partial_sums=np.asarray(sums), terms=n + 1)


def reduce_to_principal(x: float) -> tuple[float, int]:
    """Shift ``x`` by a multiple of pi into [-pi/2, pi/2].

    Returns the reduced argument and the sign ``(-1)^m`` picked up by the
    shift, so that ``sin(x) == sign * sin(reduced)``.
    """
    m = int(round(x / math.pi))
    reduced = x - m * math.pi
    sign = -1 if m % 2 else 1
    return reduced, sign


def taylor_sin(x: float, terms: int = 4, reduce_period: bool = False) -> SeriesResult:
    """Evaluate ``x - x^3/3! + x^5/5! - ...`` with ``terms`` terms.

    With four terms the expansion is accurate near the origin but drifts
    away quickly beyond |x| ~ 3. ``reduce_period=True`` first moves the
    working point into [-pi/2, pi/2] using the periodicity of sin, which
    keeps the same four terms accurate on the whole real line.
    """
    if terms < 1:
        raise ValueError(f"terms must be >= 1, got {terms}")
    sign = 1
    if reduce_period:
        x, sign = reduce_to_principal(float(x))
        logger.debug("reduced argument to %.6f with sign %d", x, sign)

    total = 0.0
    sums = []
    for i in range(terms):
        total += raise_power(-1.0, i) * raise_power(x, 2 * i + 1) / factorial(2 * i + 1)
        sums.append(sign * total)
    return SeriesResult(value=sign * total, partial_sums=np.asarray(sums), terms=terms)


def taylor_sin_table(x_values, terms: int = 4, reduce_period: bool = False) -> np.ndarray:
    """Evaluate :func:`taylor_sin` over an array of sample points."""
    x_values = np.asarray(x_values, dtype=float)
    return np.array(
        [taylor_sin(float(x), terms=terms, reduce_period=reduce_period).value for x in x_values.ravel()]
    ).reshape(x_values.shape)


__all__ = [
    "SeriesResult",
    "taylor_exp",
    "taylor_sin",
    "taylor_sin_table",
    "reduce_to_principal",
]
