"""Composite trapezoidal rule."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from ..core.utils import check_1d_array, check_positive_int


def classroom_integrand(x):
    """``exp(cos(x)^3)``, integrated over one period in class."""
    return np.exp(np.cos(x) ** 3)


def trapezoid(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` with ``n`` trapezoids.

    ``h (f(a) + f(b)) / 2 + h sum_{k=1}^{n-1} f(a + k (b - a) / n)`` with
    ``h = (b - a) / n``. For smooth periodic integrands over a full period
    the error decays faster than any power of ``h``.

    Example
    -------
    >>> round(trapezoid(lambda x: x * x, 0.0, 1.0, 2), 6)
    0.375
    """
    n = check_positive_int(n, "n")
    h = (b - a) / n
    total = h * (f(a) + f(b)) / 2.0
    for k in range(1, n):
        total += h * f((b - a) * k / n + a)
    return float(total)


def trapezoid_samples(y, x=None, dx: float = 1.0) -> float:
    """Trapezoidal rule on tabulated values ``y`` (optionally at abscissae ``x``)."""
    y = check_1d_array(y, "y")
    if y.size < 2:
        raise ValueError("need at least two samples")
    if x is None:
        return float(dx * (np.sum(y) - 0.5 * (y[0] + y[-1])))
    x = check_1d_array(x, "x")
    if x.shape != y.shape:
        raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
    return float(np.sum(np.diff(x) * (y[1:] + y[:-1]) / 2.0))


def convergence_table(
    f: Callable[[float], float],
    a: float,
    b: float,
    ns=(2, 4, 8, 16, 32, 64),
    exact: float | None = None,
) -> list[tuple[int, float, float]]:
    """Return ``(n, estimate, |estimate - exact|)`` rows.

    Without ``exact`` the finest estimate serves as the reference value.
    """
    ns = [check_positive_int(n, "n") for n in ns]
    if not ns:
        raise ValueError("ns must not be empty")
    estimates = [trapezoid(f, a, b, n) for n in ns]
    reference = estimates[ns.index(max(ns))] if exact is None else float(exact)
    return [(n, est, abs(est - reference)) for n, est in zip(ns, estimates)]


PERIOD = 2.0 * math.pi

__all__ = [
    "PERIOD",
    "classroom_integrand",
    "trapezoid",
    "trapezoid_samples",
    "convergence_table",
]
