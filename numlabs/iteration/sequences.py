"""Scalar, complex and planar recurrences used to discuss stability.

* ``x_{n+1} = x_n^2 + c`` on the real line (``c = -1`` in class): both fixed
  points ``(1 +- sqrt(1 - 4c)) / 2`` are repelling, yet orbits starting in
  ``(-phi, phi)`` stay bounded.
* ``z_{n+1} = z_n^2 + c`` in the complex plane, the recurrence behind the
  Mandelbrot and Julia sets.
* Explicit Euler of ``x1' = x1 (x2 - 1)``, ``x2' = x2 (x1 - 1)``: the origin
  attracts, ``(1, 1)`` is a saddle.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from ..core.utils import check_positive_int
from ..logging import get_logger

logger = get_logger(__name__)


def iterate_map(f: Callable[[float], float], x0: float, n: int) -> np.ndarray:
    """Return the orbit ``x_0, f(x_0), ..., f^n(x_0)`` (``n + 1`` values).

    Overflow is not an error: once the orbit leaves the representable range
    the remaining entries are ``inf`` or ``nan``.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    orbit = np.empty(n + 1, dtype=float)
    orbit[0] = x = float(x0)
    with np.errstate(over="ignore", invalid="ignore"):
        for k in range(1, n + 1):
            try:
                x = float(f(x))
            except OverflowError:
                x = math.inf
            orbit[k] = x
    return orbit


def quadratic_map_orbit(x0: float = -1.5, n: int = 9, c: float = -1.0) -> np.ndarray:
    """Orbit of ``x -> x^2 + c``.

    Example
    -------
    >>> quadratic_map_orbit(-1.5, 3).tolist()
    [-1.5, 1.25, 0.5625, -0.68359375]
    """
    return iterate_map(lambda x: x * x + c, x0, n)


def quadratic_map_fixed_points(c: float = -1.0) -> tuple[float, ...]:
    """Real fixed points of ``x -> x^2 + c``, largest first.

    Returns an empty tuple when ``c > 1/4``.
    """
    disc = 1.0 - 4.0 * c
    if disc < 0:
        return ()
    root = math.sqrt(disc)
    if root == 0.0:
        return (0.5,)
    return ((1.0 + root) / 2.0, (1.0 - root) / 2.0)


def complex_orbit(c: complex, n: int = 9, z0: complex = 0j) -> np.ndarray:
    """Orbit ``z_0, ..., z_n`` of ``z -> z^2 + c``."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    orbit = np.empty(n + 1, dtype=complex)
    orbit[0] = z = complex(z0)
    c = complex(c)
    with np.errstate(over="ignore", invalid="ignore"):
        for k in range(1, n + 1):
            try:
                z = z * z + c
            except OverflowError:
                z = complex(math.inf, math.inf)
            orbit[k] = z
    return orbit


def _euler_step(x1: float, x2: float, T: float, sequential: bool) -> tuple[float, float]:
    x1_new = x1 + T * x1 * (x2 - 1.0)
    if sequential:
        x1 = x1_new
    x2_new = x2 + T * x2 * (x1 - 1.0)
    return x1_new, x2_new


def planar_euler_orbit(
    x0: tuple[float, float] = (1.5, 0.5),
    T: float = 0.01,
    n: int = 1000,
    sequential: bool = False,
) -> np.ndarray:
    """Explicit Euler orbit of the planar system as an ``(n + 1, 2)`` array.

    With ``sequential=True`` the second component uses the already updated
    first component, as in a Gauss-Seidel sweep.
    """
    if T <= 0:
        raise ValueError(f"T must be positive, got {T}")
    n = check_positive_int(n, "n", minimum=0)
    orbit = np.empty((n + 1, 2), dtype=float)
    x1, x2 = (float(v) for v in x0)
    orbit[0] = (x1, x2)
    with np.errstate(over="ignore", invalid="ignore"):
        for k in range(1, n + 1):
            x1, x2 = _euler_step(x1, x2, T, sequential)
            orbit[k] = (x1, x2)
    return orbit


def planar_convergence_grid(
    lower: float = -2.5,
    upper: float = 2.5,
    step: float = 0.05,
    T: float = 0.01,
    nmax: int = 600,
    radius: float = 0.1,
    sequential: bool = True,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Count Euler steps until each start point enters the disc ``r < radius``.

    Start points form a square grid on ``[lower, upper]^2`` with spacing
    ``step``. Returns ``(x1, x2, counts)`` with ``counts[i, j]`` belonging to
    the start point ``(x1[i], x2[j])``; points that never enter the disc get
    ``nmax``.
    """
    if step <= 0 or upper <= lower:
        raise ValueError("need lower < upper and a positive step")
    nmax = check_positive_int(nmax, "nmax")
    n = int(round((upper - lower) / step)) + 1
    axis = lower + step * np.arange(n)
    counts = np.full((n, n), nmax, dtype=int)
    r2 = radius * radius
    with np.errstate(over="ignore", invalid="ignore"):
        for i, a in enumerate(axis):
            for j, b in enumerate(axis):
                x1, x2 = float(a), float(b)
                for k in range(1, nmax + 1):
                    x1, x2 = _euler_step(x1, x2, T, sequential)
                    if x1 * x1 + x2 * x2 < r2:
                        counts[i, j] = k
                        break
    logger.debug("planar grid %dx%d, %d points reached the origin", n, n, int(np.sum(counts < nmax)))
    return axis, axis.copy(), counts


__all__ = [
    "iterate_map",
    "quadratic_map_orbit",
    "quadratic_map_fixed_points",
    "complex_orbit",
    "planar_euler_orbit",
    "planar_convergence_grid",
]
