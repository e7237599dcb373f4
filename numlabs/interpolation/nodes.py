"""Interpolation nodes on [-1, 1] and their barycentric weights."""

from __future__ import annotations

import numpy as np

from ..core.utils import check_positive_int
from ..series.power import binomial


def equispaced_nodes(n: int) -> np.ndarray:
    """Return ``n + 1`` equally spaced nodes ``x_j = 2 (j / n - 1/2)``."""
    n = check_positive_int(n, "n")
    return 2.0 * (np.arange(n + 1) / n - 0.5)


def equispaced_weights(n: int) -> np.ndarray:
    """Barycentric weights ``w_j = (-1)^j C(n, j)`` for equispaced nodes.

    The common factor of the exact weights cancels in the second
    barycentric formula and is dropped.
    """
    n = check_positive_int(n, "n")
    signs = np.where(np.arange(n + 1) % 2 == 0, 1.0, -1.0)
    return signs * np.array([float(binomial(n, j)) for j in range(n + 1)])


def chebyshev_nodes(n: int) -> np.ndarray:
    """Chebyshev points of the second kind ``x_j = cos(j pi / n)``, from 1 down to -1."""
    n = check_positive_int(n, "n")
    return np.cos(np.arange(n + 1) * np.pi / n)


def chebyshev_weights(n: int) -> np.ndarray:
    """Weights ``(-1)^j`` with the two endpoint weights halved."""
    n = check_positive_int(n, "n")
    w = np.where(np.arange(n + 1) % 2 == 0, 1.0, -1.0)
    w[0] *= 0.5
    w[-1] *= 0.5
    return w


__all__ = [
    "equispaced_nodes",
    "equispaced_weights",
    "chebyshev_nodes",
    "chebyshev_weights",
]
