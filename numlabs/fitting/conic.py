"""Implicit least-squares fit of a conic section.

Noisy samples of a rotated ellipse are fitted with

    p1 x^2 + p2 y^2 + p3 x y + p4 x + p5 y = 1

which is linear in ``p``. The fitted curve is recovered by scanning a grid
for points where the left-hand side is close to 1, and drawn as the convex
hull of those points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..core.utils import check_1d_array
from ..geometry.hull import convex_hull
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass
class ConicFit:
    """Coefficients ``p1..p5`` of a fitted conic.

    Calling the fit evaluates the implicit residual ``Z(x, y)``, which is
    zero on the fitted curve.
    """

    coeffs: np.ndarray
    residual: float
    design: np.ndarray

    def __call__(self, x, y):
        return conic_residual(self.coeffs, x, y)

    def outline(self, **grid) -> np.ndarray:
        """Hull of the fitted curve; keyword arguments go to :func:`sample_conic`."""
        return conic_outline(self.coeffs, **grid)


def ellipse_points(
    t,
    a: float = 2.0,
    b: float = 1.5,
    theta: float = math.pi / 8,
    x0: float = 2.0,
    y0: float = 0.0,
) -> tuple[np.ndarray, np.ndarray]:
    """Points of the ellipse with semi-axes ``a``, ``b`` rotated by ``theta``.

    ``x = a cos(theta) cos(t) - b sin(theta) sin(t) + x0``
    ``y = a sin(theta) cos(t) + b cos(theta) sin(t) + y0``
    """
    t = np.asarray(t, dtype=float)
    ct, st = np.cos(t), np.sin(t)
    x = a * math.cos(theta) * ct - b * math.sin(theta) * st + x0
    y = a * math.sin(theta) * ct + b * math.cos(theta) * st + y0
    return x, y


def conic_design(x, y) -> np.ndarray:
    """Columns ``x^2, y^2, xy, x, y``."""
    x = check_1d_array(x, "x")
    y = check_1d_array(y, "y")
    if x.shape != y.shape:
        raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
    return np.column_stack([x * x, y * y, x * y, x, y])


def conic_residual(p, x, y):
    """``Z = p1 x^2 + p2 y^2 + p3 xy + p4 x + p5 y - 1`` (scalar or array)."""
    p = np.asarray(p, dtype=float)
    if p.shape != (5,):
        raise ValueError(f"p must have 5 coefficients, got shape {p.shape}")
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return p[0] * x * x + p[1] * y * y + p[2] * x * y + p[3] * x + p[4] * y - 1.0


def fit_conic(x, y) -> ConicFit:
    """Least-squares conic coefficients ``p1..p5`` for the samples ``(x, y)``."""
    A = conic_design(x, y)
    if A.shape[0] < 5:
        raise ValueError(f"need at least 5 points to fit a conic, got {A.shape[0]}")
    p, _, rank, _ = np.linalg.lstsq(A, np.ones(A.shape[0]), rcond=None)
    if rank < 5:
        logger.warning("conic design matrix is rank deficient (rank %d)", rank)
    residual = float(np.sum(conic_residual(p, A[:, 3], A[:, 4]) ** 2))
    return ConicFit(coeffs=p, residual=residual, design=A)


def sample_conic(
    p,
    xlim: tuple[float, float] = (-0.5, 4.5),
    ylim: tuple[float, float] = (-2.5, 2.5),
    step: float = 0.05,
    tol: float = 1e-4,
) -> np.ndarray:
    """Grid points with ``Z^2 < tol``, as an ``(m, 2)`` array."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    xs = xlim[0] + step * np.arange(int(math.floor((xlim[1] - xlim[0]) / step + 1e-9)) + 1)
    ys = ylim[0] + step * np.arange(int(math.floor((ylim[1] - ylim[0]) / step + 1e-9)) + 1)
    X, Y = np.meshgrid(xs, ys, indexing="ij")
    Z = conic_residual(p, X, Y)
    mask = Z * Z < tol
    return np.column_stack([X[mask], Y[mask]])


def conic_outline(p, xlim=(-0.5, 4.5), ylim=(-2.5, 2.5), step: float = 0.05, tol: float = 1e-4) -> np.ndarray:
    """Convex hull of :func:`sample_conic`, counter-clockwise."""
    points = sample_conic(p, xlim=xlim, ylim=ylim, step=step, tol=tol)
    logger.debug("%d grid points near the fitted conic", len(points))
    return convex_hull(points)


__all__ = [
    "ConicFit",
    "ellipse_points",
    "conic_design",
    "conic_residual",
    "fit_conic",
    "sample_conic",
    "conic_outline",
]
