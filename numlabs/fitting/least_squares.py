"""Polynomial least-squares fitting.

Two routes to the same coefficients: the normal equations ``A a = B`` with
``A_ij = sum x^(i+j)`` and ``B_i = sum x^i y`` (small and explicit, but the
condition number of ``A`` grows quickly with the degree), and an orthogonal
least-squares solve on the design matrix through :func:`numpy.linalg.lstsq`.
Coefficients are always in ascending order ``a0, a1, ...``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.utils import check_1d_array
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass
class FitResult:
    """Coefficients of a least-squares fit.

    Attributes:
        coeffs: Polynomial coefficients in ascending order; calling the
            result evaluates the polynomial.
        residual: Sum of squared residuals of the data against the fit.
        design: Matrix the coefficients were solved from (normal matrix or
            design matrix, depending on the method).
    """

    coeffs: np.ndarray
    residual: float
    design: np.ndarray

    def __call__(self, x):
        return polyval(self.coeffs, x)


def _check_xy(x, y, degree: int) -> tuple[np.ndarray, np.ndarray]:
    x = check_1d_array(x, "x")
    y = check_1d_array(y, "y")
    if x.shape != y.shape:
        raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    if x.size < degree + 1:
        raise ValueError(f"need at least {degree + 1} points for a degree-{degree} fit, got {x.size}")
    return x, y


def polyval(coeffs, x):
    """Evaluate ``a0 + a1 x + a2 x^2 + ...`` by Horner's rule."""
    coeffs = np.asarray(coeffs, dtype=float)
    x = np.asarray(x, dtype=float)
    result = np.zeros_like(x)
    for a in coeffs[::-1]:
        result = result * x + a
    return result


def normal_equations(x, y, degree: int) -> tuple[np.ndarray, np.ndarray]:
    """Assemble the ``(degree + 1)``-square normal system.

    ``A[0, 0]`` is the number of data points.
    """
    x, y = _check_xy(x, y, degree)
    powers = np.array([np.sum(x**k) for k in range(2 * degree + 1)])
    idx = np.arange(degree + 1)
    A = powers[idx[:, None] + idx[None, :]]
    B = np.array([np.sum(x**i * y) for i in idx])
    return A, B


def _residual(coeffs: np.ndarray, x: np.ndarray, y: np.ndarray) -> float:
    return float(np.sum((y - polyval(coeffs, x)) ** 2))


def polyfit_normal(x, y, degree: int = 1) -> FitResult:
    """Least-squares polynomial through the normal equations."""
    A, B = normal_equations(x, y, degree)
    try:
        coeffs = np.linalg.solve(A, B)
    except np.linalg.LinAlgError as exc:
        raise ValueError(f"normal equations are singular: {exc}") from exc
    cond = np.linalg.cond(A)
    if cond > 1e12:
        logger.warning("normal matrix is ill-conditioned (cond=%.3e)", cond)
    x_arr, y_arr = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    return FitResult(coeffs=coeffs, residual=_residual(coeffs, x_arr, y_arr), design=A)


def linear_fit(x, y) -> FitResult:
    """Straight line ``a0 + a1 x``.

    Example
    -------
    >>> linear_fit([0.0, 1.0, 2.0], [1.0, 3.0, 5.0]).coeffs.round(12).tolist()
    [1.0, 2.0]
    """
    return polyfit_normal(x, y, 1)


def quadratic_fit(x, y) -> FitResult:
    """Parabola ``a0 + a1 x + a2 x^2``."""
    return polyfit_normal(x, y, 2)


def polyfit_lstsq(x, y, degree: int = 1) -> FitResult:
    """Least-squares polynomial by an orthogonal solve on the design matrix."""
    x, y = _check_xy(x, y, degree)
    V = np.vander(x, degree + 1, increasing=True)
    coeffs, _, rank, _ = np.linalg.lstsq(V, y, rcond=None)
    if rank < degree + 1:
        logger.warning("design matrix is rank deficient (rank %d < %d)", rank, degree + 1)
    return FitResult(coeffs=coeffs, residual=_residual(coeffs, x, y), design=V)


def add_uniform_noise(values, amplitude: float, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return ``values + amplitude * (U - 1/2)`` with ``U`` uniform on [0, 1).

    Each value moves by at most ``amplitude / 2``.
    """
    if amplitude < 0:
        raise ValueError(f"amplitude must be non-negative, got {amplitude}")
    rng = rng if rng is not None else np.random.default_rng()
    values = np.asarray(values, dtype=float)
    return values + amplitude * (rng.random(values.shape) - 0.5)


__all__ = [
    "FitResult",
    "polyval",
    "normal_equations",
    "polyfit_normal",
    "linear_fit",
    "quadratic_fit",
    "polyfit_lstsq",
    "add_uniform_noise",
]
