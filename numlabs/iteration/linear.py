"""Stationary iterative solvers for ``A x = b``.

Both solvers split ``A`` into its diagonal and off-diagonal parts and iterate
``x_i <- (b_i - sum_{j != i} a_ij x_j) / a_ii``. Jacobi evaluates every
component from the previous iterate, Gauss-Seidel reuses components updated
earlier in the same sweep. Strict diagonal dominance guarantees convergence
of both.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..diagnostics import trace_iteration
from ..logging import get_logger

logger = get_logger(__name__)

# 7 x1 - x2 = 5, 3 x1 - 5 x2 = -7 with solution (1, 2)
CLASSROOM_A = np.array([[7.0, -1.0], [3.0, -5.0]])
CLASSROOM_B = np.array([5.0, -7.0])


@dataclass
class IterationResult:
    """Outcome of a fixed-point iteration.

    Attributes:
        x: Final iterate.
        nit: Number of sweeps performed.
        success: Whether the stopping rule was met before ``maxiter``.
        message: Human-readable termination reason.
        history: Iterates ``x_0, x_1, ...`` when requested, else empty.
    """

    x: np.ndarray
    nit: int
    success: bool
    message: str
    history: list[np.ndarray] = field(default_factory=list)


def is_diagonally_dominant(A, strict: bool = True) -> bool:
    """Return True if ``|a_ii| > sum_{j != i} |a_ij|`` for every row."""
    A = np.abs(np.asarray(A, dtype=float))
    diag = np.diag(A)
    off = A.sum(axis=1) - diag
    if strict:
        return bool(np.all(diag > off))
    return bool(np.all(diag >= off))


def _prepare(A, b, x0) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A must be a square matrix, got shape {A.shape}")
    if b.shape != (A.shape[0],):
        raise ValueError(f"b must have shape ({A.shape[0]},), got {b.shape}")
    if np.any(np.diag(A) == 0.0):
        raise ValueError("A has a zero on its diagonal")
    if x0 is None:
        x = np.zeros_like(b)
    else:
        x = np.asarray(x0, dtype=float).copy()
        if x.shape != b.shape:
            raise ValueError(f"x0 must have shape {b.shape}, got {x.shape}")
    return A, b, x


def _solve(A, b, x0, maxiter, tol, history, sweep, label) -> IterationResult:
    A, b, x = _prepare(A, b, x0)
    if maxiter < 0:
        raise ValueError("maxiter must be non-negative")
    if not is_diagonally_dominant(A):
        logger.info("%s: matrix is not strictly diagonally dominant", label)
    hist: list[np.ndarray] = [x.copy()] if history else []
    success = False
    message = "Maximum iterations reached."
    nit = 0
    while nit < maxiter:
        x_new = sweep(A, b, x)
        nit += 1
        step = float(np.max(np.abs(x_new - x)))
        x = x_new
        if history:
            hist.append(x.copy())
        trace_iteration(logger, label, nit, x, step)
        if not np.all(np.isfinite(x)):
            message = "Iteration diverged."
            break
        if step <= tol:
            success = True
            message = "Step tolerance satisfied."
            break
    if not success:
        logger.warning("%s did not converge after %d iterations: %s", label, nit, message)
    return IterationResult(x=x, nit=nit, success=success, message=message, history=hist)


def _jacobi_sweep(A: np.ndarray, b: np.ndarray, x: np.ndarray) -> np.ndarray:
    diag = np.diag(A)
    return (b - (A @ x - diag * x)) / diag


def _seidel_sweep(A: np.ndarray, b: np.ndarray, x: np.ndarray) -> np.ndarray:
    x = x.copy()
    for i in range(x.size):
        off = A[i] @ x - A[i, i] * x[i]
        x[i] = (b[i] - off) / A[i, i]
    return x


def jacobi(
    A=CLASSROOM_A,
    b=CLASSROOM_B,
    x0=None,
    maxiter: int = 100,
    tol: float = 1e-10,
    history: bool = False,
) -> IterationResult:
    """Solve ``A x = b`` with the Jacobi method.

    Every component of ``x_{k+1}`` is computed from ``x_k`` only. The
    iteration stops once ``max|x_{k+1} - x_k| <= tol``.

    Example
    -------
    >>> res = jacobi()
    >>> bool(res.success), res.x.round(6).tolist()
    (True, [1.0, 2.0])
    """
    return _solve(A, b, x0, maxiter, tol, history, _jacobi_sweep, "jacobi")


def gauss_seidel(
    A=CLASSROOM_A,
    b=CLASSROOM_B,
    x0=None,
    maxiter: int = 100,
    tol: float = 1e-10,
    history: bool = False,
) -> IterationResult:
    """Solve ``A x = b`` with the Gauss-Seidel method.

    Same stopping rule as :func:`jacobi`; components are overwritten in
    place so later rows already see the new values.
    """
    return _solve(A, b, x0, maxiter, tol, history, _seidel_sweep, "gauss_seidel")


__all__ = [
    "CLASSROOM_A",
    "CLASSROOM_B",
    "IterationResult",
    "is_diagonally_dominant",
    "jacobi",
    "gauss_seidel",
]
