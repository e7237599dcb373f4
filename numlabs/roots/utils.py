"""Finite-difference derivatives and a guarded linear solve.

Pure NumPy; used when the caller does not supply an analytic derivative.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

Array = np.ndarray


def approx_derivative(f: Callable[[float], float], x: float, eps: float = 1e-6) -> float:
    """Central-difference approximation of ``f'(x)``."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    # relative step for large |x|
    h = eps * max(1.0, abs(x))
    return (f(x + h) - f(x - h)) / (2.0 * h)


def approx_jacobian(F: Callable[[Array], Array], x: Array, eps: float = 1e-6) -> Array:
    """Central-difference Jacobian ``J[i, j] = dF_i / dx_j``."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    f0 = np.atleast_1d(np.asarray(F(x), dtype=float))
    jac = np.zeros((f0.size, x.size), dtype=float)
    for j in range(x.size):
        ej = np.zeros_like(x)
        ej[j] = eps
        f_plus = np.atleast_1d(np.asarray(F(x + ej), dtype=float))
        f_minus = np.atleast_1d(np.asarray(F(x - ej), dtype=float))
        jac[:, j] = (f_plus - f_minus) / (2.0 * eps)
    return jac


def safe_solve(mat: Array, vec: Array, reg: float = 1e-12, retries: int = 5) -> Array:
    """Solve ``mat @ x = vec``, adding a growing ridge term if ``mat`` is singular."""
    eye = np.eye(mat.shape[0], dtype=float)
    shift = 0.0
    for _ in range(retries):
        try:
            return np.linalg.solve(mat + shift * eye, vec)
        except np.linalg.LinAlgError:
            shift = shift * 10 + reg
    return np.linalg.lstsq(mat, vec, rcond=None)[0]


__all__ = ["Array", "approx_derivative", "approx_jacobian", "safe_solve"]
