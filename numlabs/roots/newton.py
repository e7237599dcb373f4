"""Newton-Raphson root finding for scalar and vector equations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from ..diagnostics import trace_iteration
from ..logging import get_logger
from .utils import approx_derivative, approx_jacobian, safe_solve

logger = get_logger(__name__)


def _real(value, x: float) -> float:
    if isinstance(value, complex):
        raise ValueError(f"complex value {value} at x = {x}")
    return float(value)


@dataclass
class RootResult:
    """Result of a root-finding run.

    Attributes:
        root: Final iterate.
        fun: Function value at ``root``.
        nit: Number of Newton steps taken.
        success: Whether the tolerance was met.
        message: Termination reason.
        history: Iterates starting with ``x0``.
    """

    root: float | np.ndarray
    fun: float | np.ndarray
    nit: int
    success: bool
    message: str
    history: list = field(default_factory=list)


def newton_raphson(
    f: Callable[[float], float],
    fprime: Callable[[float], float] | None = None,
    x0: float = 1.0,
    tol: float = 1e-8,
    maxiter: int = 1000,
) -> RootResult:
    """Find a root of ``f`` by iterating ``x <- x - f(x) / f'(x)``.

    Iteration continues while ``|f(x)| > tol``. When ``fprime`` is None the
    derivative is taken by central differences. A vanishing or non-finite
    derivative, or a step to where ``f`` is undefined or complex, ends the
    run with ``success=False`` at the last good iterate. An ``x0`` where
    ``f`` has no real value raises ``ValueError``.

    Example
    -------
    >>> res = newton_raphson(lambda x: x**x - 100, lambda x: x**x * (math.log(x) + 1), x0=3.0)
    >>> round(res.root, 6)
    3.597285
    """
    if tol <= 0:
        raise ValueError("tol must be positive")
    if maxiter < 0:
        raise ValueError("maxiter must be non-negative")

    def derivative(x: float) -> float:
        if fprime is None:
            return _real(approx_derivative(f, x), x)
        return _real(fprime(x), x)

    x = float(x0)
    try:
        fx = _real(f(x), x)
    except TypeError as exc:
        raise ValueError(f"f(x0) is not a real number: {exc}") from exc
    hist = [x]
    nit = 0
    success = abs(fx) <= tol
    message = "Function tolerance satisfied." if success else "Maximum iterations reached."
    while not success and nit < maxiter:
        try:
            dfx = derivative(x)
        except (OverflowError, TypeError, ValueError, ZeroDivisionError) as exc:
            message = f"Derivative evaluation failed: {exc}"
            break
        if dfx == 0.0 or not math.isfinite(dfx):
            message = "Derivative vanished or is not finite."
            break
        x_new = x - fx / dfx
        try:
            fx = _real(f(x_new), x_new)
        except (OverflowError, TypeError, ValueError, ZeroDivisionError) as exc:
            message = f"Function evaluation failed: {exc}"
            break
        x = x_new
        nit += 1
        hist.append(x)
        trace_iteration(logger, "newton", nit, x, abs(fx))
        if not math.isfinite(fx):
            message = "Function value is not finite."
            break
        if abs(fx) <= tol:
            success = True
            message = "Function tolerance satisfied."
    if not success:
        logger.warning("newton_raphson stopped after %d steps: %s", nit, message)
    return RootResult(root=x, fun=fx, nit=nit, success=success, message=message, history=hist)


def newton_sqrt(value: float, tol: float = 1e-3, maxiter: int = 100) -> RootResult:
    """Square root by Heron's iteration ``x <- (x + value / x) / 2``.

    Starts from ``x0 = value`` and stops once two successive iterates differ
    by less than ``tol``; the newer iterate is returned.
    """
    if value < 0:
        raise ValueError(f"cannot take the real square root of {value}")
    if tol <= 0:
        raise ValueError("tol must be positive")
    if value == 0:
        return RootResult(root=0.0, fun=0.0, nit=0, success=True, message="Exact.", history=[0.0])

    x = float(value)
    hist = [x]
    for nit in range(1, maxiter + 1):
        x_new = 0.5 * (x + value / x)
        hist.append(x_new)
        trace_iteration(logger, "sqrt", nit, x_new, abs(x_new - x))
        if abs(x - x_new) < tol:
            return RootResult(
                root=x_new,
                fun=x_new * x_new - value,
                nit=nit,
                success=True,
                message="Step tolerance satisfied.",
                history=hist,
            )
        x = x_new
    return RootResult(
        root=x,
        fun=x * x - value,
        nit=maxiter,
        success=False,
        message="Maximum iterations reached.",
        history=hist,
    )


def newton_system(
    F: Callable[[np.ndarray], np.ndarray],
    J: Callable[[np.ndarray], np.ndarray] | None = None,
    x0=None,
    tol: float = 1e-10,
    maxiter: int = 100,
    lambda_reg: float = 0.0,
) -> RootResult:
    """Newton's method for ``F(x) = 0`` with ``F: R^n -> R^n``.

    Each step solves ``J(x) dx = -F(x)``; a singular Jacobian is handled by
    retrying with a growing ridge term. ``J=None`` uses a finite-difference
    Jacobian. Stops when ``||F(x)||_inf <= tol``.
    """
    if x0 is None:
        raise ValueError("x0 is required")
    x = np.asarray(x0, dtype=float).copy()
    fx = np.atleast_1d(np.asarray(F(x), dtype=float))
    if fx.shape != x.shape:
        raise ValueError(f"F must map R^{x.size} to R^{x.size}, got output shape {fx.shape}")
    hist = [x.copy()]
    nit = 0
    success = float(np.max(np.abs(fx))) <= tol
    message = "Residual tolerance satisfied." if success else "Maximum iterations reached."
    while not success and nit < maxiter:
        jac = approx_jacobian(F, x) if J is None else np.asarray(J(x), dtype=float)
        reg = max(lambda_reg, 0.0)
        step = safe_solve(jac + reg * np.eye(x.size), -fx)
        x = x + step
        fx = np.atleast_1d(np.asarray(F(x), dtype=float))
        nit += 1
        hist.append(x.copy())
        residual = float(np.max(np.abs(fx)))
        trace_iteration(logger, "newton_system", nit, x, residual)
        if not np.all(np.isfinite(fx)):
            message = "Residual is not finite."
            break
        if residual <= tol:
            success = True
            message = "Residual tolerance satisfied."
    if not success:
        logger.warning("newton_system stopped after %d steps: %s", nit, message)
    return RootResult(root=x, fun=fx, nit=nit, success=success, message=message, history=hist)


__all__ = ["RootResult", "newton_raphson", "newton_sqrt", "newton_system"]
