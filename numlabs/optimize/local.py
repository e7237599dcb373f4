"""Derivative-free local optimisation under inequality constraints.

Wraps SciPy's COBYLA (constrained optimisation by linear approximation),
which needs neither gradients of the objective nor of the constraints.
"""

from __future__ import annotations

import numpy as np

from ..logging import get_logger
from .core import ConstrainedProblem, OptimizeResult, Status

logger = get_logger(__name__)

try:
    from scipy.optimize import minimize as _scipy_minimize

    SCIPY_AVAILABLE = True
except ImportError:  # pragma: no cover - depends on SciPy
    SCIPY_AVAILABLE = False
    _scipy_minimize = None


def _scipy_constraints(problem: ConstrainedProblem) -> list[dict]:
    # SciPy expects c(x) >= 0; bounds become constraints as well
    cons = [{"type": "ineq", "fun": (lambda x, g=g: -float(g(x)))} for g in problem.constraints]
    if problem.lower is not None:
        for i, lo in enumerate(problem.lower):
            if np.isfinite(lo):
                cons.append({"type": "ineq", "fun": (lambda x, i=i, lo=lo: x[i] - lo)})
    if problem.upper is not None:
        for i, hi in enumerate(problem.upper):
            if np.isfinite(hi):
                cons.append({"type": "ineq", "fun": (lambda x, i=i, hi=hi: hi - x[i])})
    return cons


def _max_violation(problem: ConstrainedProblem, x: np.ndarray) -> float:
    worst = 0.0
    for g in problem.constraints:
        worst = max(worst, float(g(x)))
    if problem.lower is not None:
        worst = max(worst, float(np.max(problem.lower - x)))
    if problem.upper is not None:
        worst = max(worst, float(np.max(x - problem.upper)))
    return worst


def local_search(
    problem: ConstrainedProblem,
    x0,
    tol: float = 1e-4,
    maxiter: int = 1000,
    constraint_tol: float = 1e-8,
) -> OptimizeResult:
    """Run COBYLA from ``x0``.

    ``maximize=True`` problems are solved by minimising ``-f``; the returned
    ``fun`` is the value of ``f`` itself. A result whose constraints are
    violated by more than ``max(constraint_tol, tol)`` (scaled by the size
    of the solution) is reported as :attr:`Status.INFEASIBLE`.
    """
    x0 = np.asarray(x0, dtype=float).reshape(-1)
    if not SCIPY_AVAILABLE:  # pragma: no cover - depends on SciPy
        return OptimizeResult(
            x=x0,
            fun=float("nan"),
            nit=0,
            success=False,
            message="SciPy is not available",
            status=Status.NUMERICAL_ERROR,
            nfev=0,
        )
    if tol <= 0:
        raise ValueError("tol must be positive")
    sign = -1.0 if problem.maximize else 1.0

    def fun(x: np.ndarray) -> float:
        return sign * float(problem.objective(x))

    res = _scipy_minimize(
        fun,
        x0,
        method="COBYLA",
        constraints=_scipy_constraints(problem),
        tol=tol,
        options={"maxiter": maxiter},
    )
    x = np.asarray(res.x, dtype=float)
    violation = _max_violation(problem, x)
    scale = max(1.0, float(np.max(np.abs(x))))
    if not np.all(np.isfinite(x)):
        status = Status.NUMERICAL_ERROR
    elif violation > max(constraint_tol, tol) * scale:
        status = Status.INFEASIBLE
    elif res.success:
        status = Status.OPTIMAL
    else:
        status = Status.MAX_ITER
    nfev = int(getattr(res, "nfev", 0))
    nit = int(getattr(res, "nit", nfev) or nfev)
    logger.info("COBYLA finished: %s (%s), f=%.6g", status.value, res.message, sign * float(res.fun))
    return OptimizeResult(
        x=x,
        fun=sign * float(res.fun),
        nit=nit,
        success=status is Status.OPTIMAL,
        message=str(res.message),
        status=status,
        nfev=nfev,
        max_violation=violation,
    )


__all__ = ["SCIPY_AVAILABLE", "local_search"]
