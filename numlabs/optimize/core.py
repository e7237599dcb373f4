"""
Problem and result containers for constrained optimisation.

A :class:`ConstrainedProblem` describes

    minimise (or maximise) f(x)  subject to  g_k(x) <= 0,  lower <= x <= upper

with every ``g_k`` written so that feasibility means a non-positive value.
Objective and constraint callables index coordinates as ``x[0], x[1], ...``;
the grid searches evaluate them on a ``(n, m)`` array holding ``m`` points
at once, so expressions such as ``143 * x[0] + 60 * x[1]`` vectorise for
free. Set ``vectorized=False`` for callables that only accept one point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Constraint = Callable[[Array], float]


class Status(Enum):
    """Solution status for optimisation routines."""

    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    MAX_ITER = "max_iter"
    NUMERICAL_ERROR = "numerical_error"


@dataclass
class ConstrainedProblem:
    """Objective with inequality constraints and box bounds."""

    objective: Objective
    constraints: Sequence[Constraint] = ()
    lower: Optional[Array] = None
    upper: Optional[Array] = None
    maximize: bool = False
    vectorized: bool = True

    def __post_init__(self) -> None:
        if self.lower is not None:
            self.lower = np.asarray(self.lower, dtype=float)
        if self.upper is not None:
            self.upper = np.asarray(self.upper, dtype=float)
        if self.lower is not None and self.upper is not None:
            if self.lower.shape != self.upper.shape:
                raise ValueError("lower and upper bounds must have the same shape")
            if np.any(self.lower > self.upper):
                raise ValueError("lower bound exceeds upper bound")
        self.constraints = tuple(self.constraints)

    @property
    def dim(self) -> Optional[int]:
        for bound in (self.lower, self.upper):
            if bound is not None:
                return int(bound.size)
        return None

    def _evaluate(self, fn: Callable, points: Array) -> Array:
        """Evaluate ``fn`` on the columns of ``points`` (shape ``(n, m)``)."""
        if self.vectorized:
            values = np.asarray(fn(points), dtype=float)
            if values.shape == (points.shape[1],):
                return values
        return np.array([float(fn(points[:, j])) for j in range(points.shape[1])])

    def objective_values(self, points: Array) -> Array:
        return self._evaluate(self.objective, points)

    def feasible_mask(self, points: Array, tol: float = 0.0) -> Array:
        """Boolean mask of the columns of ``points`` satisfying every constraint."""
        mask = np.ones(points.shape[1], dtype=bool)
        for g in self.constraints:
            mask &= self._evaluate(g, points) <= tol
        if self.lower is not None:
            mask &= np.all(points >= self.lower[:, None] - tol, axis=0)
        if self.upper is not None:
            mask &= np.all(points <= self.upper[:, None] + tol, axis=0)
        return mask

    def is_feasible(self, x, tol: float = 1e-8) -> bool:
        point = np.asarray(x, dtype=float).reshape(-1, 1)
        return bool(self.feasible_mask(point, tol=tol)[0])


@dataclass
class OptimizeResult:
    """Result of a local constrained solve.

    ``fun`` is reported in the problem's own sense, i.e. the maximum for
    ``maximize=True`` problems.
    """

    x: Array
    fun: float
    nit: int
    success: bool
    message: str
    status: Status
    nfev: int
    max_violation: float = 0.0


@dataclass
class GridSearchResult:
    """Result of an exhaustive grid search.

    Attributes:
        x: Best feasible grid point (``None`` when no point is feasible).
        fun: Objective at ``x`` (``nan`` when infeasible).
        points: Every feasible grid point, shape ``(k, n)``.
        values: Objective at each feasible point.
        status: :attr:`Status.OPTIMAL` or :attr:`Status.INFEASIBLE`.
        nfev: Number of grid points evaluated.
        levels: Per-level best points for :func:`zoom_search`.
    """

    x: Optional[Array]
    fun: float
    points: Array
    values: Array
    status: Status
    nfev: int
    levels: list = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is Status.OPTIMAL


def linear_constraint(coeffs, bound: float) -> Constraint:
    """Return ``g(x) = sum_i coeffs[i] x[i] - bound`` for ``coeffs . x <= bound``."""
    coeffs = np.asarray(coeffs, dtype=float)

    def g(x):
        x = np.asarray(x, dtype=float)
        return np.tensordot(coeffs, x, axes=(0, 0)) - bound

    return g


def production_problem() -> ConstrainedProblem:
    """Maximise ``143 x + 60 y`` over the classroom production polytope.

    Constraints: ``120 x + 210 y <= 15000``, ``110 x + 30 y <= 4000``,
    ``x + y <= 75`` and ``x, y >= 0``. The optimum is the vertex
    ``(21.875, 53.125)`` with value ``6315.625``.
    """
    return ConstrainedProblem(
        objective=lambda x: 143.0 * x[0] + 60.0 * x[1],
        constraints=(
            linear_constraint([120.0, 210.0], 15000.0),
            linear_constraint([110.0, 30.0], 4000.0),
            linear_constraint([1.0, 1.0], 75.0),
        ),
        lower=np.zeros(2),
        upper=np.full(2, 75.0),
        maximize=True,
    )


__all__ = [
    "Array",
    "Objective",
    "Constraint",
    "Status",
    "ConstrainedProblem",
    "OptimizeResult",
    "GridSearchResult",
    "linear_constraint",
    "production_problem",
]
