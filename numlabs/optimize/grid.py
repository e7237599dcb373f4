"""Exhaustive grid search under inequality constraints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..logging import get_logger
from .core import ConstrainedProblem, GridSearchResult, Status

logger = get_logger(__name__)


@dataclass(frozen=True)
class GridSearchConfig:
    """Regular grid ``lower + k * step`` up to ``upper`` in every coordinate.

    Scalars apply to every coordinate; sequences give one value per
    coordinate. ``lower`` and ``upper`` default to the problem bounds.
    """

    upper: Optional[Sequence[float] | float] = None
    step: Sequence[float] | float = 0.05
    lower: Optional[Sequence[float] | float] = None
    max_points: int = 10_000_000

    def __post_init__(self) -> None:
        if np.any(np.asarray(self.step, dtype=float) <= 0):
            raise ValueError(f"step must be positive, got {self.step}")
        if self.max_points < 1:
            raise ValueError("max_points must be >= 1")


def _resolve(value, fallback, dim: Optional[int], name: str) -> np.ndarray:
    if value is None:
        value = fallback
    if value is None:
        raise ValueError(f"{name} must be given either in the config or as a problem bound")
    arr = np.atleast_1d(np.asarray(value, dtype=float))
    if dim is not None and arr.size == 1:
        arr = np.full(dim, float(arr[0]))
    return arr


def _grid_axes(lower: np.ndarray, upper: np.ndarray, step: np.ndarray) -> list[np.ndarray]:
    axes = []
    for lo, hi, h in zip(lower, upper, step):
        if hi < lo:
            raise ValueError(f"upper bound {hi} is below lower bound {lo}")
        count = int(np.floor((hi - lo) / h + 1e-9)) + 1
        axes.append(lo + h * np.arange(count))
    return axes


def _search_box(
    problem: ConstrainedProblem,
    lower: np.ndarray,
    upper: np.ndarray,
    step: np.ndarray,
    max_points: int,
) -> GridSearchResult:
    axes = _grid_axes(lower, upper, step)
    total = int(np.prod([a.size for a in axes]))
    if total > max_points:
        raise ValueError(f"grid has {total} points, more than max_points={max_points}")
    mesh = np.meshgrid(*axes, indexing="ij")
    points = np.stack([m.ravel() for m in mesh])
    mask = problem.feasible_mask(points)
    feasible = points[:, mask]
    if feasible.shape[1] == 0:
        logger.info("grid search found no feasible point among %d", total)
        return GridSearchResult(
            x=None,
            fun=float("nan"),
            points=feasible.T,
            values=np.empty(0),
            status=Status.INFEASIBLE,
            nfev=total,
        )
    values = problem.objective_values(feasible)
    best = int(np.argmax(values) if problem.maximize else np.argmin(values))
    return GridSearchResult(
        x=feasible[:, best].copy(),
        fun=float(values[best]),
        points=feasible.T,
        values=values,
        status=Status.OPTIMAL,
        nfev=total,
    )


def brute_force_search(
    problem: ConstrainedProblem, config: GridSearchConfig | None = None
) -> GridSearchResult:
    """Evaluate every grid point, keep the feasible ones and return the best.

    Example
    -------
    >>> from numlabs.optimize import production_problem
    >>> res = brute_force_search(production_problem(), GridSearchConfig(step=0.125))
    >>> res.x.tolist(), res.fun
    ([21.875, 53.125], 6315.625)
    """
    config = config or GridSearchConfig()
    dim = problem.dim
    lower = _resolve(config.lower, problem.lower, dim, "lower")
    upper = _resolve(config.upper, problem.upper, dim, "upper")
    step = _resolve(config.step, None, lower.size, "step")
    if not (lower.size == upper.size == step.size):
        raise ValueError("lower, upper and step must have the same length")
    result = _search_box(problem, lower, upper, step, config.max_points)
    logger.debug("brute force: %d points, %d feasible", result.nfev, len(result.points))
    return result


def zoom_search(
    problem: ConstrainedProblem,
    config: GridSearchConfig | None = None,
    levels: int = 4,
    shrink: float = 0.1,
    points_per_axis: int = 21,
) -> GridSearchResult:
    """Repeat a coarse grid search on a window shrinking around the best point.

    The first level searches the full box with ``config.step``. Each further
    level centres a window ``shrink`` times the previous width on the best
    point so far, clipped to the original box, and samples it with
    ``points_per_axis`` points per coordinate.
    """
    if levels < 1:
        raise ValueError(f"levels must be >= 1, got {levels}")
    if not 0.0 < shrink < 1.0:
        raise ValueError(f"shrink must be in (0, 1), got {shrink}")
    if points_per_axis < 2:
        raise ValueError("points_per_axis must be >= 2")
    config = config or GridSearchConfig()
    best = brute_force_search(problem, config)
    if not best.success:
        return best
    box_lower = _resolve(config.lower, problem.lower, problem.dim, "lower")
    box_upper = _resolve(config.upper, problem.upper, problem.dim, "upper")
    width = box_upper - box_lower
    nfev = best.nfev
    trail = [best.x.copy()]
    for level in range(1, levels):
        width = width * shrink
        lower = np.maximum(best.x - width / 2.0, box_lower)
        upper = np.minimum(best.x + width / 2.0, box_upper)
        step = np.maximum((upper - lower) / (points_per_axis - 1), np.finfo(float).eps)
        current = _search_box(problem, lower, upper, step, config.max_points)
        nfev += current.nfev
        if current.success:
            improved = current.fun > best.fun if problem.maximize else current.fun < best.fun
            if improved or current.fun == best.fun:
                best = current
        trail.append(best.x.copy())
        logger.debug("zoom level %d: best %s -> %.6g", level, best.x, best.fun)
    best.nfev = nfev
    best.levels = trail
    return best


__all__ = ["GridSearchConfig", "brute_force_search", "zoom_search"]
