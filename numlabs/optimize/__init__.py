"""Constrained optimisation: exhaustive grid search and local COBYLA solves."""

from .core import (
    ConstrainedProblem,
    GridSearchResult,
    OptimizeResult,
    Status,
    linear_constraint,
    production_problem,
)
from .grid import GridSearchConfig, brute_force_search, zoom_search
from .local import SCIPY_AVAILABLE, local_search

__all__ = [
    "SCIPY_AVAILABLE",
    "ConstrainedProblem",
    "GridSearchConfig",
    "GridSearchResult",
    "OptimizeResult",
    "Status",
    "brute_force_search",
    "linear_constraint",
    "local_search",
    "production_problem",
    "zoom_search",
]
