"""Fixed-point iteration: linear solvers and stability recurrences."""

from .linear import (
    CLASSROOM_A,
    CLASSROOM_B,
    IterationResult,
    gauss_seidel,
    is_diagonally_dominant,
    jacobi,
)
from .sequences import (
    complex_orbit,
    iterate_map,
    planar_convergence_grid,
    planar_euler_orbit,
    quadratic_map_fixed_points,
    quadratic_map_orbit,
)

__all__ = [
    "CLASSROOM_A",
    "CLASSROOM_B",
    "IterationResult",
    "complex_orbit",
    "gauss_seidel",
    "is_diagonally_dominant",
    "iterate_map",
    "jacobi",
    "planar_convergence_grid",
    "planar_euler_orbit",
    "quadratic_map_fixed_points",
    "quadratic_map_orbit",
]
