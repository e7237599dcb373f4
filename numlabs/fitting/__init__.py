"""Least-squares curve fitting: polynomials and implicit conics."""

from .conic import (
    ConicFit,
    conic_design,
    conic_outline,
    conic_residual,
    ellipse_points,
    fit_conic,
    sample_conic,
)
from .least_squares import (
    FitResult,
    add_uniform_noise,
    linear_fit,
    normal_equations,
    polyfit_lstsq,
    polyfit_normal,
    polyval,
    quadratic_fit,
)

__all__ = [
    "ConicFit",
    "FitResult",
    "add_uniform_noise",
    "conic_design",
    "conic_outline",
    "conic_residual",
    "ellipse_points",
    "fit_conic",
    "linear_fit",
    "normal_equations",
    "polyfit_lstsq",
    "polyfit_normal",
    "polyval",
    "quadratic_fit",
    "sample_conic",
]
