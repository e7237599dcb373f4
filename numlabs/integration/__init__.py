"""Numerical quadrature."""

from .trapezoid import (
    PERIOD,
    classroom_integrand,
    convergence_table,
    trapezoid,
    trapezoid_samples,
)

__all__ = [
    "PERIOD",
    "classroom_integrand",
    "convergence_table",
    "trapezoid",
    "trapezoid_samples",
]
