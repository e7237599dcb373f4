"""Explicit Euler integration of linear first-order lags."""

from .euler import (
    EulerConfig,
    bump_input,
    cascade,
    first_order_lag,
    reference_solution,
    simulate,
)

__all__ = [
    "EulerConfig",
    "bump_input",
    "cascade",
    "first_order_lag",
    "reference_solution",
    "simulate",
]
