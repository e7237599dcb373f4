"""Lagrange interpolation in barycentric form on equispaced and Chebyshev nodes."""

from .barycentric import (
    NODE_TOL,
    BarycentricInterpolator,
    barycentric_interpolate,
    max_error,
    runge,
)
from .nodes import (
    chebyshev_nodes,
    chebyshev_weights,
    equispaced_nodes,
    equispaced_weights,
)

__all__ = [
    "NODE_TOL",
    "BarycentricInterpolator",
    "barycentric_interpolate",
    "chebyshev_nodes",
    "chebyshev_weights",
    "equispaced_nodes",
    "equispaced_weights",
    "max_error",
    "runge",
]
