"""Newton-Raphson root finding."""

from .newton import RootResult, newton_raphson, newton_sqrt, newton_system
from .utils import approx_derivative, approx_jacobian, safe_solve

__all__ = [
    "RootResult",
    "approx_derivative",
    "approx_jacobian",
    "newton_raphson",
    "newton_sqrt",
    "newton_system",
    "safe_solve",
]
