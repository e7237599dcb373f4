"""numlabs - small numerical-methods demonstrations on NumPy and PyTorch."""

__version__ = "0.1.0"

# Core abstractions
from .core import Device, default_device, device

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Curve fitting
from .fitting import (
    ConicFit,
    FitResult,
    fit_conic,
    linear_fit,
    polyfit_lstsq,
    polyfit_normal,
    quadratic_fit,
)

# Fractals
from .fractals import (
    EscapeTimeGrid,
    FractalConfig,
    escape_time,
    julia_grid,
    mandelbrot_grid,
)

# Geometry
from .geometry import convex_hull, orientation

# Quadrature
from .integration import trapezoid

# Interpolation
from .interpolation import BarycentricInterpolator, barycentric_interpolate

# Fixed-point iteration
from .iteration import IterationResult, gauss_seidel, jacobi

# Logging
from .logging import configure_logging, get_logger, set_log_level

# ODEs
from .ode import EulerConfig, first_order_lag

# Optimisation
from .optimize import (
    ConstrainedProblem,
    GridSearchConfig,
    Status,
    brute_force_search,
    local_search,
    zoom_search,
)

# Root finding
from .roots import RootResult, newton_raphson, newton_sqrt, newton_system

# Series
from .series import SeriesResult, raise_power, taylor_exp, taylor_sin

__all__ = [
    "__version__",
    "BarycentricInterpolator",
    "ConicFit",
    "ConstrainedProblem",
    "Device",
    "EscapeTimeGrid",
    "EulerConfig",
    "FitResult",
    "FractalConfig",
    "GridSearchConfig",
    "IterationResult",
    "RootResult",
    "SeriesResult",
    "Status",
    "barycentric_interpolate",
    "brute_force_search",
    "configure_logging",
    "convex_hull",
    "debug_context",
    "default_device",
    "device",
    "escape_time",
    "first_order_lag",
    "fit_conic",
    "gauss_seidel",
    "get_logger",
    "is_debug_enabled",
    "jacobi",
    "julia_grid",
    "linear_fit",
    "local_search",
    "mandelbrot_grid",
    "newton_raphson",
    "newton_sqrt",
    "newton_system",
    "orientation",
    "polyfit_lstsq",
    "polyfit_normal",
    "quadratic_fit",
    "raise_power",
    "set_debug_enabled",
    "set_log_level",
    "taylor_exp",
    "taylor_sin",
    "trapezoid",
    "zoom_search",
]
