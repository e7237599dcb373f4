"""Mandelbrot and Julia sets by escape-time iteration."""

from .coloring import gradient, grayscale, to_image
from .escape import (
    EscapeTimeGrid,
    FractalConfig,
    escape_time,
    julia_grid,
    mandelbrot_grid,
)

__all__ = [
    "EscapeTimeGrid",
    "FractalConfig",
    "escape_time",
    "gradient",
    "grayscale",
    "julia_grid",
    "mandelbrot_grid",
    "to_image",
]
