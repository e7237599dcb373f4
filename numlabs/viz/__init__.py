"""Text and matplotlib plots.

This module provides:
- ASCII scatter plots that work in any terminal
- Optional matplotlib figures for each topic
"""

from .ascii import ascii_plot, print_ascii_plot
from .plots import (
    HAS_MATPLOTLIB,
    plot_escape_grid,
    plot_fit,
    plot_hull,
    plot_interpolation,
    plot_sequence,
    plot_trapezoid,
)

__all__ = [
    "HAS_MATPLOTLIB",
    "ascii_plot",
    "print_ascii_plot",
    "plot_escape_grid",
    "plot_fit",
    "plot_hull",
    "plot_interpolation",
    "plot_sequence",
    "plot_trapezoid",
]
