"""Optional matplotlib figures for the classroom demonstrations.

Every function draws into ``ax`` (or a fresh figure) and returns the axes.
matplotlib is an optional dependency; without it the functions raise
``RuntimeError``.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

# Type hint for matplotlib Axes (optional dependency)
try:
    from matplotlib import pyplot as plt
    from matplotlib.axes import Axes

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def _require_matplotlib() -> None:
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )


def _axes(ax, figsize=(6, 4)) -> "Axes":
    _require_matplotlib()
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    return ax


def plot_sequence(values, step: bool = False, ax: Optional["Axes"] = None, label: Optional[str] = None) -> "Axes":
    """Plot ``values`` against their index, as markers or as a staircase."""
    ax = _axes(ax)
    values = np.asarray(values)
    n = np.arange(values.shape[0])
    if step:
        ax.step(n, values, where="post", label=label)
    else:
        ax.plot(n, values, "o-", markersize=3, label=label)
    ax.set_xlabel("n")
    ax.grid(True)
    if label:
        ax.legend()
    return ax


def plot_interpolation(
    f: Callable,
    interpolant,
    t=None,
    ax: Optional["Axes"] = None,
) -> "Axes":
    """Plot ``f``, the interpolant and its nodes on [-1, 1]."""
    ax = _axes(ax)
    if t is None:
        t = np.linspace(-1.0, 1.0, 501)
    ax.plot(t, f(t), label="f(x)")
    ax.plot(t, interpolant(t), label="interpolant")
    if hasattr(interpolant, "nodes"):
        ax.plot(interpolant.nodes, interpolant.fvals, "o", color="red", label="nodes")
    ax.legend()
    ax.grid(True)
    return ax


def plot_escape_grid(grid, rgb=None, ax: Optional["Axes"] = None) -> "Axes":
    """Show an :class:`~numlabs.fractals.EscapeTimeGrid` (or prepared ``rgb`` pixels)."""
    from ..fractals.coloring import gradient, to_image

    ax = _axes(ax, figsize=(6, 6))
    pixels = to_image(gradient(grid.depth) if rgb is None else rgb)
    ax.imshow(pixels, extent=grid.extent, origin="upper")
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    return ax


def plot_fit(x, y, fit=None, truth=None, ax: Optional["Axes"] = None) -> "Axes":
    """Scatter the data with optional fitted and true curves."""
    ax = _axes(ax)
    x = np.asarray(x, dtype=float)
    order = np.argsort(x)
    ax.plot(x, y, "bo", label="data")
    if truth is not None:
        ax.plot(x[order], np.asarray(truth(x))[order], "r-.", label="true")
    if fit is not None:
        ax.plot(x[order], np.asarray(fit(x))[order], "c-", label="fit")
    ax.legend()
    ax.grid(True)
    return ax


def plot_trapezoid(f: Callable, a: float, b: float, n: int, ax: Optional["Axes"] = None) -> "Axes":
    """Draw ``f`` with the ``n`` trapezoids of the composite rule shaded."""
    ax = _axes(ax)
    xs = np.linspace(a, b, n + 1)
    fine = np.linspace(a, b, 100 * n + 1)
    ax.fill_between(xs, np.asarray(f(xs), dtype=float), alpha=0.3, label=f"n={n}")
    ax.plot(fine, f(fine), linewidth=2, label="f(x)")
    ax.legend()
    ax.grid(True)
    return ax


def plot_hull(points, hull, ax: Optional["Axes"] = None) -> "Axes":
    """Scatter ``points`` and draw the closed ``hull`` polygon."""
    from ..geometry.hull import close_polygon

    ax = _axes(ax, figsize=(6, 6))
    points = np.asarray(points, dtype=float)
    ax.plot(points[:, 0], points[:, 1], "bo", markersize=3)
    closed = close_polygon(hull)
    if len(closed):
        ax.plot(closed[:, 0], closed[:, 1], "c-")
    ax.set_aspect("equal")
    ax.grid(True)
    return ax


__all__ = [
    "HAS_MATPLOTLIB",
    "plot_sequence",
    "plot_interpolation",
    "plot_escape_grid",
    "plot_fit",
    "plot_trapezoid",
    "plot_hull",
]
