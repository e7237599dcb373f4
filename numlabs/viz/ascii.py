"""Dependency-free text plots for terminals.

Data points are drawn as ``*`` and an optional fitted curve as ``.``; a
data point wins when both fall into the same cell.
"""

from __future__ import annotations

import sys
from typing import IO, Callable, Optional

import numpy as np


def _scale(values: np.ndarray, lo: float, hi: float, cells: int) -> np.ndarray:
    if hi == lo:
        return np.full(values.shape, cells // 2, dtype=int)
    pos = (values - lo) / (hi - lo) * (cells - 1)
    return np.clip(np.rint(pos), 0, cells - 1).astype(int)


def ascii_plot(
    x,
    y,
    fit: Optional[Callable] = None,
    width: int = 70,
    height: int = 20,
) -> str:
    """
    Render a scatter of ``(x, y)`` and, optionally, a fitted curve as text.

    Parameters
    ----------
    x, y:
        Data coordinates of equal length.
    fit:
        Callable evaluated on ``width`` evenly spaced abscissae spanning the
        data range; drawn with ``.``.
    width, height:
        Size of the plotting area in characters.

    Returns
    -------
    str
        Lines of the plot joined by newlines, with the y range on the left
        and the x range underneath.
    """
    if width < 2 or height < 2:
        raise ValueError("width and height must be at least 2")
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    if x.shape != y.shape:
        raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
    if x.size == 0:
        raise ValueError("nothing to plot")

    xs = np.linspace(x.min(), x.max(), width)
    curve = None
    if fit is not None:
        curve = np.asarray(fit(xs), dtype=float)

    finite_y = [y[np.isfinite(y)]]
    if curve is not None:
        finite_y.append(curve[np.isfinite(curve)])
    all_y = np.concatenate(finite_y)
    if all_y.size == 0:
        raise ValueError("no finite values to plot")
    ylo, yhi = float(all_y.min()), float(all_y.max())
    xlo, xhi = float(x.min()), float(x.max())

    grid = [[" "] * width for _ in range(height)]
    if curve is not None:
        ok = np.isfinite(curve)
        cols = np.arange(width)[ok]
        rows = _scale(curve[ok], ylo, yhi, height)
        for c, r in zip(cols, rows):
            grid[height - 1 - r][c] = "."
    ok = np.isfinite(y)
    cols = _scale(x[ok], xlo, xhi, width)
    rows = _scale(y[ok], ylo, yhi, height)
    for c, r in zip(cols, rows):
        grid[height - 1 - r][c] = "*"

    label_w = max(len(f"{yhi:.3g}"), len(f"{ylo:.3g}"))
    lines = []
    for i, row in enumerate(grid):
        if i == 0:
            label = f"{yhi:.3g}"
        elif i == height - 1:
            label = f"{ylo:.3g}"
        else:
            label = ""
        lines.append(f"{label:>{label_w}} |" + "".join(row))
    lines.append(" " * label_w + " +" + "-" * width)
    left = f"{xlo:.3g}"
    right = f"{xhi:.3g}"
    lines.append(" " * (label_w + 2) + left + right.rjust(width - len(left)))
    return "\n".join(lines)


def print_ascii_plot(x, y, fit: Optional[Callable] = None, file: Optional[IO[str]] = None, **kwargs) -> None:
    """Write :func:`ascii_plot` output to ``file`` (default: stdout)."""
    stream = file if file is not None else sys.stdout
    stream.write(ascii_plot(x, y, fit=fit, **kwargs) + "\n")


__all__ = ["ascii_plot", "print_ascii_plot"]
