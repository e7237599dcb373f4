"""Tests for text and matplotlib plots."""

from io import StringIO

import numpy as np
import pytest

from numlabs.viz import ascii_plot, print_ascii_plot


def test_ascii_plot_dimensions_and_markers():
    x = np.linspace(0.0, 1.0, 11)
    text = ascii_plot(x, 2.0 * x, width=40, height=10)
    lines = text.splitlines()
    assert len(lines) == 12
    assert text.count("*") == 11
    assert lines[0].strip().startswith("2")
    assert lines[-1].strip().startswith("0")
    assert lines[-1].strip().endswith("1")


def test_ascii_plot_draws_fit_below_data():
    x = np.array([0.0, 1.0, 2.0])
    text = ascii_plot(x, x, fit=lambda t: t, width=30, height=8)
    assert "." in text
    assert text.count("*") == 3


def test_ascii_plot_constant_data():
    text = ascii_plot([1.0, 2.0, 3.0], [5.0, 5.0, 5.0], width=10, height=5)
    assert text.count("*") == 3


def test_ascii_plot_validation():
    with pytest.raises(ValueError):
        ascii_plot([1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        ascii_plot([], [])
    with pytest.raises(ValueError):
        ascii_plot([1.0], [1.0], width=1)


def test_print_ascii_plot_writes_to_stream():
    out = StringIO()
    print_ascii_plot([0.0, 1.0], [0.0, 1.0], file=out, width=20, height=5)
    assert out.getvalue().endswith("\n")
    assert out.getvalue().count("*") == 2


@pytest.fixture
def plt():
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as pyplot

    yield pyplot
    pyplot.close("all")


def test_matplotlib_figures(plt):
    from numlabs.fractals import FractalConfig, mandelbrot_grid
    from numlabs.geometry import convex_hull
    from numlabs.interpolation import BarycentricInterpolator, runge
    from numlabs.viz import (
        plot_escape_grid,
        plot_fit,
        plot_hull,
        plot_interpolation,
        plot_sequence,
        plot_trapezoid,
    )

    ax = plot_sequence([1.0, 0.5, 0.25], step=True, label="s")
    assert len(ax.lines) == 1

    p = BarycentricInterpolator.from_function(runge, 8)
    ax = plot_interpolation(runge, p)
    assert len(ax.lines) == 3

    grid = mandelbrot_grid(config=FractalConfig(size=8, max_iter=10))
    ax = plot_escape_grid(grid)
    assert len(ax.images) == 1

    x = np.linspace(0.0, 1.0, 5)
    ax = plot_fit(x, x, fit=lambda t: t, truth=lambda t: t)
    assert len(ax.lines) == 3

    ax = plot_trapezoid(np.cos, 0.0, 1.0, 4)
    assert len(ax.lines) == 1

    pts = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.2, 0.2]])
    ax = plot_hull(pts, convex_hull(pts))
    assert len(ax.lines) == 2
