"""
Example: Least-squares fits of noisy data

Fits a straight line and a parabola through the normal equations and a
rotated ellipse as an implicit conic, then prints the recovered parameters
next to the true ones and draws the line fit as a text plot.
"""

import numpy as np

from numlabs.fitting import (
    add_uniform_noise,
    conic_outline,
    ellipse_points,
    fit_conic,
    linear_fit,
    polyfit_lstsq,
    polyval,
    quadratic_fit,
)
from numlabs.geometry import polygon_area
from numlabs.viz import print_ascii_plot


def example_polynomials(rng):
    """Line and parabola through noisy samples."""
    print("=" * 60)
    print("Example 1: Polynomial fits")
    print("=" * 60)

    x = np.linspace(0.0, 10.0, 21)
    y = add_uniform_noise(polyval([0.5, 0.5], x), 2.0, rng)
    line = linear_fit(x, y)
    print(f"line:     a = {line.coeffs.round(4).tolist()}  (true [0.5, 0.5])")
    print_ascii_plot(x, y, fit=line, width=60, height=15)

    y2 = add_uniform_noise(polyval([0.5, 0.5, 0.1], x), 4.0, rng)
    parabola = quadratic_fit(x, y2)
    check = polyfit_lstsq(x, y2, 2)
    print(f"parabola: a = {parabola.coeffs.round(4).tolist()}  (true [0.5, 0.5, 0.1])")
    print(f"normal equations vs lstsq: {np.max(np.abs(parabola.coeffs - check.coeffs)):.2e}")
    print()


def example_conic(rng):
    """Implicit conic through a noisy ellipse."""
    print("=" * 60)
    print("Example 2: Conic fit")
    print("=" * 60)

    t = np.linspace(0.0, 2.0 * np.pi, 101)
    xs, ys = ellipse_points(t)
    fit = fit_conic(add_uniform_noise(xs, 0.5, rng), add_uniform_noise(ys, 0.5, rng))
    print("p = " + " ".join(f"{v: .5f}" for v in fit.coeffs))
    outline = conic_outline(fit.coeffs)
    print(f"outline: {len(outline)} vertices, area {polygon_area(outline):.3f} (true ellipse {np.pi * 3.0:.3f})")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("numlabs - Curve Fitting Examples")
    print("=" * 60 + "\n")

    rng = np.random.default_rng(7)
    example_polynomials(rng)
    example_conic(rng)

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
