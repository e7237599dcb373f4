import math

import numpy as np
import pytest

from numlabs.fitting import (
    ConicFit,
    FitResult,
    add_uniform_noise,
    conic_design,
    conic_outline,
    conic_residual,
    ellipse_points,
    fit_conic,
    linear_fit,
    normal_equations,
    polyfit_lstsq,
    polyfit_normal,
    polyval,
    quadratic_fit,
    sample_conic,
)
from numlabs.geometry import polygon_area


def test_polyval_ascending_coefficients():
    assert polyval([1.0, 2.0, 3.0], 2.0) == pytest.approx(17.0)
    assert np.allclose(polyval([0.0, 1.0], [1.0, 2.0]), [1.0, 2.0])


def test_normal_equations_structure():
    x = np.array([0.0, 1.0, 2.0, 3.0])
    y = np.array([1.0, 2.0, 3.0, 4.0])
    A, B = normal_equations(x, y, 2)
    assert A.shape == (3, 3)
    assert A[0, 0] == 4.0
    assert A[0, 1] == A[1, 0] == 6.0
    assert A[2, 2] == np.sum(x**4)
    assert np.allclose(B, [10.0, 20.0, 50.0])


def test_linear_fit_recovers_exact_line():
    x = np.linspace(0.0, 10.0, 21)
    fit = linear_fit(x, 0.5 + 2.0 * x)
    assert np.allclose(fit.coeffs, [0.5, 2.0])
    assert fit.residual == pytest.approx(0.0, abs=1e-18)
    assert fit(1.0) == pytest.approx(2.5)


def test_quadratic_fit_recovers_exact_parabola():
    x = np.linspace(-1.0, 1.0, 11)
    fit = quadratic_fit(x, 1.0 - x + 3.0 * x * x)
    assert np.allclose(fit.coeffs, [1.0, -1.0, 3.0])


def test_normal_and_lstsq_agree_on_noisy_data(rng):
    x = np.linspace(0.0, 1.0, 50)
    y = add_uniform_noise(np.sin(3.0 * x), 0.2, rng)
    normal = polyfit_normal(x, y, 3)
    ortho = polyfit_lstsq(x, y, 3)
    assert np.allclose(normal.coeffs, ortho.coeffs, atol=1e-8)
    assert normal.residual == pytest.approx(ortho.residual, rel=1e-8)


def test_noisy_linear_fit_is_close(rng):
    x = np.linspace(0.0, 1.0, 200)
    y = add_uniform_noise(1.0 + x, 0.1, rng)
    fit = linear_fit(x, y)
    assert np.allclose(fit.coeffs, [1.0, 1.0], atol=0.03)


def test_add_uniform_noise_bounds(rng):
    values = np.zeros(1000)
    noisy = add_uniform_noise(values, 0.4, rng)
    assert noisy.shape == values.shape
    assert np.all(np.abs(noisy) <= 0.2)
    assert np.std(noisy) > 0.05
    with pytest.raises(ValueError):
        add_uniform_noise(values, -1.0, rng)


def test_fit_input_validation():
    with pytest.raises(ValueError):
        linear_fit([1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        quadratic_fit([1.0, 2.0], [1.0, 2.0])
    with pytest.raises(ValueError):
        polyfit_normal([1.0, 1.0, 1.0], [1.0, 2.0, 3.0], 1)


def test_ellipse_points_centre_and_axes():
    t = np.linspace(0.0, 2.0 * math.pi, 400, endpoint=False)
    x, y = ellipse_points(t, a=2.0, b=1.5, theta=0.0, x0=2.0, y0=0.0)
    assert np.mean(x) == pytest.approx(2.0, abs=1e-12)
    assert x.max() == pytest.approx(4.0)
    assert y.max() == pytest.approx(1.5, rel=1e-4)


def test_conic_design_columns():
    A = conic_design([1.0, 2.0], [3.0, 4.0])
    assert A.tolist() == [[1.0, 9.0, 3.0, 1.0, 3.0], [4.0, 16.0, 8.0, 2.0, 4.0]]


def test_fit_conic_exact_ellipse():
    t = np.linspace(0.0, 2.0 * math.pi, 60, endpoint=False)
    x, y = ellipse_points(t)
    fit = fit_conic(x, y)
    assert fit.coeffs.shape == (5,)
    assert np.allclose(conic_residual(fit.coeffs, x, y), 0.0, atol=1e-9)
    # ellipse: discriminant p3^2 - 4 p1 p2 is negative
    p1, p2, p3 = fit.coeffs[:3]
    assert p3 * p3 - 4.0 * p1 * p2 < 0


def test_fit_conic_from_noisy_samples(rng):
    t = np.linspace(0.0, 2.0 * math.pi, 100, endpoint=False)
    x, y = ellipse_points(t)
    fit = fit_conic(add_uniform_noise(x, 0.05, rng), add_uniform_noise(y, 0.05, rng))
    assert np.max(np.abs(conic_residual(fit.coeffs, x, y))) < 0.25
    p1, p2, p3 = fit.coeffs[:3]
    assert p3 * p3 - 4.0 * p1 * p2 < 0


def test_sample_conic_classroom_band():
    # the classroom ellipse passes close to the origin, so Z is steep and
    # the default band only catches a handful of grid points
    t = np.linspace(0.0, 2.0 * math.pi, 60, endpoint=False)
    fit = fit_conic(*ellipse_points(t))
    points = sample_conic(fit.coeffs)
    assert points.shape[1] == 2
    assert len(points) > 0
    z = conic_residual(fit.coeffs, points[:, 0], points[:, 1])
    assert np.all(z * z < 1e-4)


def test_conic_outline_area_matches_ellipse():
    t = np.linspace(0.0, 2.0 * math.pi, 60, endpoint=False)
    fit = fit_conic(*ellipse_points(t, x0=0.0))
    window = dict(xlim=(-2.5, 2.5), ylim=(-2.5, 2.5), step=0.02)
    assert len(sample_conic(fit.coeffs, **window)) > 100
    outline = conic_outline(fit.coeffs, **window)
    assert polygon_area(outline) == pytest.approx(math.pi * 2.0 * 1.5, rel=0.05)


def test_conic_fit_evaluates_implicit_residual():
    t = np.linspace(0.0, 2.0 * math.pi, 60, endpoint=False)
    x, y = ellipse_points(t, x0=0.0)
    fit = fit_conic(x, y)
    assert isinstance(fit, ConicFit)
    assert not isinstance(fit, FitResult)
    assert np.allclose(fit(x, y), 0.0, atol=1e-9)
    # centre of the ellipse lies inside, where Z = -1
    assert fit(0.0, 0.0) == pytest.approx(-1.0)
    assert polygon_area(fit.outline(xlim=(-2.5, 2.5), ylim=(-2.5, 2.5), step=0.02)) == pytest.approx(
        math.pi * 2.0 * 1.5, rel=0.05
    )


def test_conic_validation():
    with pytest.raises(ValueError):
        fit_conic([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        conic_residual([1.0, 2.0], 0.0, 0.0)
    with pytest.raises(ValueError):
        sample_conic(np.ones(5), step=0.0)
