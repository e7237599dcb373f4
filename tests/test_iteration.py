import math

import numpy as np
import pytest

from numlabs.iteration import (
    complex_orbit,
    gauss_seidel,
    is_diagonally_dominant,
    iterate_map,
    jacobi,
    planar_convergence_grid,
    planar_euler_orbit,
    quadratic_map_fixed_points,
    quadratic_map_orbit,
)


def test_jacobi_solves_classroom_system():
    res = jacobi()
    assert res.success
    assert np.allclose(res.x, [1.0, 2.0], atol=1e-9)


def test_jacobi_first_iterates_match_hand_computation():
    res = jacobi(maxiter=2, history=True)
    assert np.allclose(res.history[0], [0.0, 0.0])
    assert np.allclose(res.history[1], [5.0 / 7.0, 7.0 / 5.0])
    assert np.allclose(res.history[2], [(5.0 + 1.4) / 7.0, (7.0 + 3.0 * 5.0 / 7.0) / 5.0])
    assert not res.success
    assert res.nit == 2


def test_gauss_seidel_uses_updated_components():
    res = gauss_seidel(maxiter=1, history=True)
    x1 = 5.0 / 7.0
    assert np.allclose(res.history[1], [x1, (7.0 + 3.0 * x1) / 5.0])


def test_gauss_seidel_converges_faster_than_jacobi():
    j = jacobi(tol=1e-12)
    gs = gauss_seidel(tol=1e-12)
    assert j.success and gs.success
    assert gs.nit < j.nit
    assert np.allclose(gs.x, [1.0, 2.0])


def test_general_system_with_initial_guess():
    A = np.array([[10.0, -1.0, 2.0], [-1.0, 11.0, -1.0], [2.0, -1.0, 10.0]])
    x_true = np.array([1.0, 2.0, -1.0])
    b = A @ x_true
    for solver in (jacobi, gauss_seidel):
        res = solver(A, b, x0=np.ones(3), maxiter=200)
        assert res.success
        assert np.allclose(res.x, x_true, atol=1e-8)


def test_history_disabled_by_default():
    assert jacobi().history == []


def test_zero_diagonal_rejected():
    with pytest.raises(ValueError):
        jacobi(np.array([[0.0, 1.0], [1.0, 2.0]]), np.array([1.0, 1.0]))


def test_shape_mismatch_rejected():
    with pytest.raises(ValueError):
        gauss_seidel(np.eye(2), np.ones(3))


def test_divergent_system_reports_failure():
    A = np.array([[1.0, 3.0], [3.0, 1.0]])
    res = jacobi(A, np.array([1.0, 1.0]), maxiter=50)
    assert not res.success


def test_is_diagonally_dominant():
    assert is_diagonally_dominant([[7.0, -1.0], [3.0, -5.0]])
    assert not is_diagonally_dominant([[1.0, 3.0], [3.0, 1.0]])
    assert is_diagonally_dominant([[1.0, 1.0], [1.0, 1.0]], strict=False)


def test_quadratic_map_orbit_from_classroom_start():
    orbit = quadratic_map_orbit(-1.5, 3)
    assert orbit.tolist() == [-1.5, 1.25, 0.5625, -0.68359375]


def test_quadratic_map_orbit_diverges_outside_golden_ratio():
    orbit = quadratic_map_orbit(2.0, 12)
    assert orbit[-1] > 1e100 or not np.isfinite(orbit[-1])


def test_quadratic_map_fixed_points():
    phi = (1.0 + math.sqrt(5.0)) / 2.0
    hi, lo = quadratic_map_fixed_points(-1.0)
    assert hi == pytest.approx(phi)
    assert lo == pytest.approx(1.0 - phi)
    assert quadratic_map_fixed_points(1.0) == ()
    assert quadratic_map_fixed_points(0.25) == (0.5,)


def test_iterate_map_length_and_start():
    orbit = iterate_map(lambda x: 0.5 * x, 8.0, 3)
    assert orbit.tolist() == [8.0, 4.0, 2.0, 1.0]


def test_complex_orbit_matches_real_recurrence():
    orbit = complex_orbit(-0.1 + 0j, 5)
    real = quadratic_map_orbit(0.0, 5, c=-0.1)
    assert np.allclose(orbit.real, real)
    assert np.allclose(orbit.imag, 0.0)
    z = complex_orbit(1j, 2)
    assert z[1] == 1j
    assert z[2] == -1 + 1j


def test_planar_euler_orbit_first_step():
    orbit = planar_euler_orbit((1.5, 0.5), T=0.01, n=2)
    assert orbit.shape == (3, 2)
    x1, x2 = 1.5, 0.5
    assert np.allclose(orbit[1], [x1 + 0.01 * x1 * (x2 - 1.0), x2 + 0.01 * x2 * (x1 - 1.0)])


def test_planar_euler_orbit_equilibria_are_fixed():
    assert np.allclose(planar_euler_orbit((1.0, 1.0), n=50), 1.0)
    assert np.allclose(planar_euler_orbit((0.0, 0.0), n=50), 0.0)


def test_planar_convergence_grid():
    x1, x2, counts = planar_convergence_grid(lower=-0.5, upper=0.5, step=0.25, nmax=400)
    assert x1.shape == (5,)
    assert counts.shape == (5, 5)
    centre = counts[2, 2]
    assert centre == 1
    assert np.all(counts <= 400)
    assert np.all(counts >= 1)
