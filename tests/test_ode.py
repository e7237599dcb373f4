import logging
from io import StringIO

import numpy as np
import pytest

from numlabs.logging import configure_logging
from numlabs.ode import (
    EulerConfig,
    bump_input,
    cascade,
    first_order_lag,
    reference_solution,
    simulate,
)


def test_config_defaults_and_validation():
    config = EulerConfig()
    assert config.times.shape == (101,)
    assert config.times[-1] == pytest.approx(10.0)
    assert config.stable
    assert not EulerConfig(a=25.0, T=0.1).stable
    with pytest.raises(ValueError):
        EulerConfig(T=0.0)
    with pytest.raises(ValueError):
        EulerConfig(n=0)


def test_bump_input_peak():
    t = np.linspace(0.0, 10.0, 101)
    u = bump_input(t)
    assert u[50] == pytest.approx(1.0)
    assert u[0] < 1e-12
    assert np.all((u >= 0.0) & (u <= 1.0))


def test_first_order_lag_recurrence():
    u = np.ones(4)
    x = first_order_lag(u, a=1.5, T=0.1, x0=0.0)
    assert x[0] == 0.0
    assert x[1] == pytest.approx(0.1)
    assert x[2] == pytest.approx(0.85 * 0.1 + 0.1)
    assert x.shape == u.shape


def test_step_response_settles_at_steady_state():
    a, T = 1.5, 0.01
    x = first_order_lag(np.ones(2000), a=a, T=T)
    assert x[-1] == pytest.approx(1.0 / a, rel=1e-6)
    t = T * np.arange(2000)
    assert np.allclose(x, (1.0 - np.exp(-a * t)) / a, atol=5e-3)


def test_unstable_step_warns_and_grows():
    captured = StringIO()
    configure_logging(level=logging.WARNING, stream=captured)
    try:
        x = first_order_lag(np.zeros(100), a=25.0, T=0.1, x0=1.0)
    finally:
        configure_logging(level=logging.WARNING)
    assert abs(x[-1]) > 1e10
    assert "unstable" in captured.getvalue()


def test_cascade_stage_outputs():
    u = bump_input(EulerConfig().times)
    first, second = cascade(u, stages=2)
    assert np.allclose(first, first_order_lag(u))
    assert np.allclose(second, first_order_lag(first))
    assert second.max() < first.max()
    assert len(cascade(u, stages=3)) == 3
    with pytest.raises(ValueError):
        cascade(u, stages=0)


def test_simulate_returns_aligned_arrays():
    t, u, x = simulate(EulerConfig(n=50))
    assert t.shape == u.shape == x.shape == (51,)
    t2, u2, _ = simulate(EulerConfig(n=10), u=np.cos)
    assert np.allclose(u2, np.cos(t2))


def test_euler_tracks_reference_solution():
    pytest.importorskip("scipy")
    config = EulerConfig(a=1.5, T=0.01, n=1000)
    _, _, x = simulate(config)
    ref = reference_solution(config)
    assert ref.shape == x.shape
    assert np.max(np.abs(x - ref)) < 0.02
    assert ref[0] == 0.0


def test_euler_error_is_first_order():
    errors = []
    for T in (0.02, 0.01):
        config = EulerConfig(a=1.0, T=T, n=int(round(4.0 / T)))
        _, _, x = simulate(config, u=lambda t: np.ones_like(np.asarray(t, dtype=float)))
        exact = 1.0 - np.exp(-config.times)
        errors.append(np.max(np.abs(x - exact)))
    assert errors[0] / errors[1] == pytest.approx(2.0, rel=0.1)
