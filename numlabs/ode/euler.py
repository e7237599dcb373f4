"""Explicit Euler for the first-order lag ``x' + a x = u``.

Replacing ``x'`` by ``(x(k+1) - x(k)) / T`` gives the recurrence
``x(k+1) = (1 - a T) x(k) + T u(k)``, stable for ``0 < a T < 2``. The
second-order system ``x'' + 2 a x' + a^2 x = u`` factors into two such lags
in series.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..core.utils import check_1d_array
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EulerConfig:
    """Lag parameter, sampling time, number of steps and initial state."""

    a: float = 1.5
    T: float = 0.1
    n: int = 100
    x0: float = 0.0

    def __post_init__(self) -> None:
        if self.T <= 0:
            raise ValueError(f"T must be positive, got {self.T}")
        if self.n < 1:
            raise ValueError(f"n must be >= 1, got {self.n}")

    @property
    def times(self) -> np.ndarray:
        """Sample times ``0, T, ..., n T``."""
        return self.T * np.arange(self.n + 1)

    @property
    def stable(self) -> bool:
        return abs(1.0 - self.a * self.T) < 1.0


def bump_input(t, centre: float = 5.0, power: float = 10.0):
    """Smooth pulse ``exp(-(t - centre)^power)``, close to 1 near ``centre``."""
    return np.exp(-((np.asarray(t, dtype=float) - centre) ** power))


def first_order_lag(u, a: float = 1.5, T: float = 0.1, x0: float = 0.0) -> np.ndarray:
    """Euler response of ``x' + a x = u`` to the input samples ``u``.

    Returns an array of the same length as ``u``; the last input sample is
    not used.
    """
    u = check_1d_array(u, "u")
    if T <= 0:
        raise ValueError(f"T must be positive, got {T}")
    if abs(1.0 - a * T) >= 1.0:
        logger.warning("Euler step is unstable for a*T=%.3g", a * T)
    x = np.empty_like(u)
    x[0] = x0
    decay = 1.0 - a * T
    for k in range(u.size - 1):
        x[k + 1] = decay * x[k] + T * u[k]
    return x


def cascade(u, a: float = 1.5, T: float = 0.1, x0: float = 0.0, stages: int = 2) -> list[np.ndarray]:
    """Feed ``u`` through ``stages`` identical lags; returns every stage output."""
    if stages < 1:
        raise ValueError(f"stages must be >= 1, got {stages}")
    outputs = []
    signal = u
    for _ in range(stages):
        signal = first_order_lag(signal, a=a, T=T, x0=x0)
        outputs.append(signal)
    return outputs


def simulate(config: EulerConfig | None = None, u: Callable | None = None) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(t, u(t), x(t))`` for the lag driven by ``u`` (default: the bump)."""
    config = config or EulerConfig()
    t = config.times
    u_vals = np.asarray((u or bump_input)(t), dtype=float)
    return t, u_vals, first_order_lag(u_vals, a=config.a, T=config.T, x0=config.x0)


def reference_solution(config: EulerConfig | None = None, u: Callable | None = None, rtol: float = 1e-8) -> np.ndarray:
    """Adaptive Runge-Kutta solution of ``x' = u(t) - a x`` on ``config.times``."""
    from scipy.integrate import solve_ivp

    config = config or EulerConfig()
    u = u or bump_input
    t = config.times
    sol = solve_ivp(
        lambda s, x: np.asarray(u(s), dtype=float) - config.a * x,
        (float(t[0]), float(t[-1])),
        [config.x0],
        t_eval=t,
        rtol=rtol,
        atol=rtol * 1e-2,
        max_step=config.T,
    )
    if not sol.success:
        raise RuntimeError(f"reference integration failed: {sol.message}")
    return sol.y[0]


__all__ = [
    "EulerConfig",
    "bump_input",
    "first_order_lag",
    "cascade",
    "simulate",
    "reference_solution",
]
