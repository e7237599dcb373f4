"""Polynomial interpolation in the second (true) barycentric form.

For nodes ``x_j``, weights ``w_j`` and data ``f_j``::

    p(t) = sum_j w_j f_j / (t - x_j)  /  sum_j w_j / (t - x_j)

Evaluating at a node returns the data value exactly. On equispaced nodes the
interpolant of the Runge function oscillates near the interval ends as the
degree grows; on Chebyshev nodes the maximum error decays geometrically.

Example
-------
>>> from numlabs.interpolation import BarycentricInterpolator, runge
>>> p = BarycentricInterpolator.from_function(runge, 32, kind="chebyshev")
>>> float(p(-1.0)) == runge(-1.0)
True
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..logging import get_logger
from .nodes import chebyshev_nodes, chebyshev_weights, equispaced_nodes, equispaced_weights

logger = get_logger(__name__)

NODE_TOL = 1e-15

_NODE_KINDS = {
    "equispaced": (equispaced_nodes, equispaced_weights),
    "chebyshev": (chebyshev_nodes, chebyshev_weights),
}


def barycentric_interpolate(fvals, nodes, weights, t, node_tol: float = NODE_TOL):
    """Evaluate the barycentric interpolant at ``t`` (scalar or array).

    Returns a float for scalar ``t`` and an array of the same shape otherwise.
    """
    fvals = np.asarray(fvals, dtype=float)
    nodes = np.asarray(nodes, dtype=float)
    weights = np.asarray(weights, dtype=float)
    if not (fvals.shape == nodes.shape == weights.shape) or nodes.ndim != 1:
        raise ValueError(
            f"fvals, nodes and weights must be 1D of equal length, got "
            f"{fvals.shape}, {nodes.shape}, {weights.shape}"
        )
    if nodes.size == 0:
        raise ValueError("at least one node is required")

    t_arr = np.asarray(t, dtype=float)
    flat = t_arr.reshape(-1)
    diff = flat[:, None] - nodes[None, :]
    hit = np.abs(diff) < node_tol
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = weights[None, :] / diff
        values = (ratio @ fvals) / ratio.sum(axis=1)
    rows = hit.any(axis=1)
    if np.any(rows):
        values[rows] = fvals[np.argmax(hit[rows], axis=1)]
    if t_arr.ndim == 0:
        return float(values[0])
    return values.reshape(t_arr.shape)


class BarycentricInterpolator:
    """Callable polynomial interpolant through ``(nodes, fvals)``."""

    def __init__(self, nodes, weights, fvals) -> None:
        self.nodes = np.asarray(nodes, dtype=float)
        self.weights = np.asarray(weights, dtype=float)
        self.fvals = np.asarray(fvals, dtype=float)
        if not (self.nodes.shape == self.weights.shape == self.fvals.shape):
            raise ValueError("nodes, weights and fvals must have the same shape")

    @classmethod
    def from_function(
        cls, f: Callable, n: int, kind: str = "equispaced"
    ) -> "BarycentricInterpolator":
        """Interpolate ``f`` at ``n + 1`` nodes of the given ``kind``.

        Args:
            f: Function accepting a NumPy array of nodes.
            n: Polynomial degree.
            kind: ``"equispaced"`` or ``"chebyshev"``.
        """
        try:
            make_nodes, make_weights = _NODE_KINDS[kind]
        except KeyError:
            raise ValueError(
                f"unknown node kind {kind!r}; expected one of {sorted(_NODE_KINDS)}"
            ) from None
        nodes = make_nodes(n)
        fvals = np.asarray(f(nodes), dtype=float)
        logger.debug("interpolating on %d %s nodes", nodes.size, kind)
        return cls(nodes, make_weights(n), fvals)

    @property
    def degree(self) -> int:
        return self.nodes.size - 1

    def __call__(self, t):
        return barycentric_interpolate(self.fvals, self.nodes, self.weights, t)

    def __repr__(self) -> str:
        return f"BarycentricInterpolator(degree={self.degree})"


def runge(x):
    """Runge's example ``1 / (1 + 16 x^2)``."""
    return 1.0 / (1.0 + 16.0 * np.asarray(x, dtype=float) ** 2)


def max_error(f: Callable, interpolant: Callable, t=None) -> float:
    """Largest ``|f(t) - interpolant(t)|`` over the sample points ``t``.

    Defaults to 501 equally spaced points on [-1, 1].
    """
    if t is None:
        t = np.linspace(-1.0, 1.0, 501)
    t = np.asarray(t, dtype=float)
    return float(np.max(np.abs(np.asarray(f(t)) - np.asarray(interpolant(t)))))


__all__ = [
    "NODE_TOL",
    "barycentric_interpolate",
    "BarycentricInterpolator",
    "runge",
    "max_error",
]
