"""Per-iteration tracing shared by the iterative solvers."""

from __future__ import annotations

import logging

import numpy as np

from .debug_mode import is_debug_enabled


def trace_iteration(logger: logging.Logger, label: str, nit: int, x, residual: float) -> None:
    """
    Emit a DEBUG record for one iteration when debug mode is enabled.

    Parameters
    ----------
    logger:
        Module logger obtained from :func:`numlabs.logging.get_logger`.
    label:
        Short algorithm name printed in front of the record.
    nit:
        Iteration counter (1-based).
    x:
        Current iterate; scalars and arrays are both accepted.
    residual:
        Scalar convergence measure for this iteration.
    """
    if not is_debug_enabled():
        return
    values = np.atleast_1d(np.asarray(x))
    formatted = ", ".join(f"{v: .6g}" for v in values.tolist())
    logger.debug("%s it=%d x=(%s) residual=%.3e", label, nit, formatted, residual)


__all__ = ["trace_iteration"]
