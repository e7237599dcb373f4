"""Iteration tracing switch for numlabs.

With tracing on, Jacobi, Gauss-Seidel and the Newton solvers emit one DEBUG
record per step through :func:`numlabs.diagnostics.trace_iteration`:

    [DEBUG] numlabs.iteration.linear: jacobi it=3 x=( 0.985714,  1.97143) residual=2.400e-02

The records only reach the terminal when the numlabs loggers are at DEBUG,
so :func:`debug_context` can lower the level for the duration of a block.
``NUMLABS_DEBUG=1`` turns tracing on at import time; the ``--debug`` flag of
the ``numlabs`` command does the same and sets the level.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from ..logging import get_log_level, set_log_level

_DEBUG_ENV_VAR = "NUMLABS_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in ("1", "true", "yes", "on")


def is_debug_enabled() -> bool:
    """Return whether per-iteration tracing is on."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True, log_level: Optional[Union[int, str]] = None) -> Iterator[None]:
    """
    Turn tracing on or off inside a block, restoring the previous state after.

    Parameters
    ----------
    enabled:
        Tracing state inside the block.
    log_level:
        If given, the numlabs loggers run at this level inside the block and
        return to their previous level afterwards.

    Example
    -------
    >>> from numlabs.iteration import jacobi
    >>> with debug_context(True, log_level="DEBUG"):
    ...     res = jacobi(maxiter=3)   # three "jacobi it=" records on stderr
    """
    global _debug_enabled
    prev = _debug_enabled
    prev_level = get_log_level()
    _debug_enabled = bool(enabled)
    if log_level is not None:
        set_log_level(log_level)
    try:
        yield
    finally:
        _debug_enabled = prev
        if log_level is not None:
            set_log_level(prev_level)
