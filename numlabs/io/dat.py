"""Plain-text column tables.

``.dat`` files hold one sample per line with whitespace separated columns,
the layout gnuplot reads with ``using 1:2``.
"""

from __future__ import annotations

import os
from typing import Optional, Union

import numpy as np

PathLike = Union[str, os.PathLike]


def write_columns(path: PathLike, *columns, fmt: str = "% .10f", header: Optional[str] = None) -> None:
    """
    Write equal-length 1D arrays as the columns of a text table.

    Parameters
    ----------
    path:
        Destination file; parent directories must exist.
    *columns:
        One array per column.
    fmt:
        ``printf``-style format applied to every value.
    header:
        Optional first line, written with a leading ``#``.
    """
    if not columns:
        raise ValueError("at least one column is required")
    arrays = [np.asarray(c, dtype=float).ravel() for c in columns]
    length = arrays[0].size
    if any(a.size != length for a in arrays):
        raise ValueError(f"columns must have equal length, got {[a.size for a in arrays]}")
    np.savetxt(path, np.column_stack(arrays), fmt=fmt, header=header or "", comments="# ")


def read_columns(path: PathLike) -> list[np.ndarray]:
    """Read a table written by :func:`write_columns`; one array per column."""
    data = np.loadtxt(path, dtype=float, comments="#", ndmin=2)
    return [data[:, k].copy() for k in range(data.shape[1])]


__all__ = ["write_columns", "read_columns"]
