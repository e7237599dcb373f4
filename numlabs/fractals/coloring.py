"""Map escape-time depth arrays to RGB images."""

from __future__ import annotations

import numpy as np


def _as_depth(depth) -> np.ndarray:
    arr = np.asarray(depth)
    if arr.ndim != 2:
        raise ValueError(f"depth must be a 2D array, got {arr.ndim}D")
    return arr.astype(np.int64)


def grayscale(depth) -> np.ndarray:
    """Return ``(rows, cols, 3)`` uint8 pixels ``(n, n, n)``, clipped to 255."""
    n = np.clip(_as_depth(depth), 0, 255).astype(np.uint8)
    return np.stack([n, n, n], axis=-1)


def gradient(depth) -> np.ndarray:
    """Banded colour map over the depth values.

    ======== ===================
    depth    colour
    ======== ===================
    < 50     (0, 0, n + 200)
    < 100    (0, n + 150, n + 150)
    < 150    (100, n + 100, 0)
    < 200    (n + 50, 50, 0)
    other    (n, n, n)
    ======== ===================
    """
    n = _as_depth(depth)
    bands = [n < 50, n < 100, n < 150, n < 200]
    r = np.select(bands, [0, 0, 100, n + 50], default=n)
    g = np.select(bands, [0, n + 150, n + 100, 50], default=n)
    b = np.select(bands, [n + 200, n + 150, 0, 0], default=n)
    return np.clip(np.stack([r, g, b], axis=-1), 0, 255).astype(np.uint8)


def to_image(rgb) -> np.ndarray:
    """Reorder a ``[real, imag]`` indexed array into image rows.

    Row 0 of the result is the largest imaginary part and columns run along
    the real axis, matching the usual on-screen orientation.
    """
    arr = np.asarray(rgb)
    if arr.ndim < 2:
        raise ValueError("expected at least a 2D array")
    return np.flipud(np.swapaxes(arr, 0, 1))


__all__ = ["grayscale", "gradient", "to_image"]
