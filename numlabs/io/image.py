"""RGB images through libvips.

The file format follows the suffix of the path (``.png``, ``.ppm``,
``.tif``, ...), as libvips decides it.
"""

from __future__ import annotations

import os
from typing import Union

import numpy as np

try:
    import pyvips

    HAS_PYVIPS = True
except (ImportError, OSError):
    HAS_PYVIPS = False

PathLike = Union[str, os.PathLike]


def _require_pyvips() -> None:
    if not HAS_PYVIPS:
        raise RuntimeError("pyvips required for image files; install with pip install pyvips")


def write_image(path: PathLike, rgb) -> None:
    """Write ``(rows, cols, 3)`` uint8 pixels; row 0 is the top of the image."""
    pixels = np.asarray(rgb)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected an (rows, cols, 3) array, got shape {pixels.shape}")
    _require_pyvips()
    pixels = np.ascontiguousarray(pixels, dtype=np.uint8)
    rows, cols, bands = pixels.shape
    image = pyvips.Image.new_from_memory(pixels.tobytes(), cols, rows, bands, "uchar")
    image.write_to_file(str(path))


def read_image(path: PathLike) -> np.ndarray:
    """Read an image as ``(rows, cols, 3)`` uint8, dropping alpha and expanding gray."""
    _require_pyvips()
    p = str(path)
    if not os.path.exists(p):
        raise ValueError(f"no such image: {p}")
    try:
        image = pyvips.Image.new_from_file(p, access="sequential")
    except pyvips.Error as exc:
        raise ValueError(f"cannot read image {p}: {exc}") from exc

    if image.bands >= 3:
        image = image.extract_band(0, n=3)
    elif image.bands == 1:
        image = image.bandjoin([image, image])
    else:
        raise ValueError(f"unsupported band count {image.bands} in {p}")
    if image.format != "uchar":
        image = image.cast("uchar")

    try:
        mem = image.write_to_memory()
    except pyvips.Error as exc:
        raise ValueError(f"cannot decode image {p}: {exc}") from exc
    return np.frombuffer(mem, dtype=np.uint8).reshape(image.height, image.width, 3).copy()


__all__ = ["HAS_PYVIPS", "write_image", "read_image"]
