"""Escape-time iteration of ``z -> z^2 + c`` for Mandelbrot and Julia sets.

The grid routines evaluate every sample point at once, holding real and
imaginary parts in torch tensors on a :class:`~numlabs.core.device.Device`;
points drop out of the update once they have escaped.

Example
-------
>>> from numlabs.fractals import escape_time
>>> escape_time(0j), escape_time(1 + 0j)
(250, 2)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import torch

from ..core.device import Device, default_device
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FractalConfig:
    """Sampling parameters shared by the Mandelbrot and Julia grids.

    Attributes:
        size: Number of samples along each axis.
        max_iter: Iteration cap; points still bounded after it count as inside.
        escape_radius: Divergence threshold on ``|z|``.
    """

    size: int = 600
    max_iter: int = 250
    escape_radius: float = 2.0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.escape_radius <= 0:
            raise ValueError(f"escape_radius must be positive, got {self.escape_radius}")


@dataclass
class EscapeTimeGrid:
    """Depth values on a rectangular sample of the complex plane.

    ``depth[i, j] = max_iter - escape_time`` for the sample
    ``real[i] + 1j * imag[j]``, so 0 marks bounded points and large values
    mark points that escape quickly.
    """

    depth: np.ndarray
    real: np.ndarray
    imag: np.ndarray
    max_iter: int

    @property
    def inside(self) -> np.ndarray:
        """Boolean mask of points that never escaped."""
        return self.depth == 0

    @property
    def extent(self) -> tuple[float, float, float, float]:
        return (float(self.real[0]), float(self.real[-1]), float(self.imag[0]), float(self.imag[-1]))


def escape_time(
    c: complex,
    z0: complex = 0j,
    max_iter: int = 250,
    escape_radius: float = 2.0,
) -> int:
    """Return the number of iterations ``n`` before ``|z_{n+1}| > escape_radius``.

    ``max_iter`` is returned for orbits that stay bounded.
    """
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")
    r2 = escape_radius * escape_radius
    x, y = float(complex(z0).real), float(complex(z0).imag)
    a, b = float(complex(c).real), float(complex(c).imag)
    for n in range(max_iter):
        re = x * x - y * y + a
        im = 2.0 * x * y + b
        if re * re + im * im > r2:
            return n
        x, y = re, im
    return max_iter


def _axes(rmin: float, rmax: float, imin: float, imax: float, size: int) -> tuple[np.ndarray, np.ndarray]:
    if rmax <= rmin or imax <= imin:
        raise ValueError("need rmin < rmax and imin < imax")
    dr = (rmax - rmin) / size
    di = (imax - imin) / size
    return rmin + dr * np.arange(size), imin + di * np.arange(size)


def _escape_counts(
    x: torch.Tensor,
    y: torch.Tensor,
    a: torch.Tensor,
    b: torch.Tensor,
    max_iter: int,
    escape_radius: float,
) -> torch.Tensor:
    # z = x + iy, c = a + ib; same operation order as escape_time
    counts = torch.full(x.shape, max_iter, dtype=torch.int64, device=x.device)
    active = torch.ones(x.shape, dtype=torch.bool, device=x.device)
    r2 = escape_radius * escape_radius
    for n in range(max_iter):
        re = x * x - y * y + a
        im = 2.0 * x * y + b
        escaped = active & ((re * re + im * im) > r2)
        counts[escaped] = n
        active &= ~escaped
        if not bool(active.any()):
            break
        x = torch.where(active, re, x)
        y = torch.where(active, im, y)
    return counts


def _grid(
    real: np.ndarray,
    imag: np.ndarray,
    config: FractalConfig,
    device: Device | None,
    julia_c: complex | None,
) -> EscapeTimeGrid:
    dev = device or default_device()
    re = torch.as_tensor(real, dtype=dev.dtype, device=dev.as_torch_device())
    im = torch.as_tensor(imag, dtype=dev.dtype, device=dev.as_torch_device())
    shape = (re.numel(), im.numel())
    plane_re = re[:, None].expand(shape)
    plane_im = im[None, :].expand(shape)
    if julia_c is None:
        x = torch.zeros(shape, dtype=dev.dtype, device=re.device)
        y = torch.zeros_like(x)
        a, b = plane_re, plane_im
    else:
        x, y = plane_re, plane_im
        a = torch.full(shape, julia_c.real, dtype=dev.dtype, device=re.device)
        b = torch.full(shape, julia_c.imag, dtype=dev.dtype, device=re.device)
    counts = _escape_counts(x, y, a, b, config.max_iter, config.escape_radius)
    depth = (config.max_iter - counts).cpu().numpy()
    logger.debug(
        "escape grid %dx%d on %s: %d bounded points",
        depth.shape[0],
        depth.shape[1],
        dev.name,
        int(np.sum(depth == 0)),
    )
    return EscapeTimeGrid(depth=depth, real=real, imag=imag, max_iter=config.max_iter)


def mandelbrot_grid(
    rmin: float = -2.0,
    rmax: float = 0.5,
    imin: float = -1.25,
    imax: float = 1.25,
    config: FractalConfig | None = None,
    device: Device | None = None,
) -> EscapeTimeGrid:
    """Sample the Mandelbrot set: ``z_0 = 0`` and ``c`` runs over the grid.

    Sample ``(i, j)`` sits at ``rmin + i * dr + 1j * (imin + j * di)`` with
    ``dr = (rmax - rmin) / size`` and ``di = (imax - imin) / size``.
    """
    config = config or FractalConfig()
    real, imag = _axes(rmin, rmax, imin, imax, config.size)
    return _grid(real, imag, config, device, None)


def julia_grid(
    c: complex = -0.8 + 0.156j,
    rmin: float = -1.6,
    rmax: float = 1.6,
    imin: float = -1.6,
    imax: float = 1.6,
    config: FractalConfig | None = None,
    device: Device | None = None,
) -> EscapeTimeGrid:
    """Sample the filled Julia set of ``c``: ``z_0`` runs over the grid."""
    config = config or FractalConfig()
    real, imag = _axes(rmin, rmax, imin, imax, config.size)
    return _grid(real, imag, config, device, complex(c))


__all__ = [
    "FractalConfig",
    "EscapeTimeGrid",
    "escape_time",
    "mandelbrot_grid",
    "julia_grid",
]
