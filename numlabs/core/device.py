"""Compute-device abstraction for the tensor-backed routines."""

from __future__ import annotations

import torch


class Device:
    """
    Represents a logical compute device with an underlying PyTorch device and dtype.

    The escape-time grids of :mod:`numlabs.fractals` are evaluated on a
    whole tensor at once; this class carries where that tensor lives and at
    which precision it is computed. It is immutable in the sense that its
    attributes should not be modified after construction.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        dtype: torch.dtype = torch.float64,
    ) -> None:
        """
        Initialize a Device.

        Args:
            name: Logical device name ("cpu" or "cuda").
            torch_device: Underlying PyTorch device.
            dtype: Floating-point dtype of the real and imaginary parts.
        """
        self.name = name
        self.torch_device = torch_device
        self.dtype = dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"dtype={self.dtype})"
        )

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str, single_precision: bool = False) -> Device:
    """
    Create a Device instance from a device name.

    Supported device names:
        - "cpu": CPU tensors
        - "cuda": CUDA tensors (only if CUDA is available)

    Args:
        name: Device name string.
        single_precision: Use float32 instead of float64.
            The classroom programs exist in both float and double flavours;
            single precision reproduces the float variants.

    Returns:
        A Device instance.

    Raises:
        RuntimeError: If "cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    dtype = torch.float32 if single_precision else torch.float64
    if name == "cpu":
        return Device("cpu", torch.device("cpu"), dtype)
    if name == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device("cuda", torch.device("cuda"), dtype)
    supported = ["cpu", "cuda"]
    raise ValueError(f"Unsupported device name: {name!r}. Supported devices: {supported}")


def default_device() -> Device:
    """Return the default device (double precision on CPU)."""
    return device("cpu")


__all__ = ["Device", "device", "default_device"]
