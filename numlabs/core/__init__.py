"""Core abstractions shared across numlabs subpackages."""

from .device import Device, default_device, device
from .utils import check_1d_array, check_positive_int

__all__ = [
    "Device",
    "device",
    "default_device",
    "check_1d_array",
    "check_positive_int",
]
