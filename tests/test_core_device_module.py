"""Tests for the device abstraction and input checks."""

import numpy as np
import pytest
import torch

import numlabs as nl
from numlabs.core import check_1d_array, check_positive_int
from numlabs.core.device import Device, default_device, device


class TestDevice:
    """Tests for Device class."""

    def test_device_creation(self):
        dev = Device(name="test", torch_device=torch.device("cpu"), dtype=torch.float32)
        assert dev.name == "test"
        assert dev.torch_device == torch.device("cpu")
        assert dev.dtype == torch.float32

    def test_device_repr(self):
        repr_str = repr(Device(name="cpu", torch_device=torch.device("cpu")))
        assert "cpu" in repr_str
        assert "float64" in repr_str

    def test_as_torch_device(self):
        dev = Device(name="cpu", torch_device=torch.device("cpu"))
        assert dev.as_torch_device() == torch.device("cpu")


class TestDeviceFactory:
    """Tests for device factory function."""

    def test_device_cpu(self):
        dev = device("cpu")
        assert dev.name == "cpu"
        assert dev.dtype == torch.float64

    def test_device_single_precision(self):
        assert device("cpu", single_precision=True).dtype == torch.float32

    def test_device_cuda(self):
        if torch.cuda.is_available():
            assert device("cuda").torch_device.type == "cuda"
        else:
            with pytest.raises(RuntimeError, match="CUDA"):
                device("cuda")

    def test_device_unknown(self):
        with pytest.raises(ValueError, match="Unsupported device name"):
            device("tpu")

    def test_default_device(self):
        dev = default_device()
        assert dev.name == "cpu"
        assert dev.dtype == torch.float64


def test_package_exports_device_helpers():
    assert nl.default_device().name == "cpu"
    assert isinstance(nl.__version__, str)


def test_check_1d_array():
    arr = check_1d_array([1, 2, 3], "x")
    assert arr.dtype == np.float64
    with pytest.raises(ValueError, match="x"):
        check_1d_array([[1.0, 2.0]], "x")


def test_check_positive_int():
    assert check_positive_int(3, "n") == 3
    assert check_positive_int(0, "n", minimum=0) == 0
    with pytest.raises(ValueError, match="n"):
        check_positive_int(0, "n")
