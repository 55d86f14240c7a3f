"""Tests for the compute device abstraction."""

import pytest
import torch

import convection1d as cv
from convection1d.core.device import Device, default_device, device


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
        assert dev.torch_device == torch.device("cpu")
        assert dev.dtype == torch.float64

    def test_device_cpu_custom_dtype(self):
        assert device("cpu", dtype=torch.float32).dtype == torch.float32

    def test_device_cuda(self):
        if torch.cuda.is_available():
            assert device("cuda").name == "cuda"
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

    def test_exported_from_package(self):
        assert cv.device is device
        assert cv.Device is Device
