"""Pytest configuration and shared fixtures for numlabs tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Isolation of the global debug flag between tests
"""

import os

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic torch RNG on the default numlabs device."""
    from numlabs.core.device import default_device

    generator = torch.Generator(device=default_device().as_torch_device())
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global numpy and torch generators before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(_seed())


@pytest.fixture(autouse=True)
def reset_debug_mode():
    """Restore the global debug flag after each test."""
    from numlabs.diagnostics import is_debug_enabled, set_debug_enabled

    prev = is_debug_enabled()
    yield
    set_debug_enabled(prev)
