"""Fixtures for integration tests."""

import numpy as np
import pytest


@pytest.fixture
def trajectory_frames() -> np.ndarray:
    """Synthetic trajectory: 4 metastable states in 6D (2000 frames)."""
    rng = np.random.default_rng(2020)
    states = rng.uniform(-10, 10, size=(4, 6))
    visits = rng.integers(0, 4, size=2000)
    return states[visits] + 0.3 * rng.normal(size=(2000, 6))
