"""Shared pytest fixtures for benchmarks."""

import numpy as np
import pytest


@pytest.fixture
def synthetic_frames() -> np.ndarray:
    """Synthetic trajectory frames for benchmarking (10000 x 32, float32)."""
    rng = np.random.default_rng(42)
    states = rng.normal(scale=5.0, size=(50, 32))
    visits = rng.integers(0, 50, size=10_000)
    frames = states[visits] + rng.normal(size=(10_000, 32))
    return frames.astype(np.float32)
