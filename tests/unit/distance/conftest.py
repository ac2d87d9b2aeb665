"""Fixtures for distance unit tests."""

import numpy as np
import pytest


@pytest.fixture
def query_points() -> np.ndarray:
    rng = np.random.default_rng(0)
    return rng.uniform(0, 10, size=(7, 3))


@pytest.fixture
def reference_points() -> np.ndarray:
    rng = np.random.default_rng(1)
    return rng.uniform(0, 10, size=(53, 3))
