"""Pytest fixtures for trajcluster tests."""

import numpy as np
import pytest


@pytest.fixture
def two_blobs_2d() -> np.ndarray:
    """Two separated 3-point clusters in 2D."""
    return np.array(
        [
            [0.0, 0.0],
            [1.0, 0.0],
            [0.0, 1.0],
            [10.0, 10.0],
            [11.0, 10.0],
            [10.0, 11.0],
        ]
    )


@pytest.fixture
def line_1d() -> np.ndarray:
    """1D data with two groups, as a single feature column."""
    return np.array([0.0, 1.0, 2.0, 10.0, 11.0, 12.0])[:, np.newaxis]


@pytest.fixture
def random_points() -> np.ndarray:
    """Unstructured random points (500 samples, 4 features)."""
    rng = np.random.default_rng(7)
    return rng.normal(size=(500, 4))
