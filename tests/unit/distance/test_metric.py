"""Unit tests for distance metrics."""

import numpy as np
import pytest

from trajcluster.distance.metric import (
    EuclideanMetric,
    Metric,
    PeriodicEuclideanMetric,
    available_metrics,
    get_metric,
)
from trajcluster.exceptions import InvalidArgumentError


def _brute_force_sq(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    return np.array([[np.sum((a - b) ** 2) for b in y] for a in x])


class TestEuclideanMetric:
    """Tests for EuclideanMetric."""

    def test_matches_brute_force(self, query_points, reference_points):
        """Test squared distances against an explicit double loop."""
        metric = EuclideanMetric()
        dist = metric.pairwise(query_points, reference_points)
        np.testing.assert_allclose(dist, _brute_force_sq(query_points, reference_points))

    def test_not_squared(self, query_points, reference_points):
        """Test squared=False returns plain distances."""
        metric = EuclideanMetric()
        dist = metric.pairwise(query_points, reference_points, squared=False)
        np.testing.assert_allclose(
            dist, np.sqrt(_brute_force_sq(query_points, reference_points))
        )

    def test_self_distance_is_exactly_zero(self, reference_points):
        """Test a point is exactly zero away from itself."""
        metric = EuclideanMetric()
        dist = metric.pairwise(reference_points, reference_points)
        assert np.all(np.diag(dist) == 0.0)

    def test_symmetric(self, query_points, reference_points):
        """Test d(x, y) == d(y, x)."""
        metric = EuclideanMetric()
        forward = metric.pairwise(query_points, reference_points)
        backward = metric.pairwise(reference_points, query_points)
        np.testing.assert_array_equal(forward, backward.T)

    def test_no_aux_by_default(self, reference_points):
        """Test the exact variant needs no auxiliary values."""
        assert EuclideanMetric().precompute_aux(reference_points) is None

    def test_expanded_uses_squared_norms(self, query_points, reference_points):
        """Test expand=True precomputes norms and agrees with the exact variant."""
        metric = EuclideanMetric(expand=True)
        aux_q = metric.precompute_aux(query_points)
        aux_r = metric.precompute_aux(reference_points)
        np.testing.assert_allclose(aux_r, np.sum(reference_points**2, axis=1))

        dist = metric.pairwise(query_points, reference_points, aux_q, aux_r)
        np.testing.assert_allclose(
            dist, _brute_force_sq(query_points, reference_points), atol=1e-9
        )
        assert np.all(dist >= 0)

    def test_float32_preserved(self, query_points, reference_points):
        """Test float32 inputs produce float32 distances."""
        metric = EuclideanMetric()
        dist = metric.pairwise(
            query_points.astype(np.float32), reference_points.astype(np.float32)
        )
        assert dist.dtype == np.float32

    def test_satisfies_protocol(self):
        """Test EuclideanMetric implements the Metric protocol."""
        assert isinstance(EuclideanMetric(), Metric)


class TestPeriodicEuclideanMetric:
    """Tests for PeriodicEuclideanMetric."""

    def test_minimum_image(self):
        """Test distances wrap around the box."""
        metric = PeriodicEuclideanMetric(box=10.0)
        x = np.array([[0.5, 0.0]])
        y = np.array([[9.5, 0.0], [5.0, 0.0]])
        dist = metric.pairwise(x, y, squared=False)
        np.testing.assert_allclose(dist, [[1.0, 4.5]])

    def test_per_dimension_box(self):
        """Test different box lengths per dimension."""
        metric = PeriodicEuclideanMetric(box=[10.0, 4.0])
        x = np.array([[0.0, 0.0]])
        y = np.array([[9.0, 3.0]])
        np.testing.assert_allclose(metric.pairwise(x, y), [[1.0 + 1.0]])

    def test_bounded_by_half_box_diagonal(self):
        """Test no distance exceeds half the box diagonal."""
        rng = np.random.default_rng(3)
        box = np.array([3.0, 5.0, 7.0])
        points = rng.uniform(0, 1, size=(40, 3)) * box
        metric = PeriodicEuclideanMetric(box=box)
        dist = metric.pairwise(points, points, squared=False)
        assert dist.max() <= np.linalg.norm(box / 2) + 1e-12

    def test_box_dimension_mismatch_raises(self):
        """Test a box with the wrong number of lengths is rejected."""
        metric = PeriodicEuclideanMetric(box=[1.0, 2.0])
        with pytest.raises(InvalidArgumentError, match="Periodic box"):
            metric.pairwise(np.zeros((2, 3)), np.zeros((2, 3)))

    @pytest.mark.parametrize("box", [0.0, -1.0, [1.0, np.inf]])
    def test_invalid_box_raises(self, box):
        """Test non-positive or infinite box lengths are rejected."""
        with pytest.raises(InvalidArgumentError, match="positive"):
            PeriodicEuclideanMetric(box=box)


class TestGetMetric:
    """Tests for metric lookup."""

    def test_by_name(self):
        """Test resolving metrics by name."""
        assert isinstance(get_metric("euclidean"), EuclideanMetric)
        assert isinstance(get_metric("Periodic", box=2.0), PeriodicEuclideanMetric)
        assert isinstance(get_metric("minimum_image", box=2.0), PeriodicEuclideanMetric)

    def test_instance_passthrough(self):
        """Test Metric instances are returned unchanged."""
        metric = EuclideanMetric(expand=True)
        assert get_metric(metric) is metric

    def test_unknown_name_raises(self):
        """Test an unknown name raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Unknown metric"):
            get_metric("manhattan")

    def test_missing_box_raises(self):
        """Test constructor errors surface as InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Invalid arguments"):
            get_metric("periodic")

    def test_non_metric_raises(self):
        """Test objects that are not metrics are rejected."""
        with pytest.raises(InvalidArgumentError, match="Expected a metric"):
            get_metric(42)

    def test_available_metrics(self):
        """Test listing metric names."""
        assert "euclidean" in available_metrics()
        assert "periodic" in available_metrics()
