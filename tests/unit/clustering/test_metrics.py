"""Unit tests for clustering metrics."""

import numpy as np

from trajcluster.clustering.metrics import (
    ClusterInfo,
    ClusterMetrics,
    cluster_summary,
    compute_cluster_metrics,
)


class TestClusterInfo:
    """Tests for ClusterInfo dataclass."""

    def test_creation(self):
        """Test creating ClusterInfo."""
        centroid = np.array([1.0, 2.0, 3.0])
        info = ClusterInfo(cluster_id=0, size=10, centroid=centroid, cost=5.0)

        assert info.cluster_id == 0
        assert info.size == 10
        np.testing.assert_array_equal(info.centroid, centroid)
        assert info.cost == 5.0
        assert info.mean_cost == 0.5

    def test_empty_cluster_mean_cost(self):
        """Test mean_cost of an empty cluster is zero."""
        info = ClusterInfo(cluster_id=1, size=0, centroid=np.zeros(2))
        assert info.mean_cost == 0.0

    def test_repr(self):
        """Test __repr__ format."""
        info = ClusterInfo(cluster_id=5, size=20, centroid=np.array([1.0, 2.0]))

        repr_str = repr(info)
        assert "ClusterInfo" in repr_str
        assert "id=5" in repr_str
        assert "size=20" in repr_str


class TestClusterMetrics:
    """Tests for ClusterMetrics dataclass."""

    def test_creation(self):
        """Test creating ClusterMetrics."""
        metrics = ClusterMetrics(
            silhouette_score=0.75,
            n_clusters=3,
            n_samples=100,
            cluster_sizes=[30, 40, 30],
            inertia=123.4,
        )

        assert metrics.silhouette_score == 0.75
        assert metrics.n_clusters == 3
        assert metrics.inertia == 123.4

    def test_size_properties(self):
        """Test min/max/avg cluster size."""
        metrics = ClusterMetrics(
            silhouette_score=0.5,
            n_clusters=3,
            n_samples=60,
            cluster_sizes=[10, 20, 30],
        )

        assert metrics.min_cluster_size == 10
        assert metrics.max_cluster_size == 30
        assert metrics.avg_cluster_size == 20.0

    def test_empty_sizes(self):
        """Test size properties with no clusters."""
        metrics = ClusterMetrics(
            silhouette_score=0.0, n_clusters=0, n_samples=0, cluster_sizes=[]
        )

        assert metrics.min_cluster_size == 0
        assert metrics.max_cluster_size == 0
        assert metrics.avg_cluster_size == 0.0

    def test_repr(self):
        """Test __repr__ format."""
        metrics = ClusterMetrics(
            silhouette_score=0.123,
            n_clusters=2,
            n_samples=10,
            cluster_sizes=[4, 6],
        )

        repr_str = repr(metrics)
        assert "n_clusters=2" in repr_str
        assert "silhouette=0.123" in repr_str
        assert "sizes=4-6" in repr_str


class TestComputeClusterMetrics:
    """Tests for compute_cluster_metrics."""

    def test_well_separated(self, simple_2d_clusters):
        """Test well separated clusters score a high silhouette."""
        labels = np.repeat([0, 1, 2], 20)
        metrics = compute_cluster_metrics(simple_2d_clusters, labels, inertia=10.0)

        assert metrics.n_clusters == 3
        assert metrics.n_samples == 60
        assert metrics.cluster_sizes == [20, 20, 20]
        assert metrics.silhouette_score > 0.7
        assert metrics.inertia == 10.0

    def test_single_cluster(self, simple_2d_clusters):
        """Test silhouette is 0 with one cluster."""
        labels = np.zeros(60, dtype=int)
        metrics = compute_cluster_metrics(simple_2d_clusters, labels)

        assert metrics.n_clusters == 1
        assert metrics.silhouette_score == 0.0
        assert metrics.inertia is None

    def test_one_point_per_cluster(self, two_blobs_2d):
        """Test silhouette is 0 when every point is its own cluster."""
        metrics = compute_cluster_metrics(two_blobs_2d, np.arange(6))
        assert metrics.silhouette_score == 0.0
        assert metrics.n_clusters == 6


class TestClusterSummary:
    """Tests for cluster_summary."""

    def test_sizes_and_costs(self, line_1d):
        """Test per-cluster sizes and within-cluster costs."""
        centers = np.array([[1.0], [11.0], [50.0]])
        labels = np.array([0, 0, 0, 1, 1, 1])
        infos = cluster_summary(line_1d, centers, labels)

        assert [info.cluster_id for info in infos] == [0, 1, 2]
        assert [info.size for info in infos] == [3, 3, 0]
        assert [info.cost for info in infos] == [2.0, 2.0, 0.0]
        np.testing.assert_array_equal(infos[2].centroid, [50.0])
