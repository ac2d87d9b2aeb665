"""Clustering metrics and info classes."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from trajcluster.distance.metric import Metric, get_metric


@dataclass(frozen=True)
class ClusterInfo:
    """Information about a single cluster.

    Attributes:
        cluster_id: Index of the cluster center
        size: Number of points assigned to the cluster
        centroid: Cluster center vector
        cost: Sum of squared distances of the members to the center
    """

    cluster_id: int
    size: int
    centroid: np.ndarray
    cost: float = 0.0

    @property
    def mean_cost(self) -> float:
        """Average squared distance of a member to the center."""
        return self.cost / self.size if self.size else 0.0

    def __repr__(self) -> str:
        return (
            f"ClusterInfo(id={self.cluster_id}, size={self.size}, "
            f"cost={self.cost:.3g})"
        )


@dataclass(frozen=True)
class ClusterMetrics:
    """Overall clustering metrics.

    Attributes:
        silhouette_score: Silhouette score (-1 to 1, higher is better)
        n_clusters: Number of non-empty clusters
        n_samples: Total number of samples
        cluster_sizes: List of cluster sizes
        inertia: Sum of squared distances to closest centroid (if applicable)
    """

    silhouette_score: float
    n_clusters: int
    n_samples: int
    cluster_sizes: list[int]
    inertia: float | None = None

    @property
    def min_cluster_size(self) -> int:
        """Minimum cluster size."""
        return min(self.cluster_sizes) if self.cluster_sizes else 0

    @property
    def max_cluster_size(self) -> int:
        """Maximum cluster size."""
        return max(self.cluster_sizes) if self.cluster_sizes else 0

    @property
    def avg_cluster_size(self) -> float:
        """Average cluster size."""
        if not self.cluster_sizes:
            return 0.0
        return sum(self.cluster_sizes) / len(self.cluster_sizes)

    def __repr__(self) -> str:
        return (
            f"ClusterMetrics(n_clusters={self.n_clusters}, "
            f"silhouette={self.silhouette_score:.3f}, "
            f"sizes={self.min_cluster_size}-{self.max_cluster_size})"
        )


def compute_cluster_metrics(
    data: np.ndarray,
    labels: np.ndarray,
    inertia: float | None = None,
) -> ClusterMetrics:
    """Compute clustering metrics from data and labels.

    Args:
        data: Input points of shape (n_samples, n_features)
        labels: Cluster labels of shape (n_samples,)
        inertia: Optional inertia value from the clustering run

    Returns:
        ClusterMetrics object with computed metrics
    """
    from sklearn.metrics import silhouette_score as sk_silhouette_score

    labels = np.asarray(labels)
    n_samples = len(labels)
    unique_labels, sizes = np.unique(labels, return_counts=True)
    n_clusters = len(unique_labels)

    # Silhouette needs 2 <= n_clusters <= n_samples - 1
    if 2 <= n_clusters < n_samples:
        silhouette = float(sk_silhouette_score(data, labels))
    else:
        silhouette = 0.0

    return ClusterMetrics(
        silhouette_score=silhouette,
        n_clusters=n_clusters,
        n_samples=n_samples,
        cluster_sizes=[int(size) for size in sizes],
        inertia=inertia,
    )


def cluster_summary(
    data: np.ndarray,
    centers: np.ndarray,
    labels: np.ndarray,
    metric: str | Metric = "euclidean",
) -> list[ClusterInfo]:
    """Describe every cluster, including empty ones.

    Args:
        data: Input points of shape (n_samples, n_features)
        centers: Cluster centers of shape (n_clusters, n_features)
        labels: Cluster labels of shape (n_samples,)
        metric: Metric used for the within-cluster cost

    Returns:
        One ClusterInfo per center, ordered by cluster id
    """
    metric = get_metric(metric)
    labels = np.asarray(labels)
    infos = []
    for cluster_id, center in enumerate(centers):
        members = data[labels == cluster_id]
        within = 0.0
        if len(members):
            within = float(
                metric.pairwise(members, center[np.newaxis, :]).sum(dtype=np.float64)
            )
        infos.append(
            ClusterInfo(
                cluster_id=cluster_id,
                size=int(len(members)),
                centroid=center.copy(),
                cost=within,
            )
        )
    return infos
