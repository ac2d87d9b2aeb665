"""trajcluster - k-means clustering for large sets of high-dimensional points.

This package computes cluster centers for data such as molecular-dynamics
trajectory frames: greedy oversampled k-means++ seeding followed by Lloyd
refinement, with pluggable metrics and per-call thread counts.

Usage:
    >>> import numpy as np
    >>> from trajcluster import KMeansClusterer
    >>>
    >>> frames = np.random.randn(10000, 3)
    >>> clusterer = KMeansClusterer(n_clusters=100, n_threads=4)
    >>> clusterer.fit(frames)
    >>> print(clusterer.status_, clusterer.inertia_)
    >>>
    >>> # Lower-level operations
    >>> from trajcluster import seed, refine
    >>> centers = seed(frames, 100, n_threads=4, seed=42)
    >>> centers, n_iter, status, cost = refine(frames, centers, max_iter=50)
"""

# ============================================================================
# Main API
# ============================================================================

from trajcluster.clustering import (
    ClusterInfo,
    ClusterMetrics,
    Clusterer,
    KMeansClusterer,
    RefineResult,
    Signal,
    Status,
    assign,
    cluster_summary,
    compute_cluster_metrics,
    cost,
    refine,
    seed,
    seed_uniform,
)
from trajcluster.config import KMeansConfig
from trajcluster.distance import (
    EuclideanMetric,
    Metric,
    PeriodicEuclideanMetric,
    compute_distances,
    get_metric,
    precompute_aux,
)
from trajcluster.exceptions import (
    InvalidArgumentError,
    NotFittedError,
    NumericError,
    TrajclusterError,
)

# Submodules
from trajcluster import clustering, distance

# ============================================================================
# Package metadata
# ============================================================================

__version__ = "0.1.0"

__all__ = [
    # Main API
    "KMeansClusterer",
    "KMeansConfig",
    "Clusterer",
    # Engine operations
    "seed",
    "seed_uniform",
    "assign",
    "cost",
    "refine",
    "RefineResult",
    "Status",
    "Signal",
    # Metrics
    "Metric",
    "EuclideanMetric",
    "PeriodicEuclideanMetric",
    "get_metric",
    "compute_distances",
    "precompute_aux",
    # Cluster quality
    "ClusterInfo",
    "ClusterMetrics",
    "cluster_summary",
    "compute_cluster_metrics",
    # Exceptions
    "TrajclusterError",
    "InvalidArgumentError",
    "NumericError",
    "NotFittedError",
    # Modules
    "clustering",
    "distance",
]
