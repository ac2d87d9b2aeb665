"""Clustering components for trajcluster."""

from trajcluster.clustering.assignment import assign, cost
from trajcluster.clustering.base import Clusterer
from trajcluster.clustering.kmeans import KMeansClusterer
from trajcluster.clustering.lloyd import RefineResult, Status, refine, update_centers
from trajcluster.clustering.metrics import (
    ClusterInfo,
    ClusterMetrics,
    cluster_summary,
    compute_cluster_metrics,
)
from trajcluster.clustering.progress import ProgressCallback, Signal
from trajcluster.clustering.seeding import n_seeding_trials, seed, seed_uniform

__all__ = [
    # Protocol
    "Clusterer",
    # Clusterers
    "KMeansClusterer",
    # Engine
    "seed",
    "seed_uniform",
    "n_seeding_trials",
    "assign",
    "cost",
    "refine",
    "update_centers",
    "RefineResult",
    "Status",
    # Progress
    "ProgressCallback",
    "Signal",
    # Metrics
    "ClusterInfo",
    "ClusterMetrics",
    "cluster_summary",
    "compute_cluster_metrics",
]
