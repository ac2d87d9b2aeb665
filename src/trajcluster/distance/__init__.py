"""Distance metrics and the parallel distance engine."""

from trajcluster.distance.engine import compute_distances, precompute_aux
from trajcluster.distance.metric import (
    EuclideanMetric,
    Metric,
    PeriodicEuclideanMetric,
    available_metrics,
    get_metric,
)

__all__ = [
    # Protocol
    "Metric",
    # Metrics
    "EuclideanMetric",
    "PeriodicEuclideanMetric",
    "available_metrics",
    "get_metric",
    # Engine
    "compute_distances",
    "precompute_aux",
]
