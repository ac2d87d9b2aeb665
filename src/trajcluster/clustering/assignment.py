"""Nearest-center assignment and the k-means cost function."""

from __future__ import annotations

import numpy as np

from trajcluster._parallel import run_chunks
from trajcluster._validation import (
    as_points,
    check_n_threads,
    check_same_dims,
)
from trajcluster.distance.engine import check_finite
from trajcluster.distance.metric import Metric, get_metric
from trajcluster.exceptions import InvalidArgumentError


def _nearest(
    data: np.ndarray,
    centers: np.ndarray,
    metric: Metric,
    n_threads: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Labels and minimal squared distances, split over points."""
    n_points = data.shape[0]
    labels = np.empty(n_points, dtype=np.int32)
    min_dists = np.empty(n_points, dtype=np.result_type(data.dtype, centers.dtype))
    aux_centers = metric.precompute_aux(centers)

    def _assign_chunk(rows: slice) -> None:
        dists = check_finite(
            metric.pairwise(data[rows], centers, None, aux_centers, squared=True),
            metric,
        )
        nearest = np.argmin(dists, axis=1)
        labels[rows] = nearest
        min_dists[rows] = dists[np.arange(dists.shape[0]), nearest]

    run_chunks(_assign_chunk, n_points, n_threads)
    return labels, min_dists


def assign(
    data: np.ndarray,
    centers: np.ndarray,
    metric: str | Metric = "euclidean",
    n_threads: int = 1,
    return_distances: bool = False,
) -> np.ndarray | tuple[np.ndarray, np.ndarray]:
    """Assign every point to its nearest center.

    Ties go to the center with the lowest index.

    Args:
        data: Points of shape (n_points, n_dims)
        centers: Centers of shape (n_centers, n_dims)
        metric: Metric name or instance
        n_threads: Worker threads for this call
        return_distances: Also return each point's squared distance to its center

    Returns:
        int32 labels of shape (n_points,), and with return_distances the
        squared distances of shape (n_points,)

    Raises:
        InvalidArgumentError: On non 2-D inputs, no centers, or mismatched dims
    """
    data = as_points(data)
    centers = as_points(centers, "centers")
    check_same_dims(data, centers, "data", "centers")
    if centers.shape[0] == 0:
        raise InvalidArgumentError("At least one center is required")
    n_threads = check_n_threads(n_threads)
    labels, min_dists = _nearest(data, centers, get_metric(metric), n_threads)
    if return_distances:
        return labels, min_dists
    return labels


def _check_assignments(assignments: np.ndarray, n_points: int, n_centers: int) -> np.ndarray:
    assignments = np.asarray(assignments)
    if assignments.shape != (n_points,):
        raise InvalidArgumentError(
            f"assignments must have shape ({n_points},), got {assignments.shape}"
        )
    if not np.issubdtype(assignments.dtype, np.integer):
        raise InvalidArgumentError(
            f"assignments must be integers, got dtype {assignments.dtype}"
        )
    if n_points and (assignments.min() < 0 or assignments.max() >= n_centers):
        raise InvalidArgumentError(f"assignments must lie in [0, {n_centers})")
    return assignments


def _assigned_cost(
    data: np.ndarray,
    centers: np.ndarray,
    assignments: np.ndarray,
    metric: Metric,
    n_threads: int,
) -> float:
    """Sum of squared distances of each point to its assigned center."""
    aux_centers = metric.precompute_aux(centers)

    def _chunk_cost(rows: slice) -> float:
        chunk = data[rows]
        labels = assignments[rows]
        total = 0.0
        for center_id in np.unique(labels):
            members = chunk[labels == center_id]
            aux = None if aux_centers is None else aux_centers[center_id : center_id + 1]
            dists = check_finite(
                metric.pairwise(members, centers[center_id : center_id + 1], None, aux),
                metric,
            )
            total += float(dists.sum(dtype=np.float64))
        return total

    return float(sum(run_chunks(_chunk_cost, data.shape[0], n_threads)))


def cost(
    data: np.ndarray,
    centers: np.ndarray,
    metric: str | Metric = "euclidean",
    n_threads: int = 1,
    assignments: np.ndarray | None = None,
) -> float:
    """Sum of squared distances from each point to its center.

    Args:
        data: Points of shape (n_points, n_dims)
        centers: Centers of shape (n_centers, n_dims)
        metric: Metric name or instance
        n_threads: Worker threads for this call
        assignments: Optional center index per point; nearest centers are
            used when omitted

    Returns:
        Total cost, accumulated in float64

    Raises:
        InvalidArgumentError: On invalid shapes or out-of-range assignments
    """
    data = as_points(data)
    centers = as_points(centers, "centers")
    check_same_dims(data, centers, "data", "centers")
    if centers.shape[0] == 0:
        raise InvalidArgumentError("At least one center is required")
    n_threads = check_n_threads(n_threads)
    metric = get_metric(metric)
    if assignments is None:
        _, min_dists = _nearest(data, centers, metric, n_threads)
        partials = run_chunks(
            lambda rows: float(min_dists[rows].sum(dtype=np.float64)),
            data.shape[0],
            n_threads,
        )
        return float(sum(partials))
    assignments = _check_assignments(assignments, data.shape[0], centers.shape[0])
    return _assigned_cost(data, centers, assignments, metric, n_threads)
