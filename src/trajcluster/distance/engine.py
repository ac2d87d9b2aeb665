"""Dense distance matrices between query and reference point sets."""

from __future__ import annotations

import numpy as np

from trajcluster._parallel import run_chunks
from trajcluster._validation import as_points, check_n_threads, check_same_dims
from trajcluster.distance.metric import Metric, get_metric
from trajcluster.exceptions import InvalidArgumentError, NumericError


def precompute_aux(points: np.ndarray, metric: str | Metric = "euclidean") -> np.ndarray | None:
    """Per-point auxiliary values of ``metric`` (e.g. squared norms).

    Args:
        points: Points of shape (n_points, n_dims)
        metric: Metric name or instance

    Returns:
        Array of shape (n_points,), or None if the metric uses none
    """
    return get_metric(metric).precompute_aux(as_points(points, "points"))


def _check_aux(aux: np.ndarray | None, n_points: int, name: str) -> np.ndarray | None:
    if aux is None:
        return None
    aux = np.asarray(aux)
    if aux.shape != (n_points,):
        raise InvalidArgumentError(
            f"{name} must have shape ({n_points},), got {aux.shape}"
        )
    return aux


def check_finite(distances: np.ndarray, metric: Metric) -> np.ndarray:
    if not np.all(np.isfinite(distances)):
        raise NumericError(
            f"Metric '{metric.name}' produced non-finite distances; "
            "check the input for NaN or infinite coordinates"
        )
    return distances


def compute_distances(
    query: np.ndarray,
    reference: np.ndarray,
    metric: str | Metric = "euclidean",
    n_threads: int = 1,
    aux_query: np.ndarray | None = None,
    aux_reference: np.ndarray | None = None,
    squared: bool = True,
) -> np.ndarray:
    """Compute the (Q, R) matrix of distances from query to reference points.

    Work is split over contiguous ranges of reference points; each worker
    writes only its own columns of the output.

    Args:
        query: Query points of shape (Q, D)
        reference: Reference points of shape (R, D)
        metric: Metric name or instance
        n_threads: Number of worker threads for this call
        aux_query: Optional precomputed auxiliary values for query
        aux_reference: Optional precomputed auxiliary values for reference
        squared: Return squared distances

    Returns:
        Distance matrix of shape (Q, R)

    Raises:
        InvalidArgumentError: On non 2-D inputs or mismatched dimensionality
        NumericError: If the metric produced NaN or infinite values
    """
    query = as_points(query, "query")
    reference = as_points(reference, "reference")
    check_same_dims(query, reference, "query", "reference")
    n_threads = check_n_threads(n_threads)
    metric = get_metric(metric)
    aux_query = _check_aux(aux_query, query.shape[0], "aux_query")
    aux_reference = _check_aux(aux_reference, reference.shape[0], "aux_reference")

    dtype = np.result_type(query.dtype, reference.dtype)
    out = np.empty((query.shape[0], reference.shape[0]), dtype=dtype)

    def _fill(cols: slice) -> None:
        aux_ref = None if aux_reference is None else aux_reference[cols]
        out[:, cols] = metric.pairwise(
            query, reference[cols], aux_query, aux_ref, squared=squared
        )

    run_chunks(_fill, reference.shape[0], n_threads)
    return check_finite(out, metric)
