"""Lloyd refinement of cluster centers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from trajcluster._parallel import run_chunks
from trajcluster._validation import (
    as_points,
    check_n_centers,
    check_n_threads,
    check_same_dims,
)
from trajcluster.clustering.assignment import _nearest
from trajcluster.clustering.progress import ProgressCallback, should_cancel
from trajcluster.distance.metric import Metric, get_metric
from trajcluster.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class Status(str, Enum):
    """State of a refinement run."""

    RUNNING = "running"
    CONVERGED = "converged"
    MAX_ITER_REACHED = "max_iter_reached"
    CANCELLED = "cancelled"


@dataclass
class RefineResult:
    """Outcome of refine().

    Attributes:
        centers: Refined centers of shape (n_centers, n_dims)
        n_iter: Number of iterations executed
        status: Terminal status
        cost: Cost after the last iteration
        costs: Cost after every executed iteration
    """

    centers: np.ndarray
    n_iter: int
    status: Status
    cost: float
    costs: list[float] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.status is Status.CONVERGED

    def __iter__(self):
        return iter((self.centers, self.n_iter, self.status, self.cost))


def update_centers(
    data: np.ndarray,
    labels: np.ndarray,
    centers: np.ndarray,
    n_threads: int = 1,
) -> np.ndarray:
    """Move each center to the mean of its assigned points.

    Per-chunk sums are reduced in chunk order. A center without assigned
    points keeps its previous position.

    Args:
        data: Points of shape (n_points, n_dims)
        labels: Center index per point
        centers: Centers of shape (n_centers, n_dims), updated in place
        n_threads: Worker threads for this call

    Returns:
        Number of points assigned to each center
    """
    n_centers, n_dims = centers.shape

    def _partial(rows: slice) -> tuple[np.ndarray, np.ndarray]:
        chunk_labels = labels[rows]
        sums = np.zeros((n_centers, n_dims), dtype=np.float64)
        np.add.at(sums, chunk_labels, data[rows])
        counts = np.bincount(chunk_labels, minlength=n_centers)
        return sums, counts

    sums = np.zeros((n_centers, n_dims), dtype=np.float64)
    counts = np.zeros(n_centers, dtype=np.int64)
    for chunk_sums, chunk_counts in run_chunks(_partial, data.shape[0], n_threads):
        sums += chunk_sums
        counts += chunk_counts

    filled = counts > 0
    centers[filled] = (sums[filled] / counts[filled, None]).astype(centers.dtype)
    return counts


def refine(
    data: np.ndarray,
    initial_centers: np.ndarray,
    metric: str | Metric = "euclidean",
    n_threads: int = 1,
    max_iter: int = 500,
    tolerance: float = 1e-5,
    progress: ProgressCallback | None = None,
) -> RefineResult:
    """Run Lloyd iterations starting from ``initial_centers``.

    Every iteration assigns points to their nearest center, moves centers to
    the mean of their points and reassigns every point to the moved centers;
    the cost of that reassignment is the cost of the iteration and its labels
    feed the next iteration. The run converges once the cost changes by less than
    ``tolerance`` between two iterations. Every iteration that did not
    converge is reported to the progress callback, which may cancel the run.

    Args:
        data: Points of shape (n_points, n_dims)
        initial_centers: Starting centers of shape (n_centers, n_dims);
            not modified
        metric: Metric name or instance
        n_threads: Worker threads for this call
        max_iter: Maximum number of iterations (>= 1)
        tolerance: Absolute cost change regarded as converged (>= 0)
        progress: Called after each iteration; returning Signal.CANCEL stops
            the run

    Returns:
        RefineResult with centers, iterations run, status, final cost and
        the cost history

    Raises:
        InvalidArgumentError: On invalid shapes or parameters
    """
    data = as_points(data)
    centers = as_points(initial_centers, "initial_centers")
    check_same_dims(data, centers, "data", "initial_centers")
    check_n_centers(centers.shape[0], data.shape[0])
    n_threads = check_n_threads(n_threads)
    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
        raise InvalidArgumentError(f"max_iter must be a positive integer, got {max_iter}")
    if not np.isfinite(tolerance) or tolerance < 0:
        raise InvalidArgumentError(f"tolerance must be a non-negative number, got {tolerance}")
    metric = get_metric(metric)

    centers = centers.astype(data.dtype, copy=True)
    status = Status.RUNNING
    costs: list[float] = []
    previous_cost: float | None = None
    n_iter = 0

    labels, _ = _nearest(data, centers, metric, n_threads)
    while status is Status.RUNNING:
        counts = update_centers(data, labels, centers, n_threads)
        n_empty = int(np.count_nonzero(counts == 0))
        if n_empty:
            logger.warning(
                f"Iteration {n_iter + 1}: {n_empty} empty cluster(s) kept their previous center"
            )
        # Reassignment to the moved centers doubles as the next iteration's assignment.
        labels, min_dists = _nearest(data, centers, metric, n_threads)
        current_cost = float(min_dists.sum(dtype=np.float64))
        costs.append(current_cost)
        n_iter += 1
        logger.debug(f"Iteration {n_iter}: cost {current_cost:.6g}")

        if previous_cost is not None and abs(previous_cost - current_cost) < tolerance:
            status = Status.CONVERGED
        elif should_cancel(progress):
            logger.warning(f"Refinement cancelled after {n_iter} iteration(s)")
            status = Status.CANCELLED
        elif n_iter >= max_iter:
            status = Status.MAX_ITER_REACHED
        previous_cost = current_cost

    logger.info(
        f"Refinement finished: status={status.value}, iterations={n_iter}, "
        f"cost={costs[-1]:.6g}"
    )
    return RefineResult(
        centers=centers,
        n_iter=n_iter,
        status=status,
        cost=costs[-1],
        costs=costs,
    )
