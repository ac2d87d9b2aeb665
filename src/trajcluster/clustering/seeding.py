"""Initial center selection.

``seed`` implements greedy k-means++ seeding with oversampling: at every step
``floor(2 + ln K)`` candidates are drawn by D^2 sampling and the candidate
that lowers the total potential the most becomes the next center. The
distances from all candidates to all points are computed in one parallel
call, and the running potential is updated incrementally so the whole
seeding costs O(K * N * D).
"""

from __future__ import annotations

import logging
import math

import numpy as np

from trajcluster._validation import as_points, check_n_centers, check_n_threads
from trajcluster.clustering.progress import ProgressCallback, should_cancel
from trajcluster.distance.engine import compute_distances
from trajcluster.distance.metric import Metric, get_metric

logger = logging.getLogger(__name__)


def n_seeding_trials(k: int) -> int:
    """Number of candidates evaluated per seeding step for ``k`` centers."""
    return int(2 + math.log(k))


def make_rng(seed: int) -> np.random.Generator:
    """Reproducible generator for ``seed >= 0``, OS-entropy seeded otherwise."""
    return np.random.default_rng(seed if seed >= 0 else None)


def _lookup_candidates(cumulative: np.ndarray, trials: np.ndarray) -> np.ndarray:
    """Inverse-CDF lookup of sorted trial values in the potential prefix sum.

    Each trial maps to the smallest index whose cumulative potential is at
    least the trial value; trials past the end map to the last point.
    """
    ids = np.searchsorted(cumulative, trials, side="left")
    return np.minimum(ids, cumulative.shape[0] - 1)


def seed(
    data: np.ndarray,
    k: int,
    metric: str | Metric = "euclidean",
    n_threads: int = 1,
    seed: int = -1,
    progress: ProgressCallback | None = None,
) -> np.ndarray:
    """Choose ``k`` initial centers among the rows of ``data``.

    Args:
        data: Points of shape (n_points, n_dims)
        k: Number of centers, 1 <= k <= n_points
        metric: Metric name or instance
        n_threads: Worker threads for the distance computations
        seed: Random seed; negative values give non-reproducible results
        progress: Called once per chosen center; returning Signal.CANCEL
            stops seeding

    Returns:
        Centers in the dtype of ``data``. A completed seeding returns exactly
        ``k`` rows. Cancellation is not an error: when ``progress`` returns
        Signal.CANCEL after the c-th center, seeding stops and the ``(c, n_dims)``
        array of centers chosen so far is returned, so ``len(result) < k``
        signals a cancelled seeding.

    Raises:
        InvalidArgumentError: If data is not 2-D, k is out of range or
            n_threads < 1
    """
    data = as_points(data)
    n_points, n_dims = data.shape
    k = check_n_centers(k, n_points)
    n_threads = check_n_threads(n_threads)
    metric = get_metric(metric)

    rng = make_rng(seed)
    n_trials = n_seeding_trials(k)
    centers = np.empty((k, n_dims), dtype=data.dtype)
    aux_data = metric.precompute_aux(data)

    first = int(rng.integers(0, n_points))
    centers[0] = data[first]
    logger.debug(f"Seeding center 1/{k}: point {first}")
    if should_cancel(progress):
        logger.warning(f"Seeding cancelled after 1 of {k} centers")
        return centers[:1].copy()

    potential = compute_distances(
        centers[:1], data, metric, n_threads, aux_reference=aux_data
    )[0].astype(np.float64)
    cumulative = np.cumsum(potential)
    total = float(cumulative[-1])

    for c in range(1, k):
        trials = np.sort(total * rng.random(n_trials))
        candidate_ids = _lookup_candidates(cumulative, trials)

        trial_dists = compute_distances(
            data[candidate_ids], data, metric, n_threads, aux_reference=aux_data
        )
        updated = np.minimum(trial_dists, potential[None, :])
        # Summed on the calling thread so the winner does not depend on n_threads.
        trial_potentials = updated.sum(axis=1, dtype=np.float64)

        best = int(np.argmin(trial_potentials))
        potential = updated[best].astype(np.float64)
        cumulative = np.cumsum(potential)
        total = float(cumulative[-1])
        centers[c] = data[candidate_ids[best]]

        logger.debug(
            f"Seeding center {c + 1}/{k}: point {int(candidate_ids[best])}, "
            f"potential {total:.6g}"
        )
        if should_cancel(progress):
            logger.warning(f"Seeding cancelled after {c + 1} of {k} centers")
            return centers[: c + 1].copy()

    return centers


def seed_uniform(data: np.ndarray, k: int, seed: int = -1) -> np.ndarray:
    """Choose ``k`` distinct rows of ``data`` uniformly at random.

    Args:
        data: Points of shape (n_points, n_dims)
        k: Number of centers, 1 <= k <= n_points
        seed: Random seed; negative values give non-reproducible results

    Returns:
        Centers of shape (k, n_dims)
    """
    data = as_points(data)
    k = check_n_centers(k, data.shape[0])
    rng = make_rng(seed)
    ids = rng.choice(data.shape[0], size=k, replace=False)
    return data[ids].copy()
