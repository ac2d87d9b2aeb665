"""Distance metric protocol and implementations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from trajcluster._parallel import block_rows
from trajcluster.exceptions import InvalidArgumentError


@runtime_checkable
class Metric(Protocol):
    """Protocol for distance metrics.

    Implementations must be stateless with respect to the points they see:
    ``pairwise`` is deterministic, symmetric and non-negative.
    """

    name: str

    def precompute_aux(self, points: np.ndarray) -> np.ndarray | None:
        """Per-point auxiliary values reused across distance evaluations.

        Args:
            points: Points of shape (n_points, n_dims)

        Returns:
            Array of shape (n_points,), or None if the metric needs none
        """
        ...

    def pairwise(
        self,
        x: np.ndarray,
        y: np.ndarray,
        aux_x: np.ndarray | None = None,
        aux_y: np.ndarray | None = None,
        squared: bool = True,
    ) -> np.ndarray:
        """Distances between every row of x and every row of y.

        Args:
            x: Points of shape (n_x, n_dims)
            y: Points of shape (n_y, n_dims)
            aux_x: Optional output of precompute_aux(x)
            aux_y: Optional output of precompute_aux(y)
            squared: Return squared distances

        Returns:
            Distance matrix of shape (n_x, n_y)
        """
        ...


def _blocked_sum_of_squares(
    x: np.ndarray, y: np.ndarray, box: np.ndarray | None = None
) -> np.ndarray:
    """Exact per-cell squared distances, optionally under minimum image."""
    dtype = np.result_type(x.dtype, y.dtype)
    out = np.empty((x.shape[0], y.shape[0]), dtype=dtype)
    step = block_rows(y.shape[0], x.shape[0] * x.shape[1])
    for start in range(0, y.shape[0], step):
        stop = start + step
        diff = x[:, None, :] - y[None, start:stop, :]
        if box is not None:
            diff -= box * np.round(diff / box)
        out[:, start:stop] = np.einsum("qrd,qrd->qr", diff, diff)
    return out


class EuclideanMetric:
    """Euclidean distance.

    By default every distance is computed from coordinate differences, so a
    point is exactly zero away from itself and each value does not depend on
    which other points were evaluated in the same call. With ``expand=True``
    the squared norms are precomputed and distances use
    ``|x|^2 + |y|^2 - 2 x.y``, which is faster in high dimension but subject
    to cancellation error.
    """

    name = "euclidean"

    def __init__(self, expand: bool = False) -> None:
        self.expand = expand

    def precompute_aux(self, points: np.ndarray) -> np.ndarray | None:
        if not self.expand:
            return None
        return np.einsum("ij,ij->i", points, points)

    def pairwise(
        self,
        x: np.ndarray,
        y: np.ndarray,
        aux_x: np.ndarray | None = None,
        aux_y: np.ndarray | None = None,
        squared: bool = True,
    ) -> np.ndarray:
        if self.expand:
            xx = self.precompute_aux(x) if aux_x is None else aux_x
            yy = self.precompute_aux(y) if aux_y is None else aux_y
            dist = xx[:, None] + yy[None, :] - 2 * np.einsum("ij,kj->ik", x, y)
            np.maximum(dist, 0, out=dist)
        else:
            dist = _blocked_sum_of_squares(x, y)
        return dist if squared else np.sqrt(dist)

    def __repr__(self) -> str:
        return f"EuclideanMetric(expand={self.expand})"


class PeriodicEuclideanMetric:
    """Euclidean distance under the minimum-image convention.

    Each coordinate difference is wrapped into ``[-L/2, L/2]`` for the box
    length ``L`` of its dimension, as for particles in a periodic simulation
    box.
    """

    name = "periodic"

    def __init__(self, box: float | np.ndarray) -> None:
        box_lengths = np.atleast_1d(np.asarray(box, dtype=np.float64))
        if box_lengths.ndim != 1 or box_lengths.size == 0:
            raise InvalidArgumentError(
                f"box must be a scalar or a 1-D array of lengths, got shape {box_lengths.shape}"
            )
        if not np.all(np.isfinite(box_lengths)) or np.any(box_lengths <= 0):
            raise InvalidArgumentError("box lengths must be positive and finite")
        self.box = box_lengths

    def _box_for(self, n_dims: int) -> np.ndarray:
        if self.box.size == 1:
            return np.full(n_dims, self.box[0])
        if self.box.size != n_dims:
            raise InvalidArgumentError(
                f"Periodic box has {self.box.size} lengths but points have {n_dims} dims"
            )
        return self.box

    def precompute_aux(self, points: np.ndarray) -> np.ndarray | None:
        return None

    def pairwise(
        self,
        x: np.ndarray,
        y: np.ndarray,
        aux_x: np.ndarray | None = None,
        aux_y: np.ndarray | None = None,
        squared: bool = True,
    ) -> np.ndarray:
        dtype = np.result_type(x.dtype, y.dtype)
        box = self._box_for(x.shape[1]).astype(dtype)
        dist = _blocked_sum_of_squares(x, y, box=box)
        return dist if squared else np.sqrt(dist)

    def __repr__(self) -> str:
        return f"PeriodicEuclideanMetric(box={self.box.tolist()})"


_METRICS = {
    "euclidean": EuclideanMetric,
    "periodic": PeriodicEuclideanMetric,
    "minimum_image": PeriodicEuclideanMetric,
}


def available_metrics() -> list[str]:
    """Names accepted by get_metric()."""
    return sorted(_METRICS)


def get_metric(metric: str | Metric = "euclidean", **kwargs) -> Metric:
    """Resolve a metric name or instance.

    Args:
        metric: Metric name ('euclidean', 'periodic') or a Metric instance
        **kwargs: Constructor arguments for named metrics (e.g. box=...)

    Returns:
        Metric instance

    Raises:
        InvalidArgumentError: If the name is unknown or the object is not a Metric
    """
    if isinstance(metric, str):
        key = metric.strip().lower()
        if key not in _METRICS:
            raise InvalidArgumentError(
                f"Unknown metric '{metric}'. Available: {', '.join(available_metrics())}"
            )
        try:
            return _METRICS[key](**kwargs)
        except TypeError as exc:
            raise InvalidArgumentError(f"Invalid arguments for metric '{key}': {exc}") from exc
    if kwargs:
        raise InvalidArgumentError("Metric arguments are only accepted with a metric name")
    if not isinstance(metric, Metric):
        raise InvalidArgumentError(
            f"Expected a metric name or Metric instance, got {type(metric).__name__}"
        )
    return metric
