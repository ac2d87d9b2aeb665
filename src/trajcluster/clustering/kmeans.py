"""K-Means clusterer."""

from __future__ import annotations

import logging

import numpy as np
from pydantic import ValidationError

from trajcluster._validation import as_points, check_same_dims
from trajcluster.clustering.assignment import assign, cost
from trajcluster.clustering.base import Clusterer
from trajcluster.clustering.lloyd import Status, refine
from trajcluster.clustering.metrics import ClusterInfo, cluster_summary
from trajcluster.clustering.progress import ProgressCallback
from trajcluster.clustering.seeding import seed, seed_uniform
from trajcluster.config import KMeansConfig
from trajcluster.distance.engine import compute_distances
from trajcluster.distance.metric import Metric, get_metric
from trajcluster.exceptions import InvalidArgumentError, NotFittedError

logger = logging.getLogger(__name__)


class KMeansClusterer(Clusterer):
    """K-Means clustering with oversampled k-means++ seeding.

    Centers are seeded with greedy k-means++ (or uniformly at random) and
    refined with Lloyd's algorithm. All parallel work uses ``n_threads``
    threads for the duration of each call.

    Example:
        >>> clusterer = KMeansClusterer(n_clusters=20, n_threads=4)
        >>> clusterer.fit(frames)
        >>> labels = clusterer.predict(new_frames)
    """

    def __init__(
        self,
        n_clusters: int = 20,
        max_iter: int = 500,
        tolerance: float = 1e-5,
        init_strategy: str = "kmeans++",
        metric: str | Metric = "euclidean",
        n_threads: int = 1,
        random_state: int | None = 42,
        **metric_kwargs,
    ) -> None:
        """Initialize K-Means clusterer.

        Args:
            n_clusters: Number of clusters (default: 20)
            max_iter: Maximum Lloyd iterations (default: 500)
            tolerance: Absolute cost change regarded as converged (default: 1e-5)
            init_strategy: 'kmeans++' or 'uniform' (default: 'kmeans++')
            metric: Metric name or instance (default: 'euclidean')
            n_threads: Worker threads per call (default: 1)
            random_state: Random seed; None for non-reproducible runs (default: 42)
            **metric_kwargs: Arguments for a named metric, e.g. box=... for 'periodic'

        Raises:
            InvalidArgumentError: If any parameter is out of range
        """
        self._metric = get_metric(metric, **metric_kwargs)
        try:
            self.config = KMeansConfig(
                n_clusters=n_clusters,
                max_iter=max_iter,
                tolerance=tolerance,
                init_strategy=init_strategy,
                metric=self._metric.name,
                n_threads=n_threads,
                random_state=random_state,
            )
        except ValidationError as exc:
            raise InvalidArgumentError(str(exc)) from exc

        self.n_clusters = self.config.n_clusters
        self.max_iter = self.config.max_iter
        self.tolerance = self.config.tolerance
        self.init_strategy = self.config.init_strategy
        self.n_threads = self.config.n_threads
        self.random_state = self.config.random_state

        self._centers: np.ndarray | None = None
        self._labels: np.ndarray | None = None
        self._inertia: float | None = None
        self._n_iter: int = 0
        self._status: Status | None = None
        self._costs: list[float] = []

    @property
    def metric(self) -> Metric:
        return self._metric

    @staticmethod
    def _as_data(data: np.ndarray) -> np.ndarray:
        data = np.asarray(data)
        if data.ndim == 1:
            data = data[:, np.newaxis]
        return as_points(data)

    def _seed_centers(
        self, data: np.ndarray, progress: ProgressCallback | None
    ) -> np.ndarray:
        if self.init_strategy == "uniform":
            return seed_uniform(data, self.n_clusters, seed=self.config.seed)
        return seed(
            data,
            self.n_clusters,
            metric=self._metric,
            n_threads=self.n_threads,
            seed=self.config.seed,
            progress=progress,
        )

    def fit(
        self,
        data: np.ndarray,
        initial_centers: np.ndarray | None = None,
        progress: ProgressCallback | None = None,
    ) -> "KMeansClusterer":
        """Fit the clusterer on data.

        Args:
            data: Input points of shape (n_samples, n_features); 1-D input
                is treated as a single feature
            initial_centers: Optional starting centers of shape
                (n_clusters, n_features); skips seeding
            progress: Called once per seeded center and once per Lloyd
                iteration; returning Signal.CANCEL stops the fit early

        Returns:
            Self
        """
        data = self._as_data(data)
        logger.info(
            f"Fitting {self.n_clusters} clusters on {data.shape[0]} points "
            f"of dimension {data.shape[1]} ({self.init_strategy}, {self._metric.name})"
        )
        if initial_centers is None:
            centers = self._seed_centers(data, progress)
        else:
            centers = self._as_data(initial_centers)
            check_same_dims(data, centers, "data", "initial_centers")
            if centers.shape[0] != self.n_clusters:
                raise InvalidArgumentError(
                    f"initial_centers has {centers.shape[0]} rows, expected {self.n_clusters}"
                )

        # seed() returns fewer rows than requested only when cancelled.
        if centers.shape[0] < self.n_clusters:
            self._n_iter = 0
            self._status = Status.CANCELLED
            self._costs = []
        else:
            result = refine(
                data,
                centers,
                metric=self._metric,
                n_threads=self.n_threads,
                max_iter=self.max_iter,
                tolerance=self.tolerance,
                progress=progress,
            )
            centers = result.centers
            self._n_iter = result.n_iter
            self._status = result.status
            self._costs = result.costs

        labels, min_dists = assign(
            data, centers, self._metric, self.n_threads, return_distances=True
        )
        self._centers = centers
        self._labels = labels
        self._inertia = float(min_dists.sum(dtype=np.float64))
        logger.info(
            f"Fit finished with status {self._status.value} after {self._n_iter} "
            f"iteration(s), inertia {self._inertia:.6g}"
        )
        return self

    def _fitted_centers(self) -> np.ndarray:
        if self._centers is None:
            raise NotFittedError("Clusterer must be fitted first. Call fit() first.")
        return self._centers

    def predict(self, data: np.ndarray) -> np.ndarray:
        """Predict cluster assignments for data.

        Args:
            data: Input points of shape (n_samples, n_features)

        Returns:
            Cluster assignments of shape (n_samples,)
        """
        if self._centers is None:
            raise NotFittedError(
                "Clusterer must be fitted before predict. Call fit() first."
            )
        return assign(self._as_data(data), self._centers, self._metric, self.n_threads)

    def fit_predict(
        self,
        data: np.ndarray,
        initial_centers: np.ndarray | None = None,
        progress: ProgressCallback | None = None,
    ) -> np.ndarray:
        """Fit the clusterer and return the cluster assignments of data."""
        self.fit(data, initial_centers=initial_centers, progress=progress)
        return self.labels_

    def transform(self, data: np.ndarray) -> np.ndarray:
        """Distances from each point to every cluster center.

        Args:
            data: Input points of shape (n_samples, n_features)

        Returns:
            Distances of shape (n_samples, n_clusters)
        """
        return compute_distances(
            self._as_data(data),
            self._fitted_centers(),
            self._metric,
            self.n_threads,
            squared=False,
        )

    def score(self, data: np.ndarray) -> float:
        """Negative sum of squared distances of data to the nearest centers."""
        return -cost(self._as_data(data), self._fitted_centers(), self._metric, self.n_threads)

    def summary(self, data: np.ndarray) -> list[ClusterInfo]:
        """Per-cluster size and within-cluster cost for data."""
        data = self._as_data(data)
        centers = self._fitted_centers()
        labels = assign(data, centers, self._metric, self.n_threads)
        return cluster_summary(data, centers, labels, metric=self._metric)

    @property
    def cluster_centers_(self) -> np.ndarray:
        """Cluster centers of shape (n_clusters, n_features)."""
        return self._fitted_centers()

    @property
    def labels_(self) -> np.ndarray:
        """Labels assigned during fit() of shape (n_samples,)."""
        if self._labels is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._labels

    @property
    def n_clusters_(self) -> int:
        """Number of clusters found."""
        if self._centers is None:
            return self.n_clusters
        return self._centers.shape[0]

    @property
    def inertia_(self) -> float:
        """Sum of squared distances to closest centroid."""
        if self._inertia is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._inertia

    @property
    def n_iter_(self) -> int:
        """Number of Lloyd iterations run."""
        self._fitted_centers()
        return self._n_iter

    @property
    def status_(self) -> Status:
        """Terminal status of the last fit."""
        if self._status is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._status

    @property
    def converged_(self) -> bool:
        return self.status_ is Status.CONVERGED

    @property
    def costs_(self) -> list[float]:
        """Cost after every Lloyd iteration of the last fit."""
        self._fitted_centers()
        return list(self._costs)

    def __repr__(self) -> str:
        return (
            f"KMeansClusterer(n_clusters={self.n_clusters}, "
            f"metric={self._metric.name})"
        )
