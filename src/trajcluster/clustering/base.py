"""Clusterer protocol for center-based clustering estimators."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from trajcluster.clustering.lloyd import Status
from trajcluster.clustering.progress import ProgressCallback


@runtime_checkable
class Clusterer(Protocol):
    """Protocol for center-based clustering components.

    Implementations fit centers on a set of points, optionally starting
    from caller-supplied centers and polling a progress callback, and report
    how the fit terminated through ``status_``.
    """

    def fit(
        self,
        data: np.ndarray,
        initial_centers: np.ndarray | None = None,
        progress: ProgressCallback | None = None,
    ) -> "Clusterer":
        """Fit the clusterer on data.

        Args:
            data: Input points of shape (n_samples, n_features)
            initial_centers: Optional starting centers; seeding is skipped
                when given
            progress: Polled during the fit; returning Signal.CANCEL stops it
                and the run ends with status CANCELLED

        Returns:
            Self
        """
        ...

    def predict(self, data: np.ndarray) -> np.ndarray:
        """Index of the nearest fitted center for every point."""
        ...

    def transform(self, data: np.ndarray) -> np.ndarray:
        """Distances of shape (n_samples, n_clusters) to the fitted centers."""
        ...

    @property
    def cluster_centers_(self) -> np.ndarray:
        """Cluster centers of shape (n_clusters, n_features)."""
        ...

    @property
    def labels_(self) -> np.ndarray:
        """Labels assigned during fit() of shape (n_samples,)."""
        ...

    @property
    def n_clusters_(self) -> int:
        """Number of clusters found."""
        ...

    @property
    def status_(self) -> Status:
        """How the last fit terminated."""
        ...
