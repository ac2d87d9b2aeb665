"""Configuration models for clustering estimators."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class KMeansConfig(BaseModel):
    """Configuration for k-means clustering.

    Attributes:
        n_clusters: Number of cluster centers (K)
        max_iter: Maximum number of Lloyd iterations
        tolerance: Convergence threshold on the absolute cost decrease
        init_strategy: Seeding strategy ('kmeans++' or 'uniform')
        metric: Name of the distance metric ('euclidean' or 'periodic')
        n_threads: Number of worker threads used by every parallel step
        random_state: Random seed; None draws a non-reproducible seed
    """

    n_clusters: int = Field(default=20, gt=0, description="Number of clusters")
    max_iter: int = Field(default=500, gt=0, description="Maximum Lloyd iterations")
    tolerance: float = Field(
        default=1e-5, ge=0.0, description="Absolute cost decrease for convergence"
    )
    init_strategy: Literal["kmeans++", "uniform"] = Field(
        default="kmeans++", description="Seeding strategy"
    )
    metric: str = Field(default="euclidean", description="Distance metric name")
    n_threads: int = Field(default=1, gt=0, description="Worker threads per call")
    random_state: int | None = Field(default=42, description="Random seed")

    model_config = {"frozen": True}

    @field_validator("metric")
    @classmethod
    def _lowercase_metric(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("random_state")
    @classmethod
    def _non_negative_seed(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("random_state must be non-negative or None")
        return value

    @property
    def seed(self) -> int:
        """Seed passed to the seeders; negative means non-reproducible."""
        return -1 if self.random_state is None else self.random_state
