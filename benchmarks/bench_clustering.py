"""Benchmark seeding, refinement and the estimator."""

import pytest

from trajcluster import KMeansClusterer, assign, compute_distances, refine, seed


@pytest.mark.benchmark
@pytest.mark.parametrize("n_threads", [1, 4])
@pytest.mark.parametrize("data_size", [1000, 10000])
def bench_distances(benchmark, synthetic_frames, n_threads, data_size):
    """Benchmark the pairwise distance engine against 100 centers."""
    frames = synthetic_frames[:data_size]
    centers = frames[:100]

    result = benchmark(compute_distances, centers, frames, n_threads=n_threads)
    assert result.shape == (100, data_size)


@pytest.mark.benchmark
@pytest.mark.parametrize("n_threads", [1, 4])
@pytest.mark.parametrize("n_clusters", [10, 50, 200])
def bench_seed(benchmark, synthetic_frames, n_clusters, n_threads):
    """Benchmark k-means++ seeding."""
    result = benchmark(
        seed, synthetic_frames, n_clusters, n_threads=n_threads, seed=42
    )
    assert result.shape[0] == n_clusters


@pytest.mark.benchmark
@pytest.mark.parametrize("n_threads", [1, 4])
@pytest.mark.parametrize("n_clusters", [10, 50])
def bench_refine(benchmark, synthetic_frames, n_clusters, n_threads):
    """Benchmark Lloyd refinement from fixed seeds."""
    initial = seed(synthetic_frames, n_clusters, seed=42)

    result = benchmark(
        refine, synthetic_frames, initial, n_threads=n_threads, max_iter=50
    )
    assert result.n_iter <= 50


@pytest.mark.benchmark
@pytest.mark.parametrize("n_threads", [1, 4])
def bench_assign(benchmark, synthetic_frames, n_threads):
    """Benchmark nearest-center assignment."""
    centers = seed(synthetic_frames, 100, seed=42)

    result = benchmark(assign, synthetic_frames, centers, n_threads=n_threads)
    assert result.shape == (len(synthetic_frames),)


@pytest.mark.benchmark
@pytest.mark.parametrize("n_clusters", [5, 20, 50])
@pytest.mark.parametrize("data_size", [1000, 5000, 10000])
def bench_kmeans_fit(benchmark, synthetic_frames, n_clusters, data_size):
    """Benchmark KMeansClusterer fitting performance."""
    frames = synthetic_frames[:data_size]
    clusterer = KMeansClusterer(n_clusters=n_clusters, random_state=42, max_iter=100)

    def _fit():
        clusterer.fit(frames)
        return clusterer

    result = benchmark(_fit)
    assert result.n_clusters_ == n_clusters
