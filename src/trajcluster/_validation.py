"""Eager argument checks shared by the clustering operations."""

from __future__ import annotations

import numpy as np

from trajcluster.exceptions import InvalidArgumentError

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def as_points(array: np.ndarray, name: str = "data") -> np.ndarray:
    """Return a C-contiguous float view of a (n, d) point array.

    float32 and float64 inputs are kept as they are; other real dtypes are
    converted to float64. The caller's buffer is never written to.
    """
    points = np.asarray(array)
    if points.ndim != 2:
        raise InvalidArgumentError(
            f"{name} must be 2-dimensional (n_points, n_dims), got shape {points.shape}"
        )
    if points.dtype not in SUPPORTED_DTYPES:
        if not (
            np.issubdtype(points.dtype, np.floating)
            or np.issubdtype(points.dtype, np.integer)
        ):
            raise InvalidArgumentError(
                f"{name} must hold real numbers, got dtype {points.dtype}"
            )
        points = points.astype(np.float64)
    return np.ascontiguousarray(points)


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def check_same_dims(a: np.ndarray, b: np.ndarray, a_name: str, b_name: str) -> None:
    if a.shape[1] != b.shape[1]:
        raise InvalidArgumentError(
            f"Dimension mismatch: {a_name} has {a.shape[1]} dims "
            f"but {b_name} has {b.shape[1]}"
        )


def check_n_threads(n_threads: int) -> int:
    if not _is_int(n_threads) or n_threads < 1:
        raise InvalidArgumentError(f"n_threads must be a positive integer, got {n_threads}")
    return int(n_threads)


def check_n_centers(k: int, n_points: int) -> int:
    if not _is_int(k) or k < 1:
        raise InvalidArgumentError(f"Number of centers must be >= 1, got {k}")
    if k > n_points:
        raise InvalidArgumentError(
            "Not enough data to initialize the desired number of centers: "
            f"provided points ({n_points}) < n_centers ({k})"
        )
    return int(k)
