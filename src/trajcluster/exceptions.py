"""Custom exceptions for trajcluster.

This module defines the exception hierarchy raised by the clustering engine.
Cancellation is not an exception: a cancelled refinement reports
``Status.CANCELLED`` in its result.
"""

from __future__ import annotations


class TrajclusterError(Exception):
    """Base exception for all trajcluster operations."""


class InvalidArgumentError(TrajclusterError, ValueError):
    """Raised when arguments are rejected before any work starts.

    This exception is raised when:
    - More centers are requested than there are data points
    - Data or centers are not 2-dimensional
    - Data and centers (or query and reference points) differ in dimensionality
    - Thread count, iteration limit or tolerance are out of range
    - An unknown metric name is requested
    """


class NumericError(TrajclusterError, ArithmeticError):
    """Raised when a metric produces NaN or infinite distances.

    Empty clusters during refinement are not numeric errors; they keep
    their previous center.
    """


class NotFittedError(TrajclusterError, RuntimeError):
    """Raised when estimator results are accessed before fit()."""
