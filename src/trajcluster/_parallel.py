"""Per-call thread fan-out over contiguous index partitions.

numpy releases the GIL inside its kernels, so a thread pool gives real
parallelism for the chunked distance and reduction work. A pool is created for
each call and shut down before the call returns.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")

# Upper bound on the elements of one (rows, cols, dims) block a worker builds.
BLOCK_ELEMENTS = 1 << 20


def partition(n_items: int, n_parts: int) -> list[slice]:
    """Split ``range(n_items)`` into at most ``n_parts`` contiguous slices."""
    n_parts = max(1, min(n_parts, n_items))
    base, extra = divmod(n_items, n_parts)
    slices = []
    start = 0
    for part in range(n_parts):
        stop = start + base + (1 if part < extra else 0)
        slices.append(slice(start, stop))
        start = stop
    return slices


def block_rows(n_rows: int, row_cost: int) -> int:
    """Number of rows per block so that a block stays below BLOCK_ELEMENTS."""
    return max(1, min(n_rows, BLOCK_ELEMENTS // max(1, row_cost)))


def run_chunks(func: Callable[[slice], T], n_items: int, n_threads: int) -> list[T]:
    """Apply ``func`` to each partition of ``range(n_items)``.

    Results are returned in partition order regardless of completion order.
    """
    chunks = partition(n_items, n_threads)
    if len(chunks) == 1:
        return [func(chunks[0])]
    with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
        return list(executor.map(func, chunks))
