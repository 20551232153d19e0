"""Thread fan-out helpers used to evaluate and update neuron layers."""
from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Tuple

Range = Tuple[int, int]


def default_num_threads() -> int:
    """Number of processing units reported by the host."""

    return max(1, os.cpu_count() or 1)


def partition(count: int, num_workers: int) -> List[Range]:
    """Split ``[0, count)`` into contiguous ``(begin, end)`` ranges.

    Every worker receives ``count // num_workers`` indices and the last one
    absorbs the remainder. Empty ranges are dropped, so fewer than
    ``num_workers`` ranges come back when ``count < num_workers``.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    if num_workers <= 0:
        raise ValueError("num_workers must be positive")
    chunk = count // num_workers
    ranges: List[Range] = []
    for worker in range(num_workers):
        begin = worker * chunk
        end = count if worker == num_workers - 1 else begin + chunk
        if end > begin:
            ranges.append((begin, end))
    return ranges


def parallel_for(count: int, num_workers: int, fn: Callable[[int, int], None]) -> None:
    """Run ``fn(begin, end)`` over a partition of ``[0, count)`` and wait for all.

    A fresh pool is created per call and joined before returning. If a worker
    raises, the first exception (in range order) is re-raised once every
    worker has finished.
    """

    ranges = partition(count, num_workers)
    if not ranges:
        return
    if len(ranges) == 1:
        fn(*ranges[0])
        return
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(fn, begin, end) for begin, end in ranges]
    for future in futures:
        future.result()


__all__ = ["default_num_threads", "parallel_for", "partition"]
