import threading

import pytest

from dae.core.parallel import default_num_threads, parallel_for, partition


@pytest.mark.parametrize("count", [0, 1, 2, 5, 7, 16, 33])
@pytest.mark.parametrize("workers", [1, 2, 3, 4, 8, 40])
def test_partition_covers_every_index_once(count: int, workers: int) -> None:
    ranges = partition(count, workers)
    covered = [index for begin, end in ranges for index in range(begin, end)]
    assert sorted(covered) == list(range(count))
    assert len(covered) == len(set(covered))
    assert len(ranges) <= workers


def test_partition_last_range_absorbs_remainder() -> None:
    assert partition(10, 3) == [(0, 3), (3, 6), (6, 10)]
    assert partition(3, 8) == [(0, 3)]


def test_partition_validates_inputs() -> None:
    with pytest.raises(ValueError):
        partition(-1, 2)
    with pytest.raises(ValueError):
        partition(4, 0)


def test_parallel_for_writes_disjoint_slots() -> None:
    out = [0] * 50
    seen_threads = set()
    lock = threading.Lock()

    def body(begin: int, end: int) -> None:
        with lock:
            seen_threads.add(threading.get_ident())
        for index in range(begin, end):
            out[index] = index * index

    parallel_for(len(out), 4, body)
    assert out == [index * index for index in range(50)]
    assert len(seen_threads) >= 1


def test_parallel_for_propagates_worker_errors() -> None:
    def body(begin: int, end: int) -> None:
        if begin <= 3 < end:
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        parallel_for(8, 4, body)


def test_parallel_for_with_nothing_to_do() -> None:
    calls = []
    parallel_for(0, 4, lambda begin, end: calls.append((begin, end)))
    assert calls == []


def test_default_num_threads_is_positive() -> None:
    assert default_num_threads() >= 1
