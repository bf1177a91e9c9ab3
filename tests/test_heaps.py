import heapq
import statistics

import pytest

from dsakit.heaps import (
    MaxPriorityQueue,
    MinPriorityQueue,
    buy_ticket,
    heap_sort,
    is_max_heap,
    k_largest,
    k_smallest,
    k_sorted,
    kth_largest,
    merge_k_sorted,
    running_median,
)

SAMPLE = [5, 1, 9, 3, 7, 3, -4, 12, 0, 8]


def test_min_queue_yields_ascending():
    pq = MinPriorityQueue()
    for value in SAMPLE:
        pq.insert(value)
    assert len(pq) == len(SAMPLE)
    assert pq.get_min() == min(SAMPLE)
    drained = [pq.remove_min() for _ in range(len(SAMPLE))]
    assert drained == sorted(SAMPLE)
    assert pq.is_empty()


def test_min_queue_empty_raises():
    pq = MinPriorityQueue()
    assert pq.is_empty()
    with pytest.raises(IndexError):
        pq.get_min()
    with pytest.raises(IndexError):
        pq.remove_min()


def test_max_queue_yields_descending():
    pq = MaxPriorityQueue()
    for value in SAMPLE:
        pq.insert(value)
    assert pq.get_max() == max(SAMPLE)
    drained = [pq.remove_max() for _ in range(len(pq))]
    assert drained == sorted(SAMPLE, reverse=True)
    assert len(pq) == 0


def test_max_queue_empty_raises():
    pq = MaxPriorityQueue()
    with pytest.raises(IndexError):
        pq.get_max()
    with pytest.raises(IndexError):
        pq.remove_max()


def test_heap_sort_descending():
    assert heap_sort(SAMPLE) == sorted(SAMPLE, reverse=True)
    assert heap_sort([]) == []


def test_k_sorted_sorts_nearly_descending_input():
    data = sorted(SAMPLE, reverse=True)
    data[0], data[1] = data[1], data[0]
    data[4], data[6] = data[6], data[4]
    assert k_sorted(data, 3) == sorted(SAMPLE, reverse=True)


def test_k_sorted_is_permutation():
    result = k_sorted(SAMPLE, 4)
    assert sorted(result) == sorted(SAMPLE)


def test_k_smallest_and_largest():
    assert k_smallest(SAMPLE, 4) == sorted(SAMPLE)[:4][::-1]
    assert k_largest(SAMPLE, 4) == sorted(SAMPLE)[-4:]


@pytest.mark.parametrize("k", range(1, len(SAMPLE) + 1))
def test_kth_largest(k):
    assert kth_largest(SAMPLE, k) == sorted(SAMPLE, reverse=True)[k - 1]


@pytest.mark.parametrize("func", [k_sorted, k_smallest, k_largest, kth_largest])
@pytest.mark.parametrize("k", [0, len(SAMPLE) + 1])
def test_k_out_of_range(func, k):
    with pytest.raises(ValueError):
        func(SAMPLE, k)


def test_is_max_heap():
    heap = [-v for v in SAMPLE]
    heapq.heapify(heap)
    as_max = [-v for v in heap]
    assert is_max_heap(as_max) is True
    assert is_max_heap(sorted(SAMPLE)) is False
    assert is_max_heap([]) is True


def test_running_median_matches_prefix_medians():
    data = [6, 2, 1, 3, 7, 5, -3, -8, 11, 4]
    expected = [int(statistics.median(data[: i + 1])) for i in range(len(data))]
    assert running_median(data) == expected


def test_running_median_empty():
    assert running_median([]) == []


def test_merge_k_sorted():
    arrays = [[1, 5, 9], [], [2, 3, 10, 11], [0]]
    merged = merge_k_sorted(arrays)
    assert merged == sorted(v for a in arrays for v in a)


def test_buy_ticket_example():
    assert buy_ticket([3, 9, 4], 2) == 2


def test_buy_ticket_equal_priorities_is_queue_order():
    assert buy_ticket([2, 2, 2, 2], 3) == 4 - 0 and buy_ticket([2, 2, 2, 2], 1) == 1 + 1


def test_buy_ticket_highest_goes_first():
    priorities = [1, 1, 1, 5]
    assert buy_ticket(priorities, 3) == 1


def test_buy_ticket_bad_index():
    with pytest.raises(IndexError):
        buy_ticket([1, 2], 2)