"""Binary-heap priority queues and the problems they solve neatly."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Any, Iterable, Sequence


class MinPriorityQueue:
    """A priority queue that always yields its smallest element first."""

    def __init__(self) -> None:
        self._heap: list = []

    def insert(self, element: Any) -> None:
        """Add an element to the queue."""
        heapq.heappush(self._heap, element)

    def get_min(self) -> Any:
        """The smallest element, left in place."""
        if not self._heap:
            raise IndexError("get_min from an empty priority queue")
        return self._heap[0]

    def remove_min(self) -> Any:
        """Remove and return the smallest element."""
        if not self._heap:
            raise IndexError("remove_min from an empty priority queue")
        return heapq.heappop(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class MaxPriorityQueue:
    """A priority queue that always yields its largest element first."""

    def __init__(self) -> None:
        self._heap: list = []

    def insert(self, element: Any) -> None:
        """Add an element to the queue."""
        heapq.heappush(self._heap, -element)

    def get_max(self) -> Any:
        """The largest element, left in place."""
        if not self._heap:
            raise IndexError("get_max from an empty priority queue")
        return -self._heap[0]

    def remove_max(self) -> Any:
        """Remove and return the largest element."""
        if not self._heap:
            raise IndexError("remove_max from an empty priority queue")
        return -heapq.heappop(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


def heap_sort(values: Iterable) -> list:
    """Sorted copy of values in descending order, built with a min-heap."""
    heap = list(values)
    heapq.heapify(heap)
    ascending = [heapq.heappop(heap) for _ in range(len(heap))]
    return ascending[::-1]


def _check_k(values: Sequence, k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")


def k_sorted(values: Sequence, k: int) -> list:
    """Order values by repeatedly emitting the largest of a sliding window of k.

    For input in which every element is at most k places from its position in
    descending order, the result is fully sorted in descending order.
    """
    values = list(values)
    _check_k(values, k)
    window = [-v for v in values[:k]]
    heapq.heapify(window)
    result = []
    for value in values[k:]:
        result.append(-heapq.heappushpop(window, -value))
    while window:
        result.append(-heapq.heappop(window))
    return result


def k_smallest(values: Sequence, k: int) -> list:
    """The k smallest values, largest of them first."""
    values = list(values)
    _check_k(values, k)
    heap = [-v for v in values[:k]]
    heapq.heapify(heap)
    for value in values[k:]:
        if -heap[0] > value:
            heapq.heapreplace(heap, -value)
    return [-heapq.heappop(heap) for _ in range(k)]


def _largest_heap(values: list, k: int) -> list:
    heap = values[:k]
    heapq.heapify(heap)
    for value in values[k:]:
        if heap[0] < value:
            heapq.heapreplace(heap, value)
    return heap


def k_largest(values: Sequence, k: int) -> list:
    """The k largest values, smallest of them first."""
    values = list(values)
    _check_k(values, k)
    heap = _largest_heap(values, k)
    return [heapq.heappop(heap) for _ in range(k)]


def kth_largest(values: Sequence, k: int) -> Any:
    """The k-th largest value (k counts from 1)."""
    values = list(values)
    _check_k(values, k)
    return _largest_heap(values, k)[0]


def is_max_heap(values: Sequence) -> bool:
    """True if the array satisfies the max-heap property."""
    n = len(values)
    return all(
        values[parent] >= values[child]
        for parent in range(n)
        for child in (2 * parent + 1, 2 * parent + 2)
        if child < n
    )


def _half(total: int) -> int:
    # Halve rounding toward zero.
    return total // 2 if total >= 0 else -((-total) // 2)


def running_median(values: Iterable[int]) -> list[int]:
    """Median after each value is added; even counts average the middle two, truncated."""
    lower: list[int] = []  # max-heap via negation
    upper: list[int] = []  # min-heap
    medians: list[int] = []
    for value in values:
        if not lower or value <= -lower[0]:
            heapq.heappush(lower, -value)
            if len(lower) > len(upper) + 1:
                heapq.heappush(upper, -heapq.heappop(lower))
        else:
            heapq.heappush(upper, value)
            if len(upper) > len(lower) + 1:
                heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) == len(upper):
            medians.append(_half(-lower[0] + upper[0]))
        elif len(lower) > len(upper):
            medians.append(-lower[0])
        else:
            medians.append(upper[0])
    return medians


def merge_k_sorted(arrays: Iterable[Sequence]) -> list:
    """Merge already-sorted sequences into one sorted list."""
    sources = [list(array) for array in arrays]
    heap = [(array[0], number, 0) for number, array in enumerate(sources) if array]
    heapq.heapify(heap)
    merged = []
    while heap:
        value, number, index = heapq.heappop(heap)
        merged.append(value)
        index += 1
        if index < len(sources[number]):
            heapq.heappush(heap, (sources[number][index], number, index))
    return merged


def buy_ticket(priorities: Sequence[int], k: int) -> int:
    """Time units until person k buys a ticket when the highest priority is served first.

    People queue in order; the person at the front buys only if no one waiting
    has a higher priority, otherwise they move to the back. Each sale takes one unit.
    """
    priorities = list(priorities)
    if not 0 <= k < len(priorities):
        raise IndexError(f"person {k} is not in the queue")
    remaining = [-p for p in priorities]
    heapq.heapify(remaining)
    queue = deque(range(len(priorities)))
    elapsed = 0
    while True:
        person = queue.popleft()
        if priorities[person] == -remaining[0]:
            elapsed += 1
            heapq.heappop(remaining)
            if person == k:
                return elapsed
        else:
            queue.append(person)