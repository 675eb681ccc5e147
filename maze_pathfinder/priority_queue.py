"""Binary min-heap ordered by a caller supplied comparator."""

from __future__ import annotations

import operator
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


class PriorityQueue(Generic[T]):
    """Heap-backed priority queue.

    ``less_or_equal(a, b)`` must return True when ``a`` has priority equal to
    or higher than ``b``; the element for which it holds against every other
    element is dequeued first. Items of equal priority leave the queue in an
    order decided by the heap layout, which depends on insertion order. That
    order is not stable and callers must not rely on it.
    """

    def __init__(self, less_or_equal: Comparator = operator.le) -> None:
        self._heap: List[T] = []
        self._less_or_equal = less_or_equal

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, item: T) -> None:
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> T:
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        first = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return first

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        return self._heap[0]

    # ------------------------------------------------------------------

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if self._less_or_equal(heap[parent], heap[index]):
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            best = index
            if left < size and not self._less_or_equal(heap[best], heap[left]):
                best = left
            if right < size and not self._less_or_equal(heap[best], heap[right]):
                best = right
            if best == index:
                return
            heap[index], heap[best] = heap[best], heap[index]
            index = best


__all__ = ["PriorityQueue", "Comparator"]
