"""Binary min-heap used as the simulation's event queue."""

from __future__ import annotations

import heapq
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_HEAP_CAPACITY = 10


class MinHeap(Generic[T]):
    """Priority queue that always yields its smallest item first."""

    def __init__(self, initial_capacity: int = DEFAULT_HEAP_CAPACITY) -> None:
        self.capacity = max(initial_capacity, 1)
        self._heap: list[T] = []

    def push(self, item: T) -> None:
        """Insert an item, doubling the capacity when the heap is full."""
        if len(self._heap) == self.capacity:
            self.capacity *= 2
        heapq.heappush(self._heap, item)

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._heap:
            raise IndexError("Heap is empty. Cannot pop from an empty heap.")
        return heapq.heappop(self._heap)

    def top(self) -> T:
        """Return the smallest item without removing it."""
        if not self._heap:
            raise IndexError("Heap is empty. Cannot get top from an empty heap.")
        return self._heap[0]

    def in_order(self) -> list[T]:
        """Return every item from smallest to largest, leaving the heap intact."""
        snapshot = list(self._heap)
        return [heapq.heappop(snapshot) for _ in range(len(snapshot))]

    def is_empty(self) -> bool:
        """Return True when the heap holds no items."""
        return not self._heap

    def clear(self) -> None:
        """Remove every item and reset the capacity to its default."""
        self._heap.clear()
        self.capacity = DEFAULT_HEAP_CAPACITY

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"MinHeap({self.in_order()!r})"