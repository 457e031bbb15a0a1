"""Basic containers used by the depot simulation: a stack, a bounded queue and a list."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_STACK_CAPACITY = 10


class Stack(Generic[T]):
    """LIFO stack whose capacity doubles whenever it fills up."""

    def __init__(self, initial_capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError("stack capacity must be positive")
        self._items: list[T] = []
        self.capacity = initial_capacity

    def push(self, item: T) -> None:
        """Place an item on top of the stack, growing the capacity if needed."""
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the item on top of the stack."""
        if not self._items:
            raise IndexError("the stack is empty; nothing to pop")
        return self._items.pop()

    def peek(self) -> T:
        """Return the item on top of the stack without removing it."""
        if not self._items:
            raise IndexError("the stack is empty; there is no top item")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity})"


class Queue(Generic[T]):
    """FIFO queue with a fixed capacity; enqueuing onto a full queue is an error."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("queue capacity must be positive")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, keeping the queued items in order."""
        if new_capacity < len(self._items):
            raise ValueError("new capacity is smaller than the number of queued items")
        self.capacity = new_capacity

    def enqueue(self, item: T) -> None:
        """Add an item at the back of the queue."""
        if len(self._items) == self.capacity:
            raise OverflowError("the queue is full; cannot enqueue")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue."""
        if not self._items:
            raise IndexError("the queue is empty; cannot dequeue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the item at the front of the queue without removing it."""
        if not self._items:
            raise IndexError("the queue is empty; nothing to return")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r}, capacity={self.capacity})"


class LinkedList(Generic[T]):
    """Sequence with cheap insertion at the front and back."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: deque[T] = deque(items) if items is not None else deque()

    def push_front(self, value: T) -> None:
        """Insert a value at the start of the list."""
        self._items.appendleft(value)

    def push_back(self, value: T) -> None:
        """Append a value at the end of the list."""
        self._items.append(value)

    def remove_front(self) -> None:
        """Discard the first value."""
        self.pop_front()

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if not self._items:
            raise IndexError("the list is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the first value without removing it."""
        if not self._items:
            raise IndexError("the list is empty")
        return self._items[0]

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __getitem__(self, index: int) -> T:
        if not -len(self._items) <= index < len(self._items):
            raise IndexError("index does not exist in the list")
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def copy(self) -> "LinkedList[T]":
        """Return a shallow copy of the list."""
        return LinkedList(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"