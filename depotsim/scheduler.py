"""Event queue that hands out events in priority order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from depotsim.minheap import MinHeap

if TYPE_CHECKING:
    from depotsim.event import Event

TIME_KEY_FACTOR = 10_000_000


class Scheduler:
    """Keeps the simulation clock and the pending events."""

    def __init__(self) -> None:
        self.current_time = 0
        self._queue: MinHeap["Event"] = MinHeap()

    def queue_event(self, event: "Event") -> None:
        """Add an event to the queue."""
        self._queue.push(event)

    def requeue_event(self, event: "Event", delay: int) -> None:
        """Put an event back in the queue, ``delay`` time units later."""
        event.priority_key += delay * TIME_KEY_FACTOR
        event.event_time += delay
        self._queue.push(event)

    def dequeue_next_event(self) -> Optional["Event"]:
        """Remove and return the next event, or None when nothing is pending."""
        if self._queue.is_empty():
            return None
        return self._queue.pop()

    def increase_time(self, time: int) -> None:
        """Advance the clock by ``time``."""
        self.current_time += time

    def in_order(self) -> list["Event"]:
        """Pending events in the order they will be handed out."""
        return self._queue.in_order()

    def __len__(self) -> int:
        return len(self._queue)