"""Fixed-capacity queues: linear, circular, double-ended and priority."""

from __future__ import annotations

import bisect
from typing import Iterator, Optional


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class BoundedQueue:
    """A linear array queue whose slots are used once.

    Dequeued slots are not reclaimed, so at most ``capacity`` values can be
    enqueued over the life of the queue.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    def enqueue(self, value: int) -> None:
        if len(self._slots) >= self.capacity:
            raise QueueFullError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> int:
        if self._front >= len(self._slots):
            raise QueueEmptyError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """A ring-buffer queue holding up to ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Optional[int]] = [None] * capacity
        self._head = 0
        self._size = 0

    def enqueue(self, value: int) -> None:
        if self._size == self.capacity:
            raise QueueFullError("queue overflow")
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> int:
        if self._size == 0:
            raise QueueEmptyError("queue empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % self.capacity]

    def __len__(self) -> int:
        return self._size


class BoundedDeque:
    """A double-ended queue over a fixed array.

    Values are pushed at the back into unused slots; pushing at the front only
    reuses slots freed by popping from the front. A pop on an empty deque
    rewinds it to the start of the array.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = 0
        self._back = 0

    def push_front(self, value: int) -> None:
        if self._front <= 0:
            raise QueueFullError("queue overflow at front")
        self._front -= 1
        self._slots[self._front] = value

    def push_back(self, value: int) -> None:
        if self._back >= self.capacity:
            raise QueueFullError("queue overflow at back")
        self._slots[self._back] = value
        self._back += 1

    def _require_items(self) -> None:
        if self._back <= self._front:
            self._front = self._back = 0
            raise QueueEmptyError("queue empty")

    def pop_front(self) -> int:
        self._require_items()
        value = self._slots[self._front]
        self._front += 1
        return value

    def pop_back(self) -> int:
        self._require_items()
        self._back -= 1
        return self._slots[self._back]

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[self._front:self._back])

    def __len__(self) -> int:
        return self._back - self._front


class BoundedPriorityQueue:
    """A sorted array queue; the largest value is dequeued first."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[int] = []

    def enqueue(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue overflow")
        bisect.insort_left(self._items, value)

    def dequeue(self) -> int:
        if not self._items:
            raise QueueEmptyError("queue empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Values in ascending order."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)