"""Unbounded FIFO queues: a plain linked queue and a circular linked queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional


class QueueUnderflowError(IndexError):
    """Raised when dequeuing from an empty queue."""


class LinkedQueue:
    """A first-in first-out queue that iterates from newest to oldest."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        self._items.appendleft(value)

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _Cell:
    value: int
    next: Optional["_Cell"] = field(default=None, repr=False)


class LinkedCircularQueue:
    """A first-in first-out queue on a circular singly linked list.

    Only the rear cell is kept; its successor is the front. Iteration runs
    from front to rear.
    """

    def __init__(self) -> None:
        self._rear: Optional[_Cell] = None
        self._count = 0

    def enqueue(self, value: int) -> None:
        cell = _Cell(value)
        if self._rear is None:
            cell.next = cell
        else:
            cell.next = self._rear.next
            self._rear.next = cell
        self._rear = cell
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self._rear is None:
            raise QueueUnderflowError("queue empty")
        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._count -= 1
        return front.value

    def __iter__(self) -> Iterator[int]:
        if self._rear is None:
            return
        cell = self._rear.next
        while True:
            yield cell.value
            if cell is self._rear:
                return
            cell = cell.next

    def __len__(self) -> int:
        return self._count