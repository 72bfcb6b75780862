"""Bounded array-backed stack and unbounded linked stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity; iterates from bottom to top."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError("cannot push, stack is full")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackUnderflowError("cannot pop, stack is empty")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Link:
    value: int
    below: Optional["_Link"]


class LinkedStack:
    """An unbounded stack of linked cells; iterates from top to bottom."""

    def __init__(self) -> None:
        self._top: Optional[_Link] = None
        self._count = 0

    def push(self, value: int) -> None:
        self._top = _Link(value, self._top)
        self._count += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflowError("cannot pop, stack is empty")
        value = self._top.value
        self._top = self._top.below
        self._count -= 1
        return value

    def __iter__(self) -> Iterator[int]:
        link = self._top
        while link is not None:
            yield link.value
            link = link.below

    def __len__(self) -> int:
        return self._count