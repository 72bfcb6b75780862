"""Singly linked list addressed by 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


class EmptyListError(Exception):
    """Raised when an operation needs a list that still has nodes."""

    def __init__(self, message: str = "list is empty") -> None:
        super().__init__(message)


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A singly linked list of integers, created with its first value.

    Positions are 1-based. Inserting past the end appends.
    """

    def __init__(self, first: int) -> None:
        self._head: Optional[_Node] = _Node(first)
        self._count = 1

    @classmethod
    def _from_values(cls, values: Iterable[int]) -> "SinglyLinkedList":
        items = iter(values)
        result = cls(next(items))
        tail = result._head
        for value in items:
            tail.next = _Node(value)
            tail = tail.next
            result._count += 1
        return result

    def _require_items(self) -> None:
        if self._head is None:
            raise EmptyListError()

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert_at(self, position: int, value: int) -> None:
        """Insert ``value`` so that it lands at ``position``, or at the end."""
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if position == 1 or self._head is None:
            self._head = _Node(value, self._head)
        else:
            node = self._head
            for _ in range(position - 2):
                if node.next is None:
                    break
                node = node.next
            node.next = _Node(value, node.next)
        self._count += 1

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``."""
        self._require_items()
        if position < 1 or position > self._count:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self._head = self._head.next
        else:
            node = self._head
            for _ in range(position - 2):
                node = node.next
            node.next = node.next.next
        self._count -= 1

    def delete_value(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        self.delete_at(self.index_of(value))

    def index_of(self, value: int) -> int:
        """1-based position of the first node holding ``value``."""
        self._require_items()
        for position, node in enumerate(self._nodes(), start=1):
            if node.value == value:
                return position
        raise ValueError(f"{value} is not in the list")

    def sorted_copy(self) -> "SinglyLinkedList":
        """A new list with the same values in ascending order."""
        self._require_items()
        return self._from_values(sorted(self))

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._require_items()
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def copy(self) -> "SinglyLinkedList":
        """A new list with the same values in the same order."""
        self._require_items()
        return self._from_values(self)

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"