"""Circular doubly linked list addressed by 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from algoshelf.singly_linked_list import EmptyListError


@dataclass(eq=False)
class _Node:
    value: int
    prev: "_Node" = field(init=False, repr=False)
    next: "_Node" = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.prev = self
        self.next = self


def _link_after(node: _Node, new: _Node) -> None:
    new.prev = node
    new.next = node.next
    node.next.prev = new
    node.next = new


def _unlink(node: _Node) -> None:
    node.prev.next = node.next
    node.next.prev = node.prev


class CircularDoublyLinkedList:
    """A circular doubly linked list of integers, created with its first value.

    Positions are 1-based. Inserting past the end appends, and deleting past
    the end removes the last node.
    """

    def __init__(self, first: int) -> None:
        self._head: Optional[_Node] = _Node(first)
        self._count = 1

    @classmethod
    def _from_values(cls, values: Iterable[int]) -> "CircularDoublyLinkedList":
        items = iter(values)
        result = cls(next(items))
        for value in items:
            _link_after(result._head.prev, _Node(value))
            result._count += 1
        return result

    def _require_items(self) -> None:
        if self._head is None:
            raise EmptyListError()

    def _nodes(self) -> Iterator[_Node]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node
            node = node.next
            if node is self._head:
                return

    def insert_at(self, position: int, value: int) -> None:
        """Insert ``value`` so that it lands at ``position``, or at the end."""
        if position < 1:
            raise IndexError(f"invalid position {position}")
        new = _Node(value)
        if self._head is None:
            self._head = new
        elif position == 1:
            _link_after(self._head.prev, new)
            self._head = new
        else:
            node, tail = self._head, self._head.prev
            for _ in range(position - 2):
                if node is tail:
                    break
                node = node.next
            _link_after(node, new)
        self._count += 1

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``, or the last node if past the end."""
        self._require_items()
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if self._count == 1:
            self._head = None
        elif position == 1:
            old = self._head
            self._head = old.next
            _unlink(old)
        else:
            node, tail = self._head, self._head.prev
            for _ in range(position - 2):
                if node.next is tail:
                    break
                node = node.next
            _unlink(node.next)
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

    def sorted_copy(self) -> "CircularDoublyLinkedList":
        """A new list with the same values in ascending order."""
        self._require_items()
        return self._from_values(sorted(self))

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._require_items()
        nodes = list(self._nodes())
        for node in nodes:
            node.prev, node.next = node.next, node.prev
        self._head = nodes[-1]

    def copy(self) -> "CircularDoublyLinkedList":
        """A new list with the same values in the same order."""
        self._require_items()
        return self._from_values(self)

    def backwards(self) -> Iterator[int]:
        """Values from the last node to the first, following back links."""
        if self._head is None:
            return
        node = self._head.prev
        while True:
            yield node.value
            if node is self._head:
                return
            node = node.prev

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"