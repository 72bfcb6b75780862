"""Disjoint-set structures with union by rank and path compression."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class UnionFind:
    """Disjoint sets over the integers ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(n))
        self.rank = [0] * n

    def _check(self, a: int) -> None:
        if not 0 <= a < len(self.parent):
            raise IndexError(a)

    def find(self, a: int) -> int:
        """Return the representative of ``a``'s set, compressing the path."""
        self._check(a)
        root = a
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[a] != root:
            self.parent[a], a = root, self.parent[a]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        if self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            if self.rank[root_a] == self.rank[root_b]:
                self.rank[root_b] += 1
            self.parent[root_a] = root_b


class DisjointSet(Generic[T]):
    """Disjoint sets over any hashable items; unknown items join on sight."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.parent: dict[T, T] = {}
        self.rank: dict[T, int] = {}
        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, a: T) -> T:
        """Return the representative of ``a``'s set, adding ``a`` if new."""
        if a not in self.parent:
            self.parent[a] = a
            self.rank[a] = 0
        root = a
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[a] != root:
            self.parent[a], a = root, self.parent[a]
        return root

    def union(self, a: T, b: T) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        if self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            if self.rank[root_a] == self.rank[root_b]:
                self.rank[root_b] += 1
            self.parent[root_a] = root_b