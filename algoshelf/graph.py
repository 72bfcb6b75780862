"""Directed graph stored as adjacency lists, with BFS and DFS reports."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TraversalReport:
    """Outcome of a full traversal of an adjacency-list graph.

    ``components`` holds the visiting order of each search, the first one
    starting at the requested vertex. ``cycle_edges`` counts edges that led
    to a vertex already discovered in the same search, other than the edge
    back to the vertex it was discovered from. ``connected`` is true when
    every vertex is reachable from the start vertex.
    """

    components: tuple[tuple[int, ...], ...]
    cycle_edges: int
    connected: bool

    @property
    def order(self) -> list[int]:
        """All vertices in the order they were visited."""
        return [vertex for component in self.components for vertex in component]

    @property
    def cyclic(self) -> bool:
        return self.cycle_edges > 0


class AdjacencyListGraph:
    """A directed graph of integer vertices; parallel edges are allowed."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}

    @property
    def vertices(self) -> list[int]:
        """Vertices in the order they were added."""
        return list(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def _require(self, *vertices: int) -> None:
        for vertex in vertices:
            if vertex not in self._adjacency:
                raise KeyError(vertex)

    def add_vertex(self, vertex: int) -> None:
        """Add a vertex with no edges."""
        if vertex in self._adjacency:
            raise ValueError(f"vertex {vertex} already exists")
        self._adjacency[vertex] = []

    def add_edge(self, a: int, b: int) -> None:
        """Add a directed edge from ``a`` to ``b``; both must exist."""
        self._require(a, b)
        self._adjacency[a].append(b)

    def add_undirected_edge(self, a: int, b: int) -> None:
        """Add edges in both directions between ``a`` and ``b``."""
        self._require(a, b)
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex together with every edge that touches it."""
        self._require(vertex)
        del self._adjacency[vertex]
        for targets in self._adjacency.values():
            targets[:] = [target for target in targets if target != vertex]

    def remove_edge(self, a: int, b: int) -> None:
        """Remove every edge from ``a`` to ``b``."""
        self._require(a)
        targets = self._adjacency[a]
        if b not in targets:
            raise KeyError((a, b))
        targets[:] = [target for target in targets if target != b]

    def remove_undirected_edge(self, a: int, b: int) -> None:
        """Remove the edges in both directions.

        If only the edge from ``a`` to ``b`` exists, it is put back and
        :class:`KeyError` is raised.
        """
        self.remove_edge(a, b)
        try:
            self.remove_edge(b, a)
        except KeyError:
            self._adjacency[a].append(b)
            raise

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def neighbours(self, vertex: int) -> list[int]:
        """Targets of the edges leaving ``vertex``, in insertion order."""
        self._require(vertex)
        return list(self._adjacency[vertex])

    def _search(self, start: int, seen: set[int], breadth: bool) -> tuple[list[int], int]:
        order: list[int] = []
        cycle_edges = 0
        current = {start}
        seen.add(start)
        pending: deque[tuple[int, Optional[int]]] = deque([(start, None)])
        while pending:
            vertex, parent = pending.popleft() if breadth else pending.pop()
            order.append(vertex)
            for target in self._adjacency[vertex]:
                if target in current:
                    if target != parent:
                        cycle_edges += 1
                elif target not in seen:
                    current.add(target)
                    seen.add(target)
                    pending.append((target, vertex))
        return order, cycle_edges

    def _traverse(self, start: int, breadth: bool) -> TraversalReport:
        self._require(start)
        seen: set[int] = set()
        components: list[tuple[int, ...]] = []
        cycle_edges = 0
        for origin in [start, *self._adjacency]:
            if origin in seen:
                continue
            order, cycles = self._search(origin, seen, breadth)
            components.append(tuple(order))
            cycle_edges += cycles
        connected = len(components[0]) == len(self._adjacency)
        return TraversalReport(tuple(components), cycle_edges, connected)

    def bfs(self, start: int) -> TraversalReport:
        """Breadth-first traversal from ``start``, then from unreached vertices."""
        return self._traverse(start, breadth=True)

    def dfs(self, start: int) -> TraversalReport:
        """Depth-first traversal from ``start``, then from unreached vertices."""
        return self._traverse(start, breadth=False)

    def display(self) -> str:
        """The adjacency lists followed by vertex and edge counts."""
        if not self._adjacency:
            return "Graph Empty!"
        lines = [
            f"{vertex}-> " + "".join(f"{target} - " for target in targets)
            for vertex, targets in self._adjacency.items()
        ]
        lines.append(f"Vertices: {len(self._adjacency)}")
        lines.append(f"Edges: {self.edge_count}")
        return "\n".join(lines)