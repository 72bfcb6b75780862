"""Shortest paths and minimum spanning trees over weighted adjacency matrices.

A missing edge is written as ``None`` or ``math.inf``; unreachable
distances come back as ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from typing import Optional, Sequence

Matrix = Sequence[Sequence[Optional[float]]]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _weights(graph: Matrix) -> list[list[float]]:
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    return [[math.inf if w is None else w for w in row] for row in graph]


def _check_source(source: int, n: int) -> None:
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range for {n} vertices")


def bellman_ford(graph: Matrix, source: int = 0) -> list[float]:
    """Shortest distances from ``source``; negative weights are allowed."""
    weights = _weights(graph)
    _check_source(source, len(weights))
    dist = [math.inf] * len(weights)
    dist[source] = 0
    for _ in range(len(weights) - 1):
        for i, row in enumerate(weights):
            if dist[i] == math.inf:
                continue
            for j, weight in enumerate(row):
                if dist[i] + weight < dist[j]:
                    dist[j] = dist[i] + weight
    for i, row in enumerate(weights):
        if dist[i] == math.inf:
            continue
        if any(dist[i] + weight < dist[j] for j, weight in enumerate(row)):
            raise NegativeCycleError("graph contains a negative cycle")
    return dist


def prim_mst(graph: Matrix) -> list[list[Optional[float]]]:
    """Minimum spanning tree of the component holding vertex 0.

    The tree comes back as a symmetric matrix with ``None`` where it has no
    edge.
    """
    weights = _weights(graph)
    n = len(weights)
    tree: list[list[Optional[float]]] = [[None] * n for _ in range(n)]
    if n == 0:
        return tree
    in_tree = [False] * n
    best = [math.inf] * n
    via: list[Optional[int]] = [None] * n
    heap: list[tuple[float, int]] = [(math.inf, 0)]
    while heap:
        _, vertex = heapq.heappop(heap)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        parent = via[vertex]
        if parent is not None:
            tree[vertex][parent] = weights[vertex][parent]
            tree[parent][vertex] = weights[parent][vertex]
        for target, weight in enumerate(weights[vertex]):
            if weight != math.inf and not in_tree[target] and weight < best[target]:
                best[target] = weight
                via[target] = vertex
                heapq.heappush(heap, (weight, target))
    return tree


def dijkstra(graph: Matrix, source: int = 0) -> list[float]:
    """Shortest distances from ``source`` for non-negative weights.

    Zero entries, like the diagonal, are not treated as edges.
    """
    weights = _weights(graph)
    _check_source(source, len(weights))
    dist = [math.inf] * len(weights)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if distance > dist[vertex]:
            continue
        for target, weight in enumerate(weights[vertex]):
            if weight == math.inf or weight == 0:
                continue
            candidate = distance + weight
            if candidate < dist[target]:
                dist[target] = candidate
                heapq.heappush(heap, (candidate, target))
    return dist