import math

import pytest

from algoshelf.weighted_graphs import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    prim_mst,
)

INF = math.inf

DIRECTED = [
    [0, 4, 1, INF],
    [INF, 0, INF, 1],
    [INF, 2, 0, 5],
    [INF, INF, INF, 0],
]


def test_dijkstra_distances():
    assert dijkstra(DIRECTED, 0) == [0, 3, 1, 4]


def test_bellman_ford_agrees_with_dijkstra():
    for source in range(len(DIRECTED)):
        assert bellman_ford(DIRECTED, source) == dijkstra(DIRECTED, source)


def test_distances_respect_every_edge():
    dist = dijkstra(DIRECTED, 0)
    for u, row in enumerate(DIRECTED):
        for v, weight in enumerate(row):
            if weight != INF:
                assert dist[v] <= dist[u] + weight


def test_unreachable_vertices_are_infinite():
    assert dijkstra(DIRECTED, 3)[:3] == [INF, INF, INF]
    assert bellman_ford(DIRECTED, 3)[3] == 0


def test_none_means_no_edge():
    graph = [[0, None], [None, 0]]
    assert bellman_ford(graph, 0) == [0, INF]


def test_dijkstra_ignores_zero_entries():
    assert dijkstra([[0, 0], [0, 0]], 0) == [0, INF]


def test_bellman_ford_negative_edge():
    graph = [[0, 5, 2], [INF, 0, INF], [INF, -4, 0]]
    assert bellman_ford(graph, 0) == [0, -2, 2]


def test_bellman_ford_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford([[0, 1], [-2, 0]], 0)


@pytest.mark.parametrize("func", [bellman_ford, dijkstra])
def test_source_out_of_range(func):
    with pytest.raises(IndexError):
        func(DIRECTED, 4)


@pytest.mark.parametrize("func", [bellman_ford, dijkstra, prim_mst])
def test_non_square_matrix(func):
    with pytest.raises(ValueError):
        if func is prim_mst:
            func([[0, 1]])
        else:
            func([[0, 1]], 0)


def test_prim_drops_heaviest_triangle_edge():
    tree = prim_mst([[0, 1, 3], [1, 0, 2], [3, 2, 0]])
    assert tree[0][1] == 1 and tree[1][2] == 2
    assert tree[0][2] is None and tree[2][0] is None


def test_prim_tree_is_symmetric_spanning_tree():
    graph = [
        [0, 2, INF, 6],
        [2, 0, 3, 8],
        [INF, 3, 0, 7],
        [6, 8, 7, 0],
    ]
    tree = prim_mst(graph)
    assert all(tree[i][j] == tree[j][i] for i in range(4) for j in range(4))
    edges = [(i, j) for i in range(4) for j in range(i + 1, 4) if tree[i][j] is not None]
    assert len(edges) == 3
    assert all(tree[i][j] == graph[i][j] for i, j in edges)


def test_prim_leaves_unreachable_vertex_out():
    tree = prim_mst([[0, 1, INF], [1, 0, INF], [INF, INF, 0]])
    assert tree[2] == [None, None, None]
    assert tree[0][1] == 1


def test_prim_empty_graph():
    assert prim_mst([]) == []