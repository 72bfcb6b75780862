from dataclasses import dataclass, field

import pytest

from algoshelf.union_find import DisjointSet, UnionFind


def test_initially_each_is_own_root():
    uf = UnionFind(5)
    assert [uf.find(i) for i in range(5)] == list(range(5))


def test_union_joins_sets():
    uf = UnionFind(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)
    assert len({uf.find(i) for i in (0, 1, 2, 3)}) == 1
    assert uf.find(4) == 4
    assert uf.find(0) != uf.find(5)


def test_equal_rank_union_makes_second_root():
    uf = UnionFind(2)
    uf.union(0, 1)
    assert uf.find(0) == 1
    assert uf.rank[1] == 1


def test_higher_rank_root_wins():
    uf = UnionFind(3)
    uf.union(0, 1)
    uf.union(1, 2)
    assert uf.find(2) == 1


def test_path_compression():
    uf = UnionFind(4)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)
    root = uf.find(0)
    assert uf.parent[0] == root


def test_out_of_range_raises():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.union(-1, 0)


@dataclass(frozen=True)
class Player:
    number: int
    health: int = field(compare=False, hash=False)


def test_disjoint_set_with_custom_objects():
    players = [Player(0, 100), Player(1, 50), Player(2, 75), Player(3, 100)]
    ds = DisjointSet(players)
    ds.union(players[0], players[1])
    assert ds.find(players[0]) == ds.find(players[1])
    assert ds.find(players[2]) == players[2]
    assert ds.find(Player(1, 999)) == ds.find(players[0])


def test_disjoint_set_adds_unknown_items():
    ds = DisjointSet()
    assert ds.find("a") == "a"
    ds.union("a", "b")
    assert ds.find("a") == ds.find("b")
    assert set(ds.parent) == {"a", "b"}