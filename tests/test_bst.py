import pytest

from algoshelf.bst import BinarySearchTree, EmptyTreeError


def make_tree(values):
    tree = BinarySearchTree(values[0])
    for value in values[1:]:
        tree.insert(value)
    return tree


def test_inorder_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 35]
    tree = make_tree(values)
    assert tree.inorder() == sorted(values)
    assert list(tree) == sorted(values)


def test_morris_matches_inorder_and_leaves_tree_intact():
    tree = make_tree([8, 3, 10, 1, 6, 14, 4, 7, 13])
    before = tree.preorder()
    assert tree.morris_inorder() == tree.inorder()
    assert tree.preorder() == before


def test_traversals_cover_same_values():
    values = [8, 3, 10, 1, 6, 14]
    tree = make_tree(values)
    assert sorted(tree.preorder()) == sorted(values)
    assert sorted(tree.postorder()) == sorted(values)
    assert tree.preorder()[0] == 8
    assert tree.postorder()[-1] == 8


def test_contains():
    tree = make_tree([5, 2, 9])
    assert tree.contains(2)
    assert 9 in tree
    assert not tree.contains(4)


def test_duplicates_kept():
    tree = make_tree([5, 5, 3])
    assert tree.inorder() == [3, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [3, 5]


def test_delete_root_with_two_children():
    tree = make_tree([5, 3, 8, 7, 9])
    tree.delete(5)
    assert tree.root.value == 8
    assert tree.preorder() == [8, 7, 3, 9]


def test_delete_leaf_and_inner_node():
    values = [50, 30, 70, 20, 40, 60, 80]
    tree = make_tree(values)
    tree.delete(20)
    tree.delete(70)
    assert tree.inorder() == sorted(set(values) - {20, 70})
    assert len(tree) == 5


def test_delete_missing_raises_key_error():
    tree = make_tree([5, 3])
    with pytest.raises(KeyError):
        tree.delete(42)


def test_delete_last_node_destroys_tree():
    tree = BinarySearchTree(1)
    tree.delete(1)
    assert len(tree) == 0
    assert tree.height() == 0
    assert not tree.contains(1)
    with pytest.raises(EmptyTreeError):
        tree.insert(2)
    with pytest.raises(EmptyTreeError):
        tree.delete(1)


def test_height_of_degenerate_tree():
    tree = make_tree([0, 1, 2, 3, 4, 5])
    assert tree.height() == len(tree)


def test_balance_keeps_values_and_minimises_height():
    values = list(range(20))
    tree = make_tree(values)
    tree.balance()
    assert tree.inorder() == values
    assert tree.height() == len(values).bit_length()
    assert tree.count() == len(values)