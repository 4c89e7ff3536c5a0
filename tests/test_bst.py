import random

import pytest

from clrsalgo.bst import BinarySearchTree, randomize_in_place


@pytest.fixture
def keys():
    values = list(range(10))
    randomize_in_place(values, random.Random(1))
    return values


@pytest.fixture
def tree(keys):
    t = BinarySearchTree()
    for key in keys:
        t.insert(key)
    return t


def test_inorder_is_sorted(tree, keys):
    assert list(tree.inorder()) == sorted(keys)


def test_minimum_and_maximum(tree, keys):
    assert tree.minimum().key == min(keys)
    assert tree.maximum().key == max(keys)


def test_empty_tree_extremes():
    t = BinarySearchTree()
    assert t.minimum() is None
    assert t.maximum() is None
    assert list(t.inorder()) == []


def test_successor_chain(tree, keys):
    walked = []
    node = tree.minimum()
    while node is not None:
        walked.append(node.key)
        node = tree.successor(node)
    assert walked == sorted(keys)


def test_predecessor_chain(tree, keys):
    walked = []
    node = tree.maximum()
    while node is not None:
        walked.append(node.key)
        node = tree.predecessor(node)
    assert walked == sorted(keys, reverse=True)


def test_search(tree, keys):
    for key in keys:
        assert tree.search(key).key == key
    assert tree.search(42) is None


def test_delete_every_key(tree, keys):
    remaining = sorted(keys)
    order = keys[:]
    random.Random(7).shuffle(order)
    for key in order:
        tree.delete(tree.search(key))
        remaining.remove(key)
        assert list(tree.inorder()) == remaining
        assert tree.search(key) is None
    assert tree.root is None


def test_delete_root_with_two_children():
    t = BinarySearchTree()
    for key in (5, 3, 8, 7, 9):
        t.insert(key)
    t.delete(t.root)
    assert list(t.inorder()) == [3, 7, 8, 9]
    assert t.search(5) is None
    assert t.root.parent is None


def test_duplicates_are_kept():
    t = BinarySearchTree()
    t.insert(5)
    t.insert(5)
    assert list(t.inorder()) == [5, 5]


def test_randomize_is_permutation_and_deterministic():
    a = list(range(20))
    b = list(range(20))
    randomize_in_place(a, random.Random(3))
    randomize_in_place(b, random.Random(3))
    assert a == b
    assert sorted(a) == list(range(20))