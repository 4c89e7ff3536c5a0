import io

import pytest

from clrsalgo.binomial_heap import BinomialHeap, BinomialNode, read_binomial_heap


def build(keys):
    heap = BinomialHeap()
    nodes = [BinomialNode(k) for k in keys]
    for node in nodes:
        heap.insert(node)
    return heap, nodes


def drain(heap):
    keys = []
    while heap.minimum() is not None:
        keys.append(heap.extract_min().key)
    return keys


def collect(node, out):
    out.append(node)
    child = node.child
    count = 0
    while child is not None:
        assert child.parent is node
        assert child.key >= node.key
        collect(child, out)
        child = child.sibling
        count += 1
    assert count == node.degree


def test_extract_yields_sorted_keys():
    keys = [12, 7, 25, 15, 28, 33, 41, 1, 18, 6, 8, 29, 10, 44, 30, 23]
    heap, _ = build(keys)
    assert drain(heap) == sorted(keys)
    assert heap.roots() == []


def test_root_degrees_follow_binary_count():
    heap, _ = build(range(13))
    degrees = [root.degree for root in heap.roots()]
    assert degrees == [0, 2, 3]


def test_trees_are_heap_ordered():
    keys = [9, 4, 17, 2, 11, 5, 8, 20, 1, 3]
    heap, _ = build(keys)
    seen = []
    for root in heap.roots():
        assert root.parent is None
        collect(root, seen)
    assert sorted(n.key for n in seen) == sorted(keys)


def test_minimum():
    heap, _ = build([5, 9, 2, 8])
    assert heap.minimum().key == 2
    assert BinomialHeap().minimum() is None


def test_extract_min_from_empty_raises():
    with pytest.raises(IndexError):
        BinomialHeap().extract_min()


def test_single_node_format():
    heap, _ = build([7])
    assert heap.format() == "key: 7, degree: 0\n"


def test_format_covers_every_key():
    keys = [3, 1, 4, 5, 9, 2, 6]
    heap, _ = build(keys)
    lines = heap.format().splitlines()
    assert len(lines) == len(keys)
    assert sorted(int(line.split(",")[0].split(": ")[1]) for line in lines) == sorted(keys)


def test_union_moves_all_trees():
    a, _ = build([10, 4, 7])
    b, _ = build([6, 1, 9, 3])
    result = a.union(b)
    assert result is a
    assert b.roots() == []
    assert drain(a) == [1, 3, 4, 6, 7, 9, 10]


def test_decrease_key_bubbles_up():
    keys = [10, 20, 30, 40, 50, 60, 70, 80]
    heap, nodes = build(keys)
    holder = heap.decrease_key(nodes[7], 5)
    assert holder.key == 5
    assert holder.parent is None
    assert heap.minimum().key == 5
    assert drain(heap) == [5, 10, 20, 30, 40, 50, 60, 70]


def test_decrease_key_rejects_greater_key():
    heap, nodes = build([5])
    with pytest.raises(ValueError):
        heap.decrease_key(nodes[0], 6)
    assert nodes[0].key == 5


def test_delete_removes_key():
    keys = [13, 2, 27, 8, 19, 4, 31, 6]
    heap, nodes = build(keys)
    heap.delete(nodes[4])
    assert drain(heap) == [2, 4, 6, 8, 13, 27, 31]


def test_read_binomial_heap():
    heap = read_binomial_heap(io.StringIO("8 3\n 5 1\n9\n"))
    assert drain(heap) == [1, 3, 5, 8, 9]


def test_read_binomial_heap_rejects_garbage():
    with pytest.raises(ValueError):
        read_binomial_heap(io.StringIO("1 two 3"))