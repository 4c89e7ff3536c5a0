"""Binomial heaps: mergeable min-heaps made of binomial trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterator
from dataclasses import dataclass, field
from operator import attrgetter
from typing import TextIO

from .common import NINFINITE


@dataclass(eq=False)
class BinomialNode:
    """A node of a binomial tree."""

    key: int
    degree: int = field(default=0, repr=False)
    parent: BinomialNode | None = field(default=None, repr=False)
    child: BinomialNode | None = field(default=None, repr=False)
    sibling: BinomialNode | None = field(default=None, repr=False)


def _siblings(node: BinomialNode | None) -> Iterator[BinomialNode]:
    while node is not None:
        yield node
        node = node.sibling


def _chain(nodes: list[BinomialNode]) -> BinomialNode | None:
    """Link nodes through their sibling fields and return the first."""
    for a, b in zip(nodes, nodes[1:]):
        a.sibling = b
    if nodes:
        nodes[-1].sibling = None
        return nodes[0]
    return None


def _link(y: BinomialNode, z: BinomialNode) -> None:
    """Make the root y, of the same degree as z, the first child of z."""
    y.parent = z
    y.sibling = z.child
    z.child = y
    z.degree += 1


def _union(h1: BinomialNode | None, h2: BinomialNode | None) -> BinomialNode | None:
    # On equal degrees the roots of h2 come first.
    merged = list(heapq.merge(list(_siblings(h2)), list(_siblings(h1)), key=attrgetter("degree")))
    head = _chain(merged)
    if head is None:
        return None
    prev_x = None
    x = head
    next_x = x.sibling
    while next_x is not None:
        if x.degree != next_x.degree or (
            next_x.sibling is not None and next_x.sibling.degree == x.degree
        ):
            prev_x = x
            x = next_x
        elif x.key <= next_x.key:
            x.sibling = next_x.sibling
            _link(next_x, x)
        else:
            if prev_x is None:
                head = next_x
            else:
                prev_x.sibling = next_x
            _link(x, next_x)
            x = next_x
        next_x = x.sibling
    return head


class BinomialHeap:
    """A min-heap whose root list is ordered by increasing degree."""

    def __init__(self) -> None:
        self.head: BinomialNode | None = None

    def roots(self) -> list[BinomialNode]:
        """Return the roots of the heap in root-list order."""
        return list(_siblings(self.head))

    def insert(self, node: BinomialNode) -> None:
        """Add node as a one-node tree and merge it in."""
        node.parent = None
        node.child = None
        node.sibling = None
        node.degree = 0
        self.head = _union(node, self.head)

    def minimum(self) -> BinomialNode | None:
        """Return the root with the smallest key, or None if the heap is empty."""
        return min(self.roots(), key=attrgetter("key"), default=None)

    def union(self, other: BinomialHeap) -> BinomialHeap:
        """Move every tree of other into this heap and return this heap."""
        self.head = _union(self.head, other.head)
        other.head = None
        return self

    def extract_min(self) -> BinomialNode:
        """Remove and return the root with the smallest key."""
        y = self.minimum()
        if y is None:
            raise IndexError("extract_min from an empty heap")
        self.head = _chain([root for root in self.roots() if root is not y])
        children = list(_siblings(y.child))
        for child in children:
            child.parent = None
        children.reverse()
        y.child = None
        y.sibling = None
        self.head = _union(_chain(children), self.head)
        return y

    def decrease_key(self, node: BinomialNode, key: int) -> BinomialNode:
        """Lower node's key and bubble it up by swapping keys.

        Return the node that holds the new key afterwards.
        """
        if key > node.key:
            raise ValueError("new key is greater than current key")
        node.key = key
        y = node
        z = y.parent
        while z is not None and y.key < z.key:
            y.key, z.key = z.key, y.key
            y = z
            z = y.parent
        return y

    def delete(self, node: BinomialNode) -> None:
        """Remove node's key from the heap."""
        self.decrease_key(node, NINFINITE)
        self.extract_min()

    def format(self) -> str:
        """Render every tree depth-first as ``key: k, degree: d`` lines."""

        def render(t: BinomialNode) -> str:
            parts = [f"key: {t.key}, degree: {t.degree}\n"]
            parts.extend(render(c) for c in _siblings(t.child))
            return "".join(parts)

        return "".join(render(root) for root in self.roots())


def read_binomial_heap(stream: TextIO) -> BinomialHeap:
    """Build a heap from whitespace-separated integer keys."""
    heap = BinomialHeap()
    for token in stream.read().split():
        try:
            key = int(token)
        except ValueError:
            raise ValueError(f"malformed key: {token!r}") from None
        heap.insert(BinomialNode(key))
    return heap