"""Fibonacci heaps: mergeable min-heaps with amortised O(1) decrease-key."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .common import NINFINITE


@dataclass(eq=False)
class FibNode:
    """A node of a Fibonacci heap; ``ref`` and ``inq`` are free for callers."""

    key: int
    ref: int = 0
    inq: bool = True
    degree: int = field(default=0, repr=False)
    mark: bool = field(default=False, repr=False)
    parent: FibNode | None = field(default=None, repr=False)
    child: FibNode | None = field(default=None, repr=False)
    left: FibNode = field(init=False, repr=False)
    right: FibNode = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.left = self
        self.right = self


def _ring(start: FibNode | None) -> list[FibNode]:
    """Return the nodes of a circular list, starting at start."""
    if start is None:
        return []
    nodes = [start]
    x = start.right
    while x is not start:
        nodes.append(x)
        x = x.right
    return nodes


def _splice(a: FibNode | None, b: FibNode | None) -> None:
    """Join the circular list holding b into the one holding a, left of a."""
    if a is None or b is None:
        return
    a_left = a.left
    b_right = b.right
    a.left = b
    a_left.right = b_right
    b.right = a
    b_right.left = a_left


def _detach(x: FibNode) -> None:
    """Take x out of its circular list, leaving it a ring of one."""
    x.left.right = x.right
    x.right.left = x.left
    x.left = x
    x.right = x


class FibonacciHeap:
    """A min-heap made of a circular root list of heap-ordered trees."""

    def __init__(self) -> None:
        self._n = 0
        self._min: FibNode | None = None

    def __len__(self) -> int:
        return self._n

    def insert(self, node: FibNode) -> None:
        """Add node to the root list as a tree of its own."""
        node.degree = 0
        node.parent = None
        node.child = None
        node.left = node
        node.right = node
        node.mark = False
        _splice(self._min, node)
        if self._min is None or node.key < self._min.key:
            self._min = node
        self._n += 1

    def minimum(self) -> FibNode | None:
        """Return the node with the smallest key, or None if the heap is empty."""
        return self._min

    def union(self, other: FibonacciHeap) -> FibonacciHeap:
        """Return a new heap holding the nodes of both; both operands are emptied."""
        merged = FibonacciHeap()
        merged._min = self._min
        _splice(merged._min, other._min)
        if self._min is None or (other._min is not None and other._min.key < self._min.key):
            merged._min = other._min
        merged._n = self._n + other._n
        for heap in (self, other):
            heap._min = None
            heap._n = 0
        return merged

    def _link(self, y: FibNode, x: FibNode) -> None:
        """Make root y a child of root x."""
        _detach(y)
        _splice(x.child, y)
        if x.child is None:
            x.child = y
        x.degree += 1
        y.parent = x
        y.mark = False

    def _consolidate(self) -> None:
        by_degree: dict[int, FibNode] = {}
        for w in _ring(self._min):
            x = w
            d = x.degree
            while d in by_degree:
                y = by_degree.pop(d)
                if x.key > y.key:
                    x, y = y, x
                self._link(y, x)
                d += 1
            by_degree[d] = x
        self._min = None
        roots = [by_degree[d] for d in sorted(by_degree)]
        for x in roots:
            x.left = x
            x.right = x
        for x in roots:
            _splice(self._min, x)
            if self._min is None or x.key < self._min.key:
                self._min = x

    def extract_min(self) -> FibNode | None:
        """Remove and return the node with the smallest key, or None if empty."""
        z = self._min
        if z is None:
            return None
        for x in _ring(z.child):
            _detach(x)
            x.parent = None
            _splice(z, x)
        z.child = None
        z.degree = 0
        if z.right is z:
            self._min = None
        else:
            self._min = z.right
            _detach(z)
            self._consolidate()
        _detach(z)
        self._n -= 1
        return z

    def _cut(self, x: FibNode, y: FibNode) -> None:
        """Move x from y's children to the root list."""
        if x.right is not x:
            y.child = x.right
            _detach(x)
        else:
            y.child = None
        y.degree -= 1
        _splice(self._min, x)
        x.parent = None
        x.mark = False

    def _cascading_cut(self, y: FibNode) -> None:
        z = y.parent
        while z is not None:
            if not y.mark:
                y.mark = True
                return
            self._cut(y, z)
            y = z
            z = y.parent

    def decrease_key(self, node: FibNode, key: int) -> None:
        """Lower node's key to key; raise ValueError if key is greater."""
        if key > node.key:
            raise ValueError("new key is greater than the current key")
        node.key = key
        y = node.parent
        if y is not None and node.key < y.key:
            self._cut(node, y)
            self._cascading_cut(y)
        if self._min is not None and node.key < self._min.key:
            self._min = node

    def delete(self, node: FibNode) -> None:
        """Remove node from the heap."""
        self.decrease_key(node, NINFINITE)
        self.extract_min()

    def format(self) -> str:
        """Render every key, marking descents into children with down/up."""

        def render(start: FibNode | None) -> str:
            parts = []
            for x in _ring(start):
                parts.append(f"{x.key} \n")
                if x.child is not None:
                    parts.append("down\n")
                    parts.append(render(x.child))
                    parts.append("up\n")
            return "".join(parts)

        return render(self._min)


def fib_heap_construct(keys: Iterable[int]) -> FibonacciHeap:
    """Build a heap holding a fresh node for every key."""
    heap = FibonacciHeap()
    for key in keys:
        heap.insert(FibNode(key))
    return heap