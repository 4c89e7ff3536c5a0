"""Binary search trees with parent links: search, extremes, neighbours, insert, delete."""

from __future__ import annotations

import random
from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    key: int
    parent: BSTNode | None = field(default=None, repr=False)
    left: BSTNode | None = field(default=None, repr=False)
    right: BSTNode | None = field(default=None, repr=False)


def _min_node(node: BSTNode) -> BSTNode:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: BSTNode) -> BSTNode:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, key: int) -> BSTNode:
        """Insert key as a new leaf and return its node."""
        node = BSTNode(key)
        parent = None
        x = self.root
        while x is not None:
            parent = x
            x = x.left if key < x.key else x.right
        node.parent = parent
        if parent is None:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        return node

    def search(self, key: int) -> BSTNode | None:
        """Return a node holding key, or None."""
        x = self.root
        while x is not None and x.key != key:
            x = x.right if key > x.key else x.left
        return x

    def delete(self, node: BSTNode) -> None:
        """Remove node's key from the tree.

        A node with two children takes its successor's key, and the
        successor's node is the one spliced out.
        """
        x = node
        if x.left is None:
            y = x.right
        elif x.right is None:
            y = x.left
        else:
            x = _min_node(x.right)
            node.key = x.key
            y = x.right
        parent = x.parent
        if y is not None:
            y.parent = parent
        if parent is None:
            self.root = y
        elif parent.right is x:
            parent.right = y
        else:
            parent.left = y
        x.parent = x.left = x.right = None

    def minimum(self) -> BSTNode | None:
        """Return the node with the smallest key, or None if the tree is empty."""
        return None if self.root is None else _min_node(self.root)

    def maximum(self) -> BSTNode | None:
        """Return the node with the largest key, or None if the tree is empty."""
        return None if self.root is None else _max_node(self.root)

    def predecessor(self, node: BSTNode) -> BSTNode | None:
        """Return the node that comes before node in key order, or None."""
        if node.left is not None:
            return _max_node(node.left)
        current, parent = node, node.parent
        while parent is not None and parent.right is not current:
            current, parent = parent, parent.parent
        return parent

    def successor(self, node: BSTNode) -> BSTNode | None:
        """Return the node that comes after node in key order, or None."""
        if node.right is not None:
            return _min_node(node.right)
        current, parent = node, node.parent
        while parent is not None and parent.left is not current:
            current, parent = parent, parent.parent
        return parent

    def inorder(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        stack: list[BSTNode] = []
        x = self.root
        while stack or x is not None:
            while x is not None:
                stack.append(x)
                x = x.left
            x = stack.pop()
            yield x.key
            x = x.right


def randomize_in_place(values: MutableSequence[int], rng: random.Random | None = None) -> None:
    """Shuffle values in place, swapping each position with one at or after it."""
    rng = rng or random.Random()
    n = len(values)
    for i in range(n):
        j = rng.randint(i, n - 1)
        values[i], values[j] = values[j], values[i]