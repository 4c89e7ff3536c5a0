"""Disjoint sets as a forest with union by rank and path compression, and as linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ForestNode:
    """A node of a disjoint-set forest."""

    key: int
    parent: "ForestNode | None" = field(default=None, repr=False)
    rank: int = 0


def forest_make_set(node: ForestNode) -> ForestNode:
    """Make node the only member and representative of a new set."""
    node.rank = 0
    node.parent = node
    return node


def forest_find_set(node: ForestNode) -> ForestNode:
    """Return the representative of node's set, compressing the path."""
    if node.parent is None:
        raise ValueError(f"node {node.key} belongs to no set")
    root = node
    while root.parent is not root:
        root = root.parent
    while node is not root:
        node.parent, node = root, node.parent
    return root


def forest_link(rep1: ForestNode, rep2: ForestNode) -> ForestNode:
    """Hang the root of lower rank under the other; return the new root."""
    if rep1 is rep2:
        return rep1
    if rep1.rank > rep2.rank:
        rep2.parent = rep1
        return rep1
    rep1.parent = rep2
    if rep1.rank == rep2.rank:
        rep2.rank += 1
    return rep2


def forest_union(x: ForestNode, y: ForestNode) -> ForestNode:
    """Merge the sets containing x and y; return the new representative."""
    return forest_link(forest_find_set(x), forest_find_set(y))


@dataclass(eq=False)
class ListSetNode:
    """A member of a linked-list disjoint set."""

    key: int
    representative: "ListSetNode | None" = field(default=None, repr=False)
    owner: "ListSet | None" = field(default=None, repr=False)


@dataclass(eq=False)
class ListSet:
    """A set whose first member is its representative."""

    members: list[ListSetNode]

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self.members)

    def __len__(self) -> int:
        return len(self.members)

    def format(self) -> str:
        """Return the keys in list order, each followed by a space, then a newline."""
        return "".join(f"{node.key} " for node in self.members) + "\n"


def list_make_set(node: ListSetNode) -> ListSet:
    """Make node the only member and representative of a new set."""
    result = ListSet([node])
    node.representative = node
    node.owner = result
    return result


def list_find_set(node: ListSetNode) -> ListSetNode:
    """Return the representative of node's set."""
    if node.representative is None:
        raise ValueError(f"node {node.key} belongs to no set")
    return node.representative


def list_union(x: ListSetNode, y: ListSetNode) -> ListSet:
    """Append the shorter of the two sets to the longer; return the merged set."""
    x_rep = list_find_set(x)
    y_rep = list_find_set(y)
    x_set = x_rep.owner
    y_set = y_rep.owner
    if x_rep is y_rep:
        return x_set
    if len(x_set) > len(y_set):
        x_set, y_set = y_set, x_set
    head = y_set.members[0]
    for node in x_set.members:
        node.representative = head
        node.owner = y_set
    y_set.members.extend(x_set.members)
    x_set.members = []
    return y_set