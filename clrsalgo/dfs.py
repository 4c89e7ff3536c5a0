"""Depth-first search with discovery/finish times and edge classification."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .adjlist import AdjacencyList, Color, EdgeType
from .common import NILVALUE

_EDGE_NAMES = {
    EdgeType.TREE: "tree edge",
    EdgeType.BACK: "back edge",
    EdgeType.FORWARD: "forward edge",
    EdgeType.CROSS: "cross edge",
}


@dataclass
class DFSResult:
    """Predecessors, discovery and finish times, and every classified edge."""

    parent: list[int]
    discovery: list[int]
    finish: list[int]
    edges: list[tuple[int, int, EdgeType]] = field(default_factory=list)


def edge_type_name(edge_type: EdgeType | int) -> str:
    """Return the human-readable name of an edge type."""
    try:
        return _EDGE_NAMES[EdgeType(edge_type)]
    except ValueError:
        raise ValueError(f"wrong edge type: {edge_type!r}") from None


def dfs(graph: AdjacencyList, order: Iterable[int] | None = None) -> DFSResult:
    """Search the whole graph depth-first, starting roots in the given order.

    Each edge of the graph gets its ``edge_type`` set as it is explored.
    """
    n = len(graph)
    color = [Color.WHITE] * n
    parent = [NILVALUE] * n
    discovery = [0] * n
    finish = [0] * n
    edges: list[tuple[int, int, EdgeType]] = []
    time = 0
    roots = range(n) if order is None else order
    for root in roots:
        if not 0 <= root < n:
            raise IndexError(f"vertex {root} out of range for {n} vertices")
        if color[root] is not Color.WHITE:
            continue
        time += 1
        color[root] = Color.GRAY
        discovery[root] = time
        stack = [(root, iter(graph.neighbors(root)))]
        while stack:
            u, pending = stack[-1]
            for edge in pending:
                v = edge.vertex
                if color[v] is Color.WHITE:
                    edge.edge_type = EdgeType.TREE
                elif color[v] is Color.GRAY:
                    edge.edge_type = EdgeType.BACK
                elif discovery[u] < discovery[v]:
                    edge.edge_type = EdgeType.FORWARD
                else:
                    edge.edge_type = EdgeType.CROSS
                edges.append((u, v, edge.edge_type))
                if color[v] is Color.WHITE:
                    parent[v] = u
                    time += 1
                    color[v] = Color.GRAY
                    discovery[v] = time
                    stack.append((v, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                color[u] = Color.BLACK
                time += 1
                finish[u] = time
    return DFSResult(parent, discovery, finish, edges)