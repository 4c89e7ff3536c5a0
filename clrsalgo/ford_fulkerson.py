"""Maximum flow by the Ford-Fulkerson method with Edmonds-Karp path search."""

from __future__ import annotations

from collections.abc import Sequence

from .adjlist import AdjacencyList
from .adjmat import AdjMatrix, make_adjmat
from .bfs import bfs, calc_path
from .common import INFINITE


def initialize_edge_flow(graph: AdjacencyList, flow: AdjMatrix) -> None:
    """Set the flow on every edge of graph, in both directions, to zero."""
    for u in range(len(graph)):
        for edge in graph.neighbors(u):
            flow.mat[u][edge.vertex] = 0
            flow.mat[edge.vertex][u] = 0


def find_shortest_path(graph: AdjacencyList, source: int, sink: int) -> list[int] | None:
    """Return a path with the fewest edges from source to sink, or None."""
    _, parent = bfs(graph, source)
    return calc_path(parent, source, sink)


def residual_capacity(u: int, v: int, flow: AdjMatrix, capacity: AdjMatrix) -> int:
    """Return the residual capacity of u -> v."""
    return capacity.mat[u][v] - flow.mat[u][v]


def min_residual_capacity(capacity: AdjMatrix, flow: AdjMatrix, path: Sequence[int]) -> int:
    """Return the smallest residual capacity along path (INFINITE if it has no edge)."""
    least = INFINITE
    for u, v in zip(path, path[1:]):
        if u == v:
            raise ValueError(f"path repeats vertex {u}")
        rc = residual_capacity(u, v, flow, capacity)
        if rc <= 0:
            raise ValueError(f"edge {u} -> {v} has no residual capacity")
        least = min(least, rc)
    return least


def update_flow(flow: AdjMatrix, path: Sequence[int], amount: int) -> None:
    """Push amount along path, keeping the flow skew-symmetric."""
    for u, v in zip(path, path[1:]):
        if u == v:
            raise ValueError(f"path repeats vertex {u}")
        flow.mat[u][v] += amount
        flow.mat[v][u] = -flow.mat[u][v]


def update_residual_graph(
    graph: AdjacencyList, capacity: AdjMatrix, flow: AdjMatrix, path: Sequence[int]
) -> None:
    """Add or remove residual edges for both directions of each edge on path."""
    for u, v in zip(path, path[1:]):
        if u == v:
            raise ValueError(f"path repeats vertex {u}")
        for a, b in ((u, v), (v, u)):
            rc = residual_capacity(a, b, flow, capacity)
            if rc > 0:
                graph.add_edge(a, b)
            elif rc == 0:
                graph.remove_edge(a, b)


def _clone(graph: AdjacencyList) -> AdjacencyList:
    copy = AdjacencyList(len(graph))
    for u in range(len(graph)):
        for edge in reversed(graph.neighbors(u)):
            copy.insert_weighted(u, edge.vertex, edge.weight)
    return copy


def ford_fulkerson(
    graph: AdjacencyList, source: int, sink: int, capacity: AdjMatrix
) -> AdjMatrix:
    """Return a maximum flow from source to sink as a skew-symmetric matrix.

    The graph is left untouched; the search runs on a copy of it.
    """
    if source == sink:
        raise ValueError("the source is the same as the sink")
    n = len(graph)
    if len(capacity) != n:
        raise ValueError(f"capacity matrix has {len(capacity)} rows for {n} vertices")
    residual = _clone(graph)
    flow = make_adjmat(n, 0, 0)
    initialize_edge_flow(residual, flow)
    while (path := find_shortest_path(residual, source, sink)) is not None:
        amount = min_residual_capacity(capacity, flow, path)
        update_flow(flow, path, amount)
        update_residual_graph(residual, capacity, flow, path)
    return flow