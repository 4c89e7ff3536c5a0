"""Breadth-first search over adjacency lists and shortest-path reconstruction."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .adjlist import AdjacencyList, Color
from .common import INFINITE, NILVALUE


def bfs(graph: AdjacencyList, source: int) -> tuple[list[int], list[int]]:
    """Search graph from source.

    Return ``(distance, parent)``: the number of edges on a shortest path from
    source to each vertex (INFINITE when unreachable) and each vertex's
    predecessor in the breadth-first tree (NILVALUE for the source and for
    unreachable vertices).
    """
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"vertex {source} out of range for {n} vertices")
    color = [Color.WHITE] * n
    distance = [INFINITE] * n
    parent = [NILVALUE] * n
    color[source] = Color.GRAY
    distance[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for edge in graph.neighbors(u):
            v = edge.vertex
            if color[v] is not Color.WHITE:
                continue
            color[v] = Color.GRAY
            distance[v] = distance[u] + 1
            parent[v] = u
            queue.append(v)
        color[u] = Color.BLACK
    return distance, parent


def calc_path(parent: Sequence[int], start: int, end: int) -> list[int] | None:
    """Return the vertices from start to end along the parent links, or None."""
    path = []
    x = end
    while x != start:
        if parent[x] == NILVALUE:
            return None
        path.append(x)
        x = parent[x]
    path.append(start)
    path.reverse()
    return path


def format_path(parent: Sequence[int], start: int, end: int) -> str:
    """Render the path from start to end, or a message where the chain breaks."""
    trail = []
    x = end
    while x != start:
        if parent[x] == NILVALUE:
            tail = "".join(f"{v} " for v in reversed(trail))
            return f"no path from {start} to {x} exist\n{tail}"
        trail.append(x)
        x = parent[x]
    trail.append(start)
    return "".join(f"{v} " for v in reversed(trail))