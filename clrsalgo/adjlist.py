"""Adjacency lists for directed graphs, optionally weighted."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TextIO


class Color(enum.Enum):
    """Search state of a vertex."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


class EdgeType(enum.Enum):
    """Classification of an edge found by depth-first search."""

    TREE = 0
    BACK = 1
    FORWARD = 2
    CROSS = 3


@dataclass
class Edge:
    """An outgoing edge to ``vertex``."""

    vertex: int
    weight: int = 0
    edge_type: EdgeType | None = None


class AdjacencyList:
    """A fixed number of vertices, each with an ordered list of outgoing edges."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"vertex count must not be negative: {size}")
        self._adj: list[list[Edge]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adj)

    def _edges(self, u: int) -> list[Edge]:
        if not 0 <= u < len(self._adj):
            raise IndexError(f"vertex {u} out of range for {len(self._adj)} vertices")
        return self._adj[u]

    def neighbors(self, u: int) -> list[Edge]:
        """Return the edges leaving u, in list order."""
        return list(self._edges(u))

    def insert(self, u: int, v: int) -> None:
        """Add an unweighted edge u -> v right after the head of u's list."""
        edges = self._edges(u)
        edges.insert(1 if edges else 0, Edge(v))

    def insert_weighted(self, u: int, v: int, weight: int) -> None:
        """Add an edge u -> v with the given weight at the head of u's list."""
        self._edges(u).insert(0, Edge(v, weight))

    def has_edge(self, u: int, v: int) -> bool:
        """Tell whether u -> v exists."""
        return any(edge.vertex == v for edge in self._edges(u))

    def add_edge(self, u: int, v: int) -> bool:
        """Add u -> v unless it already exists; return whether it was added."""
        if self.has_edge(u, v):
            return False
        self.insert(u, v)
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove u -> v; return whether it existed."""
        edges = self._edges(u)
        kept = [edge for edge in edges if edge.vertex != v]
        if len(kept) == len(edges):
            return False
        edges[:] = kept
        return True

    def copy(self) -> "AdjacencyList":
        """Return a copy built by head insertion, so each list comes out reversed."""
        graph = AdjacencyList(len(self._adj))
        for u, edges in enumerate(self._adj):
            for edge in edges:
                graph.insert_weighted(u, edge.vertex, edge.weight)
        return graph

    def format(self) -> str:
        """Render the vertex count and every edge with its weight."""
        parts = [f"{len(self._adj)}\n"]
        for u, edges in enumerate(self._adj):
            parts.extend(f"{u} -> {e.vertex}, weight: {e.weight}; " for e in edges)
            parts.append("\n")
        parts.append("\n")
        return "".join(parts)


def _read_records(stream: TextIO, weighted: bool) -> list[tuple[int, list[tuple[int, int]]]]:
    try:
        numbers = [int(token) for token in stream.read().split()]
    except ValueError as exc:
        raise ValueError(f"malformed graph data: {exc}") from None
    tokens = iter(numbers)

    def take() -> int:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("graph data ends in the middle of a record") from None

    records = []
    for vertex in tokens:
        count = take()
        if count < 0:
            raise ValueError(f"negative edge count for vertex {vertex}")
        edges = []
        for _ in range(count):
            v = take()
            edges.append((v, take() if weighted else 0))
        records.append((vertex, edges))
    return records


def _build(stream: TextIO, weighted: bool) -> AdjacencyList:
    records = _read_records(stream, weighted)
    size = len(records)
    graph = AdjacencyList(size)
    for u, edges in records:
        if not 0 <= u < size:
            raise ValueError(f"vertex {u} out of range for {size} vertices")
        for v, weight in edges:
            if not 0 <= v < size:
                raise ValueError(f"edge {u} -> {v} out of range for {size} vertices")
            if weighted:
                graph.insert_weighted(u, v, weight)
            else:
                graph.insert(u, v)
    return graph


def read_adjlist(stream: TextIO) -> AdjacencyList:
    """Read records ``vertex count v1 v2 ...``; one record per vertex."""
    return _build(stream, weighted=False)


def read_weighted_adjlist(stream: TextIO) -> AdjacencyList:
    """Read records ``vertex count v1 w1 v2 w2 ...``; one record per vertex."""
    return _build(stream, weighted=True)