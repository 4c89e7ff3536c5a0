"""All-pairs shortest paths on adjacency matrices."""

from __future__ import annotations

from .adjmat import AdjMatrix
from .common import INFINITE, inf_add


def extend_shortest_paths(l: AdjMatrix, w: AdjMatrix) -> AdjMatrix:
    """Extend the paths in l by one edge of w (min-plus matrix product)."""
    n = len(l)
    return AdjMatrix(
        [
            [
                min(
                    (inf_add(l.mat[i][k], w.mat[k][j]) for k in range(n)),
                    default=INFINITE,
                )
                for j in range(n)
            ]
            for i in range(n)
        ]
    )


def slow_all_pairs_shortest_paths(w: AdjMatrix) -> AdjMatrix:
    """Compute shortest path weights by n-2 successive extensions."""
    l = w.copy()
    for _ in range(1, len(w) - 1):
        l = extend_shortest_paths(l, w)
    return l


def faster_all_pairs_shortest_paths(w: AdjMatrix) -> AdjMatrix:
    """Compute shortest path weights by repeated squaring."""
    l = w.copy()
    i = 1
    while i < len(w) - 1:
        l = extend_shortest_paths(l, l)
        i *= 2
    return l


def floyd_warshall(w: AdjMatrix) -> AdjMatrix:
    """Compute shortest path weights with the Floyd-Warshall algorithm."""
    d = w.copy()
    n = len(w)
    for k in range(n):
        d = AdjMatrix(
            [
                [min(d.mat[i][j], inf_add(d.mat[i][k], d.mat[k][j])) for j in range(n)]
                for i in range(n)
            ]
        )
    return d