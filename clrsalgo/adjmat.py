"""Adjacency matrices for weighted directed graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .common import INFINITE


@dataclass
class AdjMatrix:
    """A square matrix of edge weights; ``mat[u][v]`` is the weight of u -> v."""

    mat: list[list[int]]

    def __len__(self) -> int:
        return len(self.mat)

    def copy(self) -> "AdjMatrix":
        """Return an independent copy of the matrix."""
        return AdjMatrix([row[:] for row in self.mat])

    def format(self) -> str:
        """Render the matrix with INF for unreachable entries."""
        lines = []
        for row in self.mat:
            cells = "".join("INF " if x == INFINITE else f"{x:<4d}" for x in row)
            lines.append(f"|{cells}|\n")
        return "".join(lines) + "\n"


def make_adjmat(size: int, diagonal: int = 0, off_diagonal: int = INFINITE) -> AdjMatrix:
    """Create a size x size matrix with the given diagonal and off-diagonal values."""
    if size < 0:
        raise ValueError(f"matrix size must not be negative: {size}")
    return AdjMatrix(
        [[diagonal if i == j else off_diagonal for j in range(size)] for i in range(size)]
    )


def read_adjmat(
    stream: TextIO, diagonal: int = 0, off_diagonal: int = INFINITE
) -> AdjMatrix:
    """Read a vertex count followed by ``src dst weight`` triples."""
    try:
        numbers = [int(token) for token in stream.read().split()]
    except ValueError as exc:
        raise ValueError(f"malformed matrix data: {exc}") from None
    if not numbers:
        raise ValueError("missing vertex count")
    size, rest = numbers[0], numbers[1:]
    if len(rest) % 3:
        raise ValueError("edge data must come in src dst weight triples")
    m = make_adjmat(size, diagonal, off_diagonal)
    for src, dst, weight in zip(rest[0::3], rest[1::3], rest[2::3]):
        if not (0 <= src < size and 0 <= dst < size):
            raise ValueError(f"edge {src} -> {dst} out of range for {size} vertices")
        m.mat[src][dst] = weight
    return m