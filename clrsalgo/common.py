"""Shared constants, saturating arithmetic and a small prepend-only list."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

NILVALUE = -1
"""Marker for "no vertex" in parent arrays."""

INFINITE = 2**31 - 1
"""Distance that stands for "unreachable"; arithmetic on it saturates."""

NINFINITE = -(2**31)
"""The smallest key, used when a node must become the minimum."""


def inf_add(a: int, b: int) -> int:
    """Add two distances, returning INFINITE if either one is INFINITE."""
    if a == INFINITE or b == INFINITE:
        return INFINITE
    return a + b


def inf_sub(a: int, b: int) -> int:
    """Subtract two distances, returning INFINITE if either one is INFINITE."""
    if a == INFINITE or b == INFINITE:
        return INFINITE
    return a - b


def format_array(values: Iterable[int], name: str = "array") -> str:
    """Render values as ``name[i] = value`` lines."""
    return "".join(f"{name}[{i}] = {value}\n" for i, value in enumerate(values))


class PrependList:
    """A singly linked list in which every insertion goes to the front."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._items: deque[int] = deque()
        for value in values or ():
            self.insert(value)

    def insert(self, value: int) -> None:
        """Put value at the head of the list."""
        self._items.appendleft(value)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def format(self) -> str:
        """Return the values from head to tail, separated by spaces."""
        return " ".join(str(value) for value in self._items)