"""0/1 knapsack by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence

EXAMPLE_WEIGHTS = (12, 16, 24, 7, 29, 32, 5, 43, 31, 1)
EXAMPLE_VALUES = (11, 16, 15, 9, 24, 25, 3, 32, 41, 7)
EXAMPLE_CAPACITY = 105


def _check(weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
    if len(weights) != len(values):
        raise ValueError(f"{len(weights)} weights for {len(values)} values")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative: {capacity}")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")


def knapsack_table(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> list[list[int]]:
    """Return T where ``T[i][m]`` is the best value from the first i items within weight m.

    On a tie the item is taken.
    """
    _check(weights, values, capacity)
    table = [[0] * (capacity + 1)]
    for w, v in zip(weights, values):
        prev = table[-1]
        table.append(
            [
                prev[m] if m < w or prev[m] > v + prev[m - w] else v + prev[m - w]
                for m in range(capacity + 1)
            ]
        )
    return table


def select_items(table: list[list[int]], weights: Sequence[int], capacity: int) -> list[int]:
    """Trace the table back and return the chosen item indices in ascending order."""
    if len(table) != len(weights) + 1:
        raise ValueError(f"table has {len(table)} rows for {len(weights)} items")
    chosen = []
    remaining = capacity
    for i in range(len(weights), 0, -1):
        if table[i - 1][remaining] < table[i][remaining]:
            chosen.append(i - 1)
            remaining -= weights[i - 1]
    chosen.reverse()
    return chosen


def knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> tuple[int, list[int]]:
    """Return the best total value and the indices of the items that reach it."""
    table = knapsack_table(weights, values, capacity)
    return table[-1][capacity], select_items(table, weights, capacity)


def main(argv: list[str] | None = None) -> int:
    """Solve the built-in example and print the table, the total and the items."""
    table = knapsack_table(EXAMPLE_WEIGHTS, EXAMPLE_VALUES, EXAMPLE_CAPACITY)
    print("  N----  Y-----  Total value")
    for i, row in enumerate(table):
        for m, value in enumerate(row):
            if value > 0:
                print(f"{i:3d}----{m:3d}-----{value:3d}")
    print(f"the total value of the knapsack is {table[-1][EXAMPLE_CAPACITY]}")
    for index in reversed(select_items(table, EXAMPLE_WEIGHTS, EXAMPLE_CAPACITY)):
        print(index + 1)
    print("end.")
    return 0