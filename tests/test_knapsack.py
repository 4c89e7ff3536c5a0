import pytest

from clrsalgo.knapsack import (
    EXAMPLE_CAPACITY,
    EXAMPLE_VALUES,
    EXAMPLE_WEIGHTS,
    knapsack,
    knapsack_table,
    main,
    select_items,
)


def test_worked_example():
    best, chosen = knapsack([10, 20, 30], [60, 100, 120], 50)
    assert best == 220
    assert chosen == [1, 2]


def test_selection_matches_value_and_fits():
    best, chosen = knapsack(EXAMPLE_WEIGHTS, EXAMPLE_VALUES, EXAMPLE_CAPACITY)
    assert sum(EXAMPLE_VALUES[i] for i in chosen) == best
    assert sum(EXAMPLE_WEIGHTS[i] for i in chosen) <= EXAMPLE_CAPACITY
    assert chosen == sorted(set(chosen))


def test_zero_capacity():
    assert knapsack([1, 2], [3, 4], 0) == (0, [])


def test_items_too_heavy():
    assert knapsack([7, 9], [5, 8], 6) == (0, [])


def test_single_item_fits():
    assert knapsack([4], [9], 4) == (9, [0])


def test_tie_reaches_value():
    best, chosen = knapsack([2, 2], [5, 5], 2)
    assert best == 5
    assert len(chosen) == 1


def test_table_shape_and_monotone():
    table = knapsack_table(EXAMPLE_WEIGHTS, EXAMPLE_VALUES, EXAMPLE_CAPACITY)
    assert len(table) == len(EXAMPLE_WEIGHTS) + 1
    assert all(len(row) == EXAMPLE_CAPACITY + 1 for row in table)
    for row in table:
        assert all(a <= b for a, b in zip(row, row[1:]))
    for above, below in zip(table, table[1:]):
        assert all(a <= b for a, b in zip(above, below))
    assert table[0] == [0] * (EXAMPLE_CAPACITY + 1)


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack([1, 2], [3], 5)


def test_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_table([1], [1], -1)


def test_select_items_rejects_wrong_table():
    with pytest.raises(ValueError):
        select_items([[0, 0]], [1, 2], 1)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    best, chosen = knapsack(EXAMPLE_WEIGHTS, EXAMPLE_VALUES, EXAMPLE_CAPACITY)
    assert out[0] == "  N----  Y-----  Total value"
    assert f"the total value of the knapsack is {best}" in out
    assert out[-1] == "end."
    start = out.index(f"the total value of the knapsack is {best}") + 1
    assert [int(x) for x in out[start:-1]] == [i + 1 for i in reversed(chosen)]