import io

import pytest

from clrsalgo.activity import (
    Activity,
    activity_solutions,
    compatible_sets,
    dp_activity_selector,
    greedy_activity_select,
    read_activities,
)
from clrsalgo.common import INFINITE

CLRS_DATA = """11
1 4
3 5
0 6
5 7
3 9
5 9
6 10
8 11
8 12
2 14
12 16
"""


@pytest.fixture
def activities():
    return read_activities(io.StringIO(CLRS_DATA))


def test_read_adds_sentinels(activities):
    assert len(activities) == 13
    assert activities[0] == Activity(0, 0, 0)
    assert activities[1] == Activity(1, 1, 4)
    assert activities[-1] == Activity(12, INFINITE, INFINITE)


def test_read_rejects_short_data():
    with pytest.raises(ValueError):
        read_activities(io.StringIO("3\n1 2\n"))


def test_read_rejects_garbage():
    with pytest.raises(ValueError):
        read_activities(io.StringIO("2\n1 x\n3 4\n"))


def test_read_rejects_empty():
    with pytest.raises(ValueError):
        read_activities(io.StringIO(""))


def test_compatible_sets_whole_range(activities):
    s = compatible_sets(activities)
    assert [activities[k].number for k in s[0][12]] == list(range(1, 12))
    assert s[1][4] == []


def test_compatible_sets_members_fit(activities):
    s = compatible_sets(activities)
    for i, row in enumerate(s):
        for j, members in enumerate(row):
            for k in members:
                assert activities[k].start >= activities[i].finish
                assert activities[k].finish <= activities[j].start


def test_dp_selector(activities):
    assert dp_activity_selector(activities) == 4


def test_dp_selector_without_inner_activities():
    acts = read_activities(io.StringIO("0\n"))
    assert dp_activity_selector(acts) == 0


def test_dp_selector_needs_sentinels():
    with pytest.raises(ValueError):
        dp_activity_selector([Activity(0, 0, 0)])


def test_solutions_are_maximal_and_compatible(activities):
    solutions = activity_solutions(activities)
    assert (1, 4, 8, 11) in solutions
    assert (2, 4, 9, 11) in solutions
    by_number = {a.number: a for a in activities}
    for chosen in solutions:
        assert len(chosen) == dp_activity_selector(activities)
        ordered = sorted((by_number[n] for n in chosen), key=lambda a: a.start)
        for a, b in zip(ordered, ordered[1:]):
            assert b.start >= a.finish


def test_greedy_select(activities):
    chosen = greedy_activity_select(activities[:-1])
    assert [a.number for a in chosen] == [1, 4, 8, 11]
    assert len(chosen) == dp_activity_selector(activities)


def test_greedy_select_empty():
    assert greedy_activity_select([]) == []