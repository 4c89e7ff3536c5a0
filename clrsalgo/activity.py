"""Activity selection: a dynamic-programming solution and the greedy one."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TextIO

from .common import INFINITE


@dataclass(frozen=True)
class Activity:
    """An activity numbered ``number`` that occupies [start, finish)."""

    number: int
    start: int
    finish: int


def read_activities(stream: TextIO) -> list[Activity]:
    """Read a count followed by ``start finish`` pairs.

    The result is framed by two sentinels: activity 0, which finishes at 0,
    and activity count + 1, which starts and finishes at INFINITE.
    """
    try:
        numbers = [int(token) for token in stream.read().split()]
    except ValueError as exc:
        raise ValueError(f"malformed activity data: {exc}") from None
    if not numbers:
        raise ValueError("missing activity count")
    count, rest = numbers[0], numbers[1:]
    if count < 0:
        raise ValueError(f"activity count must not be negative: {count}")
    if len(rest) < 2 * count:
        raise ValueError("activity data ends before all activities are read")
    pairs = zip(rest[0:2 * count:2], rest[1:2 * count:2])
    activities = [Activity(0, 0, 0)]
    activities.extend(Activity(i, st, ft) for i, (st, ft) in enumerate(pairs, start=1))
    activities.append(Activity(count + 1, INFINITE, INFINITE))
    return activities


def compatible_sets(activities: list[Activity]) -> list[list[list[int]]]:
    """Return S where ``S[i][j]`` lists the positions k of the inner activities
    that start after activity i finishes and finish before activity j starts."""
    inner = range(1, len(activities) - 1)
    return [
        [
            [
                k
                for k in inner
                if activities[k].start >= a_i.finish and activities[k].finish <= a_j.start
            ]
            for a_j in activities
        ]
        for a_i in activities
    ]


def _solve(activities: list[Activity]) -> tuple[list[list[list[int]]], list[list[int]]]:
    if len(activities) < 2:
        raise ValueError("the activities must include both sentinels")
    s = compatible_sets(activities)
    cnt = len(activities)
    c = [[0] * cnt for _ in range(cnt)]
    for j in range(cnt):
        for i in range(j - 1, -1, -1):
            c[i][j] = max((c[i][k] + c[k][j] + 1 for k in s[i][j]), default=0)
    return s, c


def dp_activity_selector(activities: list[Activity]) -> int:
    """Return the size of a largest set of mutually compatible inner activities."""
    _, c = _solve(activities)
    return c[0][-1]


def activity_solutions(activities: list[Activity]) -> list[tuple[int, ...]]:
    """Return every largest compatible set, as sorted tuples of activity numbers."""
    s, c = _solve(activities)

    @lru_cache(maxsize=None)
    def sets(i: int, j: int) -> frozenset[frozenset[int]]:
        found: set[frozenset[int]] = set()
        for k in s[i][j]:
            if c[i][j] == c[i][k] + c[k][j] + 1:
                for left in sets(i, k):
                    for right in sets(k, j):
                        found.add(left | right | {k})
        return frozenset(found) or frozenset({frozenset()})

    return sorted(
        tuple(sorted(activities[k].number for k in chosen))
        for chosen in sets(0, len(activities) - 1)
    )


def greedy_activity_select(activities: list[Activity]) -> list[Activity]:
    """Pick activities greedily, assuming they are sorted by finish time.

    The first activity is taken as already chosen and is not reported; every
    later one that starts after the last chosen finishes is selected.
    """
    if not activities:
        return []
    chosen = []
    last = activities[0]
    for activity in activities[1:]:
        if activity.start > last.finish:
            chosen.append(activity)
            last = activity
    return chosen