"""In-place perfect in-shuffle: a1..an b1..bn becomes b1 a1 b2 a2 ... bn an."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence


def cycle_leader(data: MutableSequence[int], start: int) -> None:
    """Move along the cycle through 1-based position start, sending i to 2i mod (len+1)."""
    modulus = len(data) + 1
    value = data[start - 1]
    current = start * 2 % modulus
    while True:
        data[current - 1], value = value, data[current - 1]
        if current == start:
            break
        current = current * 2 % modulus


def rotate_right(data: MutableSequence[int], shift: int) -> None:
    """Rotate data right by shift positions in place."""
    if not 0 <= shift <= len(data):
        raise ValueError(f"shift {shift} out of range for length {len(data)}")
    if shift:
        data[:] = list(data[-shift:]) + list(data[:-shift])


def largest_power_of_three(n: int) -> int:
    """Return the largest power of three, at least 3, that is not above n + 1."""
    i = 3
    while i <= n + 1:
        i *= 3
    if i > 3:
        i //= 3
    return i


def _shuffle_block(block: list[int]) -> None:
    """In-shuffle a block whose length is 3**k - 1 by following cycle leaders."""
    if len(block) == 2:
        block[0], block[1] = block[1], block[0]
        return
    leader = 1
    while leader < len(block):
        cycle_leader(block, leader)
        leader *= 3


def in_perfect_shuffle(data: MutableSequence[int]) -> None:
    """In-shuffle data of even length in place."""
    length = len(data)
    if length % 2:
        raise ValueError(f"length must be even: {length}")
    start = 0
    while start < length:
        remaining = length - start
        power = largest_power_of_three(remaining)
        m = (power - 1) // 2
        half = remaining // 2
        segment = list(data[start + m:start + m + half])
        rotate_right(segment, m)
        data[start + m:start + m + half] = segment
        block = list(data[start:start + power - 1])
        _shuffle_block(block)
        data[start:start + power - 1] = block
        start += power - 1


def main(argv: list[str] | None = None) -> int:
    """Shuffle 1..n and print the result; n comes from argv or standard input."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        text = args[0]
    else:
        print("please input the number of data you wanna to test:")
        text = sys.stdin.readline()
    try:
        n = int(text.strip())
    except ValueError:
        print(f"not a number: {text.strip()!r}", file=sys.stderr)
        return 1
    if n % 2:
        print("sorry,the number should be even ")
        return 0
    data = list(range(1, n + 1))
    in_perfect_shuffle(data)
    print("".join(f"{x}   " for x in data))
    return 0