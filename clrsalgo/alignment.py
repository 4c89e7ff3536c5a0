"""Similarity of two gene sequences by dynamic programming over a score table."""

from __future__ import annotations

import sys
from collections.abc import Iterator

GAP = "-"

_INDEX = {"A": 0, "C": 1, "G": 2, "T": 3, GAP: 4}

_SCORES = (
    (5, -1, -2, -1, -3),
    (-1, 5, -3, -2, -4),
    (-2, -3, 5, -2, -2),
    (-1, -2, -2, 5, -1),
    (-3, -4, -2, -1, 0),
)


def gene_score(a: str, b: str) -> int:
    """Return the score of aligning symbol a with symbol b ('-' is a gap)."""
    try:
        return _SCORES[_INDEX[a]][_INDEX[b]]
    except KeyError as exc:
        raise ValueError(f"not a gene symbol: {exc.args[0]!r}") from None


def similarity(x: str, y: str) -> int:
    """Return the best alignment score of gene sequences x and y."""
    prev = [0]
    for b in y:
        prev.append(prev[-1] + gene_score(GAP, b))
    for a in x:
        row = [prev[0] + gene_score(a, GAP)]
        for j, b in enumerate(y, start=1):
            row.append(
                max(
                    row[j - 1] + gene_score(GAP, b),
                    prev[j] + gene_score(a, GAP),
                    prev[j - 1] + gene_score(a, b),
                )
            )
        prev = row
    return prev[-1]


def _sequence(tokens: Iterator[str]) -> str:
    try:
        length = int(next(tokens))
        text = next(tokens)
    except StopIteration:
        raise ValueError("input ends in the middle of a case") from None
    if not 0 <= length <= len(text):
        raise ValueError(f"length {length} does not fit sequence {text!r}")
    return text[:length]


def _cases(text: str) -> Iterator[int]:
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
    except StopIteration:
        raise ValueError("missing case count") from None
    for _ in range(count):
        x = _sequence(tokens)
        y = _sequence(tokens)
        yield similarity(x, y)


def main(argv: list[str] | None = None) -> int:
    """Read cases of ``len1 seq1 len2 seq2`` and print each similarity.

    Input comes from the file named by the first argument, or standard input.
    """
    args = sys.argv[1:] if argv is None else argv
    if args:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    try:
        for score in _cases(text):
            print(score)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0