"""Text search helpers used to trim captured stack text."""

from __future__ import annotations

NOT_FOUND = -1
TOO_FEW = -2


def index_nth(s: str, sep: str, n: int) -> int:
    """Offset of the nth (1-based) non-overlapping occurrence of sep in s.

    Returns NOT_FOUND when nothing matches (or inputs are empty / n <= 0) and
    TOO_FEW when at least one, but fewer than n, occurrences exist.
    """
    if n <= 0 or not s or not sep:
        return NOT_FOUND
    found, start, idx = 0, 0, NOT_FOUND
    while found < n:
        if (idx := s.find(sep, start)) == -1:
            return TOO_FEW if found else NOT_FOUND
        found += 1
        start = idx + len(sep)
    return idx
