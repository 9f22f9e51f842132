"""Tests for index_nth."""

from __future__ import annotations

import pytest

from errchain.text import NOT_FOUND, TOO_FEW, index_nth

SAMPLE = "testing \nString \nabc testing, abc\n again"


def _reference(s: str, sep: str, n: int) -> int:
    """Left-to-right non-overlapping scan used as an oracle."""
    offsets, start = [], 0
    while (idx := s.find(sep, start)) != -1:
        offsets.append(idx)
        start = idx + len(sep)
    if not offsets:
        return NOT_FOUND
    return offsets[n - 1] if n <= len(offsets) else TOO_FEW


@pytest.mark.parametrize(
    ("s", "sep", "n", "expected"),
    [
        (SAMPLE, "\n", 0, NOT_FOUND),
        (SAMPLE, "\n", 1, 8),
        (SAMPLE, "\n", 2, 16),
        (SAMPLE, "\n", 3, 33),
        (SAMPLE, "\n", 4, TOO_FEW),
        (SAMPLE, "\t", 1, NOT_FOUND),
        ("", "", 1, NOT_FOUND),
        ("", "\n", 1, NOT_FOUND),
    ],
)
def test_index_nth_examples(s: str, sep: str, n: int, expected: int) -> None:
    assert index_nth(s, sep, n) == expected


@pytest.mark.parametrize("n", [0, -1, -100])
def test_non_positive_n_is_not_found(n: int) -> None:
    assert index_nth(SAMPLE, "\n", n) == NOT_FOUND


def test_empty_separator_is_not_found() -> None:
    assert index_nth(SAMPLE, "", 1) == NOT_FOUND


def test_zero_occurrences_is_not_found_for_any_n() -> None:
    """Nothing found at all never reports TOO_FEW."""
    for n in (1, 2, 5):
        assert index_nth("abc", "x", n) == NOT_FOUND


def test_too_few_once_something_matched() -> None:
    assert index_nth("a,b", ",", 2) == TOO_FEW
    assert index_nth("a,b,c", ",", 7) == TOO_FEW


def test_multichar_separator_is_non_overlapping() -> None:
    assert index_nth("aaaa", "aa", 1) == 0
    assert index_nth("aaaa", "aa", 2) == 2
    assert index_nth("aaaa", "aa", 3) == TOO_FEW


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("s", [SAMPLE, "x--y--z", "--", "no separators", "a--b----c"])
def test_matches_reference_scan(s: str, n: int) -> None:
    sep = "\n" if s == SAMPLE else "--"
    assert index_nth(s, sep, n) == _reference(s, sep, n)
