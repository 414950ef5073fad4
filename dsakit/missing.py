"""Finding missing and duplicated numbers in integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

__all__ = [
    "find_missing",
    "find_missing_by_index",
    "find_all_missing",
    "sorted_duplicates",
    "unsorted_duplicates",
    "counted_duplicates",
]


def _require_items(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def find_missing(values: Sequence[int]) -> int:
    """Return the single number missing from ``1..values[-1]`` using the sum formula."""
    _require_items(values)
    last = values[-1]
    return last * (last + 1) // 2 - sum(values)


def find_missing_by_index(values: Sequence[int]) -> int | None:
    """Return the first missing number of a sorted run starting at 1, or None."""
    for index, value in enumerate(values):
        if value - index > 1:
            return value - 1
    return None


def find_all_missing(values: Sequence[int]) -> list[int]:
    """Return every number missing from a sorted run of distinct integers.

    Within each gap the numbers are listed from the highest down.
    """
    _require_items(values)
    gap = values[0]
    missing: list[int] = []
    for index, value in enumerate(values[1:], start=1):
        offset = value - index
        if offset > gap:
            missing.extend(value - step - 1 for step in range(offset - gap))
            gap = offset
    return missing


def sorted_duplicates(values: Sequence[int]) -> list[int]:
    """Return each repeated value of a sorted sequence once, in order."""
    result: list[int] = []
    for previous, current in zip(values, values[1:]):
        if previous == current and (not result or result[-1] != current):
            result.append(current)
    return result


def unsorted_duplicates(values: Sequence[int]) -> list[int]:
    """Return each repeated value once, ordered by first occurrence, by pairwise scanning."""
    result: list[int] = []
    claimed: set[int] = set()
    for position, value in enumerate(values):
        if value in claimed:
            continue
        if value in values[position + 1 :]:
            result.append(value)
            claimed.add(value)
    return result


def counted_duplicates(values: Sequence[int]) -> list[int]:
    """Return each value occurring more than once, found by counting."""
    return [value for value, count in Counter(values).items() if count > 1]