"""Merging and set-like operations on integer sequences.

The ``*_sorted`` variants expect both inputs in ascending order and walk
them together. The others use hashing and accept any order.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "merge",
    "union",
    "union_sorted",
    "intersect",
    "intersect_sorted",
    "difference",
    "difference_sorted",
]


def merge(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, keeping every element."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def union(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return ``first`` followed by the elements of ``second`` not found in ``first``."""
    seen = set(first)
    return [*first, *(value for value in second if value not in seen)]


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the sorted union of two sorted sequences, common elements once."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            result.append(a)
            i += 1
        elif b < a:
            result.append(b)
            j += 1
        else:
            result.append(a)
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def intersect(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the elements of ``second`` that also occur in ``first``, in ``second``'s order."""
    present = set(first)
    return [value for value in second if value in present]


def intersect_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the elements common to two sorted sequences, in ascending order."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            result.append(a)
            i += 1
            j += 1
    return result


def difference(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the elements of ``first`` that do not occur in ``second``."""
    excluded = set(second)
    return [value for value in first if value not in excluded]


def difference_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the elements of sorted ``first`` missing from sorted ``second``."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            result.append(a)
            i += 1
        elif b < a:
            j += 1
        else:
            i += 1
            j += 1
    result.extend(first[i:])
    return result