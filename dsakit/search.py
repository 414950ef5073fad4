"""Element access, aggregates and searching over integer sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = [
    "get_at",
    "set_at",
    "max_value",
    "average",
    "linear_search",
    "binary_search",
    "binary_search_recursive",
]


def _check_index(values: Sequence[int], index: int) -> None:
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range for length {len(values)}")


def get_at(values: Sequence[int], index: int) -> int:
    """Return the element at a non-negative, in-range ``index``."""
    _check_index(values, index)
    return values[index]


def set_at(values: MutableSequence[int], index: int, value: int) -> None:
    """Store ``value`` at a non-negative, in-range ``index``."""
    _check_index(values, index)
    values[index] = value


def max_value(values: Sequence[int]) -> int:
    """Return the largest element."""
    if not values:
        raise ValueError("max of an empty sequence")
    return max(values)


def average(values: Sequence[int]) -> float:
    """Return the arithmetic mean."""
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first ``target``, or None."""
    return next((i for i, v in enumerate(values) if v == target), None)


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return None


def binary_search_recursive(
    values: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int | None:
    """Recursively search sorted ``values[start..end]`` (inclusive) for ``target``."""
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    last = len(values) - 1
    end = last if end is None else min(end, last)
    if start > end:
        return None
    mid = (start + end) // 2
    if values[mid] == target:
        return mid
    if values[mid] > target:
        return binary_search_recursive(values, target, start, mid - 1)
    return binary_search_recursive(values, target, mid + 1, end)