"""In-place operations on fixed-length integer sequences."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import pairwise

__all__ = ["is_sorted", "reverse", "left_shift", "right_shift", "delete_at"]


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def reverse(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place."""
    values[:] = values[::-1]


def _check_shift(shift_by: int) -> None:
    if shift_by < 0:
        raise ValueError(f"shift must not be negative, got {shift_by}")


def left_shift(values: MutableSequence[int], shift_by: int) -> None:
    """Shift ``values`` left in place, filling the vacated tail with zeros.

    A shift larger than the sequence leaves it untouched.
    """
    _check_shift(shift_by)
    if shift_by > len(values):
        return
    values[:] = list(values[shift_by:]) + [0] * shift_by


def right_shift(values: MutableSequence[int], shift_by: int) -> None:
    """Shift ``values`` right in place, filling the vacated head with zeros.

    A shift larger than the sequence leaves it untouched.
    """
    _check_shift(shift_by)
    if shift_by > len(values):
        return
    kept = len(values) - shift_by
    values[:] = [0] * shift_by + list(values[:kept])


def delete_at(values: MutableSequence[int], index: int) -> None:
    """Remove the element at ``index``, keeping the length by appending a zero."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range for length {len(values)}")
    values[:] = list(values[:index]) + list(values[index + 1 :]) + [0]