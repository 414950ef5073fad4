# dsakit

A small library of classic array and recursion algorithms in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.array_ops`

In-place operations that keep the length of a list:

- `is_sorted(values)`: whether the values are in non-decreasing order.
- `reverse(values)`: reverses the list in place.
- `left_shift(values, shift_by)` / `right_shift(values, shift_by)`: shift the
  elements, filling the vacated slots with zeros. A shift larger than the list
  leaves it unchanged; a negative shift raises `ValueError`.
- `delete_at(values, index)`: removes the element at `index`, moves the rest
  left and puts a zero in the last slot. An out-of-range index raises
  `IndexError`.

### `dsakit.missing`

- `find_missing(values)`: the single number missing from `1..values[-1]`,
  by the sum formula. An empty sequence raises `ValueError`.
- `find_missing_by_index(values)`: the first number missing from a sorted run
  starting at 1, or `None` if nothing is missing.
- `find_all_missing(values)`: every number missing from a sorted run of
  distinct integers; within each gap the numbers are listed from the highest
  down.
- `sorted_duplicates(values)`: each repeated value of a sorted sequence, once.
- `unsorted_duplicates(values)`: each repeated value, once, in order of first
  occurrence.
- `counted_duplicates(values)`: each value occurring more than once, found by
  counting.

### `dsakit.search`

- `get_at(values, index)` / `set_at(values, index, value)`: read or write an
  element; a negative or out-of-range index raises `IndexError`.
- `max_value(values)`, `average(values)`: raise `ValueError` on an empty
  sequence.
- `linear_search(values, target)`: index of the first match, or `None`.
- `binary_search(values, target)`: index of a match in sorted values, or
  `None`.
- `binary_search_recursive(values, target, start=0, end=None)`: the same,
  recursively, over the inclusive range `start..end` (clamped to the last
  index).

### `dsakit.setops`

Operations on two sequences: `merge`, `union`, `union_sorted`, `intersect`,
`intersect_sorted`, `difference`, `difference_sorted`. Each returns a new list.
The `*_sorted` variants expect both inputs in ascending order and walk them in
a single pass; the others use hashing and accept any order. `merge` expects
sorted input and keeps every element.

### `dsakit.recursion`

- `factorial(n)`, `combinations(n, r)`, `combinations_pascal(n, r)`
- `fibonacci_iterative(n)`, `fibonacci_recursive(n)`,
  `fibonacci_memo(n, memo=None)`. `fibonacci_iterative` returns 0 for any
  `n` below 2.
- `natural_sum(n)` (requires `n >= 1`), `natural_sum_formula(n)`
- `power(base, exponent)`, `fast_power(base, exponent)` (by repeated squaring)
- `taylor_exp_terms(x, n)`, `taylor_exp_incremental(x, n)`,
  `taylor_exp_horner(x, n)`, `taylor_exp_loop(x, n)`: approximations of
  `e**x` from the first `n` terms of its Taylor series
- `tower_of_hanoi(n, source="A", spare="B", target="C")`: the list of
  `(from, to)` moves

Negative counts or exponents, and `r > n` for combinations, raise
`ValueError`.

## Example

```python
from dsakit.search import binary_search
from dsakit.setops import union_sorted
from dsakit.recursion import combinations, tower_of_hanoi

binary_search([2, 3, 4, 5, 10], 10)   # 4
union_sorted([1, 3, 5], [2, 3, 6])    # [1, 2, 3, 5, 6]
combinations(5, 3)                    # 10
tower_of_hanoi(2, "A", "B", "C")      # [("A", "B"), ("A", "C"), ("B", "C")]
```

## What it does not do

dsakit is a library only. It has no command-line program and prints nothing;
call its functions from your own code.