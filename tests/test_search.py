import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.search import (
    average,
    binary_search,
    binary_search_recursive,
    get_at,
    linear_search,
    max_value,
    set_at,
)

SAMPLE = [8, 20, 4, 7, 6, 3, 10, 5, 14, 2]
non_empty = st.lists(st.integers(-100, 100), min_size=1, max_size=30)


@given(st.data())
def test_get_at_in_range(data):
    values = data.draw(non_empty)
    index = data.draw(st.integers(0, len(values) - 1))
    assert get_at(values, index) == values[index]


@pytest.mark.parametrize("index", [-1, len(SAMPLE), 100])
def test_get_at_out_of_range(index):
    with pytest.raises(IndexError):
        get_at(SAMPLE, index)


def test_set_then_get_round_trip():
    work = list(SAMPLE)
    set_at(work, 5, 19)
    assert get_at(work, 5) == 19
    assert work[:5] == SAMPLE[:5]
    assert work[6:] == SAMPLE[6:]


@pytest.mark.parametrize("index", [-1, len(SAMPLE)])
def test_set_at_out_of_range(index):
    work = list(SAMPLE)
    with pytest.raises(IndexError):
        set_at(work, index, 1)
    assert work == SAMPLE


@given(non_empty)
def test_max_value_bounds(values):
    result = max_value(values)
    assert result in values
    assert all(result >= v for v in values)


def test_max_value_empty_raises():
    with pytest.raises(ValueError):
        max_value([])


def test_average_example():
    assert average([2, 4]) == 3.0


@given(non_empty)
def test_average_between_extremes(values):
    assert min(values) <= average(values) <= max(values)


def test_average_empty_raises():
    with pytest.raises(ValueError):
        average([])


def test_linear_search_example():
    assert linear_search(SAMPLE, 7) == 3
    assert linear_search(SAMPLE, 21) is None


@given(st.lists(st.integers(-10, 10), max_size=30), st.integers(-10, 10))
def test_linear_search_first_occurrence(values, target):
    index = linear_search(values, target)
    if target in values:
        assert values[index] == target
        assert target not in values[:index]
    else:
        assert index is None


@given(st.sets(st.integers(-100, 100), min_size=1, max_size=40))
def test_binary_search_finds_every_element(numbers):
    values = sorted(numbers)
    for value in values:
        assert binary_search(values, value) == values.index(value)
        assert binary_search_recursive(values, value) == values.index(value)


@given(st.sets(st.integers(-100, 100), max_size=40), st.integers(-200, 200))
def test_binary_search_absent(numbers, target):
    values = sorted(numbers - {target})
    assert binary_search(values, target) is None
    assert binary_search_recursive(values, target) is None


def test_binary_search_beyond_max():
    values = sorted(SAMPLE)
    assert binary_search(values, max(values) + 1) is None
    assert binary_search_recursive(values, max(values) + 1, 0, len(values)) is None


def test_binary_search_recursive_with_explicit_bounds():
    values = sorted(SAMPLE)
    assert binary_search_recursive(values, 5, 0, len(values)) == values.index(5)
    assert binary_search_recursive(values, 9, 0, len(values)) is None


def test_binary_search_recursive_negative_start():
    with pytest.raises(ValueError):
        binary_search_recursive(sorted(SAMPLE), 5, -1, 3)