import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import ElementNotFoundError, binary_search, linear_search


def test_binary_search_finds_every_element():
    items = [1, 4, 9, 16, 25, 36, 49]
    for index, value in enumerate(items):
        assert binary_search(items, value) == index


def test_binary_search_finds_last_element():
    items = [2, 5, 8]
    assert binary_search(items, 8) == 2


def test_binary_search_single_element():
    assert binary_search([7], 7) == 0


def test_binary_search_missing_raises():
    with pytest.raises(ElementNotFoundError) as info:
        binary_search([1, 3, 5, 7], 4)
    assert info.value.key == 4


def test_binary_search_empty_raises():
    with pytest.raises(ElementNotFoundError):
        binary_search([], 1)


@given(st.sets(st.integers(-1000, 1000), min_size=1), st.data())
def test_binary_search_returns_matching_index(values, data):
    items = sorted(values)
    key = data.draw(st.sampled_from(items))
    assert items[binary_search(items, key)] == key


@given(st.sets(st.integers(-100, 100)), st.integers(101, 200))
def test_binary_search_absent_key_raises(values, key):
    with pytest.raises(ElementNotFoundError):
        binary_search(sorted(values), key)


def test_linear_search_returns_all_positions():
    items = [5, 1, 5, 2, 5]
    assert linear_search(items, 5) == [0, 2, 4]


def test_linear_search_missing_raises():
    with pytest.raises(ElementNotFoundError):
        linear_search([1, 2, 3], 9)


def test_linear_search_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        linear_search([], 0)


@given(st.lists(st.integers(0, 5), min_size=1), st.integers(0, 5))
def test_linear_search_matches_count(items, key):
    if key in items:
        result = linear_search(items, key)
        assert len(result) == items.count(key)
        assert all(items[index] == key for index in result)
        assert result == sorted(result)
    else:
        with pytest.raises(ElementNotFoundError):
            linear_search(items, key)