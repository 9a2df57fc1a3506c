from unittest import mock

import pytest

from listkit.core.config import settings
from listkit.functional import search
from listkit.functional.search import (
    all_match,
    any_match,
    filter_list,
    find,
    find_by_hash,
    find_map,
    first,
    index_of,
)


class Tagged:
    """Object whose hash is its tag, so unrelated instances can collide."""

    def __init__(self, tag, name):
        self.tag = tag
        self.name = name

    def __hash__(self):
        return self.tag

    def __eq__(self, other):
        return isinstance(other, Tagged) and self.name == other.name

    def __repr__(self):
        return f"Tagged({self.tag}, {self.name!r})"


def is_even(x):
    return x % 2 == 0


@pytest.fixture
def numbers():
    return [1, 3, 4, 6, 7]


def test_filter_list_is_ordered_subsequence(numbers):
    result = filter_list(numbers, is_even)
    assert result == [4, 6]
    assert all(is_even(x) for x in result)


def test_filter_list_does_not_mutate_input(numbers):
    snapshot = list(numbers)
    filter_list(numbers, is_even)
    assert numbers == snapshot


def test_filter_list_absent_or_empty():
    assert filter_list(None, is_even) == []
    assert filter_list([], is_even) == []


def test_find_returns_first_match(numbers):
    assert find(numbers, is_even) == 4


def test_find_no_match_returns_none(numbers):
    assert find(numbers, lambda x: x > 100) is None
    assert find(None, is_even) is None
    assert find([], is_even) is None


def test_find_short_circuits(numbers):
    predicate = mock.Mock(side_effect=is_even)
    find(numbers, predicate)
    assert predicate.call_count == 3


def test_first_with_predicate_is_find(numbers):
    assert first(numbers, is_even) == find(numbers, is_even)
    assert first(numbers, lambda x: x > 100) is None


def test_first_without_predicate():
    assert first(["a", "b"]) == "a"
    assert first([]) is None
    assert first(None) is None


def test_first_without_predicate_requires_sequence():
    with pytest.raises(TypeError, match="first"):
        first({1, 2})


@pytest.mark.parametrize("empty", [set(), {}, ""])
def test_index_based_lookups_on_empty_non_sequences(empty):
    assert first(empty) is None
    assert index_of(empty, is_even) == -1


def test_find_by_hash_matches_equal_value():
    assert find_by_hash(["x", "y", "z"], "y") == "y"


def test_find_by_hash_absent_or_empty():
    assert find_by_hash(None, "y") is None
    assert find_by_hash([], "y") is None


def test_find_by_hash_no_match():
    assert find_by_hash([1, 2, 3], 42) is None


def test_find_by_hash_returns_colliding_element():
    # Only hashes are compared, so an unequal element with the same hash wins.
    alice = Tagged(7, "alice")
    bob = Tagged(7, "bob")
    assert alice != bob
    assert find_by_hash([alice], bob) is alice


def test_find_by_hash_collision_of_builtin_ints():
    # CPython reserves -1 as an error marker, so hash(-1) == hash(-2)
    assert find_by_hash([-2, 5], -1) == -2


def test_find_by_hash_warns_on_collision():
    alice = Tagged(7, "alice")
    with mock.patch.object(search.logger, "warning") as warning:
        find_by_hash([alice], Tagged(7, "bob"))
    warning.assert_called_once()


def test_find_by_hash_no_warning_for_equal_match():
    with mock.patch.object(search.logger, "warning") as warning:
        find_by_hash(["x"], "x")
    warning.assert_not_called()


def test_find_by_hash_warning_can_be_disabled(monkeypatch):
    monkeypatch.setattr(settings, "WARN_ON_HASH_COLLISION", False)
    with mock.patch.object(search.logger, "warning") as warning:
        result = find_by_hash([Tagged(7, "alice")], Tagged(7, "bob"))
    assert result is not None
    warning.assert_not_called()


def test_find_by_hash_unhashable_probe():
    with pytest.raises(TypeError):
        find_by_hash([1], [1])


def test_find_map_returns_first_non_none_result():
    func = mock.Mock(side_effect=lambda s: None if s == "" else s)
    assert find_map(["", "", "x", "y"], func) == "x"
    # "y" is never evaluated
    assert func.call_count == 3


def test_find_map_keeps_falsy_values():
    assert find_map([None, 0, 1], lambda x: x) == 0


def test_find_map_no_match():
    assert find_map([1, 2], lambda x: None) is None
    assert find_map(None, lambda x: x) is None


def test_index_of(numbers):
    assert index_of(numbers, is_even) == 2
    assert index_of(numbers, lambda x: x > 100) == -1
    assert index_of(None, is_even) == -1
    assert index_of([], is_even) == -1


def test_index_of_requires_sequence():
    with pytest.raises(TypeError, match="index_of"):
        index_of({2, 4}, is_even)


def test_any_match(numbers):
    assert any_match(numbers, is_even) is True
    assert any_match(numbers, lambda x: x > 100) is False


@pytest.mark.parametrize("empty", [None, [], iter([])])
def test_any_match_on_empty_is_false(empty):
    assert any_match(empty, lambda x: True) is False


@pytest.mark.parametrize("empty", [None, [], iter([])])
def test_all_match_on_empty_is_false(empty):
    # Deliberately not vacuous truth
    assert all_match(empty, lambda x: True) is False


def test_all_match(numbers):
    assert all_match([2, 4, 6], is_even) is True
    assert all_match(numbers, is_even) is False


def test_all_match_stops_at_first_failure():
    predicate = mock.Mock(side_effect=is_even)
    all_match([2, 3, 4], predicate)
    assert predicate.call_count == 2


def test_predicate_failure_propagates():
    def broken(x):
        raise RuntimeError("predicate failed")

    for operation in (filter_list, find, any_match, all_match, index_of, find_map):
        with pytest.raises(RuntimeError, match="predicate failed"):
            operation([1, 2], broken)


class ExplodingEquality:
    def __hash__(self):
        return 11

    def __eq__(self, other):
        raise RuntimeError("__eq__ called")


def test_find_by_hash_skips_equality_for_identical_element():
    target = ExplodingEquality()
    assert find_by_hash([target], target) is target


def test_find_by_hash_skips_equality_when_warning_disabled(monkeypatch):
    monkeypatch.setattr(settings, "WARN_ON_HASH_COLLISION", False)
    element = ExplodingEquality()
    assert find_by_hash([element], ExplodingEquality()) is element


def test_find_by_hash_equality_error_propagates_when_warning_enabled(monkeypatch):
    monkeypatch.setattr(settings, "WARN_ON_HASH_COLLISION", True)
    with pytest.raises(RuntimeError, match="__eq__ called"):
        find_by_hash([ExplodingEquality()], ExplodingEquality())
