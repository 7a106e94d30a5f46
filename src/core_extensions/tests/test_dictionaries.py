"""
Tests for dictionary helpers.
"""

from __future__ import annotations

from collections import OrderedDict

import pytest

from core_extensions.dictionaries import (
    get_or_default,
    merge,
    remove_if_contains_key,
    remove_where,
    to_sorted_dict,
)
from core_extensions.errors import ArgumentNullError


def test_remove_if_contains_key_removes_present_key() -> None:
    data = {"a": 1, "b": 2}

    assert remove_if_contains_key(data, "a") is True
    assert data == {"b": 2}


def test_remove_if_contains_key_ignores_missing_key() -> None:
    data = {"a": 1}

    assert remove_if_contains_key(data, "z") is False
    assert data == {"a": 1}


@pytest.mark.parametrize(
    "mapping, key, param_name",
    [(None, "a", "mapping"), ({"a": 1}, None, "key")],
)
def test_remove_if_contains_key_rejects_none(mapping, key, param_name: str) -> None:
    with pytest.raises(ArgumentNullError) as excinfo:
        remove_if_contains_key(mapping, key)
    assert excinfo.value.param_name == param_name


def test_remove_where_removes_matching_entries() -> None:
    """remove_where mutates in place and reports how many entries went away."""

    data = {"a": 1, "b": 2, "c": 3, "d": 4}

    removed = remove_where(data, lambda key, value: value % 2 == 0)

    assert removed == 2
    assert data == {"a": 1, "c": 3}
    assert remove_where(data, lambda key, value: False) == 0


def test_merge_overwrites_by_default() -> None:
    target = {"a": 1, "b": 2}

    result = merge(target, {"b": 20, "c": 30}, {"c": 300})

    assert result is target
    assert target == {"a": 1, "b": 20, "c": 300}


def test_merge_can_keep_existing_values() -> None:
    target = {"a": 1}

    merge(target, {"a": 10, "b": 2}, overwrite=False)

    assert target == {"a": 1, "b": 2}


def test_merge_rejects_none_mappings() -> None:
    with pytest.raises(ArgumentNullError):
        merge(None, {"a": 1})
    with pytest.raises(ArgumentNullError) as excinfo:
        merge({}, {"a": 1}, None)
    assert excinfo.value.param_name == "others"


def test_to_sorted_dict_returns_new_sorted_copy() -> None:
    """The projection is sorted by key and leaves the input untouched."""

    source = OrderedDict([("Two", 2), ("one", 1), ("Three", 3)])

    result = to_sorted_dict(source)

    assert list(result) == ["Three", "Two", "one"]
    assert list(source) == ["Two", "one", "Three"]
    assert list(to_sorted_dict(source, key=str.casefold)) == ["one", "Three", "Two"]
    assert list(to_sorted_dict(source, reverse=True)) == ["one", "Two", "Three"]
    assert to_sorted_dict({}) == {}


def test_to_sorted_dict_rejects_none() -> None:
    with pytest.raises(ArgumentNullError):
        to_sorted_dict(None)


def test_get_or_default() -> None:
    data = {"a": 1, "n": None}

    assert get_or_default(data, "a") == 1
    assert get_or_default(data, "z") is None
    assert get_or_default(data, "z", 5) == 5
    assert get_or_default(data, "n", 5) is None
    with pytest.raises(ArgumentNullError):
        get_or_default(None, "a")
