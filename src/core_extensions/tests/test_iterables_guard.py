"""
Tests for iterable predicates, chunking and the argument guards.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from core_extensions.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
)
from core_extensions.guard import (
    maximum,
    minimum,
    not_null,
    not_null_or_empty,
    within_range,
)
from core_extensions.iterables import (
    chunk,
    is_empty,
    is_not_empty,
    is_not_null_or_empty,
    is_null_or_empty,
    peek,
)


@pytest.mark.parametrize(
    "make_collection, expected",
    [
        (lambda: [], True),
        (lambda: [0], False),
        (lambda: "", True),
        (lambda: (x for x in []), True),
        (lambda: (x for x in [None]), False),
        (lambda: np.array([]), True),
        (lambda: np.zeros((2, 0)), True),
        (lambda: np.array([0]), False),
        (lambda: pd.DataFrame(), True),
        (lambda: pd.DataFrame({"a": [1]}), False),
        (lambda: pd.Series([], dtype=float), True),
    ],
)
def test_is_empty_on_various_sources(make_collection, expected: bool) -> None:
    """Each predicate gets a fresh source since generators are one-shot."""

    assert is_empty(make_collection()) is expected
    assert is_not_empty(make_collection()) is not expected


def test_is_empty_rejects_none() -> None:
    with pytest.raises(ArgumentNullError) as excinfo:
        is_empty(None)
    assert excinfo.value.param_name == "collection"


def test_null_or_empty_predicates() -> None:
    assert is_null_or_empty(None)
    assert is_null_or_empty(set())
    assert not is_null_or_empty({1})
    assert is_not_null_or_empty({"k": "v"})
    assert not is_not_null_or_empty(None)


def test_is_empty_takes_a_single_step() -> None:
    """Only the first element of a one-shot iterator is consumed."""

    source = iter([1, 2, 3])

    assert is_empty(source) is False
    assert list(source) == [2, 3]


def test_peek_keeps_the_first_element() -> None:
    empty, iterator = peek(x for x in [1, 2, 3])
    assert empty is False
    assert list(iterator) == [1, 2, 3]

    empty, iterator = peek(iter(()))
    assert empty is True
    assert list(iterator) == []


def test_chunk_partitions_in_order() -> None:
    """All chunks but the last are full and their concatenation is the input."""

    data = list(range(10))

    chunks = list(chunk(data, 3))

    assert chunks == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
    assert [item for block in chunks for item in block] == data
    assert list(chunk(range(4), 2)) == [[0, 1], [2, 3]]
    assert list(chunk([], 5)) == []


def test_chunk_is_lazy() -> None:
    """Chunks are produced on demand from unbounded sources."""

    def naturals():
        value = 0
        while True:
            yield value
            value += 1

    blocks = chunk(naturals(), 4)
    assert next(blocks) == [0, 1, 2, 3]
    assert next(blocks) == [4, 5, 6, 7]


def test_chunk_validates_eagerly() -> None:
    with pytest.raises(ArgumentNullError):
        chunk(None, 2)
    with pytest.raises(ArgumentOutOfRangeError) as excinfo:
        chunk([1, 2], 0)
    assert excinfo.value.param_name == "size"


def test_not_null_returns_value() -> None:
    assert not_null(0, "value") == 0
    with pytest.raises(ArgumentNullError, match="custom"):
        not_null(None, "value", "custom message")
    with pytest.raises(ArgumentNullError, match="The value cannot be None"):
        not_null(None, "value", "   ")


def test_minimum_and_maximum() -> None:
    assert minimum(3, 1, "count") == 3
    assert maximum(3, 5, "count") == 3
    with pytest.raises(ArgumentOutOfRangeError, match="cannot be less than 1"):
        minimum(0, 1, "count")
    with pytest.raises(ArgumentOutOfRangeError, match="cannot exceed 5"):
        maximum(6, 5, "count")


def test_within_range() -> None:
    assert within_range(5, 1, 10, "value") == 5
    with pytest.raises(ArgumentOutOfRangeError) as excinfo:
        within_range(11, 1, 10, "value")
    assert excinfo.value.param_name == "value"
    with pytest.raises(ArgumentError) as excinfo:
        within_range(5, 10, 1, "value")
    assert excinfo.value.param_name == "min_value"


def test_not_null_or_empty() -> None:
    assert not_null_or_empty("abc", "name") == "abc"
    assert not_null_or_empty([1], "items") == [1]
    with pytest.raises(ArgumentNullError):
        not_null_or_empty(None, "name")
    with pytest.raises(ArgumentError, match="cannot be empty"):
        not_null_or_empty("", "name")
    with pytest.raises(ArgumentError):
        not_null_or_empty([], "items")


def test_argument_errors_are_value_errors() -> None:
    """The error hierarchy stays compatible with built-in exception handling."""

    assert issubclass(ArgumentError, ValueError)
    assert issubclass(ArgumentNullError, TypeError)
    assert issubclass(ArgumentOutOfRangeError, ArgumentError)
