"""Paging and conditional filtering over pandas objects and sequences.

The helpers keep the shape of their input where they can:

* pandas ``DataFrame`` and ``Series`` stay pandas objects;
* numpy arrays, pandas ``Index`` objects and sequences (lists, tuples,
  ranges, strings) are sliced;
* any other iterable is consumed lazily and an iterator is returned.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence, Sized
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Tuple, TypeVar

import numpy as np
import pandas as pd

from core_extensions.errors import ArgumentOutOfRangeError
from core_extensions.guard import minimum, not_null

T = TypeVar("T")

_PANDAS_TYPES = (pd.DataFrame, pd.Series)
_SLICEABLE_TYPES = (np.ndarray, pd.Index, Sequence)


def page(source: Any, page_number: int, page_size: int) -> Any:
    """Return page ``page_number`` (one-based) of ``source``.

    Parameters
    ----------
    source:
        DataFrame, Series, sequence or iterable to page.
    page_number:
        One-based page index; page 1 is the first page.
    page_size:
        Maximum number of items per page.

    Returns
    -------
    Any
        The items ``[(page_number - 1) * page_size, page_number * page_size)``
        in the same container kind as ``source`` (an iterator for plain
        iterables). Pages past the end are empty.

    Raises
    ------
    ArgumentNullError
        If ``source`` is ``None``.
    ArgumentOutOfRangeError
        If ``page_number`` or ``page_size`` is not positive.

    Examples
    --------
    >>> page(list(range(25)), 2, 10)
    [10, 11, 12, 13, 14, 15, 16, 17, 18, 19]
    """

    not_null(source, "source", "The source to be paged cannot be None.")
    if page_number <= 0:
        raise ArgumentOutOfRangeError(
            "page_number", "The page_number cannot be less than or equal to 0."
        )
    if page_size <= 0:
        raise ArgumentOutOfRangeError(
            "page_size", "The page_size cannot be less than or equal to 0."
        )

    start = (page_number - 1) * page_size
    stop = start + page_size
    if isinstance(source, _PANDAS_TYPES):
        return source.iloc[start:stop]
    if isinstance(source, _SLICEABLE_TYPES):
        return source[start:stop]
    return itertools.islice(source, start, stop)


def page_count(total: int, page_size: int) -> int:
    """Return how many pages of ``page_size`` are needed for ``total`` items."""

    if total < 0:
        raise ArgumentOutOfRangeError("total", "The total cannot be negative.")
    if page_size <= 0:
        raise ArgumentOutOfRangeError(
            "page_size", "The page_size cannot be less than or equal to 0."
        )
    return -(-total // page_size)


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """One page of items together with the paging metadata.

    Parameters
    ----------
    items:
        Items on this page; stored as a tuple.
    total_count:
        Number of items across all pages. Must not be negative.
    page_number:
        One-based index of this page.
    page_size:
        Maximum number of items per page. Must be positive.
    """

    items: Tuple[T, ...]
    total_count: int
    page_number: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        not_null(self.items, "items")
        minimum(self.total_count, 0, "total_count")
        minimum(self.page_number, 1, "page_number")
        minimum(self.page_size, 1, "page_size")
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def empty(cls, page_size: int = 10) -> "PagedList[T]":
        """Return a first page with no items and no total."""

        return cls((), 0, 1, page_size)

    @classmethod
    def from_source(
        cls, source: Iterable[T], page_number: int = 1, page_size: int = 10
    ) -> "PagedList[T]":
        """Page ``source`` and record how many items it holds in total.

        DataFrame rows become ``dict`` records and Series become their
        values. Iterables without a length are read completely to count them.

        Raises
        ------
        ArgumentNullError
            If ``source`` is ``None``.
        ArgumentOutOfRangeError
            If ``page_number`` or ``page_size`` is not positive.
        """

        not_null(source, "source", "The source to be paged cannot be None.")
        if isinstance(source, pd.DataFrame):
            items = page(source, page_number, page_size).to_dict("records")
        elif isinstance(source, (pd.Series, pd.Index, np.ndarray)):
            items = page(source, page_number, page_size).tolist()
        else:
            if not isinstance(source, Sized):
                source = list(source)
            items = page(source, page_number, page_size)
        return cls(tuple(items), len(source), page_number, page_size)

    @property
    def total_pages(self) -> int:
        return page_count(self.total_count, self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)


def where_if(
    source: Any,
    condition: bool,
    predicate: Callable[..., Any],
    *,
    with_index: bool = False,
) -> Any:
    """Filter ``source`` with ``predicate`` only when ``condition`` holds.

    Parameters
    ----------
    source:
        DataFrame, Series or iterable to filter.
    condition:
        When false, ``source`` is returned unchanged.
    predicate:
        For pandas objects, a callable mapping the object to a boolean mask,
        as accepted by ``.loc``. For iterables, a callable receiving each item
        (and its zero-based position when ``with_index`` is set).
    with_index:
        Pass the item position as a second argument to ``predicate``.

    Returns
    -------
    Any
        ``source`` itself, a filtered pandas object, or a lazy iterator.
    """

    not_null(source, "source")
    if not condition:
        return source
    not_null(predicate, "predicate")

    if isinstance(source, _PANDAS_TYPES):
        return source.loc[predicate]
    if with_index:
        return (item for index, item in enumerate(source) if predicate(item, index))
    return (item for item in source if predicate(item))


__all__ = [
    "page",
    "page_count",
    "where_if",
    "PagedList",
]
