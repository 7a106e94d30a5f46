"""Emptiness predicates and chunking for arbitrary iterables.

Emptiness is decided without computing a full length whenever the input can
only be walked once:

* numpy arrays report ``size`` and pandas objects report ``empty``;
* other sized containers use ``len``;
* everything else is checked by taking a single step of ``iter()``.

The last case consumes the first element of a one-shot iterator (a generator,
a file object, ...). Use :func:`peek` when the element must be kept.
"""

from __future__ import annotations

import itertools
from collections.abc import Sized
from typing import Any, Iterable, Iterator, List, Optional, Tuple, TypeVar

import numpy as np
import pandas as pd

from core_extensions.errors import ArgumentNullError, ArgumentOutOfRangeError

T = TypeVar("T")

_MISSING = object()


def is_empty(collection: Iterable[Any]) -> bool:
    """Return ``True`` when ``collection`` yields no items.

    Parameters
    ----------
    collection:
        Any iterable, including numpy arrays and pandas objects.

    Returns
    -------
    bool
        Whether the collection has no items.

    Raises
    ------
    ArgumentNullError
        If ``collection`` is ``None``.
    """

    if collection is None:
        raise ArgumentNullError("collection")
    if isinstance(collection, np.ndarray):
        return collection.size == 0
    if isinstance(collection, (pd.DataFrame, pd.Series, pd.Index)):
        return bool(collection.empty)
    if isinstance(collection, Sized):
        return len(collection) == 0
    return next(iter(collection), _MISSING) is _MISSING


def is_not_empty(collection: Iterable[Any]) -> bool:
    """Return ``True`` when ``collection`` yields at least one item."""

    return not is_empty(collection)


def is_null_or_empty(collection: Optional[Iterable[Any]]) -> bool:
    """Return ``True`` when ``collection`` is ``None`` or has no items."""

    return collection is None or is_empty(collection)


def is_not_null_or_empty(collection: Optional[Iterable[Any]]) -> bool:
    return not is_null_or_empty(collection)


def peek(iterable: Iterable[T]) -> Tuple[bool, Iterator[T]]:
    """Check emptiness without losing the first item of a one-shot iterable.

    Parameters
    ----------
    iterable:
        Iterable to inspect.

    Returns
    -------
    Tuple[bool, Iterator[T]]
        ``(is_empty, iterator)`` where ``iterator`` still yields every item of
        ``iterable``, including the one taken for the check.
    """

    if iterable is None:
        raise ArgumentNullError("iterable")
    iterator = iter(iterable)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return True, iter(())
    return False, itertools.chain((first,), iterator)


def chunk(iterable: Iterable[T], size: int) -> Iterator[List[T]]:
    """Split ``iterable`` into consecutive lists of ``size`` items.

    Arguments are validated immediately; the chunks themselves are produced
    lazily. Every chunk except possibly the last holds exactly ``size`` items
    and concatenating the chunks reproduces the input order.

    Parameters
    ----------
    iterable:
        Source items.
    size:
        Number of items per chunk. Must be positive.

    Returns
    -------
    Iterator[List[T]]
        Lazy iterator over the chunks.

    Raises
    ------
    ArgumentNullError
        If ``iterable`` is ``None``.
    ArgumentOutOfRangeError
        If ``size`` is not positive.
    """

    if iterable is None:
        raise ArgumentNullError("iterable")
    if size <= 0:
        raise ArgumentOutOfRangeError(
            "size", f"The size has to be greater than 0 (got {size})."
        )
    return _iter_chunks(iter(iterable), size)


def _iter_chunks(iterator: Iterator[T], size: int) -> Iterator[List[T]]:
    while True:
        block = list(itertools.islice(iterator, size))
        if not block:
            return
        yield block


__all__ = [
    "is_empty",
    "is_not_empty",
    "is_null_or_empty",
    "is_not_null_or_empty",
    "peek",
    "chunk",
]
