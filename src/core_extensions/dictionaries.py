"""Helpers for mutating and projecting dictionaries."""

from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Dict,
    Mapping,
    MutableMapping,
    Optional,
    TypeVar,
)

from core_extensions.guard import not_null

LOGGER = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def remove_if_contains_key(mapping: MutableMapping[K, V], key: K) -> bool:
    """Remove ``key`` from ``mapping`` when present.

    Returns
    -------
    bool
        ``True`` when an entry was removed.

    Raises
    ------
    ArgumentNullError
        If ``mapping`` or ``key`` is ``None``.
    """

    not_null(mapping, "mapping")
    not_null(key, "key")
    if key in mapping:
        del mapping[key]
        return True
    return False


def remove_where(
    mapping: MutableMapping[K, V],
    predicate: Callable[[K, V], bool],
) -> int:
    """Remove every entry for which ``predicate(key, value)`` is true.

    Parameters
    ----------
    mapping:
        Mapping to mutate in place.
    predicate:
        Callable receiving each key and value.

    Returns
    -------
    int
        Number of removed entries.
    """

    not_null(mapping, "mapping")
    not_null(predicate, "predicate")
    doomed = [key for key, value in mapping.items() if predicate(key, value)]
    for key in doomed:
        del mapping[key]
    return len(doomed)


def merge(
    target: MutableMapping[K, V],
    *others: Mapping[K, V],
    overwrite: bool = True,
) -> MutableMapping[K, V]:
    """Copy the entries of ``others`` into ``target`` and return ``target``.

    Later mappings win over earlier ones. With ``overwrite=False`` keys that
    already exist in ``target`` keep their value.

    Raises
    ------
    ArgumentNullError
        If ``target`` or any of ``others`` is ``None``.
    """

    not_null(target, "target")
    for position, other in enumerate(others):
        not_null(other, "others", f"The others[{position}] mapping cannot be None.")
        if overwrite:
            target.update(other)
            continue
        for key, value in other.items():
            if key not in target:
                target[key] = value
    return target


def to_sorted_dict(
    mapping: Mapping[K, V],
    key: Optional[Callable[[K], Any]] = None,
    reverse: bool = False,
) -> Dict[K, V]:
    """Return a new ``dict`` holding the entries of ``mapping`` in key order.

    Parameters
    ----------
    mapping:
        Source mapping; left untouched.
    key:
        Optional sort key applied to each dictionary key, for example
        ``str.casefold`` for case-insensitive ordering.
    reverse:
        Sort in descending order.

    Returns
    -------
    Dict[K, V]
        Insertion-ordered copy sorted by key.
    """

    not_null(mapping, "mapping")
    ordered = sorted(mapping, key=key, reverse=reverse)
    LOGGER.debug("Sorted %d keys (custom key: %s).", len(ordered), key is not None)
    return {item: mapping[item] for item in ordered}


def get_or_default(mapping: Mapping[K, V], key: K, default: Optional[V] = None) -> Optional[V]:
    """Return ``mapping[key]`` or ``default`` when the key is missing."""

    not_null(mapping, "mapping")
    if key in mapping:
        return mapping[key]
    return default


__all__ = [
    "remove_if_contains_key",
    "remove_where",
    "merge",
    "to_sorted_dict",
    "get_or_default",
]
