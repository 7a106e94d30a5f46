"""Argument guards used at the top of the public helpers.

Every guard returns the checked value unchanged so it can be used inline::

    count = minimum(count, 1, "count")

and raises one of the :mod:`core_extensions.errors` types naming the
parameter otherwise. A non-blank ``message`` replaces the default text.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from core_extensions.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
)
from core_extensions.iterables import is_empty

T = TypeVar("T")


def _pick_message(message: Optional[str], default: str) -> str:
    if message is None or not message.strip():
        return default
    return message


def not_null(value: Optional[T], param_name: str, message: Optional[str] = None) -> T:
    """Return ``value`` or raise :class:`ArgumentNullError` when it is ``None``."""

    if value is None:
        raise ArgumentNullError(
            param_name,
            _pick_message(message, f"The {param_name} cannot be None."),
        )
    return value


def minimum(value: T, min_value: Any, param_name: str, message: Optional[str] = None) -> T:
    """Return ``value`` when it is at least ``min_value``.

    Raises
    ------
    ArgumentOutOfRangeError
        If ``value < min_value``.
    """

    if value >= min_value:
        return value
    raise ArgumentOutOfRangeError(
        param_name,
        _pick_message(
            message, f"The value of '{param_name}' cannot be less than {min_value}."
        ),
    )


def maximum(value: T, max_value: Any, param_name: str, message: Optional[str] = None) -> T:
    """Return ``value`` when it does not exceed ``max_value``.

    Raises
    ------
    ArgumentOutOfRangeError
        If ``value > max_value``.
    """

    if value <= max_value:
        return value
    raise ArgumentOutOfRangeError(
        param_name,
        _pick_message(message, f"The value of '{param_name}' cannot exceed {max_value}."),
    )


def within_range(
    value: T,
    min_value: Any,
    max_value: Any,
    param_name: str,
    message: Optional[str] = None,
) -> T:
    """Return ``value`` when ``min_value <= value <= max_value``.

    Parameters
    ----------
    value:
        Value to check.
    min_value, max_value:
        Inclusive bounds. ``min_value`` must not be greater than ``max_value``.
    param_name:
        Name reported in the raised error.
    message:
        Optional replacement for the default error message.

    Raises
    ------
    ArgumentError
        If the bounds are inverted (reported against ``min_value``).
    ArgumentOutOfRangeError
        If ``value`` lies outside the bounds.
    """

    if min_value > max_value:
        raise ArgumentError(
            "min_value",
            "The minimum value specified cannot be greater than the maximum value specified.",
        )
    if min_value <= value <= max_value:
        return value
    raise ArgumentOutOfRangeError(
        param_name,
        _pick_message(
            message,
            f"The value of '{param_name}' must be between '{min_value}' and '{max_value}'.",
        ),
    )


def not_null_or_empty(value: Optional[T], param_name: str, message: Optional[str] = None) -> T:
    """Return ``value`` when it is neither ``None`` nor empty.

    Strings, sized collections and plain iterables are accepted; emptiness is
    decided by :func:`core_extensions.iterables.is_empty`.
    """

    if value is None:
        raise ArgumentNullError(
            param_name,
            _pick_message(message, f"The value of '{param_name}' cannot be None."),
        )
    if is_empty(value):
        raise ArgumentError(
            param_name,
            _pick_message(message, f"The value of '{param_name}' cannot be empty."),
        )
    return value


__all__ = [
    "not_null",
    "minimum",
    "maximum",
    "within_range",
    "not_null_or_empty",
]
