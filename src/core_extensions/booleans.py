"""Conversions from booleans to labels, bytes and integers."""

from __future__ import annotations

from core_extensions.guard import not_null


def to_string(value: bool, true_value: str, false_value: str) -> str:
    """Return ``true_value`` when ``value`` is truthy, else ``false_value``.

    Parameters
    ----------
    value:
        Boolean (or any object, judged by truthiness) to convert.
    true_value:
        Label returned for true.
    false_value:
        Label returned for false.

    Raises
    ------
    ArgumentNullError
        If either label is ``None``.
    """

    not_null(true_value, "true_value")
    not_null(false_value, "false_value")
    return true_value if value else false_value


def to_byte(value: bool) -> int:
    """Return ``1`` for true and ``0`` for false as a byte value."""

    return 1 if value else 0


to_bit = to_byte


def to_bytes(value: bool) -> bytes:
    """Return ``b"\\x01"`` for true and ``b"\\x00"`` for false."""

    return bytes((to_byte(value),))


def to_int(value: bool) -> int:
    return int(bool(value))


__all__ = [
    "to_string",
    "to_byte",
    "to_bit",
    "to_bytes",
    "to_int",
]
