"""Range checks and clamping for totally ordered values.

Any values supporting ``<`` and ``<=`` against each other work: numbers,
strings, dates, times, ``decimal.Decimal`` and user types defining the rich
comparison methods.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from core_extensions.guard import not_null

T = TypeVar("T")

_UNSET: Any = object()


def is_between(
    value: Optional[T],
    lower: T,
    upper: T,
    inclusive: bool = True,
) -> bool:
    """Return whether ``value`` lies between ``lower`` and ``upper``.

    Parameters
    ----------
    value:
        Value to test. ``None`` is never between anything.
    lower, upper:
        Boundaries; both are required.
    inclusive:
        When ``True`` (default) the boundaries themselves count as inside;
        otherwise strict inequalities are used.

    Returns
    -------
    bool
        ``True`` when ``value`` lies inside the boundaries.

    Raises
    ------
    ArgumentNullError
        If ``lower`` or ``upper`` is ``None``.
    """

    not_null(lower, "lower")
    not_null(upper, "upper")
    if value is None:
        return False
    if inclusive:
        return lower <= value <= upper
    return lower < value < upper


def limit(value: T, minimum_or_maximum: T, maximum: T = _UNSET) -> T:
    """Clamp ``value`` to an upper bound, or into ``[minimum, maximum]``.

    Called as ``limit(value, maximum)`` the result is ``value`` when
    ``value <= maximum`` and ``maximum`` otherwise. Called as
    ``limit(value, minimum, maximum)`` the result is ``minimum`` below the
    range, ``maximum`` above it and ``value`` inside it.

    Raises
    ------
    ArgumentNullError
        If ``value`` or any bound is ``None``.
    """

    not_null(value, "value")
    if maximum is _UNSET:
        upper = not_null(minimum_or_maximum, "maximum")
        return value if value <= upper else upper

    not_null(maximum, "maximum")
    lower = not_null(minimum_or_maximum, "minimum")
    if value < lower:
        return lower
    return maximum if value > maximum else value


__all__ = [
    "is_between",
    "limit",
]
