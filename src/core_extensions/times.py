"""Time-of-day helpers for :class:`datetime.time` values.

Only the clock reading matters here: arithmetic wraps around midnight and no
date is ever attached to the results. ``tzinfo`` is carried through unchanged.
"""

from __future__ import annotations

import re
from datetime import datetime, time, timedelta
from typing import Optional, Union

from core_extensions import comparables
from core_extensions.config import DEFAULT_TIME_FORMAT
from core_extensions.errors import ArgumentOutOfRangeError, TimeFormatError
from core_extensions.guard import not_null

ONE_DAY = timedelta(days=1)

# Portable strftime directives; anything else after a "%" is rejected.
STRFTIME_DIRECTIVES = frozenset("aAbBcdfGHIjmMpSuUVwWxXyYzZ%")
_DIRECTIVE_PATTERN = re.compile(r"%(.?)", re.DOTALL)


def time_to_timedelta(value: time) -> timedelta:
    """Return the offset of ``value`` from midnight."""

    return timedelta(
        hours=value.hour,
        minutes=value.minute,
        seconds=value.second,
        microseconds=value.microsecond,
    )


def add_timedelta(value: time, delta: timedelta) -> time:
    """Return ``value`` moved by ``delta``, wrapping around midnight."""

    not_null(value, "value")
    wrapped = (time_to_timedelta(value) + delta) % ONE_DAY
    return (datetime.min + wrapped).time().replace(tzinfo=value.tzinfo, fold=value.fold)


def add_minutes(value: time, minutes: Union[int, float]) -> time:
    """Return ``value`` moved by ``minutes`` (negative moves backwards).

    Raises
    ------
    ArgumentOutOfRangeError
        If the offset is too large to be represented.

    Examples
    --------
    >>> add_minutes(time(23, 30), 45)
    datetime.time(0, 15)
    """

    not_null(value, "value")
    try:
        return add_timedelta(value, timedelta(minutes=minutes))
    except (OverflowError, ValueError) as err:
        raise ArgumentOutOfRangeError(
            "minutes", "The resulting time is out of range."
        ) from err


def is_between(current: time, start: time, end: time, inclusive: bool = True) -> bool:
    """Return whether ``current`` lies between ``start`` and ``end``.

    ``start`` is expected to be earlier than ``end`` within the same day;
    ranges crossing midnight are not recognised.
    """

    return comparables.is_between(current, start, end, inclusive=inclusive)


def difference_in_minutes(start: time, end: time) -> int:
    """Return the absolute number of whole minutes between two times."""

    not_null(start, "start")
    not_null(end, "end")
    seconds = (time_to_timedelta(end) - time_to_timedelta(start)).total_seconds()
    return abs(int(seconds / 60))


def is_current_time(value: time, now: Optional[Union[datetime, time]] = None) -> bool:
    """Return whether ``value`` falls in the same minute as ``now``.

    Parameters
    ----------
    value:
        Time to check.
    now:
        Reference moment; defaults to the current local time (in
        ``value.tzinfo`` when ``value`` is aware).
    """

    not_null(value, "value")
    if now is None:
        now = datetime.now(value.tzinfo)
    return value.hour == now.hour and value.minute == now.minute


def validate_time_format(fmt: str) -> str:
    """Return ``fmt`` when it is a usable ``strftime`` format string.

    Raises
    ------
    TimeFormatError
        If ``fmt`` is unusable; the message names the offending part.
    """

    if not isinstance(fmt, str):
        raise TimeFormatError(
            "fmt", f"The format must be a string, not {type(fmt).__name__}."
        )
    if "\0" in fmt:
        raise TimeFormatError(
            "fmt", f"The format string {fmt!r} contains a NUL character."
        )
    for match in _DIRECTIVE_PATTERN.finditer(fmt):
        directive = match.group(1)
        if not directive:
            raise TimeFormatError(
                "fmt", f"The format string {fmt!r} ends with a lone '%'."
            )
        if directive not in STRFTIME_DIRECTIVES:
            raise TimeFormatError(
                "fmt", f"The format string {fmt!r} uses unknown directive '%{directive}'."
            )
    return fmt


def format_time(value: time, fmt: str = DEFAULT_TIME_FORMAT) -> str:
    """Format ``value`` with a ``strftime`` format string.

    The format is validated with :func:`validate_time_format` before
    ``strftime`` runs.

    Raises
    ------
    TimeFormatError
        If ``fmt`` is not a string, contains a NUL character, uses a
        directive outside :data:`STRFTIME_DIRECTIVES` or ends with a lone
        ``%``.
    """

    not_null(value, "value")
    not_null(fmt, "fmt")
    validate_time_format(fmt)
    try:
        return value.strftime(fmt)
    except (ValueError, TypeError) as err:
        raise TimeFormatError("fmt", f"The format string {fmt!r} is invalid.") from err


__all__ = [
    "add_timedelta",
    "add_minutes",
    "is_between",
    "difference_in_minutes",
    "is_current_time",
    "format_time",
    "validate_time_format",
    "STRFTIME_DIRECTIVES",
    "time_to_timedelta",
]
