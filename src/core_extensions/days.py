"""Day-of-week enumeration with wrap-around arithmetic."""

from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import List

from core_extensions.config import DAYS_PER_WEEK
from core_extensions.guard import minimum, not_null


class DayOfWeek(IntEnum):
    """Days of the week numbered from Sunday, as in most calendars."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def add_days(day: DayOfWeek, number_of_days: int = 1) -> DayOfWeek:
    """Return the day ``number_of_days`` after ``day``, wrapping around.

    Parameters
    ----------
    day:
        Starting day.
    number_of_days:
        Offset in days; negative values move backwards.

    Returns
    -------
    DayOfWeek
        Day congruent to ``day + number_of_days`` modulo seven.

    Examples
    --------
    >>> add_days(DayOfWeek.MONDAY, 2)
    <DayOfWeek.WEDNESDAY: 3>
    >>> add_days(DayOfWeek.MONDAY, -1)
    <DayOfWeek.SUNDAY: 0>
    """

    not_null(day, "day")
    # Python's % already returns a non-negative result for a positive divisor.
    return DayOfWeek((int(day) + number_of_days) % DAYS_PER_WEEK)


increment = add_days


def get_next_days(start: DayOfWeek, count: int = DAYS_PER_WEEK) -> List[DayOfWeek]:
    """Return ``count`` consecutive days beginning with ``start``.

    Raises
    ------
    ArgumentOutOfRangeError
        If ``count`` is less than one.
    """

    minimum(count, 1, "count")
    return [add_days(start, offset) for offset in range(count)]


def from_date(value: date) -> DayOfWeek:
    """Return the :class:`DayOfWeek` of a ``date`` or ``datetime``."""

    not_null(value, "value")
    # date.weekday() counts from Monday = 0.
    return add_days(DayOfWeek.MONDAY, value.weekday())


__all__ = [
    "DayOfWeek",
    "add_days",
    "increment",
    "get_next_days",
    "from_date",
]
