"""An ordered, immutable span between two times of the same day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time, timedelta
from typing import Optional, Union

from core_extensions import times
from core_extensions.config import TIME_RANGE_SEPARATOR
from core_extensions.errors import ArgumentError
from core_extensions.guard import not_null


@dataclass(frozen=True, order=True)
class TimeRange:
    """Closed interval ``[start, end]`` of times within one day.

    Parameters
    ----------
    start:
        First time of the range.
    end:
        Last time of the range; must not be earlier than ``start``.

    Ranges order by ``start`` and then by ``end``.
    """

    start: time
    end: time

    def __post_init__(self) -> None:
        not_null(self.start, "start")
        not_null(self.end, "end")
        if self.end < self.start:
            raise ArgumentError("end", "End time cannot be before start time.")

    @classmethod
    def from_duration(cls, start: time, duration: timedelta) -> "TimeRange":
        """Build a range starting at ``start`` and lasting ``duration``."""

        return cls(start, times.add_timedelta(start, duration))

    @classmethod
    def parse(cls, text: str) -> "TimeRange":
        """Parse ``"HH:MM[:SS] - HH:MM[:SS]"`` into a range.

        Raises
        ------
        ArgumentError
            If ``text`` is not in that format or the times are inverted.
        """

        not_null(text, "text")
        parts = text.split(TIME_RANGE_SEPARATOR)
        if len(parts) != 2:
            raise ArgumentError(
                "text", f"Expected 'start{TIME_RANGE_SEPARATOR}end', got {text!r}."
            )
        try:
            start, end = (time.fromisoformat(part.strip()) for part in parts)
        except ValueError as err:
            raise ArgumentError("text", f"Invalid time in {text!r}.") from err
        return cls(start, end)

    @classmethod
    def try_parse(cls, text: Optional[str]) -> Optional["TimeRange"]:
        """Return the parsed range, or ``None`` when ``text`` is not valid."""

        if text is None:
            return None
        try:
            return cls.parse(text)
        except ArgumentError:
            return None

    @property
    def duration(self) -> timedelta:
        return times.time_to_timedelta(self.end) - times.time_to_timedelta(self.start)

    def contains(self, item: Union[time, "TimeRange"]) -> bool:
        """Return whether a time, or a whole range, lies inside this range."""

        if isinstance(item, TimeRange):
            return self.start <= item.start and self.end >= item.end
        return times.is_between(item, self.start, self.end, inclusive=True)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, (time, TimeRange)) and self.contains(item)

    def overlaps(self, other: "TimeRange") -> bool:
        return self.start <= other.end and self.end >= other.start

    def union(self, other: "TimeRange") -> "TimeRange":
        """Return the smallest range covering both ranges, overlapping or not."""

        return TimeRange(min(self.start, other.start), max(self.end, other.end))

    def merge(self, other: "TimeRange") -> "TimeRange":
        """Return the union of two overlapping ranges.

        Raises
        ------
        ValueError
            If the ranges do not overlap.
        """

        if not self.overlaps(other):
            raise ValueError("Cannot merge two time ranges that do not overlap.")
        return self.union(other)

    def intersect(self, other: "TimeRange") -> Optional["TimeRange"]:
        """Return the shared part of both ranges, or ``None``."""

        if not self.overlaps(other):
            return None
        return TimeRange(max(self.start, other.start), min(self.end, other.end))

    def shift(self, offset: timedelta) -> "TimeRange":
        """Move both ends by ``offset``.

        Raises
        ------
        ArgumentError
            If the shift wraps one end past midnight but not the other.
        """

        return TimeRange(
            times.add_timedelta(self.start, offset),
            times.add_timedelta(self.end, offset),
        )

    def __str__(self) -> str:
        return f"{self.start.isoformat()}{TIME_RANGE_SEPARATOR}{self.end.isoformat()}"


__all__ = ["TimeRange"]
