"""Small, stateless helpers layered over standard Python types.

Submodules
----------
booleans
    Boolean to label, byte and integer conversions.
comparables
    Range checks and clamping for ordered values.
days
    ``DayOfWeek`` enumeration with wrap-around arithmetic.
dictionaries
    Conditional removal, merging and sorted copies of dictionaries.
iterables
    Emptiness predicates and lazy chunking.
queries
    One-based paging and conditional filtering for pandas objects and
    sequences.
streams
    Reading binary streams fully into memory, synchronously or not.
times
    Time-of-day arithmetic, comparison and formatting.
time_range
    ``TimeRange`` value type.
guard, errors, config
    Argument validation, the errors it raises, and shared constants.
"""

from __future__ import annotations

from .days import DayOfWeek
from .errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    TimeFormatError,
)
from .queries import PagedList
from .time_range import TimeRange

__all__ = [
    "booleans",
    "comparables",
    "config",
    "days",
    "dictionaries",
    "errors",
    "guard",
    "iterables",
    "queries",
    "streams",
    "times",
    "time_range",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "DayOfWeek",
    "PagedList",
    "TimeFormatError",
    "TimeRange",
]
