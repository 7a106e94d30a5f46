"""Library-wide constants and defaults."""

from __future__ import annotations

import io
import logging
import os

LOGGER = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
MINUTES_PER_DAY = 24 * 60

# Block size used when copying non-buffered streams into memory.
DEFAULT_COPY_BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE * 16
COPY_BUFFER_SIZE_ENV = "CORE_EXTENSIONS_COPY_BUFFER_SIZE"

TIME_RANGE_SEPARATOR = " - "
DEFAULT_TIME_FORMAT = "%H:%M:%S"


def get_copy_buffer_size() -> int:
    """Return the block size used by the stream copy helpers.

    The ``CORE_EXTENSIONS_COPY_BUFFER_SIZE`` environment variable overrides
    :data:`DEFAULT_COPY_BUFFER_SIZE` when it holds a positive integer. Unusable
    values are logged and ignored.

    Returns
    -------
    int
        Positive block size in bytes.
    """

    raw = os.getenv(COPY_BUFFER_SIZE_ENV)
    if not raw:
        return DEFAULT_COPY_BUFFER_SIZE
    try:
        size = int(raw)
    except ValueError:
        LOGGER.warning(
            "Ignoring %s=%r: not an integer.", COPY_BUFFER_SIZE_ENV, raw
        )
        return DEFAULT_COPY_BUFFER_SIZE
    if size <= 0:
        LOGGER.warning("Ignoring %s=%d: must be positive.", COPY_BUFFER_SIZE_ENV, size)
        return DEFAULT_COPY_BUFFER_SIZE
    return size


__all__ = [
    "DAYS_PER_WEEK",
    "MINUTES_PER_DAY",
    "DEFAULT_COPY_BUFFER_SIZE",
    "COPY_BUFFER_SIZE_ENV",
    "TIME_RANGE_SEPARATOR",
    "DEFAULT_TIME_FORMAT",
    "get_copy_buffer_size",
]
