"""Read binary streams fully into memory.

Both helpers return every byte from the stream's current position to its end
and leave the stream positioned at the end. ``io.BytesIO`` instances already
hold their whole content, so they are served straight from their buffer
instead of being copied block by block.
"""

from __future__ import annotations

import asyncio
import inspect
import io
import logging
import shutil
from typing import Any, BinaryIO, List

from core_extensions.config import get_copy_buffer_size
from core_extensions.errors import ArgumentError
from core_extensions.guard import not_null

LOGGER = logging.getLogger(__name__)


def _check_binary(stream: Any) -> None:
    not_null(stream, "stream")
    if isinstance(stream, io.TextIOBase):
        raise ArgumentError("stream", "The stream must be opened in binary mode.")
    if not callable(getattr(stream, "read", None)):
        raise ArgumentError("stream", "The stream does not provide a read() method.")


def _read_buffered(stream: io.BytesIO) -> bytes:
    position = stream.tell()
    if position:
        # Copy only the unread tail.
        with stream.getbuffer() as view, view[position:] as tail:
            data = bytes(tail)
    else:
        data = stream.getvalue()
    stream.seek(0, io.SEEK_END)
    LOGGER.debug("Served %d bytes from an in-memory buffer.", len(data))
    return data


def to_byte_array(stream: BinaryIO) -> bytes:
    """Return the remaining content of a binary ``stream``.

    Parameters
    ----------
    stream:
        Readable binary stream such as an open file, a socket file or an
        ``io.BytesIO``.

    Returns
    -------
    bytes
        Content from the current position to the end of the stream.

    Raises
    ------
    ArgumentNullError
        If ``stream`` is ``None``.
    ArgumentError
        If ``stream`` is a text stream or cannot be read.
    """

    _check_binary(stream)
    if isinstance(stream, io.BytesIO):
        return _read_buffered(stream)

    buffer = io.BytesIO()
    shutil.copyfileobj(stream, buffer, get_copy_buffer_size())
    return buffer.getvalue()


async def to_byte_array_async(stream: Any) -> bytes:
    """Asynchronously return the remaining content of ``stream``.

    Readers whose ``read`` is a coroutine function, such as
    ``asyncio.StreamReader``, are awaited block by block. Ordinary blocking
    binary streams are copied with :func:`to_byte_array` in a worker thread so
    the event loop is not blocked. There is no timeout and no cancellation
    parameter; cancel the awaiting task to abandon the read.

    Parameters
    ----------
    stream:
        Async reader or blocking binary stream.

    Returns
    -------
    bytes
        Content from the current position to the end of the stream.

    Raises
    ------
    ArgumentNullError
        If ``stream`` is ``None``.
    ArgumentError
        If ``stream`` is a text stream or cannot be read.
    """

    _check_binary(stream)
    if isinstance(stream, io.BytesIO):
        return _read_buffered(stream)

    if not inspect.iscoroutinefunction(stream.read):
        LOGGER.debug("Copying blocking stream %r in a worker thread.", stream)
        return await asyncio.to_thread(to_byte_array, stream)

    block_size = get_copy_buffer_size()
    blocks: List[bytes] = []
    while True:
        block = await stream.read(block_size)
        if not block:
            break
        blocks.append(block)
    LOGGER.debug("Read %d blocks from async reader %r.", len(blocks), stream)
    return b"".join(blocks)


__all__ = [
    "to_byte_array",
    "to_byte_array_async",
]
