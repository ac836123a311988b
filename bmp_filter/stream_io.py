# bmp_filter/stream_io.py
from __future__ import annotations

"""
Whole-stream byte I/O: load an entire binary stream into an owned bytearray
and write a buffer back out in one call.
"""

import io
from typing import BinaryIO, Union

from .errors import AllocationError, ReadError, SeekError, WriteError


def _is_seekable(stream: BinaryIO) -> bool:
    try:
        return bool(stream.seekable())
    except (OSError, ValueError):
        return False


def stream_size_in_bytes(stream: BinaryIO) -> int:
    """Size of a seekable stream, found by seeking to its end. Leaves it rewound."""
    try:
        stream.seek(0, io.SEEK_SET)
        size = stream.seek(0, io.SEEK_END)
        stream.seek(0, io.SEEK_SET)
    except (OSError, ValueError) as e:
        raise SeekError(f"cannot seek input stream: {e}") from e
    return int(size)


def allocate_buffer(size: int) -> bytearray:
    try:
        return bytearray(size)
    except (MemoryError, OverflowError) as e:
        raise AllocationError(f"cannot allocate {size:,} bytes for the input") from e


def _read_exact(stream: BinaryIO, buf: bytearray) -> int:
    view = memoryview(buf)
    filled = 0
    try:
        while filled < len(buf):
            n = stream.readinto(view[filled:])
            if not n:
                break
            filled += n
    except (OSError, ValueError) as e:
        raise ReadError(f"cannot read input stream: {e}") from e
    finally:
        view.release()
    return filled


def read_stream_bytes(stream: BinaryIO) -> bytearray:
    """
    Read the whole stream from its start into a new bytearray.

    Seekable streams are sized by seeking to the end and read in one pass into
    a buffer of exactly that size; a short read raises ReadError. Pipes and
    other unseekable streams are read until EOF. Empty input is a ReadError.
    """
    if _is_seekable(stream):
        size = stream_size_in_bytes(stream)
        if size == 0:
            raise ReadError("input stream is empty")
        buf = allocate_buffer(size)
        got = _read_exact(stream, buf)
        if got != size:
            raise ReadError(f"short read: got {got:,} of {size:,} bytes")
        return buf

    try:
        data = stream.read()
    except MemoryError as e:
        raise AllocationError("cannot allocate memory for the input") from e
    except (OSError, ValueError) as e:
        raise ReadError(f"cannot read input stream: {e}") from e
    if not data:
        raise ReadError("input stream is empty")
    buf = allocate_buffer(len(data))
    buf[:] = data
    return buf


def write_stream_bytes(stream: BinaryIO, data: Union[bytes, bytearray]) -> int:
    """Write the whole buffer in one call and flush. Short writes raise WriteError."""
    try:
        written = stream.write(data)
        stream.flush()
    except (OSError, ValueError) as e:
        raise WriteError(f"cannot write output stream: {e}") from e
    if written is not None and written != len(data):
        raise WriteError(f"short write: wrote {written:,} of {len(data):,} bytes")
    return len(data)


__all__ = [
    "stream_size_in_bytes",
    "allocate_buffer",
    "read_stream_bytes",
    "write_stream_bytes",
]
