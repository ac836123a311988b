# bmp_filter/errors.py
"""
Typed failures. Library code raises these; the CLI maps ErrorKind to an exit
code at the outermost boundary.
"""
from __future__ import annotations

from enum import Enum

from .constants import EXIT_CODES


class ErrorKind(str, Enum):
    USAGE = "usage"
    SEEK = "seek"
    READ = "read"
    ALLOCATION = "allocation"
    WRITE = "write"
    BITMAP_FORMAT = "bitmap_format"

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.value]


class BmpFilterError(Exception):
    """Base class for every fatal pipeline error."""

    kind: ErrorKind = ErrorKind.USAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code


class UsageError(BmpFilterError):
    kind = ErrorKind.USAGE


class SeekError(BmpFilterError):
    kind = ErrorKind.SEEK


class ReadError(BmpFilterError):
    kind = ErrorKind.READ


class AllocationError(BmpFilterError):
    kind = ErrorKind.ALLOCATION


class WriteError(BmpFilterError):
    kind = ErrorKind.WRITE


class BitmapFormatError(BmpFilterError):
    kind = ErrorKind.BITMAP_FORMAT


__all__ = [
    "ErrorKind",
    "BmpFilterError",
    "UsageError",
    "SeekError",
    "ReadError",
    "AllocationError",
    "WriteError",
    "BitmapFormatError",
]
