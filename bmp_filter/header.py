# bmp_filter/header.py
from __future__ import annotations

"""
Bitmap header interpretation.

Reads the little-endian fields at fixed offsets of the raw file buffer and
judges whether they look like a plain 24-bit BITMAPINFOHEADER file. Lenient
parsing trusts the fields as-is and only reports problems; strict parsing
raises BitmapFormatError listing all of them.
"""

from typing import Callable, List, Optional, Union

from .constants import (
    BI_RGB,
    BITS_PER_PIXEL_OFFSET,
    COMPRESSION_OFFSET,
    FILE_SIZE_OFFSET,
    HEIGHT_OFFSET,
    MIN_HEADER_BYTES,
    PIXEL_ARRAY_BASE,
    PIXEL_OFFSET_FIELD,
    SIGNATURE,
    SIGNATURE_OFFSET,
    SUPPORTED_BITS_PER_PIXEL,
    WIDTH_OFFSET,
)
from .core_types import BitmapHeader, HeaderParseResult
from .errors import BitmapFormatError

Buffer = Union[bytes, bytearray, memoryview]


# Bounds-checked accessors


def _read_le(buf: Buffer, offset: int, size: int, signed: bool, field: str) -> int:
    end = offset + size
    if offset < 0 or end > len(buf):
        raise BitmapFormatError(
            f"{field}: bytes {offset}..{end - 1} lie past the end of a "
            f"{len(buf)}-byte buffer"
        )
    return int.from_bytes(buf[offset:end], "little", signed=signed)


def read_u16_le(buf: Buffer, offset: int, field: str = "u16") -> int:
    return _read_le(buf, offset, 2, False, field)


def read_u32_le(buf: Buffer, offset: int, field: str = "u32") -> int:
    return _read_le(buf, offset, 4, False, field)


def read_i32_le(buf: Buffer, offset: int, field: str = "i32") -> int:
    return _read_le(buf, offset, 4, True, field)


def _optional(
    reader: Callable[[Buffer, int, str], int],
    buf: Buffer,
    offset: int,
    size: int,
    field: str,
) -> Optional[int]:
    if offset + size > len(buf):
        return None
    return reader(buf, offset, field)


# Parsing


def read_header(buf: Buffer) -> BitmapHeader:
    """
    Extract the header fields. Raises BitmapFormatError only when the buffer
    is too short to hold width and height.
    """
    if len(buf) < MIN_HEADER_BYTES:
        raise BitmapFormatError(
            f"buffer holds {len(buf)} bytes; at least {MIN_HEADER_BYTES} are "
            "needed to read the bitmap dimensions"
        )
    return BitmapHeader(
        pixel_offset=read_u32_le(buf, PIXEL_OFFSET_FIELD, "pixel offset"),
        width=read_i32_le(buf, WIDTH_OFFSET, "width"),
        height=read_i32_le(buf, HEIGHT_OFFSET, "height"),
        signature=bytes(buf[SIGNATURE_OFFSET : SIGNATURE_OFFSET + 2]),
        file_size=_optional(read_u32_le, buf, FILE_SIZE_OFFSET, 4, "file size"),
        bits_per_pixel=_optional(
            read_u16_le, buf, BITS_PER_PIXEL_OFFSET, 2, "bits per pixel"
        ),
        compression=_optional(
            read_u32_le, buf, COMPRESSION_OFFSET, 4, "compression"
        ),
    )


def header_problems(header: BitmapHeader, buffer_size: int) -> List[str]:
    """Human-readable reasons the header should not be trusted (empty if fine)."""
    problems: List[str] = []
    if header.signature != SIGNATURE:
        problems.append(f"signature is {header.signature!r}, expected {SIGNATURE!r}")
    if buffer_size < PIXEL_ARRAY_BASE:
        problems.append(
            f"buffer holds {buffer_size} bytes, shorter than the "
            f"{PIXEL_ARRAY_BASE}-byte header"
        )
    if header.pixel_offset != PIXEL_ARRAY_BASE:
        problems.append(
            f"pixel array offset is {header.pixel_offset}, expected {PIXEL_ARRAY_BASE}"
        )
    bpp = header.bits_per_pixel
    if bpp is not None and bpp != SUPPORTED_BITS_PER_PIXEL:
        problems.append(
            f"bit depth is {bpp}, expected {SUPPORTED_BITS_PER_PIXEL}"
        )
    if header.compression is not None and header.compression != BI_RGB:
        problems.append(f"compression is {header.compression}, expected none (0)")
    if header.width <= 0:
        problems.append(f"width is {header.width}, expected > 0")
    if header.height == 0:
        problems.append("height is 0")
    return problems


def parse_header(buf: Buffer, strict: bool = False) -> HeaderParseResult:
    """
    Read and classify the header.

    Returns HeaderParseResult(kind="trusted") when no problems are found,
    otherwise kind="malformed" with the problems listed. In strict mode a
    malformed header raises BitmapFormatError instead.
    """
    header = read_header(buf)
    problems = header_problems(header, len(buf))
    if problems and strict:
        raise BitmapFormatError("malformed bitmap header: " + "; ".join(problems))
    kind = "malformed" if problems else "trusted"
    return HeaderParseResult(header=header, kind=kind, problems=tuple(problems))


__all__ = [
    "read_u16_le",
    "read_u32_le",
    "read_i32_le",
    "read_header",
    "header_problems",
    "parse_header",
]
