# bmp_filter/pixel_array.py
from __future__ import annotations

"""
Row/pixel walker over the pixel array of a raw bitmap buffer.

The pixel array is exposed as a writable numpy view of shape (rows, width, 3)
whose row stride is the layout's advance, so filtering it writes straight
into the owned bytearray. Rows are visited in stored order (no vertical flip).
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterator

import numpy as np

from .constants import (
    BYTES_PER_PIXEL,
    MIN_ROWS_PER_WORKER,
    PIXEL_ARRAY_BASE,
    ROW_ALIGNMENT,
)
from .core_types import ROW_ADVANCES, FilterMode, RowAdvance, RowLayout, U8Pixels
from .errors import BitmapFormatError
from .filters import apply_filter
from .utils import split_rows_into_parts


def row_layout(
    width: int, height: int, advance: RowAdvance = "padded", strict: bool = False
) -> RowLayout:
    """
    Row geometry for a width x height 24-bit pixel array.

    advance="padded" steps row_bytes + padding between rows (real bitmap
    layout); advance="packed" steps row_bytes only, reproducing output of
    tools that ignore row padding.

    Non-positive dimensions visit nothing, except that strict mode reads a
    negative height as a top-down bitmap of abs(height) rows.
    """
    if advance not in ROW_ADVANCES:
        raise ValueError(f"unknown row advance: {advance!r}")
    row_bytes = width * BYTES_PER_PIXEL if width > 0 else 0
    padding = (ROW_ALIGNMENT - row_bytes % ROW_ALIGNMENT) % ROW_ALIGNMENT
    step = row_bytes + padding if advance == "padded" else row_bytes

    if width <= 0:
        rows = 0
    elif height > 0:
        rows = height
    elif height < 0 and strict:
        rows = -height
    else:
        rows = 0
    return RowLayout(
        width=width,
        height=height,
        row_bytes=row_bytes,
        padding=padding,
        advance=step,
        rows=rows,
    )


def pixel_offsets(layout: RowLayout, base: int = PIXEL_ARRAY_BASE) -> Iterator[int]:
    """Byte offset of every visited pixel, row-major, left to right."""
    for row_index in range(layout.rows):
        row_start = base + row_index * layout.advance
        for col in range(layout.width):
            yield row_start + col * BYTES_PER_PIXEL


class PixelArrayView:
    """Bounds-checked, writable (rows, width, 3) view into a bytearray."""

    def __init__(
        self, buffer: bytearray, layout: RowLayout, base: int = PIXEL_ARRAY_BASE
    ) -> None:
        if not isinstance(buffer, bytearray):
            raise TypeError("pixel array view needs a mutable bytearray")
        end = base + layout.extent
        if layout.extent and end > len(buffer):
            raise BitmapFormatError(
                f"{layout.width}x{layout.rows} pixel array needs bytes "
                f"{base}..{end - 1} (row advance {layout.advance}) but the "
                f"buffer holds only {len(buffer)} bytes"
            )
        self.buffer = buffer
        self.layout = layout
        self.base = base
        if layout.extent:
            self.pixels: U8Pixels = np.ndarray(
                shape=(layout.rows, layout.width, BYTES_PER_PIXEL),
                dtype=np.uint8,
                buffer=buffer,
                offset=base,
                strides=(layout.advance, BYTES_PER_PIXEL, 1),
            )
        else:
            self.pixels = np.zeros(
                (0, max(layout.width, 0), BYTES_PER_PIXEL), dtype=np.uint8
            )

    def __len__(self) -> int:
        return self.layout.rows

    @property
    def pixel_count(self) -> int:
        return self.layout.pixel_count

    def row(self, index: int) -> U8Pixels:
        if not 0 <= index < self.layout.rows:
            raise IndexError(f"row {index} outside 0..{self.layout.rows - 1}")
        return self.pixels[index]

    def iter_rows(self) -> Iterator[U8Pixels]:
        for index in range(self.layout.rows):
            yield self.pixels[index]


def walk_pixels(view: PixelArrayView, mode: FilterMode, workers: int = 1) -> int:
    """
    Filter every pixel of the view in place. Returns the number of pixels
    visited (rows * width).

    With workers > 1 the rows are split into contiguous spans filtered on a
    thread pool; spans never share bytes.
    """
    rows = view.layout.rows
    if rows == 0 or view.layout.width <= 0:
        return 0

    parts = workers if workers > 1 and rows >= workers * MIN_ROWS_PER_WORKER else 1
    spans = split_rows_into_parts(rows, parts)
    if len(spans) <= 1:
        apply_filter(view.pixels, mode)
    else:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futs = [ex.submit(apply_filter, view.pixels[s:e], mode) for s, e in spans]
            for fu in futs:
                fu.result()
    return view.pixel_count


__all__ = ["row_layout", "pixel_offsets", "PixelArrayView", "walk_pixels"]
