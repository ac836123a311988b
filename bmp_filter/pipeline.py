# bmp_filter/pipeline.py
from __future__ import annotations

"""
Loader -> header interpreter -> row/pixel walker -> writer.

filter_bitmap_bytes() is the in-memory core; run() wires it to streams.
"""

import time
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .config import FilterConfig
from .core_types import FilterMode, HeaderParseResult, RowLayout
from .header import parse_header
from .pixel_array import PixelArrayView, row_layout, walk_pixels
from .stream_io import read_stream_bytes, write_stream_bytes
from .utils import (
    debug_log,
    format_seconds_compact,
    print_config_line,
    warn,
)


@dataclass(frozen=True)
class FilterReport:
    mode: FilterMode
    parsed: HeaderParseResult
    layout: RowLayout
    pixels_visited: int
    buffer_size: int
    seconds: float


def filter_bitmap_bytes(
    buffer: bytearray, mode: FilterMode, config: Optional[FilterConfig] = None
) -> FilterReport:
    """
    Filter the pixel bytes of a raw bitmap buffer in place.

    Only pixel bytes change; header bytes and the buffer length never do.
    Raises BitmapFormatError when the header cannot be read, when strict
    mode rejects it, or when the pixel array would run past the buffer.
    """
    cfg = config or FilterConfig()
    t0 = time.perf_counter()

    parsed = parse_header(buffer, strict=cfg.strict)
    header = parsed.header
    for problem in parsed.problems:
        warn(f"header: {problem}")
    print_config_line(
        "header",
        [
            ("Width", header.width),
            ("Height", header.height),
            ("Pixel offset", header.pixel_offset),
            ("Kind", parsed.kind),
        ],
        cfg.debug,
    )

    layout = row_layout(header.width, header.height, cfg.row_advance, cfg.strict)
    print_config_line(
        "layout",
        [
            ("Row bytes", layout.row_bytes),
            ("Padding", layout.padding),
            ("Advance", layout.advance),
            ("Rows", layout.rows),
        ],
        cfg.debug,
    )

    view = PixelArrayView(buffer, layout)
    visited = walk_pixels(view, mode, workers=cfg.workers)
    elapsed = time.perf_counter() - t0
    if cfg.debug:
        debug_log(
            f"{mode}: {visited:,} pixels in {format_seconds_compact(elapsed)}"
            f"  workers={cfg.workers}"
        )

    return FilterReport(
        mode=mode,
        parsed=parsed,
        layout=layout,
        pixels_visited=visited,
        buffer_size=len(buffer),
        seconds=elapsed,
    )


def run(
    stdin: BinaryIO,
    stdout: BinaryIO,
    mode: FilterMode,
    config: Optional[FilterConfig] = None,
) -> FilterReport:
    """Read one bitmap from stdin, filter it, write it whole to stdout."""
    cfg = config or FilterConfig()
    buffer = read_stream_bytes(stdin)
    if cfg.debug:
        debug_log(f"read {len(buffer):,} bytes")
    report = filter_bitmap_bytes(buffer, mode, cfg)
    write_stream_bytes(stdout, buffer)
    return report


__all__ = ["FilterReport", "filter_bitmap_bytes", "run"]
