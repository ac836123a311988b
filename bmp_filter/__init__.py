# bmp_filter/__init__.py
"""
bmp_filter package.

Purpose:
  Grayscale or black/white threshold filtering of uncompressed 24-bit bitmaps,
  done in place on the raw file bytes. See bmp_filter.cli for the CLI.

Public API:
  filter_bitmap_bytes : filter a bytearray holding a whole bitmap file.
  run                 : stream-to-stream pipeline (load, filter, write).
  parse_header        : read and classify the fixed-offset header fields.
  row_layout          : row stride/padding geometry.
  PixelArrayView      : bounds-checked numpy view of the pixel rows.
  walk_pixels         : apply a filter to every pixel of a view.
  filter_pixel        : pure per-pixel filter.
  FilterConfig        : environment-driven run configuration.

Quick start:
  from bmp_filter import filter_bitmap_bytes
  buf = bytearray(open("in.bmp", "rb").read())
  filter_bitmap_bytes(buf, "grayscale")
"""

__version__ = "0.1.0"

from . import constants
from . import core_types
from . import errors
from . import utils

from .config import FilterConfig
from .errors import (
    AllocationError,
    BitmapFormatError,
    BmpFilterError,
    ErrorKind,
    ReadError,
    SeekError,
    UsageError,
    WriteError,
)
from .filters import apply_filter, average_intensity, filter_pixel
from .header import parse_header
from .pixel_array import PixelArrayView, row_layout, walk_pixels
from .pipeline import FilterReport, filter_bitmap_bytes, run

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "errors",
    "utils",
    "FilterConfig",
    "ErrorKind",
    "BmpFilterError",
    "UsageError",
    "SeekError",
    "ReadError",
    "AllocationError",
    "WriteError",
    "BitmapFormatError",
    "average_intensity",
    "filter_pixel",
    "apply_filter",
    "parse_header",
    "row_layout",
    "PixelArrayView",
    "walk_pixels",
    "FilterReport",
    "filter_bitmap_bytes",
    "run",
]
