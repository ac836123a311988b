# bmp_filter/constants.py
"""
Fixed bitmap layout offsets, filter tunables and process exit codes.

- Header field offsets (little-endian) for BITMAPFILEHEADER + BITMAPINFOHEADER
- PIXEL_ARRAY_BASE: where pixels are assumed to start
- Exit codes used only by the CLI boundary
"""
from __future__ import annotations

from typing import Dict

# =========================
# Bitmap header layout
# =========================
SIGNATURE_OFFSET = 0
SIGNATURE = b"BM"
FILE_SIZE_OFFSET = 2
PIXEL_OFFSET_FIELD = 10
WIDTH_OFFSET = 18
HEIGHT_OFFSET = 22
BITS_PER_PIXEL_OFFSET = 28
COMPRESSION_OFFSET = 30

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
# 14-byte file header + 40-byte BITMAPINFOHEADER
PIXEL_ARRAY_BASE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

# Smallest buffer that holds width and height.
MIN_HEADER_BYTES = HEIGHT_OFFSET + 4

BYTES_PER_PIXEL = 3
ROW_ALIGNMENT = 4
SUPPORTED_BITS_PER_PIXEL = 24
BI_RGB = 0

# =========================
# Filter tunables
# =========================
THRESHOLD_CUTOFF = 128
WHITE = 0xFF
BLACK = 0x00

# Rows per thread chunk below which threading is not worth it.
MIN_ROWS_PER_WORKER = 64

# =========================
# Exit codes
# =========================
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SEEK = 2
EXIT_READ = 3
EXIT_ALLOCATION = 4
EXIT_WRITE = 5
EXIT_BITMAP_FORMAT = 6

EXIT_CODES: Dict[str, int] = {
    "usage": EXIT_USAGE,
    "seek": EXIT_SEEK,
    "read": EXIT_READ,
    "allocation": EXIT_ALLOCATION,
    "write": EXIT_WRITE,
    "bitmap_format": EXIT_BITMAP_FORMAT,
}
