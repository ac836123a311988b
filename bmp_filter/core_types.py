# bmp_filter/core_types.py
from __future__ import annotations

"""
Core type aliases and small value objects shared by the header, walker and
filter modules.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

BGRTuple = Tuple[int, int, int]  # (blue, green, red) as stored
U8Pixels = NDArray[np.uint8]  # (..., 3) BGR
FilterMode = Literal["grayscale", "threshold"]
RowAdvance = Literal["padded", "packed"]
HeaderKind = Literal["trusted", "malformed"]

FILTER_MODES: Tuple[FilterMode, ...] = ("grayscale", "threshold")
ROW_ADVANCES: Tuple[RowAdvance, ...] = ("padded", "packed")


# Value objects


@dataclass(frozen=True)
class BitmapHeader:
    """Fields read from the fixed header offsets. Optional ones need a longer buffer."""

    pixel_offset: int
    width: int
    height: int
    signature: bytes = b""
    file_size: Optional[int] = None
    bits_per_pixel: Optional[int] = None
    compression: Optional[int] = None


@dataclass(frozen=True)
class HeaderParseResult:
    header: BitmapHeader
    kind: HeaderKind
    problems: Tuple[str, ...] = ()

    @property
    def trusted(self) -> bool:
        return self.kind == "trusted"


@dataclass(frozen=True)
class RowLayout:
    """
    Row geometry of the pixel array.

    row_bytes : width * 3
    padding   : filler bytes that round a row up to a multiple of 4
    advance   : distance between consecutive row starts
    rows      : rows actually visited
    extent    : bytes needed after the pixel base to hold every visited pixel
    """

    width: int
    height: int
    row_bytes: int
    padding: int
    advance: int
    rows: int

    @property
    def pixel_count(self) -> int:
        return self.rows * max(self.width, 0)

    @property
    def extent(self) -> int:
        if self.rows <= 0 or self.width <= 0:
            return 0
        return (self.rows - 1) * self.advance + self.row_bytes


__all__ = [
    "BGRTuple",
    "U8Pixels",
    "FilterMode",
    "RowAdvance",
    "HeaderKind",
    "FILTER_MODES",
    "ROW_ADVANCES",
    "BitmapHeader",
    "HeaderParseResult",
    "RowLayout",
]
