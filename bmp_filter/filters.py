# bmp_filter/filters.py
from __future__ import annotations

"""
Per-pixel filters over BGR byte triples.

Two forms of the same mapping:
  filter_pixel(bgr, mode) : pure scalar version, one pixel in, one pixel out
  apply_filter(pixels, mode) : vectorised, writes into a (..., 3) uint8 view

Both use the truncated average intensity (b + g + r) // 3.
"""

from typing import Sequence

import numpy as np

from .constants import BLACK, THRESHOLD_CUTOFF, WHITE
from .core_types import FILTER_MODES, BGRTuple, FilterMode, U8Pixels


def average_intensity(blue: int, green: int, red: int) -> int:
    """Truncated mean of the three channels (0..255)."""
    return (int(blue) + int(green) + int(red)) // 3


def grayscale_pixel(bgr: Sequence[int]) -> BGRTuple:
    avg = average_intensity(bgr[0], bgr[1], bgr[2])
    return (avg, avg, avg)


def threshold_pixel(bgr: Sequence[int]) -> BGRTuple:
    avg = average_intensity(bgr[0], bgr[1], bgr[2])
    value = WHITE if avg >= THRESHOLD_CUTOFF else BLACK
    return (value, value, value)


def filter_pixel(bgr: Sequence[int], mode: FilterMode) -> BGRTuple:
    if mode == "grayscale":
        return grayscale_pixel(bgr)
    if mode == "threshold":
        return threshold_pixel(bgr)
    raise ValueError(f"unknown filter mode: {mode!r}")


def intensity_map(pixels: U8Pixels) -> np.ndarray:
    """(..., 3) uint8 -> (...) uint8 truncated channel mean."""
    # uint16 holds the 0..765 channel sum
    total = pixels.astype(np.uint16).sum(axis=-1, dtype=np.uint16)
    return (total // 3).astype(np.uint8)


def apply_filter(pixels: U8Pixels, mode: FilterMode) -> None:
    """Filter every pixel of a writable (..., 3) uint8 view in place."""
    if pixels.dtype != np.uint8 or pixels.ndim < 1 or pixels.shape[-1] != 3:
        raise TypeError("expected uint8 (..., 3) pixel array")
    if mode not in FILTER_MODES:
        raise ValueError(f"unknown filter mode: {mode!r}")
    if pixels.size == 0:
        return
    avg = intensity_map(pixels)
    if mode == "threshold":
        avg = np.where(avg >= THRESHOLD_CUTOFF, WHITE, BLACK).astype(np.uint8)
    pixels[...] = avg[..., None]


__all__ = [
    "average_intensity",
    "grayscale_pixel",
    "threshold_pixel",
    "filter_pixel",
    "intensity_map",
    "apply_filter",
]
