"""Shared fixtures: hand-built and Pillow-written 24-bit bitmaps."""

import io
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

Pixel = Tuple[int, int, int]


def build_bitmap(
    rows: Sequence[Sequence[Pixel]],
    *,
    padded: bool = True,
    pad_byte: int = 0,
    signature: bytes = b"BM",
    pixel_offset: int = 54,
    width: Optional[int] = None,
    height: Optional[int] = None,
    bits_per_pixel: int = 24,
    trailing: bytes = b"",
) -> bytearray:
    """
    Raw bitmap bytes: 54-byte header, then rows of BGR pixels in the given
    order. padded=False packs rows back to back with no filler.
    """
    w = len(rows[0]) if rows else 0
    h = len(rows)
    row_bytes = w * 3
    padding = (4 - row_bytes % 4) % 4 if padded else 0

    body = bytearray()
    for row in rows:
        for b, g, r in row:
            body += bytes((b, g, r))
        body += bytes([pad_byte]) * padding
    body += trailing

    header = bytearray(54)
    header[0:2] = signature
    header[2:6] = (54 + len(body)).to_bytes(4, "little")
    header[10:14] = pixel_offset.to_bytes(4, "little")
    header[14:18] = (40).to_bytes(4, "little")
    header[18:22] = (w if width is None else width).to_bytes(4, "little", signed=True)
    header[22:26] = (h if height is None else height).to_bytes(4, "little", signed=True)
    header[26:28] = (1).to_bytes(2, "little")
    header[28:30] = bits_per_pixel.to_bytes(2, "little")
    header[34:38] = len(body).to_bytes(4, "little")
    return header + body


def pillow_bitmap(rgb: np.ndarray) -> bytearray:
    """Encode an (H, W, 3) RGB uint8 array as a BMP file with Pillow."""
    out = io.BytesIO()
    Image.fromarray(rgb).save(out, format="BMP")
    return bytearray(out.getvalue())


def pillow_decode(data: bytes) -> np.ndarray:
    """Decode BMP bytes back to an (H, W, 3) RGB uint8 array with Pillow."""
    with Image.open(io.BytesIO(bytes(data))) as im:
        return np.array(im.convert("RGB"), dtype=np.uint8)


SCENARIO_ROWS: List[List[Pixel]] = [
    [(0, 0, 0), (255, 255, 255)],
    [(10, 20, 30), (200, 100, 50)],
]


@pytest.fixture
def make_bitmap() -> Callable[..., bytearray]:
    return build_bitmap


@pytest.fixture
def encode_bmp() -> Callable[[np.ndarray], bytearray]:
    return pillow_bitmap


@pytest.fixture
def decode_bmp() -> Callable[[bytes], np.ndarray]:
    return pillow_decode


@pytest.fixture
def scenario_rows() -> List[List[Pixel]]:
    return [list(row) for row in SCENARIO_ROWS]


@pytest.fixture
def scenario_bitmap() -> bytearray:
    """2x2 bitmap with padded rows: (0,0,0) (255,255,255) / (10,20,30) (200,100,50)."""
    return build_bitmap(SCENARIO_ROWS)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def random_rgb(rng) -> Callable[[int, int], np.ndarray]:
    def _make(width: int, height: int) -> np.ndarray:
        return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)

    return _make
