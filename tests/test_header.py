"""Tests for header field extraction and classification."""

import numpy as np
import pytest

from bmp_filter.errors import BitmapFormatError
from bmp_filter.header import (
    header_problems,
    parse_header,
    read_header,
    read_i32_le,
    read_u16_le,
    read_u32_le,
)


def test_little_endian_accessors():
    buf = bytes([0x01, 0x02, 0x03, 0x04, 0xFF, 0xFF, 0xFF, 0xFF])
    assert read_u16_le(buf, 0) == 0x0201
    assert read_u32_le(buf, 0) == 0x04030201
    assert read_i32_le(buf, 4) == -1
    assert read_u32_le(buf, 4) == 0xFFFFFFFF


def test_accessor_past_end_names_field():
    with pytest.raises(BitmapFormatError, match="width"):
        read_i32_le(bytes(20), 18, "width")


def test_pillow_bitmap_is_trusted(encode_bmp, random_rgb):
    data = encode_bmp(random_rgb(5, 3))
    result = parse_header(data)
    assert result.trusted
    assert result.problems == ()
    h = result.header
    assert (h.width, h.height, h.pixel_offset) == (5, 3, 54)
    assert h.signature == b"BM"
    assert h.bits_per_pixel == 24
    assert h.compression == 0
    assert h.file_size == len(data)


def test_negative_height_is_read_signed(make_bitmap):
    data = make_bitmap([[(1, 2, 3)]], height=-1)
    header = read_header(data)
    assert header.height == -1
    assert header.width == 1


def test_too_short_for_dimensions_raises():
    with pytest.raises(BitmapFormatError, match="dimensions"):
        read_header(bytes(25))
    with pytest.raises(BitmapFormatError):
        parse_header(bytearray(10))


def test_short_buffer_reports_missing_optional_fields():
    buf = bytearray(26)
    buf[0:2] = b"BM"
    buf[18:22] = (2).to_bytes(4, "little")
    buf[22:26] = (2).to_bytes(4, "little")
    header = read_header(buf)
    assert header.bits_per_pixel is None
    assert header.compression is None
    problems = header_problems(header, len(buf))
    assert any("shorter than the 54-byte header" in p for p in problems)


def test_lenient_reports_malformed_but_keeps_fields(make_bitmap):
    data = make_bitmap([[(1, 2, 3)] * 2] * 2, signature=b"XX", pixel_offset=60)
    result = parse_header(data)
    assert result.kind == "malformed"
    assert not result.trusted
    assert (result.header.width, result.header.height) == (2, 2)
    assert result.header.pixel_offset == 60
    joined = " ".join(result.problems)
    assert "signature" in joined
    assert "pixel array offset is 60" in joined


@pytest.mark.parametrize(
    "kwargs, needle",
    [
        ({"signature": b"PK"}, "signature"),
        ({"pixel_offset": 1078}, "offset"),
        ({"bits_per_pixel": 8}, "bit depth"),
        ({"width": 0}, "width"),
        ({"width": -4}, "width"),
        ({"height": 0}, "height"),
    ],
)
def test_strict_rejects_implausible_headers(make_bitmap, kwargs, needle):
    data = make_bitmap([[(9, 9, 9)]], **kwargs)
    with pytest.raises(BitmapFormatError, match=needle):
        parse_header(data, strict=True)


def test_strict_accepts_top_down_bitmap(make_bitmap):
    data = make_bitmap([[(9, 9, 9)]], height=-1)
    assert parse_header(data, strict=True).trusted


def test_compression_flagged(encode_bmp):
    data = encode_bmp(np.zeros((2, 2, 3), dtype=np.uint8))
    data[30:34] = (1).to_bytes(4, "little")
    result = parse_header(data)
    assert any("compression" in p for p in result.problems)
