# bmp_filter/utils.py
from __future__ import annotations

"""
Shared helpers: compact formatting and tidy logging.

stdout carries the bitmap, so every log line goes to stderr.
"""

import sys
from typing import Any, Iterable, List, Tuple


#  Time / number formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_bool_on_off(value: bool) -> str:
    return "on" if value else "off"


def format_number_compact(value: Any) -> str:
    """Thousands separators for ints, trimmed floats, str() otherwise."""
    if isinstance(value, bool):
        return format_bool_on_off(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3g}"
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """[('Width', 640), ('Strict', False)] -> 'Width: 640  Strict: off'"""
    out: List[str] = []
    for name, value in pairs:
        out.append(f"{name}{eq}{format_number_compact(value)}")
    return sep.join(out)


#  Logging


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=sys.stderr, flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    """Error log line."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single config line, e.g.:
      [header] Width: 640  Height: 480  Pixel offset: 54
    Only printed in debug mode.
    """
    if debug:
        debug_log(f"[{section}] {key_value_pairs_to_string(pairs)}")


#  Row partitioning


def split_rows_into_parts(height: int, parts: int) -> List[Tuple[int, int]]:
    """Partition range [0, height) into ~parts contiguous [start, end) row spans."""
    if height <= 0:
        return []
    parts = max(1, int(parts))
    step = (height + parts - 1) // parts
    return [(start, min(start + step, height)) for start in range(0, height, step)]


__all__ = [
    "format_seconds_compact",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "debug_log",
    "warn",
    "error",
    "print_config_line",
    "split_rows_into_parts",
]
