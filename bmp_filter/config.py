# bmp_filter/config.py
"""
Environment-driven run configuration.

  BMP_FILTER_ROW_ADVANCE : "padded" (default) or "packed"
  BMP_FILTER_STRICT      : validate the header and refuse implausible files
  BMP_FILTER_WORKERS     : threads used by the row walker (default 1)
  BMP_FILTER_DEBUG       : emit [debug] lines on stderr
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core_types import ROW_ADVANCES, RowAdvance
from .errors import UsageError

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


def _parse_flag(name: str, raw: Optional[str]) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise UsageError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_workers(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return 1
    try:
        workers = int(raw)
    except ValueError:
        raise UsageError(
            f"BMP_FILTER_WORKERS must be an integer, got {raw!r}"
        ) from None
    if workers < 1:
        raise UsageError(f"BMP_FILTER_WORKERS must be >= 1, got {workers}")
    return workers


def _parse_row_advance(raw: Optional[str]) -> RowAdvance:
    if raw is None or not raw.strip():
        return "padded"
    value = raw.strip().lower()
    if value not in ROW_ADVANCES:
        choices = "|".join(ROW_ADVANCES)
        raise UsageError(
            f"BMP_FILTER_ROW_ADVANCE must be one of {choices}, got {raw!r}"
        )
    return value  # type: ignore[return-value]


@dataclass(frozen=True)
class FilterConfig:
    row_advance: RowAdvance = "padded"
    strict: bool = False
    workers: int = 1
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FilterConfig":
        env = os.environ if environ is None else environ
        return cls(
            row_advance=_parse_row_advance(env.get("BMP_FILTER_ROW_ADVANCE")),
            strict=_parse_flag("BMP_FILTER_STRICT", env.get("BMP_FILTER_STRICT")),
            workers=_parse_workers(env.get("BMP_FILTER_WORKERS")),
            debug=_parse_flag("BMP_FILTER_DEBUG", env.get("BMP_FILTER_DEBUG")),
        )


__all__ = ["FilterConfig"]
