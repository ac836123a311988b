# bmp_filter/cli.py
"""
bmp-filter: grayscale or black/white threshold for 24-bit bitmaps.

Usage:
  bmp-filter [-g] < input.bmp > output.bmp

Modes:
  -g      : grayscale, every channel set to the truncated average intensity
  (none)  : threshold, average >= 128 becomes white, otherwise black

Environment:
  BMP_FILTER_ROW_ADVANCE, BMP_FILTER_STRICT, BMP_FILTER_WORKERS,
  BMP_FILTER_DEBUG (see bmp_filter.config)

Exit codes:
  0 ok, 1 usage, 2 seek, 3 read, 4 allocation, 5 write, 6 bitmap format
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import BinaryIO, List, Optional

from .config import FilterConfig
from .constants import EXIT_OK
from .core_types import FilterMode
from .errors import BmpFilterError, UsageError
from .pipeline import run
from .utils import debug_log, error, key_value_pairs_to_string

GRAYSCALE_FLAG = "-g"


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        usage=f"%(prog)s [{GRAYSCALE_FLAG}]",
        description="Filter a 24-bit bitmap read from stdin and write it to stdout.",
        add_help=False,
        exit_on_error=False,
    )
    parser.add_argument(
        GRAYSCALE_FLAG,
        dest="grayscale",
        action="store_true",
        help="Grayscale output. Omit for black/white threshold output.",
    )
    return parser


def parse_cli_args(argv: List[str], prog: str = "bmp-filter") -> FilterMode:
    """
    Resolve the filter mode from the arguments after the program name.

    At most one argument is accepted. Exactly "-g" selects grayscale; anything
    else, including no argument, selects threshold.
    """
    parser = build_parser(prog)
    if len(argv) > 1:
        raise UsageError(parser.format_usage().strip())
    try:
        args, _unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError:
        return "threshold"
    if args.grayscale and argv == [GRAYSCALE_FLAG]:
        return "grayscale"
    return "threshold"


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> None:
    """CLI entry point. Maps BmpFilterError kinds to exit codes."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    if not prog or prog == "__main__.py":
        prog = "bmp-filter"
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        mode = parse_cli_args(args, prog)
        config = FilterConfig.from_env()
        if config.debug:
            debug_log(
                key_value_pairs_to_string(
                    [
                        ("Mode", mode),
                        ("Row advance", config.row_advance),
                        ("Strict", config.strict),
                        ("Workers", config.workers),
                    ]
                )
            )
        run(
            stdin if stdin is not None else sys.stdin.buffer,
            stdout if stdout is not None else sys.stdout.buffer,
            mode,
            config,
        )
    except UsageError as e:
        if e.message.startswith("usage:"):
            print("Usage:" + e.message[len("usage:") :], file=sys.stderr, flush=True)
        else:
            error(e.message)
        sys.exit(e.exit_code)
    except BmpFilterError as e:
        error(e.message)
        sys.exit(e.exit_code)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
