"""
Command-Line Interface (CLI) setup for the Alpha WebM converter.

This module uses Python's `argparse` to define and parse the command-line
arguments. Files are positional; the few options only tune logging and the
exit status.
"""
import argparse
from typing import Optional, Sequence

from .config.common import DEFAULT_LOG_LEVEL, LOG_LEVELS


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments.

    Zero files is not a parse error here; the caller reports it and exits with
    status 1, so `--help` and an empty invocation stay distinguishable.

    Args:
        argv: Arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: ``files``, ``log_level`` and ``strict_exit``.
    """
    parser = argparse.ArgumentParser(
        prog="alphawebm",
        description="Convert videos to VP9 WebM with alpha channel, then optimize the container with mkclean.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE", help="Input video file(s). Output is written to <FILE>.webm."
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=DEFAULT_LOG_LEVEL, choices=LOG_LEVELS,
        help="Set the logging level (logs go to stderr).",
    )
    parser.add_argument(
        "--strict-exit", action="store_true",
        help="Exit with status 1 if any file failed to encode or clean.",
    )
    return parser.parse_args(argv)
