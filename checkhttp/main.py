"""
Command line entry point: ``check-http [config-file-path]``.
"""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from checkhttp.config import settings
from checkhttp.logging_setup import setup_logging
from checkhttp.runner import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="check-http",
        description=(
            "Check that a URL answers HTTP 200 and send a notification email "
            "when it does not."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="config-file-path",
        help=f"properties file to use (default: path read from {settings.POINTER_PATH})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    # Dash-leading words are paths too, not usage errors.
    args, extra = build_parser().parse_known_args(argv)
    setup_logging(
        level="DEBUG" if args.verbose else settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
    )
    run(args.paths + extra)
    return 0


if __name__ == "__main__":
    sys.exit(main())
