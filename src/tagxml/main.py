"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, configure_logging, load_config
from .tui import run_tui

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagxml",
        description="Type a tag and its attributes; the XML element is copied to the clipboard.",
    )
    parser.add_argument(
        "--self-closing",
        action="store_true",
        help="start in self-closing mode (<tag />); Ctrl+S toggles it at runtime",
    )
    parser.add_argument(
        "--log-level",
        help=f"log level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="write logs to this file instead of the Textual console")
    parser.add_argument(
        "--print",
        action="store_true",
        help="also print the copied element on stdout",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(config)
    logger.info("starting tagxml")

    output = run_tui(config.mode)
    if output is None:
        return 1
    if config.echo:
        sys.stdout.write(output if output.endswith("\n") else output + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
