"""Runtime configuration and logging setup."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from textual.logging import TextualHandler

from .serializer import TagMode

LOG_LEVEL_ENV = "TAGXML_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    mode: TagMode = TagMode.REGULAR
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None
    echo: bool = False


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {value}")
    return level


def load_config(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Merge parsed command line ARGS over the environment."""
    env = os.environ if environ is None else environ
    raw_level = args.log_level or env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    return AppConfig(
        mode=TagMode.SELF_CLOSING if args.self_closing else TagMode.REGULAR,
        log_level=normalize_log_level(raw_level),
        log_file=Path(args.log_file).expanduser() if args.log_file else None,
        echo=bool(args.print),
    )


def configure_logging(config: AppConfig) -> logging.Handler:
    """Route package logs to a file, or to the Textual console.

    Nothing is written to the terminal the UI is drawing on.
    """
    handler: logging.Handler
    if config.log_file is not None:
        handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = TextualHandler()

    package_logger = logging.getLogger("tagxml")
    package_logger.setLevel(config.log_level)
    package_logger.addHandler(handler)
    return handler
