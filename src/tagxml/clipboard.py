"""System clipboard access."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pyperclip

from .errors import ClipboardUnavailableError, ClipboardWriteFailedError

ClipboardWriter = Callable[[str], None]
logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """Place TEXT on the system clipboard via pyperclip."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailableError(f"Clipboard not available: {exc}") from exc
    except OSError as exc:
        raise ClipboardWriteFailedError(f"Failed to copy to clipboard: {exc}") from exc
    logger.debug("copied %d char(s) to clipboard", len(text))
