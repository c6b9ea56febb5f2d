"""Identifier cleanup for tag names and attribute keys."""

from __future__ import annotations

_EXTRA_IDENTIFIER_CHARS = frozenset("_-")


def sanitize(text: str) -> str:
    """Turn free-form text into an identifier fragment.

    Whitespace runs become a single ``_`` (leading and trailing runs are
    dropped), then everything that is not alphanumeric, ``_`` or ``-`` is
    removed. The result may be empty.
    """
    joined = "_".join(text.split())
    # str.isalnum on purpose: non-ASCII letters and digits (é, ²) are kept.
    return "".join(ch for ch in joined if ch.isalnum() or ch in _EXTRA_IDENTIFIER_CHARS)


def is_identifier(text: str) -> bool:
    return bool(text) and sanitize(text) == text
