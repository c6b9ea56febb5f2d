"""Error types raised by the document pipeline and the clipboard."""

from __future__ import annotations


class DocumentError(ValueError):
    """Raised when raw input cannot be turned into a document."""

    kind = "DocumentError"
    default_message = "invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def __str__(self) -> str:
        return self.message


class EmptyTagError(DocumentError):
    kind = "EmptyTag"
    default_message = "Tag cannot be empty."


class InvalidTagCharactersError(DocumentError):
    kind = "InvalidTagCharacters"
    default_message = "Tag contains invalid characters."


class InvalidAttributeKeyError(DocumentError):
    """Raised for a non-blank attribute key that sanitizes to nothing."""

    kind = "InvalidAttributeKey"
    default_message = "Attribute key contains invalid characters."

    def __init__(self, index: int, key_text: str) -> None:
        super().__init__()
        self.index = index
        self.key_text = key_text


class ClipboardError(RuntimeError):
    """Raised when the output cannot be placed on the clipboard."""

    kind = "ClipboardError"


class ClipboardUnavailableError(ClipboardError):
    kind = "ClipboardUnavailable"


class ClipboardWriteFailedError(ClipboardError):
    kind = "ClipboardWriteFailed"


__all__ = [
    "ClipboardError",
    "ClipboardUnavailableError",
    "ClipboardWriteFailedError",
    "DocumentError",
    "EmptyTagError",
    "InvalidAttributeKeyError",
    "InvalidTagCharactersError",
]
