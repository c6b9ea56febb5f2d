"""Render documents as XML element text."""

from __future__ import annotations

from enum import Enum

from .document import Document, RawInput, build
from .errors import DocumentError

PREVIEW_PLACEHOLDER = "(type something...)"


class TagMode(str, Enum):
    """Shape of the generated element."""

    REGULAR = "regular"  # <tag>\n\n</tag>
    SELF_CLOSING = "self-closing"  # <tag />\n

    def toggled(self) -> TagMode:
        if self is TagMode.REGULAR:
            return TagMode.SELF_CLOSING
        return TagMode.REGULAR


def escape_value(value: str) -> str:
    # Only quotes are escaped; &, < and > pass through verbatim.
    return value.replace('"', "&quot;")


def render_attributes(doc: Document) -> str:
    parts: list[str] = []
    for attr in doc.attributes:
        if attr.value is None:
            parts.append(f" {attr.key}")
        else:
            parts.append(f' {attr.key}="{escape_value(attr.value)}"')
    return "".join(parts)


def serialize(doc: Document, mode: TagMode = TagMode.REGULAR) -> str:
    """Render DOC as an element string.

    Regular elements keep an empty line between the opening and closing tag
    so the caller has somewhere to type the content.
    """
    opening = f"<{doc.tag}{render_attributes(doc)}"
    if mode is TagMode.SELF_CLOSING:
        return f"{opening} />\n"
    return f"{opening}>\n\n</{doc.tag}>"


def preview(raw: RawInput, mode: TagMode = TagMode.REGULAR) -> str:
    """Best-effort rendering of in-progress input for display."""
    if not raw.tag_text.strip():
        return PREVIEW_PLACEHOLDER
    try:
        return serialize(build(raw), mode)
    except DocumentError as exc:
        return str(exc)
