"""Raw form input and the validated document built from it."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .errors import EmptyTagError, InvalidAttributeKeyError, InvalidTagCharactersError
from .sanitize import is_identifier, sanitize

logger = logging.getLogger(__name__)


@dataclass
class AttributeRow:
    """One editable key/value row."""

    key_text: str = ""
    value_text: str = ""


@dataclass
class RawInput:
    """Text exactly as typed by the user."""

    tag_text: str = ""
    rows: list[AttributeRow] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, tag_text: str, pairs: Sequence[tuple[str, str]] = ()) -> RawInput:
        return cls(tag_text=tag_text, rows=[AttributeRow(key, value) for key, value in pairs])


@dataclass(frozen=True)
class Attribute:
    """Validated attribute. ``value`` is None for a boolean attribute."""

    key: str
    value: str | None = None


@dataclass(frozen=True)
class Document:
    """Validated element ready for serialization."""

    tag: str
    attributes: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        if not is_identifier(self.tag):
            raise ValueError(f"invalid tag name: {self.tag!r}")
        for attr in self.attributes:
            if not is_identifier(attr.key):
                raise ValueError(f"invalid attribute key: {attr.key!r}")

    def pairs(self) -> list[tuple[str, str | None]]:
        return [(attr.key, attr.value) for attr in self.attributes]


def build(raw: RawInput) -> Document:
    """Validate RAW and return a Document.

    Raises a ``DocumentError`` subclass for the first problem found. Rows
    with a blank key are skipped; a non-blank key that sanitizes to nothing
    fails the whole build.
    """
    if not raw.tag_text.strip():
        raise EmptyTagError()

    tag = sanitize(raw.tag_text)
    if not tag:
        raise InvalidTagCharactersError()

    attributes: list[Attribute] = []
    for index, row in enumerate(raw.rows):
        key = sanitize(row.key_text)
        if not key:
            if not row.key_text.strip():
                continue
            raise InvalidAttributeKeyError(index, row.key_text)

        value = row.value_text.strip()
        attributes.append(Attribute(key=key, value=value or None))

    logger.debug("built <%s> with %d attribute(s)", tag, len(attributes))
    return Document(tag=tag, attributes=tuple(attributes))
