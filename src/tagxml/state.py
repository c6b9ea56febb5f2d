"""Mutable session state for the tag form."""

from __future__ import annotations

from dataclasses import dataclass, field

from .document import AttributeRow, RawInput
from .navigation import TAG_FIELD, key_field
from .serializer import TagMode


@dataclass
class FormState:
    """Runtime mutable form state."""

    raw: RawInput = field(default_factory=RawInput)
    mode: TagMode = TagMode.REGULAR
    error: bool = False
    focus_request: str | None = TAG_FIELD
    signal: str | None = None  # commit | cancel
    output: str | None = None

    @property
    def rows(self) -> list[AttributeRow]:
        return self.raw.rows

    @property
    def closed(self) -> bool:
        return self.signal is not None

    def set_tag_text(self, text: str) -> None:
        self.raw.tag_text = text

    def set_key_text(self, index: int, text: str) -> None:
        self._row(index).key_text = text

    def set_value_text(self, index: int, text: str) -> None:
        self._row(index).value_text = text

    def append_row(self) -> int:
        self.raw.rows.append(AttributeRow())
        index = len(self.raw.rows) - 1
        self.focus_request = key_field(index)
        return index

    def remove_row(self, index: int) -> AttributeRow:
        row = self._row(index)
        del self.raw.rows[index]
        return row

    def take_focus_request(self) -> str | None:
        target = self.focus_request
        self.focus_request = None
        return target

    def _row(self, index: int) -> AttributeRow:
        if not 0 <= index < len(self.raw.rows):
            raise IndexError(f"no attribute row {index}")
        return self.raw.rows[index]
