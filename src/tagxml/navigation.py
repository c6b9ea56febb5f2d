"""Focus model and key actions for the tag form.

Field identifiers are positional: ``tag``, ``attribute-key-<i>`` and
``attribute-value-<i>`` with ``i`` counted from zero in current row order.
Removing a row renumbers every row after it.
"""

from __future__ import annotations

from dataclasses import dataclass

from .keymap import Chord, is_plain, parse_chord

TAG_FIELD = "tag"
KEY_FIELD_PREFIX = "attribute-key-"
VALUE_FIELD_PREFIX = "attribute-value-"

TAG_FOCUSED = "tag-focused"
KEY_FOCUSED = "attribute-key-focused"
VALUE_FOCUSED = "attribute-value-focused"
OTHER_FOCUSED = "other-focused"

ACTION_CANCEL = "cancel"
ACTION_ADD_ROW = "add-attribute"
ACTION_COMMIT = "commit"
ACTION_TOGGLE_MODE = "toggle-mode"

# Checked in order; the first matching binding wins.
KEY_ACTIONS: tuple[tuple[str, str], ...] = (
    ("escape", ACTION_CANCEL),
    ("tab", ACTION_ADD_ROW),
    ("enter", ACTION_COMMIT),
)
CHORD_ACTIONS: dict[Chord, str] = {
    "C-s": ACTION_TOGGLE_MODE,
}


@dataclass(frozen=True)
class Focus:
    """Which logical field holds input focus."""

    state: str
    index: int | None = None


def key_field(index: int) -> str:
    return f"{KEY_FIELD_PREFIX}{index}"


def value_field(index: int) -> str:
    return f"{VALUE_FIELD_PREFIX}{index}"


def parse_field(field_id: str | None, row_count: int | None = None) -> Focus:
    """Map a field identifier to a focus state.

    Unknown identifiers, and row fields past ROW_COUNT when it is given,
    count as ``other-focused``.
    """
    if field_id == TAG_FIELD:
        return Focus(TAG_FOCUSED)
    if not field_id:
        return Focus(OTHER_FOCUSED)

    for prefix, state in ((KEY_FIELD_PREFIX, KEY_FOCUSED), (VALUE_FIELD_PREFIX, VALUE_FOCUSED)):
        if not field_id.startswith(prefix):
            continue
        suffix = field_id[len(prefix) :]
        if not suffix.isdigit():
            return Focus(OTHER_FOCUSED)
        index = int(suffix)
        if row_count is not None and index >= row_count:
            return Focus(OTHER_FOCUSED)
        return Focus(state, index)

    return Focus(OTHER_FOCUSED)


def resolve_action(chord: str) -> str | None:
    """Return the form action bound to CHORD, if any."""
    try:
        canonical = parse_chord(chord)
    except ValueError:
        return None

    for key, action in KEY_ACTIONS:
        if is_plain(canonical, key):
            return action
    return CHORD_ACTIONS.get(canonical)


def tab_adds_row(focus: Focus, row_count: int) -> bool:
    """Tab grows the list only from an empty tag form or the last value field."""
    if focus.state == TAG_FOCUSED:
        return row_count == 0
    if focus.state == VALUE_FOCUSED:
        return row_count > 0 and focus.index == row_count - 1
    return False
