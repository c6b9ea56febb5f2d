"""UI adapter that maps widget events to tag session operations."""

from __future__ import annotations

from dataclasses import dataclass

from ..core import SIGNAL_CANCEL, SIGNAL_COMMIT, CycleResult, TagSession
from ..keymap import parse_chord
from ..navigation import key_field, value_field
from ..serializer import TagMode


@dataclass(frozen=True)
class RowSnapshot:
    """Immutable per-row rendering state."""

    index: int
    key_text: str
    value_text: str
    key_field: str
    value_field: str


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable form state for rendering."""

    tag_text: str
    rows: tuple[RowSnapshot, ...]
    error: bool
    mode: TagMode
    preview: str
    status: str


@dataclass(frozen=True)
class UIAction:
    """UI actions consumed by the Textual layer."""

    name: str
    output: str | None = None


class FormController:
    """Stateful adapter between UI events and the tag session."""

    def __init__(self, session: TagSession) -> None:
        self.session = session
        self._ui_action: UIAction | None = None

    def snapshot(self) -> FormSnapshot:
        state = self.session.state
        rows = tuple(
            RowSnapshot(
                index=index,
                key_text=row.key_text,
                value_text=row.value_text,
                key_field=key_field(index),
                value_field=value_field(index),
            )
            for index, row in enumerate(state.rows)
        )
        return FormSnapshot(
            tag_text=state.raw.tag_text,
            rows=rows,
            error=state.error,
            mode=state.mode,
            preview=self.session.preview(),
            status=self.session.status,
        )

    def begin_cycle(self) -> str | None:
        return self.session.begin_cycle()

    def dispatch_key_chord(self, chord: str, focused: str | None) -> CycleResult | None:
        """Feed one chord to the session; None means the chord was not a key."""
        self._ui_action = None
        try:
            canonical = parse_chord(chord)
        except ValueError:
            return None

        result = self.session.handle_key(canonical, focused)
        self._ui_action = self._action_for(result)
        return result

    def handle_tag_changed(self, text: str) -> None:
        self.session.edit_tag(text)

    def handle_key_changed(self, index: int, text: str) -> None:
        self.session.edit_key(index, text)

    def handle_value_changed(self, index: int, text: str) -> None:
        self.session.edit_value(index, text)

    def handle_add_row(self) -> CycleResult:
        self._ui_action = None
        return self.session.add_row()

    def handle_remove_row(self, index: int) -> CycleResult:
        self._ui_action = None
        return self.session.remove_row(index)

    def pop_ui_action(self) -> UIAction | None:
        action = self._ui_action
        self._ui_action = None
        return action

    def _action_for(self, result: CycleResult) -> UIAction | None:
        if not result.handled:
            return None
        if result.signal == SIGNAL_COMMIT:
            return UIAction(name="commit", output=result.output)
        if result.signal == SIGNAL_CANCEL:
            return UIAction(name="cancel")
        return None
