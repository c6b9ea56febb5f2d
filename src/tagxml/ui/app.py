"""Textual TUI application for tagxml."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, Static

from ..core import TagSession
from ..navigation import KEY_FOCUSED, TAG_FIELD, VALUE_FOCUSED, parse_field
from ..serializer import TagMode
from .controller import FormController, FormSnapshot, RowSnapshot

ADD_ROW_BUTTON_ID = "add-row"
REMOVE_BUTTON_PREFIX = "remove-"


def _row_widget(row: RowSnapshot) -> Horizontal:
    return Horizontal(
        Input(value=row.key_text, placeholder="key", id=row.key_field, classes="attr-key"),
        Input(
            value=row.value_text,
            placeholder="value (empty for boolean)",
            id=row.value_field,
            classes="attr-value",
        ),
        Button("X", id=f"{REMOVE_BUTTON_PREFIX}{row.index}", classes="remove-row"),
        classes="row",
    )


class TagXmlApp(App[str | None]):
    """Core Textual frontend for tagxml."""

    TITLE = "Tag XML Generator"

    CSS = """
    Screen {
        layout: vertical;
    }

    #form {
        height: auto;
        border: round $accent;
        padding: 0 1;
    }

    #form.-error {
        border: round red;
    }

    .row {
        height: auto;
    }

    .attr-key {
        width: 2fr;
    }

    .attr-value {
        width: 3fr;
    }

    .remove-row {
        min-width: 5;
        width: 5;
    }

    #preview {
        height: auto;
        margin: 1 1 0 1;
        color: $text-muted;
    }

    #status {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text;
    }
    """

    BINDINGS = [
        # priority=True so the focused Input never consumes these first.
        Binding("escape", "form_key('escape')", "Cancel", priority=True),
        Binding("tab", "form_key('tab')", "Add attribute", show=False, priority=True),
        Binding("enter", "form_key('enter')", "Copy", priority=True),
        Binding("ctrl+s", "form_key('C-s')", "Toggle mode", priority=True),
    ]

    def __init__(self, session: TagSession | None = None, *, mode: TagMode = TagMode.REGULAR) -> None:
        super().__init__()
        self.session = session or TagSession(mode=mode)
        self.controller = FormController(self.session)
        self._signal: str | None = None

    @property
    def signal(self) -> str | None:
        return self._signal

    def compose(self) -> ComposeResult:
        with Vertical(id="form"):
            yield Label("Tag:")
            yield Input(placeholder="<tag_name>", id=TAG_FIELD)
            yield Label("Attributes (Key / Value):")
            yield Vertical(id="rows")
            yield Button("+ Add Attribute", id=ADD_ROW_BUTTON_ID)
        yield Static(id="preview")
        yield Static(id="status")

    def on_mount(self) -> None:
        self._refresh_view()
        self._schedule_focus()

    async def action_form_key(self, chord: str) -> None:
        focused = self.focused.id if self.focused is not None else None
        result = self.controller.dispatch_key_chord(chord, focused)
        if result is not None and not result.handled:
            if chord == "tab":
                self.action_focus_next()
            return

        await self._sync_rows()
        self._refresh_view()
        if self._apply_ui_action():
            return
        self._schedule_focus()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == ADD_ROW_BUTTON_ID:
            self.controller.handle_add_row()
        elif button_id.startswith(REMOVE_BUTTON_PREFIX):
            self.controller.handle_remove_row(int(button_id[len(REMOVE_BUTTON_PREFIX) :]))
        else:
            return
        event.stop()
        await self._sync_rows()
        self._refresh_view()
        self._schedule_focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        snapshot = self.controller.snapshot()
        field_id = event.input.id
        if field_id == TAG_FIELD:
            if event.value != snapshot.tag_text:
                self.controller.handle_tag_changed(event.value)
                self._refresh_view()
            return

        focus = parse_field(field_id, len(snapshot.rows))
        if focus.index is None:
            return
        row = snapshot.rows[focus.index]
        if focus.state == KEY_FOCUSED and event.value != row.key_text:
            self.controller.handle_key_changed(focus.index, event.value)
        elif focus.state == VALUE_FOCUSED and event.value != row.value_text:
            self.controller.handle_value_changed(focus.index, event.value)
        else:
            return
        self._refresh_view()

    def _apply_ui_action(self) -> bool:
        action = self.controller.pop_ui_action()
        if action is None:
            return False
        self._signal = action.name
        # Exit from a later callback, not from inside the key handler.
        if action.name == "commit":
            self.call_later(self.exit, action.output)
            return True
        if action.name == "cancel":
            self.call_later(self.exit, None)
            return True
        return False

    def _schedule_focus(self) -> None:
        self.call_after_refresh(self._grant_focus)

    def _grant_focus(self) -> None:
        target = self.controller.begin_cycle()
        if target is None:
            return
        matches = self.query(f"#{target}")
        if matches:
            matches.first().focus()

    async def _sync_rows(self) -> None:
        snapshot = self.controller.snapshot()
        container = self.query_one("#rows", Vertical)
        if len(container.children) == len(snapshot.rows):
            return
        await container.remove_children()
        if snapshot.rows:
            await container.mount(*(_row_widget(row) for row in snapshot.rows))

    def _refresh_view(self) -> None:
        snapshot = self.controller.snapshot()
        self.query_one("#form", Vertical).set_class(snapshot.error, "-error")
        self.query_one("#preview", Static).update(Text(snapshot.preview))
        self.query_one("#status", Static).update(Text(self._status_line(snapshot)))

    def _status_line(self, snapshot: FormSnapshot) -> str:
        return f"rows={len(snapshot.rows)} mode={snapshot.mode.value} | {snapshot.status}"
