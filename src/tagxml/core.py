"""Tag form session: the navigation state machine and its effects."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass

from .clipboard import ClipboardWriter, copy_to_clipboard
from .document import build
from .errors import ClipboardError, ClipboardUnavailableError, DocumentError
from .navigation import (
    ACTION_ADD_ROW,
    ACTION_CANCEL,
    ACTION_COMMIT,
    ACTION_TOGGLE_MODE,
    OTHER_FOCUSED,
    TAG_FIELD,
    parse_field,
    resolve_action,
    tab_adds_row,
)
from .serializer import TagMode, preview, serialize
from .state import FormState

Hook = Callable[..., object]
logger = logging.getLogger(__name__)

SIGNAL_COMMIT = "commit"
SIGNAL_CANCEL = "cancel"


@dataclass(frozen=True)
class CycleResult:
    """Outcome of one interaction cycle."""

    handled: bool
    status: str
    error: bool
    focus_request: str | None = None
    signal: str | None = None
    output: str | None = None


class TagSession:
    """One editing session: raw input in, element text out."""

    def __init__(
        self,
        clipboard: ClipboardWriter | None = None,
        *,
        mode: TagMode = TagMode.REGULAR,
    ) -> None:
        self.state = FormState(mode=mode)
        self._clipboard = clipboard if clipboard is not None else copy_to_clipboard
        self._hooks: dict[str, list[Hook]] = defaultdict(list)
        self._status = "ready"
        logger.info("tag session started (mode=%s)", mode.value)

    @property
    def status(self) -> str:
        return self._status

    @property
    def error(self) -> bool:
        return self.state.error

    @property
    def closed(self) -> bool:
        return self.state.closed

    def on(self, event: str, fn: Hook) -> None:
        self._hooks[event].append(fn)

    def emit(self, event: str, *args: object) -> None:
        for fn in self._hooks.get(event, []):
            try:
                fn(self, *args)
            except Exception:
                logger.exception("hook failed for event %s", event)

    def begin_cycle(self) -> str | None:
        """Start a cycle, handing out the focus requested by the previous one."""
        return self.state.take_focus_request()

    def handle_key(self, chord: str, focused: str | None) -> CycleResult:
        """Run one cycle for CHORD pressed while FOCUSED holds focus."""
        if self.closed:
            return self._result(handled=False)

        action = resolve_action(chord)
        if action == ACTION_CANCEL:
            return self.cancel()
        if action == ACTION_ADD_ROW:
            return self._tab(focused)
        if action == ACTION_COMMIT:
            return self.commit()
        if action == ACTION_TOGGLE_MODE:
            return self.toggle_mode()
        return self._result(handled=False)

    def edit_tag(self, text: str) -> None:
        self.state.set_tag_text(text)
        self._clear_error()

    def edit_key(self, index: int, text: str) -> None:
        self.state.set_key_text(index, text)
        self._clear_error()

    def edit_value(self, index: int, text: str) -> None:
        self.state.set_value_text(index, text)
        self._clear_error()

    def add_row(self) -> CycleResult:
        index = self.state.append_row()
        self.state.error = False
        logger.debug("added attribute row %d", index)
        return self._result(handled=True, status=f"added attribute {index + 1}")

    def remove_row(self, index: int) -> CycleResult:
        self.state.remove_row(index)
        self._drop_stale_focus_request()
        self.state.error = False
        logger.debug("removed attribute row %d", index)
        return self._result(handled=True, status=f"removed attribute {index + 1}")

    def toggle_mode(self) -> CycleResult:
        self.state.mode = self.state.mode.toggled()
        logger.info("tag mode: %s", self.state.mode.value)
        return self._result(handled=True, status=f"mode: {self.state.mode.value}")

    def cancel(self) -> CycleResult:
        self.state.signal = SIGNAL_CANCEL
        logger.info("session cancelled")
        self.emit(SIGNAL_CANCEL)
        return self._result(handled=True, status="cancelled")

    def commit(self) -> CycleResult:
        """Build, serialize and copy; ends the session only when the copy succeeds."""
        try:
            doc = build(self.state.raw)
        except DocumentError as exc:
            logger.warning("input rejected (%s): %s", exc.kind, exc)
            self.state.error = True
            return self._result(handled=True, status=str(exc))

        output = serialize(doc, self.state.mode)
        logger.info("generated XML:\n%s", output)

        try:
            self._clipboard(output)
        except ClipboardError as exc:
            logger.error("clipboard write failed (%s): %s", exc.kind, exc)
            self.state.error = True
            return self._result(handled=True, status=str(exc))
        except Exception as exc:
            logger.exception("clipboard collaborator failed")
            self.state.error = True
            error = ClipboardUnavailableError(f"Clipboard not available: {exc}")
            return self._result(handled=True, status=str(error))

        self.state.error = False
        self.state.output = output
        self.state.signal = SIGNAL_COMMIT
        logger.info("copied XML to clipboard")
        self.emit(SIGNAL_COMMIT, output)
        return self._result(handled=True, status="copied to clipboard")

    def preview(self) -> str:
        return preview(self.state.raw, self.state.mode)

    def _tab(self, focused: str | None) -> CycleResult:
        focus = parse_field(focused, len(self.state.rows))
        if not tab_adds_row(focus, len(self.state.rows)):
            return self._result(handled=False)
        return self.add_row()

    def _clear_error(self) -> None:
        self.state.error = False

    def _drop_stale_focus_request(self) -> None:
        requested = self.state.focus_request
        if requested is None or requested == TAG_FIELD:
            return
        if parse_field(requested, len(self.state.rows)).state == OTHER_FOCUSED:
            self.state.focus_request = None

    def _result(self, *, handled: bool, status: str | None = None) -> CycleResult:
        if status is not None:
            self._status = status
        return CycleResult(
            handled=handled,
            status=self._status,
            error=self.state.error,
            focus_request=self.state.focus_request,
            signal=self.state.signal,
            output=self.state.output,
        )
