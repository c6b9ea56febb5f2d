from tagxml.core import TagSession
from tagxml.serializer import TagMode
from tagxml.ui.controller import FormController


def _new_controller(writes: list[str] | None = None) -> FormController:
    sink = writes if writes is not None else []
    return FormController(TagSession(sink.append))


def test_snapshot_reflects_edits() -> None:
    controller = _new_controller()

    snap = controller.snapshot()
    assert snap.tag_text == ""
    assert snap.rows == ()
    assert not snap.error
    assert snap.mode is TagMode.REGULAR
    assert snap.preview == "(type something...)"
    assert snap.status == "ready"

    controller.handle_tag_changed("section")
    controller.handle_add_row()
    controller.handle_key_changed(0, "id")
    controller.handle_value_changed(0, "intro")

    snap = controller.snapshot()
    assert snap.tag_text == "section"
    assert len(snap.rows) == 1
    row = snap.rows[0]
    assert (row.key_field, row.value_field) == ("attribute-key-0", "attribute-value-0")
    assert (row.key_text, row.value_text) == ("id", "intro")
    assert snap.preview == '<section id="intro">\n\n</section>'


def test_dispatch_tab_then_focus_on_next_cycle() -> None:
    controller = _new_controller()
    assert controller.begin_cycle() == "tag"

    result = controller.dispatch_key_chord("TAB", "tag")

    assert result is not None
    assert result.handled
    assert controller.pop_ui_action() is None
    assert controller.begin_cycle() == "attribute-key-0"


def test_dispatch_enter_produces_commit_action() -> None:
    writes: list[str] = []
    controller = _new_controller(writes)
    controller.handle_tag_changed("div")

    controller.dispatch_key_chord("RET", "tag")

    action = controller.pop_ui_action()
    assert action is not None
    assert action.name == "commit"
    assert action.output == "<div>\n\n</div>"
    assert writes == ["<div>\n\n</div>"]
    assert controller.pop_ui_action() is None


def test_dispatch_escape_produces_cancel_action() -> None:
    controller = _new_controller()

    controller.dispatch_key_chord("escape", "attribute-key-0")

    action = controller.pop_ui_action()
    assert action is not None
    assert action.name == "cancel"


def test_failed_commit_sets_error_without_action() -> None:
    controller = _new_controller()
    controller.handle_tag_changed("???")

    controller.dispatch_key_chord("enter", "tag")

    assert controller.pop_ui_action() is None
    snap = controller.snapshot()
    assert snap.error
    assert snap.status == "Tag contains invalid characters."

    controller.handle_tag_changed("???x")
    assert not controller.snapshot().error


def test_invalid_chord_is_ignored() -> None:
    controller = _new_controller()

    assert controller.dispatch_key_chord("Q-tab", "tag") is None
    assert controller.snapshot().rows == ()


def test_remove_row_through_controller() -> None:
    controller = _new_controller()
    controller.handle_add_row()
    controller.handle_add_row()
    controller.handle_key_changed(1, "keep")

    result = controller.handle_remove_row(0)

    assert result.status == "removed attribute 1"
    assert [row.key_text for row in controller.snapshot().rows] == ["keep"]
