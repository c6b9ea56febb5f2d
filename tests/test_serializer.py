from tagxml.document import Attribute, Document, RawInput
from tagxml.serializer import PREVIEW_PLACEHOLDER, TagMode, preview, serialize


def test_serialize_regular_element() -> None:
    doc = Document(
        tag="div",
        attributes=(Attribute("class", 'a"b'), Attribute("disabled", None)),
    )

    assert serialize(doc) == '<div class="a&quot;b" disabled>\n\n</div>'


def test_serialize_passes_other_markup_characters_through() -> None:
    doc = Document(tag="a", attributes=(Attribute("href", "?x=1&y=<2>"),))

    assert serialize(doc) == '<a href="?x=1&y=<2>">\n\n</a>'


def test_serialize_without_attributes() -> None:
    assert serialize(Document(tag="br")) == "<br>\n\n</br>"


def test_serialize_self_closing() -> None:
    doc = Document(tag="div", attributes=(Attribute("class", "container"),))

    assert serialize(doc, TagMode.SELF_CLOSING) == '<div class="container" />\n'


def test_tag_mode_toggles() -> None:
    assert TagMode.REGULAR.toggled() is TagMode.SELF_CLOSING
    assert TagMode.SELF_CLOSING.toggled() is TagMode.REGULAR


def test_preview_reports_placeholder_errors_and_output() -> None:
    assert preview(RawInput()) == PREVIEW_PLACEHOLDER
    assert preview(RawInput(tag_text="!!!")) == "Tag contains invalid characters."
    assert preview(RawInput.from_pairs("p", [("?", "x")])) == "Attribute key contains invalid characters."
    assert preview(RawInput.from_pairs("p", [("id", "x")]), TagMode.SELF_CLOSING) == '<p id="x" />\n'
