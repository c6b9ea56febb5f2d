import pytest

from tagxml.document import Attribute, AttributeRow, Document, RawInput, build
from tagxml.errors import (
    DocumentError,
    EmptyTagError,
    InvalidAttributeKeyError,
    InvalidTagCharactersError,
)


@pytest.mark.parametrize("tag_text", ["", "   ", "\t\n"])
def test_build_rejects_blank_tag(tag_text: str) -> None:
    with pytest.raises(EmptyTagError) as excinfo:
        build(RawInput(tag_text=tag_text))
    assert excinfo.value.kind == "EmptyTag"
    assert str(excinfo.value) == "Tag cannot be empty."


def test_build_rejects_tag_without_identifier_chars() -> None:
    with pytest.raises(InvalidTagCharactersError) as excinfo:
        build(RawInput(tag_text="???"))
    assert excinfo.value.kind == "InvalidTagCharacters"


def test_build_drops_blank_keys_and_keeps_order() -> None:
    raw = RawInput.from_pairs("div", [("key1", "val1"), ("", "ignored"), ("flag", "")])

    doc = build(raw)

    assert doc.tag == "div"
    assert doc.pairs() == [("key1", "val1"), ("flag", None)]


def test_build_fails_on_first_invalid_key() -> None:
    raw = RawInput.from_pairs("div", [("id", "main"), ("!!!", "x"), ("class", "c")])

    with pytest.raises(InvalidAttributeKeyError) as excinfo:
        build(raw)

    assert excinfo.value.kind == "InvalidAttributeKey"
    assert excinfo.value.index == 1
    assert excinfo.value.key_text == "!!!"
    assert isinstance(excinfo.value, DocumentError)
    assert isinstance(excinfo.value, ValueError)


def test_build_trims_values_but_keeps_raw_characters() -> None:
    raw = RawInput.from_pairs(" my tag ", [(" data id ", '  a "b" & <c>  '), ("hidden", "   ")])

    doc = build(raw)

    assert doc.tag == "my_tag"
    assert doc.attributes == (
        Attribute("data_id", 'a "b" & <c>'),
        Attribute("hidden", None),
    )


def test_build_preserves_duplicate_keys() -> None:
    raw = RawInput.from_pairs("a", [("x", "1"), ("x", "2"), ("x", "")])

    assert build(raw).pairs() == [("x", "1"), ("x", "2"), ("x", None)]


def test_build_does_not_mutate_input() -> None:
    raw = RawInput(tag_text=" p ", rows=[AttributeRow(" k ", " v ")])

    build(raw)

    assert raw == RawInput(tag_text=" p ", rows=[AttributeRow(" k ", " v ")])


def test_document_rejects_non_identifier_names() -> None:
    with pytest.raises(ValueError, match="invalid tag name"):
        Document(tag="")
    with pytest.raises(ValueError, match="invalid attribute key"):
        Document(tag="div", attributes=(Attribute("a b"),))
