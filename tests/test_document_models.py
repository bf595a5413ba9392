"""Tests for the document node model and its JSON form."""

import json

import pytest
from pydantic import ValidationError

from contentdoc.document.models import (
    EMPTY_DOCUMENT_JSON,
    BulletList,
    Document,
    DocumentError,
    HardBreak,
    Heading,
    HeadingAttrs,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Text,
    load_document,
)


def _sample_document():
    return Document(
        content=[
            Heading(attrs=HeadingAttrs(level=2), content=[Text(text="Overview")]),
            Paragraph(
                content=[
                    Text(text="bold", marks=[Mark()]),
                    Text(text=" and plain"),
                    HardBreak(),
                    Text(text="next line"),
                ]
            ),
            BulletList(content=[ListItem(content=[Paragraph(content=[Text(text="a")])])]),
            OrderedList(content=[ListItem(content=[Paragraph(content=[Text(text="b")])])]),
        ]
    )


# ── Serialized form ─────────────────────────────────────────────────


class TestSerialization:
    def test_empty_document_json(self):
        assert EMPTY_DOCUMENT_JSON == '{"type":"doc","content":[]}'

    def test_paragraph_json_is_compact_with_editor_field_names(self):
        doc = Document(content=[Paragraph(content=[Text(text="Hello")])])
        assert doc.to_json() == (
            '{"type":"doc","content":[{"type":"paragraph","content":'
            '[{"type":"text","text":"Hello"}]}]}'
        )

    def test_unmarked_text_omits_marks(self):
        data = Document(content=[Paragraph(content=[Text(text="x")])]).to_dict()
        assert "marks" not in data["content"][0]["content"][0]

    def test_hard_break_has_only_type(self):
        data = Document(content=[Paragraph(content=[HardBreak()])]).to_dict()
        assert data["content"][0]["content"][0] == {"type": "hardBreak"}

    def test_heading_attrs(self):
        data = _sample_document().to_dict()
        assert data["content"][0]["attrs"] == {"level": 2}

    def test_bold_mark(self):
        data = _sample_document().to_dict()
        assert data["content"][1]["content"][0]["marks"] == [{"type": "bold"}]

    def test_list_types(self):
        data = _sample_document().to_dict()
        assert data["content"][2]["type"] == "bulletList"
        assert data["content"][3]["type"] == "orderedList"
        assert data["content"][2]["content"][0]["type"] == "listItem"

    def test_round_trip_reproduces_tree(self):
        doc = _sample_document()
        loaded = load_document(doc.to_json())
        assert loaded.to_dict() == doc.to_dict()
        assert isinstance(loaded.content[0], Heading)
        assert isinstance(loaded.content[2], BulletList)

    def test_round_trip_ignores_key_order(self):
        raw = json.dumps(
            {"content": [{"content": [{"text": "Hi", "type": "text"}], "type": "paragraph"}], "type": "doc"}
        )
        loaded = load_document(raw)
        assert loaded.content[0].content[0].text == "Hi"


# ── Model invariants ────────────────────────────────────────────────


class TestModelInvariants:
    def test_empty_document_is_valid(self):
        doc = Document()
        assert doc.is_empty
        assert doc.content == []

    def test_heading_level_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            HeadingAttrs(level=4)

    def test_heading_level_zero_rejected(self):
        with pytest.raises(ValidationError):
            HeadingAttrs(level=0)

    def test_heading_level_property(self):
        heading = Heading(attrs=HeadingAttrs(level=3), content=[])
        assert heading.level == 3

    def test_unknown_mark_rejected(self):
        with pytest.raises(ValidationError):
            Mark(type="italic")

    def test_is_bold(self):
        assert Text(text="x", marks=[Mark()]).is_bold
        assert not Text(text="x").is_bold
        assert not Text(text="x", marks=[]).is_bold

    def test_separate_content_lists(self):
        a = Document()
        b = Document()
        a.content.append(Paragraph())
        assert b.content == []


# ── load_document ───────────────────────────────────────────────────


class TestLoadDocument:
    def test_not_json_raises(self):
        with pytest.raises(DocumentError):
            load_document("not json")

    def test_wrong_root_type_raises(self):
        with pytest.raises(DocumentError):
            load_document('{"type":"paragraph","content":[]}')

    def test_unknown_node_type_raises(self):
        with pytest.raises(DocumentError):
            load_document('{"type":"doc","content":[{"type":"blockquote","content":[]}]}')

    def test_invalid_heading_level_raises(self):
        raw = '{"type":"doc","content":[{"type":"heading","attrs":{"level":7},"content":[]}]}'
        with pytest.raises(DocumentError) as exc_info:
            load_document(raw)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_empty_document_loads(self):
        assert load_document(EMPTY_DOCUMENT_JSON).is_empty
