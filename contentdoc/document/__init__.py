"""Typed node model for structured rich-text documents."""

from contentdoc.document.models import (
    EMPTY_DOCUMENT_JSON,
    Block,
    BulletList,
    Document,
    DocumentError,
    HardBreak,
    Heading,
    HeadingAttrs,
    Inline,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Text,
    load_document,
)

__all__ = [
    "Block",
    "BulletList",
    "Document",
    "DocumentError",
    "EMPTY_DOCUMENT_JSON",
    "HardBreak",
    "Heading",
    "HeadingAttrs",
    "Inline",
    "ListItem",
    "Mark",
    "OrderedList",
    "Paragraph",
    "Text",
    "load_document",
]
