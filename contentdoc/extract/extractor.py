"""Plain-text extraction and structured-content detection for stored documents.

Both functions work on the raw parsed JSON rather than the typed model, so
documents written by the editor with node types or marks this package never
produces (italic, links, blockquotes) are still handled.
"""

from __future__ import annotations

import json
import re
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")


def _parse(content: str) -> Any:
    """Parse JSON, returning None when the string is not JSON."""
    try:
        return json.loads(content)
    except (json.JSONDecodeError, TypeError, RecursionError):
        return None


def _node_text(node: Any) -> str:
    if not isinstance(node, dict):
        return ""
    if node.get("type") == "text":
        text = node.get("text")
        return text if isinstance(text, str) else ""
    children = node.get("content")
    if isinstance(children, list):
        return "".join(_node_text(child) for child in children)
    return ""


def extract_plain_text(content: str | None) -> str:
    """Return the text of a serialized document, for previews and search.

    Legacy text that does not parse as JSON is returned unchanged. Text
    within a block is concatenated; top-level blocks are joined with a space.
    """
    if not content:
        return ""

    parsed = _parse(content)
    # None also covers a literal "null", which has no tree to walk.
    if parsed is None:
        return content
    if not isinstance(parsed, dict):
        return ""

    blocks = parsed.get("content")
    if not isinstance(blocks, list):
        return ""
    return " ".join(_node_text(block) for block in blocks)


def is_structured_document(content: str | None) -> bool:
    """True when content is a serialized document rather than legacy text."""
    if not content:
        return False

    parsed = _parse(content)
    return (
        isinstance(parsed, dict)
        and parsed.get("type") == "doc"
        and isinstance(parsed.get("content"), list)
    )


def make_preview(content: str | None, max_chars: int = 200, ellipsis: str = "...") -> str:
    """Short single-line snippet of stored content.

    Structured content goes through extract_plain_text, legacy text is used
    as-is. Text over ``max_chars`` is cut at the last word boundary.
    """
    text = extract_plain_text(content) if is_structured_document(content) else (content or "")
    text = _WHITESPACE_RE.sub(" ", text).strip()
    if len(text) <= max_chars:
        return text

    cut = text[:max_chars]
    if not text[max_chars].isspace():
        boundary = cut.rfind(" ")
        if boundary > 0:
            cut = cut[:boundary]
    return cut.rstrip() + ellipsis
