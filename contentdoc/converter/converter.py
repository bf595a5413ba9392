"""Legacy text to structured document converters."""

from __future__ import annotations

import logging
import re

from contentdoc.converter.models import ConversionResult, FormatChoice
from contentdoc.document.models import (
    BulletList,
    Document,
    HardBreak,
    Heading,
    HeadingAttrs,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Text,
)

logger = logging.getLogger(__name__)

_HEADING_MARKERS: tuple[tuple[str, int], ...] = (("# ", 1), ("## ", 2), ("### ", 3))
_BULLET_MARKERS: tuple[str, ...] = ("- ", "* ")
_ORDERED_RE = re.compile(r"^\d+\.\s")
_BOLD_DELIMITER = "**"

# Any one of these anywhere in the text selects the markdown converter.
_MARKDOWN_INDICATORS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^#{1,6}\s", re.MULTILINE),
    re.compile(r"^\*\s", re.MULTILINE),
    re.compile(r"^-\s", re.MULTILINE),
    re.compile(r"^\d+\.\s", re.MULTILINE),
    re.compile(r"\*\*.*\*\*"),
    re.compile(r"\[.*\]\(.*\)"),
)


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def plain_text_to_document(text: str) -> Document:
    """Convert plain text to a document.

    Blank lines separate paragraphs; single newlines inside a paragraph become
    hard breaks. Empty or whitespace-only input gives an empty document.
    """
    blocks: list[Paragraph] = []
    for group in _normalize_newlines(text or "").split("\n\n"):
        lines = [line.strip() for line in group.split("\n") if line.strip()]
        if not lines:
            continue
        inlines: list[Text | HardBreak] = []
        for index, line in enumerate(lines):
            if index:
                inlines.append(HardBreak())
            inlines.append(Text(text=line))
        blocks.append(Paragraph(content=inlines))
    return Document(content=blocks)


def _heading_level(line: str) -> int:
    for marker, level in _HEADING_MARKERS:
        if line.startswith(marker):
            return level
    return 0


def _list_item(text: str) -> ListItem:
    return ListItem(content=[Paragraph(content=[Text(text=text)])])


def _append_list_item(
    blocks: list, list_type: type[BulletList] | type[OrderedList], text: str
) -> None:
    """Extend the trailing list of the same kind, or start a new one."""
    item = _list_item(text)
    if blocks and isinstance(blocks[-1], list_type):
        blocks[-1].content.append(item)
    else:
        blocks.append(list_type(content=[item]))


def _inline_runs(line: str) -> list[Text]:
    """Split a line on ``**``; odd segments are bold, empty segments dropped."""
    if _BOLD_DELIMITER not in line:
        return [Text(text=line)]
    runs: list[Text] = []
    for index, segment in enumerate(line.split(_BOLD_DELIMITER)):
        if not segment:
            continue
        if index % 2:
            runs.append(Text(text=segment, marks=[Mark()]))
        else:
            runs.append(Text(text=segment))
    return runs


def markdown_to_document(text: str) -> Document:
    """Convert a constrained markdown subset to a document.

    Supports ``#``/``##``/``###`` headings, ``-``/``*`` bullet lists,
    ``1.`` ordered lists and ``**bold**`` runs. Anything else is paragraph
    text, with consecutive lines joined by hard breaks.
    """
    blocks: list = []
    pending: list[Text | HardBreak] = []

    def flush() -> None:
        if pending:
            blocks.append(Paragraph(content=list(pending)))
            pending.clear()

    for raw_line in _normalize_newlines(text or "").split("\n"):
        line = raw_line.strip()
        if not line:
            flush()
            continue

        level = _heading_level(line)
        ordered = _ORDERED_RE.match(line)

        if level:
            flush()
            heading_text = line[len(_HEADING_MARKERS[level - 1][0]):]
            blocks.append(
                Heading(attrs=HeadingAttrs(level=level), content=[Text(text=heading_text)])
            )
        elif line.startswith(_BULLET_MARKERS):
            flush()
            _append_list_item(blocks, BulletList, line[2:])
        elif ordered:
            flush()
            _append_list_item(blocks, OrderedList, line[ordered.end():])
        else:
            if pending:
                pending.append(HardBreak())
            pending.extend(_inline_runs(line))

    flush()
    return Document(content=blocks)


def is_likely_markdown(text: str | None) -> bool:
    """Best-effort guess whether text uses markdown syntax."""
    if not text:
        return False
    return any(pattern.search(text) for pattern in _MARKDOWN_INDICATORS)


def convert_text(text: str, fmt: FormatChoice = "auto") -> ConversionResult:
    """Convert legacy text, picking the converter from ``fmt``.

    With ``auto`` the markdown converter is used when the text looks like
    markdown, the plain-text converter otherwise.
    """
    if fmt == "auto":
        fmt = "markdown" if is_likely_markdown(text) else "plain"

    if fmt == "markdown":
        document = markdown_to_document(text)
    else:
        document = plain_text_to_document(text)

    logger.debug("Converted %d chars as %s (%d blocks)", len(text or ""), fmt, len(document.content))
    return ConversionResult(document=document, format=fmt)
