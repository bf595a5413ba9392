"""Text conversion subsystem: plain text and markdown to structured documents."""

from contentdoc.converter.converter import (
    convert_text,
    is_likely_markdown,
    markdown_to_document,
    plain_text_to_document,
)
from contentdoc.converter.models import ConversionResult, FormatChoice, SourceFormat

__all__ = [
    "ConversionResult",
    "FormatChoice",
    "SourceFormat",
    "convert_text",
    "is_likely_markdown",
    "markdown_to_document",
    "plain_text_to_document",
]
