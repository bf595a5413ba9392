"""contentdoc - legacy text to structured rich-text documents, and back to text."""

from contentdoc.document import Document, DocumentError, load_document
from contentdoc.converter import (
    ConversionResult,
    convert_text,
    is_likely_markdown,
    markdown_to_document,
    plain_text_to_document,
)
from contentdoc.extract import extract_plain_text, is_structured_document, make_preview
from contentdoc.config import ContentDocConfig, load_config
from contentdoc.migration import ContentMigrator, MigrationReport

__version__ = "0.1.0"

__all__ = [
    "ContentDocConfig",
    "ContentMigrator",
    "ConversionResult",
    "Document",
    "DocumentError",
    "MigrationReport",
    "convert_text",
    "extract_plain_text",
    "is_likely_markdown",
    "is_structured_document",
    "load_config",
    "load_document",
    "make_preview",
    "markdown_to_document",
    "plain_text_to_document",
]
