from contentdoc.extract.extractor import extract_plain_text, is_structured_document, make_preview

__all__ = [
    "extract_plain_text",
    "is_structured_document",
    "make_preview",
]
