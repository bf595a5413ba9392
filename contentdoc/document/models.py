"""Pydantic models for the structured rich-text document tree.

Field names (``type``, ``content``, ``attrs``, ``text``, ``marks``) match the
editor's JSON format exactly, so a dumped model can be stored and read back by
the editor without translation.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, ValidationError


class DocumentError(Exception):
    """Raised when a serialized document cannot be loaded into the model."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


class Mark(BaseModel):
    """Formatting annotation attached to a text run."""

    type: Literal["bold"] = "bold"


class Text(BaseModel):
    type: Literal["text"] = "text"
    text: str
    marks: list[Mark] | None = None

    @property
    def is_bold(self) -> bool:
        return any(mark.type == "bold" for mark in self.marks or ())


class HardBreak(BaseModel):
    type: Literal["hardBreak"] = "hardBreak"


Inline = Annotated[Union[Text, HardBreak], Field(discriminator="type")]


class Paragraph(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    content: list[Inline] = Field(default_factory=list)


class HeadingAttrs(BaseModel):
    level: Literal[1, 2, 3]


class Heading(BaseModel):
    type: Literal["heading"] = "heading"
    attrs: HeadingAttrs
    content: list[Inline] = Field(default_factory=list)

    @property
    def level(self) -> int:
        return self.attrs.level


class ListItem(BaseModel):
    type: Literal["listItem"] = "listItem"
    content: list[Block] = Field(default_factory=list)


class BulletList(BaseModel):
    type: Literal["bulletList"] = "bulletList"
    content: list[ListItem] = Field(default_factory=list)


class OrderedList(BaseModel):
    type: Literal["orderedList"] = "orderedList"
    content: list[ListItem] = Field(default_factory=list)


Block = Annotated[
    Union[Paragraph, Heading, BulletList, OrderedList, ListItem],
    Field(discriminator="type"),
]


class Document(BaseModel):
    """Root of the tree. An empty ``content`` list means "no content"."""

    type: Literal["doc"] = "doc"
    content: list[Block] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.content

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        # Compact separators, same bytes as the editor's JSON.stringify output
        return self.model_dump_json(exclude_none=True)


for _model in (ListItem, BulletList, OrderedList, Document):
    _model.model_rebuild()


EMPTY_DOCUMENT_JSON = Document().to_json()


def load_document(serialized: str) -> Document:
    """Parse a stored document string into the typed model.

    Raises DocumentError if the string is not JSON or does not describe a
    document built from the supported node types.
    """
    try:
        return Document.model_validate_json(serialized)
    except ValidationError as e:
        raise DocumentError(f"Not a valid document: {e.error_count()} error(s)", e) from e
