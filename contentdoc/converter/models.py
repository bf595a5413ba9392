"""Pydantic models for the text conversion subsystem."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from contentdoc.document.models import Document

SourceFormat = Literal["plain", "markdown"]
FormatChoice = Literal["auto", "plain", "markdown"]


class ConversionResult(BaseModel):
    """Result of converting legacy text to a document."""

    document: Document
    format: SourceFormat  # converter actually used

    def to_json(self) -> str:
        return self.document.to_json()
