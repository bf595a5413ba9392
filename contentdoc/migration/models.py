"""Pydantic models for the record migration subsystem."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from contentdoc.converter.models import SourceFormat


class MigrationError(Exception):
    """A single record field that could not be migrated."""

    def __init__(self, collection: str, record_id: Any, field: str, reason: str) -> None:
        self.collection = collection
        self.record_id = record_id
        self.field = field
        self.reason = reason
        super().__init__(f"{collection} {record_id}: {field}: {reason}")


class CollectionStats(BaseModel):
    """Per-collection counters. In a dry run they count what would change."""

    collection: str
    records: int = 0
    records_updated: int = 0
    fields_plain: int = 0
    fields_markdown: int = 0

    @property
    def fields_converted(self) -> int:
        return self.fields_plain + self.fields_markdown

    def count_field(self, fmt: SourceFormat) -> None:
        if fmt == "markdown":
            self.fields_markdown += 1
        else:
            self.fields_plain += 1


class MigrationReport(BaseModel):
    dry_run: bool = False
    collections: list[CollectionStats] = Field(default_factory=list)
    # Migrated copy of the input; left empty on a dry run
    records: dict[str, Any] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)

    @property
    def total_updated(self) -> int:
        return sum(c.records_updated for c in self.collections)

    @property
    def total_fields(self) -> int:
        return sum(c.fields_converted for c in self.collections)
