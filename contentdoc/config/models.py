from pydantic import BaseModel, Field
from typing import Literal

FormatSetting = Literal["auto", "plain", "markdown"]


class ConverterSettings(BaseModel):
    default_format: FormatSetting = "auto"


class PreviewConfig(BaseModel):
    max_chars: int = Field(default=200, gt=0)
    ellipsis: str = "..."


class FieldRule(BaseModel):
    name: str = Field(min_length=1)
    format: FormatSetting = "auto"
    # Only migrate this field on records whose fields equal these values
    only_when: dict[str, str] = Field(default_factory=dict)


class CollectionRule(BaseModel):
    name: str = Field(min_length=1)
    id_field: str = "id"
    fields: list[FieldRule] = Field(default_factory=list)


def _default_collections() -> list[CollectionRule]:
    return [
        CollectionRule(
            name="courses",
            fields=[
                FieldRule(name="description"),
                FieldRule(name="shortDescription", format="plain"),
            ],
        ),
        CollectionRule(name="sections", fields=[FieldRule(name="description")]),
        CollectionRule(
            name="lessons",
            fields=[
                FieldRule(name="content", only_when={"type": "ARTICLE"}),
                FieldRule(name="description"),
            ],
        ),
    ]


class MigrationConfig(BaseModel):
    backup: bool = True
    collections: list[CollectionRule] = Field(default_factory=_default_collections)


class ContentDocConfig(BaseModel):
    converter: ConverterSettings = Field(default_factory=ConverterSettings)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    migration: MigrationConfig = Field(default_factory=MigrationConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
