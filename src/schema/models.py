"""Schema descriptor models — pure Pydantic v2 data types.

A page schema is an ordered list of sections, each an ordered list of
field descriptors.  Group and array fields nest their own descriptors;
array descriptors describe the shape of every item in the collection.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator

ROOT_SECTION = "_root"


class FieldType(StrEnum):
    """Kind of value an editable field holds."""

    TEXT = "text"
    TEXTAREA = "textarea"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TAGS = "tags"
    IMAGE = "image"
    RICH_TEXT = "rich-text"
    GROUP = "group"
    ARRAY = "array"

    @property
    def is_nested(self) -> bool:
        return self in (FieldType.GROUP, FieldType.ARRAY)


class FieldSpec(BaseModel):
    """A single editable field."""

    name: str
    label: str
    type: FieldType
    fields: list[FieldSpec] = Field(default_factory=list)
    item_label: str = ""

    @model_validator(mode="after")
    def _check_nesting(self) -> FieldSpec:
        if self.type.is_nested and not self.fields:
            raise ValueError(f"{self.type} field '{self.name}' needs sub-fields")
        if not self.type.is_nested and self.fields:
            raise ValueError(f"{self.type} field '{self.name}' cannot have sub-fields")
        return self

    def field(self, name: str) -> FieldSpec | None:
        for sub in self.fields:
            if sub.name == name:
                return sub
        return None


class SectionSpec(BaseModel):
    """A named group of fields within a page."""

    id: str
    label: str
    fields: list[FieldSpec] = Field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.id == ROOT_SECTION

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


class PageSchema(BaseModel):
    """Editable surface of one page."""

    key: str
    label: str
    icon: str = ""
    sections: list[SectionSpec] = Field(default_factory=list)

    @property
    def section_ids(self) -> list[str]:
        return [s.id for s in self.sections]

    def section(self, section_id: str) -> SectionSpec | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def field(self, section_id: str, name: str) -> FieldSpec | None:
        section = self.section(section_id)
        if section is None:
            return None
        return section.field(name)


def empty_value(spec: FieldSpec) -> Any:
    """Return the empty value for a field of the given type."""
    if spec.type == FieldType.BOOLEAN:
        return False
    if spec.type == FieldType.NUMBER:
        return 0
    if spec.type in (FieldType.TAGS, FieldType.ARRAY):
        return []
    if spec.type == FieldType.GROUP:
        return {sub.name: empty_value(sub) for sub in spec.fields}
    return ""


def empty_section(section: SectionSpec) -> dict[str, Any]:
    """Return a section record with every field set to its empty value."""
    return {spec.name: empty_value(spec) for spec in section.fields}
