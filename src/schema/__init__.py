"""Declarative description of each page's editable surface."""

from pageforge.schema.models import (
    ROOT_SECTION,
    FieldSpec,
    FieldType,
    PageSchema,
    SectionSpec,
    empty_section,
    empty_value,
)
from pageforge.schema.registry import CMS_SCHEMA, get_schema, page_keys
from pageforge.schema.validation import SchemaValidator

__all__ = [
    "CMS_SCHEMA",
    "ROOT_SECTION",
    "FieldSpec",
    "FieldType",
    "PageSchema",
    "SchemaValidator",
    "SectionSpec",
    "empty_section",
    "empty_value",
    "get_schema",
    "page_keys",
]
