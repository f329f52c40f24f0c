"""Validate content mutations against a page schema.

Every mutation names a location (section, group, collection or a raw key
path) and carries new values.  The validator rejects unknown sections and
fields and values whose Python type does not match the field type, before
the mutation touches the document.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pageforge.errors import SchemaViolationError
from pageforge.schema.models import ROOT_SECTION, FieldSpec, FieldType, PageSchema, SectionSpec

ID_FIELD = "id"

_STRING_TYPES = (FieldType.TEXT, FieldType.TEXTAREA, FieldType.IMAGE, FieldType.RICH_TEXT)


class SchemaValidator:
    """Checks mutation payloads against one page's schema."""

    def __init__(self, schema: PageSchema) -> None:
        self.schema = schema

    # ── Public checks ────────────────────────────────────────────

    def check_fields(self, section: str, changes: Mapping[str, Any]) -> None:
        """Validate a shallow merge into a section's top-level fields."""
        spec = self._section(section)
        for name, value in changes.items():
            field = spec.field(name)
            if field is None:
                self._fail(f"{section}.{name}", "unknown field")
            self._check_value(field, value, f"{section}.{name}")

    def check_group(self, section: str, group: str, changes: Mapping[str, Any]) -> None:
        """Validate a shallow merge into a group field of a section."""
        field = self._section(section).field(group)
        where = f"{section}.{group}"
        if field is None:
            self._fail(where, "unknown field")
        if field.type != FieldType.GROUP:
            self._fail(where, f"expected a group, found {field.type}")
        self._check_record(field.fields, changes, where, allow_id=False)

    def check_item(
        self,
        collection: Sequence[str],
        item: Mapping[str, Any],
    ) -> None:
        """Validate an item (or partial item) for the addressed collection."""
        field = self.collection_field(collection)
        self._check_record(field.fields, item, "/".join(collection), allow_id=True)

    def check_path(self, path: Sequence[str], value: Any) -> None:
        """Validate a raw key-path assignment (``["hero", "title"]``)."""
        if not path:
            self._fail("", "empty path")
        section = self._section(path[0])
        if len(path) == 1:
            if not isinstance(value, Mapping):
                self._fail(path[0], "a section must be replaced with a mapping")
            self.check_fields(path[0], value)
            return
        field = self._walk(section, path[1:], "/".join(path))
        if field is None:
            # the path ends on an item id: the value is a whole item
            parent = self._walk(section, path[1:-1], "/".join(path))
            if parent is None or not isinstance(value, Mapping):
                self._fail("/".join(path), "an item must be replaced with a mapping")
            self._check_record(parent.fields, value, "/".join(path), allow_id=True)
            return
        self._check_value(field, value, "/".join(path))

    def check_document(self, content: Mapping[str, Any]) -> None:
        """Validate a whole page tree, as used for defaults and restores."""
        root = self.schema.section(ROOT_SECTION)
        for key, value in content.items():
            if key != ROOT_SECTION and self.schema.section(key) is not None:
                if not isinstance(value, Mapping):
                    self._fail(key, "a section must be a mapping")
                self.check_fields(key, value)
            elif root is not None and root.field(key) is not None:
                self.check_fields(ROOT_SECTION, {key: value})
            else:
                self._fail(key, "unknown section")

    def collection_field(self, collection: Sequence[str]) -> FieldSpec:
        """Return the array descriptor a collection path points at."""
        where = "/".join(collection)
        if len(collection) < 2:
            self._fail(where, "a collection path needs a section and a field")
        field = self._walk(self._section(collection[0]), collection[1:], where)
        if field is None or field.type != FieldType.ARRAY:
            self._fail(where, "not a collection")
        return field

    # ── Private helpers ──────────────────────────────────────────

    def _fail(self, path: str, reason: str) -> None:
        raise SchemaViolationError(self.schema.key, path, reason)

    def _section(self, section_id: str) -> SectionSpec:
        section = self.schema.section(section_id)
        if section is None:
            self._fail(section_id, "unknown section")
        return section

    def _walk(
        self,
        section: SectionSpec,
        segments: Sequence[str],
        where: str,
    ) -> FieldSpec | None:
        """Follow field names (and item ids after arrays) below a section.

        Returns None when the last segment is an item id.
        """
        field: FieldSpec | None = None
        expect_id = False
        ends_on_id = False
        last = len(segments) - 1
        for index, segment in enumerate(segments):
            if expect_id:
                expect_id = False
                ends_on_id = True
                continue
            ends_on_id = False
            candidates = section.fields if field is None else field.fields
            field = next((f for f in candidates if f.name == segment), None)
            if field is None:
                self._fail(where, f"unknown field '{segment}'")
            if field.type == FieldType.ARRAY:
                expect_id = True
            elif field.type != FieldType.GROUP and index != last:
                self._fail(where, f"'{segment}' has no nested fields")
        if ends_on_id:
            return None
        return field

    def _check_record(
        self,
        fields: list[FieldSpec],
        record: Mapping[str, Any],
        where: str,
        *,
        allow_id: bool,
    ) -> None:
        if not isinstance(record, Mapping):
            self._fail(where, f"expected a mapping, got {type(record).__name__}")
        known = {f.name: f for f in fields}
        for name, value in record.items():
            if name == ID_FIELD and allow_id and name not in known:
                if not isinstance(value, (str, int)) or isinstance(value, bool):
                    self._fail(f"{where}.{name}", "item ids must be strings or integers")
                continue
            if name not in known:
                self._fail(f"{where}.{name}", "unknown field")
            self._check_value(known[name], value, f"{where}.{name}")

    def _check_value(self, field: FieldSpec, value: Any, where: str) -> None:
        if field.type in _STRING_TYPES:
            if not isinstance(value, str):
                self._fail(where, f"expected text, got {type(value).__name__}")
        elif field.type == FieldType.BOOLEAN:
            if not isinstance(value, bool):
                self._fail(where, f"expected a boolean, got {type(value).__name__}")
        elif field.type == FieldType.NUMBER:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                self._fail(where, f"expected a number, got {type(value).__name__}")
        elif field.type == FieldType.TAGS:
            if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
                self._fail(where, "expected a list of strings")
        elif field.type == FieldType.GROUP:
            self._check_record(field.fields, value, where, allow_id=False)
        elif field.type == FieldType.ARRAY:
            if not isinstance(value, list):
                self._fail(where, f"expected a list, got {type(value).__name__}")
            for index, item in enumerate(value):
                self._check_record(field.fields, item, f"{where}[{index}]", allow_id=True)
