"""One-shot hydration of local editing state from the server copy.

The first successfully fetched document replaces the local defaults;
every later fetch in the same session is ignored so that re-fetches never
clobber edits in progress.  After hydration the document is reconciled
with the current schema: sections, collections and groups the server copy
lacks are added with empty values, and nothing already present is touched.
"""

from __future__ import annotations

import logging
from typing import Any

from pageforge.content.models import ContentDocument
from pageforge.notify import LoggingNotifier, NoticeLevel, Notifier
from pageforge.schema.models import FieldType, PageSchema, SectionSpec, empty_section, empty_value

logger = logging.getLogger(__name__)

SYNC_NOTICE = "Content synchronized with latest schema"


def reconcile(doc: ContentDocument, schema: PageSchema) -> tuple[ContentDocument, list[str]]:
    """Fill sections missing from ``doc`` with schema-derived empty values.

    Additive: a section absent from the document (or stored as null) is
    created; for the ``_root`` section each absent top-level field is
    created; inside a present section, absent collections and groups are
    created.  Scalars already present are never touched.  Returns the
    reconciled document and the names that were filled.
    """
    content: dict[str, Any] = dict(doc.content)
    filled: list[str] = []
    for section in schema.sections:
        if section.is_root:
            for field in section.fields:
                if content.get(field.name) is None:
                    content[field.name] = empty_value(field)
                    filled.append(field.name)
        elif content.get(section.id) is None:
            content[section.id] = empty_section(section)
            filled.append(section.id)
        elif isinstance(content[section.id], dict):
            record, missing = _fill_structures(content[section.id], section)
            if missing:
                content[section.id] = record
                filled.extend(f"{section.id}.{name}" for name in missing)
    if not filled:
        return doc, []
    return doc.model_copy(update={"content": content}), filled


def _fill_structures(record: dict[str, Any], section: SectionSpec) -> tuple[dict[str, Any], list[str]]:
    missing = [
        field
        for field in section.fields
        if field.type in (FieldType.ARRAY, FieldType.GROUP) and record.get(field.name) is None
    ]
    if not missing:
        return record, []
    filled = dict(record)
    for field in missing:
        filled[field.name] = empty_value(field)
    return filled, [field.name for field in missing]


class HydrationController:
    """Applies the server document to local state at most once."""

    def __init__(self, schema: PageSchema, notifier: Notifier | None = None) -> None:
        self.schema = schema
        self.notifier = notifier or LoggingNotifier()
        self.hydrated = False

    def hydrate(
        self,
        current: ContentDocument,
        server_doc: ContentDocument | None,
    ) -> ContentDocument:
        """Return the document the session should edit after a fetch.

        A ``None`` fetch result or any call after the first successful
        hydration returns ``current`` unchanged.
        """
        if server_doc is None or self.hydrated:
            return current
        self.hydrated = True
        doc, filled = reconcile(server_doc, self.schema)
        logger.info("Hydrated %s from server copy", self.schema.key)
        if filled:
            logger.info("Filled missing %s in %s", ", ".join(filled), self.schema.key)
            self.notifier.notify(NoticeLevel.INFO, SYNC_NOTICE)
        return doc

    def reset(self) -> None:
        """Allow the next fetch to hydrate again (a new editing session)."""
        self.hydrated = False
