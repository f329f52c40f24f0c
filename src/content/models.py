"""Content domain models — pure Pydantic v2 data types.

A ContentDocument is the full editable tree for one page: named sections
(plain dicts of scalar fields, nested groups and collections), plus the
lifecycle status and the time of the last edit.  Collections are lists
of dicts, each carrying a stable ``id``.
"""

from __future__ import annotations

import hashlib
import json
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from pageforge.schema.models import ROOT_SECTION

STATUS_KEY = "status"
UPDATED_KEY = "lastUpdated"


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


class ContentStatus(StrEnum):
    """Lifecycle status of a page document."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ContentDocument(BaseModel):
    """Editable content of one page.

    Treat instances as immutable: mutation helpers return new documents
    and share every untouched section and item with the original.
    """

    page: str
    content: dict[str, Any] = Field(default_factory=dict)
    status: ContentStatus = ContentStatus.DRAFT
    last_updated: datetime = Field(default_factory=utcnow)

    def section(self, name: str) -> dict[str, Any] | None:
        """Return a section record; ``_root`` returns the top-level fields."""
        if name == ROOT_SECTION:
            return self.content
        value = self.content.get(name)
        return value if isinstance(value, dict) else None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON shape exchanged with the content API."""
        payload = dict(self.content)
        payload[STATUS_KEY] = self.status.value
        payload[UPDATED_KEY] = self.last_updated.isoformat()
        return payload

    @classmethod
    def from_payload(cls, page: str, payload: dict[str, Any]) -> ContentDocument:
        """Build a document from an API payload.

        Accepts the flat page shape (sections plus ``status`` and
        ``lastUpdated``) and the generic envelope
        ``{"pageKey", "content", "status", "updatedAt"}``.
        """
        data = dict(payload)
        if isinstance(data.get("content"), dict) and "pageKey" in data:
            content = dict(data["content"])
            status = data.get(STATUS_KEY) or content.pop(STATUS_KEY, None)
            updated = data.get("updatedAt") or content.pop(UPDATED_KEY, None)
            content.pop(STATUS_KEY, None)
            content.pop(UPDATED_KEY, None)
        else:
            status = data.pop(STATUS_KEY, None)
            updated = data.pop(UPDATED_KEY, None)
            content = data
        fields: dict[str, Any] = {"page": page, "content": content}
        if status:
            fields["status"] = status
        if updated:
            fields["last_updated"] = updated
        return cls.model_validate(fields)

    def fingerprint(self) -> str:
        """Stable hash of content and status, ignoring the edit timestamp."""
        raw = json.dumps(
            {"content": self.content, "status": self.status.value},
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class Revision(BaseModel):
    """A saved snapshot of a page document."""

    id: str
    page: str
    created_at: datetime = Field(default_factory=utcnow)
    created_by: str = ""
    document: ContentDocument

    @property
    def label(self) -> str:
        return f"{self.id} ({self.document.status}, {self.created_at:%Y-%m-%d %H:%M})"
