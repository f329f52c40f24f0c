"""JSON-backed local content gateway.

Persists every page document and its revision history in a single JSON
file, loaded on init and saved after every write operation.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from pageforge.content.models import ContentDocument, ContentStatus, Revision, utcnow
from pageforge.errors import FetchError, PublishError, RestoreError, SaveError
from pageforge.gateway import PersistenceGateway

logger = logging.getLogger(__name__)

STORE_FILENAME = "content-store.json"
DEFAULT_MAX_REVISIONS = 50


class _PageRecord(BaseModel):
    """Current document of one page plus its snapshots, newest last."""

    document: ContentDocument
    revisions: list[Revision] = Field(default_factory=list)
    next_revision: int = 1


class _StoreData(BaseModel):
    """Internal wrapper for JSON serialization."""

    pages: dict[str, _PageRecord] = Field(default_factory=dict)


class LocalContentGateway(PersistenceGateway):
    """Persistence gateway over a JSON file in ``directory``.

    Saving replaces the whole document.  Saving content identical to what
    is stored is a no-op, so repeated autosaves do not grow the history.
    """

    name = "local"

    def __init__(
        self,
        directory: Path,
        max_revisions: int = DEFAULT_MAX_REVISIONS,
        author: str = "",
    ) -> None:
        self._path = Path(directory) / STORE_FILENAME
        self.max_revisions = max_revisions
        self.author = author
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._path

    # ── Private helpers ──────────────────────────────────────────

    def _load(self) -> _StoreData:
        if not self._path.exists():
            return _StoreData()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return _StoreData.model_validate(raw)
        except (json.JSONDecodeError, ValueError, KeyError):
            logger.warning("Corrupt content store at %s, starting fresh", self._path)
            return _StoreData()

    def _save(self, previous: _StoreData) -> None:
        """Write the store, rolling memory back to ``previous`` if the write fails."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                self._data.model_dump_json(indent=2),
                encoding="utf-8",
            )
        except OSError:
            self._data = previous
            raise

    def _snapshot(self, record: _PageRecord, page: str, note: str = "") -> Revision:
        revision = Revision(
            id=f"r{record.next_revision}",
            page=page,
            created_by=note or self.author,
            document=record.document,
        )
        record.next_revision += 1
        record.revisions.append(revision)
        if len(record.revisions) > self.max_revisions:
            record.revisions = record.revisions[-self.max_revisions :]
        return revision

    # ── Gateway operations ───────────────────────────────────────

    def fetch(self, page: str) -> ContentDocument | None:
        record = self._data.pages.get(page)
        if record is None:
            logger.debug("No stored document for %s in %s", page, self._path)
            return None
        if record.document.page != page:
            raise FetchError(page, f"store holds a document for '{record.document.page}'")
        return record.document

    def save(self, page: str, doc: ContentDocument) -> ContentDocument:
        record = self._data.pages.get(page)
        if record is not None and record.document.content == doc.content:
            logger.debug("Content of %s unchanged, nothing to save", page)
            return record.document

        previous = self._data.model_copy(deep=True)
        stored = doc.model_copy(
            update={"page": page, "status": ContentStatus.DRAFT, "last_updated": utcnow()}
        )
        if record is None:
            record = _PageRecord(document=stored)
            self._data.pages[page] = record
        else:
            record.document = stored
        revision = self._snapshot(record, page)
        try:
            self._save(previous)
        except OSError as exc:
            raise SaveError(page, str(exc)) from exc
        logger.info("Saved %s as revision %s", page, revision.id)
        return stored

    def publish(self, page: str) -> ContentDocument:
        record = self._data.pages.get(page)
        if record is None:
            raise PublishError(page, "nothing has been saved yet")
        previous = self._data.model_copy(deep=True)
        record.document = record.document.model_copy(
            update={"status": ContentStatus.PUBLISHED, "last_updated": utcnow()}
        )
        try:
            self._save(previous)
        except OSError as exc:
            raise PublishError(page, str(exc)) from exc
        logger.info("Published %s", page)
        return record.document

    def history(self, page: str) -> list[Revision]:
        record = self._data.pages.get(page)
        if record is None:
            return []
        return list(reversed(record.revisions))

    def restore(self, page: str, revision_id: str) -> ContentDocument:
        record = self._data.pages.get(page)
        if record is None:
            raise RestoreError(page, "no saved revisions")
        match = next((r for r in record.revisions if r.id == revision_id), None)
        if match is None:
            raise RestoreError(page, f"unknown revision '{revision_id}'")
        previous = self._data.model_copy(deep=True)
        record.document = match.document.model_copy(
            update={"status": ContentStatus.DRAFT, "last_updated": utcnow()}
        )
        self._snapshot(record, page, note=f"restore:{revision_id}")
        try:
            self._save(previous)
        except OSError as exc:
            raise RestoreError(page, str(exc)) from exc
        logger.info("Restored %s to revision %s", page, revision_id)
        return record.document
