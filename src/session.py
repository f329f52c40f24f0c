"""Editing session for one page.

The session owns the page document while an operator edits it.  It
starts from the page defaults, hydrates once from the backend, validates
and applies mutations, notifies subscribers, and persists through the
gateway both on demand and after a quiet period (autosave).

Persistence failures never raise out of the session: they are logged,
reported through the notifier, and local edits are kept.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pageforge.config import EditorConfig
from pageforge.content import mutations
from pageforge.content.defaults import default_document
from pageforge.content.hydration import HydrationController
from pageforge.content.models import ContentDocument, ContentStatus, Revision
from pageforge.errors import (
    FetchError,
    PublishError,
    ResetNotConfirmedError,
    RestoreError,
    SaveError,
)
from pageforge.gateway import PersistenceGateway
from pageforge.notify import LoggingNotifier, NoticeLevel, Notifier
from pageforge.schema import SchemaValidator, get_schema
from pageforge.sync.autosave import AutoSaveScheduler, TimerFactory

logger = logging.getLogger(__name__)

Listener = Callable[[ContentDocument], None]


class EditorSession:
    """Single-owner editing state for one page."""

    def __init__(
        self,
        page: str,
        gateway: PersistenceGateway,
        notifier: Notifier | None = None,
        config: EditorConfig | None = None,
        *,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.schema = get_schema(page)
        self.page = page
        self.gateway = gateway
        self.notifier = notifier or LoggingNotifier()
        self.config = config or EditorConfig()
        self.validator = SchemaValidator(self.schema)
        self.hydration = HydrationController(self.schema, self.notifier)
        self.autosave = AutoSaveScheduler(
            self._autosave,
            interval=self.config.autosave_interval,
            timer_factory=timer_factory,
        )

        self._doc = default_document(page)
        self._version = 0
        self._saved_version = 0
        self._lock = threading.RLock()
        self._save_guard = threading.Lock()
        self._publish_guard = threading.Lock()
        self._listeners: list[Listener] = []

    # ── State ────────────────────────────────────────────────────

    @property
    def document(self) -> ContentDocument:
        with self._lock:
            return self._doc

    @property
    def is_dirty(self) -> bool:
        with self._lock:
            return self._version != self._saved_version

    @property
    def is_saving(self) -> bool:
        return self._save_guard.locked()

    @property
    def is_publishing(self) -> bool:
        return self._publish_guard.locked()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new document after every change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Loading ──────────────────────────────────────────────────

    def load(self) -> bool:
        """Fetch the server copy and hydrate from it (once per session).

        Returns False if the fetch failed; the session then keeps editing
        the defaults.
        """
        try:
            server_doc = self.gateway.fetch(self.page)
        except FetchError as exc:
            logger.warning("Could not load %s: %s", self.page, exc)
            self.notifier.notify(NoticeLevel.ERROR, f"Failed to load {self.schema.label}")
            return False

        with self._lock:
            if server_doc is None or self.hydration.hydrated:
                return True
            doc = self.hydration.hydrate(self._doc, server_doc)
            self._doc = doc
            self._version += 1
            reconciled = doc.fingerprint() != server_doc.fingerprint()
            if not reconciled:
                self._saved_version = self._version
        self._emit(doc)
        if reconciled:
            self.autosave.notify_mutation()
        return True

    # ── Mutations ────────────────────────────────────────────────

    @property
    def strict(self) -> bool:
        return self.config.strict_schema

    def update_fields(self, section: str, changes: Mapping[str, Any]) -> ContentDocument:
        if self.strict:
            self.validator.check_fields(section, changes)
        return self._mutate(lambda doc: mutations.update_fields(doc, section, changes))

    def update_group(
        self,
        section: str,
        group: str,
        changes: Mapping[str, Any],
    ) -> ContentDocument:
        if self.strict:
            self.validator.check_group(section, group, changes)
        return self._mutate(lambda doc: mutations.update_group(doc, section, group, changes))

    def set_path(self, path: Sequence[str], value: Any) -> ContentDocument:
        if self.strict:
            self.validator.check_path(path, value)
        return self._mutate(lambda doc: mutations.set_path(doc, path, value))

    def add_item(self, collection: Sequence[str], item: Mapping[str, Any]) -> ContentDocument:
        if self.strict:
            self.validator.check_item(collection, item)
        return self._mutate(lambda doc: mutations.add_item(doc, collection, item))

    def update_item(
        self,
        collection: Sequence[str],
        item_id: str,
        changes: Mapping[str, Any],
    ) -> ContentDocument:
        if self.strict:
            self.validator.check_item(collection, changes)
        return self._mutate(
            lambda doc: mutations.update_item(doc, collection, item_id, changes)
        )

    def remove_item(self, collection: Sequence[str], item_id: str) -> ContentDocument:
        if self.strict:
            self.validator.collection_field(collection)
        return self._mutate(lambda doc: mutations.remove_item(doc, collection, item_id))

    def move_item(
        self,
        collection: Sequence[str],
        index: int,
        direction: mutations.MoveDirection | str,
    ) -> ContentDocument:
        if self.strict:
            self.validator.collection_field(collection)
        return self._mutate(
            lambda doc: mutations.move_item(doc, collection, index, direction)
        )

    def reset_to_defaults(self, *, confirm: bool = False) -> ContentDocument:
        """Replace all content with the page defaults.

        Destructive: raises ResetNotConfirmedError unless ``confirm`` is True.
        """
        if not confirm:
            raise ResetNotConfirmedError(self.page)
        doc = self._mutate(lambda _doc: mutations.reset_to_defaults(self.page))
        self.notifier.notify(NoticeLevel.SUCCESS, f"{self.schema.label} defaults restored")
        return doc

    # ── Persistence ──────────────────────────────────────────────

    def save(self) -> bool:
        """Persist the current document now.

        Returns False without contacting the backend if a save is already
        in flight, or if the backend rejected the save.
        """
        if not self._save_guard.acquire(blocking=False):
            logger.info("Save of %s already in progress", self.page)
            return False
        try:
            self.autosave.cancel()
            return self._persist()
        finally:
            self._save_guard.release()

    def publish(self) -> bool:
        """Publish the stored document; local status follows on success."""
        if not self._publish_guard.acquire(blocking=False):
            logger.info("Publish of %s already in progress", self.page)
            return False
        try:
            try:
                self.gateway.publish(self.page)
            except PublishError as exc:
                logger.warning("Publish of %s failed: %s", self.page, exc)
                self.notifier.notify(
                    NoticeLevel.ERROR, f"Failed to publish {self.schema.label}"
                )
                return False
            with self._lock:
                doc = mutations.set_status(self._doc, ContentStatus.PUBLISHED)
                self._doc = doc
            self._emit(doc)
            logger.info("Published %s", self.page)
            self.notifier.notify(
                NoticeLevel.SUCCESS, f"{self.schema.label} published successfully!"
            )
            return True
        finally:
            self._publish_guard.release()

    def history(self) -> list[Revision]:
        """Return saved revisions, newest first; empty on failure."""
        try:
            return self.gateway.history(self.page)
        except RestoreError as exc:
            logger.warning("Could not list revisions of %s: %s", self.page, exc)
            self.notifier.notify(NoticeLevel.ERROR, "Failed to load revision history")
            return []

    def restore(self, revision_id: str) -> bool:
        """Replace the local document with a restored server revision."""
        try:
            restored = self.gateway.restore(self.page, revision_id)
        except RestoreError as exc:
            logger.warning("Restore of %s to %s failed: %s", self.page, revision_id, exc)
            self.notifier.notify(NoticeLevel.ERROR, "Failed to restore version")
            return False
        self.autosave.cancel()
        with self._lock:
            self._doc = restored
            self._version += 1
            self._saved_version = self._version
        self._emit(restored)
        self.notifier.notify(NoticeLevel.SUCCESS, "Version restored successfully")
        return True

    def close(self) -> None:
        """Stop autosaving.  Unsaved edits are not flushed."""
        self.autosave.close()
        self._listeners.clear()

    # ── Private helpers ──────────────────────────────────────────

    def _mutate(self, fn: Callable[[ContentDocument], ContentDocument]) -> ContentDocument:
        with self._lock:
            before = self._doc
            after = fn(before)
            if after is before:
                return before
            self._doc = after
            self._version += 1
        self._emit(after)
        self.autosave.notify_mutation()
        return after

    def _emit(self, doc: ContentDocument) -> None:
        for listener in list(self._listeners):
            listener(doc)

    def _persist(self) -> bool:
        with self._lock:
            snapshot = self._doc
            version = self._version
        try:
            self.gateway.save(self.page, snapshot)
        except SaveError as exc:
            logger.warning("Save of %s failed: %s", self.page, exc)
            self.notifier.notify(NoticeLevel.ERROR, "Failed to save changes")
            return False
        with self._lock:
            # edits made while the request was in flight stay dirty
            if version > self._saved_version:
                self._saved_version = version
        logger.info("Saved %s", self.page)
        self.notifier.notify(NoticeLevel.SUCCESS, "Changes saved successfully")
        return True

    def _autosave(self) -> None:
        if not self._save_guard.acquire(blocking=False):
            # an explicit save is running; try again after the next quiet period
            self.autosave.notify_mutation()
            return
        try:
            self._persist()
        finally:
            self._save_guard.release()
