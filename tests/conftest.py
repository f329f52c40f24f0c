"""Shared fixtures: fake timers, a recording notifier, and an in-memory gateway."""

from __future__ import annotations

import pytest

from pageforge.content.models import ContentDocument, ContentStatus, Revision
from pageforge.errors import FetchError, PublishError, RestoreError, SaveError
from pageforge.gateway import PersistenceGateway


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.started = False
        self.cancelled = False
        self.daemon = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args, **self.kwargs)


class FakeTimerFactory:
    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer

    @property
    def live(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled]

    def fire_latest(self):
        self.timers[-1].fire()


class RecordingNotifier:
    def __init__(self):
        self.notices: list[tuple[str, str]] = []

    def notify(self, level, message):
        self.notices.append((str(level), message))

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.notices if level is None or lvl == level]


class MemoryGateway(PersistenceGateway):
    """In-memory backend whose failures can be switched on per operation."""

    def __init__(self, documents: dict[str, ContentDocument] | None = None):
        self.documents = dict(documents or {})
        self.revisions: dict[str, list[Revision]] = {}
        self.fail: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.saved: list[ContentDocument] = []
        self.on_save = None

    def fetch(self, page):
        self.calls.append(("fetch", page))
        if "fetch" in self.fail:
            raise FetchError(page, "backend down")
        return self.documents.get(page)

    def save(self, page, doc):
        self.calls.append(("save", page))
        if self.on_save is not None:
            self.on_save()
        if "save" in self.fail:
            raise SaveError(page, "backend down")
        self.saved.append(doc)
        self.documents[page] = doc
        history = self.revisions.setdefault(page, [])
        history.append(Revision(id=f"r{len(history) + 1}", page=page, document=doc))
        return doc

    def publish(self, page):
        self.calls.append(("publish", page))
        if "publish" in self.fail or page not in self.documents:
            raise PublishError(page, "backend down")
        doc = self.documents[page].model_copy(update={"status": ContentStatus.PUBLISHED})
        self.documents[page] = doc
        return doc

    def history(self, page):
        self.calls.append(("history", page))
        if "history" in self.fail:
            raise RestoreError(page, "backend down")
        return list(reversed(self.revisions.get(page, [])))

    def restore(self, page, revision_id):
        self.calls.append(("restore", page))
        if "restore" in self.fail:
            raise RestoreError(page, "backend down")
        for revision in self.revisions.get(page, []):
            if revision.id == revision_id:
                self.documents[page] = revision.document
                return revision.document
        raise RestoreError(page, f"unknown revision '{revision_id}'")


@pytest.fixture
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def gateway() -> MemoryGateway:
    return MemoryGateway()
