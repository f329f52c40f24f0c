"""Base class for page content persistence backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pageforge.content.models import ContentDocument, Revision


class PersistenceGateway(ABC):
    """Moves whole page documents between the editor and a backend.

    Implementations raise FetchError, SaveError, PublishError or
    RestoreError on failure; they never swallow errors.
    """

    name: str = "gateway"

    @abstractmethod
    def fetch(self, page: str) -> ContentDocument | None:
        """Return the stored document, or None if the page was never saved."""

    @abstractmethod
    def save(self, page: str, doc: ContentDocument) -> ContentDocument:
        """Replace the stored document and return what the backend now holds."""

    @abstractmethod
    def publish(self, page: str) -> ContentDocument:
        """Mark the stored document published without changing its content."""

    @abstractmethod
    def history(self, page: str) -> list[Revision]:
        """Return saved revisions, newest first."""

    @abstractmethod
    def restore(self, page: str, revision_id: str) -> ContentDocument:
        """Make a past revision the current document and return it."""
