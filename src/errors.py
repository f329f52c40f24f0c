"""Typed exception hierarchy for pageforge.

Gateway errors are raised by persistence backends and caught by the
editing session, which logs them and reports a notice instead of
crashing.  Content errors signal a malformed mutation and propagate to
the caller.
"""

from __future__ import annotations


class PageforgeError(Exception):
    """Base exception for all pageforge errors."""


# ── Persistence ──────────────────────────────────────────────────────


class GatewayError(PageforgeError):
    """Base exception for failures talking to a persistence backend."""

    operation = "request"

    def __init__(self, page: str, reason: str = "") -> None:
        message = f"Failed to {self.operation} content for page '{page}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.page = page
        self.reason = reason


class FetchError(GatewayError):
    """Raised when a page document cannot be retrieved."""

    operation = "fetch"


class SaveError(GatewayError):
    """Raised when a page document cannot be persisted."""

    operation = "save"


class PublishError(GatewayError):
    """Raised when a page cannot be published."""

    operation = "publish"


class RestoreError(GatewayError):
    """Raised when a revision cannot be listed or restored."""

    operation = "restore"


# ── Content ──────────────────────────────────────────────────────────


class ContentError(PageforgeError):
    """Base exception for invalid content operations."""


class UnknownPageError(ContentError):
    """Raised when a page key is not registered in the schema."""

    def __init__(self, page: str) -> None:
        super().__init__(f"Unknown page '{page}'")
        self.page = page


class SchemaViolationError(ContentError):
    """Raised when a mutation does not match the page schema."""

    def __init__(self, page: str, path: str, reason: str) -> None:
        super().__init__(f"Invalid update to {page}:{path}: {reason}")
        self.page = page
        self.path = path
        self.reason = reason


class DuplicateItemError(ContentError):
    """Raised when adding an item whose id already exists in the collection."""

    def __init__(self, collection: str, item_id: str) -> None:
        super().__init__(f"Item '{item_id}' already exists in {collection}")
        self.collection = collection
        self.item_id = item_id


class ResetNotConfirmedError(ContentError):
    """Raised when reset-to-defaults is invoked without explicit confirmation."""

    def __init__(self, page: str) -> None:
        super().__init__(
            f"Resetting '{page}' to defaults discards all content and must be confirmed"
        )
        self.page = page
