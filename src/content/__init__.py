"""Content domain — page documents, defaults, and pure mutations.

The JSON-backed local gateway lives in ``pageforge.content.store`` and is
not re-exported here, so importing the models never pulls in a backend.
"""

from pageforge.content.defaults import DEFAULT_CONTENT, default_document
from pageforge.content.models import ContentDocument, ContentStatus, Revision

__all__ = [
    "DEFAULT_CONTENT",
    "ContentDocument",
    "ContentStatus",
    "Revision",
    "default_document",
]
