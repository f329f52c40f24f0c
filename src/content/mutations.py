"""Pure update operations over ContentDocument trees.

Every function takes a document and returns a new one; the input is never
modified.  Updates copy only the dicts and lists on the path to the
changed value, so untouched sections and items keep their identity.

Collections are addressed by a path whose first segment is a section id
(``_root`` for top-level fields), followed by field names, with item ids
in between when descending into a nested collection::

    ("_root", "stats")
    ("team", "members")
    ("_root", "overview", "web", "features")
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from enum import StrEnum
from typing import Any

from pageforge.content.defaults import default_document
from pageforge.content.models import ContentDocument, ContentStatus, utcnow
from pageforge.errors import DuplicateItemError
from pageforge.schema.models import ROOT_SECTION

logger = logging.getLogger(__name__)

ID_FIELD = "id"

Path = Sequence[str]


class MoveDirection(StrEnum):
    """Direction for swapping a collection item with its neighbour."""

    UP = "up"
    DOWN = "down"


class _ItemNotFound(Exception):
    """Internal signal: an item id on the path does not exist."""


def new_item_id(prefix: str = "") -> str:
    """Return a fresh, collision-resistant item id."""
    token = uuid.uuid4().hex[:12]
    return f"{prefix}-{token}" if prefix else token


def parse_path(text: str) -> list[str]:
    """Split a dotted or slashed path (``team.members``) into segments."""
    normalized = text.replace("/", ".")
    return [segment for segment in normalized.split(".") if segment]


# ── Tree helpers ─────────────────────────────────────────────────────


def _same_id(item: Any, item_id: str) -> bool:
    return isinstance(item, Mapping) and str(item.get(ID_FIELD)) == str(item_id)


def _index_of(items: Sequence[Any], item_id: str) -> int | None:
    for index, item in enumerate(items):
        if _same_id(item, item_id):
            return index
    return None


def _real_path(path: Path) -> list[str]:
    return [segment for segment in path if segment != ROOT_SECTION]


def _replace(node: Any, segments: Sequence[str], fn: Callable[[Any], Any]) -> Any:
    """Return a copy of ``node`` with ``fn`` applied at ``segments``."""
    if not segments:
        return fn(node)
    head, rest = segments[0], segments[1:]
    if isinstance(node, list):
        index = _index_of(node, head)
        if index is None:
            raise _ItemNotFound(head)
        updated = list(node)
        updated[index] = _replace(node[index], rest, fn)
        return updated
    record = dict(node) if isinstance(node, Mapping) else {}
    record[head] = _replace(record.get(head), rest, fn)
    return record


def _lookup(node: Any, segments: Sequence[str]) -> Any:
    for segment in segments:
        if isinstance(node, list):
            index = _index_of(node, segment)
            node = node[index] if index is not None else None
        elif isinstance(node, Mapping):
            node = node.get(segment)
        else:
            return None
    return node


def _apply(
    doc: ContentDocument,
    segments: Sequence[str],
    fn: Callable[[Any], Any],
    now: datetime | None,
) -> ContentDocument:
    content = _replace(doc.content, segments, fn)
    return doc.model_copy(update={"content": content, "last_updated": now or utcnow()})


def _merge(changes: Mapping[str, Any]) -> Callable[[Any], dict[str, Any]]:
    def merge(record: Any) -> dict[str, Any]:
        base = dict(record) if isinstance(record, Mapping) else {}
        base.update(changes)
        return base

    return merge


def get_collection(doc: ContentDocument, collection: Path) -> list[dict[str, Any]]:
    """Return the items of a collection, or an empty list if it is absent."""
    items = _lookup(doc.content, _real_path(collection))
    return list(items) if isinstance(items, list) else []


def get_item(doc: ContentDocument, collection: Path, item_id: str) -> dict[str, Any] | None:
    """Return one item by id, or None."""
    for item in get_collection(doc, collection):
        if _same_id(item, item_id):
            return item
    return None


# ── Section operations ───────────────────────────────────────────────


def update_fields(
    doc: ContentDocument,
    section: str,
    changes: Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Shallow-merge ``changes`` into a section's top-level fields."""
    return _apply(doc, _real_path([section]), _merge(changes), now)


def update_group(
    doc: ContentDocument,
    section: str,
    group: str,
    changes: Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Shallow-merge ``changes`` into a group nested in a section."""
    return _apply(doc, _real_path([section, group]), _merge(changes), now)


def set_path(
    doc: ContentDocument,
    path: Path,
    value: Any,
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Replace the value at a key path, creating intermediate records.

    Raises ValueError for an empty path.  A path through an unknown item
    id leaves the document unchanged.
    """
    segments = _real_path(path)
    if not segments:
        raise ValueError("set_path needs at least one key below the page root")
    try:
        return _apply(doc, segments, lambda _old: value, now)
    except _ItemNotFound as exc:
        logger.warning("No item '%s' on path %s in %s, ignoring", exc, "/".join(path), doc.page)
        return doc


# ── Collection operations ────────────────────────────────────────────


def add_item(
    doc: ContentDocument,
    collection: Path,
    item: Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Append an item to the end of a collection.

    An item without an ``id`` gets a generated one.  Raises
    DuplicateItemError if the id is already used in the collection.
    """
    record = dict(item)
    if not record.get(ID_FIELD):
        record[ID_FIELD] = new_item_id()
    if get_item(doc, collection, record[ID_FIELD]) is not None:
        raise DuplicateItemError("/".join(collection), str(record[ID_FIELD]))
    try:
        return _apply(
            doc,
            _real_path(collection),
            lambda items: [*(items if isinstance(items, list) else []), record],
            now,
        )
    except _ItemNotFound as exc:
        logger.warning("No item '%s' on path %s in %s, ignoring", exc, "/".join(collection), doc.page)
        return doc


def update_item(
    doc: ContentDocument,
    collection: Path,
    item_id: str,
    changes: Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Shallow-merge ``changes`` into the item with ``item_id``.

    The item's id is never changed.  An unknown id is a logged no-op.
    """
    if get_item(doc, collection, item_id) is None:
        logger.warning("No item '%s' in %s of %s, ignoring update", item_id, "/".join(collection), doc.page)
        return doc
    changes = {k: v for k, v in changes.items() if k != ID_FIELD}
    return _apply(doc, [*_real_path(collection), str(item_id)], _merge(changes), now)


def remove_item(
    doc: ContentDocument,
    collection: Path,
    item_id: str,
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Remove the item with ``item_id``; an unknown id is a logged no-op."""
    if get_item(doc, collection, item_id) is None:
        logger.warning("No item '%s' in %s of %s, ignoring removal", item_id, "/".join(collection), doc.page)
        return doc
    return _apply(
        doc,
        _real_path(collection),
        lambda items: [i for i in items if not _same_id(i, item_id)],
        now,
    )


def move_item(
    doc: ContentDocument,
    collection: Path,
    index: int,
    direction: MoveDirection | str,
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Swap the item at ``index`` with its neighbour.

    Moving the first item up, the last item down, or an index outside the
    collection leaves the document unchanged.
    """
    direction = MoveDirection(direction)
    items = get_collection(doc, collection)
    target = index - 1 if direction == MoveDirection.UP else index + 1
    if not (0 <= index < len(items)) or not (0 <= target < len(items)):
        return doc

    def swap(current: list[Any]) -> list[Any]:
        swapped = list(current)
        swapped[index], swapped[target] = swapped[target], swapped[index]
        return swapped

    return _apply(doc, _real_path(collection), swap, now)


# ── Document operations ──────────────────────────────────────────────


def set_status(
    doc: ContentDocument,
    status: ContentStatus | str,
    *,
    now: datetime | None = None,
) -> ContentDocument:
    """Set the lifecycle status."""
    return doc.model_copy(
        update={"status": ContentStatus(status), "last_updated": now or utcnow()}
    )


def reset_to_defaults(page: str) -> ContentDocument:
    """Return the factory document for ``page``, discarding all edits."""
    logger.info("Resetting %s to defaults", page)
    return default_document(page)
