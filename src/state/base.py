"""Observable state containers with optional JSON-file persistence.

A store holds one immutable Pydantic model.  ``set`` replaces it with an
updated copy, notifies subscribers, and writes it to disk when the store
was given a storage directory.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)


class StateStore(Generic[S]):
    """Base class for observable, optionally persisted state.

    Subclasses set ``state_type`` and, if persisted, ``storage_name``.
    """

    state_type: ClassVar[type[BaseModel]]
    storage_name: ClassVar[str | None] = None

    def __init__(self, storage_dir: Path | None = None) -> None:
        self._path: Path | None = None
        if storage_dir is not None and self.storage_name:
            self._path = Path(storage_dir) / f"{self.storage_name}.json"
        self._listeners: list[Callable[[S], None]] = []
        self._state: S = self._load()

    @property
    def state(self) -> S:
        return self._state

    @property
    def path(self) -> Path | None:
        return self._path

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Register ``listener``; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, **changes: Any) -> S:
        """Replace fields of the state and notify subscribers."""
        data = self._state.model_dump()
        data.update(changes)
        return self._replace(self.state_type.model_validate(data))

    def reset(self) -> S:
        """Return to the initial state."""
        return self._replace(self.state_type())

    # ── Private helpers ──────────────────────────────────────────

    def _replace(self, state: Any) -> S:
        self._state = state
        self._save()
        for listener in list(self._listeners):
            listener(state)
        return state

    def _load(self) -> S:
        if self._path is None or not self._path.exists():
            return self.state_type()  # type: ignore[return-value]
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return self.state_type.model_validate(raw)  # type: ignore[return-value]
        except (json.JSONDecodeError, ValueError):
            logger.warning("Corrupt state file at %s, starting fresh", self._path)
            return self.state_type()  # type: ignore[return-value]

    def _save(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(self._state.model_dump_json(indent=2), encoding="utf-8")
