"""Debounced autosave.

Each mutation restarts a single timer; when the editor has been quiet for
``interval`` seconds the save callback runs once.  Failures are logged and
left for the next mutation or an explicit save to recover; there is no
automatic retry.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 10.0

TimerFactory = Callable[..., Any]


class AutoSaveState(StrEnum):
    """Where the scheduler is in its idle → pending → saving cycle."""

    IDLE = "idle"
    PENDING = "pending"
    SAVING = "saving"


class AutoSaveScheduler:
    """Collapses bursts of mutations into one save per quiet period.

    Args:
        save: Zero-argument callable that snapshots and persists the
            current document.
        interval: Quiet period in seconds.
        timer_factory: Builds the timer; called like ``threading.Timer``
            with ``(interval, function, args=...)``.
    """

    def __init__(
        self,
        save: Callable[[], object],
        interval: float = DEFAULT_INTERVAL,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._save = save
        self.interval = interval
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Any = None
        self._generation = 0
        self._saving = False
        self._closed = False

    @property
    def state(self) -> AutoSaveState:
        with self._lock:
            if self._saving:
                return AutoSaveState.SAVING
            if self._timer is not None:
                return AutoSaveState.PENDING
            return AutoSaveState.IDLE

    @property
    def closed(self) -> bool:
        return self._closed

    def notify_mutation(self) -> None:
        """Restart the quiet-period timer after a document change."""
        with self._lock:
            if self._closed:
                return
            self._cancel_locked()
            self._generation += 1
            timer = self._timer_factory(self.interval, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()
        logger.debug("Autosave scheduled in %.1fs", self.interval)

    def cancel(self) -> None:
        """Drop a pending save without running it."""
        with self._lock:
            self._cancel_locked()

    def flush(self) -> bool:
        """Run a pending save immediately.  Returns True if one was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._cancel_locked()
        self._run()
        return True

    def close(self) -> None:
        """Cancel any pending save and refuse further scheduling."""
        with self._lock:
            self._closed = True
            self._cancel_locked()

    # ── Private helpers ──────────────────────────────────────────

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            # invalidate a timer that already fired but has not taken the lock
            self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if self._closed or generation != self._generation:
                return
            self._timer = None
        self._run()

    def _run(self) -> None:
        with self._lock:
            self._saving = True
        try:
            self._save()
        except Exception:
            logger.warning("Autosave failed", exc_info=True)
        finally:
            with self._lock:
                self._saving = False
