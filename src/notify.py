"""Non-blocking notices surfaced to the operator.

The editing session reports outcomes (saved, publish failed, schema
synchronized) through a Notifier.  Anything with a ``notify(level,
message)`` method qualifies; the notifications store is one.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Protocol

logger = logging.getLogger(__name__)


class NoticeLevel(StrEnum):
    """Severity of an operator notice."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Notifier(Protocol):
    def notify(self, level: NoticeLevel, message: str) -> None: ...


_LOG_LEVELS = {
    NoticeLevel.SUCCESS: logging.INFO,
    NoticeLevel.INFO: logging.INFO,
    NoticeLevel.WARNING: logging.WARNING,
    NoticeLevel.ERROR: logging.ERROR,
}


class LoggingNotifier:
    """Notifier that writes notices to the module logger."""

    def notify(self, level: NoticeLevel, message: str) -> None:
        logger.log(_LOG_LEVELS[NoticeLevel(level)], "[%s] %s", level, message)
