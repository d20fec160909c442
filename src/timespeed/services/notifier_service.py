"""Notifier implementations for hosts without an on-screen HUD."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

logger = logging.getLogger(__name__)

QUICK_DURATION_MS = 1000
SHORT_DURATION_MS = 2000


@dataclass(frozen=True, slots=True)
class Notification:
    message: str
    duration_ms: int


class LoggingNotifier:
    """Write notifications to the log."""

    def quick_notify(self, message: str) -> None:
        logger.info("%s", message)

    def short_notify(self, message: str) -> None:
        logger.info("%s", message)


class RecordingNotifier:
    """Keep the most recent notifications so clients can fetch them."""

    def __init__(self, limit: int = 100) -> None:
        self._messages: deque[Notification] = deque(maxlen=limit)

    def quick_notify(self, message: str) -> None:
        self._messages.append(Notification(message, QUICK_DURATION_MS))

    def short_notify(self, message: str) -> None:
        self._messages.append(Notification(message, SHORT_DURATION_MS))

    @property
    def messages(self) -> list[str]:
        return [item.message for item in self._messages]

    def drain(self) -> list[Notification]:
        """Return and forget everything recorded so far."""

        drained = list(self._messages)
        self._messages.clear()
        return drained
