"""In-memory notification channel (development/testing)."""

import threading
from collections import deque
from typing import Any

from src.core.result import OK, Result
from src.domain.errors import NotificationError


class InMemoryNotificationChannel:
    """Records the most recent notifications; never fails."""

    def __init__(self, *, history_size: int = 1000) -> None:
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self._sent: deque[tuple[str, dict[str, Any]]] = deque(maxlen=history_size)
        self._lock = threading.Lock()

    def notify(
        self, channel: str, notification: dict[str, Any]
    ) -> Result[None, NotificationError]:
        with self._lock:
            self._sent.append((channel, dict(notification)))
        return OK

    def sent(self, channel: str | None = None) -> list[tuple[str, dict[str, Any]]]:
        """Recorded (channel, notification) pairs, optionally filtered."""
        with self._lock:
            if channel is None:
                return list(self._sent)
            return [item for item in self._sent if item[0] == channel]
