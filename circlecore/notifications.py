"""Desktop notifications with optional automatic expiry."""

from __future__ import annotations

import logging
import threading
from itertools import count
from types import TracebackType

from circlecore.signal import Signal

DEFAULT_TIMEOUT_MS = 5000

_log = logging.getLogger(__name__)


class NotificationManager:
    """Issues numbered notifications and clears them after their timeout."""

    def __init__(self) -> None:
        self._ids = count(1)
        self._timers: dict[int, threading.Timer] = {}
        self._lock = threading.Lock()
        self.notification_received = Signal()
        self.notification_cleared = Signal()
        self.all_cleared = Signal()

    def send_notification(
        self,
        title: str,
        message: str,
        icon: str = "",
        timeout: int = DEFAULT_TIMEOUT_MS,
    ) -> int:
        """Announce a notification and return its id.

        With a positive ``timeout`` (milliseconds) the notification is
        cleared automatically once it elapses.
        """
        notification_id = next(self._ids)
        _log.info("Notification: %s - %s", title, message)
        self.notification_received.emit(notification_id, title, message, icon)
        if timeout > 0:
            timer = threading.Timer(timeout / 1000.0, self._expire, args=(notification_id,))
            timer.daemon = True
            with self._lock:
                self._timers[notification_id] = timer
            timer.start()
        return notification_id

    def _expire(self, notification_id: int) -> None:
        with self._lock:
            self._timers.pop(notification_id, None)
        self.clear_notification(notification_id)

    @property
    def pending(self) -> list[int]:
        """Ids of notifications still waiting to expire, ascending."""
        with self._lock:
            return sorted(self._timers)

    def clear_notification(self, notification_id: int) -> None:
        self.notification_cleared.emit(notification_id)

    def clear_all(self) -> None:
        self.all_cleared.emit()

    def close(self) -> None:
        """Cancel every pending automatic expiry."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def __enter__(self) -> NotificationManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()