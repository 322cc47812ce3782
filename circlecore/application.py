"""The core application object and its running state."""

from __future__ import annotations

import logging
import os
import socket

from circlecore.signal import Signal

VERSION = "1.0.0"

_log = logging.getLogger(__name__)


def _sd_notify(state: str) -> bool:
    """Send a readiness message to the service manager, if one listens."""
    address = os.environ.get("NOTIFY_SOCKET")
    family = getattr(socket, "AF_UNIX", None)
    if not address or family is None:
        return False
    if address.startswith("@"):
        address = "\0" + address[1:]
    try:
        with socket.socket(family, socket.SOCK_DGRAM) as sock:
            sock.connect(address)
            sock.sendall(state.encode("utf-8"))
    except OSError as exc:
        _log.debug("service notification %r failed: %s", state, exc)
        return False
    return True


class Application:
    """Tracks whether the desktop core is running and announces transitions."""

    def __init__(self) -> None:
        self._running = False
        self._version = VERSION
        self.running_changed = Signal()
        self.initialized = Signal()
        self.shutdown_requested = Signal()
        _log.debug("CircleOS Core Application initialized")

    @property
    def version(self) -> str:
        return self._version

    @property
    def is_running(self) -> bool:
        return self._running

    def initialize(self) -> None:
        """Enter the running state; does nothing if already running."""
        if self._running:
            return
        _log.info("Initializing CircleOS version %s", self._version)
        _sd_notify("READY=1")
        self._running = True
        self.running_changed.emit()
        self.initialized.emit()

    def shutdown(self) -> None:
        """Leave the running state; does nothing if not running."""
        if not self._running:
            return
        _log.info("Shutting down CircleOS")
        _sd_notify("STOPPING=1")
        self._running = False
        self.running_changed.emit()
        self.shutdown_requested.emit()