"""The user session: locking, logging out and powering off."""

from __future__ import annotations

import logging
import os
from typing import Callable

from circlecore.power import BusInterface
from circlecore.signal import Signal

_log = logging.getLogger(__name__)


def _current_session_id() -> str:
    return os.environ.get("XDG_SESSION_ID", "")


class SessionManager:
    """Tracks the lock state and forwards session requests to the login manager.

    ``show_lock_screen`` is called when the session is locked;
    ``session_id`` defaults to the session the process belongs to.
    """

    def __init__(
        self,
        login_manager: BusInterface | None = None,
        session_id: str | None = None,
        show_lock_screen: Callable[[], object] | None = None,
    ) -> None:
        self._locked = False
        self._session_id = session_id if session_id is not None else _current_session_id()
        self._login_manager = login_manager
        self._show_lock_screen = show_lock_screen
        self.locked_changed = Signal()
        self.logout_requested = Signal()
        self.shutdown_requested = Signal()
        self.reboot_requested = Signal()

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def session_id(self) -> str:
        return self._session_id

    def _call(self, method: str, *args: object) -> None:
        if self._login_manager is not None and self._login_manager.is_valid:
            self._login_manager.call(method, *args)
        else:
            _log.debug("%s requested without a login manager", method)

    def lock(self) -> None:
        """Show the lock screen and enter the locked state."""
        if self._locked:
            return
        if self._show_lock_screen is not None:
            self._show_lock_screen()
        self._locked = True
        self.locked_changed.emit()

    def unlock(self) -> None:
        if not self._locked:
            return
        self._locked = False
        self.locked_changed.emit()

    def logout(self) -> None:
        """Announce the logout and terminate this session."""
        self.logout_requested.emit()
        self._call("TerminateSession", self._session_id)

    def shutdown(self) -> None:
        """Announce the shutdown and power the machine off."""
        self.shutdown_requested.emit()
        self._call("PowerOff", True)

    def reboot(self) -> None:
        """Announce the reboot and restart the machine."""
        self.reboot_requested.emit()
        self._call("Reboot", True)