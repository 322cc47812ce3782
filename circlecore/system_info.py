"""Facts about the machine the desktop runs on."""

from __future__ import annotations

import os
import platform
import socket

from circlecore.application import VERSION
from circlecore.signal import Signal


def _total_memory() -> int:
    try:
        return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        return 0


class SystemInfo:
    """Hostname, kernel, OS version, memory and CPU count; see ``refresh``."""

    def __init__(self) -> None:
        self._hostname = ""
        self._kernel = ""
        self._os_version = ""
        self._total_memory = 0
        self._cpu_cores = 0
        self.updated = Signal()
        self.refresh()

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def kernel(self) -> str:
        return self._kernel

    @property
    def os_version(self) -> str:
        return self._os_version

    @property
    def total_memory(self) -> int:
        """Total physical memory in bytes."""
        return self._total_memory

    @property
    def cpu_cores(self) -> int:
        return self._cpu_cores

    def refresh(self) -> None:
        """Re-read all facts and emit ``updated``."""
        try:
            self._hostname = socket.gethostname()
        except OSError:
            pass
        self._kernel = platform.release().strip()
        self._os_version = VERSION
        self._total_memory = _total_memory()
        self._cpu_cores = os.cpu_count() or 0
        self.updated.emit()