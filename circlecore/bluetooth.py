"""Bluetooth adapter state and device connections."""

from __future__ import annotations

import logging

from circlecore.signal import Signal

_log = logging.getLogger(__name__)


class BluetoothManager:
    """Tracks the adapter's power and discovery state and connection requests."""

    def __init__(self) -> None:
        self._enabled = False
        self._discovering = False
        self._devices: list[str] = []
        self.enabled_changed = Signal()
        self.discovering_changed = Signal()
        self.devices_changed = Signal()
        self.device_connected = Signal()
        self.device_disconnected = Signal()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self.enabled_changed.emit()

    @property
    def discovering(self) -> bool:
        return self._discovering

    @property
    def devices(self) -> list[str]:
        """A copy of the known device addresses."""
        return list(self._devices)

    def start_discovery(self) -> None:
        self._discovering = True
        self.discovering_changed.emit()

    def stop_discovery(self) -> None:
        self._discovering = False
        self.discovering_changed.emit()

    def connect_to_device(self, address: str) -> None:
        """Request a connection to the device at ``address``."""
        _log.info("Connecting to Bluetooth device: %s", address)
        self.device_connected.emit(address)

    def disconnect_device(self, address: str) -> None:
        """Request that the device at ``address`` be disconnected."""
        _log.info("Disconnecting Bluetooth device: %s", address)
        self.device_disconnected.emit(address)