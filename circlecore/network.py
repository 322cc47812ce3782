"""Network connectivity and Wi-Fi connections."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from circlecore.power import BusInterface
from circlecore.signal import Signal

CONNECTIVITY_FULL = 4
NO_CONNECTION = "none"

_log = logging.getLogger(__name__)


class NetworkManager:
    """Tracks connectivity reported by the network service.

    ``network_service`` answers ``CheckConnectivity``; ``scanner``, if
    given, lists the SSIDs of the Wi-Fi networks in range.
    """

    def __init__(
        self,
        network_service: BusInterface | None = None,
        scanner: Callable[[], Iterable[str]] | None = None,
    ) -> None:
        self._connected = False
        self._connection_type = NO_CONNECTION
        self._signal_strength = 0
        self._ssid = ""
        self._service = network_service
        self._scanner = scanner
        self.connected_changed = Signal()
        self.connection_type_changed = Signal()
        self.signal_strength_changed = Signal()
        self.ssid_changed = Signal()
        self.update_status()

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def connection_type(self) -> str:
        return self._connection_type

    @property
    def signal_strength(self) -> int:
        return self._signal_strength

    @property
    def ssid(self) -> str:
        return self._ssid

    def update_status(self) -> None:
        """Ask the network service whether there is full connectivity."""
        if self._service is None or not self._service.is_valid:
            return
        reply = self._service.call("CheckConnectivity")
        if reply is None:
            return
        connected = reply == CONNECTIVITY_FULL
        if connected != self._connected:
            self._connected = connected
            self.connected_changed.emit()

    def connect_to_wifi(self, ssid: str, password: str) -> None:
        """Select the Wi-Fi network ``ssid``."""
        self._ssid = ssid
        _log.info("Connecting to Wi-Fi: %s", ssid)

    def disconnect(self) -> None:
        """Drop the current connection."""
        _log.info("Disconnecting from network")
        self._connected = False
        self._connection_type = NO_CONNECTION
        self.connected_changed.emit()

    def available_networks(self) -> list[str]:
        """SSIDs of the Wi-Fi networks in range."""
        if self._scanner is None:
            return []
        return list(self._scanner())