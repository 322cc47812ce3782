"""Battery state, power profiles and system sleep."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from circlecore.signal import Signal

DEFAULT_POWER_SUPPLY_DIR = Path("/sys/class/power_supply/BAT0")
POWER_PROFILES = ("performance", "balanced", "power-save")
DEFAULT_POWER_PROFILE = "balanced"
CHARGING_STATES = frozenset({"Charging", "Full"})

_log = logging.getLogger(__name__)


@runtime_checkable
class BusInterface(Protocol):
    """A remote service interface that methods can be called on.

    ``call`` returns the reply's value, or ``None`` when there is no
    valid reply.
    """

    @property
    def is_valid(self) -> bool: ...

    def call(self, method: str, *args: Any) -> Any: ...


def _usable(interface: BusInterface | None) -> bool:
    return interface is not None and interface.is_valid


def _first_line(path: Path) -> str | None:
    try:
        with path.open(encoding="utf-8") as handle:
            return handle.readline().rstrip("\r\n")
    except OSError:
        return None


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


class PowerManager:
    """Reports the battery and forwards sleep requests to the login manager.

    ``login_manager`` is the login service interface used for suspend and
    hibernate; ``power_supply_dir`` is the battery's sysfs directory.
    """

    def __init__(
        self,
        login_manager: BusInterface | None = None,
        power_supply_dir: str | os.PathLike[str] = DEFAULT_POWER_SUPPLY_DIR,
    ) -> None:
        self._battery_level = 0
        self._charging = False
        self._power_profile = DEFAULT_POWER_PROFILE
        self._login_manager = login_manager
        self._supply_dir = Path(power_supply_dir)
        self.battery_level_changed = Signal()
        self.charging_changed = Signal()
        self.power_profile_changed = Signal()
        self.update_battery_status()

    @property
    def battery_level(self) -> int:
        """Battery charge in percent."""
        return self._battery_level

    @property
    def is_charging(self) -> bool:
        return self._charging

    @property
    def power_profile(self) -> str:
        return self._power_profile

    def update_battery_status(self) -> None:
        """Re-read the battery's capacity and charging state."""
        capacity = _first_line(self._supply_dir / "capacity")
        if capacity is not None:
            self._battery_level = _to_int(capacity)
            self.battery_level_changed.emit(self._battery_level)

        status = _first_line(self._supply_dir / "status")
        if status is not None:
            charging = status.strip() in CHARGING_STATES
            if charging != self._charging:
                self._charging = charging
                self.charging_changed.emit()

    def set_power_profile(self, profile: str) -> None:
        """Select one of ``POWER_PROFILES``; raise ValueError for others."""
        if profile not in POWER_PROFILES:
            raise ValueError(f"Invalid power profile: {profile!r}")
        if profile == self._power_profile:
            return
        self._power_profile = profile
        self.power_profile_changed.emit()

    def suspend(self) -> None:
        """Ask the login manager to suspend the machine."""
        if _usable(self._login_manager):
            self._login_manager.call("Suspend", True)  # type: ignore[union-attr]
        else:
            _log.debug("suspend requested without a login manager")

    def hibernate(self) -> None:
        """Ask the login manager to hibernate the machine."""
        if _usable(self._login_manager):
            self._login_manager.call("Hibernate", True)  # type: ignore[union-attr]
        else:
            _log.debug("hibernate requested without a login manager")