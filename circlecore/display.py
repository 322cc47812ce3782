"""Display brightness, mode and scaling."""

from __future__ import annotations

from typing import NamedTuple

from circlecore.signal import Signal

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100
DEFAULT_BRIGHTNESS = 80
DEFAULT_REFRESH_RATE = 60
DEFAULT_SCALING = 1.0


class Size(NamedTuple):
    width: int
    height: int


DEFAULT_RESOLUTION = Size(1920, 1080)


class DisplayManager:
    """Holds the primary display's settings and announces changes.

    ``resolution`` and ``refresh_rate`` describe the current screen when
    known; otherwise the defaults are used.
    """

    def __init__(
        self,
        resolution: tuple[int, int] | None = None,
        refresh_rate: int | None = None,
    ) -> None:
        self._brightness = DEFAULT_BRIGHTNESS
        self._resolution = Size(*resolution) if resolution is not None else DEFAULT_RESOLUTION
        self._refresh_rate = refresh_rate if refresh_rate is not None else DEFAULT_REFRESH_RATE
        self._scaling = DEFAULT_SCALING
        self.brightness_changed = Signal()
        self.resolution_changed = Signal()
        self.refresh_rate_changed = Signal()
        self.scaling_changed = Signal()

    @property
    def brightness(self) -> int:
        return self._brightness

    @brightness.setter
    def brightness(self, brightness: int) -> None:
        brightness = max(MIN_BRIGHTNESS, min(MAX_BRIGHTNESS, int(brightness)))
        if brightness == self._brightness:
            return
        self._brightness = brightness
        self.brightness_changed.emit()

    @property
    def resolution(self) -> Size:
        return self._resolution

    @resolution.setter
    def resolution(self, resolution: tuple[int, int]) -> None:
        size = Size(*resolution)
        if size == self._resolution:
            return
        self._resolution = size
        self.resolution_changed.emit()

    @property
    def refresh_rate(self) -> int:
        return self._refresh_rate

    @refresh_rate.setter
    def refresh_rate(self, rate: int) -> None:
        if rate == self._refresh_rate:
            return
        self._refresh_rate = rate
        self.refresh_rate_changed.emit()

    @property
    def scaling(self) -> float:
        return self._scaling

    @scaling.setter
    def scaling(self, scaling: float) -> None:
        if scaling == self._scaling:
            return
        self._scaling = scaling
        self.scaling_changed.emit()