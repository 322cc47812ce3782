"""Output volume and mute state."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from circlecore.signal import Signal

MIN_VOLUME = 0
MAX_VOLUME = 100
DEFAULT_VOLUME = 50
VOLUME_STEP = 5

VolumeReader = Callable[[], Optional[Tuple[int, bool]]]

_log = logging.getLogger(__name__)


def _clamp(volume: int) -> int:
    return max(MIN_VOLUME, min(MAX_VOLUME, volume))


class AudioManager:
    """Holds the output volume (0-100) and mute flag and announces changes.

    ``volume_reader`` optionally supplies the current ``(volume, muted)``
    state of the sound server; it is consulted by ``update_volume``.
    """

    def __init__(self, volume_reader: VolumeReader | None = None) -> None:
        self._volume = DEFAULT_VOLUME
        self._muted = False
        self._reader = volume_reader
        self.volume_changed = Signal()
        self.muted_changed = Signal()
        self.update_volume()

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, volume: int) -> None:
        volume = _clamp(int(volume))
        if volume == self._volume:
            return
        self._volume = volume
        self.volume_changed.emit(volume)

    @property
    def muted(self) -> bool:
        return self._muted

    @muted.setter
    def muted(self, muted: bool) -> None:
        muted = bool(muted)
        if muted == self._muted:
            return
        self._muted = muted
        self.muted_changed.emit()

    def increase_volume(self) -> None:
        """Raise the volume by one step."""
        self.volume = self._volume + VOLUME_STEP

    def decrease_volume(self) -> None:
        """Lower the volume by one step."""
        self.volume = self._volume - VOLUME_STEP

    def toggle_mute(self) -> None:
        self.muted = not self._muted

    def update_volume(self) -> None:
        """Take the current state from the volume reader, if there is one."""
        if self._reader is None:
            return
        reading = self._reader()
        if reading is None:
            _log.debug("volume reader returned no state")
            return
        volume, muted = reading
        self.volume = volume
        self.muted = muted