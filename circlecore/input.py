"""Keyboard and pointer settings."""

from __future__ import annotations

from circlecore.signal import Signal

DEFAULT_KEYBOARD_LAYOUT = "us"
DEFAULT_KEY_REPEAT_DELAY = 500
DEFAULT_KEY_REPEAT_RATE = 30
DEFAULT_MOUSE_SPEED = 1.0


class InputManager:
    """Holds keyboard layout, key repeat and mouse speed; announces changes."""

    def __init__(self) -> None:
        self._keyboard_layout = DEFAULT_KEYBOARD_LAYOUT
        self._key_repeat_delay = DEFAULT_KEY_REPEAT_DELAY
        self._key_repeat_rate = DEFAULT_KEY_REPEAT_RATE
        self._mouse_speed = DEFAULT_MOUSE_SPEED
        self.keyboard_layout_changed = Signal()
        self.key_repeat_delay_changed = Signal()
        self.key_repeat_rate_changed = Signal()
        self.mouse_speed_changed = Signal()

    @property
    def keyboard_layout(self) -> str:
        return self._keyboard_layout

    @keyboard_layout.setter
    def keyboard_layout(self, layout: str) -> None:
        if layout == self._keyboard_layout:
            return
        self._keyboard_layout = layout
        self.keyboard_layout_changed.emit()

    @property
    def key_repeat_delay(self) -> int:
        """Delay before key repeat starts, in milliseconds."""
        return self._key_repeat_delay

    @key_repeat_delay.setter
    def key_repeat_delay(self, delay: int) -> None:
        if delay == self._key_repeat_delay:
            return
        self._key_repeat_delay = delay
        self.key_repeat_delay_changed.emit()

    @property
    def key_repeat_rate(self) -> int:
        """Repeated keystrokes per second."""
        return self._key_repeat_rate

    @key_repeat_rate.setter
    def key_repeat_rate(self, rate: int) -> None:
        if rate == self._key_repeat_rate:
            return
        self._key_repeat_rate = rate
        self.key_repeat_rate_changed.emit()

    @property
    def mouse_speed(self) -> float:
        return self._mouse_speed

    @mouse_speed.setter
    def mouse_speed(self, speed: float) -> None:
        if speed == self._mouse_speed:
            return
        self._mouse_speed = speed
        self.mouse_speed_changed.emit()