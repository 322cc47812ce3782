import pytest

from circlecore.display import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_REFRESH_RATE,
    DEFAULT_RESOLUTION,
    MAX_BRIGHTNESS,
    MIN_BRIGHTNESS,
    DisplayManager,
    Size,
)


@pytest.fixture
def manager():
    return DisplayManager()


def test_defaults(manager):
    assert manager.brightness == DEFAULT_BRIGHTNESS
    assert manager.resolution == Size(1920, 1080)
    assert manager.refresh_rate == DEFAULT_REFRESH_RATE


def test_screen_values_override_defaults():
    manager = DisplayManager(resolution=(1280, 720), refresh_rate=75)
    assert manager.resolution == Size(1280, 720)
    assert manager.refresh_rate == 75


@pytest.mark.parametrize("requested, expected", [(150, MAX_BRIGHTNESS), (-5, MIN_BRIGHTNESS)])
def test_brightness_clamped(manager, requested, expected):
    manager.brightness = requested
    assert manager.brightness == expected


def test_brightness_emits_only_on_change(manager):
    calls = []
    manager.brightness_changed.connect(lambda: calls.append(manager.brightness))
    manager.brightness = 40
    manager.brightness = 40
    assert calls == [40]


def test_resolution_accepts_tuple(manager):
    calls = []
    manager.resolution_changed.connect(lambda: calls.append(manager.resolution))
    manager.resolution = (2560, 1440)
    assert calls == [Size(2560, 1440)]
    assert manager.resolution.width == 2560


def test_same_resolution_does_not_emit(manager):
    calls = []
    manager.resolution_changed.connect(lambda: calls.append(True))
    manager.resolution = tuple(DEFAULT_RESOLUTION)
    assert calls == []


def test_refresh_rate_change(manager):
    calls = []
    manager.refresh_rate_changed.connect(lambda: calls.append(manager.refresh_rate))
    manager.refresh_rate = 144
    manager.refresh_rate = 144
    assert calls == [144]


def test_scaling_change(manager):
    calls = []
    manager.scaling_changed.connect(lambda: calls.append(manager.scaling))
    manager.scaling = 1.5
    manager.scaling = 1.5
    assert calls == [1.5]