import pytest

from circlecore.audio import (
    DEFAULT_VOLUME,
    MAX_VOLUME,
    MIN_VOLUME,
    VOLUME_STEP,
    AudioManager,
)


@pytest.fixture
def manager():
    return AudioManager()


def test_defaults(manager):
    assert manager.volume == DEFAULT_VOLUME
    assert manager.muted is False


def test_set_volume_emits_new_value(manager):
    seen = []
    manager.volume_changed.connect(seen.append)
    manager.volume = 70
    assert manager.volume == 70
    assert seen == [70]


def test_same_volume_does_not_emit(manager):
    seen = []
    manager.volume_changed.connect(seen.append)
    manager.volume = manager.volume
    assert seen == []


@pytest.mark.parametrize("requested, expected", [(250, MAX_VOLUME), (-20, MIN_VOLUME)])
def test_volume_is_clamped(manager, requested, expected):
    manager.volume = requested
    assert manager.volume == expected


def test_increase_and_decrease_are_inverse(manager):
    start = manager.volume
    manager.increase_volume()
    assert manager.volume == start + VOLUME_STEP
    manager.decrease_volume()
    assert manager.volume == start


def test_increase_stops_at_maximum(manager):
    manager.volume = MAX_VOLUME
    seen = []
    manager.volume_changed.connect(seen.append)
    manager.increase_volume()
    assert manager.volume == MAX_VOLUME
    assert seen == []


def test_decrease_stops_at_minimum(manager):
    manager.volume = MIN_VOLUME
    manager.decrease_volume()
    assert manager.volume == MIN_VOLUME


def test_toggle_mute_twice_restores_state(manager):
    calls = []
    manager.muted_changed.connect(lambda: calls.append(manager.muted))
    manager.toggle_mute()
    manager.toggle_mute()
    assert calls == [True, False]
    assert manager.muted is False


def test_setting_same_mute_does_not_emit(manager):
    calls = []
    manager.muted_changed.connect(lambda: calls.append(True))
    manager.muted = False
    assert calls == []


def test_reader_supplies_initial_state():
    manager = AudioManager(volume_reader=lambda: (30, True))
    assert manager.volume == 30
    assert manager.muted is True


def test_update_volume_rereads_state():
    state = {"value": (20, False)}
    manager = AudioManager(volume_reader=lambda: state["value"])
    seen = []
    manager.volume_changed.connect(seen.append)
    state["value"] = (40, True)
    manager.update_volume()
    assert seen == [40]
    assert manager.muted is True


def test_reader_returning_none_keeps_state():
    manager = AudioManager(volume_reader=lambda: None)
    manager.update_volume()
    assert manager.volume == DEFAULT_VOLUME


def test_update_without_reader_keeps_state(manager):
    manager.volume = 10
    manager.update_volume()
    assert manager.volume == 10