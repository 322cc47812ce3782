import pytest

from circlecore.settings_backend import SettingsBackend


@pytest.fixture
def backend(tmp_path):
    return SettingsBackend(tmp_path)


def test_set_then_get(backend):
    backend.set("appearance", "theme", "dark")
    assert backend.get("appearance", "theme") == "dark"


def test_get_default(backend):
    assert backend.get("appearance", "missing", "fallback") == "fallback"
    assert backend.get("appearance", "missing") is None


def test_file_name(backend, tmp_path):
    assert backend.path == tmp_path / "settings.conf"
    backend.set("appearance", "theme", "dark")
    assert backend.path.is_file()


def test_categories_and_keys(backend):
    backend.set("sound", "volume", 40)
    backend.set("appearance", "theme", "dark")
    backend.set("appearance", "accent", "blue")
    assert backend.categories() == ["appearance", "sound"]
    assert backend.keys("appearance") == ["accent", "theme"]
    assert backend.keys("nothing") == []


def test_reset_removes_only_that_category(backend):
    backend.set("sound", "volume", 40)
    backend.set("appearance", "theme", "dark")
    reset = []
    backend.category_reset.connect(reset.append)
    backend.reset("appearance")
    assert reset == ["appearance"]
    assert backend.keys("appearance") == []
    assert backend.categories() == ["sound"]


def test_setting_changed_signal(backend):
    seen = []
    backend.setting_changed.connect(lambda *args: seen.append(args))
    backend.set("sound", "volume", 40)
    assert seen == [("sound", "volume", 40)]


def test_persistence(tmp_path):
    SettingsBackend(tmp_path).set("appearance", "theme", "dark")
    reopened = SettingsBackend(tmp_path)
    assert reopened.get("appearance", "theme") == "dark"
    assert reopened.categories() == ["appearance"]


def test_reset_persists(tmp_path):
    first = SettingsBackend(tmp_path)
    first.set("appearance", "theme", "dark")
    first.reset("appearance")
    assert SettingsBackend(tmp_path).get("appearance", "theme") is None