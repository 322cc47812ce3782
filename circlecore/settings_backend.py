"""Categorised desktop settings stored in ``settings.conf``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from circlecore.config import _IniStore, default_config_dir
from circlecore.signal import Signal


class SettingsBackend:
    """Settings grouped by category, written to disk on every change."""

    def __init__(self, config_dir: str | os.PathLike[str] | None = None) -> None:
        directory = Path(config_dir) if config_dir is not None else default_config_dir()
        self._path = directory / "settings.conf"
        self._store = _IniStore(self._path)
        self.setting_changed = Signal()
        self.category_reset = Signal()

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def _key(category: str, key: str) -> str:
        return f"{category}/{key}"

    def get(self, category: str, key: str, default: Any = None) -> Any:
        """Return the setting ``key`` in ``category``, or ``default``."""
        return self._store.get(self._key(category, key), default)

    def set(self, category: str, key: str, value: Any) -> None:
        """Store a setting, write it out and announce the change."""
        self._store.set(self._key(category, key), value)
        self._store.sync()
        self.setting_changed.emit(category, key, value)

    def categories(self) -> list[str]:
        """Names of all categories, sorted."""
        return self._store.child_groups()

    def keys(self, category: str) -> list[str]:
        """Keys directly inside ``category``, sorted."""
        return self._store.child_keys(category)

    def reset(self, category: str) -> None:
        """Remove every setting in ``category`` and announce it."""
        self._store.remove(category)
        self._store.sync()
        self.category_reset.emit(category)