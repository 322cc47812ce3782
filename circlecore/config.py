"""Persistent key/value configuration stored in an INI file."""

from __future__ import annotations

import configparser
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from circlecore.signal import Signal

APP_DIR_NAME = "circleos"
_GENERAL_SECTION = "General"


def default_config_dir() -> Path:
    """Directory holding the desktop's configuration files."""
    return Path(user_config_dir(APP_DIR_NAME))


def _normalize(key: str) -> str:
    return "/".join(part for part in key.split("/") if part)


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


class _IniStore:
    """Slash-separated keys kept in memory and written to an INI file.

    The first key segment is the section; keys without a group live in
    the ``General`` section.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._values: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        if not self.path.is_file():
            return
        parser = _new_parser()
        parser.read(self.path, encoding="utf-8")
        for section in parser.sections():
            prefix = "" if section == _GENERAL_SECTION else section + "/"
            for option, raw in parser.items(section):
                key = _normalize(prefix + option.replace("\\", "/"))
                if key:
                    self._values[key] = raw

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(_normalize(key), default)

    def set(self, key: str, value: Any) -> None:
        key = _normalize(key)
        if not key:
            raise KeyError("empty configuration key")
        self._values[key] = value

    def contains(self, key: str) -> bool:
        return _normalize(key) in self._values

    def remove(self, key: str) -> None:
        """Remove ``key`` and everything grouped beneath it; '' clears all."""
        key = _normalize(key)
        if not key:
            self._values.clear()
            return
        prefix = key + "/"
        for existing in [k for k in self._values if k == key or k.startswith(prefix)]:
            del self._values[existing]

    def _children(self, group: str) -> list[str]:
        group = _normalize(group)
        prefix = group + "/" if group else ""
        return [k[len(prefix):] for k in self._values if k.startswith(prefix)]

    def child_groups(self, group: str = "") -> list[str]:
        return sorted({rest.split("/", 1)[0] for rest in self._children(group) if "/" in rest})

    def child_keys(self, group: str = "") -> list[str]:
        return sorted(rest for rest in self._children(group) if "/" not in rest)

    def sync(self) -> None:
        sections: dict[str, dict[str, str]] = {}
        for key in sorted(self._values):
            section, sep, option = key.partition("/")
            if not sep:
                section, option = _GENERAL_SECTION, key
            sections.setdefault(section, {})[option.replace("/", "\\")] = _format(self._values[key])
        parser = _new_parser()
        parser.read_dict(sections)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                parser.write(handle)
            os.replace(tmp_name, self.path)
        except BaseException:
            with suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise


class ConfigManager:
    """Application configuration kept in ``<config dir>/config.ini``."""

    def __init__(self, config_dir: str | os.PathLike[str] | None = None) -> None:
        directory = Path(config_dir) if config_dir is not None else default_config_dir()
        directory.mkdir(parents=True, exist_ok=True)
        self._config_path = directory / "config.ini"
        self._store = _IniStore(self._config_path)
        self.value_changed = Signal()

    @property
    def config_path(self) -> str:
        return str(self._config_path)

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        return self._store.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, write it out and announce it."""
        self._store.set(key, value)
        self._store.sync()
        self.value_changed.emit(key, value)

    def remove(self, key: str) -> None:
        """Remove ``key`` and any keys grouped beneath it."""
        self._store.remove(key)
        self._store.sync()

    def contains(self, key: str) -> bool:
        return self._store.contains(key)

    def sync(self) -> None:
        """Write the current configuration to disk."""
        self._store.sync()