# circlecore

Core services for a desktop environment, usable from plain Python. Each
service keeps its state in memory and announces changes through `Signal`
objects.

## Modules

- `circlecore.signal.Signal`: `connect(slot)` registers a callable,
  `disconnect(slot)` removes it (raising `ValueError` if it was not
  connected), `emit(*args)` calls every connected slot in order.
- `circlecore.application.Application`: the lifecycle of the desktop core.
  `initialize()` and `shutdown()` switch `is_running` and emit
  `running_changed`, `initialized` and `shutdown_requested`. When the
  `NOTIFY_SOCKET` environment variable is set, `READY=1` and `STOPPING=1`
  are sent to it. `version` is the package version.
- `circlecore.config.ConfigManager`: key/value configuration in
  `config.ini` inside the user's configuration directory (`circleos`,
  located with platformdirs) or a directory passed as `config_dir`.
  Keys are slash-separated (`"group/key"`). Methods: `value(key, default)`,
  `set_value(key, value)` (writes the file and emits `value_changed`),
  `remove(key)` (also removes keys grouped beneath it), `contains(key)`,
  `sync()`. `config_path` gives the file's path.
- `circlecore.settings_backend.SettingsBackend`: settings grouped by
  category in `settings.conf` in the same directory. Methods:
  `get(category, key, default)`, `set(category, key, value)`,
  `categories()`, `keys(category)` (both sorted) and `reset(category)`.
  Every change is written to disk at once and announced through
  `setting_changed` or `category_reset`.
- `circlecore.system_info.SystemInfo`: `hostname`, `kernel` (release),
  `os_version`, `total_memory` (bytes) and `cpu_cores`; `refresh()` reads
  them again and emits `updated`.
- `circlecore.audio.AudioManager`: `volume` (kept within 0–100, default
  50) and `muted`; `increase_volume()` and `decrease_volume()` step by 5,
  `toggle_mute()`, and `update_volume()` takes `(volume, muted)` from an
  optional `volume_reader` callable.
- `circlecore.bluetooth.BluetoothManager`: `enabled`, `discovering`,
  `devices`; `start_discovery()`, `stop_discovery()`,
  `connect_to_device(address)` and `disconnect_device(address)` emit the
  matching signals.
- `circlecore.display.DisplayManager`: `brightness` (0–100, default 80),
  `resolution` (a `Size(width, height)`, default 1920×1080),
  `refresh_rate` (default 60) and `scaling` (default 1.0).
- `circlecore.input.InputManager`: `keyboard_layout` (`"us"`),
  `key_repeat_delay` (500 ms), `key_repeat_rate` (30) and `mouse_speed`
  (1.0).
- `circlecore.notifications.NotificationManager`:
  `send_notification(title, message, icon, timeout)` emits
  `notification_received` and returns the notification's id; a positive
  `timeout` in milliseconds (default 5000) clears it automatically on a
  background timer. `clear_notification(notification_id)`, `clear_all()`,
  `pending`, and `close()` (also on leaving a `with` block) cancels the
  timers.
- `circlecore.power.PowerManager`: reads `capacity` and `status` from the
  battery's sysfs directory (`/sys/class/power_supply/BAT0` by default)
  with `update_battery_status()`; `set_power_profile(profile)` accepts
  `performance`, `balanced` or `power-save` and raises `ValueError`
  otherwise; `suspend()` and `hibernate()` call a login-manager interface.
- `circlecore.session.SessionManager`: `lock()`, `unlock()`, `logout()`,
  `shutdown()` and `reboot()`; `session_id` defaults to `XDG_SESSION_ID`.
- `circlecore.network.NetworkManager`: `update_status()` asks a network
  service for `CheckConnectivity` (4 means connected);
  `connect_to_wifi(ssid, password)`, `disconnect()` and
  `available_networks()`.

`PowerManager`, `SessionManager` and `NetworkManager` talk to system
services only through objects you pass in that follow the
`circlecore.power.BusInterface` protocol: an `is_valid` property and a
`call(method, *args)` method.

## Installation

```
pip install circlecore
```

For running the test suite:

```
pip install "circlecore[test]"
pytest
```

## Usage

```python
from circlecore.application import Application
from circlecore.config import ConfigManager
from circlecore.settings_backend import SettingsBackend

app = Application()
app.initialize()

config = ConfigManager()
config.set_value("test/key", "value")
assert config.contains("test/key")
print(config.value("test/key", None))
config.remove("test/key")

settings = SettingsBackend()
settings.set("appearance", "scheme", "dark")
print(settings.categories())
print(settings.keys("appearance"))
settings.reset("appearance")

app.shutdown()
```

Values such as the volume are kept within their valid range:

```python
from circlecore.audio import AudioManager

audio = AudioManager()
audio.volume_changed.connect(lambda volume: print("volume", volume))
audio.increase_volume()   # volume 55
audio.volume = 250        # volume 100
audio.toggle_mute()
```

## Command line

Print the version and the build next steps:

```
circlecore-info
```

## What it does not do

- It has no bus connection of its own: suspend, hibernate, logout,
  power-off, reboot and connectivity checks only happen through a
  `BusInterface` object you supply.
- It does not set the sound server's volume, apply display or input
  settings to the hardware, or apply power profiles; it only keeps and
  announces the values.
- `connect_to_wifi` only records the SSID, and `available_networks` lists
  only what a supplied `scanner` returns.
- `BluetoothManager` does not talk to an adapter; it records state and
  emits signals.
- There is no shell, panel, lock screen or other graphical interface;
  `SessionManager.lock()` calls a `show_lock_screen` callable if one is
  given.