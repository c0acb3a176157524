"""Persisted editor preferences.

Stored as one JSON object at $XDG_CONFIG_HOME/record-actions/settings.json.
Only the wrap-around navigation flag is read by the bar today; unknown keys
are preserved on save.

Import as: import record_actions.settings
"""

import json
import os
import tempfile
from pathlib import Path

CYCLE_NAVIGATION_KEY = "cycle_navigation"


def get_config_path() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(config_home) / "record-actions" / "settings.json"


def load_settings() -> dict:
    """Return the stored settings; {} when the file is absent, unreadable or not an object."""
    try:
        data = json.loads(get_config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Replace the settings file; a crash mid-write leaves the old file intact."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, suffix=".tmp", delete=False
    ) as tmp:
        json.dump(data, tmp, indent=2, sort_keys=True)
        tmp.write("\n")
    try:
        os.replace(tmp.name, path)
    except OSError:
        Path(tmp.name).unlink(missing_ok=True)
        raise


def load_setting(key: str, default=None):
    return load_settings().get(key, default)


def save_setting(key: str, value) -> None:
    save_settings({**load_settings(), key: value})


def load_cycle_navigation() -> bool:
    """Whether prev/next wrap around at the ends of the table."""
    return bool(load_setting(CYCLE_NAVIGATION_KEY, False))


def save_cycle_navigation(enabled: bool) -> None:
    save_setting(CYCLE_NAVIGATION_KEY, bool(enabled))
