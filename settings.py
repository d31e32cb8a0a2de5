"""JSON-based settings persistence for the range picker options."""

import json
import logging
import os

_LOGGER = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".range-calendar-settings.json")

_DEFAULTS = {
    "starting_month": None,
    "starting_year": None,
    "backward_months": 1,
    "forward_months": 1,
    "use_monday": False,
    "min_select_date": None,
    "max_select_date": None,
    "weekly_select_range": None,
    "monthly_select_range": None,
}

_INT_KEYS = ("starting_month", "starting_year", "backward_months", "forward_months",
             "weekly_select_range", "monthly_select_range")
_DATE_KEYS = ("min_select_date", "max_select_date")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    path = path or _SETTINGS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            return settings
        if "use_monday" in stored and isinstance(stored["use_monday"], bool):
            settings["use_monday"] = stored["use_monday"]
        for key in _INT_KEYS:
            value = stored.get(key)
            if isinstance(value, int) and not isinstance(value, bool):
                settings[key] = value
        for key in _DATE_KEYS:
            if isinstance(stored.get(key), str):
                settings[key] = stored[key]
    except FileNotFoundError:
        pass
    except (json.JSONDecodeError, OSError) as exc:
        _LOGGER.warning("Could not read settings from %s: %s", path, exc)
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def update_settings(changes: dict, path: str | None = None) -> dict:
    """Merge *changes* into the stored settings, save, and return the result.

    Keys the picker does not know are dropped.
    """
    settings = load_settings(path)
    for key, value in changes.items():
        if key in _DEFAULTS:
            settings[key] = value
        else:
            _LOGGER.debug("Not saving unknown setting %r", key)
    save_settings(settings, path)
    return settings
