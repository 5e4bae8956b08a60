"""JSON-based settings persistence for the markdown calendar."""

import json
import logging
import os

from note_paths import DEFAULT_PATTERN

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".markdown-calendar-settings.json")

_DEFAULTS = {
    "note_roots": [],
    "file_path_pattern": DEFAULT_PATTERN,
    "editor": None,
    "window_x": None,
    "window_y": None,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["note_roots"] = []
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, e)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings
    if "note_roots" in stored and isinstance(stored["note_roots"], list):
        settings["note_roots"] = [r for r in stored["note_roots"] if isinstance(r, str) and r]
    if "file_path_pattern" in stored and isinstance(stored["file_path_pattern"], str):
        settings["file_path_pattern"] = stored["file_path_pattern"]
    if "editor" in stored and isinstance(stored["editor"], str) and stored["editor"].strip():
        settings["editor"] = stored["editor"]
    for key in ("window_x", "window_y"):
        if key in stored and isinstance(stored[key], int):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def note_root(settings: dict) -> str | None:
    """Return the notes folder in use: the first configured root."""
    roots = settings.get("note_roots") or []
    return roots[0] if roots else None
