"""Tests for settings persistence."""

import json

from settings import load_settings, note_root, save_settings


def test_defaults_when_missing(settings_file):
    """Test a missing settings file yields defaults."""
    s = load_settings()
    assert s["note_roots"] == []
    assert s["file_path_pattern"] == "YYYY/MM/DD.md"
    assert s["editor"] is None
    assert note_root(s) is None


def test_round_trip(settings_file):
    """Test saved settings are loaded back."""
    s = load_settings()
    s["note_roots"] = ["/home/me/notes", "/tmp/other"]
    s["file_path_pattern"] = "journal/YYYY-MM-DD"
    s["editor"] = "code"
    s["window_x"] = 10
    s["window_y"] = 20
    save_settings(s)

    loaded = load_settings()
    assert loaded == s
    assert note_root(loaded) == "/home/me/notes"


def test_corrupt_file_falls_back(settings_file):
    """Test invalid JSON is ignored."""
    settings_file.write_text("{not json")
    assert load_settings()["file_path_pattern"] == "YYYY/MM/DD.md"


def test_wrong_types_ignored(settings_file):
    """Test stored values of the wrong type keep their defaults."""
    settings_file.write_text(json.dumps({
        "note_roots": ["/ok", 3, ""],
        "file_path_pattern": 42,
        "editor": "  ",
        "window_x": "left",
    }))
    s = load_settings()
    assert s["note_roots"] == ["/ok"]
    assert s["file_path_pattern"] == "YYYY/MM/DD.md"
    assert s["editor"] is None
    assert s["window_x"] is None


def test_non_object_file_ignored(settings_file):
    """Test a JSON list at top level is ignored."""
    settings_file.write_text("[]")
    assert load_settings()["note_roots"] == []


def test_defaults_not_shared(settings_file):
    """Test mutating loaded settings does not leak into later loads."""
    load_settings()["note_roots"].append("/leak")
    assert load_settings()["note_roots"] == []
