import pytest

import settings


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point settings persistence at a temporary file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


@pytest.fixture
def notes_settings(tmp_path):
    """Settings dict with a temporary notes folder and the default pattern."""
    root = tmp_path / "notes"
    root.mkdir()
    return {
        "note_roots": [str(root)],
        "file_path_pattern": "YYYY/MM/DD.md",
        "editor": None,
    }
