"""Tests for creating and opening notes."""

import os
import threading
from datetime import date

import pytest

import notes
from exceptions import NoteCreateError, NoteOpenError, NoteRootNotSetError
from notes import ensure_note, note_path_for, open_in_editor, open_note


def test_open_note_creates_file(notes_settings):
    """Test selecting a date creates the note with its heading and opens it."""
    opened = []
    path = open_note(date(2024, 1, 15), notes_settings, opener=opened.append)

    root = notes_settings["note_roots"][0]
    assert path == os.path.join(root, "2024/01/15.md")
    assert opened == [path]
    with open(path, encoding="utf-8") as f:
        assert f.read() == "# Monday, 15 January 2024\n\n"


def test_open_note_keeps_existing_content(notes_settings):
    """Test an existing note is opened but never overwritten."""
    d = date(2024, 1, 15)
    path = note_path_for(d, notes_settings)
    os.makedirs(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        f.write("my notes\n")

    opened = []
    assert open_note(d, notes_settings, opener=opened.append) == path
    assert opened == [path]
    with open(path, encoding="utf-8") as f:
        assert f.read() == "my notes\n"


def test_open_note_uses_first_root(notes_settings, tmp_path):
    """Test only the first configured root is used."""
    notes_settings["note_roots"].append(str(tmp_path / "other"))
    path = open_note(date(2024, 3, 1), notes_settings, opener=lambda p: None)
    assert path.startswith(notes_settings["note_roots"][0])
    assert not (tmp_path / "other").exists()


def test_open_note_without_root_raises(tmp_path):
    """Test a missing notes folder short-circuits before touching disk."""
    opened = []
    with pytest.raises(NoteRootNotSetError):
        open_note(date(2024, 1, 15), {"note_roots": []}, opener=opened.append)
    assert opened == []


def test_blank_pattern_falls_back_to_default(notes_settings):
    """Test an unset pattern uses YYYY/MM/DD.md."""
    notes_settings["file_path_pattern"] = None
    path = note_path_for(date(2024, 1, 15), notes_settings)
    assert path.endswith(os.path.join("2024/01/15.md"))


def test_ensure_note_reports_creation(tmp_path):
    """Test ensure_note returns True only for the call that created the file."""
    path = str(tmp_path / "a" / "b" / "note.md")
    assert ensure_note(path, date(2024, 1, 15)) is True
    assert ensure_note(path, date(2024, 1, 15)) is False


def test_ensure_note_wraps_os_errors(tmp_path):
    """Test a path blocked by a regular file raises NoteCreateError."""
    blocker = tmp_path / "2024"
    blocker.write_text("not a directory")
    with pytest.raises(NoteCreateError):
        ensure_note(str(blocker / "01.md"), date(2024, 1, 1))


class _FakeProcess:
    """Stands in for subprocess.Popen and records how it was started."""

    calls: list = []

    def __init__(self, args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        self.waited = threading.Event()
        _FakeProcess.calls.append(self)

    def wait(self):
        self.waited.set()
        return 0


@pytest.fixture
def fake_popen(monkeypatch):
    _FakeProcess.calls = []
    monkeypatch.setattr(notes.subprocess, "Popen", _FakeProcess)
    return _FakeProcess.calls


def test_open_in_editor_uses_command(fake_popen):
    """Test a configured editor command gets the path appended."""
    open_in_editor("/notes/2024/01/15.md", "code --reuse-window")
    assert [p.args for p in fake_popen] == [["code", "--reuse-window", "/notes/2024/01/15.md"]]


def test_open_in_editor_reaps_child(fake_popen):
    """Test the spawned editor runs in its own session and is waited on."""
    open_in_editor("/notes/x.md", "vim")
    proc = fake_popen[0]
    assert proc.kwargs.get("start_new_session") is True
    assert proc.waited.wait(timeout=5)


def test_open_in_editor_failure(monkeypatch):
    """Test a missing editor binary raises NoteOpenError."""
    def _fail(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(notes.subprocess, "Popen", _fail)
    with pytest.raises(NoteOpenError):
        open_in_editor("/notes/x.md", "no-such-editor")


def test_open_note_uses_editor_setting(notes_settings, fake_popen):
    """Test open_note hands the path to the configured editor."""
    notes_settings["editor"] = "vim"
    path = open_note(date(2024, 1, 15), notes_settings)
    assert [p.args for p in fake_popen] == [["vim", path]]
