"""Create-if-absent and open a dated note."""

import logging
import os
import shlex
import subprocess
import sys
import threading
from datetime import date
from typing import Callable

from exceptions import NoteCreateError, NoteOpenError, NoteRootNotSetError
from note_paths import DEFAULT_PATTERN, initial_note_content, resolve_note_path
from settings import note_root

logger = logging.getLogger(__name__)

# Serialises create attempts coming from the tray thread and the UI thread
_create_lock = threading.Lock()


def note_path_for(d: date, settings: dict) -> str:
    """Resolve the note path for *d* using the configured root and pattern."""
    root = note_root(settings)
    if root is None:
        raise NoteRootNotSetError("Please choose a notes folder first")
    pattern = settings.get("file_path_pattern") or DEFAULT_PATTERN
    return resolve_note_path(d, pattern, root)


def ensure_note(path: str, d: date) -> bool:
    """Create *path* with a heading for *d* unless it exists.

    Returns True if the file was created by this call.
    """
    with _create_lock:
        directory = os.path.dirname(path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise NoteCreateError(f"Could not create folder {directory}: {e}") from e
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(initial_note_content(d))
        except FileExistsError:
            return False
        except OSError as e:
            raise NoteCreateError(f"Could not create {path}: {e}") from e
    logger.info("Created note %s", path)
    return True


def _spawn(args: list[str]) -> None:
    proc = subprocess.Popen(args, start_new_session=True)
    # Reap the child when it exits so it does not linger as a zombie
    threading.Thread(target=proc.wait, daemon=True).start()


def _system_open(path: str) -> None:
    if sys.platform == "win32":
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        _spawn(["open", path])
    else:
        _spawn(["xdg-open", path])


def open_in_editor(path: str, editor: str | None = None) -> None:
    """Hand *path* to *editor* (a command line) or the system default app."""
    try:
        if editor:
            _spawn(shlex.split(editor) + [path])
        else:
            _system_open(path)
    except (OSError, ValueError) as e:
        raise NoteOpenError(f"Could not open {path}: {e}") from e
    logger.info("Opened note %s", path)


def open_note(d: date, settings: dict,
              opener: Callable[[str], None] | None = None) -> str:
    """Resolve, create if needed, and open the note for *d*.

    Returns the note path.
    """
    path = note_path_for(d, settings)
    ensure_note(path, d)
    if opener is None:
        open_in_editor(path, settings.get("editor"))
    else:
        opener(path)
    return path
