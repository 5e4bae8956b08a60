"""Date → note path templating.

A pattern such as ``YYYY/MM/DD.md`` is turned into a path by replacing the
date tokens; everything else in the pattern is kept as-is, separators
included. Nothing here touches the filesystem.
"""

import os
from datetime import date

DEFAULT_PATTERN = "YYYY/MM/DD.md"
NOTE_SUFFIX = ".md"


def _token_values(d: date) -> list[tuple[str, str]]:
    # Longest token first so YY never eats half of a YYYY
    year = str(d.year)
    return [
        ("YYYY", year),
        ("YY", year[-2:]),
        ("MM", f"{d.month:02d}"),
        ("DD", f"{d.day:02d}"),
    ]


def render_pattern(d: date, pattern: str) -> str:
    """Substitute the date tokens in *pattern* and ensure a ``.md`` suffix."""
    rendered = pattern
    for token, value in _token_values(d):
        rendered = rendered.replace(token, value)
    if not rendered.endswith(NOTE_SUFFIX):
        rendered += NOTE_SUFFIX
    return rendered


def resolve_note_path(d: date, pattern: str, root_dir: str) -> str:
    """Return the note path for *d* under *root_dir*.

    >>> resolve_note_path(date(2024, 1, 15), "YYYY/MM/DD.md", "/root")
    '/root/2024/01/15.md'
    """
    relative = render_pattern(d, pattern)
    seps = os.sep + (os.altsep or "")
    return os.path.join(root_dir, relative.lstrip(seps))


def initial_note_content(d: date) -> str:
    """Heading line written into a freshly created note."""
    return f"# {d.strftime('%A, %d %B %Y')}\n\n"
