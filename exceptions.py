"""Exception hierarchy for note operations."""


class NoteError(Exception):
    """Base exception for note operations."""

    pass


class NoteRootNotSetError(NoteError):
    """No notes folder has been configured."""

    pass


class NoteCreateError(NoteError):
    """The note file or its parent folders could not be created."""

    pass


class NoteOpenError(NoteError):
    """The note could not be handed to an editor."""

    pass
