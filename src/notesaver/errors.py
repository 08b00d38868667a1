"""Defines the exceptions raised by the store and search engine.

:class:`notesaver.api.NoteSaver` catches these and returns them inside a :class:`notesaver.models.Result`.
"""

from typing import Optional


class NoteSaverError(Exception):
    """Base class for the errors notesaver reports to its callers."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(NoteSaverError):
    """Raised when user input is rejected before any file is touched, such as an empty title or search query."""


class NoteIndexError(NoteSaverError):
    """Raised when a displayed index is not a number or does not refer to a note in the current listing."""
    def __init__(self, message: str, index=None):
        super().__init__(message)
        self.index = index


class NoteIOError(NoteSaverError):
    """Raised when a note file or the notes directory cannot be read, written, or removed."""
    def __init__(self, message: str, path: Optional[str] = None, cause: BaseException = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class ConfigError(NoteSaverError):
    """Raised when the user's config file does not define a usable configuration."""
