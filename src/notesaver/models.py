"""Defines classes for representing listed notes, search hits, and the results of operations.

The most important classes are :class:`NoteEntry`, :class:`SearchHit`, and :class:`Result`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from notesaver.errors import NoteSaverError

UNTITLED = '(untitled)'
"""Shown in place of a title that is missing or can't be read."""


@dataclass
class NoteEntry:
    """One row of a listing of the notes directory."""

    index: int
    """The 1-based position of the note in the newest-first listing.

    This is the number a user types to pick the note for viewing or deleting. It is only meaningful until the
    directory changes, which is why :meth:`notesaver.api.NoteSaver.select` lists the directory again each time.
    """

    filename: str
    """The name of the note's file within the notes directory. Filenames are unique."""

    title: str
    """The first line of the file, or :data:`UNTITLED` if it could not be read."""

    created: Optional[datetime] = None
    """The creation time encoded in the filename, if the filename follows the usual pattern."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'index': self.index,
            'filename': self.filename,
            'title': self.title,
            'created': self.created.isoformat() if self.created else None,
        }


@dataclass
class LineMatch:
    """A line of a note that contains the search query."""

    line_number: int
    """1-based. Line 1 is the title line, line 2 is the separator, and the body starts at line 3."""

    text: str
    """The line's text, shortened to 80 characters with a trailing ``…`` if it was longer."""

    def as_json(self) -> dict:
        return {'line': self.line_number, 'text': self.text}


@dataclass
class SearchHit:
    """A note that matched a search, either by title or by one or more lines."""

    filename: str
    title: str
    matched_lines: List[LineMatch] = field(default_factory=list)
    """Lines after the title that contain the query, in file order."""

    title_matched: bool = False
    """True if the title contains the query, whether or not any lines matched."""

    def display_lines(self, limit: int = 5) -> List[LineMatch]:
        """Returns the matched lines that should be shown to the user: at most ``limit`` of them."""
        return self.matched_lines[:limit]

    def suppressed(self, limit: int = 5) -> int:
        """Returns how many matched lines :meth:`display_lines` leaves out."""
        return max(0, len(self.matched_lines) - limit)

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'filename': self.filename,
            'title': self.title,
            'title_matched': self.title_matched,
            'matched_lines': [m.as_json() for m in self.matched_lines],
        }


@dataclass
class Result:
    """The outcome of one of the operations in :class:`notesaver.api.NoteSaver`.

    Exactly one of :attr:`value` and :attr:`error` is meaningful: if :attr:`error` is None, the operation
    succeeded and :attr:`value` holds its return value (which may itself be None).
    """

    value: Any = None
    error: Optional[NoteSaverError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: NoteSaverError) -> Result:
        return cls(error=error)

    def unwrap(self) -> Any:
        """Returns :attr:`value`, or raises :attr:`error` if the operation failed."""
        if self.error is not None:
            raise self.error
        return self.value
