"""Provides the main entry point for using the library, :class:`NoteSaver`"""

from __future__ import annotations
import logging
import re
from typing import Union

from notesaver.conf import NoteSaverConf
from notesaver.errors import NoteIndexError, NoteSaverError, ValidationError
from notesaver.models import NoteEntry, Result, UNTITLED
from notesaver.naming import created_from_filename
from notesaver.search import search
from notesaver.store import NoteStore

logger = logging.getLogger(__name__)

IndexIsh = Union[int, str]

_INDEX = re.compile(r'[+-]?[0-9]+')


class NoteSaver:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using the :meth:`NoteSaver.for_user` method.

    Each of the ``*_note``/``*_notes`` methods returns a :class:`notesaver.models.Result` instead of raising: check
    :attr:`Result.ok`, then use :attr:`Result.value` or :attr:`Result.error`. The error is always one of the classes
    in :mod:`notesaver.errors`, so you can tell bad input (:exc:`ValidationError`, :exc:`NoteIndexError`) apart
    from filesystem trouble (:exc:`NoteIOError`).

    Notes are picked by their displayed index, the 1-based position in :meth:`list_notes`. The directory is listed
    again every time an index is resolved, so an index refers to whatever note is at that position *now*.

    .. attribute:: conf
       :type: notesaver.conf.NoteSaverConf

    .. attribute:: store
       :type: notesaver.store.NoteStore

    Here's an example that deletes every note whose title mentions "draft":

    .. code-block:: python

       from notesaver.api import NoteSaver
       ns = NoteSaver.for_user()
       for hit in ns.search_notes('draft').unwrap():
           if hit.title_matched:
               ns.store.delete(hit.filename)
    """

    @staticmethod
    def for_user() -> NoteSaver:
        """Creates an instance using the user's ``~/.notesaver.conf.py`` file, or the default config if absent."""
        return NoteSaverConf.for_user().instantiate()

    def __init__(self, conf: NoteSaverConf):
        self.conf = conf
        self.store = NoteStore(conf)

    def select(self, index: IndexIsh) -> str:
        """Returns the filename at the given 1-based position in the current listing.

        ``index`` may be an int or a string of ASCII digits with an optional sign. Raises :exc:`NoteIndexError` if it
        is not a number or is out of range.
        """
        text = str(index).strip()
        if not _INDEX.fullmatch(text):
            raise NoteIndexError(f'Invalid number: {index}', index)
        number = int(text)
        filenames = self.store.list()
        if not filenames:
            raise NoteIndexError('No notes available.', index)
        if not 1 <= number <= len(filenames):
            raise NoteIndexError(f'Invalid number: {index} (expected 1 to {len(filenames)})', index)
        return filenames[number - 1]

    def create_note(self, title: str, body: str) -> Result:
        """Saves a new note. The result's value is the new filename."""
        try:
            return Result(self.store.create(title, body))
        except NoteSaverError as e:
            return Result.failure(e)

    def list_notes(self) -> Result:
        """Lists all notes, newest first. The result's value is a list of :class:`NoteEntry`.

        A note whose title can't be read is listed as ``(untitled)`` rather than failing the whole listing.
        """
        try:
            filenames = self.store.list()
        except NoteSaverError as e:
            return Result.failure(e)
        entries = []
        for i, filename in enumerate(filenames):
            title = self.store.read_title(filename) or UNTITLED
            entries.append(NoteEntry(i + 1, filename, title, created_from_filename(filename)))
        return Result(entries)

    def view_note(self, index: IndexIsh) -> Result:
        """Reads the note at the given displayed index. The result's value is the file's full contents."""
        try:
            return Result(self.store.read_all(self.select(index)))
        except NoteSaverError as e:
            return Result.failure(e)

    def search_notes(self, query: str) -> Result:
        """Searches titles and contents. The result's value is a list of :class:`notesaver.models.SearchHit`.

        An empty or whitespace-only query fails with :exc:`ValidationError`.
        """
        query = (query or '').strip()
        if not query:
            return Result.failure(ValidationError('Enter something to search.'))
        try:
            return Result(search(self.store, query))
        except NoteSaverError as e:
            return Result.failure(e)

    def delete_note(self, index: IndexIsh, confirmed: bool) -> Result:
        """Deletes the note at the given displayed index, if ``confirmed`` is True.

        The result's value is the deleted filename, or None if the deletion was not confirmed. The index is checked
        either way, so an invalid index fails even when not confirmed.
        """
        try:
            filename = self.select(index)
            if not confirmed:
                logger.debug('deletion of %s not confirmed', filename)
                return Result(None)
            self.store.delete(filename)
            return Result(filename)
        except NoteSaverError as e:
            return Result.failure(e)
