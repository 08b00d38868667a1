"""Provides the :class:`NoteStore` class, which reads and writes note files."""

from datetime import datetime
import logging
import os
import os.path
import re
from typing import List, Optional

from notesaver.conf import NoteSaverConf
from notesaver.errors import NoteIOError, ValidationError
from notesaver.naming import find_available_name, is_note_filename, note_filename
from notesaver.slug import slugify

logger = logging.getLogger(__name__)

SEPARATOR = '---'

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


class NoteStore:
    """Accesses the notes directory directly, without any caching.

    Each note is one file. Its first line is the title, its second line is :data:`SEPARATOR`, and everything after
    that is the body. The directory listing is the only index: nothing is remembered between calls, so changes
    made to the directory by other programs are always picked up.

    Methods that need to read or change a specific note raise :exc:`notesaver.errors.NoteIOError` if the
    filesystem doesn't cooperate, with the exception of :meth:`read_title`, which returns None instead.

    .. attribute:: conf
       :type: NoteSaverConf
    """
    def __init__(self, conf: NoteSaverConf):
        self.conf = conf

    @property
    def directory(self) -> str:
        return self.conf.notes_dir

    def path_for(self, filename: str) -> str:
        """Returns the full path of the note with the given filename.

        Raises :exc:`NoteIOError` if the filename would point outside the notes directory.
        """
        if (not filename or os.path.basename(filename) != filename or filename in ('.', '..')
                or '/' in filename or '\\' in filename):
            raise NoteIOError(f'Not a note filename: {filename}', path=filename)
        return os.path.join(self.directory, filename)

    def ensure_directory(self) -> None:
        """Creates the notes directory if it does not exist yet."""
        try:
            os.makedirs(self.directory, exist_ok=True)
        except OSError as e:
            raise NoteIOError(f'Cannot create notes directory {self.directory}: {e}', self.directory, e)

    def create(self, title: str, body: str, now: datetime = None) -> str:
        """Saves a new note and returns its filename.

        Leading and trailing whitespace is stripped from the title. If nothing is left, or the title still contains a
        line break, :exc:`ValidationError` is raised and nothing is written. The body is saved exactly as given,
        including any trailing newline.

        The filename is built from ``now`` (defaulting to the current local time) and a slug of the title. If a file
        by that name already exists, it is replaced, unless :attr:`NoteSaverConf.avoid_collisions` is set.
        """
        title = (title or '').strip()
        if not title:
            raise ValidationError('Title cannot be empty.')
        if _LINE_BREAK.search(title):
            raise ValidationError('Title must be a single line.')
        now = now or datetime.now()
        filename = note_filename(now, slugify(title, self.conf.slug_max_len))

        self.ensure_directory()
        path = self.path_for(filename)
        if self.conf.avoid_collisions:
            path = find_available_name(path)
            filename = os.path.basename(path)
        elif os.path.exists(path):
            logger.warning('overwriting existing note %s', filename)

        try:
            with open(path, 'w', encoding=self.conf.encoding, newline='') as file:
                file.write(f'{title}\n{SEPARATOR}\n')
                file.write(body or '')
        except OSError as e:
            raise NoteIOError(f'Cannot write note {filename}: {e}', path, e)
        logger.info('created note %s', filename)
        return filename

    def list(self) -> List[str]:
        """Returns the filenames of all notes, newest first.

        Because filenames begin with a zero-padded timestamp, sorting them in descending string order puts the most
        recently created note first. Returns an empty list if there are no notes.
        """
        self.ensure_directory()
        try:
            with os.scandir(self.directory) as entries:
                names = [e.name for e in entries if is_note_filename(e.name) and e.is_file()]
        except OSError as e:
            raise NoteIOError(f'Cannot read notes directory {self.directory}: {e}', self.directory, e)
        names.sort(reverse=True)
        logger.debug('found %d notes in %s', len(names), self.directory)
        return names

    def read_title(self, filename: str) -> Optional[str]:
        """Returns the first line of the note, or None if the file is empty or can't be read."""
        try:
            with open(self.path_for(filename), 'r', encoding=self.conf.encoding, newline='') as file:
                line = file.readline()
        except (OSError, UnicodeDecodeError, NoteIOError) as e:
            logger.warning('cannot read title of %s: %s', filename, e)
            return None
        if not line:
            return None
        return line.rstrip('\r\n')

    def read_all(self, filename: str) -> str:
        """Returns the entire contents of the note file."""
        path = self.path_for(filename)
        try:
            with open(path, 'r', encoding=self.conf.encoding, newline='') as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise NoteIOError(f'Cannot read note {filename}: {e}', path, e)

    def read_lines(self, filename: str) -> List[str]:
        """Returns the lines of the note file, without line terminators.

        Only ``\\r\\n``, ``\\r`` and ``\\n`` end a line; other characters such as form feeds stay part of the line.
        A final newline at the end of the file does not produce an extra empty line.
        """
        lines = _LINE_BREAK.split(self.read_all(filename))
        if lines[-1] == '':
            lines.pop()
        return lines

    def delete(self, filename: str) -> None:
        """Removes the note file. Raises :exc:`NoteIOError` if it doesn't exist or can't be removed."""
        path = self.path_for(filename)
        try:
            os.remove(path)
        except OSError as e:
            raise NoteIOError(f'Cannot delete note {filename}: {e}', path, e)
        logger.info('deleted note %s', filename)
