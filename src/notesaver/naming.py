"""Builds note filenames from a creation time and a slug.

Filenames look like ``20240131_093005_Meeting-Notes.txt``. Every numeric field is zero-padded, so sorting
filenames as strings also sorts them by creation time.
"""

from datetime import datetime
import os.path
import re
from typing import Optional, Set

import shortuuid

TIMESTAMP_FORMAT = '%Y%m%d_%H%M%S'
NOTE_SUFFIX = '.txt'

_TIMESTAMP_PREFIX = re.compile(r'^(\d{8}_\d{6})_')


def note_filename(created: datetime, slug: str) -> str:
    """Returns the filename for a note created at the given time with the given slug."""
    return f'{created.strftime(TIMESTAMP_FORMAT)}_{slug}{NOTE_SUFFIX}'


def is_note_filename(name: str) -> bool:
    """True if the name has the note file extension and is not a hidden file."""
    return name.endswith(NOTE_SUFFIX) and not name.startswith('.')


def created_from_filename(name: str) -> Optional[datetime]:
    """Returns the creation time encoded in a note filename, or None if the name doesn't start with one.

    This is only used for display; listing order comes from comparing the filenames themselves.
    """
    match = _TIMESTAMP_PREFIX.match(os.path.basename(name))
    if not match:
        return None
    try:
        return datetime.strptime(match.group(1), TIMESTAMP_FORMAT)
    except ValueError:
        return None


def find_available_name(path: str, unavailable: Set[str] = frozenset()) -> str:
    """Returns the path, or a variant of it, such that no file exists there and it is not in ``unavailable``.

    Variants are made by appending an underscore and a short UUID before the file extension, so
    ``/notes/20240131_093005_todo.txt`` might become ``/notes/20240131_093005_todo_3Rs9ZKTfXwxYpWtbBzWnRf.txt``.
    The timestamp prefix is untouched, so the variant still sorts next to the original.
    """
    candidate = path
    while os.path.exists(candidate) or candidate in unavailable:
        base, suffix = os.path.splitext(path)
        candidate = f'{base}_{shortuuid.uuid()}{suffix}'
    return candidate
