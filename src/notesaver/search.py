"""Case-insensitive substring search over note titles and contents."""

import logging
from typing import List

from notesaver.errors import NoteIOError
from notesaver.models import LineMatch, SearchHit, UNTITLED
from notesaver.store import NoteStore

logger = logging.getLogger(__name__)

LINE_WIDTH = 80
DISPLAY_LIMIT = 5


def truncate(text: str, width: int) -> str:
    """Returns the text unchanged if it has at most ``width`` characters, or else shortened to fit with a ``…``."""
    if len(text) <= width:
        return text
    return text[:width - 1] + '…'


def search(store: NoteStore, query: str) -> List[SearchHit]:
    """Finds every note whose title or any line contains the query, ignoring case.

    Each hit lists the matching lines after the title with their 1-based line numbers, counting the title as line
    1. A title match is reported through :attr:`SearchHit.title_matched` instead, so a note that is a hit because of
    its title alone has no matched lines.

    Hits are sorted by filename, oldest first. Notes that can't be read are skipped.

    The query is used as given; rejecting empty queries is up to the caller.
    """
    needle = query.casefold()
    hits = []
    for filename in store.list():
        try:
            lines = store.read_lines(filename)
        except NoteIOError as e:
            logger.warning('skipping unreadable note during search: %s', e.message)
            continue
        title = lines[0] if lines else UNTITLED
        matched = [LineMatch(number, truncate(line, LINE_WIDTH))
                   for number, line in enumerate(lines[1:], start=2) if needle in line.casefold()]
        title_matched = needle in title.casefold()
        if title_matched or matched:
            hits.append(SearchHit(filename, title, matched, title_matched=title_matched))
    hits.sort(key=lambda hit: hit.filename)
    logger.debug('search for %r matched %d notes', query, len(hits))
    return hits
