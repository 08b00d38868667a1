"""Turns note titles into short, filesystem-safe strings for use in filenames."""

import re

FALLBACK_SLUG = 'note'

# Path separators, NUL and other control characters, and everything Windows reserves.
# Fixed rather than platform-dependent so the same title always produces the same filename.
_INVALID_CHARS = re.compile(r'[\x00-\x1f\x7f<>:"/\\|?*]+')
_WHITESPACE = re.compile(r'\s+')
_DASHES = re.compile(r'-{2,}')


def slugify(raw: str, max_len: int = 40) -> str:
    """Returns a slug for the given title text.

    The following adjustments are made:

    * Characters that are not allowed in filenames are replaced with dashes
    * Runs of whitespace are replaced with a single dash
    * Consecutive dashes are collapsed to a single dash
    * Leading and trailing dashes are removed
    * The result is truncated to ``max_len`` characters

    Letters keep their case, and non-ASCII letters are kept as they are. For example, the title
    ``"Meeting: Q3 / Q4 plans"`` becomes ``"Meeting-Q3-Q4-plans"``.

    If nothing is left (for example, the title consisted only of punctuation like ``"???"``),
    the slug is ``"note"``.
    """
    s = _INVALID_CHARS.sub('-', raw or '')
    s = _WHITESPACE.sub('-', s)
    s = _DASHES.sub('-', s)
    s = s.strip('-')
    s = s[:max_len].rstrip('-')
    return s or FALLBACK_SLUG
