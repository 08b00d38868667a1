"""Configuration for notesaver, normally loaded from ``~/.notesaver.conf.py``."""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
import os
import os.path

from notesaver.errors import ConfigError

logger = logging.getLogger(__name__)

USER_CONF_PATH = os.path.join('~', '.notesaver.conf.py')
DIR_ENV_VAR = 'NOTESAVER_DIR'


def default_notes_dir() -> str:
    """Returns the value of the ``NOTESAVER_DIR`` environment variable if set, or else ``~/notes``."""
    return os.environ.get(DIR_ENV_VAR) or os.path.expanduser(os.path.join('~', 'notes'))


@dataclass
class NoteSaverConf:
    notes_dir: str
    """The folder holding the note files. It is created on first use if it doesn't exist.

    Every ``.txt`` file directly inside this folder is treated as a note; subfolders are not searched.
    """

    slug_max_len: int = 40
    """Maximum length of the title-derived part of new filenames."""

    avoid_collisions: bool = False
    """If True, creating a note whose filename is already taken appends a short UUID to the new filename.

    Filenames only have one-second resolution, so two notes with the same title created within the same second
    get the same name. By default the second one silently replaces the first.
    """

    encoding: str = 'utf-8'
    """Text encoding used for reading and writing note files."""

    @classmethod
    def for_user(cls) -> NoteSaverConf:
        """Loads the config from ``~/.notesaver.conf.py``, or returns :func:`default_conf` if there is no such file.

        The file is a Python script that should assign an instance of this class to the variable ``conf``, e.g.:

        .. code-block:: python

           from notesaver.conf import *
           conf = NoteSaverConf(notes_dir='/Users/me/Documents/notes', avoid_collisions=True)
        """
        path = os.path.expanduser(USER_CONF_PATH)
        if not os.path.exists(path):
            logger.debug('no config file at %s, using defaults', path)
            return default_conf()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise ConfigError('You need to assign an instance of NoteSaverConf to the variable `conf` '
                              f'in your config file: {path}')
        return context['conf']

    def standardize(self) -> NoteSaverConf:
        return replace(
            self,
            notes_dir=os.path.abspath(os.path.expanduser(self.notes_dir))
        )

    def instantiate(self):
        from notesaver.api import NoteSaver
        return NoteSaver(self.standardize())


def default_conf() -> NoteSaverConf:
    return NoteSaverConf(notes_dir=default_notes_dir())
