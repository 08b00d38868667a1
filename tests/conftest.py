import pytest
from notesaver.conf import NoteSaverConf
from notesaver.store import NoteStore


@pytest.fixture
def conf(fs):
    return NoteSaverConf(notes_dir='/notes')


@pytest.fixture
def store(conf):
    return NoteStore(conf)


@pytest.fixture
def ns(conf):
    return conf.instantiate()
