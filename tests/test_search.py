from datetime import datetime
from notesaver.models import LineMatch
from notesaver.search import search, truncate


def test_truncate():
    assert truncate('short', 80) == 'short'
    assert truncate('x' * 80, 80) == 'x' * 80
    assert truncate('x' * 81, 80) == 'x' * 79 + '…'
    assert len(truncate('y' * 200, 80)) == 80


def test_search_title_only(store):
    filename = store.create('Budget Plan', 'nothing relevant\n', now=datetime(2024, 1, 1))
    hits = search(store, 'budget')
    assert len(hits) == 1
    assert hits[0].filename == filename
    assert hits[0].title == 'Budget Plan'
    assert hits[0].title_matched
    assert hits[0].matched_lines == []


def test_search_body_lines(store):
    store.create('Weekly', 'Discuss ROADMAP\nlunch\nroadmap again\n', now=datetime(2024, 1, 1))
    hits = search(store, 'Roadmap')
    assert len(hits) == 1
    assert not hits[0].title_matched
    assert hits[0].matched_lines == [LineMatch(3, 'Discuss ROADMAP'), LineMatch(5, 'roadmap again')]


def test_search_title_and_body(store):
    store.create('Plan A', 'the plan is simple\n', now=datetime(2024, 1, 1))
    hit, = search(store, 'PLAN')
    assert hit.title_matched
    assert hit.matched_lines == [LineMatch(3, 'the plan is simple')]


def test_search_many_matches(store):
    body = ''.join(f'todo item {i}\n' for i in range(1, 8))
    store.create('List', body, now=datetime(2024, 1, 1))
    hit, = search(store, 'todo')
    assert len(hit.matched_lines) == 7
    assert [m.line_number for m in hit.display_lines()] == [3, 4, 5, 6, 7]
    assert hit.suppressed() == 2
    assert hit.suppressed(limit=10) == 0


def test_search_truncates_long_lines(store):
    store.create('Long', 'needle ' + 'x' * 200 + '\n', now=datetime(2024, 1, 1))
    hit, = search(store, 'needle')
    assert len(hit.matched_lines[0].text) == 80
    assert hit.matched_lines[0].text.startswith('needle xxx')
    assert hit.matched_lines[0].text.endswith('…')


def test_search_sorted_by_filename_ascending(store):
    old = store.create('Alpha', 'shared\n', now=datetime(2024, 1, 1))
    new = store.create('Beta', 'shared\n', now=datetime(2024, 6, 1))
    mid = store.create('Gamma', 'shared\n', now=datetime(2024, 3, 1))
    assert store.list() == [new, mid, old]
    assert [h.filename for h in search(store, 'shared')] == [old, mid, new]


def test_search_no_matches(store):
    store.create('Alpha', 'beta\n', now=datetime(2024, 1, 1))
    assert search(store, 'gamma') == []


def test_search_empty_store(store):
    assert search(store, 'anything') == []


def test_search_empty_file_is_untitled(store, fs):
    store.ensure_directory()
    fs.create_file('/notes/20240101_000000_blank.txt')
    hit, = search(store, 'untitled')
    assert hit.title == '(untitled)'
    assert hit.title_matched
    assert hit.matched_lines == []


def test_search_skips_unreadable(store, fs):
    good = store.create('Readable', 'findme\n', now=datetime(2024, 1, 1))
    fs.create_file('/notes/20240102_000000_bad.txt', contents=b'findme \xff\xfe')
    assert [h.filename for h in search(store, 'findme')] == [good]


def test_search_line_numbers_ignore_other_separators(store):
    store.create('T', 'a\x0cb\nneedle\nx needle y\n', now=datetime(2024, 1, 1))
    hit, = search(store, 'needle')
    assert hit.matched_lines == [LineMatch(4, 'needle'), LineMatch(5, 'x needle y')]
