"""Command-line interface for notesaver."""


import argparse
from dataclasses import replace
import json
import logging
import sys
from terminaltables import AsciiTable
from notesaver.api import NoteSaver
from notesaver.conf import NoteSaverConf
from notesaver.errors import ConfigError, NoteSaverError
from notesaver.search import DISPLAY_LIMIT, truncate


def _fail(error: NoteSaverError) -> int:
    print(error.message, file=sys.stderr)
    return 1


def _ask_yes_no(prompt: str) -> bool:
    answer = _read_answer(prompt)
    while answer not in ('y', 'yes', 'n', 'no'):
        print('Please enter y/n.')
        answer = _read_answer('')
    return answer in ('y', 'yes')


def _read_answer(prompt: str) -> str:
    try:
        return input(prompt).strip().lower()
    except EOFError:
        return 'n'


def _new(args, ns: NoteSaver) -> int:
    if args.body is not None:
        body = args.body[0]
        if body and not body.endswith('\n'):
            body += '\n'
    else:
        body = sys.stdin.read()
    result = ns.create_note(args.title[0], body)
    if not result.ok:
        return _fail(result.error)
    print(f'Saved {result.value}')
    return 0


def _ls(args, ns: NoteSaver) -> int:
    result = ns.list_notes()
    if not result.ok:
        return _fail(result.error)
    entries = result.value
    if args.json:
        print(json.dumps([e.as_json() for e in entries]))
    elif not entries:
        print('No notes yet.')
    else:
        data = [('#', 'File name', 'Title')]
        data.extend((e.index, truncate(e.filename, 36), truncate(e.title, 30)) for e in entries)
        table = AsciiTable(data)
        table.justify_columns[0] = 'right'
        print(table.table)
    return 0


def _view(args, ns: NoteSaver) -> int:
    try:
        filename = ns.select(args.index[0])
        content = ns.store.read_all(filename)
    except NoteSaverError as e:
        return _fail(e)
    print(f'=== {filename} ===')
    print(content)
    return 0


def _search(args, ns: NoteSaver) -> int:
    result = ns.search_notes(args.query[0])
    if not result.ok:
        return _fail(result.error)
    hits = result.value
    if args.json:
        print(json.dumps([h.as_json() for h in hits]))
        return 0
    if not hits:
        print('No matches.')
        return 0
    for hit in hits:
        print(f'{hit.filename}  -  {truncate(hit.title, 50)}')
        for match in hit.display_lines(DISPLAY_LIMIT):
            print(f'  L{match.line_number}: {match.text}')
        if hit.suppressed(DISPLAY_LIMIT):
            print('  ...')
        print()
    return 0


def _rm(args, ns: NoteSaver) -> int:
    if args.yes:
        result = ns.delete_note(args.index[0], confirmed=True)
        if not result.ok:
            return _fail(result.error)
        print(f'Deleted {result.value}')
        return 0
    try:
        filename = ns.select(args.index[0])
    except NoteSaverError as e:
        return _fail(e)
    if not _ask_yes_no(f"Are you sure you want to delete '{filename}'? (y/n): "):
        print('Cancelled.')
        return 0
    # delete the file that was shown in the prompt, even if the listing changed while waiting
    try:
        ns.store.delete(filename)
    except NoteSaverError as e:
        return _fail(e)
    print(f'Deleted {filename}')
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=None)
    parser.add_argument('-d', '--dir', nargs=1,
                        help='Notes directory to use instead of the one in ~/.notesaver.conf.py '
                             '(or $NOTESAVER_DIR, or ~/notes).')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log details to stderr.')

    subs = parser.add_subparsers(title='Commands')

    p_new = subs.add_parser('new', help='Create a note. The filename is built from the current time and the title, '
                                        'and is printed once the note is saved.')
    p_new.add_argument('title', nargs=1, help='Title of the note. Must not be blank.')
    p_new.add_argument('-b', '--body', nargs=1,
                       help='Text of the note. A final newline is added if missing. '
                            'If omitted, the text is read from standard input until end of file.')
    p_new.set_defaults(func=_new)

    p_ls = subs.add_parser('ls', help='List notes, newest first. The numbers shown can be passed to view and rm.')
    p_ls.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_ls.set_defaults(func=_ls)

    p_view = subs.add_parser('view', help='Print a note.')
    p_view.add_argument('index', nargs=1, help='Number of the note as shown by ls.')
    p_view.set_defaults(func=_view)

    p_search = subs.add_parser(
        'search',
        help='Find notes whose title or text contains the query, ignoring case. At most '
             f'{DISPLAY_LIMIT} matching lines are shown per note.')
    p_search.add_argument('query', nargs=1)
    p_search.add_argument('-j', '--json', action='store_true',
                          help='Output as JSON. All matching lines are included.')
    p_search.set_defaults(func=_search)

    p_rm = subs.add_parser('rm', help='Delete a note.')
    p_rm.add_argument('index', nargs=1, help='Number of the note as shown by ls.')
    p_rm.add_argument('-y', '--yes', action='store_true', help='Do not ask for confirmation.')
    p_rm.set_defaults(func=_rm)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if not args.func:
        parser.print_help()
        return 1
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        conf = NoteSaverConf.for_user()
    except ConfigError as e:
        return _fail(e)
    if args.dir:
        conf = replace(conf, notes_dir=args.dir[0])
    return args.func(args, conf.instantiate())
