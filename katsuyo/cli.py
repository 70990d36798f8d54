"""
Command line interface for katsuyo.

Usage:
    python -m katsuyo.cli ならう -k 習う               # full table
    python -m katsuyo.cli たべる -t ichidan -c negative --long
    python -m katsuyo.cli する -t exception -j         # JSON output
    python -m katsuyo.cli ならう --save                # store the table
    python -m katsuyo.cli --lookup ならわない          # reverse lookup
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from katsuyo import __version__, settings
from katsuyo.conjugations import ConjType, VerbType, conjugate, get_conj_description, takes_form
from katsuyo.errors import KatsuyoError
from katsuyo.models import ConjugationTable
from katsuyo.word import Word, WordForm


def conj_type_arg(value: str) -> ConjType:
    """argparse type for conjugation names ('negative', 'causative-passive', ...)."""
    try:
        return ConjType[value.upper().replace('-', '_')]
    except KeyError:
        names = ', '.join(c.name.lower() for c in ConjType)
        raise argparse.ArgumentTypeError(f"unknown conjugation {value!r} (choose from {names})")


def format_table_text(table: ConjugationTable) -> str:
    """Format a conjugation table as aligned text."""
    lines = [f"{table.kanji or table.kana}  [{table.kana}]  ({table.verb_type})", '']

    for entry in table.forms:
        label = entry.description
        if entry.form is not None:
            label = f"{label}, {entry.form}"
        reading = entry.kana if entry.kanji is None else f"{entry.kanji} 【{entry.kana}】"
        lines.append(f"  {label:<40} {reading}")

    return '\n'.join(lines)


def lookup_command(text: str, db_path: Optional[str]) -> int:
    """Print the saved verbs that produce ``text``."""
    from katsuyo.store import lookup_surface, session_scope

    path = Path(db_path) if db_path is not None else settings.DB_PATH
    if not path.exists():
        print(f"No saved conjugation matches {text} (no database at {path})", file=sys.stderr)
        return 1

    with session_scope(path) as session:
        matches = lookup_surface(session, text)
        if not matches:
            print(f"No saved conjugation matches {text}", file=sys.stderr)
            return 1

        for verb, conj in matches:
            conj_type = ConjType(conj.conj_type)
            label = get_conj_description(conj_type)
            if conj.form is not None:
                label = f"{label}, {conj.form}"
            print(f"{text}  <-  {verb.kanji or verb.kana} [{verb.kana}] ({verb.verb_type}): {label}")

    return 0


def save_command(table: ConjugationTable, db_path: Optional[str]) -> None:
    from katsuyo.store import save_table, session_scope

    with session_scope(db_path) as session:
        save_table(session, table)
    print(f"Saved {len(table.forms)} forms of {table.kanji or table.kana}", file=sys.stderr)


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Conjugate Japanese verbs (katsuyo)',
        prog='katsuyo',
    )

    parser.add_argument(
        'kana',
        nargs='?',
        help='Verb in dictionary form, in kana (e.g. ならう)',
    )

    parser.add_argument(
        '-k', '--kanji',
        type=str,
        default=None,
        help='Kanji spelling of the verb (e.g. 習う)',
    )

    parser.add_argument(
        '-t', '--type',
        choices=[t.value for t in VerbType],
        default=VerbType.GODAN.value,
        help='Verb class (default: godan)',
    )

    parser.add_argument(
        '-c', '--conj',
        type=conj_type_arg,
        default=None,
        metavar='NAME',
        help='Print a single conjugation (e.g. negative, te, causative-passive)',
    )

    parser.add_argument(
        '--long',
        action='store_true',
        help='Use the polite register with -c',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print the full table as JSON',
    )

    parser.add_argument(
        '--save',
        action='store_true',
        help='Save the table to the database',
    )

    parser.add_argument(
        '--lookup',
        type=str,
        default=None,
        metavar='TEXT',
        help='Find saved verbs that conjugate to TEXT',
    )

    parser.add_argument(
        '-d', '--database',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to SQLite database file',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'katsuyo {__version__}')
        return 0

    logging.basicConfig(level=settings.get_log_level())

    if parsed.lookup:
        return lookup_command(parsed.lookup, parsed.database)

    if not parsed.kana:
        parser.print_help()
        return 1

    if parsed.save and parsed.conj is not None:
        parser.error("--save stores the full table and cannot be combined with -c/--conj")

    try:
        verb = Word(parsed.kana, parsed.kanji).into_verb(VerbType(parsed.type))

        if parsed.conj is not None:
            form = WordForm.LONG if parsed.long else WordForm.SHORT
            word = conjugate(verb, parsed.conj, form)
            if parsed.json:
                print(json.dumps({
                    'conj_type': parsed.conj.name,
                    'form': form.value if takes_form(parsed.conj) else None,
                    'kana': word.kana,
                    'kanji': word.kanji,
                    'inflections': [i.value for i in word.inflections],
                }, ensure_ascii=False))
            else:
                print(word)
            return 0

        table = ConjugationTable.from_verb(verb)
    except KatsuyoError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.save:
        save_command(table, parsed.database)

    if parsed.json:
        print(json.dumps(table.model_dump(), ensure_ascii=False, indent=2))
    else:
        print(format_table_text(table))

    return 0


if __name__ == '__main__':
    sys.exit(main())
