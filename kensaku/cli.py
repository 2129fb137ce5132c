"""
Command line interface for kensaku.

Usage:
    python -m kensaku.cli 食べる                        # dictionary lookup
    python -m kensaku.cli -t kanji-by-meaning water
    python -m kensaku.cli -t sentence-by-translation -L de "Wasser"
    python -m kensaku.cli -f -t name-lookup たなか      # full JSON
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from kensaku import __version__
from kensaku.constants import LANGUAGE_CODES
from kensaku.db.connection import get_db_path, get_session
from kensaku.dispatch import InvalidArgumentError, dispatch
from kensaku.models import (
    KanjiResult, NameResult, SearchDomain, SearchResponse, SentenceResult, WordResult,
)
from kensaku.settings import DEFAULT_LANGUAGE, DEFAULT_LIMIT, LOG_LEVEL


def parse_language(value: str) -> int:
    """Parse a language given as ISO 639-1 code ("de") or number ("1")."""
    code = value.strip().lower()
    if code in LANGUAGE_CODES:
        return int(LANGUAGE_CODES[code])
    try:
        return int(code)
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown language: {value}")


def format_result(result) -> str:
    """Format a single result as text."""
    if isinstance(result, WordResult):
        kanji = [r.reading for r in result.readings if r.kanji]
        kana = [r.reading for r in result.readings if not r.kanji]
        head = ', '.join(kana)
        if kanji:
            head = f"{', '.join(kanji)} 【{head}】"
        glosses = '; '.join(s.gloss for s in result.senses)
        return f"* {head}\n  {glosses}" if glosses else f"* {head}"

    if isinstance(result, KanjiResult):
        lines = [f"{result.literal}  {', '.join(result.meaning)}"]
        if result.onyomi:
            lines.append(f"  on:  {', '.join(result.onyomi)}")
        if result.kunyomi:
            lines.append(f"  kun: {', '.join(result.kunyomi)}")
        if result.kun_words:
            lines.append(f"  words: {', '.join(w.reading for w in result.kun_words)}")
        return '\n'.join(lines)

    if isinstance(result, NameResult):
        if result.kanji:
            return f"{result.kanji} 【{result.kana}】 {result.transcription}"
        return f"{result.kana} {result.transcription}"

    if isinstance(result, SentenceResult):
        return f"{result.content}\n  {result.translation}"

    return str(result)


def format_response_text(response: SearchResponse) -> str:
    """Format a SearchResponse as text, one block per result."""
    return '\n'.join(format_result(r) for r in response.results)


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Command line interface for Kensaku (Japanese dictionary search)',
        prog='kensaku',
    )

    parser.add_argument(
        'query',
        nargs='*',
        help='Search query',
    )

    parser.add_argument(
        '-t', '--domain',
        choices=[d.value for d in SearchDomain],
        default=SearchDomain.DICT_LOOKUP.value,
        help='What to search (default: dict-lookup)',
    )

    parser.add_argument(
        '-L', '--language',
        type=parse_language,
        default=DEFAULT_LANGUAGE,
        metavar='LANG',
        help='Gloss/translation language as code (en, de, ...) or number',
    )

    parser.add_argument(
        '-o', '--offset',
        type=int,
        default=0,
        metavar='N',
        help='Skip the first N results',
    )

    parser.add_argument(
        '-l', '--limit',
        type=int,
        default=DEFAULT_LIMIT,
        metavar='N',
        help=f'Return at most N results (default: {DEFAULT_LIMIT})',
    )

    parser.add_argument(
        '-f', '--full',
        action='store_true',
        help='Print the full response as JSON',
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
        print(f'kensaku {__version__}')
        return 0

    query = ' '.join(parsed.query) if parsed.query else ''

    if not query:
        parser.print_help()
        return 1

    logging.basicConfig(level=LOG_LEVEL, format='%(levelname)s %(name)s: %(message)s')

    db_path = parsed.database
    if db_path is None:
        db_path = get_db_path()

    if not db_path or not Path(db_path).exists():
        print("Error: database not found.", file=sys.stderr)
        print("Set KENSAKU_DB_PATH or pass --database.", file=sys.stderr)
        return 1

    try:
        session = get_session(db_path)
    except Exception as e:
        print(f'Error connecting to database: {e}', file=sys.stderr)
        return 1

    try:
        response = dispatch(session, {
            'query': query,
            'domain': parsed.domain,
            'language': parsed.language,
            'offset': parsed.offset,
            'limit': parsed.limit,
        })

        if parsed.full:
            print(response.model_dump_json(indent=2))
        else:
            print(format_response_text(response))

        return 0

    except InvalidArgumentError as e:
        print(f'Invalid request: {e}', file=sys.stderr)
        return 1
    except Exception as e:
        print(f'Error searching: {e}', file=sys.stderr)
        return 1
    finally:
        session.close()


if __name__ == '__main__':
    sys.exit(main())
