"""
Search the word list from the terminal. Run: python -m grep_dictionary.search PATTERN
"""
from __future__ import annotations

import argparse
import logging
import sys

from .grep import Mode, Segments, grep
from .matcher import InvalidPatternError
from .words import WordListError, WordStore


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grep_dictionary.search",
        description="Print every dictionary word matching a regular expression.",
    )
    parser.add_argument("pattern", help="regular expression (Python re syntax)")
    parser.add_argument("--word-list", help="word list path (default: WORD_LIST env or data/en_GB-large.txt)")
    parser.add_argument("--highlight", action="store_true", help="show the first match as before[match]after")
    parser.add_argument("--count", action="store_true", help="print only the number of matches")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    store = WordStore(args.word_list)
    try:
        words = store.get_words()
    except WordListError as e:
        print(e, file=sys.stderr)
        return 2

    mode = Mode.SEGMENTED if args.highlight else Mode.PLAIN
    try:
        matches = grep(args.pattern, words, mode)
    except InvalidPatternError as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.count:
        print(len(matches))
        return 0
    for m in matches:
        if isinstance(m, Segments):
            print(f"{m.before}[{m.match}]{m.after}")
        else:
            print(m)
    return 0


if __name__ == "__main__":
    sys.exit(main())
