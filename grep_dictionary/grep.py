"""
Filter the word list by a regular expression.
Plain mode returns the matching words; segmented mode splits each one around
its first match so the caller can highlight it.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Iterator, NamedTuple, Union

from .matcher import Matcher, Span, compile_regex


class Mode(str, Enum):
    PLAIN = "plain"
    SEGMENTED = "segmented"


class Segments(NamedTuple):
    before: str
    match: str
    after: str


# A plain word, or its segments around the first match
MatchRecord = Union[str, Segments]


def split_word(word: str, span: Span) -> Segments:
    return Segments(word[: span.start], word[span.start : span.end], word[span.end :])


def scan(matcher: Matcher, words: Iterable[str], mode: Mode = Mode.PLAIN) -> Iterator[MatchRecord]:
    """Yield a record for every word with a match, in word-list order."""
    segmented = mode is Mode.SEGMENTED
    for word in words:
        span = matcher.find_first(word)
        if span is None:
            continue
        yield split_word(word, span) if segmented else word


def grep(
    pattern: str,
    words: Iterable[str],
    mode: Mode = Mode.PLAIN,
    *,
    compiler: Callable[[str], Matcher] = compile_regex,
) -> list[MatchRecord]:
    """
    Compile pattern and return every matching word, in order.
    Raises InvalidPatternError if the pattern does not compile.
    """
    matcher = compiler(pattern)
    return list(scan(matcher, words, Mode(mode)))
