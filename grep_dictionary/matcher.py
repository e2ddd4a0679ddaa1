"""
Pattern compilation behind a small Matcher interface.
The scan only needs find_first(), so another regex engine can be dropped in
by passing a different compile function to grep().
"""
from __future__ import annotations

import time
from typing import Callable, NamedTuple, Protocol

import regex

# Longer patterns are rejected before they reach regex.compile
MAX_PATTERN_LENGTH = 1000
# Seconds one matcher may spend searching, summed over the whole scan
SEARCH_TIMEOUT = 2.0


class Span(NamedTuple):
    start: int
    end: int


class InvalidPatternError(ValueError):
    """Pattern is not a valid regular expression."""

    def __init__(self, pattern: str, message: str) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.message = message


class PatternTimeoutError(InvalidPatternError):
    """Pattern compiled but is too slow to run against the word list."""


class Matcher(Protocol):
    def find_first(self, word: str) -> Span | None:
        ...


class RegexMatcher:
    """
    Leftmost-first matching (a|ab on "ab" gives "a").

    The time budget starts with the first find_first() call and covers every
    later call, so one matcher serves one scan. Running out of budget raises
    PatternTimeoutError.
    """

    def __init__(
        self,
        compiled: regex.Pattern,
        *,
        timeout: float = SEARCH_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._re = compiled
        self._timeout = timeout
        self._clock = clock
        self._deadline: float | None = None

    @property
    def pattern(self) -> str:
        return self._re.pattern

    def find_first(self, word: str) -> Span | None:
        now = self._clock()
        if self._deadline is None:
            self._deadline = now + self._timeout
        remaining = self._deadline - now
        if remaining <= 0:
            raise self._timed_out()
        try:
            m = self._re.search(word, timeout=remaining)
        except TimeoutError as e:
            raise self._timed_out() from e
        if m is None:
            return None
        return Span(m.start(), m.end())

    def _timed_out(self) -> PatternTimeoutError:
        return PatternTimeoutError(
            self.pattern, f"pattern took longer than {self._timeout:g} s to search the word list"
        )


def compile_regex(pattern: str, *, timeout: float = SEARCH_TIMEOUT) -> RegexMatcher:
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise InvalidPatternError(
            pattern, f"pattern too long ({len(pattern)} > {MAX_PATTERN_LENGTH} characters)"
        )
    try:
        compiled = regex.compile(pattern)
    except regex.error as e:
        raise InvalidPatternError(pattern, f"invalid pattern: {e}") from e
    except (OverflowError, RecursionError) as e:
        # very deep nesting or huge repeat counts
        raise InvalidPatternError(pattern, f"pattern too complex: {e}") from e
    return RegexMatcher(compiled, timeout=timeout)
