"""
Tests for scanning the word list
"""
import random
import re
import string

import pytest

from grep_dictionary.grep import Mode, Segments, grep, scan, split_word
from grep_dictionary.matcher import InvalidPatternError, Span, compile_regex


def test_plain_mode_example():
    assert grep("cat", ["cat", "dog", "catalog"], Mode.PLAIN) == ["cat", "catalog"]


def test_segmented_mode_example():
    assert grep("cat", ["cat", "dog", "catalog"], Mode.SEGMENTED) == [
        ("", "cat", ""),
        ("", "cat", "alog"),
    ]


def test_mode_accepts_string_value():
    assert grep("og$", ["dog", "catalog", "ogre"], "plain") == ["dog", "catalog"]


def test_default_mode_is_plain(words):
    assert grep("^dog$", words) == ["dog", "dog"]


def test_empty_pattern_returns_every_word_in_order(words):
    assert grep("", words, Mode.PLAIN) == words


def test_empty_pattern_segments_are_empty_at_start(words):
    result = grep("", words, Mode.SEGMENTED)
    assert result == [Segments("", "", w) for w in words]


def test_malformed_pattern_raises(words):
    with pytest.raises(InvalidPatternError):
        grep("[", words, Mode.PLAIN)
    with pytest.raises(InvalidPatternError):
        grep("[", words, Mode.SEGMENTED)


def test_empty_word_list():
    assert grep("a", [], Mode.PLAIN) == []
    assert grep("a", (), Mode.SEGMENTED) == []


def test_no_match_is_empty_list(words):
    assert grep("xyz", words) == []


def test_case_sensitive(words):
    assert grep("^C", words) == ["Cat"]
    assert grep("(?i)^c", words) == ["cat", "catalog", "Cat"]


def test_first_match_only_is_segmented():
    assert grep("a", ["banana"], Mode.SEGMENTED) == [Segments("b", "a", "nana")]


def test_alternation_highlights_first_alternative():
    assert grep("a|ab", ["ab"], Mode.SEGMENTED) == [Segments("", "a", "b")]


def test_non_ascii_words(words):
    assert grep("^ü", words, Mode.SEGMENTED) == [Segments("", "ü", "ber")]


def test_blank_line_only_matched_by_empty_capable_pattern(words):
    assert "" in grep("^$", words)
    assert "" not in grep(".", words)


def test_split_word():
    assert split_word("scatter", Span(1, 4)) == Segments("s", "cat", "ter")


def test_scan_with_custom_matcher():
    class EndsWithS:
        def find_first(self, word):
            return Span(len(word) - 1, len(word)) if word.endswith("s") else None

    records = list(scan(EndsWithS(), ["cats", "dog", "bus"], Mode.SEGMENTED))
    assert records == [Segments("cat", "s", ""), Segments("bu", "s", "")]


def test_grep_with_custom_compile():
    seen = []

    def compile_upper(pattern):
        seen.append(pattern)
        return compile_regex(pattern.upper())

    assert grep("cat", ["CAT", "cat"], compiler=compile_upper) == ["CAT"]
    assert seen == ["cat"]


def _random_words(rng, n):
    return ["".join(rng.choice("abcde") for _ in range(rng.randint(0, 8))) for _ in range(n)]


@pytest.mark.parametrize("pattern", ["a", "ab|ba", "^c.*e$", "(a|b)+c", "d{2}", "e?", "[^a]b", "\\b"])
def test_agrees_with_reference_engine(pattern):
    rng = random.Random(pattern)
    words = _random_words(rng, 300)
    ref = re.compile(pattern)

    plain = grep(pattern, words, Mode.PLAIN)
    assert plain == [w for w in words if ref.search(w)]

    segmented = grep(pattern, words, Mode.SEGMENTED)
    assert len(segmented) == len(plain)
    for word, seg in zip(plain, segmented):
        m = ref.search(word)
        assert seg.before + seg.match + seg.after == word
        assert seg == (word[: m.start()], m.group(0), word[m.end():])


def test_reconstruction_for_printable_words():
    rng = random.Random(7)
    alphabet = string.ascii_letters + "äöüß-'"
    words = ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12))) for _ in range(500)]
    for seg in grep("[aeiouäöü]+", words, Mode.SEGMENTED):
        assert "".join(seg) in words
        assert seg.match
