"""
Load the dictionary word list and keep it cached in memory.
Uses the WORD_LIST env path, or data/en_GB-large.txt at the project root.
"""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST = Path(__file__).resolve().parent.parent / "data" / "en_GB-large.txt"


class WordListError(OSError):
    """Word list could not be opened, or failed part way through the read."""


def get_word_list_path() -> Path:
    p = os.environ.get("WORD_LIST")
    if p:
        return Path(p)
    return DEFAULT_WORD_LIST


def read_lines(path: Path) -> tuple[str, ...]:
    """
    Read the whole file into memory, one word per line.
    Lines end at a newline; a carriage return just before it is dropped too,
    a carriage return anywhere else stays in the word.
    Blank lines and duplicates are kept.
    """
    words: list[str] = []
    try:
        with open(path, "r", encoding="utf-8", newline="\n") as f:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
                words.append(line)
    except UnicodeDecodeError as e:
        raise WordListError(f"Word list {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise WordListError(f"Could not read word list {path}: {e}") from e
    return tuple(words)


class WordStore:
    """
    Lazily loaded, read-only snapshot of the word list.

    The first get_words() reads the file; every later call returns the same
    tuple. Concurrent first calls wait on one lock, so the file is read once.
    A failed load leaves the store empty and the next call tries again.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        loader: Callable[[Path], tuple[str, ...]] = read_lines,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._loader = loader
        self._words: tuple[str, ...] | None = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path or get_word_list_path()

    @property
    def loaded(self) -> bool:
        return self._words is not None

    def get_words(self) -> tuple[str, ...]:
        words = self._words
        if words is not None:
            return words
        with self._lock:
            if self._words is None:
                self._words = self._load()
            return self._words

    def invalidate(self) -> None:
        """Drop the cached list; the next get_words() reads the file again."""
        with self._lock:
            self._words = None

    def reload(self) -> tuple[str, ...]:
        with self._lock:
            self._words = None
            self._words = self._load()
            return self._words

    def _load(self) -> tuple[str, ...]:
        path = self.path
        logger.info("Loading word list from %s", path)
        words = self._loader(path)
        logger.info("Loaded %d words", len(words))
        return words
