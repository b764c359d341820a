# easyfts/stopwords.py
"""Stop word configuration."""

import logging
import os
from collections.abc import Iterable, Iterator, MutableSet
from pathlib import Path

logger = logging.getLogger(__name__)

STOP_WORDS_ENV = "EASYFTS_STOP_WORDS"


class StopWords(MutableSet[str]):
    """Case-insensitive set of words left out of generated queries."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        for word in words:
            self.add(word)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.casefold() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def add(self, word: str) -> None:
        self._words.add(word.casefold())

    def discard(self, word: str) -> None:
        self._words.discard(word.casefold())

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"


def load_stop_words(path: Path) -> StopWords:
    """Read stop words from a file, one word per line.

    Blank lines and lines starting with ``#`` are ignored.
    """
    words = StopWords()
    with path.open(encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                words.add(line)
    logger.debug("Loaded %s stop words from %s", len(words), path)
    return words


def stop_words_from_env() -> StopWords:
    """Load the stop word file named by EASYFTS_STOP_WORDS, if any."""
    path = os.getenv(STOP_WORDS_ENV)
    if not path:
        return StopWords()
    return load_stop_words(Path(path))
