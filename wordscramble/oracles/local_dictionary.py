"""
Local dictionary oracle.

Keeps one in-memory word set per language tag. A word is recognized iff its
lowercase form is in the set for the requested language; unknown languages
recognize nothing.

Typical use:
    oracle = LocalDictionary.from_file("data/words_en.txt", language="en")
    oracle.is_recognized("crate", "en")  # -> True
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Set

from wordscramble.datasets.wordlist import FileWordListProvider
from .base import SpellingOracle, register

logger = logging.getLogger(__name__)


@register
class LocalDictionary(SpellingOracle):
    id = "local"
    name = "Local Dictionary"

    def __init__(self, words: Iterable[str] = (), *, language: str = "en"):
        self._words: Dict[str, Set[str]] = {}
        self.add_words(words, language=language)

    @classmethod
    def from_file(cls, path: Path | str, *, language: str = "en") -> "LocalDictionary":
        """Build from a one-word-per-line file. Raises LoadError if it can't be read."""
        words = FileWordListProvider(path).load()
        oracle = cls(words, language=language)
        logger.info("Loaded %d %s words from %s", oracle.size(language), language, path)
        return oracle

    def add_words(self, words: Iterable[str], *, language: str = "en") -> None:
        bucket = self._words.setdefault(language, set())
        bucket.update(w.strip().lower() for w in words if w.strip())

    def size(self, language: str = "en") -> int:
        return len(self._words.get(language, ()))

    def is_recognized(self, word: str, language: str) -> bool:
        return word.strip().lower() in self._words.get(language, ())
