"""
Word-list providers: where the start-word pool comes from.

A provider has one method, load(), returning the pool as an ordered list of
words (one per source line, blank lines dropped). Trimming/lower-casing each
pick is the engine's job, not the provider's.

If the list can't be loaded, load() raises LoadError. Callers should treat
it as a startup failure: there is no game without a pool.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .io import read_lines

# Start words shipped with the package.
DEFAULT_START_WORDS = Path(__file__).parent / "data" / "start.txt"


class LoadError(Exception):
    """The word list resource is missing or unreadable."""


class WordListProvider:
    def load(self) -> List[str]:
        raise NotImplementedError("Override in subclass")


class FileWordListProvider(WordListProvider):
    def __init__(self, path: Path | str = DEFAULT_START_WORDS):
        self.path = Path(path)

    def load(self) -> List[str]:
        try:
            return read_lines(self.path, skip_blank=True)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Could not load word list from {self.path}") from e


class StaticWordListProvider(WordListProvider):
    """Serves a fixed in-memory list (embedding, tests)."""

    def __init__(self, words: Iterable[str]):
        self.words = list(words)

    def load(self) -> List[str]:
        return list(self.words)
