"""
Session scoring.

One point per letter plus one point per word:
    score(["dog", "cat"]) == (3 + 1) + (3 + 1) == 8

Letters are grapheme clusters, the same unit the length rule counts. The
score is derived from the accepted words, never stored on its own, so it
cannot go stale. Order of the words does not matter.
"""

from typing import Iterable

from .rules import letters


def score_words(words: Iterable[str]) -> int:
    """Sum of (number of letters + 1) over `words`."""
    return sum(len(letters(w)) + 1 for w in words)
