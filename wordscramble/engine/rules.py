"""
Word-validation rules.

Each rule answers one question about a normalized candidate and returns
either None (rule passed) or the Rejection it raises. The engine runs them in
DEFAULT_RULES order and stops at the first rejection, so the order below is
the order players see errors in:

  1) check_length    : at least MIN_WORD_LENGTH letters
  2) check_not_root  : not the root word itself
  3) check_original  : not already accepted this session
  4) check_possible  : buildable from the root word's letters
  5) check_real      : recognized by the spelling oracle

Empty input is handled by the engine before any rule runs (it is a no-op,
not a rejection).
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import regex

from wordscramble.oracles.base import SpellingOracle
from .result import Rejection

MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may look at besides the candidate itself."""
    root_word: str
    used_words: Sequence[str]
    oracle: SpellingOracle
    language: str = DEFAULT_LANGUAGE


Rule = Callable[[str, RuleContext], Optional[Rejection]]


def normalize(raw: str) -> str:
    """
    Lower-case, trim surrounding whitespace (including newlines) and fold to
    NFC so that "e" + combining accent compares equal to "é".
    """
    return unicodedata.normalize("NFC", raw.strip().lower())


def letters(word: str) -> List[str]:
    """
    Split `word` into user-perceived letters (extended grapheme clusters), so
    "g" + combining tilde or a ZWJ emoji sequence is one letter.
    """
    return regex.findall(r"\X", word)


def is_possible(word: str, root: str) -> bool:
    """
    True if `word` can be spelled with the letters of `root`, using each
    letter of `root` at most once (multiset subtraction over graphemes).

    Examples:
      is_possible("act", "cat")   -> True
      is_possible("cats", "cat")  -> False  (no 's' in root)
      is_possible("aa", "apple")  -> False  (root has one 'a')
      is_possible("gab", "g\u0303abx") -> False  (root has no plain "g")
    """
    remaining = letters(root)
    for letter in letters(word):
        try:
            remaining.remove(letter)  # consume one occurrence
        except ValueError:
            return False
    return True


def check_length(word: str, ctx: RuleContext) -> Optional[Rejection]:
    if len(letters(word)) < MIN_WORD_LENGTH:
        return Rejection.TOO_SHORT
    return None


def check_not_root(word: str, ctx: RuleContext) -> Optional[Rejection]:
    if word == ctx.root_word:
        return Rejection.SAME_AS_ROOT
    return None


def check_original(word: str, ctx: RuleContext) -> Optional[Rejection]:
    if word in ctx.used_words:
        return Rejection.ALREADY_USED
    return None


def check_possible(word: str, ctx: RuleContext) -> Optional[Rejection]:
    if not is_possible(word, ctx.root_word):
        return Rejection.NOT_POSSIBLE
    return None


def check_real(word: str, ctx: RuleContext) -> Optional[Rejection]:
    # The oracle is a black box; OracleUnavailable propagates to the caller.
    if not ctx.oracle.is_recognized(word, ctx.language):
        return Rejection.NOT_A_WORD
    return None


DEFAULT_RULES: Sequence[Rule] = (
    check_length,
    check_not_root,
    check_original,
    check_possible,
    check_real,
)
