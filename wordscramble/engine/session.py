"""
Rule engine: one active game session and the submission rules.

Lifecycle:
  - A fresh engine has no session; every session accessor raises
    NoActiveSession until start_session() is called.
  - start_session() picks a root word and replaces the whole session.
  - validate() checks a candidate; only an ACCEPTED result changes state.

The session is an immutable snapshot that the engine swaps in one
assignment, and start_session()/validate() share a lock, so nobody can
observe a new root word next to the previous game's used words, and a
validation never straddles a session restart.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .result import ValidationResult
from .rules import DEFAULT_LANGUAGE, DEFAULT_RULES, Rule, RuleContext, normalize
from .scoring import score_words

logger = logging.getLogger(__name__)

# Root word used when the start-word pool yields nothing.
DEFAULT_FALLBACK = "silkworm"


class NoActiveSession(RuntimeError):
    """The engine was used before start_session() was called."""


@dataclass(frozen=True)
class Session:
    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)  # most recent first

    def with_word(self, word: str) -> "Session":
        return Session(self.root_word, (word,) + self.used_words)


class RuleEngine:
    """
    Holds one Session and enforces the submission rules against it.

    Args:
      oracle   : SpellingOracle answering is_recognized(word, language)
      language : language tag handed to the oracle (default "en")
      rules    : ordered rule sequence; defaults to rules.DEFAULT_RULES
      seed     : RNG seed so root-word picks are reproducible
    """

    def __init__(self, oracle, *, language: str = DEFAULT_LANGUAGE,
                 rules: Optional[Sequence[Rule]] = None, seed: int | None = None):
        self.oracle = oracle
        self.language = language
        self.rules: Tuple[Rule, ...] = tuple(rules if rules is not None else DEFAULT_RULES)
        self.rng = random.Random(seed)
        self._session: Optional[Session] = None
        self._lock = threading.Lock()

    # ---- session state ----

    @property
    def has_session(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise NoActiveSession("start_session() must be called first")
        return self._session

    @property
    def root_word(self) -> str:
        return self.session.root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return self.session.used_words

    def score(self) -> int:
        return score_words(self.session.used_words)

    # ---- transitions ----

    def start_session(self, pool: Sequence[str], fallback: str = DEFAULT_FALLBACK) -> str:
        """
        Pick a root word uniformly at random from `pool` (or `fallback` if the
        pool has no usable entry), clear the used words and return the root.
        """
        fallback = normalize(fallback)
        if not fallback:
            raise ValueError("fallback root word must be non-empty")

        # Blank lines (e.g. a trailing newline in the word file) are not usable picks.
        candidates = [w for w in pool if w.strip()]
        if candidates:
            root = normalize(candidates[self.rng.randrange(len(candidates))])
        else:
            logger.info("Start-word pool is empty; using fallback %r", fallback)
            root = fallback

        with self._lock:
            self._session = Session(root)
        logger.info("Started session with root word %r", root)
        return root

    def new_game(self, provider, fallback: str = DEFAULT_FALLBACK) -> str:
        """Load the pool from a WordListProvider and start a session (LoadError propagates)."""
        return self.start_session(provider.load(), fallback)

    def validate(self, raw: str) -> ValidationResult:
        """
        Normalize `raw`, run the rules in order and, if every rule passes, put
        the word at the front of the used words.
        """
        word = normalize(raw)

        with self._lock:
            session = self.session
            if not word:
                return ValidationResult.noop()

            ctx = RuleContext(
                root_word=session.root_word,
                used_words=session.used_words,
                oracle=self.oracle,
                language=self.language,
            )
            for rule in self.rules:
                reason = rule(word, ctx)
                if reason is not None:
                    logger.debug("Rejected %r: %s", word, reason.value)
                    return ValidationResult.rejected(word, reason)

            self._session = session.with_word(word)

        logger.debug("Accepted %r", word)
        return ValidationResult.accepted(word)
