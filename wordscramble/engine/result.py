"""
Outcome of checking one candidate word.

A result is exactly one of:
  - ACCEPTED : the word passed every rule and was added to the session
  - NOOP     : the normalized input was empty; nothing happens
  - REJECTED : a rule fired; `reason` says which one

Rejections are returned to the caller, never raised. Turning a reason into
display copy is the presentation layer's job (see messages.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Verdict(str, Enum):
    ACCEPTED = "accepted"
    NOOP = "noop"
    REJECTED = "rejected"


class Rejection(str, Enum):
    """Closed set of user-facing rejection kinds (stable ids)."""
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_A_WORD = "not_a_word"


@dataclass(frozen=True)
class ValidationResult:
    verdict: Verdict
    word: str                            # normalized candidate
    reason: Optional[Rejection] = None   # set iff verdict is REJECTED

    @classmethod
    def accepted(cls, word: str) -> "ValidationResult":
        return cls(Verdict.ACCEPTED, word)

    @classmethod
    def noop(cls) -> "ValidationResult":
        return cls(Verdict.NOOP, "")

    @classmethod
    def rejected(cls, word: str, reason: Rejection) -> "ValidationResult":
        return cls(Verdict.REJECTED, word, reason)

    @property
    def is_accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.verdict is Verdict.REJECTED
