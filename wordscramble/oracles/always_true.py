"""
Always-true oracle.

Recognizes every word in every language. Useful in tests and for playing
without a dictionary: only the letter rules then constrain submissions.
"""

from __future__ import annotations

from .base import SpellingOracle, register


@register
class AlwaysTrue(SpellingOracle):
    id = "always"
    name = "Always True"

    def is_recognized(self, word: str, language: str) -> bool:
        return True
