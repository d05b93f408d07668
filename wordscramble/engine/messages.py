"""
Display copy for rejections.

The engine only reports a Rejection kind; front ends look the text up here.
"""

from typing import Dict, Optional, Tuple

from .result import Rejection, ValidationResult

MESSAGES: Dict[Rejection, Tuple[str, str]] = {
    Rejection.TOO_SHORT: ("Word too short", "Words should be at least 3 letters long"),
    Rejection.SAME_AS_ROOT: ("Same as root word!", "That is not allowed!"),
    Rejection.ALREADY_USED: ("Word used already", "Be more original"),
    Rejection.NOT_POSSIBLE: ("Word not possible", "You can't just make them up, you know!"),
    Rejection.NOT_A_WORD: ("Word not recognized", "That isn't a real word."),
}


def describe(result: ValidationResult) -> Optional[Tuple[str, str]]:
    """(title, message) for a rejected result; None for accepted/no-op."""
    if result.reason is None:
        return None
    return MESSAGES[result.reason]
