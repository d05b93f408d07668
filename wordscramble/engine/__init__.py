from .result import Rejection, ValidationResult, Verdict
from .rules import is_possible, letters, normalize
from .scoring import score_words
from .session import NoActiveSession, RuleEngine, Session
from .messages import MESSAGES, describe

__all__ = [
    "Rejection", "ValidationResult", "Verdict",
    "is_possible", "letters", "normalize", "score_words",
    "NoActiveSession", "RuleEngine", "Session",
    "MESSAGES", "describe",
]
