from __future__ import annotations
from typing import Dict, Type

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["SpellingOracle"]] = {}


class OracleUnavailable(Exception):
    """The oracle could not give an answer (network error, timeout, bad status)."""


def register(cls: Type["SpellingOracle"]) -> Type["SpellingOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that oracles inherit ----
class SpellingOracle:
    id = "base"
    name = "Base"

    def is_recognized(self, word: str, language: str) -> bool:
        """True if `word` is a dictionary word in `language`. Must not mutate state the engine sees."""
        raise NotImplementedError("Override in subclass")
