from __future__ import annotations
from typing import List
from .base import SpellingOracle, OracleUnavailable, REGISTRY, register

# Importing oracle modules registers them by side-effect in the oracle registry.
from .always_true import AlwaysTrue
from .local_dictionary import LocalDictionary
from .remote_lookup import RemoteLookup


def create_oracle(oracle_id: str, **kwargs) -> SpellingOracle:
    """
    Factory: instantiate a registered oracle by id, passing `kwargs` through.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "SpellingOracle", "OracleUnavailable", "REGISTRY", "register",
    "AlwaysTrue", "LocalDictionary", "RemoteLookup",
    "create_oracle", "get_oracle_ids",
]
