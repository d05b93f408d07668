"""
Replay harness primitives.

- replay:     feed a list of raw submissions to an engine with an active
              session and record one row per submission.
- run_replay: start a seeded session from a pool, then replay.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from wordscramble.engine import RuleEngine
from wordscramble.engine.session import DEFAULT_FALLBACK


def replay(engine: RuleEngine, submissions: Iterable[str]) -> List[Dict]:
    """
    Validate each submission in order against the engine's current session.

    Returns a list of dicts, one per submission, with keys:
        index (1-based), raw, word (normalized), verdict, reason,
        score (running score after this submission)
    """
    rows: List[Dict] = []
    for idx, raw in enumerate(submissions, start=1):
        r = engine.validate(raw)
        rows.append({
            "index": idx,
            "raw": raw,
            "word": r.word,
            "verdict": r.verdict.value,
            "reason": r.reason.value if r.reason else "",
            "score": engine.score(),
        })
    return rows


def run_replay(
        pool: Sequence[str],
        submissions: Iterable[str],
        *,
        oracle,
        fallback: str = DEFAULT_FALLBACK,
        language: str = "en",
        seed: int | None = None,
) -> Dict:
    """
    Start a session (seeded pick from `pool`) and replay `submissions`.

    Returns:
        dict with keys: root_word, rows, used_words, score
    """
    engine = RuleEngine(oracle, language=language, seed=seed)
    root = engine.start_session(pool, fallback)
    rows = replay(engine, submissions)
    return {
        "root_word": root,
        "rows": rows,
        "used_words": list(engine.used_words),
        "score": engine.score(),
    }
