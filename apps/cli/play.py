# apps/cli/play.py
"""
Interactive console front end.

This script:
  1) Loads the start-word pool (fatal if the file can't be read).
  2) Builds the requested spelling oracle.
  3) Starts a session and reads words from stdin until EOF or ":quit".
     ":new" starts a new game with a fresh root word.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, TextIO

from wordscramble.datasets import DEFAULT_START_WORDS, FileWordListProvider, LoadError
from wordscramble.engine import RuleEngine, describe
from wordscramble.engine.session import DEFAULT_FALLBACK
from wordscramble.oracles import (
    LocalDictionary, OracleUnavailable, SpellingOracle, create_oracle, get_oracle_ids,
)


def build_oracle(oracle_id: str, dictionary: str | None, language: str) -> SpellingOracle:
    """
    Instantiate the oracle named on the command line. The local oracle needs
    --dictionary; the others take no arguments.
    """
    if oracle_id == "local":
        if not dictionary:
            raise SystemExit("--dictionary is required with --oracle local")
        return LocalDictionary.from_file(dictionary, language=language)
    return create_oracle(oracle_id)


def render(engine: RuleEngine, out: TextIO) -> None:
    out.write(f"\n== {engine.root_word} ==\n")
    for w in engine.used_words:
        out.write(f"  ({len(w)}) {w}\n")
    out.write(f"Score: {engine.score()}\n")


def play(engine: RuleEngine, pool: List[str], fallback: str,
         inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    """
    Run the read-validate-render loop. Returns the final score.
    """
    engine.start_session(pool, fallback)
    render(engine, out)

    for line in inp:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            engine.start_session(pool, fallback)
            render(engine, out)
            continue

        try:
            result = engine.validate(line)
        except OracleUnavailable as e:
            out.write(f"Spell checker unavailable, try again ({e})\n")
            continue

        if result.is_accepted:
            render(engine, out)
        elif result.is_rejected:
            title, message = describe(result)
            out.write(f"{title}: {message}\n")
        # empty input: nothing to say

    return engine.score()


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordscramble: make words from the root word")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS),
                    help="start-word list, one word per line")
    ap.add_argument("--fallback", default=DEFAULT_FALLBACK,
                    help="root word used if the start-word list is empty")
    ap.add_argument("--oracle", default="remote", choices=get_oracle_ids(),
                    help="spelling oracle id")
    ap.add_argument("--dictionary", help="word list for --oracle local")
    ap.add_argument("--language", default="en", help="language tag passed to the oracle")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word picks")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        pool = FileWordListProvider(args.words).load()
        oracle = build_oracle(args.oracle, args.dictionary, args.language)
    except LoadError as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1

    engine = RuleEngine(oracle, language=args.language, seed=args.seed)
    final = play(engine, pool, args.fallback)
    print(f"Final score: {final}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
