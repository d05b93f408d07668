# apps/cli/replay.py
"""
Replay a file of submissions against a seeded session.

This script:
  1) Validates the start-word list (prints counts + SHA).
  2) Starts a session with a seeded root-word pick.
  3) Validates every submission with a progress bar and writes:
       - CSV:  one row per submission (verdict, reason, running score)
       - JSON: manifest with config, word-list report, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordscramble.datasets import (
    DEFAULT_START_WORDS, FileWordListProvider, LoadError, pretty_summary, read_lines,
    validate_wordlist,
)
from wordscramble.engine import RuleEngine
from wordscramble.engine.session import DEFAULT_FALLBACK
from wordscramble.harness import replay, write_csv, write_manifest
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id
from wordscramble.oracles import get_oracle_ids

from apps.cli.play import build_oracle


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, replay with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble: replay submissions")
    ap.add_argument("submissions", help="file with one raw submission per line")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS),
                    help="start-word list, one word per line")
    ap.add_argument("--fallback", default=DEFAULT_FALLBACK)
    ap.add_argument("--oracle", default="always", choices=get_oracle_ids(),
                    help="spelling oracle id")
    ap.add_argument("--dictionary", help="word list for --oracle local")
    ap.add_argument("--language", default="en")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the start-word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load inputs; a missing resource is fatal
    try:
        pool = FileWordListProvider(args.words).load()
        submissions = read_lines(args.submissions)
        oracle = build_oracle(args.oracle, args.dictionary, args.language)
    except (LoadError, FileNotFoundError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1

    engine = RuleEngine(oracle, language=args.language, seed=args.seed)
    root = engine.start_session(pool, args.fallback)
    print(f"Root word: {root}")

    # 3) Replay with progress
    rows = replay(engine, tqdm(submissions, ncols=80, desc="Replaying", unit="word"))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path), root_word=root)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "root_word": root,
        "score": engine.score(),
        "num_submissions": len(rows),
        "used_words": list(engine.used_words),
    }, str(manifest_path))

    print(f"Score: {engine.score()}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
