"""
Build a clean start-word list from a raw word file.

Features:
- Lower-cases and trims every line; drops blank lines.
- Keeps only alphabetic words with at least --min-length letters
  (root words need room for 3+ letter answers; 8 is a good default).
- Removes duplicates, preserving first-seen order by default.
- Optional alphabetical sort.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.build_start_words --in raw_words.txt \
        --out wordscramble/datasets/data/start.txt --min-length 8
"""

import argparse
from pathlib import Path

from wordscramble.datasets import read_lines, write_lines, validate_wordlist, pretty_summary


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean_words(lines: list[str], min_length: int) -> list[str]:
    words = [s.strip().lower() for s in lines]
    return unique_preserve_order([w for w in words if w.isalpha() and len(w) >= min_length])


def main():
    ap = argparse.ArgumentParser(description="Normalize and dedupe a start-word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--min-length", type=int, default=8, help="shortest root word to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean_words(lines, args.min_length)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")
    print(pretty_summary(validate_wordlist(str(outp), min_length=args.min_length)))

if __name__ == "__main__":
    main()
