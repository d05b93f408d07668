from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str, *, skip_blank: bool = False) -> List[str]:
    """
    Read a UTF-8 word file into a list of lines with line endings removed.
    A leading byte-order mark is dropped. With skip_blank=True, empty and
    whitespace-only lines are left out.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = p.read_text(encoding="utf-8-sig").splitlines()
    if skip_blank:
        lines = [ln for ln in lines if ln.strip()]
    return lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one entry per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)
