from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines
from .wordlist import (
    DEFAULT_START_WORDS, LoadError, WordListProvider,
    FileWordListProvider, StaticWordListProvider,
)

__all__ = [
    "validate_wordlist", "pretty_summary", "read_lines", "write_lines",
    "DEFAULT_START_WORDS", "LoadError", "WordListProvider",
    "FileWordListProvider", "StaticWordListProvider",
]
