import pytest
from script.build_start_words import clean_words, unique_preserve_order


@pytest.mark.parametrize("lines,min_length,expected", [
    (["Silkworm", "  BLANKETS  ", "carnival\t"], 8, ["silkworm", "blankets", "carnival"]),
    (["silkworm", "worm", "", "   "], 8, ["silkworm"]),
    (["silk-worm", "dino2saur", "carnival"], 3, ["carnival"]),
    (["carnival", "silkworm", "CARNIVAL", "carnival"], 8, ["carnival", "silkworm"]),
    (["cat", "at", "dog"], 3, ["cat", "dog"]),
])
def test_clean_words(lines, min_length, expected):
    assert clean_words(lines, min_length) == expected


def test_unique_preserve_order_keeps_first_seen():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
