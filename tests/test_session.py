import pytest
from wordscramble.engine import (
    NoActiveSession, Rejection, RuleEngine, Verdict, describe, is_possible, score_words,
)
from wordscramble.engine.rules import check_length, check_not_root
from wordscramble.datasets import LoadError, FileWordListProvider, StaticWordListProvider
from wordscramble.oracles import AlwaysTrue, LocalDictionary, OracleUnavailable, SpellingOracle

WORDS = ["cart", "race", "react", "trace", "cater", "rate", "tear", "care", "acre"]


class RecordingOracle(SpellingOracle):
    id = "recording"  # not registered

    def __init__(self, words):
        self.words = set(words)
        self.calls = []

    def is_recognized(self, word, language):
        self.calls.append((word, language))
        return word in self.words


class DownOracle(SpellingOracle):
    id = "down"

    def is_recognized(self, word, language):
        raise OracleUnavailable("timeout")


def _engine(oracle=None, root="crate"):
    eng = RuleEngine(oracle or LocalDictionary(WORDS), seed=1)
    eng.start_session([root])
    return eng


# --- lifecycle ---
def test_no_active_session_fails_fast():
    eng = RuleEngine(LocalDictionary(WORDS))
    assert eng.has_session is False
    with pytest.raises(NoActiveSession):
        eng.validate("cart")
    with pytest.raises(NoActiveSession):
        eng.score()
    with pytest.raises(NoActiveSession):
        eng.root_word


def test_start_session_picks_from_pool_and_lowercases():
    eng = RuleEngine(LocalDictionary(WORDS), seed=7)
    pool = ["Silkworm", "BLANKETS", "carnival"]
    root = eng.start_session(pool)
    assert root in {"silkworm", "blankets", "carnival"}
    assert eng.root_word == root
    assert eng.used_words == ()


def test_start_session_is_reproducible_with_seed():
    pool = ["alpha", "bravo", "charlie", "delta", "echo"]
    a = [RuleEngine(LocalDictionary(), seed=3).start_session(pool) for _ in range(3)]
    assert len(set(a)) == 1


def test_start_session_empty_pool_uses_fallback():
    eng = RuleEngine(LocalDictionary(WORDS))
    assert eng.start_session([], "SilkWorm") == "silkworm"
    assert eng.used_words == ()
    assert eng.score() == 0


def test_start_session_blank_pool_uses_fallback():
    eng = RuleEngine(LocalDictionary(WORDS))
    assert eng.start_session(["", "  "], "silkworm") == "silkworm"


def test_start_session_empty_fallback_is_error():
    with pytest.raises(ValueError):
        RuleEngine(LocalDictionary()).start_session([], "  ")


def test_start_session_resets_used_words():
    eng = _engine()
    assert eng.validate("cart").is_accepted
    assert eng.used_words == ("cart",)
    eng.start_session(["crate"])
    assert eng.used_words == ()
    assert eng.score() == 0
    # previously used word is fresh again in the new session
    assert eng.validate("cart").is_accepted


def test_new_game_loads_from_provider():
    eng = RuleEngine(LocalDictionary(WORDS), seed=1)
    assert eng.new_game(StaticWordListProvider(["Crate"])) == "crate"


def test_new_game_missing_resource_is_fatal(tmp_path):
    eng = RuleEngine(LocalDictionary(WORDS))
    with pytest.raises(LoadError):
        eng.new_game(FileWordListProvider(tmp_path / "missing.txt"))
    assert eng.has_session is False


# --- validate ---
def test_accepts_and_inserts_most_recent_first():
    eng = _engine()
    assert eng.validate("cart").verdict is Verdict.ACCEPTED
    assert eng.validate("race").verdict is Verdict.ACCEPTED
    assert eng.used_words == ("race", "cart")
    assert eng.score() == 10


def test_score_example():
    eng = RuleEngine(LocalDictionary(["cat", "dog"]))
    eng.start_session(["catdog"])
    eng.validate("cat")
    eng.validate("dog")
    assert eng.used_words == ("dog", "cat")
    assert eng.score() == 8


def test_normalization_matches_plain_input():
    a, b = _engine(), _engine()
    ra, rb = a.validate("  CART  "), b.validate("cart")
    assert ra == rb
    assert a.used_words == b.used_words == ("cart",)


def test_empty_input_is_noop():
    eng = _engine()
    r = eng.validate("  \n ")
    assert r.verdict is Verdict.NOOP
    assert r.reason is None
    assert describe(r) is None
    assert eng.used_words == ()


@pytest.mark.parametrize("raw,reason", [
    ("ca", Rejection.TOO_SHORT),
    ("CRATE", Rejection.SAME_AS_ROOT),
    ("crater", Rejection.NOT_POSSIBLE),
    ("tcr", Rejection.NOT_A_WORD),
])
def test_rejections(raw, reason):
    eng = _engine()
    r = eng.validate(raw)
    assert r.verdict is Verdict.REJECTED
    assert r.reason is reason
    assert eng.used_words == ()


def test_already_used_on_second_submission():
    eng = _engine()
    assert eng.validate("cart").is_accepted
    second = eng.validate("Cart")
    assert second.reason is Rejection.ALREADY_USED
    assert eng.validate("cart").reason is Rejection.ALREADY_USED
    assert eng.used_words == ("cart",)


def test_too_short_fires_before_same_as_root():
    eng = RuleEngine(LocalDictionary())
    eng.start_session([], "ab")
    assert eng.validate("ab").reason is Rejection.TOO_SHORT


def test_not_possible_checked_before_oracle():
    oracle = RecordingOracle(WORDS)
    eng = _engine(oracle)
    assert eng.validate("zzzz").reason is Rejection.NOT_POSSIBLE
    assert oracle.calls == []
    eng.validate("trace")
    assert oracle.calls == [("trace", "en")]


def test_rules_short_circuit_in_order():
    seen = []

    def first(word, ctx):
        seen.append("first")
        return Rejection.TOO_SHORT

    def second(word, ctx):
        seen.append("second")
        return Rejection.SAME_AS_ROOT

    eng = RuleEngine(LocalDictionary(), rules=[first, second])
    eng.start_session(["crate"])
    assert eng.validate("anything").reason is Rejection.TOO_SHORT
    assert seen == ["first"]


def test_custom_rule_order_changes_reported_reason():
    eng = RuleEngine(LocalDictionary(), rules=[check_not_root, check_length])
    eng.start_session([], "ab")
    assert eng.validate("ab").reason is Rejection.SAME_AS_ROOT


def test_language_is_passed_to_oracle():
    oracle = RecordingOracle(["tarte"])
    eng = RuleEngine(oracle, language="fr")
    eng.start_session(["tartes"])
    assert eng.validate("tarte").is_accepted
    assert oracle.calls == [("tarte", "fr")]


def test_oracle_unavailable_leaves_session_untouched():
    eng = _engine(DownOracle())
    with pytest.raises(OracleUnavailable):
        eng.validate("cart")
    assert eng.used_words == ()


def test_accepted_words_satisfy_rules():
    oracle = LocalDictionary(WORDS)
    eng = RuleEngine(oracle)
    eng.start_session(["crate"])
    for w in ["cart", "x", "crate", "cart", "crater", "tcr", "trace", "react", "acre"]:
        eng.validate(w)
    assert eng.used_words == ("acre", "react", "trace", "cart")
    assert len(set(eng.used_words)) == len(eng.used_words)
    for w in eng.used_words:
        assert is_possible(w, eng.root_word)
        assert oracle.is_recognized(w, "en")
    assert eng.score() == score_words(eng.used_words) == 22


def test_describe_uses_kind_copy():
    eng = _engine()
    assert describe(eng.validate("ca")) == (
        "Word too short", "Words should be at least 3 letters long")
    assert describe(eng.validate("crater"))[0] == "Word not possible"
    assert describe(eng.validate("tcr"))[0] == "Word not recognized"


def test_length_and_letters_are_counted_in_graphemes():
    g_tilde = "g\u0303"
    eng = RuleEngine(AlwaysTrue())
    eng.start_session([g_tilde + "abx"])
    assert eng.validate(g_tilde + "a").reason is Rejection.TOO_SHORT
    assert eng.validate("gab").reason is Rejection.NOT_POSSIBLE
    assert eng.validate(g_tilde.upper() + "AX").is_accepted
    assert eng.used_words == (g_tilde + "ax",)
    assert eng.score() == 4
