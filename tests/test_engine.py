import pytest

from infowordle.engine import (
    all_patterns,
    filter_candidates,
    is_consistent,
    parse_feedback,
    pattern_code,
    pattern_from_code,
    score,
    validate_guess,
)
from infowordle.engine.errors import InvalidFeedbackShape, InvalidWord
from infowordle.engine.table import PatternTable, encode_words, pattern_codes
from infowordle.engine.validation import canonical_word

GOLDEN = [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("scoop", "scoop", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    # duplicate letters: yellows capped by the secret's remaining count
    ("allee", "level", "-YYGY"),
    ("sassy", "glass", "YY-G-"),
    ("aaccc", "aabbb", "GG---"),
    ("ccaac", "aabbb", "--YY-"),
    ("caacc", "aabbb", "-GY--"),
    ("aaabb", "azzaz", "GY---"),
    ("aaddd", "baccc", "-G---"),
    ("aacde", "abcde", "G-GGG"),
    ("eabcd", "abcde", "YYYYY"),
    ("fghij", "abcde", "-----"),
]


@pytest.mark.parametrize("guess,secret,expected", GOLDEN)
def test_score_golden(guess, secret, expected):
    assert score(guess, secret) == expected


@pytest.mark.parametrize("guess,secret,expected", GOLDEN)
def test_vectorized_codes_match_score(guess, secret, expected):
    codes = pattern_codes(guess, encode_words([secret]))
    assert pattern_from_code(int(codes[0])) == expected


def test_vectorized_codes_match_score_all_pairs():
    words = ["crane", "level", "allee", "sassy", "glass", "eerie", "geese",
             "abbey", "kayak", "llama", "mamma", "speed", "erase", "steel"]
    secrets = encode_words(words)
    for g in words:
        codes = pattern_codes(g, secrets)
        assert [pattern_from_code(int(c)) for c in codes] == [score(g, s) for s in words]


def test_score_is_five_marks_and_all_correct_on_self():
    for w in ["crane", "level", "sassy", "mamma"]:
        assert score(w, w) == "GGGGG"
        assert len(score(w, "glass")) == 5


def test_pattern_codes_round_trip_and_order():
    patterns = all_patterns()
    assert len(patterns) == 243
    assert patterns[0] == "GGGGG" and patterns[-1] == "-----"
    assert [pattern_code(p) for p in patterns] == list(range(243))
    assert pattern_from_code(pattern_code("GY-YG")) == "GY-YG"


@pytest.mark.parametrize("raw,expected", [
    ("GY--G", "GY--G"),
    ("gy--g", "GY--G"),
    ("cmwwc", "GY--G"),
    (["C", "M", "W", "W", "C"], "GY--G"),
    (" GGGGG ", "GGGGG"),
])
def test_parse_feedback_accepts_both_alphabets(raw, expected):
    assert parse_feedback(raw) == expected


@pytest.mark.parametrize("raw", ["GGGG", "GGGGGG", "GGXGG", "", ["G", "G", "G", "G", 1], 42])
def test_parse_feedback_rejects_bad_shapes(raw):
    with pytest.raises(InvalidFeedbackShape):
        parse_feedback(raw)


@pytest.mark.parametrize("prev,pattern,word,allowed", [
    ("baaaa", "-GY--", "aaccc", True),
    ("baaaa", "-GY--", "caacc", False),
    ("tares", "-YY--", "brink", False),
    ("aaaab", "GGG-Y", "aaabc", True),
    ("aaabc", "GGGY-", "aaaab", True),
    ("abcde", "-----", "bcdea", False),
])
def test_is_consistent(prev, pattern, word, allowed):
    assert is_consistent(word, prev, pattern) is allowed


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [("raise", "YY--G")]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("trace", set(allowed)) is False


@pytest.mark.parametrize("bad", ["cran", "cranes", "cr4ne", "crâne", "", None, 12345])
def test_canonical_word_rejects(bad):
    with pytest.raises(InvalidWord):
        canonical_word(bad)


def test_pattern_table_caches_rows():
    answers = ["crane", "level", "glass"]
    table = PatternTable(answers)
    row = table.row("sassy")
    assert [pattern_from_code(int(c)) for c in row] == [score("sassy", a) for a in answers]
    assert table.row("sassy") is row
    assert len(table) == 1


@pytest.mark.parametrize("guess,secret", [("cat", "crane"), ("crane", "cranes")])
def test_score_rejects_mismatched_lengths(guess, secret):
    with pytest.raises(InvalidWord):
        score(guess, secret)
