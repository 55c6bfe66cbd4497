from math import log2

import pytest

from infowordle.dictionary import Dictionary
from infowordle.engine import CandidatePool, filter_candidates, score
from infowordle.engine.errors import InvalidFeedbackShape, InvalidWord, NoConsistentCandidates

WORDS = {"crane": 5, "raise": 4, "stare": 3, "trace": 2, "cared": 2, "racer": 1, "scoop": 1}


@pytest.fixture
def pool():
    return CandidatePool.from_dictionary(Dictionary.from_pairs(WORDS.items()))


def test_initial_pool_is_the_full_answer_list(pool):
    assert pool.is_initial
    assert pool.size() == len(WORDS) == len(pool)
    assert pool.words == list(WORDS)
    assert pool.total_weight() == pytest.approx(sum(WORDS.values()))


def test_filter_matches_reference_and_leaves_old_snapshot_untouched(pool):
    after = pool.filter("raise", "YY--G")
    assert after.words == filter_candidates(WORDS, [("raise", "YY--G")])
    assert "crane" in after and "stare" not in after
    assert not after.is_initial
    assert pool.size() == len(WORDS)
    assert after.total_weight() == pytest.approx(sum(WORDS[w] for w in after.words))


@pytest.mark.parametrize("guess,secret", [
    ("raise", "crane"), ("scoop", "cared"), ("trace", "racer"), ("crane", "crane"),
])
def test_filter_is_idempotent_and_monotone(pool, guess, secret):
    patt = score(guess, secret)
    once = pool.filter(guess, patt)
    twice = once.filter(guess, patt)
    assert once.words == twice.words
    assert once.size() <= pool.size()
    assert secret in once


def test_contradictory_feedback_empties_the_pool(pool):
    with pytest.raises(NoConsistentCandidates) as exc:
        pool.filter("crane", "GGGG-")
    assert exc.value.pool_size == len(WORDS)
    assert exc.value.guess == "crane" and exc.value.pattern == "GGGG-"


def test_probability_and_entropy():
    d = Dictionary.from_pairs([("abcde", 1), ("fghij", 1), ("klmno", 1), ("pqrst", 1)])
    pool = CandidatePool.from_dictionary(d)
    assert pool.probability("abcde") == pytest.approx(0.25)
    assert pool.probability("zzzzz") == 0.0
    assert pool.entropy() == pytest.approx(log2(4))


def test_zero_weight_survivors_fall_back_to_uniform():
    d = Dictionary.from_pairs([("crane", 5), ("trace", 0), ("cater", 0)])
    pool = CandidatePool.from_dictionary(d)
    after = pool.filter("crane", score("crane", "trace"))
    assert "crane" not in after
    assert after.total_weight() > 0
    assert sum(after.probability(w) for w in after) == pytest.approx(1.0)


@pytest.mark.parametrize("guess,pattern", [
    ("raise", "yy--g"),
    ("raise", "MMWWC"),
    ("RAISE", "YY--G"),
    (" Raise ", ["Y", "Y", "-", "-", "G"]),
])
def test_filter_accepts_any_spelling_of_a_round(pool, guess, pattern):
    assert pool.filter(guess, pattern).words == pool.filter("raise", "YY--G").words


@pytest.mark.parametrize("guess,pattern,error", [
    ("cat", "YY--G", InvalidWord),
    ("raises", "YY--G", InvalidWord),
    ("raise", "YY-G", InvalidFeedbackShape),
    ("raise", "YX--G", InvalidFeedbackShape),
])
def test_filter_rejects_malformed_rounds(pool, guess, pattern, error):
    with pytest.raises(error):
        pool.filter(guess, pattern)
