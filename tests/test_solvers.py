import pytest

from infowordle.engine import GuessScore
from infowordle.solvers import (
    RankContext,
    create_policy,
    get_policy_ids,
    get_tie_break,
    register,
)
from infowordle.solvers.base import BasePolicy
from infowordle.solvers.expected_score import est_steps_left

CTX = RankContext(round_index=1, pool_size=4, pool_entropy=2.0)


def _s(word, entropy, *, cand=False, prior=0.0, p=0.0):
    return GuessScore(word=word, entropy=entropy, is_candidate=cand, prior=prior,
                      probability=p, buckets=1, worst_bucket=1)


# Three guesses tied on entropy (up to float noise) plus one clearly worse.
RANKING = {s.word: s for s in [
    _s("zesty", 1.5),
    _s("bacon", 1.5 + 1e-15, cand=True, prior=2.0, p=0.2),
    _s("cater", 1.5, cand=True, prior=8.0, p=0.8),
    _s("aaaaa", 0.5),
]}


def test_registry_lists_all_policies():
    assert get_policy_ids() == ["entropy", "expected_score", "info_plus_probability",
                                "popular", "weighted_information"]
    with pytest.raises(ValueError):
        create_policy("nope")


def test_register_rejects_duplicates_and_missing_ids():
    class NoId(BasePolicy):
        id = ""

    class Dup(BasePolicy):
        id = "entropy"

    with pytest.raises(ValueError):
        register(NoId)
    with pytest.raises(ValueError):
        register(Dup)


@pytest.mark.parametrize("tie_break,expected", [
    ("lexicographic", "bacon"),
    ("prior", "cater"),
    ("candidate", "cater"),
])
def test_entropy_ties_follow_the_tie_break(tie_break, expected):
    policy = create_policy("entropy")
    assert policy.select(RANKING, CTX, get_tie_break(tie_break)) == expected


def test_candidate_tie_break_prefers_pool_members():
    key = get_tie_break("candidate")
    a = _s("aaaaa", 1.0, prior=100.0)
    b = _s("zzzzz", 1.0, cand=True, prior=1.0, p=1.0)
    assert min([a, b], key=key).word == "zzzzz"


def test_unknown_tie_break():
    with pytest.raises(ValueError):
        get_tie_break("coin_flip")


def test_probability_policies():
    assert create_policy("popular").select(RANKING, CTX, get_tie_break("lexicographic")) == "cater"
    assert create_policy("weighted_information").goodness(RANKING["cater"], CTX) == pytest.approx(1.2)
    assert create_policy("info_plus_probability").goodness(RANKING["bacon"], CTX) == pytest.approx(1.7)


def test_expected_score_prefers_likely_winners_when_information_is_level():
    policy = create_policy("expected_score")
    assert policy.goodness(RANKING["cater"], CTX) > policy.goodness(RANKING["zesty"], CTX)
    assert policy.select(RANKING, CTX, get_tie_break("lexicographic")) == "cater"


def test_est_steps_left_grows_with_entropy():
    assert est_steps_left(0.0) < est_steps_left(1.0) < est_steps_left(10.0)
    assert est_steps_left(-1e-15) == est_steps_left(0.0)


def test_select_rejects_empty_ranking():
    with pytest.raises(ValueError):
        create_policy("entropy").select({}, CTX, get_tie_break("candidate"))
