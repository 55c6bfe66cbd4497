"""
Candidate filtering given game history.

Given a pool of words and a history of (guess, pattern) pairs, keep the words
that would have produced exactly the recorded patterns. This is the reference
(pure Python) form; CandidatePool does the same thing vectorized.
"""

from typing import Iterable, List, Tuple

from .scoring import score

History = Iterable[Tuple[str, str]]  # (guess, pattern)


def is_consistent(word: str, guess: str, observed: str) -> bool:
    """True if `word` being the secret would produce `observed` for `guess`."""
    return score(guess, word) == observed


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with every (guess, pattern) in `history`.

    Order is preserved as in `words`.
    """
    history = list(history)
    return [
        w for w in words
        if all(is_consistent(w, g, patt) for g, patt in history)
    ]
