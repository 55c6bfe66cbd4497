"""
Candidate pool: the answers still consistent with every round of feedback.

A pool is a snapshot. `filter` returns a new, smaller pool and leaves the old
one untouched, so a ranking computed against one snapshot can never observe a
half-filtered state. Pools index into the dictionary's answer list, which lets
the entropy scorer reuse PatternTable rows across rounds.
"""

from __future__ import annotations

import logging
from math import log2
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from .errors import NoConsistentCandidates
from .scoring import parse_feedback, pattern_code
from .table import encode_words, pattern_codes
from .validation import canonical_word

log = logging.getLogger(__name__)


class CandidatePool:
    def __init__(self, answers: Sequence[str], weights: Sequence[float],
                 indices: Optional[np.ndarray] = None, *,
                 encoded: Optional[np.ndarray] = None, is_initial: bool = True):
        self._answers = tuple(answers)
        self._all_weights = np.asarray(weights, dtype=np.float64)
        self._encoded = encode_words(self._answers) if encoded is None else encoded
        if indices is None:
            indices = np.arange(len(self._answers), dtype=np.int64)
        self.indices = indices
        self.is_initial = is_initial

        self.words: List[str] = [self._answers[i] for i in indices]
        self._position: Dict[str, int] = {w: k for k, w in enumerate(self.words)}

        weights_here = self._all_weights[indices]
        if len(weights_here) and weights_here.sum() <= 0:
            # All survivors were unobserved in the corpus; treat them as equally likely.
            log.debug(f"pool of {len(weights_here)} has zero prior mass; using uniform weights")
            weights_here = np.ones_like(weights_here)
        self.weights = weights_here
        self._total = float(weights_here.sum())

    @classmethod
    def from_dictionary(cls, dictionary) -> "CandidatePool":
        return cls(dictionary.answer_words(), dictionary.answer_weights(),
                   encoded=dictionary.encoded_answers())

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word) -> bool:
        return word in self._position

    def __repr__(self) -> str:
        return f"CandidatePool(size={len(self)}, total_weight={self._total:g})"

    def size(self) -> int:
        return len(self.words)

    def total_weight(self) -> float:
        return self._total

    def weight_of(self, word: str) -> float:
        k = self._position.get(word)
        return 0.0 if k is None else float(self.weights[k])

    def probability(self, word: str) -> float:
        """Prior probability that `word` is the secret, given the pool."""
        if not self._total:
            return 0.0
        return self.weight_of(word) / self._total

    def entropy(self) -> float:
        """Shannon entropy (bits) of the pool's normalized prior."""
        if not self._total:
            return 0.0
        h = 0.0
        for w in self.weights:
            if w > 0:
                p = float(w) / self._total
                h -= p * log2(p)
        return max(0.0, h)

    def encoded(self) -> np.ndarray:
        """Letter-index rows of the pool's words (see table.encode_words)."""
        return self._encoded[self.indices]

    def filter(self, guess: str, pattern: str) -> "CandidatePool":
        """
        The pool after incorporating one more (guess, pattern) round.

        Raises NoConsistentCandidates if no word survives, InvalidWord or
        InvalidFeedbackShape if the round itself is malformed.
        """
        guess = canonical_word(guess)
        pattern = parse_feedback(pattern)
        codes = pattern_codes(guess, self.encoded())
        keep = self.indices[codes == pattern_code(pattern)]
        if len(keep) == 0:
            raise NoConsistentCandidates(guess, pattern, pool_size=len(self))
        log.debug(f"{guess} -> {pattern}: pool {len(self)} -> {len(keep)}")
        return CandidatePool(self._answers, self._all_weights, keep,
                             encoded=self._encoded, is_initial=False)
