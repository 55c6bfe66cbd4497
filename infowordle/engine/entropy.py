"""
Entropy scorer (expected information gain).

For each legal guess g:
  - partition the pool by the pattern each candidate would produce against g;
  - p(pattern) = prior mass of that partition / pool mass;
  - E[info](g) = -sum p * log2(p) over non-empty patterns, in ascending
    pattern-code order (0 * log2(0) := 0 by skipping empty patterns).

The scorer reports raw entropy and whether g is itself still a candidate;
how the two are combined is left to the ranking policies in `solvers`.

Scoring one guess never depends on scoring another, so `rank` can fan out
chunks of the legal list to worker threads and merge the results in chunk
order, which gives the same mapping as sequential scoring.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from math import log2
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .pool import CandidatePool
from .scoring import N_PATTERNS, pattern_code, score
from .table import PatternTable, pattern_codes
from .validation import canonical_word

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 512


@dataclass(frozen=True)
class GuessScore:
    word: str
    entropy: float        # expected information, bits
    is_candidate: bool    # still a possible secret
    prior: float          # dictionary weight of the word (0 for guess-only words)
    probability: float    # p(word is the secret | pool); 0 when not a candidate
    buckets: int          # number of distinct patterns induced
    worst_bucket: int     # size of the largest partition


def entropy_of_codes(codes: np.ndarray, weights: np.ndarray,
                     total: float) -> Tuple[float, int, int]:
    """Return (entropy_bits, buckets, worst_bucket) for one guess's pattern codes."""
    masses = np.bincount(codes, weights=weights, minlength=N_PATTERNS)
    counts = np.bincount(codes, minlength=N_PATTERNS)
    nz = masses[masses > 0]
    p = nz / total
    h = float(-np.sum(p * np.log2(p)))
    return max(0.0, h), int(np.count_nonzero(counts)), int(counts.max(initial=0))


def expected_information(guess: str, words: Sequence[str],
                         weights: Sequence[float]) -> float:
    """
    Reference implementation: bucket the words by pattern with plain dicts.

    Used to cross-check the vectorized path on small inputs.
    """
    buckets: Dict[int, float] = defaultdict(float)
    total = 0.0
    for w, wt in zip(words, weights):
        buckets[pattern_code(score(guess, w))] += wt
        total += wt
    if total <= 0:
        return 0.0

    h = 0.0
    for code in sorted(buckets):
        p = buckets[code] / total
        if p > 0:
            h -= p * log2(p)
    return max(0.0, h)


def _score_chunk(chunk: Sequence[str], pool: CandidatePool, prior: Dict[str, float],
                 table: Optional[PatternTable]) -> List[GuessScore]:
    weights = pool.weights
    total = pool.total_weight()
    secrets = None if table is not None else pool.encoded()

    out: List[GuessScore] = []
    for g in chunk:
        codes = table.codes(g, pool.indices) if table is not None else pattern_codes(g, secrets)
        h, buckets, worst = entropy_of_codes(codes, weights, total)
        out.append(GuessScore(
            word=g,
            entropy=h,
            is_candidate=g in pool,
            prior=prior.get(g, 0.0),
            probability=pool.probability(g),
            buckets=buckets,
            worst_bucket=worst,
        ))
    return out


def rank(legal_guesses: Sequence[str], pool: CandidatePool, *,
         prior: Optional[Dict[str, float]] = None,
         table: Optional[PatternTable] = None,
         workers: int = 1,
         chunk_size: int = DEFAULT_CHUNK_SIZE) -> Dict[str, GuessScore]:
    """
    Score every legal guess against `pool`.

    Args:
      legal_guesses : words, scored in this order (canonicalized; InvalidWord
                      if one is malformed)
      pool          : current candidate pool (non-empty)
      prior         : word -> dictionary weight, for GuessScore.prior
      table         : optional PatternTable over the pool's answer list
      workers       : >1 scores chunks on a thread pool
      chunk_size    : guesses per work unit

    Returns:
      dict word -> GuessScore, in legal-guess order.
    """
    if len(pool) == 0:
        raise ValueError("cannot rank guesses against an empty pool")
    prior = prior or {}
    legal_guesses = [canonical_word(g) for g in legal_guesses]
    chunk_size = max(1, int(chunk_size))
    chunks = [legal_guesses[i:i + chunk_size] for i in range(0, len(legal_guesses), chunk_size)]

    t0 = time.perf_counter()
    if workers <= 1 or len(chunks) <= 1:
        parts = [_score_chunk(c, pool, prior, table) for c in chunks]
    else:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            parts = list(ex.map(lambda c: _score_chunk(c, pool, prior, table), chunks))

    ranking: Dict[str, GuessScore] = {}
    for part in parts:
        for s in part:
            ranking[s.word] = s

    log.debug(f"ranked {len(ranking)} guesses against {len(pool)} candidates "
              f"in {(time.perf_counter() - t0) * 1000.0:.1f} ms ({len(chunks)} chunk(s))")
    return ranking
