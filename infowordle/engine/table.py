"""
Vectorized pattern computation.

`pattern_codes` scores one guess against many secrets at once with numpy,
following the same two-pass algorithm as `scoring.score`, and returns the
integer pattern codes. `PatternTable` caches those rows per guess word against
the full answer list, so later rounds only need to index into them.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from .scoring import WORD_LENGTH

_A = ord("a")

# Correct=0, Present=1, Absent=2; first position most significant.
_POWERS = 3 ** np.arange(WORD_LENGTH - 1, -1, -1, dtype=np.int64)


def encode_words(words: Sequence[str]) -> np.ndarray:
    """Canonical words -> (n, 5) uint8 array of letter indices 0..25."""
    if not words:
        return np.zeros((0, WORD_LENGTH), dtype=np.uint8)
    raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return (raw.reshape(len(words), WORD_LENGTH) - _A).astype(np.uint8)


def pattern_codes(guess: str, secrets: np.ndarray) -> np.ndarray:
    """
    Pattern code of `guess` against every row of `secrets` (from encode_words).

    Returns an int64 array of shape (n,).
    """
    g = [ord(ch) - _A for ch in guess]
    green = secrets == np.asarray(g, dtype=np.uint8)
    marks = np.full(secrets.shape, 2, dtype=np.int64)
    marks[green] = 0

    # Per guessed letter: how many non-green occurrences each secret still has.
    remaining: Dict[int, np.ndarray] = {}
    for letter in set(g):
        remaining[letter] = np.count_nonzero((secrets == letter) & ~green, axis=1)

    for i, letter in enumerate(g):
        present = (remaining[letter] > 0) & ~green[:, i]
        marks[present, i] = 1
        remaining[letter] = remaining[letter] - present.astype(remaining[letter].dtype)

    return marks @ _POWERS


class PatternTable:
    """
    Lazily filled cache of pattern codes: one row per guess word, one column
    per dictionary answer (in dictionary order).

    Rows are deterministic, so concurrent fills of the same row are harmless
    and the table can be shared by several games over the same answers.
    """

    def __init__(self, answers: Sequence[str]):
        self.answers = tuple(answers)
        self._secrets = encode_words(self.answers)
        self._rows: Dict[str, np.ndarray] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def row(self, guess: str) -> np.ndarray:
        row = self._rows.get(guess)
        if row is None:
            row = pattern_codes(guess, self._secrets).astype(np.uint8)
            self._rows[guess] = row
        return row

    def codes(self, guess: str, indices: np.ndarray) -> np.ndarray:
        """Codes of `guess` against the answers at `indices`."""
        return self.row(guess)[indices]
