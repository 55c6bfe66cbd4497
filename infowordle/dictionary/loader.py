"""
Dictionary loading.

Source format (one entry per line):

    <word> <weight>

  - word   : 5 ASCII letters, case-insensitive (stored lowercase)
  - weight : finite, non-negative integer or real; the prior likelihood of the
             word being the secret. A weight of 1 conventionally marks a
             plausible word that was never observed in the frequency corpus.

Blank lines are ignored; every other malformed line aborts the load with
MalformedEntry. An optional second file lists guess-only words ("valids"),
one per line, with or without a weight.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from infowordle.engine.errors import InvalidWord, MalformedEntry
from infowordle.engine.table import encode_words
from infowordle.engine.validation import canonical_word

log = logging.getLogger(__name__)

Source = Union[str, Path, Iterable[str]]


@dataclass(frozen=True)
class Entry:
    word: str
    weight: float


class Dictionary:
    """Immutable table of answers (with prior weights) plus guess-only words."""

    def __init__(self, answers: Sequence[Entry], valids: Sequence[str] = (), *,
                 source: str = "<memory>"):
        self._answers: Tuple[Entry, ...] = tuple(
            Entry(_checked_word(e.word, source), _checked_weight(e.weight, source))
            for e in answers
        )
        self._weight: Dict[str, float] = {}
        for e in self._answers:
            if e.word in self._weight:
                raise MalformedEntry(f"duplicate word {e.word!r}", source=source)
            self._weight[e.word] = e.weight
        if not self._answers:
            raise MalformedEntry("dictionary has no answers", source=source)
        total = sum(self._weight.values())
        if not total > 0:
            raise MalformedEntry(f"total answer weight must be positive, got {total}",
                                 source=source)
        self._total = total

        seen = set(self._weight)
        extra: List[str] = []
        for w in valids:
            w = _checked_word(w, source)
            if w not in seen:
                seen.add(w)
                extra.append(w)
        self._valids: Tuple[str, ...] = tuple(extra)
        self._legal = frozenset(seen)
        self._encoded = encode_words([e.word for e in self._answers])
        self._encoded.setflags(write=False)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, float]],
                   valids: Sequence[str] = ()) -> "Dictionary":
        """Build from (word, weight) pairs, e.g. `Dictionary.from_pairs({"crane": 3}.items())`."""
        return cls([Entry(w, wt) for w, wt in pairs], valids)

    def __len__(self) -> int:
        return len(self._legal)

    def __contains__(self, word) -> bool:
        return word in self._legal

    def __repr__(self) -> str:
        return f"Dictionary(answers={len(self._answers)}, guess_only={len(self._valids)})"

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._answers

    def answer_words(self) -> List[str]:
        return [e.word for e in self._answers]

    def answer_weights(self) -> np.ndarray:
        return np.array([e.weight for e in self._answers], dtype=np.float64)

    def valid_words(self) -> List[str]:
        """Words that may be guessed but are never the secret."""
        return list(self._valids)

    def all_words(self) -> List[str]:
        """Every legal guess: answers in file order, then guess-only words."""
        return self.answer_words() + list(self._valids)

    def encoded_answers(self) -> np.ndarray:
        return self._encoded

    def is_answer(self, word: str) -> bool:
        return word in self._weight

    def weight(self, word: str) -> float:
        return self._weight.get(word, 0.0)

    def weights(self) -> Dict[str, float]:
        return dict(self._weight)

    def total_weight(self) -> float:
        return self._total

    def with_weights(self, weights: Sequence[float]) -> "Dictionary":
        """Same words, new prior weights (in answer order)."""
        if len(weights) != len(self._answers):
            raise ValueError("one weight per answer is required")
        entries = [Entry(e.word, float(w)) for e, w in zip(self._answers, weights)]
        return Dictionary(entries, self._valids)

    def smoothed(self) -> "Dictionary":
        """Copy with sigmoid-smoothed priors (see priors.sigmoid_weights)."""
        from .priors import sigmoid_weights
        return self.with_weights(sigmoid_weights(self.answer_weights()))


def _checked_word(word, source: str) -> str:
    try:
        return canonical_word(word)
    except InvalidWord:
        raise MalformedEntry(f"word must be exactly 5 ASCII letters: {word!r}",
                             source=source) from None


def _checked_weight(weight, source: str) -> float:
    parsed = _parse_weight(weight)
    if parsed is None:
        raise MalformedEntry(f"weight must be a finite non-negative number: {weight!r}",
                             source=source)
    return parsed


def _lines(source: Source) -> Tuple[str, Iterable[str]]:
    if isinstance(source, (str, Path)):
        p = Path(source)
        if not p.exists():
            raise FileNotFoundError(p)
        return str(p), p.read_text(encoding="utf-8").splitlines()
    return "<lines>", source


def _parse_weight(token) -> Optional[float]:
    try:
        w = float(token)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(w) or w < 0:
        return None
    return w


def parse_entry(line: str, *, source: str = "<lines>", line_no: Optional[int] = None,
                require_weight: bool = True) -> Entry:
    """Parse one `<word> <weight>` line; raise MalformedEntry on any defect."""
    fields = line.split()
    expected = (2,) if require_weight else (1, 2)
    if len(fields) not in expected:
        what = "<word> <weight>" if require_weight else "<word> [<weight>]"
        raise MalformedEntry(f"expected {what}", source=source, line_no=line_no, line=line)

    try:
        word = canonical_word(fields[0])
    except InvalidWord:
        raise MalformedEntry("word must be exactly 5 ASCII letters",
                             source=source, line_no=line_no, line=line) from None

    weight = 1.0
    if len(fields) == 2:
        parsed = _parse_weight(fields[1])
        if parsed is None:
            raise MalformedEntry("weight must be a finite non-negative number",
                                 source=source, line_no=line_no, line=line)
        weight = parsed
    return Entry(word, weight)


def _read_entries(source: Source, *, require_weight: bool) -> Tuple[str, List[Entry]]:
    name, lines = _lines(source)
    entries: List[Entry] = []
    seen = set()
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        e = parse_entry(line, source=name, line_no=line_no, require_weight=require_weight)
        if e.word in seen:
            raise MalformedEntry(f"duplicate word {e.word!r}", source=name,
                                 line_no=line_no, line=line)
        seen.add(e.word)
        entries.append(e)
    return name, entries


def load(source: Source, *, valids: Optional[Source] = None) -> Dictionary:
    """
    Load a Dictionary.

    Args:
      source : path or iterable of `<word> <weight>` lines (the answers)
      valids : optional path or iterable of guess-only words

    Raises:
      MalformedEntry on the first malformed line, duplicate word, or a
      non-positive total weight.
    """
    name, answers = _read_entries(source, require_weight=True)
    guess_only: List[str] = []
    if valids is not None:
        _, extra = _read_entries(valids, require_weight=False)
        guess_only = [e.word for e in extra]

    d = Dictionary(answers, guess_only, source=name)

    log.info(f"Loaded {len(d.entries)} answers (total weight {d.total_weight():g}) "
             f"and {len(d.valid_words())} guess-only words from {name}")
    return d
