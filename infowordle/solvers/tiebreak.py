"""
Tie-break policies.

When several guesses share the best goodness, the one with the smallest key
wins. Every key ends with the word itself, so the choice is always unique and
independent of dictionary order.

  - lexicographic : alphabetically first word
  - prior         : highest dictionary weight, then alphabetical
  - candidate     : words still in the pool first (they can win outright),
                    then highest dictionary weight, then alphabetical
"""

from __future__ import annotations

from typing import Callable, Dict, List

from infowordle.engine.entropy import GuessScore

TieKey = Callable[[GuessScore], tuple]


def _lexicographic(s: GuessScore) -> tuple:
    return (s.word,)


def _prior(s: GuessScore) -> tuple:
    return (-s.prior, s.word)


def _candidate(s: GuessScore) -> tuple:
    return (not s.is_candidate, -s.prior, s.word)


TIE_BREAKS: Dict[str, TieKey] = {
    "lexicographic": _lexicographic,
    "prior": _prior,
    "candidate": _candidate,
}

DEFAULT_TIE_BREAK = "candidate"


def get_tie_break(name: str) -> TieKey:
    try:
        return TIE_BREAKS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown tie-break: {name}. Available: {sorted(TIE_BREAKS)}") from e


def get_tie_break_ids() -> List[str]:
    return sorted(TIE_BREAKS)
