from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

from infowordle.engine.errors import SolverError


class Round(NamedTuple):
    guess: str
    pattern: str


class Outcome(str, Enum):
    WON = "won"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass(frozen=True)
class GameResult:
    """
    How one game ended.

    `word` is the solved secret for WON and None otherwise. `error` holds the
    TurnBudgetExceeded / NoConsistentCandidates that ended an unsuccessful
    game; `raise_for_outcome` re-raises it for callers that prefer exceptions.
    """
    outcome: Outcome
    history: Tuple[Round, ...]
    rounds_used: int
    pool_size: int
    word: Optional[str] = None
    error: Optional[SolverError] = None

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.WON

    def raise_for_outcome(self) -> None:
        if self.error is not None:
            raise self.error

    def as_dict(self) -> Dict:
        return {
            "outcome": self.outcome.value,
            "success": self.success,
            "guesses": self.rounds_used,
            "word": self.word,
            "pool_size": self.pool_size,
            "history": [tuple(r) for r in self.history],
            "error": None if self.error is None else str(self.error),
        }
