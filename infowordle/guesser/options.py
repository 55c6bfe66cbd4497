from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from infowordle.engine.entropy import DEFAULT_CHUNK_SIZE
from infowordle.solvers import DEFAULT_POLICY, DEFAULT_TIE_BREAK, REGISTRY, TIE_BREAKS

# Single source of truth for the game's turn budget.
DEFAULT_MAX_ROUNDS = 6

PRIORS = ("raw", "sigmoid")


@dataclass(frozen=True)
class SolverOptions:
    """
    Everything that changes which guesses a Guesser makes.

      max_rounds : turn budget; reaching it without a win ends the game
      opening    : fixed first guess, used only while no evidence is in
      policy     : ranking policy id (see infowordle.solvers)
      tie_break  : tie-break id (see infowordle.solvers.tiebreak)
      prior      : "raw" dictionary weights or "sigmoid"-smoothed ones
      hard_mode  : only words still in the pool may be guessed
      workers    : threads used to rank guesses (1 = sequential)
      chunk_size : guesses per ranking work unit
    """
    max_rounds: int = DEFAULT_MAX_ROUNDS
    opening: Optional[str] = None
    policy: str = DEFAULT_POLICY
    tie_break: str = DEFAULT_TIE_BREAK
    prior: str = "raw"
    hard_mode: bool = False
    workers: int = 1
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1; got {self.max_rounds}")
        if self.policy not in REGISTRY:
            raise ValueError(f"Unknown policy id: {self.policy}. Available: {sorted(REGISTRY)}")
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie-break: {self.tie_break}. Available: {sorted(TIE_BREAKS)}")
        if self.prior not in PRIORS:
            raise ValueError(f"prior must be one of {PRIORS}; got {self.prior!r}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1; got {self.chunk_size}")

    def as_dict(self) -> Dict:
        return asdict(self)
