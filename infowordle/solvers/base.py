from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Type

from infowordle.engine.entropy import GuessScore

# ---- Global policy registry ----
REGISTRY: Dict[str, Type["BasePolicy"]] = {}

# Goodness values this close to the best are treated as ties.
TIE_REL_TOL = 1e-9
TIE_ABS_TOL = 1e-12


def register(cls: Type["BasePolicy"]) -> Type["BasePolicy"]:
    """
    Decorator: @register on a policy class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate policy id: {pid}")
    REGISTRY[pid] = cls
    return cls


@dataclass(frozen=True)
class RankContext:
    """What a policy may know about the round besides the guess's own score."""
    round_index: int      # guesses already made this game
    pool_size: int
    pool_entropy: float   # bits of uncertainty left in the pool's prior


# ---- Base class that policies inherit ----
class BasePolicy:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def goodness(self, s: GuessScore, ctx: RankContext) -> float:
        """Higher is better."""
        raise NotImplementedError("Override in subclass")

    def select(self, ranking: Mapping[str, GuessScore], ctx: RankContext,
               tie_key: Callable[[GuessScore], tuple]) -> str:
        """
        Pick the best-scoring guess; among ties, the one with the smallest
        `tie_key`.
        """
        if not ranking:
            raise ValueError("no guesses to choose from")
        scored = [(self.goodness(s, ctx), s) for s in ranking.values()]
        best = max(g for g, _ in scored)
        tied = [s for g, s in scored
                if math.isclose(g, best, rel_tol=TIE_REL_TOL, abs_tol=TIE_ABS_TOL)]
        return min(tied, key=tie_key).word
