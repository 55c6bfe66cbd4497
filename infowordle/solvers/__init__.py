from __future__ import annotations
from typing import List
from .base import BasePolicy, RankContext, REGISTRY, register
from .tiebreak import DEFAULT_TIE_BREAK, TIE_BREAKS, get_tie_break, get_tie_break_ids

from . import entropy  # noqa: F401
from . import expected_score  # noqa: F401
from . import popular  # noqa: F401

DEFAULT_POLICY = "entropy"


def create_policy(policy_id: str) -> BasePolicy:
    """
    Factory: instantiate a registered ranking policy by id.
    """
    try:
        cls = REGISTRY[policy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown policy id: {policy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_policy_ids() -> List[str]:
    """
    Return all registered policy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BasePolicy", "RankContext", "REGISTRY", "register", "create_policy", "get_policy_ids",
    "DEFAULT_POLICY", "DEFAULT_TIE_BREAK", "TIE_BREAKS", "get_tie_break", "get_tie_break_ids",
]
