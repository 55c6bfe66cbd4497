"""
Popular.

Baseline: guess the most likely remaining candidate and ignore information
entirely. Useful to check the pipeline and as a lower bar for the entropy
policies.
"""

from __future__ import annotations

from infowordle.engine.entropy import GuessScore
from .base import BasePolicy, RankContext, register


@register
class PopularPolicy(BasePolicy):
    id = "popular"
    name = "Most Probable Candidate"
    version = "1.0.0"

    def goodness(self, s: GuessScore, ctx: RankContext) -> float:
        return s.probability
