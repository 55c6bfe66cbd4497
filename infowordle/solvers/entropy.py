"""
Entropy-based ranking policies.

All three read the scorer's raw expected information; they differ in how much
weight they give to the chance that the guess itself is the secret:

  - entropy               : E[info] alone (the default)
  - weighted_information  : p(word) * E[info]; only candidates can score > 0
  - info_plus_probability : p(word) + E[info]; a candidate bonus that matters
                            mostly when E[info] is nearly level
"""

from __future__ import annotations

from infowordle.engine.entropy import GuessScore
from .base import BasePolicy, RankContext, register


@register
class ExpectedInformationPolicy(BasePolicy):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    def goodness(self, s: GuessScore, ctx: RankContext) -> float:
        return s.entropy


@register
class WeightedInformationPolicy(BasePolicy):
    id = "weighted_information"
    name = "Probability-Weighted Information"
    version = "1.0.0"

    def goodness(self, s: GuessScore, ctx: RankContext) -> float:
        return s.probability * s.entropy


@register
class InfoPlusProbabilityPolicy(BasePolicy):
    id = "info_plus_probability"
    name = "Information plus Win Probability"
    version = "1.0.0"

    def goodness(self, s: GuessScore, ctx: RankContext) -> float:
        return s.probability + s.entropy
