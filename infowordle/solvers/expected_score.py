"""
Expected Score.

Idea:
  Minimize the expected total number of guesses instead of maximizing
  information. With r guesses already made, p the chance that g is the
  secret, and H the pool's remaining entropy:

      E[score | g] = p * (r + 1) + (1 - p) * (r + est(H - E[info](g)))

  est(h) estimates how many more guesses are needed with h bits left. It is a
  regression fit of observed (entropy left, guesses still needed) pairs from
  runs of the plain entropy policy; the logarithmic form fit best.
"""

from __future__ import annotations

from math import log

from infowordle.engine.entropy import GuessScore
from .base import BasePolicy, RankContext, register

EST_SLOPE = 3.870
EST_INTERCEPT = 3.679


def est_steps_left(entropy: float) -> float:
    return log(max(0.0, entropy) * EST_SLOPE + EST_INTERCEPT)


@register
class ExpectedScorePolicy(BasePolicy):
    id = "expected_score"
    name = "Expected Score"
    version = "1.0.0"

    def goodness(self, s: GuessScore, ctx: RankContext) -> float:
        r = float(ctx.round_index)
        p = s.probability
        left = est_steps_left(ctx.pool_entropy - s.entropy)
        # Lower expected score is better; negate so higher goodness wins.
        return -(p * (r + 1.0) + (1.0 - p) * (r + left))
