"""
Prior smoothing.

Raw corpus counts span many orders of magnitude, so a handful of very common
words dominate the prior. The sigmoid maps each word's relative frequency
p = count / total onto (0, 1) with a sharp cut-off around `SIGMOID_MIDPOINT`:
words well above it become roughly equally likely, words well below it become
nearly (but never exactly) impossible.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

# Steepness of the cut-off.
SIGMOID_STEEPNESS = 30_000_000.0
# Relative frequency at which a word's smoothed weight is 0.5.
SIGMOID_MIDPOINT = 0.00000497


def sigmoid_weights(counts: Sequence[float], *, steepness: float = SIGMOID_STEEPNESS,
                    midpoint: float = SIGMOID_MIDPOINT) -> np.ndarray:
    counts = np.asarray(counts, dtype=np.float64)
    total = counts.sum()
    if total <= 0:
        raise ValueError("counts must have a positive total")
    p = counts / total
    return 1.0 / (1.0 + np.exp(-steepness * (p - midpoint)))
