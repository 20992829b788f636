import math
from typing import Dict, Mapping

from esg_scoring.methodology import Indicator, Pillar, ScoringMethodology
from esg_scoring.services.normalizer import MAX_SCORE, MIN_SCORE


def weighted_mean(scores: Mapping, weights: Mapping) -> float:
    """
    Weighted arithmetic mean of `scores` over the keys of `weights`.
    Weights are checked to sum to 1.0 when the methodology is built;
    dividing by the actual total keeps float drift out of the result.
    """
    total_weight = math.fsum(weights.values())
    value = math.fsum(scores[key] * weight for key, weight in weights.items()) / total_weight
    return max(MIN_SCORE, min(MAX_SCORE, value))


def aggregate_pillars(
    normalized: Mapping[Pillar, Mapping[Indicator, float]],
    methodology: ScoringMethodology,
) -> Dict[Pillar, float]:
    """One score per pillar. Every weighted indicator takes part in the mean."""
    return {
        pillar: weighted_mean(normalized[pillar], weights)
        for pillar, weights in methodology.indicator_weights.items()
    }
