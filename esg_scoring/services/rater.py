from typing import Mapping, Tuple

from esg_scoring.methodology import ESGBand, Pillar, ScoringMethodology
from esg_scoring.services.aggregator import weighted_mean


def composite_score(
    pillar_scores: Mapping[Pillar, float],
    methodology: ScoringMethodology,
) -> float:
    return weighted_mean(pillar_scores, methodology.pillar_weights)


def band_for(score: float, methodology: ScoringMethodology) -> ESGBand:
    """
    Threshold lookup, top-down, first match wins.
    Each band's lower bound is inclusive: 80.0 is Leading, 79.999 Advancing.
    """
    for lower_bound, band in methodology.band_thresholds:
        if score >= lower_bound:
            return band
    # Scores are clamped to [0, 100] and the lowest bound is 0.
    return methodology.band_thresholds[-1][1]


def rate(
    pillar_scores: Mapping[Pillar, float],
    methodology: ScoringMethodology,
) -> Tuple[float, ESGBand]:
    overall = composite_score(pillar_scores, methodology)
    return overall, band_for(overall, methodology)
