import logging
from typing import Optional

from esg_scoring.methodology import DEFAULT_METHODOLOGY, Pillar, ScoringMethodology
from esg_scoring.schemas.esg import (
    EnvironmentalInputs,
    ESGScores,
    GovernanceInputs,
    SocialInputs,
)
from esg_scoring.services.aggregator import aggregate_pillars
from esg_scoring.services.normalizer import normalize_inputs
from esg_scoring.services.rater import rate
from esg_scoring.services.validator import validate_inputs

logger = logging.getLogger(__name__)


def compute_scores(
    environmental: EnvironmentalInputs,
    social: SocialInputs,
    governance: GovernanceInputs,
    methodology: Optional[ScoringMethodology] = None,
) -> ESGScores:
    """
    Validate -> normalize -> aggregate per pillar -> composite + band.

    Pure function of its arguments: no I/O and no state kept between calls.
    Raises InvalidInputError before any scoring if an input is out of domain.
    """
    methodology = methodology or DEFAULT_METHODOLOGY

    validated = validate_inputs(environmental, social, governance)
    normalized = normalize_inputs(validated, methodology)
    pillar_scores = aggregate_pillars(normalized, methodology)
    overall, band = rate(pillar_scores, methodology)

    scores = ESGScores(
        environmental_score=pillar_scores[Pillar.ENVIRONMENTAL],
        social_score=pillar_scores[Pillar.SOCIAL],
        governance_score=pillar_scores[Pillar.GOVERNANCE],
        composite_score=overall,
        band=band,
        indicator_scores={
            pillar.value: {indicator.value: score for indicator, score in indicators.items()}
            for pillar, indicators in normalized.items()
        },
    )
    logger.debug(
        "ESG scores E=%.2f S=%.2f G=%.2f composite=%.2f band=%s",
        scores.environmental_score,
        scores.social_score,
        scores.governance_score,
        scores.composite_score,
        band.value,
    )
    return scores
