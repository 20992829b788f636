from fastapi import APIRouter, Depends

from esg_scoring.config import get_methodology
from esg_scoring.methodology import ScoringMethodology
from esg_scoring.schemas.esg import ESGCalculationRequest, ESGScores, SectionCompletion
from esg_scoring.services.esg_calculator import compute_scores
from esg_scoring.services.sections import section_completion

router = APIRouter()


@router.post("/calculate", response_model=ESGScores)
def calculate_esg(
    payload: ESGCalculationRequest,
    methodology: ScoringMethodology = Depends(get_methodology),
):
    """
    Calculate pillar, composite and band scores for one disclosure set.
    """
    return compute_scores(
        payload.environmental,
        payload.social,
        payload.governance,
        methodology=methodology,
    )


@router.post("/sections", response_model=SectionCompletion)
def esg_sections(payload: ESGCalculationRequest):
    """
    Report which input sections are complete enough to generate a report.
    """
    return section_completion(payload.environmental, payload.social, payload.governance)


@router.get("/methodology")
def esg_methodology(methodology: ScoringMethodology = Depends(get_methodology)):
    """
    Benchmarks, weights and band thresholds currently in effect.
    """
    return methodology.to_dict()
