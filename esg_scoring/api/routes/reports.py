import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from esg_scoring.config import get_methodology
from esg_scoring.methodology import ScoringMethodology
from esg_scoring.schemas.esg import ESGReportRequest, ESGReportResponse
from esg_scoring.services.esg_calculator import compute_scores
from esg_scoring.services.sections import section_completion

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/report", response_model=ESGReportResponse)
def create_esg_report(
    payload: ESGReportRequest,
    methodology: ScoringMethodology = Depends(get_methodology),
):
    """
    Score a complete submission and wrap it with its report context.
    Refuses submissions whose sections are not all filled in.
    """
    sections = section_completion(payload.environmental, payload.social, payload.governance)
    if not sections.all_complete:
        logger.info(
            "Report refused for %s: incomplete sections %s",
            payload.context.organization_name,
            sections.model_dump(),
        )
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Please complete all ESG sections before generating the report.",
                "sections": sections.model_dump(by_alias=True),
            },
        )

    scores = compute_scores(
        payload.environmental,
        payload.social,
        payload.governance,
        methodology=methodology,
    )

    return ESGReportResponse(
        report_id=str(uuid.uuid4()),
        context=payload.context,
        scores=scores,
        sections=sections,
        generated_at=datetime.now(timezone.utc),
    )
