"""
Assessment API endpoints.
"""
from fastapi import APIRouter, Depends, Query, Response, status

from safe_scan.logger import logger
from safe_scan.services.assessment_service import AssessmentDraft, AssessmentService
from safe_scan.services.dashboard import StatusFilter, status_counts, filter_by_status
from safe_scan.services.scoring.engine import ScoringEngine
from safe_scan.services.scoring.recommendations import NO_ISSUES_MESSAGE
from safe_scan.services.scoring.status import SCORE_LEGEND
from safe_scan.api.deps import get_service
from safe_scan.schemas.assessment import (
    AssessmentRecord,
    AssessmentRequest,
    CheckResult,
    DashboardResponse,
    EvaluationRequest,
    EvaluationResult,
)

router = APIRouter(tags=["Assessments"])

_engine = ScoringEngine()


@router.post("/evaluate", response_model=EvaluationResult)
async def evaluate(request: EvaluationRequest):
    """Score an answer set without saving it."""
    evaluation = _engine.evaluate(request.answers)
    
    return EvaluationResult(
        total=evaluation.total,
        status=evaluation.status,
        status_description=evaluation.status_description,
        recommendations=evaluation.recommendations,
        fallback_message=None if evaluation.recommendations else NO_ISSUES_MESSAGE,
        checks=[CheckResult(**c.__dict__) for c in evaluation.checks],
        legend=SCORE_LEGEND,
        scoring_version=evaluation.scoring_version,
    )


@router.post("", response_model=AssessmentRecord, status_code=status.HTTP_201_CREATED)
def save_assessment(request: AssessmentRequest, service: AssessmentService = Depends(get_service)):
    """Archive a completed assessment."""
    draft = AssessmentDraft(
        school=request.school,
        room=request.room,
        assessor=request.assessor,
        photo_refs=list(request.photo_refs),
        notes=request.notes,
    )
    for key, value in request.answers.items():
        draft.set_answer(key, value)
    
    try:
        return service.save(draft)
    except OSError as e:
        logger.exception(f"Could not persist assessment: {e}")
        raise


@router.get("", response_model=DashboardResponse)
def list_assessments(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status"),
    service: AssessmentService = Depends(get_service),
):
    """Saved assessments, most recent first, optionally narrowed by status."""
    records = service.repository.load_all()
    
    return DashboardResponse(
        filter=status_filter.value,
        counts=status_counts(records),
        records=filter_by_status(records, status_filter),
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_assessments(service: AssessmentService = Depends(get_service)):
    """Remove every saved assessment."""
    service.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
