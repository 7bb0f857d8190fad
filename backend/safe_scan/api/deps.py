"""
Shared API dependencies.
"""
from functools import lru_cache

from fastapi import Depends

from safe_scan.config import settings
from safe_scan.services.assessment_service import AssessmentService
from safe_scan.services.repository import AssessmentRepository, JsonFileAssessmentRepository


@lru_cache
def get_repository() -> AssessmentRepository:
    """Process-wide file store at STORE_PATH."""
    return JsonFileAssessmentRepository(settings.STORE_PATH)


def get_service(repository: AssessmentRepository = Depends(get_repository)) -> AssessmentService:
    return AssessmentService(repository)
