"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends

from safe_scan.api.deps import get_repository
from safe_scan.services.repository import AssessmentRepository, JsonFileAssessmentRepository

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
def detailed_health(repository: AssessmentRepository = Depends(get_repository)):
    """Detailed health check with store status."""
    store = {
        "backend": type(repository).__name__,
        "records": len(repository.load_all()),
    }
    if isinstance(repository, JsonFileAssessmentRepository):
        store["path"] = str(repository.path)
    
    return {
        "status": "ok",
        "store": store
    }
