"""
Pytest configuration and shared fixtures.

All fixtures use the in-memory store so no test touches STORE_PATH.
"""

import pytest
from fastapi.testclient import TestClient

from safe_scan.api.deps import get_repository
from safe_scan.main import app
from safe_scan.services.assessment_service import AssessmentDraft, AssessmentService
from safe_scan.services.repository import InMemoryAssessmentRepository
from safe_scan.services.scoring.catalog import default_answers


@pytest.fixture
def answers():
    """Fresh default answer set."""
    return default_answers()


@pytest.fixture
def make_answers():
    """
    Factory fixture for answer sets with a few items changed.

    Usage:
        def test_example(make_answers):
            answers = make_answers(wallCracks="Major")
    """
    def _make(**overrides):
        values = default_answers()
        values.update(overrides)
        return values
    return _make


@pytest.fixture
def memory_repository():
    return InMemoryAssessmentRepository()


@pytest.fixture
def service(memory_repository):
    return AssessmentService(memory_repository)


@pytest.fixture
def draft():
    return AssessmentDraft(school="SMPN 3", room="Class 9A", assessor="OSIS")


@pytest.fixture
def client(memory_repository):
    """TestClient wired to the in-memory store."""
    app.dependency_overrides[get_repository] = lambda: memory_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
