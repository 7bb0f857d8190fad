"""
Unit tests for the assessment repositories.

Tests cover:
- Most-recent-first ordering
- Clearing
- Fail-soft loading of missing or corrupted state
- Self-healing on the next append
- Wire layout of the persisted JSON
"""

import json
from datetime import datetime, timezone

import pytest

from safe_scan.schemas.assessment import AssessmentRecord
from safe_scan.services.repository import (
    InMemoryAssessmentRepository,
    JsonFileAssessmentRepository,
)
from safe_scan.services.scoring.catalog import default_answers
from safe_scan.services.scoring.models import Status


def make_record(record_id: str, total: int = 0, status: Status = Status.GREEN, **kwargs) -> AssessmentRecord:
    return AssessmentRecord(
        id=record_id,
        school=kwargs.get("school", "SMPN 3"),
        room=kwargs.get("room", "Lab"),
        assessor="OSIS",
        answers=default_answers(),
        photo_refs=kwargs.get("photo_refs", ()),
        notes="",
        total=total,
        status=status,
        created_at=datetime(2026, 1, 5, 8, 30, tzinfo=timezone.utc),
    )


@pytest.fixture(params=["memory", "file"])
def repository(request, tmp_path):
    """Every repository implementation must behave the same."""
    if request.param == "memory":
        return InMemoryAssessmentRepository()
    return JsonFileAssessmentRepository(tmp_path / "store" / "assessments.json")


class TestRepositoryContract:
    """Behaviour shared by all implementations."""

    def test_empty_store_loads_empty_list(self, repository):
        assert repository.load_all() == []

    def test_append_is_most_recent_first(self, repository):
        r1, r2 = make_record("r1"), make_record("r2")
        repository.append(r1)
        repository.append(r2)

        assert [r.id for r in repository.load_all()] == ["r2", "r1"]
        assert repository.load_all() == [r2, r1]

    def test_clear_removes_everything(self, repository):
        repository.append(make_record("r1"))
        repository.clear()

        assert repository.load_all() == []

    def test_clear_on_empty_store_is_harmless(self, repository):
        repository.clear()
        assert repository.load_all() == []

    def test_photo_refs_stored_verbatim(self, repository):
        refs = ("blob:http://localhost/abc", "photos/room-9a-1.jpg")
        repository.append(make_record("r1", photo_refs=refs))

        assert repository.load_all()[0].photo_refs == refs

    def test_total_and_status_are_kept_as_saved(self, repository):
        # Stored values are never recomputed from answers
        repository.append(make_record("r1", total=9, status=Status.RED))

        loaded = repository.load_all()[0]
        assert loaded.total == 9
        assert loaded.status is Status.RED


class TestFailSoftLoading:
    """Corrupted state degrades to an empty list."""

    @pytest.mark.parametrize(
        "raw",
        [
            b"not json at all",
            b'{"id": "r1"}',
            b'"just a string"',
            b'[{"id": "r1"}]',
            b'[{"id": "r1", "answers": {}, "photoRefs": [], "total": -1, '
            b'"status": "GREEN", "createdAt": "2026-01-05T08:30:00Z"}]',
            b'[{"id": "r1", "answers": {}, "photoRefs": [], "total": 1, '
            b'"status": "PURPLE", "createdAt": "2026-01-05T08:30:00Z"}]',
            b"\xff\xfe\x00",
        ],
    )
    def test_invalid_state_loads_empty(self, raw):
        repository = InMemoryAssessmentRepository(initial=raw)
        assert repository.load_all() == []

    def test_append_overwrites_corrupted_state(self):
        repository = InMemoryAssessmentRepository(initial=b"{broken")
        repository.append(make_record("r1"))

        assert [r.id for r in repository.load_all()] == ["r1"]

    def test_corrupted_file_heals_on_append(self, tmp_path):
        path = tmp_path / "assessments.json"
        path.write_text("[1, 2, 3")
        repository = JsonFileAssessmentRepository(path)

        assert repository.load_all() == []
        repository.append(make_record("r1"))
        assert [r.id for r in repository.load_all()] == ["r1"]


class TestJsonFileRepository:
    """File-specific behaviour."""

    def test_wire_layout(self, tmp_path):
        path = tmp_path / "assessments.json"
        repository = JsonFileAssessmentRepository(path)
        repository.append(make_record("r1", total=4, status=Status.YELLOW, photo_refs=("p1",)))

        data = json.loads(path.read_text())
        assert isinstance(data, list)
        assert set(data[0]) == {
            "id", "school", "room", "assessor", "answers",
            "photoRefs", "notes", "total", "status", "createdAt",
        }
        assert data[0]["status"] == "YELLOW"
        assert data[0]["photoRefs"] == ["p1"]
        assert data[0]["createdAt"].startswith("2026-01-05T08:30:00")

    def test_reads_state_written_by_another_instance(self, tmp_path):
        path = tmp_path / "assessments.json"
        JsonFileAssessmentRepository(path).append(make_record("r1"))

        assert [r.id for r in JsonFileAssessmentRepository(path).load_all()] == ["r1"]

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / "assessments.json"
        repository = JsonFileAssessmentRepository(path)
        repository.append(make_record("r1"))
        repository.clear()

        assert not path.exists()

    def test_no_temp_files_left_behind(self, tmp_path):
        repository = JsonFileAssessmentRepository(tmp_path / "assessments.json")
        repository.append(make_record("r1"))
        repository.append(make_record("r2"))

        assert [p.name for p in tmp_path.iterdir()] == ["assessments.json"]
