"""
Assessment Service - Main orchestrator for room assessments.

Coordinates the in-progress draft, scoring, and the record store.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from safe_scan.logger import logger
from safe_scan.services.dashboard import StatusFilter, filter_by_status
from safe_scan.services.repository import AssessmentRepository
from safe_scan.services.scoring.catalog import CHECK_ITEMS, default_answers
from safe_scan.services.scoring.engine import Evaluation, ScoringEngine
from safe_scan.schemas.assessment import AssessmentRecord


@dataclass
class AssessmentDraft:
    """Assessment being filled in. Freely mutable until saved."""
    school: str = ""
    room: str = ""
    assessor: str = ""
    answers: dict[str, str] = field(default_factory=default_answers)
    photo_refs: List[str] = field(default_factory=list)
    notes: str = ""
    
    def set_answer(self, key: str, value: str) -> None:
        self.answers[key] = value
    
    def add_photos(self, refs: Iterable[str]) -> None:
        self.photo_refs.extend(refs)
    
    def reset(self) -> None:
        """Back to an empty form."""
        self.school = ""
        self.assessor = ""
        self.reset_for_next_room()
    
    def reset_for_next_room(self) -> None:
        """Keep school and assessor, clear everything about the room."""
        self.room = ""
        self.answers = default_answers()
        self.photo_refs = []
        self.notes = ""


def snapshot_answers(answers) -> dict[str, str]:
    """Complete catalog-only copy of an answer set.
    
    Missing keys get their default; keys outside the catalog are dropped.
    Out-of-domain values are kept verbatim and score 0.
    """
    snapshot = default_answers()
    for item in CHECK_ITEMS:
        value = answers.get(item.key)
        if value is not None:
            snapshot[item.key] = value
    return snapshot


class AssessmentService:
    """Evaluates drafts and archives them as immutable records."""
    
    def __init__(self, repository: AssessmentRepository, engine: Optional[ScoringEngine] = None):
        self.repository = repository
        self.engine = engine or ScoringEngine()
    
    def evaluate(self, draft: AssessmentDraft) -> Evaluation:
        return self.engine.evaluate(draft.answers)
    
    def save(self, draft: AssessmentDraft) -> AssessmentRecord:
        """
        Freeze a draft into a record and append it to the store.
        
        Args:
            draft: The filled-in assessment
            
        Returns:
            The stored record, with total and status fixed at this moment
        """
        answers = snapshot_answers(draft.answers)
        evaluation = self.engine.evaluate(answers)
        
        record = AssessmentRecord(
            id=str(uuid.uuid4()),
            school=draft.school,
            room=draft.room,
            assessor=draft.assessor,
            answers=answers,
            photo_refs=tuple(draft.photo_refs),
            notes=draft.notes,
            total=evaluation.total,
            status=evaluation.status,
            created_at=datetime.now(timezone.utc),
        )
        
        self.repository.append(record)
        logger.info(f"Archived assessment for {record.school or '?'} / {record.room or '?'}")
        return record
    
    def list_records(self, status_filter: StatusFilter | str = StatusFilter.ALL) -> List[AssessmentRecord]:
        return filter_by_status(self.repository.load_all(), status_filter)
    
    def clear(self) -> None:
        self.repository.clear()
