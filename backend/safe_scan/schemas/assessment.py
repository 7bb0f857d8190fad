"""
Pydantic schemas for assessments.

Python attributes are snake_case; the JSON wire and storage names are camelCase.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from safe_scan.services.scoring.models import Status


def _string_answers(answers: dict[str, Any]) -> dict[str, str]:
    """Drop null and non-string answers; they read as the item default."""
    return {key: value for key, value in answers.items() if isinstance(value, str)}


class AssessmentRecord(BaseModel):
    """Saved assessment. Immutable once created."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    id: str
    school: str = ""
    room: str = ""
    assessor: str = ""
    answers: dict[str, str]
    photo_refs: tuple[str, ...] = Field(default=(), alias="photoRefs")
    notes: str = ""
    
    # Frozen at creation; never recomputed
    total: int = Field(..., ge=0)
    status: Status
    
    created_at: datetime = Field(..., alias="createdAt")
    
    @field_validator("answers", mode="after")
    @classmethod
    def freeze_answers(cls, value: dict[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))
    
    @field_serializer("answers")
    def serialize_answers(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


class AssessmentRequest(BaseModel):
    """Request to save an assessment."""
    school: str = Field("", description="School name")
    room: str = Field("", description="Room or area")
    assessor: str = Field("", description="Person filling the checklist")
    answers: dict[str, Any] = Field(default_factory=dict, description="Checklist key → selected answer")
    photo_refs: list[str] = Field(default_factory=list, alias="photoRefs", description="Opaque photo references")
    notes: str = ""
    
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "school": "SMPN 3 Pangkalan Kerinci",
                "room": "Class 9A",
                "assessor": "OSIS",
                "answers": {"wallCracks": "Major", "ventilation": "Inadequate"},
                "photoRefs": [],
                "notes": "Diagonal crack above the door"
            }
        },
    )
    
    @field_validator("answers", mode="after")
    @classmethod
    def drop_invalid_answers(cls, value: dict[str, Any]) -> dict[str, str]:
        return _string_answers(value)


class EvaluationRequest(BaseModel):
    """Answer set to evaluate without saving."""
    answers: dict[str, Any] = Field(default_factory=dict)
    
    @field_validator("answers", mode="after")
    @classmethod
    def drop_invalid_answers(cls, value: dict[str, Any]) -> dict[str, str]:
        return _string_answers(value)


class CheckResult(BaseModel):
    """Scored checklist item."""
    key: str
    label: str
    value: str
    points_awarded: int
    points_possible: int


class EvaluationResult(BaseModel):
    """Live evaluation response."""
    total: int = Field(..., ge=0)
    status: Status
    status_description: str
    recommendations: list[str] = []
    fallback_message: Optional[str] = None
    checks: list[CheckResult] = []
    legend: str
    scoring_version: str


class CheckItemSchema(BaseModel):
    """Checklist item with its answer options."""
    key: str
    label: str
    help: Optional[str] = None
    domain: str
    options: list[str]
    default: str


class DashboardResponse(BaseModel):
    """Filtered list of saved assessments."""
    filter: str
    counts: dict[str, int]
    records: list[AssessmentRecord]
